"""Schema of the look JSON that text models are asked to produce."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import MalformedResponseError
from ..models import ColorPalette, ColorSpec, LookRequest, MakeupLook, MakeupStep
from ..models.look import HEX_COLOR
from ..utils.json_extractor import parse_embedded_json


class _Strict(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)


class AIColor(_Strict):
    hex_color: str = Field(alias="hexColor")
    name: str
    detail: str
    
    @field_validator("hex_color", mode="before")
    @classmethod
    def _check_hex(cls, value):
        # Models sometimes add the '#' despite being told not to
        if isinstance(value, str):
            value = value.strip().lstrip("#")
            if not HEX_COLOR.match(value):
                raise ValueError(f"not a 6 digit hex color: {value!r}")
        return value


class AIColorPalette(_Strict):
    eyeshadow: AIColor
    eyeliner: AIColor
    lips: AIColor
    blush: AIColor
    brows: AIColor


class AIStep(_Strict):
    area: str
    instruction: str
    tip: str


class AILookResponse(_Strict):
    """The embedded payload: name, vibe, palette and steps only."""
    
    look_name: str = Field(alias="lookName")
    vibe: str
    color_palette: AIColorPalette = Field(alias="colorPalette")
    steps: list[AIStep] = Field(min_length=1)
    
    def to_makeup_look(self, request: LookRequest) -> MakeupLook:
        """Convert to a domain look; occasion and mood come from the request."""
        palette = ColorPalette(**{
            slot: ColorSpec(hex_color=color.hex_color, name=color.name, detail=color.detail)
            for slot, color in self.color_palette
        })
        return MakeupLook(
            look_name=self.look_name,
            vibe=self.vibe,
            occasion=request.occasion,
            mood=request.mood,
            color_palette=palette,
            steps=tuple(
                MakeupStep(area=step.area, instruction=step.instruction, tip=step.tip)
                for step in self.steps
            ),
        )


def parse_look_response(text: str, request: LookRequest) -> MakeupLook:
    """Two-stage parse of model output into a look.
    
    Stage one finds the outermost brace span in the free text, stage two
    validates it strictly against :class:`AILookResponse`.
    
    Raises:
        MalformedResponseError: on any missing field or wrong type.
    """
    data = parse_embedded_json(text)
    try:
        ai_look = AILookResponse.model_validate(data)
        return ai_look.to_makeup_look(request)
    except ValidationError as e:
        raise MalformedResponseError(
            f"look payload does not match schema ({e.error_count()} errors): {e.errors()[0]['msg']}"
        ) from e
