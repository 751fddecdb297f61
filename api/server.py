"""FastAPI server for GlowGuide.

Local HTTP surface over the look service:
- profile and onboarding
- look generation (free tier gated) and reference images
- saved looks, favorites and history
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from glowguide import AppState, PaywallTrigger, __version__
from glowguide.config import GlowGuideConfig
from glowguide.errors import GlowGuideError
from glowguide.models import (
    FaceShape,
    MakeupLook,
    Mood,
    Occasion,
    SkinTone,
    StylePreference,
    UserProfile,
)
from glowguide.pipeline import LookGenerator
from glowguide.services import EntitlementGate, FileStore, LocalStore, StaticSubscriptionOracle
from glowguide.utils import setup_logger


app = FastAPI(
    title="GlowGuide API",
    description="Makeup look recommendations by occasion and mood",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class OnboardingRequest(BaseModel):
    skin_tone: SkinTone
    style_preference: StylePreference
    face_shape: FaceShape | None = None


class LookGenerationRequest(BaseModel):
    occasion: Occasion
    mood: Mood


class LookImageRequest(BaseModel):
    look_id: str


class PaywallInfo(BaseModel):
    trigger: str
    title: str
    message: str


class LookResponse(BaseModel):
    """Envelope for any single-look answer."""
    success: bool
    look: MakeupLook | None = None
    error: str | None = None
    paywall: PaywallInfo | None = None


class EntitlementsResponse(BaseModel):
    is_pro: bool
    looks_generated: int
    saved_looks_count: int
    remaining_free_looks: int
    remaining_saved_slots: int
    yearly_savings_percent: int


# Initialize state (will be done on first request)
_state: AppState | None = None


def get_app_state() -> AppState:
    """Get or create the application state."""
    global _state
    if _state is None:
        config = GlowGuideConfig()  # Loads from .env automatically via pydantic-settings
        setup_logger("glowguide", config.log_level)
        store = LocalStore(FileStore(config.storage_dir))
        gate = EntitlementGate(store, StaticSubscriptionOracle(), config.limits).open()
        _state = AppState(config, store, LookGenerator(config), gate)
    return _state


def _paywall(state: AppState) -> PaywallInfo:
    trigger = state.paywall_trigger
    limit = state.config.limits.free_look_limit
    if trigger == PaywallTrigger.SAVED_LIMIT_REACHED:
        limit = state.config.limits.free_saved_look_limit
    return PaywallInfo(trigger=trigger.value, title=trigger.title, message=trigger.message(limit))


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "GlowGuide API", "version": __version__}


@app.get("/health")
async def health():
    """Which providers are configured."""
    state = get_app_state()
    return {
        "status": "ok",
        "ai_generation": state.config.use_ai_generation,
        "text_provider": state.config.text_provider,
        "image_provider": state.config.image_provider,
    }


@app.get("/api/profile", response_model=UserProfile)
async def get_profile():
    return get_app_state().user_profile


@app.put("/api/profile", response_model=UserProfile)
async def put_profile(profile: UserProfile):
    state = get_app_state()
    state.update_profile(profile)
    return state.user_profile


@app.post("/api/onboarding", response_model=UserProfile)
async def complete_onboarding(request: OnboardingRequest):
    state = get_app_state()
    state.complete_onboarding(request.skin_tone, request.style_preference, request.face_shape)
    return state.user_profile


@app.post("/api/looks", response_model=LookResponse)
async def generate_look(request: LookGenerationRequest):
    """Generate a look for the chosen occasion and mood.
    
    Generation itself never fails; the only unsuccessful answer is the
    free tier limit, which carries paywall details.
    """
    state = get_app_state()
    look = await state.generate_look(request.occasion, request.mood)
    if look is None:
        return LookResponse(success=False, error="Free look limit reached", paywall=_paywall(state))
    state.add_to_history(look)
    return LookResponse(success=True, look=look)


@app.post("/api/looks/image", response_model=LookResponse)
async def generate_look_image(request: LookImageRequest):
    """Generate a reference image for a known look."""
    state = get_app_state()
    look = state.find_look(request.look_id)
    if look is None:
        raise HTTPException(status_code=404, detail="Look not found")
    try:
        look = await state.generate_image(look)
    except GlowGuideError as e:
        return LookResponse(success=False, error=str(e))
    return LookResponse(success=True, look=look)


@app.get("/api/saved", response_model=list[MakeupLook])
async def list_saved():
    return get_app_state().saved_looks


@app.post("/api/saved", response_model=LookResponse)
async def save_look(look: MakeupLook):
    state = get_app_state()
    if not state.save_look(look):
        return LookResponse(success=False, error="Save limit reached", paywall=_paywall(state))
    return LookResponse(success=True, look=look)


@app.delete("/api/saved/{look_id}")
async def remove_saved(look_id: str):
    if not get_app_state().remove_look(look_id):
        raise HTTPException(status_code=404, detail="Look not saved")
    return {"success": True}


@app.post("/api/favorites/{look_id}")
async def toggle_favorite(look_id: str):
    return {"look_id": look_id, "favorite": get_app_state().toggle_favorite(look_id)}


@app.get("/api/history", response_model=list[MakeupLook])
async def list_history():
    return get_app_state().recently_viewed_looks


@app.delete("/api/history")
async def clear_history():
    get_app_state().clear_history()
    return {"success": True}


@app.get("/api/entitlements", response_model=EntitlementsResponse)
async def entitlements():
    gate = get_app_state().entitlements
    return EntitlementsResponse(
        is_pro=gate.is_pro,
        looks_generated=gate.looks_generated,
        saved_looks_count=gate.saved_looks_count,
        remaining_free_looks=gate.remaining_free_looks,
        remaining_saved_slots=gate.remaining_saved_slots,
        yearly_savings_percent=gate.yearly_savings_percent,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
