"""Application state: profile, saved looks, favorites, history and gating."""

import itertools
import logging
from enum import Enum

from .config import GlowGuideConfig
from .models import FaceShape, LookRequest, MakeupLook, Mood, Occasion, SkinTone, StylePreference, UserProfile
from .pipeline import LookGenerator
from .services import EntitlementGate, LocalStore


logger = logging.getLogger(__name__)


class PaywallTrigger(str, Enum):
    GENERAL = "general"
    FREE_LIMIT_REACHED = "free_limit_reached"
    SAVED_LIMIT_REACHED = "saved_limit_reached"
    PREMIUM_FEATURE = "premium_feature"
    
    @property
    def title(self) -> str:
        return {
            PaywallTrigger.GENERAL: "Unlock GlowGuide Pro",
            PaywallTrigger.FREE_LIMIT_REACHED: "Free Limit Reached",
            PaywallTrigger.SAVED_LIMIT_REACHED: "Save Limit Reached",
            PaywallTrigger.PREMIUM_FEATURE: "Premium Feature",
        }[self]
    
    def message(self, limit: int = 3) -> str:
        return {
            PaywallTrigger.GENERAL: "Get unlimited AI-powered beauty recommendations",
            PaywallTrigger.FREE_LIMIT_REACHED: f"You've used all {limit} free looks. Upgrade to Pro for unlimited access!",
            PaywallTrigger.SAVED_LIMIT_REACHED: f"You've saved {limit} looks. Upgrade to Pro for unlimited favorites!",
            PaywallTrigger.PREMIUM_FEATURE: "This feature is available for Pro members",
        }[self]


class AppState:
    """Single-user state, mutated from one context only.
    
    Every mutation updates memory first, then rewrites the affected record.
    Records are not written atomically together; instead the saved-look
    counter and the profile's saved ids are repaired from the saved-looks
    collection every time state is loaded.
    
    Concurrent generations: the last request started wins. An earlier request
    that finishes later is still counted and returned to its caller, but it
    does not replace ``current_look``. Requests still in flight count against
    the free limit when a new one is checked, so overlapping calls cannot
    exceed it.
    """
    
    def __init__(
        self,
        config: GlowGuideConfig,
        store: LocalStore,
        generator: LookGenerator,
        entitlements: EntitlementGate,
    ):
        self.config = config
        self.store = store
        self.generator = generator
        self.entitlements = entitlements
        if not entitlements.is_open:
            entitlements.open()
        
        self.user_profile = store.load_profile() or UserProfile()
        self.saved_looks: list[MakeupLook] = store.load_saved_looks()
        self.favorite_look_ids: set[str] = store.load_favorites()
        self.recently_viewed_looks: list[MakeupLook] = store.load_history()
        
        self.current_look: MakeupLook | None = None
        self.is_loading = False
        self.show_paywall = False
        self.paywall_trigger = PaywallTrigger.GENERAL
        
        self._tickets = itertools.count(1)
        self._latest_ticket = 0
        self._in_flight = 0
        
        self._repair_saved_state()
        self._repair_history()
    
    # Consistency
    
    def _repair_saved_state(self):
        """Make the profile ids and the save counter agree with the saved looks."""
        saved_ids = [look.id for look in self.saved_looks]
        known = set(saved_ids)
        repaired = [look_id for look_id in dict.fromkeys(self.user_profile.saved_look_ids) if look_id in known]
        repaired += [look_id for look_id in saved_ids if look_id not in repaired]
        
        if repaired != self.user_profile.saved_look_ids:
            logger.info(
                "Repairing profile saved ids (%d -> %d)",
                len(self.user_profile.saved_look_ids),
                len(repaired),
            )
            self.user_profile = self.user_profile.model_copy(update={"saved_look_ids": repaired})
            self._save_profile()
        
        self.entitlements.sync_saved_count(len(self.saved_looks))
    
    def _repair_history(self):
        """Drop duplicate ids from the loaded history and cap it at ``history_limit``."""
        seen = set()
        history = []
        for look in self.recently_viewed_looks:
            if look.id not in seen:
                seen.add(look.id)
                history.append(look)
        history = history[:self.config.history_limit]
        if [look.id for look in history] != [look.id for look in self.recently_viewed_looks]:
            logger.info("Repairing history (%d -> %d)", len(self.recently_viewed_looks), len(history))
            self.recently_viewed_looks = history
            self.store.save_history(history)
    
    # Profile
    
    def update_profile(self, profile: UserProfile):
        """Replace the profile. Saved ids are owned by the saved-looks collection and kept as they are."""
        self.user_profile = profile.model_copy(update={"saved_look_ids": self.user_profile.saved_look_ids})
        self._save_profile()
    
    def complete_onboarding(
        self,
        skin_tone: SkinTone,
        style_preference: StylePreference,
        face_shape: FaceShape | None = None,
    ):
        update = {
            "skin_tone": skin_tone,
            "style_preference": style_preference,
            "has_completed_onboarding": True,
        }
        if face_shape is not None:
            update["face_shape"] = face_shape
        self.user_profile = self.user_profile.model_copy(update=update)
        self._save_profile()
    
    def reset_onboarding(self):
        self.user_profile = self.user_profile.model_copy(update={"has_completed_onboarding": False})
        self._save_profile()
    
    def _save_profile(self):
        self.store.save_profile(self.user_profile)
    
    def build_request(self, occasion: Occasion, mood: Mood) -> LookRequest:
        return LookRequest.from_profile(self.user_profile, occasion, mood)
    
    # Generation
    
    async def generate_look(self, occasion: Occasion, mood: Mood) -> MakeupLook | None:
        """Generate a look if the free tier allows it.
        
        Returns:
            The look, or None when the generation limit is reached (the
            paywall is raised instead).
        """
        if not self.can_generate_look_or_show_paywall():
            return None
        
        ticket = next(self._tickets)
        self._latest_ticket = ticket
        self._in_flight += 1
        self.is_loading = True
        try:
            look = await self.generator.generate_look(self.build_request(occasion, mood))
        finally:
            self._in_flight -= 1
            self.is_loading = self._in_flight > 0
        
        self.entitlements.record_generation()
        if ticket == self._latest_ticket:
            self.current_look = look
        else:
            logger.info("Discarding superseded look %s as current", look.look_name)
        return look
    
    async def generate_image(self, look: MakeupLook) -> MakeupLook:
        """Attach a generated reference image to ``look``. Errors propagate."""
        image_url = await self.generator.generate_look_image(look)
        with_image = look.with_image(image_url)
        if self.current_look is not None and self.current_look.id == look.id:
            self.current_look = with_image
        return with_image
    
    def can_generate_look_or_show_paywall(self) -> bool:
        if self.entitlements.can_generate(pending=self._in_flight):
            return True
        self.show_paywall_with(PaywallTrigger.FREE_LIMIT_REACHED)
        return False
    
    def can_save_look_or_show_paywall(self) -> bool:
        if self.entitlements.can_save():
            return True
        self.show_paywall_with(PaywallTrigger.SAVED_LIMIT_REACHED)
        return False
    
    def show_paywall_with(self, trigger: PaywallTrigger):
        self.paywall_trigger = trigger
        self.show_paywall = True
    
    def dismiss_paywall(self):
        self.show_paywall = False
    
    @property
    def is_pro(self) -> bool:
        return self.entitlements.is_pro
    
    # Saved looks
    
    def save_look(self, look: MakeupLook) -> bool:
        """Save ``look`` at the front of the collection.
        
        Returns False when the save limit blocks it. Saving an already saved
        look is a no-op that returns True.
        """
        if self.is_look_saved(look):
            return True
        if not self.can_save_look_or_show_paywall():
            return False
        
        self.saved_looks.insert(0, look)
        self.user_profile = self.user_profile.model_copy(
            update={"saved_look_ids": [*self.user_profile.saved_look_ids, look.id]}
        )
        self.store.save_saved_looks(self.saved_looks)
        self._save_profile()
        self.entitlements.record_save()
        return True
    
    def remove_look(self, look_id: str) -> bool:
        if not any(saved.id == look_id for saved in self.saved_looks):
            return False
        self.saved_looks = [saved for saved in self.saved_looks if saved.id != look_id]
        self.user_profile = self.user_profile.model_copy(
            update={"saved_look_ids": [i for i in self.user_profile.saved_look_ids if i != look_id]}
        )
        self.store.save_saved_looks(self.saved_looks)
        self._save_profile()
        self.entitlements.record_removal()
        return True
    
    def is_look_saved(self, look: MakeupLook) -> bool:
        return any(saved.id == look.id for saved in self.saved_looks)
    
    def find_look(self, look_id: str) -> MakeupLook | None:
        """Find a look by id among current, saved and recently viewed looks."""
        candidates = [self.current_look, *self.saved_looks, *self.recently_viewed_looks]
        return next((look for look in candidates if look is not None and look.id == look_id), None)
    
    # Favorites
    
    def toggle_favorite(self, look_id: str) -> bool:
        """Flip the favorite flag; returns the new state."""
        if look_id in self.favorite_look_ids:
            self.favorite_look_ids.discard(look_id)
        else:
            self.favorite_look_ids.add(look_id)
        self.store.save_favorites(self.favorite_look_ids)
        return look_id in self.favorite_look_ids
    
    def is_look_favorite(self, look_id: str) -> bool:
        return look_id in self.favorite_look_ids
    
    # History
    
    def add_to_history(self, look: MakeupLook):
        """Move ``look`` to the front of history, keeping at most ``history_limit``."""
        history = [viewed for viewed in self.recently_viewed_looks if viewed.id != look.id]
        history.insert(0, look)
        self.recently_viewed_looks = history[:self.config.history_limit]
        self.store.save_history(self.recently_viewed_looks)
    
    def remove_from_history(self, look_id: str):
        self.recently_viewed_looks = [viewed for viewed in self.recently_viewed_looks if viewed.id != look_id]
        self.store.save_history(self.recently_viewed_looks)
    
    def clear_history(self):
        self.recently_viewed_looks = []
        self.store.save_history(self.recently_viewed_looks)
