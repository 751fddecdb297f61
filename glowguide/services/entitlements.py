"""Free tier usage gating and the subscription oracle seam."""

import logging
from typing import Protocol

from ..config import UsageLimits
from ..errors import StoreError
from ..models import DEFAULT_PRODUCTS, Product, SubscriptionStatus
from ..models.subscription import LIFETIME_PRODUCT_ID, MONTHLY_PRODUCT_ID, YEARLY_PRODUCT_ID
from .storage import LOOKS_GENERATED_KEY, SAVED_LOOKS_COUNT_KEY, LocalStore


logger = logging.getLogger(__name__)


class SubscriptionOracle(Protocol):
    """Opaque source of truth for Pro status and the product catalog."""
    
    @property
    def is_pro(self) -> bool: ...
    
    @property
    def products(self) -> list[Product]: ...


_STATUS_BY_PRODUCT = {
    MONTHLY_PRODUCT_ID: SubscriptionStatus.MONTHLY,
    YEARLY_PRODUCT_ID: SubscriptionStatus.YEARLY,
    LIFETIME_PRODUCT_ID: SubscriptionStatus.LIFETIME,
}


class StaticSubscriptionOracle:
    """In-process oracle. Receipt verification happens elsewhere; this just
    records which Pro products are currently active."""
    
    def __init__(
        self,
        status: SubscriptionStatus = SubscriptionStatus.NONE,
        products: list[Product] | None = None,
    ):
        self.status = status
        self._products = sorted(products if products is not None else DEFAULT_PRODUCTS, key=lambda p: p.price)
        self.purchased_product_ids: set[str] = set()
    
    @property
    def is_pro(self) -> bool:
        return self.status != SubscriptionStatus.NONE
    
    @property
    def products(self) -> list[Product]:
        return self._products
    
    def product(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)
    
    def update_from_entitlements(self, product_ids: set[str]) -> SubscriptionStatus:
        """Derive the status from the currently active product ids.

        With several active products the longest entitlement wins.
        """
        status = SubscriptionStatus.NONE
        for product_id in (MONTHLY_PRODUCT_ID, YEARLY_PRODUCT_ID, LIFETIME_PRODUCT_ID):
            if product_id in product_ids:
                status = _STATUS_BY_PRODUCT[product_id]
                self.purchased_product_ids.add(product_id)
        self.status = status
        return status
    
    def purchase(self, product_id: str) -> SubscriptionStatus:
        if self.product(product_id) is None:
            raise StoreError(StoreError.PRODUCT_NOT_FOUND)
        return self.update_from_entitlements(self.purchased_product_ids | {product_id})
    
    def restore(self) -> SubscriptionStatus:
        return self.update_from_entitlements(set(self.purchased_product_ids))


class EntitlementGate:
    """Two lifetime counters checked against free tier limits.
    
    Pro users bypass both gates. The gate is an explicit service: create it,
    ``open()`` it to load the counters, ``close()`` it when done. Counters are
    written back to the store after every change.
    """
    
    def __init__(
        self,
        store: LocalStore,
        oracle: SubscriptionOracle,
        limits: UsageLimits | None = None,
    ):
        self.store = store
        self.oracle = oracle
        self.limits = limits or UsageLimits()
        self.looks_generated = 0
        self.saved_looks_count = 0
        self._open = False
    
    def open(self) -> "EntitlementGate":
        self.looks_generated = self.store.load_counter(LOOKS_GENERATED_KEY)
        self.saved_looks_count = self.store.load_counter(SAVED_LOOKS_COUNT_KEY)
        self._open = True
        logger.debug("Entitlements loaded: generated=%d saved=%d", self.looks_generated, self.saved_looks_count)
        return self
    
    def close(self):
        if self._open:
            self._persist()
        self._open = False
    
    def __enter__(self) -> "EntitlementGate":
        return self.open()
    
    def __exit__(self, exc_type, exc, tb):
        self.close()
    
    @property
    def is_open(self) -> bool:
        return self._open
    
    def _require_open(self):
        if not self._open:
            raise RuntimeError("EntitlementGate used before open() or after close()")
    
    def _persist(self):
        self.store.save_counter(LOOKS_GENERATED_KEY, self.looks_generated)
        self.store.save_counter(SAVED_LOOKS_COUNT_KEY, self.saved_looks_count)
    
    @property
    def is_pro(self) -> bool:
        return self.oracle.is_pro
    
    # Generation gate
    
    def can_generate(self, pending: int = 0) -> bool:
        """Whether one more generation fits, counting ``pending`` ones still in flight."""
        self._require_open()
        return self.is_pro or self.looks_generated + pending < self.limits.free_look_limit
    
    def record_generation(self):
        """Count one generation. Callers invoke this after a look was produced."""
        self._require_open()
        self.looks_generated += 1
        self._persist()
    
    @property
    def remaining_free_looks(self) -> int:
        return max(0, self.limits.free_look_limit - self.looks_generated)
    
    # Save gate
    
    def can_save(self) -> bool:
        self._require_open()
        return self.is_pro or self.saved_looks_count < self.limits.free_saved_look_limit
    
    def record_save(self):
        self._require_open()
        self.saved_looks_count += 1
        self._persist()
    
    def record_removal(self):
        self._require_open()
        self.saved_looks_count = max(0, self.saved_looks_count - 1)
        self._persist()
    
    def sync_saved_count(self, count: int):
        """Overwrite the save counter with the real size of the saved collection."""
        self._require_open()
        if count != self.saved_looks_count:
            logger.info("Resyncing saved looks counter %d -> %d", self.saved_looks_count, count)
        self.saved_looks_count = max(0, count)
        self._persist()
    
    @property
    def remaining_saved_slots(self) -> int:
        return max(0, self.limits.free_saved_look_limit - self.saved_looks_count)
    
    # Catalog
    
    @property
    def yearly_savings_percent(self) -> int:
        """How much cheaper the yearly plan is than twelve monthly payments."""
        products = {p.id: p for p in self.oracle.products}
        monthly = products.get(MONTHLY_PRODUCT_ID)
        yearly = products.get(YEARLY_PRODUCT_ID)
        if monthly is None or yearly is None or monthly.price <= 0:
            return 0
        monthly_annual = monthly.price * 12
        return int(round((monthly_annual - yearly.price) / monthly_annual * 100))
    
    def reset(self):
        """Zero both counters (testing and support tooling)."""
        self._require_open()
        self.looks_generated = 0
        self.saved_looks_count = 0
        self._persist()
