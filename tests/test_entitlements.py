"""Tests for free tier gating and the subscription oracle."""

from decimal import Decimal

import pytest

from glowguide.config import UsageLimits
from glowguide.errors import StoreError
from glowguide.models import Product, SubscriptionStatus
from glowguide.models.subscription import LIFETIME_PRODUCT_ID, MONTHLY_PRODUCT_ID, YEARLY_PRODUCT_ID
from glowguide.services import EntitlementGate, StaticSubscriptionOracle
from glowguide.services.storage import LOOKS_GENERATED_KEY, SAVED_LOOKS_COUNT_KEY


class TestGenerationGate:
    
    @pytest.mark.parametrize("count,expected", [(0, True), (2, True), (3, False), (10, False)])
    def test_free_limit(self, gate, count, expected):
        gate.looks_generated = count
        
        assert gate.can_generate() is expected
    
    @pytest.mark.parametrize("count,pending,expected", [(0, 2, True), (1, 2, False), (2, 1, False), (2, 0, True)])
    def test_pending_generations_count(self, gate, count, pending, expected):
        gate.looks_generated = count
        
        assert gate.can_generate(pending=pending) is expected
    
    @pytest.mark.parametrize("count", [0, 3, 100])
    def test_pro_always_allowed(self, gate, oracle, count):
        oracle.status = SubscriptionStatus.YEARLY
        gate.looks_generated = count
        
        assert gate.can_generate()
    
    def test_record_generation_increments_and_persists(self, gate, store):
        before = gate.looks_generated
        
        gate.record_generation()
        
        assert gate.looks_generated == before + 1
        assert store.load_counter(LOOKS_GENERATED_KEY) == before + 1
    
    def test_blocks_after_three(self, gate):
        for _ in range(3):
            assert gate.can_generate()
            gate.record_generation()
        
        assert not gate.can_generate()
        assert gate.remaining_free_looks == 0


class TestSaveGate:
    
    def test_save_limit(self, gate):
        for _ in range(3):
            assert gate.can_save()
            gate.record_save()
        
        assert not gate.can_save()
        assert gate.remaining_saved_slots == 0
    
    def test_removal_reopens_slot(self, gate):
        gate.saved_looks_count = 3
        
        gate.record_removal()
        
        assert gate.saved_looks_count == 2
        assert gate.can_save()
    
    def test_removal_floors_at_zero(self, gate, store):
        gate.record_removal()
        gate.record_removal()
        
        assert gate.saved_looks_count == 0
        assert store.load_counter(SAVED_LOOKS_COUNT_KEY) == 0
    
    def test_sync_overrides_counter(self, gate, store):
        gate.saved_looks_count = 7
        
        gate.sync_saved_count(2)
        
        assert gate.saved_looks_count == 2
        assert store.load_counter(SAVED_LOOKS_COUNT_KEY) == 2
    
    def test_pro_bypasses_save_limit(self, gate, oracle):
        oracle.status = SubscriptionStatus.LIFETIME
        gate.saved_looks_count = 50
        
        assert gate.can_save()


class TestLifecycle:
    
    def test_open_loads_counters(self, store, oracle):
        store.save_counter(LOOKS_GENERATED_KEY, 2)
        store.save_counter(SAVED_LOOKS_COUNT_KEY, 1)
        
        with EntitlementGate(store, oracle) as gate:
            assert gate.looks_generated == 2
            assert gate.saved_looks_count == 1
    
    def test_use_before_open(self, store, oracle):
        gate = EntitlementGate(store, oracle)
        
        with pytest.raises(RuntimeError):
            gate.can_generate()
    
    def test_use_after_close(self, store, oracle):
        gate = EntitlementGate(store, oracle).open()
        gate.close()
        
        with pytest.raises(RuntimeError):
            gate.record_save()
    
    def test_custom_limits(self, store, oracle):
        gate = EntitlementGate(store, oracle, UsageLimits(free_look_limit=1, free_saved_look_limit=5)).open()
        gate.record_generation()
        
        assert not gate.can_generate()
        assert gate.remaining_saved_slots == 5
    
    def test_reset(self, gate):
        gate.record_generation()
        gate.record_save()
        
        gate.reset()
        
        assert (gate.looks_generated, gate.saved_looks_count) == (0, 0)


class TestSubscriptionOracle:
    
    def test_defaults(self):
        oracle = StaticSubscriptionOracle()
        
        assert not oracle.is_pro
        assert [p.id for p in oracle.products] == [MONTHLY_PRODUCT_ID, YEARLY_PRODUCT_ID, LIFETIME_PRODUCT_ID]
    
    def test_entitlements_pick_longest(self):
        oracle = StaticSubscriptionOracle()
        
        status = oracle.update_from_entitlements({MONTHLY_PRODUCT_ID, LIFETIME_PRODUCT_ID, "com.other.app"})
        
        assert status == SubscriptionStatus.LIFETIME
        assert oracle.is_pro
    
    def test_no_entitlements(self):
        oracle = StaticSubscriptionOracle(status=SubscriptionStatus.MONTHLY)
        
        assert oracle.update_from_entitlements(set()) == SubscriptionStatus.NONE
        assert not oracle.is_pro
    
    def test_purchase_unknown_product(self):
        with pytest.raises(StoreError) as exc_info:
            StaticSubscriptionOracle().purchase("com.glowguide.unknown")
        
        assert exc_info.value.reason == StoreError.PRODUCT_NOT_FOUND
    
    def test_purchase_and_restore(self):
        oracle = StaticSubscriptionOracle()
        
        assert oracle.purchase(YEARLY_PRODUCT_ID) == SubscriptionStatus.YEARLY
        oracle.status = SubscriptionStatus.NONE
        assert oracle.restore() == SubscriptionStatus.YEARLY
    
    def test_yearly_savings(self, store):
        products = [
            Product(id=MONTHLY_PRODUCT_ID, display_name="M", price=Decimal("10.00")),
            Product(id=YEARLY_PRODUCT_ID, display_name="Y", price=Decimal("60.00")),
        ]
        gate = EntitlementGate(store, StaticSubscriptionOracle(products=products)).open()
        
        assert gate.yearly_savings_percent == 50
        assert products[1].display_price_per_month == "$5.00/mo"
    
    def test_yearly_savings_without_catalog(self, store):
        gate = EntitlementGate(store, StaticSubscriptionOracle(products=[])).open()
        
        assert gate.yearly_savings_percent == 0
