"""Subscription catalog models."""

from decimal import Decimal
from enum import Enum
from pydantic import BaseModel


MONTHLY_PRODUCT_ID = "com.glowguide.pro.monthly"
YEARLY_PRODUCT_ID = "com.glowguide.pro.yearly"
LIFETIME_PRODUCT_ID = "com.glowguide.pro.lifetime"


class SubscriptionStatus(str, Enum):
    NONE = "none"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    LIFETIME = "lifetime"
    TRIAL = "trial"


class Product(BaseModel):
    """A purchasable Pro product as reported by the store."""
    
    id: str
    display_name: str
    price: Decimal
    currency: str = "USD"
    
    @property
    def period_text(self) -> str:
        return {
            MONTHLY_PRODUCT_ID: "Monthly",
            YEARLY_PRODUCT_ID: "Yearly",
            LIFETIME_PRODUCT_ID: "Lifetime",
        }.get(self.id, "")
    
    @property
    def display_price_per_month(self) -> str:
        if self.id == MONTHLY_PRODUCT_ID:
            return f"${self.price:.2f}/mo"
        if self.id == YEARLY_PRODUCT_ID:
            return f"${self.price / 12:.2f}/mo"
        if self.id == LIFETIME_PRODUCT_ID:
            return "One-time"
        return f"${self.price:.2f}"


DEFAULT_PRODUCTS = [
    Product(id=MONTHLY_PRODUCT_ID, display_name="GlowGuide Pro Monthly", price=Decimal("4.99")),
    Product(id=YEARLY_PRODUCT_ID, display_name="GlowGuide Pro Yearly", price=Decimal("29.99")),
    Product(id=LIFETIME_PRODUCT_ID, display_name="GlowGuide Pro Lifetime", price=Decimal("79.99")),
]
