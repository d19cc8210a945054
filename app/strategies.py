from decimal import Decimal
from typing import Protocol

from app.models import Product, PurchaseItem, SellerAccumulator

# Profit share paid out per rank tier
_TOP_RATE = Decimal("0.15")
_PODIUM_RATE = Decimal("0.10")
_BASE_RATE = Decimal("0.05")
_ZERO = Decimal("0")


class RevenueCalculator(Protocol):
    def __call__(self, item: PurchaseItem, product: Product) -> Decimal: ...


class BonusCalculator(Protocol):
    def __call__(self, index: int, total: int, seller: SellerAccumulator) -> Decimal: ...


def calculate_simple_revenue(item: PurchaseItem, product: Product) -> Decimal:
    """Net revenue of one line item: sale price x quantity, less the item's own discount.

    The catalog purchase price is not used here; it only feeds cost.
    """
    discount = item.discount if item.discount is not None else _ZERO
    return item.sale_price * item.quantity * (1 - discount / 100)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> Decimal:
    """Bonus for the seller at rank `index` (0 = highest profit) out of `total`."""
    profit = seller.profit
    if index == 0:
        return profit * _TOP_RATE
    if index in (1, 2):
        return profit * _PODIUM_RATE
    if index == total - 1 and total > 1:
        return _ZERO
    return profit * _BASE_RATE


DEFAULT_OPTIONS = {
    "calculate_revenue": calculate_simple_revenue,
    "calculate_bonus": calculate_bonus_by_profit,
}
