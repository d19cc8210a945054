import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from pydantic import ValidationError as SchemaError

from app import settings
from app.models import (
    Product,
    PurchaseRecord,
    SalesDataset,
    Seller,
    SellerAccumulator,
    SellerReport,
    TopProduct,
)
from app.strategies import BonusCalculator, RevenueCalculator
from app.validation import ValidationError, validate

logger = logging.getLogger(__name__)

_TWO_DP = Decimal("0.01")
_ZERO = Decimal("0")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _round_money(value: Decimal) -> Decimal:
    """Round half away from zero on the cent boundary."""
    return _to_decimal(value).quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def _coerce_dataset(data: Any) -> SalesDataset:
    if isinstance(data, SalesDataset):
        return data
    try:
        return SalesDataset.model_validate(data)
    except SchemaError as exc:
        logger.warning(f"Rejected sales analysis input: {exc.error_count()} schema error(s)")
        raise ValidationError(f"Sales data does not match the expected schema: {exc}") from exc


def aggregate(
    sellers: list[Seller],
    products: list[Product],
    purchase_records: list[PurchaseRecord],
    calculate_revenue: RevenueCalculator,
) -> dict[str, SellerAccumulator]:
    """Scan purchase records once and build running totals per seller id.

    Records for unknown sellers and items for unknown SKUs are skipped.
    Totals stay unrounded.
    """
    product_index = {p.sku: p for p in products}
    stats = {
        s.id: SellerAccumulator(id=s.id, name=f"{s.first_name} {s.last_name}")
        for s in sellers
    }

    for record in purchase_records:
        seller = stats.get(record.seller_id)
        if seller is None:
            continue

        seller.sales_count += 1

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                continue

            item_revenue = _to_decimal(calculate_revenue(item, product))
            cost = product.purchase_price * item.quantity

            seller.revenue += item_revenue
            seller.profit += item_revenue - cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, _ZERO) + item.quantity

    return stats


def top_products(products_sold: dict[str, Decimal], limit: int) -> list[TopProduct]:
    # quantity desc, then sku asc
    ranked = sorted(products_sold.items(), key=lambda kv: (-kv[1], kv[0]))
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def rank(
    stats: dict[str, SellerAccumulator],
    calculate_bonus: BonusCalculator,
    limit: int,
) -> list[tuple[SellerAccumulator, Decimal, list[TopProduct]]]:
    # sorted() is stable, so equal profits keep the original seller order
    ordered = sorted(stats.values(), key=lambda s: s.profit, reverse=True)
    total = len(ordered)

    return [
        (
            seller,
            _to_decimal(calculate_bonus(index, total, seller)),
            top_products(seller.products_sold, limit),
        )
        for index, seller in enumerate(ordered)
    ]


def build_reports(
    ranked: list[tuple[SellerAccumulator, Decimal, list[TopProduct]]],
) -> list[SellerReport]:
    return [
        SellerReport(
            seller_id=seller.id,
            name=seller.name,
            revenue=_round_money(seller.revenue),
            profit=_round_money(seller.profit),
            sales_count=seller.sales_count,
            top_products=top,
            bonus=_round_money(bonus),
        )
        for seller, bonus, top in ranked
    ]


def analyze_sales_data(
    data: Any,
    options: Any,
    top_products_limit: int = settings.TOP_PRODUCTS_LIMIT,
) -> list[SellerReport]:
    """Aggregate, rank and report per-seller sales performance.

    `options` supplies the two strategies under the keys (or attributes)
    `calculate_revenue` and `calculate_bonus`, the Python names of
    `calculateRevenue`/`calculateBonus`. See `app.strategies.DEFAULT_OPTIONS`.

    Raises ValidationError before touching any totals when `data` or
    `options` is malformed. Otherwise always returns one report per seller,
    ordered by profit descending.
    """
    calculate_revenue, calculate_bonus = validate(data, options)
    dataset = _coerce_dataset(data)

    logger.info(
        f"Analyzing {len(dataset.sellers)} sellers, {len(dataset.products)} products, "
        f"{len(dataset.purchase_records)} purchase records"
    )

    stats = aggregate(dataset.sellers, dataset.products, dataset.purchase_records, calculate_revenue)
    reports = build_reports(rank(stats, calculate_bonus, top_products_limit))

    logger.info(f"Built {len(reports)} seller reports")
    return reports
