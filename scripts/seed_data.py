"""
Deterministic test-data generator.

Produces:
  - 5 sellers
  - 30 catalog products
  - 400 purchase records of 1-5 line items each
    - a handful reference a seller that is not in the seller list
    - a handful of items reference a SKU missing from the catalog
"""

import random
from decimal import Decimal

from app import settings
from app.models import Product, PurchaseItem, PurchaseRecord, Seller
from app.store import DataStore

N_PRODUCTS = 30
N_RECORDS = 400

_SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Ivan", "Smirnov"),
    ("seller_3", "Maria", "Ivanova"),
    ("seller_4", "Elena", "Kuznetsova"),
    ("seller_5", "Dmitry", "Sokolov"),
]

_GHOST_SELLER = "seller_unknown"
_GHOST_SKU = "SKU_999"


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))


def seed(store: DataStore, seed_value: int = settings.SEED) -> None:
    rng = random.Random(seed_value)

    # ── sellers ──────────────────────────────────────────────────────────────
    for seller_id, first, last in _SELLERS:
        store.add_seller(Seller(id=seller_id, first_name=first, last_name=last))

    # ── catalog ──────────────────────────────────────────────────────────────
    prices: dict[str, Decimal] = {}
    for n in range(1, N_PRODUCTS + 1):
        sku = f"SKU_{n:03d}"
        purchase_price = _money(rng.uniform(5, 400))
        prices[sku] = purchase_price
        store.add_product(Product(sku=sku, purchase_price=purchase_price))

    skus = list(prices)
    seller_ids = [s[0] for s in _SELLERS]

    # ── purchase records ─────────────────────────────────────────────────────
    for n in range(1, N_RECORDS + 1):
        # roughly 2 % of receipts belong to a seller we don't know about
        seller_id = _GHOST_SELLER if rng.random() < 0.02 else rng.choice(seller_ids)

        items = []
        for _ in range(rng.randint(1, 5)):
            sku = _GHOST_SKU if rng.random() < 0.03 else rng.choice(skus)
            base = prices.get(sku, Decimal("100"))
            # markup between 10 % and 60 % over purchase price
            sale_price = _money(float(base) * rng.uniform(1.1, 1.6))
            items.append(PurchaseItem(
                sku=sku,
                quantity=rng.randint(1, 10),
                sale_price=sale_price,
                discount=Decimal(rng.choice([0, 0, 0, 5, 10, 15, 20])),
            ))

        gross = sum((i.sale_price * i.quantity for i in items), Decimal("0"))
        net = sum((i.sale_price * i.quantity * (1 - i.discount / 100) for i in items), Decimal("0"))
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            date=f"2023-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}",
            seller_id=seller_id,
            customer_id=f"customer_{rng.randint(1, 150):03d}",
            items=items,
            total_amount=net.quantize(Decimal("0.01")),
            total_discount=(gross - net).quantize(Decimal("0.01")),
        ))


if __name__ == "__main__":
    import json

    from app.engine import analyze_sales_data
    from app.logger import setup_logger
    from app.strategies import DEFAULT_OPTIONS

    setup_logger("app")
    demo = DataStore()
    seed(demo)
    reports = analyze_sales_data(demo.to_dataset(), DEFAULT_OPTIONS)
    print(json.dumps([r.model_dump(mode="json") for r in reports], indent=2, ensure_ascii=False))
