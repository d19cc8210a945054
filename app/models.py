from pydantic import BaseModel, ConfigDict
from decimal import Decimal
from typing import Optional


class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str


class Product(BaseModel):
    sku: str
    purchase_price: Decimal  # unit cost, feeds profit only


class PurchaseItem(BaseModel):
    sku: str
    quantity: Decimal
    sale_price: Decimal
    discount: Optional[Decimal] = Decimal("0")  # percent, 0-100; None means no discount


class PurchaseRecord(BaseModel):
    seller_id: str
    items: list[PurchaseItem]
    # informational only, revenue always comes from the revenue strategy
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    total_amount: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Internal ─────────────────────────────────────────────────────────────────

class SellerAccumulator(BaseModel):
    id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    products_sold: dict[str, Decimal] = {}


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: Decimal


class SellerReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal        # 2 dp
    profit: Decimal         # 2 dp
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal          # 2 dp
