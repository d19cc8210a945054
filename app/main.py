import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException

from app import settings
from app.engine import analyze_sales_data
from app.logger import setup_logger
from app.store import store
from app.strategies import DEFAULT_OPTIONS
from app.validation import ValidationError

setup_logger("app")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-seed on startup so the service is immediately usable
    if settings.SEED_ON_STARTUP:
        from scripts.seed_data import seed
        seed(store)
        logger.info(f"Seeded store with {len(store.sellers)} sellers")
    yield


app = FastAPI(
    title="Seller Performance Service",
    version="1.0.0",
    description="Per-seller revenue, profit, ranking and bonus reports",
    lifespan=lifespan,
)


def _analyze(data: Any) -> list[dict]:
    try:
        reports = analyze_sales_data(data, DEFAULT_OPTIONS)
    except ValidationError as exc:
        raise HTTPException(422, str(exc))
    return [r.model_dump() for r in reports]


# ── Catalog ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/products", summary="List the product catalog")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports", summary="Ranked performance report for every seller")
def get_reports():
    return {"reports": _analyze(store.to_dataset())}


@app.get("/api/v1/sellers/{seller_id}/report", summary="Performance report for one seller")
def get_seller_report(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    reports = _analyze(store.to_dataset())
    for position, report in enumerate(reports):
        if report["seller_id"] == seller_id:
            return {"rank": position, "total": len(reports), "report": report}
    raise HTTPException(404, f"Seller '{seller_id}' not found")


@app.post("/api/v1/analyze", summary="Analyze a posted sales dataset")
def analyze(data: dict[str, Any]):
    return {"reports": _analyze(data)}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed test data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
