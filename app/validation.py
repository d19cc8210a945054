import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from app.strategies import BonusCalculator, RevenueCalculator

logger = logging.getLogger(__name__)

_COLLECTIONS = ("sellers", "products", "purchase_records")


class ValidationError(ValueError):
    """Raised when the input dataset or the analysis options are malformed."""


def _field(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _fail(message: str) -> NoReturn:
    logger.warning(f"Rejected sales analysis input: {message}")
    raise ValidationError(message)


def validate(data: Any, options: Any) -> tuple[RevenueCalculator, BonusCalculator]:
    """Check the shape of `data` and `options`, return the two strategies unchanged.

    `data` is a SalesDataset or a mapping with the same keys; `options` is a
    mapping or any object exposing `calculate_revenue` and `calculate_bonus`.
    """
    if data is None:
        _fail("Sales data is missing")

    for name in _COLLECTIONS:
        value = _field(data, name)
        if not isinstance(value, (list, tuple)):
            _fail(f"'{name}' must be a list, got {type(value).__name__}")
        if len(value) == 0:
            _fail(f"'{name}' must not be empty")

    if options is None:
        _fail("Options with calculate_revenue and calculate_bonus are required")

    calculate_revenue = _field(options, "calculate_revenue")
    calculate_bonus = _field(options, "calculate_bonus")
    if not callable(calculate_revenue):
        _fail("'calculate_revenue' must be callable")
    if not callable(calculate_bonus):
        _fail("'calculate_bonus' must be callable")

    return calculate_revenue, calculate_bonus
