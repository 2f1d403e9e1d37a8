# services/row_mapper.py
"""
Translation between the wire messages and the products table.

Every read and write path uses COLUMNS in this order.
"""
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

from models.product import Product, Timestamp
from services.errors import InvalidTimestamp

COLUMNS = ("id", "name", "price", "creator", "unit", "category", "description", "date")

# 0001-01-01T00:00:00Z and 10000-01-01T00:00:00Z in Unix seconds
MIN_VALID_SECONDS = -62135596800
MAX_VALID_SECONDS = 253402300800

_EPOCH = datetime(1970, 1, 1)


def _validate(ts: Optional[Timestamp]) -> Timestamp:
    if ts is None:
        raise InvalidTimestamp("date field has invalid format-> timestamp: nil Timestamp")
    if ts.nanos < 0 or ts.nanos >= 1_000_000_000:
        raise InvalidTimestamp(
            f"date field has invalid format-> timestamp: seconds:{ts.seconds} nanos:{ts.nanos}: "
            "nanos not in range [0, 1e9)")
    if ts.seconds < MIN_VALID_SECONDS:
        raise InvalidTimestamp(
            f"date field has invalid format-> timestamp: seconds:{ts.seconds} nanos:{ts.nanos} "
            "before 0001-01-01")
    if ts.seconds >= MAX_VALID_SECONDS:
        raise InvalidTimestamp(
            f"date field has invalid format-> timestamp: seconds:{ts.seconds} nanos:{ts.nanos} "
            "after 10000-01-01")
    return ts


def timestamp_to_datetime(ts: Optional[Timestamp]) -> datetime:
    """Wire timestamp -> naive UTC datetime, truncated to microseconds."""
    ts = _validate(ts)
    return _EPOCH + timedelta(seconds=ts.seconds, microseconds=ts.nanos // 1000)


def datetime_to_timestamp(value: Optional[datetime]) -> Optional[Timestamp]:
    if value is None:
        return None
    return Timestamp.from_datetime(value)


def product_to_params(product: Product) -> dict:
    """Bind parameters for INSERT/UPDATE. Raises InvalidTimestamp before anything is written."""
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "creator": product.creator,
        "unit": product.unit,
        "category": product.category,
        "description": product.description,
        "date": timestamp_to_datetime(product.date),
    }


def row_to_product(row: Mapping[str, Any]) -> Product:
    return Product(
        id=row["id"],
        name=row["name"] or "",
        price=row["price"] or "",
        creator=row["creator"] or "",
        unit=row["unit"] or "",
        category=row["category"] or "",
        description=row["description"] or "",
        date=datetime_to_timestamp(row["date"]),
    )
