# tests/test_row_mapper.py
from datetime import datetime, timezone

import pytest

from models.product import Product, Timestamp
from services.errors import InvalidTimestamp, StatusCode
from services.row_mapper import (COLUMNS, MAX_VALID_SECONDS, MIN_VALID_SECONDS,
                                 datetime_to_timestamp, product_to_params, row_to_product,
                                 timestamp_to_datetime)


def test_timestamp_to_datetime_truncates_to_microseconds():
    value = timestamp_to_datetime(Timestamp(seconds=1700000000, nanos=123456789))
    assert value == datetime(2023, 11, 14, 22, 13, 20, 123456)
    assert value.tzinfo is None


def test_timestamp_range_boundaries():
    assert timestamp_to_datetime(Timestamp(seconds=MIN_VALID_SECONDS)) == datetime(1, 1, 1)
    assert timestamp_to_datetime(Timestamp(seconds=MAX_VALID_SECONDS - 1, nanos=999_999_999)) == \
        datetime(9999, 12, 31, 23, 59, 59, 999999)


@pytest.mark.parametrize("ts, fragment", [
    (Timestamp(seconds=1, nanos=-1), "nanos not in range"),
    (Timestamp(seconds=1, nanos=1_000_000_000), "nanos not in range"),
    (Timestamp(seconds=MIN_VALID_SECONDS - 1), "before 0001-01-01"),
    (Timestamp(seconds=MAX_VALID_SECONDS), "after 10000-01-01"),
    (None, "nil Timestamp"),
])
def test_malformed_timestamps_are_rejected(ts, fragment):
    with pytest.raises(InvalidTimestamp) as exc:
        timestamp_to_datetime(ts)
    assert fragment in exc.value.message
    assert exc.value.code is StatusCode.INVALID_ARGUMENT


def test_datetime_to_timestamp():
    assert datetime_to_timestamp(None) is None
    assert datetime_to_timestamp(datetime(1970, 1, 1, 0, 0, 1, 500)) == Timestamp(seconds=1, nanos=500000)
    aware = datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc)
    assert datetime_to_timestamp(aware) == Timestamp(seconds=-1, nanos=500000000)


def test_product_params_follow_column_order():
    product = Product(id=3, name="n", date=Timestamp(seconds=0))
    params = product_to_params(product)
    assert tuple(params) == COLUMNS
    assert params["date"] == datetime(1970, 1, 1)


def test_row_to_product_fills_null_text_columns():
    row = {"id": 9, "name": "Carrot", "price": None, "creator": None, "unit": "Kg",
           "category": None, "description": None, "date": None}
    product = row_to_product(row)
    assert product == Product(id=9, name="Carrot", unit="Kg")
    assert product.date is None
