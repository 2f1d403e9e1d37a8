# models/product.py
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

API_VERSION = "v1"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1


class Timestamp(BaseModel):
    # seconds/nanos since the Unix epoch, UTC
    seconds: int = Field(0, ge=INT64_MIN, le=INT64_MAX)
    nanos: int = Field(0, ge=INT32_MIN, le=INT32_MAX)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - EPOCH
        return cls(seconds=delta.days * 86400 + delta.seconds,
                   nanos=delta.microseconds * 1000)

    @classmethod
    def now(cls) -> "Timestamp":
        return cls.from_datetime(datetime.now(timezone.utc))


class Product(BaseModel):
    id: int = Field(0, ge=INT64_MIN, le=INT64_MAX)
    name: str = ""
    price: str = ""
    creator: str = ""
    unit: str = ""
    category: str = ""
    description: str = ""
    date: Optional[Timestamp] = None


class CreateRequest(BaseModel):
    api: str = ""
    product: Product


class CreateResponse(BaseModel):
    api: str = API_VERSION
    id: int


class ReadRequest(BaseModel):
    api: str = ""
    id: int = Field(ge=INT64_MIN, le=INT64_MAX)


class ReadResponse(BaseModel):
    api: str = API_VERSION
    product: Product


class UpdateRequest(BaseModel):
    api: str = ""
    product: Product


class UpdateResponse(BaseModel):
    api: str = API_VERSION
    updated: int


class DeleteRequest(BaseModel):
    api: str = ""
    id: int = Field(ge=INT64_MIN, le=INT64_MAX)


class DeleteResponse(BaseModel):
    api: str = API_VERSION
    deleted: int


class ReadAllRequest(BaseModel):
    api: str = ""


class ReadAllResponse(BaseModel):
    api: str = API_VERSION
    products: List[Product] = []
