# services/product_service.py
import logging
from typing import List

from sqlalchemy import DateTime, Integer, String, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from database import Database
from models.product import API_VERSION, Product
from services.errors import (DuplicateIntegrityViolation, NotFound, StorageFailure,
                             VersionMismatch)
from services.row_mapper import COLUMNS, product_to_params, row_to_product

logger = logging.getLogger(__name__)

_RESULT_TYPES = {
    "id": Integer, "name": String, "price": String, "creator": String, "unit": String,
    "category": String, "description": String, "date": DateTime,
}

SELECT_ONE = text(
    f"SELECT {', '.join(COLUMNS)} FROM products WHERE id = :id"
).columns(**_RESULT_TYPES)

SELECT_ALL = text(
    f"SELECT {', '.join(COLUMNS)} FROM products"
).columns(**_RESULT_TYPES)

INSERT = text("""
    INSERT INTO products (name, price, creator, unit, category, description, date)
    VALUES (:name, :price, :creator, :unit, :category, :description, :date)
""").bindparams(bindparam("date", type_=DateTime()))

UPDATE = text("""
    UPDATE products
    SET name=:name, price=:price, creator=:creator, unit=:unit,
        category=:category, description=:description, date=:date
    WHERE id=:id
""").bindparams(bindparam("date", type_=DateTime()))

DELETE = text("DELETE FROM products WHERE id = :id")


def _storage_failure(message: str, e: Exception) -> StorageFailure:
    logger.error("%s: %s", message, e)
    return StorageFailure(f"{message}-> {e}")


def _not_found(product_id: int) -> NotFound:
    logger.warning("Product with ID='%d' is not found", product_id)
    return NotFound(f"Product with ID='{product_id}' is not found")


class ProductService:
    """Create/Read/Update/Delete/ReadAll for products, one leased connection per call."""

    def __init__(self, database: Database):
        self.database = database

    def check_api(self, api: str):
        # empty means "use the current version"
        if api and api != API_VERSION:
            raise VersionMismatch(
                f"unsupported API version: service implements API version '{API_VERSION}', "
                f"but asked for '{api}'")

    def create(self, api: str, product: Product) -> int:
        self.check_api(api)
        with self.database.get_db_connection() as conn:
            params = product_to_params(product)
            params.pop("id")
            try:
                result = conn.execute(INSERT, params)
            except SQLAlchemyError as e:
                raise _storage_failure("failed to insert into Product", e) from e
            try:
                product_id = result.lastrowid
            except SQLAlchemyError as e:
                raise _storage_failure("failed to retrieve id for created Product", e) from e
            try:
                conn.commit()
            except SQLAlchemyError as e:
                raise _storage_failure("failed to insert into Product", e) from e
        if not product_id:
            raise StorageFailure("failed to retrieve id for created Product-> driver returned no id")
        logger.info("Created Product with ID='%d'", product_id)
        return product_id

    def read(self, api: str, product_id: int) -> Product:
        self.check_api(api)
        with self.database.get_db_connection() as conn:
            try:
                rows = conn.execute(SELECT_ONE, {"id": product_id}).mappings().fetchmany(2)
            except SQLAlchemyError as e:
                raise _storage_failure("failed to select from Product", e) from e
            except ValueError as e:
                raise _storage_failure("failed to retrieve field values from Product row", e) from e

        if not rows:
            raise _not_found(product_id)
        if len(rows) > 1:
            logger.error("found multiple Product rows with ID='%d'", product_id)
            raise DuplicateIntegrityViolation(f"found multiple Product rows with ID='{product_id}'")
        return row_to_product(rows[0])

    def update(self, api: str, product: Product) -> int:
        self.check_api(api)
        with self.database.get_db_connection() as conn:
            params = product_to_params(product)
            try:
                updated = conn.execute(UPDATE, params).rowcount
                conn.commit()
            except SQLAlchemyError as e:
                raise _storage_failure("failed to update Product", e) from e

        if updated == 0:
            raise _not_found(product.id)
        return updated

    def delete(self, api: str, product_id: int) -> int:
        self.check_api(api)
        with self.database.get_db_connection() as conn:
            try:
                deleted = conn.execute(DELETE, {"id": product_id}).rowcount
                conn.commit()
            except SQLAlchemyError as e:
                raise _storage_failure("failed to delete Product", e) from e

        if deleted == 0:
            raise _not_found(product_id)
        return deleted

    def read_all(self, api: str) -> List[Product]:
        self.check_api(api)
        with self.database.get_db_connection() as conn:
            try:
                rows = conn.execute(SELECT_ALL).mappings().all()
            except SQLAlchemyError as e:
                raise _storage_failure("failed to select from Product", e) from e
            except ValueError as e:
                raise _storage_failure("failed to retrieve field values from Product row", e) from e
        return [row_to_product(r) for r in rows]
