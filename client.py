# client.py
"""
Reference client for the product service.

Runs Create, Read, Update and ReadAll (and Delete with --delete) against a
running server and logs every result.

Usage:
   python client.py --server http://127.0.0.1:8080
   python client.py --server http://127.0.0.1:8080 --delete
"""
import argparse
import logging
import os
from typing import List

import requests
from dotenv import load_dotenv

from logger import init_logging
from models.product import (API_VERSION, CreateRequest, CreateResponse, DeleteRequest,
                            DeleteResponse, Product, ReadAllRequest, ReadAllResponse,
                            ReadRequest, ReadResponse, Timestamp, UpdateRequest,
                            UpdateResponse)

logger = logging.getLogger(__name__)


class RpcError(Exception):
    """The server answered with an error envelope, or the call never reached it."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ProductServiceClient:
    def __init__(self, base_url: str, session=None, timeout: float = 5, api: str = API_VERSION):
        self.base_url = base_url.rstrip("/") + "/v1/product-service"
        self.session = session or requests.Session()
        self.timeout = timeout
        self.api = api

    def _call(self, method: str, request) -> dict:
        url = f"{self.base_url}/{method}"
        try:
            resp = self.session.post(url, json=request.model_dump(mode="json"), timeout=self.timeout)
        except requests.RequestException as e:
            raise RpcError("UNAVAILABLE", str(e)) from e
        if resp.status_code != 200:
            try:
                body = resp.json()
                code, message = body.get("code", "UNKNOWN"), body.get("message", resp.text)
            except ValueError:
                code, message = "UNKNOWN", resp.text
            raise RpcError(code, message)
        return resp.json()

    def create(self, product: Product) -> int:
        data = self._call("create", CreateRequest(api=self.api, product=product))
        return CreateResponse.model_validate(data).id

    def read(self, product_id: int) -> Product:
        data = self._call("read", ReadRequest(api=self.api, id=product_id))
        return ReadResponse.model_validate(data).product

    def update(self, product: Product) -> int:
        data = self._call("update", UpdateRequest(api=self.api, product=product))
        return UpdateResponse.model_validate(data).updated

    def delete(self, product_id: int) -> int:
        data = self._call("delete", DeleteRequest(api=self.api, id=product_id))
        return DeleteResponse.model_validate(data).deleted

    def read_all(self) -> List[Product]:
        data = self._call("read-all", ReadAllRequest(api=self.api))
        return ReadAllResponse.model_validate(data).products


def run_scenario(client: ProductServiceClient, delete: bool = False) -> dict:
    results = {}

    product = Product(
        name="Potato",
        price="5€",
        creator="Marty",
        unit="Kg",
        description="Buy my Potato",
        category="vegetable",
        date=Timestamp.now(),
    )
    product_id = client.create(product)
    logger.info("Create result: <id=%d>", product_id)
    results["id"] = product_id

    read = client.read(product_id)
    logger.info("Read result: <%s>", read)
    results["read"] = read

    changed = read.model_copy(update={
        "creator": read.creator + " + updated",
        "description": read.description + " + updated",
    })
    results["updated"] = client.update(changed)
    logger.info("Update result: <updated=%d>", results["updated"])

    results["all"] = client.read_all()
    logger.info("ReadAll result: <%d products>", len(results["all"]))

    if delete:
        results["deleted"] = client.delete(product_id)
        logger.info("Delete result: <deleted=%d>", results["deleted"])

    return results


def main(argv=None):
    load_dotenv()
    parser = argparse.ArgumentParser(description="Exercise the product service")
    parser.add_argument("--server", default=os.getenv("BASE_URL", "http://127.0.0.1:8080"),
                        help="server base url")
    parser.add_argument("--delete", action="store_true", help="also delete the created product")
    parser.add_argument("--timeout", type=float, default=5, help="per-call timeout in seconds")
    args = parser.parse_args(argv)

    init_logging("INFO")
    client = ProductServiceClient(args.server, timeout=args.timeout)
    try:
        run_scenario(client, delete=args.delete)
    except RpcError as e:
        logger.error("call failed: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
