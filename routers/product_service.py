# routers/product_service.py
from fastapi import APIRouter, Depends, Request

from models.product import (API_VERSION, CreateRequest, CreateResponse, DeleteRequest,
                            DeleteResponse, ReadAllRequest, ReadAllResponse, ReadRequest,
                            ReadResponse, UpdateRequest, UpdateResponse)
from services.product_service import ProductService

router = APIRouter(prefix="/v1/product-service", tags=["product-service"])


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


@router.post("/create", response_model=CreateResponse)
def create(req: CreateRequest, service: ProductService = Depends(get_product_service)):
    product_id = service.create(req.api, req.product)
    return CreateResponse(api=API_VERSION, id=product_id)


@router.post("/read", response_model=ReadResponse)
def read(req: ReadRequest, service: ProductService = Depends(get_product_service)):
    return ReadResponse(api=API_VERSION, product=service.read(req.api, req.id))


@router.post("/update", response_model=UpdateResponse)
def update(req: UpdateRequest, service: ProductService = Depends(get_product_service)):
    return UpdateResponse(api=API_VERSION, updated=service.update(req.api, req.product))


@router.post("/delete", response_model=DeleteResponse)
def delete(req: DeleteRequest, service: ProductService = Depends(get_product_service)):
    return DeleteResponse(api=API_VERSION, deleted=service.delete(req.api, req.id))


@router.post("/read-all", response_model=ReadAllResponse)
def read_all(req: ReadAllRequest, service: ProductService = Depends(get_product_service)):
    return ReadAllResponse(api=API_VERSION, products=service.read_all(req.api))
