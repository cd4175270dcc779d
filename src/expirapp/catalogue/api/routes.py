"""FastAPI endpoints for the Catalogue context."""

from datetime import date

from fastapi import APIRouter, Query
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from expirapp.catalogue.api.schemas import (
    AddProductRequest,
    AdjustStockRequest,
    ProductCollectionResponse,
    ProductIdResponse,
    ProductListResponse,
    ProductResponse,
    StockResponse,
    UpdateProductRequest,
)
from expirapp.catalogue.product.creation import AddProduct
from expirapp.catalogue.product.details import RemoveProduct, UpdateProduct
from expirapp.catalogue.product.product import Product
from expirapp.catalogue.product.stock import AdjustStock
from expirapp.shared.schemas import StatusResponse

product_router = APIRouter(prefix="/products", tags=["products"])


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        product_id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        expiration_date=product.expiration_date,
        stock=product.stock,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


# --- Commands ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        expiration_date=body.expiration_date,
        stock=body.stock,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.patch("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> StatusResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        expiration_date=body.expiration_date,
        stock=body.stock,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.patch("/{product_id}/stock", response_model=StockResponse)
async def adjust_stock(product_id: str, body: AdjustStockRequest) -> StockResponse:
    """Unchecked signed adjustment of the stock count."""
    stock = current_domain.process(AdjustStock(product_id=product_id, delta=body.delta), asynchronous=False)
    return StockResponse(product_id=product_id, stock=stock)


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# --- Queries ---


@product_router.get("", response_model=ProductListResponse)
async def list_products(page: int = 1, limit: int = 10) -> ProductListResponse:
    result = current_domain.repository_for(Product).list_page(page, limit)
    return ProductListResponse(
        products=[_product_response(p) for p in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


@product_router.get("/by-name", response_model=ProductResponse)
async def find_product_by_name(name: str = Query(..., min_length=1)) -> ProductResponse:
    product = current_domain.repository_for(Product).find_by_name(name)
    if product is None:
        raise ObjectNotFoundError(f"No product named `{name}`")
    return _product_response(product)


@product_router.get("/by-expiration", response_model=ProductCollectionResponse)
async def find_products_by_expiration(expiration_date: date = Query(..., alias="date")) -> ProductCollectionResponse:
    products = current_domain.repository_for(Product).find_by_expiration_date(expiration_date)
    return ProductCollectionResponse(products=[_product_response(p) for p in products])


@product_router.get("/expiring", response_model=ProductCollectionResponse)
async def find_expiring_products(days: int = 7) -> ProductCollectionResponse:
    products = current_domain.repository_for(Product).find_expiring_within(days)
    return ProductCollectionResponse(products=[_product_response(p) for p in products])


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(current_domain.repository_for(Product).get_live(product_id))
