"""FastAPI endpoints for the Ordering context."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from expirapp.ordering.api.schemas import (
    AddOrderItemRequest,
    OrderIdResponse,
    OrderItemIdResponse,
    OrderItemResponse,
    OrderListResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateOrderItemRequest,
    UpdateOrderRequest,
)
from expirapp.ordering.order.items import AddOrderItem, RemoveOrderItem, UpdateOrderItem
from expirapp.ordering.order.management import DeleteOrder, UpdateOrder
from expirapp.ordering.order.order import Order
from expirapp.ordering.order.placement import PlaceOrder
from expirapp.shared.schemas import StatusResponse

router = APIRouter(prefix="/orders", tags=["orders"])


def order_response(order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.id),
        client_id=str(order.client_id),
        seller_id=str(order.seller_id) if order.seller_id else None,
        purchase_date=order.purchase_date,
        items=[
            OrderItemResponse(
                item_id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in order.line_items()
        ],
        total=order.total,
    )


def _order_list(result) -> OrderListResponse:
    return OrderListResponse(
        orders=[order_response(o) for o in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


# --- Orders ---


@router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(
        client_id=body.client_id,
        seller_id=body.seller_id,
        items=json.dumps([line.model_dump() for line in body.items]),
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@router.get("", response_model=OrderListResponse)
async def list_orders(page: int = 1, limit: int = 10) -> OrderListResponse:
    return _order_list(current_domain.repository_for(Order).list_page(page, limit))


@router.get("/by-client/{client_id}", response_model=OrderListResponse)
async def list_client_orders(client_id: str, page: int = 1, limit: int = 10) -> OrderListResponse:
    return _order_list(current_domain.repository_for(Order).list_by_client(client_id, page, limit))


@router.get("/by-seller/{seller_id}", response_model=OrderListResponse)
async def list_seller_orders(seller_id: str, page: int = 1, limit: int = 10) -> OrderListResponse:
    return _order_list(current_domain.repository_for(Order).list_by_seller(seller_id, page, limit))


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return order_response(current_domain.repository_for(Order).get_live(order_id))


@router.patch("/{order_id}", response_model=StatusResponse)
async def update_order(order_id: str, body: UpdateOrderRequest) -> StatusResponse:
    current_domain.process(UpdateOrder(order_id=order_id, seller_id=body.seller_id), asynchronous=False)
    return StatusResponse()


@router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()


# --- Line items ---


@router.post("/{order_id}/items", status_code=201, response_model=OrderItemIdResponse)
async def add_order_item(order_id: str, body: AddOrderItemRequest) -> OrderItemIdResponse:
    command = AddOrderItem(
        order_id=order_id,
        product_id=body.product_id,
        quantity=body.quantity,
        unit_price=body.unit_price,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderItemIdResponse(item_id=result)


@router.patch("/{order_id}/items/{item_id}", response_model=StatusResponse)
async def update_order_item(order_id: str, item_id: str, body: UpdateOrderItemRequest) -> StatusResponse:
    command = UpdateOrderItem(
        order_id=order_id,
        item_id=item_id,
        quantity=body.quantity,
        unit_price=body.unit_price,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{order_id}/items/{item_id}", response_model=StatusResponse)
async def remove_order_item(order_id: str, item_id: str) -> StatusResponse:
    current_domain.process(RemoveOrderItem(order_id=order_id, item_id=item_id), asynchronous=False)
    return StatusResponse()
