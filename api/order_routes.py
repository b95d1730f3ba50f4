"""Order-related FastAPI routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from Orders.order import Order
from Orders.usecase import OrderUsecase

from .deps import get_order_usecase
from .utils import _decode_body, _parse_id, _respond

logger = logging.getLogger(__name__)

ORDER_ID_REQUIRED = "Order ID is required"
INVALID_ORDER_ID = "Invalid order ID"

# mount api router
order_router = APIRouter()


@order_router.post("")
async def create_order(
    request: Request,
    usecase: OrderUsecase = Depends(get_order_usecase),
) -> JSONResponse:
    """Place an order; the stored order carries its id and creation date."""

    order = await _decode_body(request, Order, logger)
    created = usecase.create_order(order)
    return _respond(status.HTTP_201_CREATED, "Success create order", data=created)


@order_router.get("")
async def get_orders(
    id: Optional[str] = None,
    usecase: OrderUsecase = Depends(get_order_usecase),
) -> JSONResponse:

    if id is None:
        return _respond(status.HTTP_200_OK, "Success get all orders", data=usecase.list_orders())

    order_id = _parse_id(id, logger, ORDER_ID_REQUIRED, INVALID_ORDER_ID)
    return _respond(status.HTTP_200_OK, "Success get order by id", data=usecase.get_order(order_id))


@order_router.put("")
async def update_order(
    request: Request,
    usecase: OrderUsecase = Depends(get_order_usecase),
) -> JSONResponse:
    """Replace an order; its creation date is kept."""

    order = await _decode_body(request, Order, logger)
    updated = usecase.update_order(order)
    return _respond(status.HTTP_200_OK, "Success update order", data=updated)


@order_router.delete("")
async def delete_order(
    id: Optional[str] = None,
    usecase: OrderUsecase = Depends(get_order_usecase),
) -> JSONResponse:

    order_id = _parse_id(id, logger, ORDER_ID_REQUIRED, INVALID_ORDER_ID)
    usecase.delete_order(order_id)
    return _respond(status.HTTP_200_OK, "Success delete the order")
