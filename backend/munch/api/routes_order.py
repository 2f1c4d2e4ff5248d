from fastapi import APIRouter, Depends, HTTPException

from munch.exceptions import NotFound
from munch.schemas.order_schema import OrderOut
from munch.services.factory import service_dependency
from munch.services.order_service import OrderConfirmationService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", summary="List orders")
def list_orders(
    svc: OrderConfirmationService = Depends(service_dependency(OrderConfirmationService)),
):
    return {"items": [OrderOut.model_validate(o).model_dump() for o in svc.list_orders()]}


@router.get("/latest", summary="Order confirmation")
def latest_order(
    svc: OrderConfirmationService = Depends(service_dependency(OrderConfirmationService)),
):
    try:
        order = svc.latest_order()
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return OrderOut.model_validate(order).model_dump()
