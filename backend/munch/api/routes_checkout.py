from fastapi import APIRouter, Depends, HTTPException, status

from munch.exceptions import EmptyCart, ValidationFailed
from munch.schemas.cart_schema import CartItemOut, CartOut
from munch.schemas.order_schema import OrderOut, PlaceOrderIn
from munch.services.checkout_service import CheckoutService
from munch.services.factory import service_dependency

router = APIRouter(prefix="/api/checkout", tags=["checkout"])


@router.get("", summary="Checkout summary")
def checkout_summary(svc: CheckoutService = Depends(service_dependency(CheckoutService))):
    summary = svc.summary()
    return CartOut(
        items=[CartItemOut.model_validate(it) for it in summary["items"]],
        total_cents=summary["total_cents"],
    ).model_dump()


@router.post("", status_code=status.HTTP_201_CREATED, summary="Place order")
def place_order(
    payload: PlaceOrderIn,
    svc: CheckoutService = Depends(service_dependency(CheckoutService)),
):
    try:
        order = svc.place_order(payload.user_name, payload.user_address)
    except (ValidationFailed, EmptyCart) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return OrderOut.model_validate(order).model_dump()
