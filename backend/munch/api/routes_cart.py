from fastapi import APIRouter, Depends, HTTPException, status

from munch.exceptions import NotFound, ValidationFailed
from munch.schemas.cart_schema import AddCartItemIn, CartItemOut, CartOut
from munch.services.cart_service import CartService
from munch.services.factory import service_dependency

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", summary="Get cart")
def get_cart(svc: CartService = Depends(service_dependency(CartService))):
    items = svc.list_items()
    return CartOut(
        items=[CartItemOut.model_validate(it) for it in items],
        total_cents=svc.total_cents(items),
    ).model_dump()


@router.post("/items", status_code=status.HTTP_201_CREATED, summary="Add item to cart")
def add_item(
    payload: AddCartItemIn,
    svc: CartService = Depends(service_dependency(CartService)),
):
    try:
        if payload.food_id is not None:
            item = svc.add_food(payload.food_id, payload.quantity)
        else:
            item = svc.add_item(payload.name, payload.price_cents, payload.quantity)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CartItemOut.model_validate(item).model_dump()


@router.delete("/items/{item_id}", summary="Remove item")
def remove_item(
    item_id: int,
    svc: CartService = Depends(service_dependency(CartService)),
):
    try:
        svc.remove_item(item_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"ok": True}
