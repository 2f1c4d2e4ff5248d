from fastapi import APIRouter, Depends, HTTPException, status

from munch.exceptions import ValidationFailed
from munch.schemas.food_schema import FoodIn, FoodOut
from munch.services.factory import service_dependency
from munch.services.food_service import FoodListService

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("", summary="List foods")
def list_foods(svc: FoodListService = Depends(service_dependency(FoodListService))):
    foods = svc.list_foods()
    return {"items": [FoodOut.model_validate(f).model_dump() for f in foods]}


@router.post("", status_code=status.HTTP_201_CREATED, summary="Add food")
def add_food(
    payload: FoodIn,
    svc: FoodListService = Depends(service_dependency(FoodListService)),
):
    try:
        food = svc.add_food(
            name=payload.name,
            price_cents=payload.price_cents,
            description=payload.description,
            image_ref=payload.image_ref,
        )
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FoodOut.model_validate(food).model_dump()
