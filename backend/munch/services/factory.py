from typing import Type, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Session

from munch.db import get_db
from munch.exceptions import UnknownServiceError
from munch.services.auth_service import AuthService
from munch.services.cart_service import CartService
from munch.services.checkout_service import CheckoutService
from munch.services.contact_service import ContactService
from munch.services.food_service import FoodListService
from munch.services.order_service import OrderConfirmationService

T = TypeVar("T")

KNOWN_SERVICES = (
    AuthService,
    CartService,
    CheckoutService,
    ContactService,
    FoodListService,
    OrderConfirmationService,
)


def create_service(service_cls: Type[T], db: Session) -> T:
    """Build the per-screen service for `service_cls` bound to `db`."""
    if isinstance(service_cls, type) and issubclass(service_cls, KNOWN_SERVICES):
        return service_cls(db)
    raise UnknownServiceError("Unknown ViewModel class")


def service_dependency(service_cls: Type[T]):
    """FastAPI dependency yielding a service built on the request session."""
    # fail at import time rather than on the first request
    if not (isinstance(service_cls, type) and issubclass(service_cls, KNOWN_SERVICES)):
        raise UnknownServiceError("Unknown ViewModel class")

    def _dep(db: Session = Depends(get_db)) -> T:
        return create_service(service_cls, db)

    return _dep
