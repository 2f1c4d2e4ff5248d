import pytest

from munch.exceptions import UnknownServiceError
from munch.services.cart_service import CartService
from munch.services.factory import create_service, service_dependency


def test_create_known_service(db):
    svc = create_service(CartService, db)
    assert isinstance(svc, CartService)
    assert svc.db is db


@pytest.mark.parametrize("cls", [object, dict, "CartService"])
def test_unknown_service_class(db, cls):
    with pytest.raises(UnknownServiceError, match="Unknown ViewModel class"):
        create_service(cls, db)


def test_unknown_service_dependency():
    with pytest.raises(UnknownServiceError):
        service_dependency(object)
