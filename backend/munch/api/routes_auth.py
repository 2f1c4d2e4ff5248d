from fastapi import APIRouter, Depends, HTTPException, status

from munch.exceptions import DuplicateUser, InvalidCredentials, ValidationFailed
from munch.navigation.routes import ROUT_HOME, ROUT_LOGIN
from munch.schemas.user_schema import LoginIn, RegisterIn, UserOut
from munch.services.auth_service import AuthService
from munch.services.factory import service_dependency

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register")
def register(
    payload: RegisterIn,
    svc: AuthService = Depends(service_dependency(AuthService)),
):
    try:
        user = svc.register(payload.username, payload.email, payload.password)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateUser as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {"user": UserOut.model_validate(user).model_dump(), "next": ROUT_LOGIN}


@router.post("/login", summary="Login")
def login(
    payload: LoginIn,
    svc: AuthService = Depends(service_dependency(AuthService)),
):
    try:
        user = svc.login(payload.username, payload.password)
    except InvalidCredentials as e:
        raise HTTPException(status_code=401, detail=str(e))
    return {"user": UserOut.model_validate(user).model_dump(), "next": ROUT_HOME}
