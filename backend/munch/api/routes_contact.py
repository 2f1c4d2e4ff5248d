from fastapi import APIRouter, Depends, HTTPException, status

from munch.exceptions import ValidationFailed
from munch.schemas.contact_schema import ContactIn
from munch.services.contact_service import SUCCESS_MESSAGE, ContactService
from munch.services.factory import service_dependency

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", status_code=status.HTTP_201_CREATED, summary="Send a contact message")
def send_message(
    payload: ContactIn,
    svc: ContactService = Depends(service_dependency(ContactService)),
):
    try:
        c = svc.save_contact(payload.name, payload.email, payload.message)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"id": c.id, "detail": SUCCESS_MESSAGE}
