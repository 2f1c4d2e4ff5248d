from fastapi import APIRouter, HTTPException

from munch.exceptions import UnknownRouteError
from munch.navigation import START_DESTINATION, all_screens, resolve

router = APIRouter(prefix="/api/navigation", tags=["navigation"])


@router.get("", summary="Route table")
def list_routes():
    return {
        "start_destination": START_DESTINATION,
        "screens": [s.as_dict() for s in all_screens()],
    }


@router.get("/{route:path}", summary="Resolve a route")
def get_route(route: str):
    try:
        return resolve(route).as_dict()
    except UnknownRouteError as e:
        raise HTTPException(status_code=404, detail=str(e))
