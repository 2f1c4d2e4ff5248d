from fastapi import APIRouter

from munch import __version__
from munch.config import settings
from munch.navigation import resolve
from munch.navigation.routes import (
    ROUT_ABOUT,
    ROUT_CONTACT,
    ROUT_DASHBOARD,
    ROUT_HOME,
    ROUT_ITEM,
    ROUT_SPLASH,
    ROUT_START,
)

router = APIRouter(prefix="/api/screens", tags=["screens"])

APP_NAME = "Munch"


@router.get("/splash", summary="Splash screen")
def splash():
    screen = resolve(ROUT_SPLASH)
    return {
        "title": APP_NAME,
        "delay_ms": settings.SPLASH_DELAY_MS,
        "next": screen.links[0],
    }


@router.get("/start", summary="Start screen")
def start():
    return {
        "title": APP_NAME,
        "headline": "Find Your Order!!",
        "body": "Welcome to Munch, your one-stop shop for online food ordering.",
        "action": {"label": "Get Started!", "route": resolve(ROUT_START).links[0]},
    }


@router.get("/dashboard", summary="Dashboard screen")
def dashboard():
    cards = [
        ("Home", ROUT_HOME),
        ("About", ROUT_ABOUT),
        ("Contact", ROUT_CONTACT),
        ("Products", ROUT_ITEM),
    ]
    return {
        "title": "Dashboard Section",
        "greeting": "Welcome Here!",
        "tagline": "WE VALUE YOUR MONEY!",
        "cards": [{"title": t, "route": r} for t, r in cards],
    }


@router.get("/about", summary="About screen")
def about():
    return {
        "title": f"About {APP_NAME}",
        "body": (
            "Munch is your go-to food ordering app, offering delicious meals from "
            "top restaurants delivered right to your doorstep. We focus on quality, "
            "speed, and satisfaction."
        ),
        "version": __version__,
    }
