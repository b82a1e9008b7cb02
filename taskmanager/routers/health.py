"""Liveness endpoint, mounted under /health by ``create_app``."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/z")
def liveness():
    """Answers as long as the process serves requests; the database is not touched."""
    return {"status": "ok"}
