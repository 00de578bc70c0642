#storefront/api/routers/health.py
from fastapi import APIRouter, Depends, Request

from storefront.api.deps import current_username, templates

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/")
@router.get("/index.html")
def index(request: Request, username: str | None = Depends(current_username)):
    return templates.TemplateResponse(request, "index.html", {"username": username})
