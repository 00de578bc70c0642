# storefront/api/deps.py
from pathlib import Path
from typing import Dict

from fastapi import Depends, HTTPException, Request
from fastapi.templating import Jinja2Templates

from storefront.services.login_service import LoginService
from storefront.services.session_store import UserSession

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_session(request: Request) -> UserSession:
    return request.state.session


def get_login_service(request: Request) -> LoginService:
    return request.app.state.login_service


def current_username(
    session: UserSession = Depends(get_session),
    auth: LoginService = Depends(get_login_service),
) -> str | None:
    return auth.get_username(session)


def require_username(username: str | None = Depends(current_username)) -> str:
    if username is None:
        raise HTTPException(status_code=401, detail="Debe iniciar sesión")
    return username


async def form_fields(request: Request) -> Dict[str, str]:
    """Raw form body as plain strings, for handlers that validate by hand."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
