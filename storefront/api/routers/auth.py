#storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse

from storefront.api.deps import get_login_service, get_session, templates
from storefront.services.login_service import LoginService
from storefront.services.session_store import UserSession

router = APIRouter(tags=["auth"])


@router.get("/login")
@router.get("/login.html")
def login_page(
    request: Request,
    session: UserSession = Depends(get_session),
    auth: LoginService = Depends(get_login_service),
):
    username = auth.get_username(session)

    if username:
        return templates.TemplateResponse(
            request,
            "greeting.html",
            {"username": username, "login_count": auth.login_count},
        )

    return templates.TemplateResponse(request, "login.html", {})


@router.post("/login")
@router.post("/login.html")
def login(
    user: str | None = Form(None),
    password: str | None = Form(None),
    session: UserSession = Depends(get_session),
    auth: LoginService = Depends(get_login_service),
):
    if not auth.login(session, user, password):
        raise HTTPException(
            status_code=401,
            detail="Lo sentimos no tiene acceso o credenciales incorrectas",
        )

    return RedirectResponse("/index.html", status_code=302)


@router.get("/logout")
def logout(
    session: UserSession = Depends(get_session),
    auth: LoginService = Depends(get_login_service),
):
    auth.logout(session)
    return RedirectResponse("/login.html", status_code=302)
