# storefront/api/middleware.py
from fastapi import FastAPI, Request

from storefront.services.session_store import SessionStore, UserSession
from storefront.utils.settings import SESSION_COOKIE_NAME


def install_session_middleware(app: FastAPI, store: SessionStore, cookie_name: str = SESSION_COOKIE_NAME):
    """
    Loads the browser's session before the handler runs (request.state.session)
    and writes it back afterwards. Only the session id travels in the cookie.
    """

    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        session = UserSession(store, request.cookies.get(cookie_name))
        request.state.session = session

        response = await call_next(request)

        send_cookie = session.is_new and session.modified
        session.persist()

        if session.invalidated:
            response.delete_cookie(cookie_name, path="/")
        elif send_cookie:
            response.set_cookie(cookie_name, session.session_id, path="/", httponly=True, samesite="lax")

        return response

    return session_middleware
