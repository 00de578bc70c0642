# storefront/main.py
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

from storefront.api.middleware import install_session_middleware
from storefront.api.routers import auth, cart, health, products
from storefront.data.database import Base, SessionLocal, engine, get_conn
from storefront.domain.exceptions import CatalogServiceError
from storefront.services.login_service import LoginService
from storefront.services.session_store import SessionStore, create_session_store
from storefront.utils.logging import get_logger

# import all models before create_all
from storefront.data.models import CategoryModel, ProductModel  # noqa: F401

logger = get_logger(__name__)


def init_db(bind=None):
    bind = bind or engine
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        raise


async def data_access_error_handler(request: Request, exc: Exception):
    # the transaction has already been rolled back by get_conn
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse("Error interno del servidor", status_code=500)


def create_app(
    session_store: SessionStore | None = None,
    session_factory=None,
    login_service: LoginService | None = None,
    create_tables: bool = True,
) -> FastAPI:
    if create_tables:
        factory_bind = session_factory.kw.get("bind") if session_factory is not None else None
        init_db(factory_bind)

    # every request runs inside one transactional connection, committed
    # before the response is sent
    app = FastAPI(
        title="Sistema de Ventas",
        version="1.0.0",
        dependencies=[Depends(get_conn, scope="function")],
    )

    app.state.session_factory = session_factory or SessionLocal
    app.state.login_service = login_service or LoginService()

    app.add_exception_handler(CatalogServiceError, data_access_error_handler)
    app.add_exception_handler(SQLAlchemyError, data_access_error_handler)

    install_session_middleware(app, session_store or create_session_store())

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(products.router)
    app.include_router(cart.router)

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
