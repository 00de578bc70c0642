#storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_session, templates, current_username
from storefront.data.database import get_conn
from storefront.domain.cart import Cart, TAX_RATE
from storefront.domain.forms import parse_id
from storefront.services.catalog_service import CatalogService
from storefront.services.invoice_service import INVOICE_FILENAME, render_invoice
from storefront.services.session_store import UserSession
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


@router.get("/agregar-carro")
def add_to_cart(
    product_id: str | None = Query(None, alias="id"),
    session: UserSession = Depends(get_session),
    conn: Session = Depends(get_conn, scope="function"),
):
    # unknown or malformed ids are ignored, the user still lands on the cart
    pid = parse_id(product_id)
    if pid is not None:
        product = CatalogService(conn).get_product(pid)

        if product is not None:
            cart = session.cart() or Cart()
            cart.add_item(product)
            session.save_cart(cart)
            logger.info(f"Product {pid} added to cart, {len(cart.items)} lines")
        else:
            logger.info(f"Product {pid} not found, cart unchanged")

    return RedirectResponse("/ver-carro", status_code=302)


@router.get("/ver-carro")
def view_cart(
    request: Request,
    session: UserSession = Depends(get_session),
    username: str | None = Depends(current_username),
):
    return templates.TemplateResponse(
        request,
        "carro.html",
        {"cart": session.cart(), "username": username, "tax_rate": int(TAX_RATE * 100)},
    )


@router.get("/descargar-factura")
def download_invoice(session: UserSession = Depends(get_session)):
    cart = session.cart()

    # nothing to print for an empty cart
    if cart is None or cart.is_empty:
        return RedirectResponse("/ver-carro", status_code=302)

    pdf = render_invoice(cart)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={INVOICE_FILENAME}"},
    )
