#storefront/api/routers/products.py
from typing import Dict

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from storefront.api.deps import current_username, form_fields, require_username, templates
from storefront.data.database import get_conn
from storefront.domain.forms import parse_id, parse_product_form, product_to_form
from storefront.services.catalog_service import CatalogService

router = APIRouter(tags=["products"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("/productos")
@router.get("/productos.html")
def list_products(
    request: Request,
    username: str | None = Depends(current_username),
    conn: Session = Depends(get_conn, scope="function"),
):
    svc = get_service(conn)
    return templates.TemplateResponse(
        request,
        "productos.html",
        {"products": svc.list_products(), "username": username},
    )


@router.get("/crear")
@router.get("/producto/form")
def product_form(
    request: Request,
    product_id: str | None = Query(None, alias="id"),
    conn: Session = Depends(get_conn, scope="function"),
):
    svc = get_service(conn)

    # a valid id -> edit, otherwise an empty form for a new product
    pid = parse_id(product_id)
    product = svc.get_product(pid) if pid is not None else None

    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "form": product_to_form(product),
            "errors": {},
            "categories": svc.list_categories(),
        },
    )


@router.post("/crear")
@router.post("/producto/form")
def save_product(
    request: Request,
    fields: Dict[str, str] = Depends(form_fields),
    conn: Session = Depends(get_conn, scope="function"),
):
    svc = get_service(conn)
    product, errors = parse_product_form(fields)

    if errors:
        return templates.TemplateResponse(
            request,
            "form.html",
            {
                "form": fields,
                "errors": errors,
                "categories": svc.list_categories(),
            },
        )

    svc.save_product(product)
    return RedirectResponse("/productos", status_code=302)


def _catalog_action(action: str, product_id: str | None, conn: Session) -> RedirectResponse:
    pid = parse_id(product_id)
    if pid is not None:
        getattr(get_service(conn), f"{action}_product")(pid)
    return RedirectResponse("/productos", status_code=302)


@router.get("/eliminar")
def delete_product(
    product_id: str | None = Query(None, alias="id"),
    _: str = Depends(require_username),
    conn: Session = Depends(get_conn, scope="function"),
):
    return _catalog_action("delete", product_id, conn)


@router.get("/activar")
def activate_product(
    product_id: str | None = Query(None, alias="id"),
    _: str = Depends(require_username),
    conn: Session = Depends(get_conn, scope="function"),
):
    return _catalog_action("activate", product_id, conn)


@router.get("/desactivar")
def deactivate_product(
    product_id: str | None = Query(None, alias="id"),
    _: str = Depends(require_username),
    conn: Session = Depends(get_conn, scope="function"),
):
    return _catalog_action("deactivate", product_id, conn)
