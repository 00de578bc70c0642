# storefront/domain/forms.py
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import re
from typing import Dict, Mapping, Optional, Tuple

from storefront.domain.schemas import ProductRead, ProductSave

FIELDS = (
    "id",
    "nombre",
    "categoria",
    "stock",
    "precio",
    "descripcion",
    "codigo",
    "fecha_elaboracion",
    "fecha_caducidad",
)

# ids and stock live in 32-bit INTEGER columns
MAX_INT = 2**31 - 1

# precio is NUMERIC(10, 2)
MAX_PRICE = Decimal("100000000")

_INT_RE = re.compile(r"-?[0-9]+")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_int(value: Optional[str]) -> Optional[int]:
    if _blank(value):
        return None
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def parse_id(value: Optional[str]) -> Optional[int]:
    """A positive integer that fits the INTEGER columns, otherwise None."""
    number = parse_int(value)
    if number is None or not 0 < number <= MAX_INT:
        return None
    return number


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    if _blank(value):
        return None
    try:
        number = Decimal(value.strip().replace(",", "."))
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def parse_date(value: Optional[str]) -> Optional[date]:
    if _blank(value):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_product_form(fields: Mapping[str, str]) -> Tuple[Optional[ProductSave], Dict[str, str]]:
    """
    Validate the product form.

    Returns ``(product, {})`` when everything is valid, otherwise ``(None, errors)``
    with one message per offending field. Nothing here raises.
    """
    errors: Dict[str, str] = {}

    name = fields.get("nombre")
    if _blank(name):
        errors["nombre"] = "El nombre no puede estar vacío"

    category_id = parse_id(fields.get("categoria"))
    if category_id is None:
        errors["categoria"] = "La categoría no puede estar vacía"

    stock = parse_id(fields.get("stock"))
    if stock is None:
        errors["stock"] = "El stock no puede estar vacío"

    raw_price = fields.get("precio")
    price = parse_decimal(raw_price)
    if _blank(raw_price):
        errors["precio"] = "El precio no puede estar vacío"
    elif price is None:
        errors["precio"] = "El precio es un número inválido"
    elif price <= 0:
        errors["precio"] = "El precio debe ser mayor que 0"
    elif price >= MAX_PRICE:
        errors["precio"] = "El precio es un número inválido"

    code = fields.get("codigo")
    if _blank(code):
        errors["codigo"] = "El código no puede estar vacío"

    raw_elaboration = fields.get("fecha_elaboracion")
    elaboration_date = parse_date(raw_elaboration)
    if _blank(raw_elaboration):
        errors["fecha_elaboracion"] = "La fecha de elaboración no puede estar vacía"
    elif elaboration_date is None:
        errors["fecha_elaboracion"] = "La fecha de elaboración no es válida (aaaa-mm-dd)"

    raw_expiry = fields.get("fecha_caducidad")
    expiry_date = parse_date(raw_expiry)
    if _blank(raw_expiry):
        errors["fecha_caducidad"] = "La fecha de caducidad no puede estar vacía"
    elif expiry_date is None:
        errors["fecha_caducidad"] = "La fecha de caducidad no es válida (aaaa-mm-dd)"
    elif elaboration_date is not None and expiry_date < elaboration_date:
        errors["fecha_caducidad"] = "La fecha de caducidad no puede ser anterior a la de elaboración"

    if errors:
        return None, errors

    product_id = parse_id(fields.get("id"))
    description = fields.get("descripcion")

    return ProductSave(
        id=product_id,
        name=name.strip(),
        category_id=category_id,
        stock=stock,
        price=price,
        description=description.strip() if description else None,
        code=code.strip(),
        elaboration_date=elaboration_date,
        expiry_date=expiry_date,
    ), errors


def product_to_form(product: Optional[ProductRead]) -> Dict[str, str]:
    """Form values for the edit view, empty strings for a new product."""
    if product is None:
        return {name: "" for name in FIELDS}

    return {
        "id": str(product.id or ""),
        "nombre": product.name or "",
        "categoria": str(product.category.id or ""),
        "stock": str(product.stock),
        "precio": str(product.price),
        "descripcion": product.description or "",
        "codigo": product.code or "",
        "fecha_elaboracion": product.elaboration_date.isoformat() if product.elaboration_date else "",
        "fecha_caducidad": product.expiry_date.isoformat() if product.expiry_date else "",
    }
