from datetime import date
from decimal import Decimal

from storefront.domain.schemas import CategoryRef, ProductRead


def make_product(product_id=1, price="10.00", name="Widget") -> ProductRead:
    return ProductRead(
        id=product_id,
        name=name,
        price=Decimal(price),
        stock=10,
        code=f"W-{product_id}",
        elaboration_date=date(2025, 1, 1),
        expiry_date=date(2026, 1, 1),
        category=CategoryRef(id=1, name="General"),
    )
