# storefront/domain/cart.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from storefront.domain.exceptions import InvalidItem
from storefront.domain.schemas import ProductRead

# IVA
TAX_RATE = Decimal("0.15")


class CartLineItem(BaseModel):
    product: ProductRead
    quantity: int = Field(1, ge=1)

    @property
    def product_id(self) -> Optional[int]:
        return self.product.id

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


class Cart(BaseModel):
    """
    Session cart: one line per product id, insertion order kept for display.
    Subtotal, tax and total are always computed from the current lines, never stored.
    """

    items: List[CartLineItem] = Field(default_factory=list)

    def add_item(self, product: ProductRead, quantity: int = 1) -> None:
        if product is None or product.id is None:
            raise InvalidItem("El producto no tiene identificador")

        existing = self._find(product.id)
        if existing is not None:
            # a repeated add always counts as one more unit, whatever quantity was asked
            existing.quantity += 1
            return

        if quantity < 1:
            raise InvalidItem("La cantidad debe ser mayor que 0")

        self.items.append(CartLineItem(product=product, quantity=quantity))

    def _find(self, product_id: int) -> Optional[CartLineItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def subtotal(self) -> Decimal:
        return sum((i.subtotal for i in self.items), Decimal("0"))

    @property
    def tax(self) -> Decimal:
        return self.subtotal * TAX_RATE

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax

    #session (de)serialization, the session store only keeps json
    def to_session(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_session(cls, data: Optional[Dict[str, Any]]) -> Optional["Cart"]:
        if data is None:
            return None
        return cls.model_validate(data)
