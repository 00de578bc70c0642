# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal
from datetime import date


class CategoryRef(BaseModel):
    """Category snapshot carried by every product read."""

    id: Optional[int] = None
    name: Optional[str] = None


class CategoryRead(BaseModel):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    active: bool = True

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_model(cls, model) -> "CategoryRead":
        return cls(
            id=model.id,
            name=model.name,
            description=model.description,
            active=bool(model.status),
        )


class ProductRead(BaseModel):
    """Product as seen by handlers, the cart and the invoice."""

    id: Optional[int] = None
    name: str
    price: Decimal
    stock: int = 0
    description: Optional[str] = None
    code: Optional[str] = None
    elaboration_date: Optional[date] = None
    expiry_date: Optional[date] = None
    active: bool = True
    category: CategoryRef = Field(default_factory=CategoryRef)

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_model(cls, model) -> "ProductRead":
        return cls(
            id=model.id,
            name=model.name,
            price=model.price,
            stock=model.stock,
            description=model.description,
            code=model.code,
            elaboration_date=model.elaboration_date,
            expiry_date=model.expiry_date,
            active=bool(model.condition),
            category=CategoryRef(
                id=model.category_id,
                name=model.category.name if model.category else None,
            ),
        )


class ProductSave(BaseModel):
    """Write model: id None or <= 0 means insert, anything else updates by id."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    category_id: int = Field(..., gt=0)
    stock: int = Field(..., ge=0)
    price: Decimal = Field(..., gt=0)
    description: Optional[str] = None
    code: str = Field(..., min_length=1)
    elaboration_date: date
    expiry_date: date

    @property
    def is_new(self) -> bool:
        return self.id is None or self.id <= 0


class CategorySave(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.id is None or self.id <= 0
