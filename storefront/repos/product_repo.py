# storefront/repos/product_repo.py
from typing import List

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session, joinedload

from storefront.data.models.product import ProductModel
from storefront.domain.schemas import ProductSave


class ProductRepo:
    """
    SQL access for `producto`. Never commits: the request boundary owns the transaction,
    writes are only flushed so generated ids are available.
    """

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[ProductModel]:
        stmt = (
            select(ProductModel)
            .join(ProductModel.category)
            .options(joinedload(ProductModel.category))
            .order_by(ProductModel.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get(self, product_id: int) -> ProductModel | None:
        stmt = (
            select(ProductModel)
            .join(ProductModel.category)
            .options(joinedload(ProductModel.category))
            .where(ProductModel.id == product_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def save(self, product: ProductSave) -> ProductModel | None:
        values = {
            "name": product.name,
            "category_id": product.category_id,
            "stock": product.stock,
            "price": product.price,
            "description": product.description,
            "code": product.code,
            "elaboration_date": product.elaboration_date,
            "expiry_date": product.expiry_date,
        }

        if product.is_new:
            # new products always start active
            model = ProductModel(condition=1, **values)
            self.db.add(model)
            self.db.flush()
            return model

        self.db.execute(
            update(ProductModel).where(ProductModel.id == product.id).values(**values)
        )
        self.db.flush()
        return self.db.get(ProductModel, product.id)

    def delete(self, product_id: int) -> int:
        result = self.db.execute(delete(ProductModel).where(ProductModel.id == product_id))
        return result.rowcount

    def set_condition(self, product_id: int, condition: int) -> int:
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(condition=condition)
        )
        return result.rowcount

    def activate(self, product_id: int) -> int:
        return self.set_condition(product_id, 1)

    def deactivate(self, product_id: int) -> int:
        return self.set_condition(product_id, 0)
