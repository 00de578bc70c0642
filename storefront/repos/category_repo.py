# storefront/repos/category_repo.py
from typing import List

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from storefront.data.models.category import CategoryModel
from storefront.domain.schemas import CategorySave


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[CategoryModel]:
        stmt = select(CategoryModel).order_by(CategoryModel.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get(self, category_id: int) -> CategoryModel | None:
        return self.db.get(CategoryModel, category_id)

    def save(self, category: CategorySave) -> CategoryModel | None:
        if category.is_new:
            model = CategoryModel(
                name=category.name,
                description=category.description,
                status=1,
            )
            self.db.add(model)
            self.db.flush()
            return model

        self.db.execute(
            update(CategoryModel)
            .where(CategoryModel.id == category.id)
            .values(name=category.name, description=category.description)
        )
        self.db.flush()
        return self.db.get(CategoryModel, category.id)

    def delete(self, category_id: int) -> int:
        result = self.db.execute(delete(CategoryModel).where(CategoryModel.id == category_id))
        return result.rowcount

    def set_status(self, category_id: int, status: int) -> int:
        result = self.db.execute(
            update(CategoryModel)
            .where(CategoryModel.id == category_id)
            .values(status=status)
        )
        return result.rowcount

    def activate(self, category_id: int) -> int:
        return self.set_status(category_id, 1)

    def deactivate(self, category_id: int) -> int:
        return self.set_status(category_id, 0)
