# storefront/services/catalog_service.py
from functools import wraps
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.exceptions import CatalogServiceError
from storefront.domain.schemas import CategoryRead, CategorySave, ProductRead, ProductSave
from storefront.repos.category_repo import CategoryRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def wrap_data_errors(func):
    """SQLAlchemyError raised below the service turns into CatalogServiceError."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"Data access error in {func.__name__}: {e}")
            raise CatalogServiceError(str(e)) from e

    return wrapper


class CatalogService:
    """
    Product and category use cases over the request's connection.
    Missing rows come back as None, only data-access failures raise.
    """

    def __init__(self, db: Session):
        self.products = ProductRepo(db)
        self.categories = CategoryRepo(db)

    #query
    @wrap_data_errors
    def list_products(self) -> List[ProductRead]:
        return [ProductRead.from_model(p) for p in self.products.list()]

    @wrap_data_errors
    def get_product(self, product_id: int) -> ProductRead | None:
        product = self.products.get(product_id)
        return ProductRead.from_model(product) if product else None

    @wrap_data_errors
    def list_categories(self) -> List[CategoryRead]:
        return [CategoryRead.from_model(c) for c in self.categories.list()]

    @wrap_data_errors
    def get_category(self, category_id: int) -> CategoryRead | None:
        category = self.categories.get(category_id)
        return CategoryRead.from_model(category) if category else None

    #commands
    @wrap_data_errors
    def save_product(self, product: ProductSave) -> ProductRead | None:
        action = "Insert" if product.is_new else "Update"
        saved = self.products.save(product)
        if saved is None:
            logger.info(f"{action} product {product.id}: no such row")
            return None

        logger.info(f"{action} product {saved.id} ({saved.name})")
        return self.get_product(saved.id)

    @wrap_data_errors
    def delete_product(self, product_id: int) -> bool:
        deleted = self.products.delete(product_id) > 0
        logger.info(f"Delete product {product_id}: {deleted}")
        return deleted

    @wrap_data_errors
    def activate_product(self, product_id: int) -> bool:
        return self.products.activate(product_id) > 0

    @wrap_data_errors
    def deactivate_product(self, product_id: int) -> bool:
        return self.products.deactivate(product_id) > 0

    @wrap_data_errors
    def save_category(self, category: CategorySave) -> CategoryRead | None:
        saved = self.categories.save(category)
        if saved is None:
            return None
        logger.info(f"Saved category {saved.id} ({saved.name})")
        return CategoryRead.from_model(saved)

    @wrap_data_errors
    def delete_category(self, category_id: int) -> bool:
        return self.categories.delete(category_id) > 0

    @wrap_data_errors
    def activate_category(self, category_id: int) -> bool:
        return self.categories.activate(category_id) > 0

    @wrap_data_errors
    def deactivate_category(self, category_id: int) -> bool:
        return self.categories.deactivate(category_id) > 0
