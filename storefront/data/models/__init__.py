#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.category import CategoryModel
from storefront.data.models.product import ProductModel

__all__ = ["CategoryModel", "ProductModel"]
