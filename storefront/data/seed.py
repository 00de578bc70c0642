# storefront/data/seed.py
from datetime import date
from decimal import Decimal

from storefront.data.database import transaction
from storefront.data.models import CategoryModel, ProductModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def seed(session_factory=None):
    with transaction(session_factory) as db:
        # not forcing: only seed if empty
        if db.query(CategoryModel).first():
            return

        computing = CategoryModel(name="Computación", description="Equipos y accesorios", status=1)
        kitchen = CategoryModel(name="Cocina", description="Artículos de cocina", status=1)
        db.add_all([computing, kitchen])
        db.flush()

        db.add_all(
            [
                ProductModel(
                    name="Laptop", category_id=computing.id, stock=10, price=Decimal("256.23"),
                    description="Laptop 14 pulgadas", code="LAP-001",
                    elaboration_date=date(2025, 1, 10), expiry_date=date(2030, 1, 10), condition=1,
                ),
                ProductModel(
                    name="Mouse", category_id=computing.id, stock=50, price=Decimal("25.50"),
                    description="Mouse inalámbrico", code="MOU-001",
                    elaboration_date=date(2025, 2, 1), expiry_date=date(2030, 2, 1), condition=1,
                ),
                ProductModel(
                    name="Cocina", category_id=kitchen.id, stock=5, price=Decimal("25.35"),
                    description="Cocina de inducción", code="COC-001",
                    elaboration_date=date(2025, 3, 15), expiry_date=date(2032, 3, 15), condition=1,
                ),
            ]
        )
        logger.info("Seeded catalog with 2 categories and 3 products")


if __name__ == "__main__":
    seed()
