"""Catalog use cases over a real SQLite database."""

from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from storefront.data.database import transaction
from storefront.domain.exceptions import CatalogServiceError
from storefront.domain.schemas import CategorySave, ProductSave
from storefront.services.catalog_service import CatalogService


def _product(**overrides):
    values = dict(
        name="Monitor",
        category_id=1,
        stock=3,
        price=Decimal("899.00"),
        description="27 pulgadas",
        code="MON-01",
        elaboration_date=date(2025, 1, 1),
        expiry_date=date(2030, 1, 1),
    )
    values.update(overrides)
    return ProductSave(**values)


@pytest.fixture()
def svc(catalog):
    with transaction(catalog) as db:
        yield CatalogService(db)


class TestProductQueries:

    def test_list_is_ordered_by_id_with_category_name(self, svc):
        products = svc.list_products()

        assert [p.id for p in products] == [1, 2, 3]
        assert products[0].name == "Laptop"
        assert products[0].category.name == "Computación"
        assert products[2].category.name == "Cocina"

    def test_get_existing(self, svc):
        product = svc.get_product(2)
        assert product.name == "Mouse"
        assert product.price == Decimal("25.50")
        assert product.active

    def test_get_missing_is_none(self, svc):
        assert svc.get_product(999) is None


class TestSaveProduct:

    @pytest.mark.parametrize("new_id", [None, 0])
    def test_without_id_inserts(self, svc, new_id):
        saved = svc.save_product(_product(id=new_id))

        assert saved.id == 4
        assert saved.active
        assert len(svc.list_products()) == 4

    def test_with_id_updates(self, svc):
        saved = svc.save_product(_product(id=2, name="Mouse gamer", price=Decimal("30.00")))

        assert saved.id == 2
        assert saved.name == "Mouse gamer"
        assert svc.get_product(2).price == Decimal("30.00")
        assert len(svc.list_products()) == 3

    def test_update_of_missing_row(self, svc):
        assert svc.save_product(_product(id=500)) is None
        assert len(svc.list_products()) == 3


class TestProductLifecycle:

    def test_deactivate_and_activate(self, svc):
        assert svc.deactivate_product(1)
        assert not svc.get_product(1).active

        assert svc.activate_product(1)
        assert svc.get_product(1).active

    def test_delete(self, svc):
        assert svc.delete_product(3)
        assert svc.get_product(3) is None
        assert not svc.delete_product(3)


class TestCategories:

    def test_list_and_get(self, svc):
        categories = svc.list_categories()
        assert [c.name for c in categories] == ["Computación", "Cocina"]
        assert svc.get_category(2).name == "Cocina"
        assert svc.get_category(42) is None

    def test_insert_update_and_status(self, svc):
        created = svc.save_category(CategorySave(name="Hogar", description="Casa"))
        assert created.id == 3
        assert created.active

        updated = svc.save_category(CategorySave(id=3, name="Hogar y jardín"))
        assert updated.name == "Hogar y jardín"

        assert svc.deactivate_category(3)
        assert not svc.get_category(3).active
        assert svc.activate_category(3)
        assert svc.get_category(3).active

    def test_delete_unused_category(self, svc):
        svc.save_category(CategorySave(name="Temporal"))
        assert svc.delete_category(3)
        assert svc.get_category(3) is None


class TestDataAccessErrors:

    def test_sqlalchemy_error_is_wrapped(self, svc):
        svc.products.list = Mock(side_effect=OperationalError("SELECT", {}, Exception("db down")))

        with pytest.raises(CatalogServiceError) as exc_info:
            svc.list_products()

        assert isinstance(exc_info.value.__cause__, OperationalError)
