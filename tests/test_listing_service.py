"""Unit tests for catalog/service.py -- the listing rules.

Covers:
- product creation requires an existing category (exact, case-sensitive)
- created_at is stamped at creation and ignores caller-supplied values
- full listing: newest first, empty catalog is an empty list
- category listing: zero matches is NotFound
- get/delete miss is NotFound; any caller may delete any product
- orphaned products survive their category disappearing
"""

import pytest

from catalog.models import Product
from catalog.service import ListingService
from core.errors import InvalidCategory, NotFound


def _draft(**overrides) -> Product:
    fields = {"title": "Radio", "category": "Electronics", "price": 20.0}
    fields.update(overrides)
    return Product(**fields)


class TestCategories:
    def test_create_returns_persisted_category(self, listings: ListingService) -> None:
        category = listings.create_category(1, "Electronics", "Gadgets", "http://img/e.png")
        assert category.id is not None
        assert category.name == "Electronics"
        assert listings.get_category("Electronics") == category

    def test_get_unknown_category(self, listings: ListingService) -> None:
        with pytest.raises(NotFound) as exc:
            listings.get_category("Nope")
        assert exc.value.message == "Category not found"

    def test_list_categories(self, listings: ListingService) -> None:
        listings.create_category(1, "A")
        listings.create_category(1, "A")
        assert [c.name for c in listings.list_categories()] == ["A", "A"]


class TestCreateProduct:
    def test_unknown_category_rejected(self, listings: ListingService) -> None:
        with pytest.raises(InvalidCategory):
            listings.create_product(1, _draft(category="Electronics"))
        assert listings.list_products() == []

    def test_category_match_is_case_sensitive(self, listings: ListingService) -> None:
        listings.create_category(1, "Electronics")
        with pytest.raises(InvalidCategory):
            listings.create_product(1, _draft(category="electronics"))
        with pytest.raises(InvalidCategory):
            listings.create_product(1, _draft(category="ELECTRONICS"))

    def test_valid_category_persists_product(self, listings: ListingService) -> None:
        listings.create_category(1, "Electronics")
        product = listings.create_product(1, _draft(images=["x.jpg"]))
        assert product.id is not None
        assert product.category == "Electronics"
        assert product.images == ["x.jpg"]
        assert product.created_at

    def test_caller_cannot_choose_created_at_or_id(self, listings: ListingService) -> None:
        listings.create_category(1, "Electronics")
        product = listings.create_product(1, _draft(id=999, created_at="1999-01-01T00:00:00+00:00"))
        assert product.id != 999
        assert not product.created_at.startswith("1999")


class TestListProducts:
    def test_empty_catalog_is_empty_list(self, listings: ListingService) -> None:
        assert listings.list_products() == []

    def test_newest_first(self, listings: ListingService) -> None:
        listings.create_category(1, "Electronics")
        first = listings.create_product(1, _draft(title="first"))
        second = listings.create_product(1, _draft(title="second"))
        third = listings.create_product(1, _draft(title="third"))
        assert [p.id for p in listings.list_products()] == [third.id, second.id, first.id]

    def test_by_category(self, listings: ListingService) -> None:
        listings.create_category(1, "Electronics")
        listings.create_category(1, "Furniture")
        listings.create_product(1, _draft(title="tv"))
        listings.create_product(1, _draft(title="sofa", category="Furniture"))
        assert [p.title for p in listings.list_products_by_category("Furniture")] == ["sofa"]

    def test_empty_category_listing_is_not_found(self, listings: ListingService) -> None:
        listings.create_category(1, "Furniture")
        with pytest.raises(NotFound) as exc:
            listings.list_products_by_category("Furniture")
        assert exc.value.message == "No products found in category: Furniture"

    def test_unknown_category_listing_is_not_found(self, listings: ListingService) -> None:
        with pytest.raises(NotFound):
            listings.list_products_by_category("NoSuchCat")


class TestGetAndDelete:
    def test_get_missing(self, listings: ListingService) -> None:
        with pytest.raises(NotFound):
            listings.get_product(404)

    def test_any_authenticated_user_may_delete(self, listings: ListingService) -> None:
        listings.create_category(1, "Electronics")
        product = listings.create_product(1, _draft())
        listings.delete_product(2, product.id)
        with pytest.raises(NotFound):
            listings.get_product(product.id)

    def test_delete_missing(self, listings: ListingService) -> None:
        with pytest.raises(NotFound) as exc:
            listings.delete_product(1, 404)
        assert exc.value.message == "Product not found"

    def test_orphaned_product_is_kept(self, listings: ListingService, product_store) -> None:
        """Products are not re-validated after creation."""
        pid = product_store.create(Product(title="ghost", category="Removed", price=1))
        assert listings.get_product(pid).category == "Removed"
        assert [p.id for p in listings.list_products_by_category("Removed")] == [pid]
