"""
catalog/service.py -- Listing rules on top of the category and product stores.

The stores answer "what is there"; this module decides what a miss means:

  - a product may only be created under an existing category name
    (exact, case-sensitive match at creation time, never re-checked);
  - a category-filtered listing with no matches is NotFound, while the full
    listing with no matches is just an empty list;
  - any authenticated caller may delete any product -- the creator of a
    listing is not recorded.

user_id arguments identify the authenticated caller for logging; nothing
here authorizes on them. Authentication itself happens in
auth.dependencies before a route ever reaches the service.
"""

import logging
from dataclasses import replace
from typing import Optional

from catalog.models import Category, Product
from catalog.store import CategoryStore, ProductStore
from core.errors import InternalError, InvalidCategory, NotFound

logger = logging.getLogger("nearbymarket.catalog")


class ListingService:
    def __init__(self, categories: CategoryStore, products: ProductStore) -> None:
        self.categories = categories
        self.products = products

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def create_category(
        self,
        user_id: int,
        name: str,
        description: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Category:
        category_id = self.categories.create(Category(name=name, description=description, image=image))
        created = self.categories.get_by_id(category_id)
        if created is None:
            raise InternalError("Category not found after write")
        logger.info("Category %r created by user %d", name, user_id)
        return created

    def list_categories(self) -> list[Category]:
        return self.categories.list_all()

    def get_category(self, name: str) -> Category:
        category = self.categories.get_by_name(name)
        if category is None:
            raise NotFound("Category not found")
        return category

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def create_product(self, user_id: int, draft: Product) -> Product:
        """Validate the category reference, then persist the listing.

        The id and created_at on the draft are ignored; the store assigns both.
        """
        if self.categories.get_by_name(draft.category) is None:
            raise InvalidCategory()

        product_id = self.products.create(replace(draft, id=None, created_at=""))
        created = self.products.get_by_id(product_id)
        if created is None:
            raise InternalError("Product not found after write")
        logger.info("Product %d listed in %r by user %d", product_id, draft.category, user_id)
        return created

    def list_products(self) -> list[Product]:
        """All products, newest first. An empty catalog is an empty list."""
        return self.products.list_all()

    def list_products_by_category(self, category: str) -> list[Product]:
        """Products in one category. Zero matches is reported as NotFound."""
        products = self.products.list_by_category(category)
        if not products:
            raise NotFound(f"No products found in category: {category}")
        return products

    def get_product(self, product_id: int) -> Product:
        product = self.products.get_by_id(product_id)
        if product is None:
            raise NotFound("Product not found")
        return product

    def delete_product(self, user_id: int, product_id: int) -> None:
        if not self.products.delete(product_id):
            raise NotFound("Product not found")
        logger.info("Product %d deleted by user %d", product_id, user_id)
