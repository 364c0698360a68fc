"""
tests/conftest.py -- Shared test fixtures for NearbyMarket tests.

This module provides:
  - _make_test_stores(): creates isolated in-memory DBs for users + catalog
  - _patch_lifespan(): wires test stores into app.state, bypassing real startup
  - api_client: TestClient plus a seeded user's JWT for API integration tests
  - user_store / category_store / product_store / listings: per-test stores

Design: Named shared-memory SQLite URIs (not plain :memory:) are used for the
TestClient stores because route handlers run in a thread pool. Plain :memory:
DBs are per-connection and would present a blank schema to each worker
thread. The named URI format (file:name?mode=memory&cache=shared&uri=true)
shares one in-memory instance across all connections in the same process.
Each test engine holds a single StaticPool connection, which keeps the
shared database alive for the life of the store; SQLAlchemy would otherwise
pick a pool for the memory URI on its own.

DEBUG must be set before any auth module import so get_settings()
auto-generates SECRET_KEY instead of raising ValueError. Rate limiting is
switched off for the same reason: many tests hit /login and /signup.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from contextlib import asynccontextmanager

# CRITICAL: Set before any auth/core import.
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from api.main import app
from auth.models import User
from auth.store import UserStore
from auth.tokens import create_access_token, hash_password
from catalog.service import ListingService
from catalog.store import CategoryStore, ProductStore

SELLER_EMAIL = "seller@x.com"
SELLER_PASSWORD = "sellerpass1"

# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------


def _make_test_stores(db_suffix: str) -> tuple[UserStore, CategoryStore, ProductStore]:
    """Create isolated named shared-memory SQLite stores for test isolation.

    Args:
        db_suffix: Unique string appended to the DB name so test modules
                   don't share state.
    """
    auth_url = f"sqlite:///file:test_auth_{db_suffix}?mode=memory&cache=shared&uri=true"
    catalog_url = f"sqlite:///file:test_catalog_{db_suffix}?mode=memory&cache=shared&uri=true"
    return (
        UserStore(db_url=auth_url, poolclass=StaticPool),
        CategoryStore(db_url=catalog_url, poolclass=StaticPool),
        ProductStore(db_url=catalog_url, poolclass=StaticPool),
    )


def _patch_lifespan(user_store: UserStore, categories: CategoryStore, products: ProductStore):
    """Return an async context manager that replaces the real lifespan."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.user_store = user_store
        app.state.categories = categories
        app.state.products = products
        app.state.listings = ListingService(categories, products)
        yield

    return test_lifespan


# ---------------------------------------------------------------------------
# Module-scoped fixtures -- one TestClient per test module for speed
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def api_client(request) -> Generator[tuple[TestClient, str, int], None, None]:
    """Yield (client, token, user_id) for API integration tests.

    The TestClient uses the real FastAPI app with a patched lifespan so
    tests hit real route handlers but use isolated in-memory stores.
    A seller account is created up front and a JWT issued for it.
    """
    suffix = request.module.__name__.rsplit(".", 1)[-1]
    user_store, categories, products = _make_test_stores(suffix)

    seller = User(name="Seller", email=SELLER_EMAIL, hashed_password=hash_password(SELLER_PASSWORD))
    uid = user_store.create_user(seller)
    token = create_access_token(uid)

    app.router.lifespan_context = _patch_lifespan(user_store, categories, products)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, token, uid

    products.close()
    categories.close()
    user_store.close()


# ---------------------------------------------------------------------------
# Function-scoped stores for unit tests
# ---------------------------------------------------------------------------


@pytest.fixture
def user_store() -> Generator[UserStore, None, None]:
    store = UserStore("sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def category_store() -> Generator[CategoryStore, None, None]:
    store = CategoryStore("sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def product_store() -> Generator[ProductStore, None, None]:
    store = ProductStore("sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def listings(category_store: CategoryStore, product_store: ProductStore) -> ListingService:
    return ListingService(category_store, product_store)


@pytest.fixture
def unique_email() -> str:
    return f"user-{uuid.uuid4().hex[:12]}@x.com"
