"""
catalog/store.py -- SQLAlchemy-backed persistence for categories and products.

Uses SQLAlchemy Core (not ORM) so the dataclasses in catalog/models.py remain
the authoritative domain representation. Swapping SQLite for PostgreSQL is a
connection string change, not a rewrite.

Pattern: Repository + Data Mapper. CategoryStore and ProductStore are the
repositories, one per entity, each the sole owner of its table. The _row_to_*
functions are the mappers. Neither store knows about the other: the
"category must exist" rule is enforced by catalog.service.ListingService.

Security: all queries use bound parameters. No f-strings in SQL.

Usage:
    categories = CategoryStore()
    products = ProductStore()
    categories.create(Category(name="Electronics"))
    pid = products.create(Product(title="Radio", category="Electronics", price=20.0))
    products.list_all()          # newest first
    products.delete(pid)
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import Column, Float, Integer, MetaData, String, Table, Text, create_engine, event
from sqlalchemy.engine import Engine

from catalog.models import Category, Product

_DEFAULT_DB_URL = f"sqlite:///{Path(__file__).parent / 'nearbymarket_catalog.db'}"

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

metadata = MetaData()

# No UNIQUE on name: duplicate category names are accepted.
_categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, index=True),
    Column("description", Text),
    Column("image", Text),
)

_products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("category", String(255), nullable=False, index=True),
    Column("price", Float, nullable=False),
    Column("description", Text),
    Column("condition", String(100)),
    Column("location", String(255)),
    Column("contact", String(255)),
    Column("delivery", String(255)),
    Column("images", Text),  # JSON array serialized as text
    Column("created_at", String(32), nullable=False),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


def _make_engine(db_url: str, **engine_kwargs) -> Engine:
    connect_args: dict = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(db_url, connect_args=connect_args, **engine_kwargs)
    if db_url.startswith("sqlite"):
        event.listen(engine, "connect", _set_wal_mode)
    metadata.create_all(engine)
    return engine


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


class CategoryStore:
    """Repository for Category records."""

    def __init__(self, db_url: str = _DEFAULT_DB_URL, **engine_kwargs) -> None:
        self.engine: Engine = _make_engine(db_url, **engine_kwargs)

    def create(self, category: Category) -> int:
        """Insert a category and return its id. Duplicate names are allowed."""
        with self.engine.connect() as conn:
            result = conn.execute(
                _categories.insert().values(
                    name=category.name,
                    description=category.description,
                    image=category.image,
                )
            )
            conn.commit()
            return result.inserted_primary_key[0]

    def get_by_id(self, category_id: int) -> Optional[Category]:
        with self.engine.connect() as conn:
            row = conn.execute(_categories.select().where(_categories.c.id == category_id)).fetchone()
        return _row_to_category(row) if row is not None else None

    def get_by_name(self, name: str) -> Optional[Category]:
        """Exact, case-sensitive name lookup. With duplicates, the oldest wins."""
        with self.engine.connect() as conn:
            row = conn.execute(
                _categories.select().where(_categories.c.name == name).order_by(_categories.c.id).limit(1)
            ).fetchone()
        return _row_to_category(row) if row is not None else None

    def list_all(self) -> list[Category]:
        with self.engine.connect() as conn:
            rows = conn.execute(_categories.select().order_by(_categories.c.id)).fetchall()
        return [_row_to_category(r) for r in rows]

    def close(self) -> None:
        self.engine.dispose()


class ProductStore:
    """Repository for Product listings."""

    def __init__(self, db_url: str = _DEFAULT_DB_URL, **engine_kwargs) -> None:
        self.engine: Engine = _make_engine(db_url, **engine_kwargs)

    def create(self, product: Product) -> int:
        """Insert a product and return its id.

        created_at is stamped here unless the caller already set one
        (fixtures use that to get deterministic ordering).
        """
        with self.engine.connect() as conn:
            result = conn.execute(
                _products.insert().values(
                    title=product.title,
                    category=product.category,
                    price=product.price,
                    description=product.description,
                    condition=product.condition,
                    location=product.location,
                    contact=product.contact,
                    delivery=product.delivery,
                    images=json.dumps(product.images),
                    created_at=product.created_at or _now_iso(),
                )
            )
            conn.commit()
            return result.inserted_primary_key[0]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        with self.engine.connect() as conn:
            row = conn.execute(_products.select().where(_products.c.id == product_id)).fetchone()
        return _row_to_product(row) if row is not None else None

    def list_all(self) -> list[Product]:
        """Return every product, newest first.

        created_at values are all UTC ISO 8601 strings, so lexical order is
        chronological order. id breaks ties between same-instant inserts.
        """
        with self.engine.connect() as conn:
            rows = conn.execute(
                _products.select().order_by(_products.c.created_at.desc(), _products.c.id.desc())
            ).fetchall()
        return [_row_to_product(r) for r in rows]

    def list_by_category(self, category: str) -> list[Product]:
        """Return products whose category equals `category` exactly, newest first."""
        with self.engine.connect() as conn:
            rows = conn.execute(
                _products.select()
                .where(_products.c.category == category)
                .order_by(_products.c.created_at.desc(), _products.c.id.desc())
            ).fetchall()
        return [_row_to_product(r) for r in rows]

    def delete(self, product_id: int) -> bool:
        """Delete a product. Returns True if a row was removed, False if not found."""
        with self.engine.connect() as conn:
            result = conn.execute(_products.delete().where(_products.c.id == product_id))
            conn.commit()
        return result.rowcount > 0

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_category(row) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        image=row.image,
    )


def _row_to_product(row) -> Product:
    images: list[str] = json.loads(row.images) if row.images else []
    return Product(
        id=row.id,
        title=row.title,
        category=row.category,
        price=row.price,
        description=row.description,
        condition=row.condition,
        location=row.location,
        contact=row.contact,
        delivery=row.delivery,
        images=images,
        created_at=row.created_at,
    )
