"""
catalog/models.py -- Domain dataclasses for the marketplace catalog.

These are pure data containers with zero logic. Validation of cross-entity
rules (a product's category must exist) lives in catalog/service.py.

Products reference their category by name, not by id. Nothing keeps the two
in sync after creation: a product whose category disappears keeps the name.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Category:
    """A product category. name is the key products refer to.

    Names are not required to be unique; lookups return the oldest match.

    id is None before the record is written to the database.
    """

    name: str
    description: Optional[str] = None
    image: Optional[str] = None  # URL or asset reference
    id: Optional[int] = None


@dataclass
class Product:
    """A single marketplace listing.

    Listings are never edited in place -- they are created and deleted.
    created_at is stamped by the store on insert and drives the newest-first
    ordering of the full listing.

    id is None before the record is written to the database.
    """

    title: str
    category: str  # Category.name at creation time
    price: float
    description: Optional[str] = None
    condition: Optional[str] = None
    location: Optional[str] = None
    contact: Optional[str] = None
    delivery: Optional[str] = None
    images: list[str] = field(default_factory=list)
    id: Optional[int] = None
    created_at: str = ""  # ISO 8601, set by store on insert
