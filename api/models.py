"""
API request and response models for NearbyMarket REST endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py and
catalog/models.py, which own the internal domain representation. Route
handlers map between the two.

JSON field names follow the public contract (camelCase userId / createdAt).
Python attributes stay snake_case and carry a serialization_alias; FastAPI
serializes response_model output by alias.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from catalog.models import Category, Product

# Free-text fields are trimmed; lookup keys such as ProductCreate.category are not.
Stripped = Annotated[str, StringConstraints(strip_whitespace=True)]

# ---------------------------------------------------------------------------
# Auth -- request models
# ---------------------------------------------------------------------------


class SignupRequest(BaseModel):
    """Request body for POST /signup."""

    # No whitespace stripping: passwords are taken verbatim. Blank names and
    # emails are rejected by auth.accounts.signup().
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    # bcrypt only uses the first 72 bytes; see auth/tokens.py.
    password: str = Field(min_length=1, max_length=255)


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)


# ---------------------------------------------------------------------------
# Auth -- response models
# ---------------------------------------------------------------------------


class LoginResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    user_id: int = Field(serialization_alias="userId")


class MessageResponse(BaseModel):
    """Plain acknowledgement body, e.g. for signup and delete."""

    model_config = ConfigDict(frozen=True)

    message: str


# ---------------------------------------------------------------------------
# Catalog -- request models
# ---------------------------------------------------------------------------


class CategoryCreate(BaseModel):
    """Request body for POST /api/categories."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    image: Optional[str] = Field(default=None, max_length=2048)


class ProductCreate(BaseModel):
    """Request body for POST /api/products.

    category is matched exactly (case-sensitive, whitespace included) against
    existing category names by the listing service, so it is taken verbatim.
    """

    title: Stripped = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0, allow_inf_nan=False)
    description: Optional[Stripped] = Field(default=None, max_length=5000)
    condition: Optional[Stripped] = Field(default=None, max_length=100)
    location: Optional[Stripped] = Field(default=None, max_length=255)
    contact: Optional[Stripped] = Field(default=None, max_length=255)
    delivery: Optional[Stripped] = Field(default=None, max_length=255)
    images: list[str] = Field(default_factory=list, max_length=20)

    def to_product(self) -> Product:
        return Product(
            title=self.title,
            category=self.category,
            price=self.price,
            description=self.description,
            condition=self.condition,
            location=self.location,
            contact=self.contact,
            delivery=self.delivery,
            images=list(self.images),
        )


# ---------------------------------------------------------------------------
# Catalog -- response models
# ---------------------------------------------------------------------------


class CategoryResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            image=category.image,
        )


class ProductResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    category: str
    price: float
    description: Optional[str] = None
    condition: Optional[str] = None
    location: Optional[str] = None
    contact: Optional[str] = None
    delivery: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    created_at: str = Field(serialization_alias="createdAt")

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Factory Method -- the domain-to-wire mapping lives with the wire model."""
        return cls(
            id=product.id,
            title=product.title,
            category=product.category,
            price=product.price,
            description=product.description,
            condition=product.condition,
            location=product.location,
            contact=product.contact,
            delivery=product.delivery,
            images=product.images,
            created_at=product.created_at,
        )


class CategoryCreatedResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    category: CategoryResponse


class ProductCreatedResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    product: ProductResponse


# ---------------------------------------------------------------------------
# Errors and health
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error envelope returned on 4xx/5xx responses.

    message is human-readable; error is a stable machine-readable code.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
    components: dict[str, str] = Field(default_factory=dict)
