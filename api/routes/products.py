"""
api/routes/products.py -- Product listing endpoints.

Routes (in registration order to avoid FastAPI path capture conflicts):
  POST   /api/products                      -- list a product (bearer token)
  GET    /api/products/category/{category}  -- products in a category, 404 if none
  GET    /api/products                      -- all products, newest first
  GET    /api/products/{product_id}         -- one product, 404 on miss or unusable id
  DELETE /api/products/{product_id}         -- remove a product (bearer token)

Any authenticated user may delete any product; listings do not record who
created them.
"""

from fastapi import APIRouter, Depends, Request

from api.models import MessageResponse, ProductCreate, ProductCreatedResponse, ProductResponse
from auth.dependencies import get_current_user_id
from catalog.service import ListingService
from core.errors import NotFound

router = APIRouter()


@router.post("/api/products", response_model=ProductCreatedResponse, status_code=201)
def create_product(
    request: Request,
    body: ProductCreate,
    user_id: int = Depends(get_current_user_id),
) -> ProductCreatedResponse:
    """List a new product. The category must already exist (exact name match)."""
    listings: ListingService = request.app.state.listings
    product = listings.create_product(user_id, body.to_product())
    return ProductCreatedResponse(
        message="Product listed successfully",
        product=ProductResponse.from_product(product),
    )


@router.get("/api/products/category/{category}", response_model=list[ProductResponse])
def list_products_by_category(request: Request, category: str) -> list[ProductResponse]:
    """Products in one category. An empty result is a 404, not an empty list."""
    listings: ListingService = request.app.state.listings
    return [ProductResponse.from_product(p) for p in listings.list_products_by_category(category)]


@router.get("/api/products", response_model=list[ProductResponse])
def list_products(request: Request) -> list[ProductResponse]:
    listings: ListingService = request.app.state.listings
    return [ProductResponse.from_product(p) for p in listings.list_products()]


# Largest value a SQLite INTEGER primary key can hold.
_MAX_PRODUCT_ID = 2**63 - 1


def _parse_product_id(raw: str) -> int:
    """Map a path segment to a product id. Anything that cannot name a stored
    product (non-digits, out of range) is a miss, not a validation error."""
    if not (raw.isascii() and raw.isdigit()) or int(raw) > _MAX_PRODUCT_ID:
        raise NotFound("Product not found")
    return int(raw)


@router.get("/api/products/{product_id}", response_model=ProductResponse)
def get_product(request: Request, product_id: str) -> ProductResponse:
    listings: ListingService = request.app.state.listings
    return ProductResponse.from_product(listings.get_product(_parse_product_id(product_id)))


@router.delete("/api/products/{product_id}", response_model=MessageResponse)
def delete_product(
    request: Request,
    product_id: str,
    user_id: int = Depends(get_current_user_id),
) -> MessageResponse:
    listings: ListingService = request.app.state.listings
    listings.delete_product(user_id, _parse_product_id(product_id))
    return MessageResponse(message="Product deleted successfully")
