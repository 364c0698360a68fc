"""
api/routes/categories.py -- Category browse and create endpoints.

Routes:
  GET  /api/categories         -- list all categories (public)
  GET  /api/categories/{name}  -- one category by exact name (public, 404 on miss)
  POST /api/categories         -- create a category (bearer token required)

Category names are not unique; creating a second category with an existing
name succeeds, and lookups by name return the oldest one.
"""

from fastapi import APIRouter, Depends, Request

from api.models import CategoryCreate, CategoryCreatedResponse, CategoryResponse
from auth.dependencies import get_current_user_id
from catalog.service import ListingService

router = APIRouter()


@router.get("/api/categories", response_model=list[CategoryResponse])
def list_categories(request: Request) -> list[CategoryResponse]:
    listings: ListingService = request.app.state.listings
    return [CategoryResponse.from_category(c) for c in listings.list_categories()]


@router.get("/api/categories/{name}", response_model=CategoryResponse)
def get_category(request: Request, name: str) -> CategoryResponse:
    listings: ListingService = request.app.state.listings
    return CategoryResponse.from_category(listings.get_category(name))


@router.post("/api/categories", response_model=CategoryCreatedResponse, status_code=201)
def create_category(
    request: Request,
    body: CategoryCreate,
    user_id: int = Depends(get_current_user_id),
) -> CategoryCreatedResponse:
    listings: ListingService = request.app.state.listings
    category = listings.create_category(user_id, body.name, body.description, body.image)
    return CategoryCreatedResponse(
        message="Category created successfully",
        category=CategoryResponse.from_category(category),
    )
