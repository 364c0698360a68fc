"""
api/routes/auth.py -- Signup and login endpoints.

Routes:
  POST /signup  -- create an account; 201 {message}
  POST /login   -- exchange email + password for a JWT; 200 {token, userId}

Both are public. Both are rate-limited per client IP (limits come from
Settings) as brute-force and signup-spam mitigation.

Security:
  Login failures use one generic InvalidCredentials error whether the email
  is unknown or the password is wrong, and auth.tokens.authenticate_user()
  equalizes timing between the two. Do not inline the lookup + verify here.
  Login responses carry Cache-Control: no-store so tokens are not cached by
  intermediaries.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.limiter import limiter
from api.models import LoginRequest, LoginResponse, MessageResponse, SignupRequest
from auth import accounts
from auth.store import UserStore
from core.config import get_settings

_settings = get_settings()

router = APIRouter()


@limiter.limit(_settings.signup_rate_limit)  # must be ABOVE @router to preserve FastAPI introspection
@router.post("/signup", response_model=MessageResponse, status_code=201)
def signup(request: Request, body: SignupRequest) -> MessageResponse:
    """Register a new user. Duplicate emails are rejected with 400."""
    user_store: UserStore = request.app.state.user_store
    accounts.signup(user_store, body.name, body.email, body.password)
    return MessageResponse(message="User created successfully")


@limiter.limit(_settings.login_rate_limit)
@router.post("/login", response_model=LoginResponse)
def login(request: Request, body: LoginRequest) -> JSONResponse:
    """Authenticate with email and password; return a bearer token."""
    user_store: UserStore = request.app.state.user_store
    token, user_id = accounts.login(user_store, body.email, body.password)
    resp = JSONResponse(
        status_code=200,
        content=LoginResponse(token=token, user_id=user_id).model_dump(by_alias=True),
    )
    resp.headers["Cache-Control"] = "no-store"
    return resp
