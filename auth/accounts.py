"""
auth/accounts.py -- Signup and login flows.

These are the two credential operations exposed over HTTP. They sit between
the routes and the UserStore so that the rules (required fields, duplicate
email, generic login failure) live in one place and can be tested without a
web client.

Layer rule: no imports from api/ or catalog/.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from auth.models import User
from auth.store import UserStore
from auth.tokens import authenticate_user, create_access_token, hash_password
from core.errors import DuplicateEmail, InvalidCredentials, ValidationError

logger = logging.getLogger("nearbymarket.auth")


def signup(store: UserStore, name: str, email: str, password: str) -> int:
    """Register a new user and return its id.

    The pre-check gives a fast answer for the common case. The UNIQUE(email)
    constraint catches the concurrent case where two signups pass the
    pre-check together; both paths raise DuplicateEmail.
    """
    if not name or not name.strip() or not email or not email.strip() or not password:
        raise ValidationError("Name, email and password are required")

    if store.get_by_email(email) is not None:
        raise DuplicateEmail()

    user = User(name=name, email=email, hashed_password=hash_password(password))
    try:
        user_id = store.create_user(user)
    except IntegrityError as exc:
        raise DuplicateEmail() from exc

    logger.info("User %d registered", user_id)
    return user_id


def login(store: UserStore, email: str, password: str) -> tuple[str, int]:
    """Verify credentials and return (token, user_id).

    Unknown email and wrong password raise the same InvalidCredentials so the
    response cannot be used to probe which emails are registered.
    """
    user = authenticate_user(store, email, password)
    if user is None:
        logger.warning("Rejected login attempt")
        raise InvalidCredentials()
    return create_access_token(user.id), user.id
