"""Unit tests for auth/store.py and auth/accounts.py.

Covers:
- UserStore CRUD and the storage-level UNIQUE(email) guarantee
- signup(): required fields, duplicate email via pre-check and via constraint
- login(): token issue on success; one generic error for both failure modes
"""

import pytest
from sqlalchemy.exc import IntegrityError

from auth import accounts
from auth.models import User
from auth.store import UserStore
from auth.tokens import decode_access_token, hash_password, verify_password
from core.errors import DuplicateEmail, InvalidCredentials, ValidationError


class TestUserStore:
    def test_create_and_fetch(self, user_store: UserStore) -> None:
        uid = user_store.create_user(User(name="Ana", email="a@x.com", hashed_password=hash_password("pw123")))
        by_email = user_store.get_by_email("a@x.com")
        by_id = user_store.get_by_id(uid)
        assert by_email is not None and by_id is not None
        assert by_email.id == by_id.id == uid
        assert by_email.name == "Ana"
        assert by_email.created_at

    def test_missing_user_is_none(self, user_store: UserStore) -> None:
        assert user_store.get_by_email("nobody@x.com") is None
        assert user_store.get_by_id(999) is None

    def test_email_unique_at_storage_layer(self, user_store: UserStore) -> None:
        """The constraint itself rejects duplicates, independent of any pre-check."""
        user_store.create_user(User(name="Ana", email="a@x.com", hashed_password="h1"))
        with pytest.raises(IntegrityError):
            user_store.create_user(User(name="Bob", email="a@x.com", hashed_password="h2"))

    def test_ping(self, user_store: UserStore) -> None:
        assert user_store.ping() is True


class TestSignup:
    def test_signup_stores_hash_not_plaintext(self, user_store: UserStore) -> None:
        uid = accounts.signup(user_store, "Ana", "a@x.com", "pw123")
        stored = user_store.get_by_id(uid)
        assert stored is not None
        assert stored.hashed_password != "pw123"
        assert verify_password("pw123", stored.hashed_password)

    def test_duplicate_email_rejected(self, user_store: UserStore) -> None:
        accounts.signup(user_store, "Ana", "a@x.com", "pw123")
        with pytest.raises(DuplicateEmail):
            accounts.signup(user_store, "Bob", "a@x.com", "pw456")

    def test_duplicate_caught_by_constraint_when_precheck_misses(
        self, user_store: UserStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Simulates two concurrent signups that both pass the pre-check."""
        accounts.signup(user_store, "Ana", "a@x.com", "pw123")
        monkeypatch.setattr(user_store, "get_by_email", lambda email: None)
        with pytest.raises(DuplicateEmail):
            accounts.signup(user_store, "Bob", "a@x.com", "pw456")

    @pytest.mark.parametrize(
        "name,email,password",
        [("", "a@x.com", "pw"), ("   ", "a@x.com", "pw"), ("Ana", "", "pw"), ("Ana", "a@x.com", "")],
    )
    def test_missing_fields_rejected(self, user_store: UserStore, name: str, email: str, password: str) -> None:
        with pytest.raises(ValidationError):
            accounts.signup(user_store, name, email, password)


class TestLogin:
    def test_login_returns_token_for_user(self, user_store: UserStore) -> None:
        uid = accounts.signup(user_store, "Ana", "a@x.com", "pw123")
        token, user_id = accounts.login(user_store, "a@x.com", "pw123")
        assert user_id == uid
        assert decode_access_token(token) == uid

    def test_wrong_password_and_unknown_email_are_indistinguishable(self, user_store: UserStore) -> None:
        accounts.signup(user_store, "Ana", "a@x.com", "pw123")
        with pytest.raises(InvalidCredentials) as wrong_pw:
            accounts.login(user_store, "a@x.com", "wrong")
        with pytest.raises(InvalidCredentials) as unknown:
            accounts.login(user_store, "nobody@x.com", "pw123")
        assert wrong_pw.value.message == unknown.value.message == "Invalid email or password"

    def test_email_match_is_exact(self, user_store: UserStore) -> None:
        accounts.signup(user_store, "Ana", "a@x.com", "pw123")
        with pytest.raises(InvalidCredentials):
            accounts.login(user_store, "A@X.COM", "pw123")
