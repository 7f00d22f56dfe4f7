"""Tests for anonymous basket identity resolution."""

from collections.abc import Mapping
from datetime import UTC, datetime
from uuid import UUID

import pytest

from storefront.identity.resolver import (
    AnonymousIdentityResolver,
    cookie_expiry,
    is_anonymous_token,
)


class _UntouchableCookies(Mapping):
    """Cookie jar that fails any test which reads from it."""

    def __getitem__(self, key):
        raise AssertionError("cookies must not be read")

    def __iter__(self):
        raise AssertionError("cookies must not be read")

    def __len__(self):
        raise AssertionError("cookies must not be read")

    def get(self, key, default=None):
        raise AssertionError("cookies must not be read")


VALID_TOKEN = "6f1c3a52-9a54-4c1d-8a57-0a6c1b4d8e21"


class TestAuthenticatedShopper:
    def test_owner_key_is_principal_name(self):
        resolved = AnonymousIdentityResolver().resolve({}, "alice@example.com")
        assert resolved.owner_key == "alice@example.com"
        assert resolved.set_cookie is None

    def test_cookies_are_never_read(self):
        resolved = AnonymousIdentityResolver().resolve(_UntouchableCookies(), "alice@example.com")
        assert resolved.owner_key == "alice@example.com"

    def test_existing_anonymous_cookie_is_ignored(self):
        resolved = AnonymousIdentityResolver().resolve({"basket_owner": VALID_TOKEN}, "bob")
        assert resolved.owner_key == "bob"
        assert not resolved.issues_cookie


class TestAnonymousShopper:
    def test_valid_cookie_is_reused(self):
        resolved = AnonymousIdentityResolver().resolve({"basket_owner": VALID_TOKEN}, None)
        assert resolved.owner_key == VALID_TOKEN
        assert resolved.set_cookie is None

    def test_missing_cookie_issues_new_token(self):
        resolved = AnonymousIdentityResolver().resolve({}, None)
        assert UUID(resolved.owner_key)
        assert resolved.issues_cookie
        assert resolved.set_cookie.name == "basket_owner"
        assert resolved.set_cookie.value == resolved.owner_key
        assert resolved.set_cookie.essential is True

    @pytest.mark.parametrize("bad_value", ["", "not-a-uuid", "12345"])
    def test_malformed_cookie_is_replaced(self, bad_value):
        resolved = AnonymousIdentityResolver().resolve({"basket_owner": bad_value}, None)
        assert resolved.owner_key != bad_value
        assert resolved.set_cookie.value == resolved.owner_key

    def test_empty_principal_name_counts_as_anonymous(self):
        resolved = AnonymousIdentityResolver().resolve({"basket_owner": VALID_TOKEN}, "")
        assert resolved.owner_key == VALID_TOKEN

    def test_each_new_visitor_gets_a_distinct_token(self):
        resolver = AnonymousIdentityResolver()
        first = resolver.resolve({}, None)
        second = resolver.resolve({}, None)
        assert first.owner_key != second.owner_key

    def test_token_factory_and_cookie_name_are_configurable(self):
        resolver = AnonymousIdentityResolver(
            cookie_name="cart",
            token_factory=lambda: "00000000-0000-4000-8000-000000000001",
        )
        resolved = resolver.resolve({}, None)
        assert resolved.owner_key == "00000000-0000-4000-8000-000000000001"
        assert resolved.set_cookie.name == "cart"


class TestTokenValidation:
    def test_uuid_is_valid(self):
        assert is_anonymous_token(VALID_TOKEN)

    @pytest.mark.parametrize("value", [None, "", "alice", "6f1c3a52-9a54"])
    def test_non_uuid_is_invalid(self, value):
        assert not is_anonymous_token(value)


class TestCookieExpiry:
    def test_midnight_ten_years_ahead(self):
        now = datetime(2024, 3, 15, 17, 42, 9, tzinfo=UTC)
        assert cookie_expiry(now) == datetime(2034, 3, 15, tzinfo=UTC)

    def test_custom_years(self):
        now = datetime(2024, 3, 15, 8, 0, tzinfo=UTC)
        assert cookie_expiry(now, years=1) == datetime(2025, 3, 15, tzinfo=UTC)

    def test_leap_day_clamps_to_feb_28(self):
        now = datetime(2024, 2, 29, 12, 0, tzinfo=UTC)
        assert cookie_expiry(now, years=1) == datetime(2025, 2, 28, tzinfo=UTC)
