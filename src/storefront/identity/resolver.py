"""Anonymous visitor identity — derives the basket owner key from cookies.

A signed-in shopper is keyed by their principal name. Everyone else gets a
random UUID kept in a long-lived cookie, so the same basket follows them
across visits until they sign in.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from storefront.utils import settings


@dataclass(frozen=True)
class CookieInstruction:
    """Tells the HTTP layer to persist a new anonymous basket cookie."""

    name: str
    value: str
    expires: datetime
    essential: bool = True


@dataclass(frozen=True)
class ResolvedIdentity:
    owner_key: str
    set_cookie: CookieInstruction | None = None

    @property
    def issues_cookie(self) -> bool:
        return self.set_cookie is not None


def is_anonymous_token(value: str | None) -> bool:
    """True when value is a syntactically valid generated anonymous token."""
    if not value:
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def cookie_expiry(now: datetime | None = None, years: int | None = None) -> datetime:
    """Midnight today, `years` years ahead. Feb 29 clamps to Feb 28."""
    now = now or datetime.now(UTC)
    years = settings.BASKET_COOKIE_YEARS if years is None else years
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        return today.replace(year=today.year + years)
    except ValueError:
        return today.replace(year=today.year + years, day=28)


class AnonymousIdentityResolver:
    def __init__(self, cookie_name: str | None = None, token_factory=None):
        self.cookie_name = cookie_name or settings.BASKET_COOKIE_NAME
        self._token_factory = token_factory or (lambda: str(uuid4()))

    def resolve(self, cookies: Mapping[str, str], authenticated_name: str | None) -> ResolvedIdentity:
        # Signed-in identity wins; the anonymous cookie is left exactly as it is
        if authenticated_name:
            return ResolvedIdentity(owner_key=authenticated_name)

        existing = cookies.get(self.cookie_name)
        if is_anonymous_token(existing):
            return ResolvedIdentity(owner_key=existing)

        token = self._token_factory()
        return ResolvedIdentity(
            owner_key=token,
            set_cookie=CookieInstruction(
                name=self.cookie_name,
                value=token,
                expires=cookie_expiry(),
            ),
        )
