"""Authentication backend trusting the upstream identity provider.

The storefront does not authenticate shoppers itself. A fronting identity
proxy signs users in and forwards the principal name in a header; requests
without it are anonymous.
"""

from starlette.authentication import AuthCredentials, AuthenticationBackend, SimpleUser
from starlette.requests import HTTPConnection

from storefront.utils import settings


class TrustedHeaderBackend(AuthenticationBackend):
    def __init__(self, header: str | None = None):
        self.header = header or settings.AUTH_USER_HEADER

    async def authenticate(self, conn: HTTPConnection):
        name = (conn.headers.get(self.header) or "").strip()
        if not name:
            return None
        return AuthCredentials(["authenticated"]), SimpleUser(name)
