"""Basket owner key for the current request.

`current_owner_key` is the single entry point used by basket reads, basket
mutations and checkout. The key is resolved once at the request boundary,
kept on `request.state`, and passed explicitly into every command from there.
"""

import structlog
from fastapi import Request, Response

from storefront.identity.resolver import AnonymousIdentityResolver, CookieInstruction
from storefront.utils.logging import bind_request_context

logger = structlog.get_logger(__name__)

_resolver = AnonymousIdentityResolver()


def authenticated_name(request: Request) -> str | None:
    """Principal name when the auth middleware signed the user in, else None."""
    user = request.scope.get("user")
    if user is None or not user.is_authenticated:
        return None
    return user.display_name


def apply_cookie(response: Response, instruction: CookieInstruction) -> None:
    response.set_cookie(
        key=instruction.name,
        value=instruction.value,
        expires=instruction.expires,
        httponly=True,
        samesite="lax",
    )


def pending_cookie(request: Request) -> CookieInstruction | None:
    """Cookie issued while resolving this request, for endpoints returning their own Response."""
    return getattr(request.state, "basket_cookie", None)


def current_owner_key(request: Request, response: Response) -> str:
    owner_key = getattr(request.state, "owner_key", None)
    if owner_key is not None:
        return owner_key

    resolved = _resolver.resolve(request.cookies, authenticated_name(request))
    if resolved.set_cookie is not None:
        apply_cookie(response, resolved.set_cookie)
        request.state.basket_cookie = resolved.set_cookie
        logger.info("Issued anonymous basket identity", owner_key=resolved.owner_key)

    request.state.owner_key = resolved.owner_key
    bind_request_context(owner_key=resolved.owner_key)
    return resolved.owner_key
