"""Storefront bounded context — baskets, catalog, orders and checkout.

Anonymous and signed-in shoppers fill baskets keyed by an owner key; checkout
converts a basket into an immutable order and fires best-effort
notifications to the order webhook and the reservation queue.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
