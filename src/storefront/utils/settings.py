"""Runtime settings for the storefront, read from the environment."""

import os

# Basket identity cookie
BASKET_COOKIE_NAME = os.getenv("BASKET_COOKIE_NAME", "basket_owner")
BASKET_COOKIE_YEARS = int(os.getenv("BASKET_COOKIE_YEARS", "10"))

# Header set by the upstream identity provider for signed-in users
AUTH_USER_HEADER = os.getenv("AUTH_USER_HEADER", "X-Authenticated-User")

# Outbound notification channels. Unset endpoints fall back to in-memory adapters.
ORDER_WEBHOOK_URL = os.getenv("ORDER_WEBHOOK_URL")
RESERVATION_QUEUE_URL = os.getenv("RESERVATION_QUEUE_URL")
RESERVATION_QUEUE_NAME = os.getenv("RESERVATION_QUEUE_NAME", "orderitemsreserver")
NOTIFICATION_TIMEOUT_SECONDS = float(os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "5"))

# Ship-to address used when a checkout does not submit one
DEFAULT_SHIP_TO = {
    "street": os.getenv("DEFAULT_SHIP_TO_STREET", "123 Main St."),
    "city": os.getenv("DEFAULT_SHIP_TO_CITY", "Kent"),
    "state": os.getenv("DEFAULT_SHIP_TO_STATE", "OH"),
    "country": os.getenv("DEFAULT_SHIP_TO_COUNTRY", "United States"),
    "zip_code": os.getenv("DEFAULT_SHIP_TO_ZIP", "44240"),
}
