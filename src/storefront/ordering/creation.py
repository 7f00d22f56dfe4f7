"""Order creation — command and handler.

The handler reads the basket as it stands when the command runs. An empty
basket is rejected with EmptyBasketOnCheckout and nothing is written.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.basket.basket import Basket
from storefront.catalog.catalog_item import CatalogItem
from storefront.domain import storefront
from storefront.ordering.exceptions import EmptyBasketOnCheckout
from storefront.ordering.order import Address, Order

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class CreateOrder:
    basket_id = Identifier(required=True)
    street = String(required=True, max_length=180)
    city = String(required=True, max_length=100)
    state = String(max_length=60)
    country = String(required=True, max_length=90)
    zip_code = String(required=True, max_length=18)


def _priced_lines(basket):
    catalog = current_domain.repository_for(CatalogItem)
    lines = []
    for item in basket.lines:
        catalog_item = catalog.get(item.catalog_item_id)
        lines.append(
            {
                "catalog_item_id": str(item.catalog_item_id),
                "product_name": catalog_item.name,
                "picture_uri": catalog_item.picture_uri,
                # Basket price, not today's catalog price
                "unit_price": item.unit_price,
                "units": item.quantity,
            }
        )
    return lines


@storefront.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        basket = current_domain.repository_for(Basket).get(command.basket_id)
        if basket.is_empty:
            raise EmptyBasketOnCheckout(command.basket_id)

        address = Address(
            street=command.street,
            city=command.city,
            state=command.state,
            country=command.country,
            zip_code=command.zip_code,
        )
        order = Order.place(
            buyer_id=basket.owner_key,
            basket_id=basket.id,
            ship_to_address=address,
            lines=_priced_lines(basket),
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order created",
            order_id=str(order.id),
            basket_id=str(basket.id),
            total=order.total(),
        )
        return str(order.id)
