"""Order aggregate (CQRS) — an immutable record of a completed checkout.

An order is built from a basket snapshot. Product names and pictures are
copied from the catalog and unit prices from the basket lines at creation
time; nothing on an order is re-read or changed afterwards.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced


@storefront.value_object(part_of="Order")
class Address:
    """Where the order ships, captured at checkout."""

    street = String(required=True, max_length=180)
    city = String(required=True, max_length=100)
    state = String(max_length=60)
    country = String(required=True, max_length=90)
    zip_code = String(required=True, max_length=18)


@storefront.entity(part_of="Order")
class OrderItem:
    catalog_item_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    picture_uri = String(max_length=500)
    unit_price = Float(required=True, min_value=0.0)
    units = Integer(required=True, min_value=1)


@storefront.aggregate
class Order:
    buyer_id = String(required=True, max_length=255)
    basket_id = Identifier(required=True)
    order_date = DateTime(required=True)
    ship_to_address = ValueObject(Address)
    items = HasMany(OrderItem)

    @classmethod
    def place(cls, buyer_id, basket_id, ship_to_address, lines):
        """Create an order from priced basket lines.

        Args:
            lines: List of dicts with catalog_item_id, product_name,
                   picture_uri, unit_price and units.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        order = cls(
            buyer_id=buyer_id,
            basket_id=basket_id,
            order_date=datetime.now(UTC),
            ship_to_address=ship_to_address,
        )
        for line in lines:
            order.add_items(OrderItem(**line))

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                buyer_id=buyer_id,
                basket_id=str(basket_id),
                item_count=len(order.items),
                total=order.total(),
                order_date=order.order_date,
            )
        )
        return order

    def total(self):
        return sum(item.unit_price * item.units for item in self.items)
