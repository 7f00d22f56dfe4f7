"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was created from a basket; its lines and prices are now frozen."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    buyer_id = String(required=True)
    basket_id = Identifier(required=True)
    item_count = Integer(required=True)
    total = Float(required=True)
    order_date = DateTime(required=True)
