"""Domain events for the Basket aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Basket")
class BasketItemAdded:
    """A catalog item was put in the basket (or its line grew)."""

    __version__ = "v1"

    basket_id = Identifier(required=True)
    owner_key = String(required=True)
    item_id = Identifier(required=True)
    catalog_item_id = Identifier(required=True)
    unit_price = Float(required=True)
    quantity = Integer(required=True)


@storefront.event(part_of="Basket")
class BasketQuantitiesUpdated:
    __version__ = "v1"

    basket_id = Identifier(required=True)
    updated_count = Integer(required=True)
    removed_count = Integer(default=0)


@storefront.event(part_of="Basket")
class BasketItemRemoved:
    """A line dropped to zero and left the basket."""

    __version__ = "v1"

    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.event(part_of="Basket")
class BasketTransferred:
    """An anonymous basket was merged into a signed-in shopper's basket."""

    __version__ = "v1"

    basket_id = Identifier(required=True)
    source_owner_key = String(required=True)
    owner_key = String(required=True)
    items_merged_count = Integer(required=True)
