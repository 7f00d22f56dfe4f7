"""Domain events for the CatalogItem aggregate."""

from protean.fields import Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="CatalogItem")
class CatalogItemRegistered:
    __version__ = "v1"

    catalog_item_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)


@storefront.event(part_of="CatalogItem")
class CatalogItemPriceChanged:
    """Only future basket lines pick up the new price; placed orders keep theirs."""

    __version__ = "v1"

    catalog_item_id = Identifier(required=True)
    previous_price = Float(required=True)
    new_price = Float(required=True)
