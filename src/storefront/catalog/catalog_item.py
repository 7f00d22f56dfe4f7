"""CatalogItem aggregate — the products a shopper can put in a basket."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text

from storefront.catalog.events import CatalogItemPriceChanged, CatalogItemRegistered
from storefront.domain import storefront


@storefront.aggregate
class CatalogItem:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    picture_uri = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, name, price, description=None, picture_uri=None):
        now = datetime.now(UTC)
        item = cls(
            name=name,
            description=description,
            price=price,
            picture_uri=picture_uri,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            CatalogItemRegistered(
                catalog_item_id=str(item.id),
                name=name,
                price=price,
            )
        )
        return item

    def change_price(self, new_price):
        if new_price is None or new_price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CatalogItemPriceChanged(
                catalog_item_id=str(self.id),
                previous_price=previous_price,
                new_price=new_price,
            )
        )
