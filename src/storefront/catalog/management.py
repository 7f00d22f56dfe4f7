"""Catalog management — commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalog.catalog_item import CatalogItem
from storefront.domain import storefront


@storefront.command(part_of="CatalogItem")
class RegisterCatalogItem:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    picture_uri = String(max_length=500)


@storefront.command(part_of="CatalogItem")
class ChangeCatalogItemPrice:
    catalog_item_id = Identifier(required=True)
    price = Float(required=True, min_value=0.0)


@storefront.command_handler(part_of=CatalogItem)
class ManageCatalogHandler:
    @handle(RegisterCatalogItem)
    def register_catalog_item(self, command):
        item = CatalogItem.register(
            name=command.name,
            price=command.price,
            description=command.description,
            picture_uri=command.picture_uri,
        )
        current_domain.repository_for(CatalogItem).add(item)
        return str(item.id)

    @handle(ChangeCatalogItemPrice)
    def change_price(self, command):
        repo = current_domain.repository_for(CatalogItem)
        item = repo.get(command.catalog_item_id)
        item.change_price(command.price)
        repo.add(item)
