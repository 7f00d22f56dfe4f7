"""Basket line management — commands and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.basket.basket import Basket
from storefront.domain import storefront


@storefront.command(part_of="Basket")
class AddItemToBasket:
    owner_key = String(required=True, max_length=255)
    catalog_item_id = Identifier(required=True)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="Basket")
class SetBasketQuantities:
    basket_id = Identifier(required=True)
    quantities = Text(required=True)  # JSON: {line_id: quantity}


def _parse_quantities(raw):
    try:
        quantities = json.loads(raw) if isinstance(raw, str) else raw
    except ValueError as exc:
        raise ValidationError({"quantities": ["Quantities must be a JSON object"]}) from exc
    if not isinstance(quantities, dict):
        raise ValidationError({"quantities": ["Quantities must be a JSON object"]})
    return quantities


@storefront.command_handler(part_of=Basket)
class ManageBasketItemsHandler:
    @handle(AddItemToBasket)
    def add_item_to_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get_or_create_for(command.owner_key)
        basket.add_item(
            catalog_item_id=command.catalog_item_id,
            unit_price=command.unit_price,
            quantity=command.quantity or 1,
        )
        repo.add(basket)
        return str(basket.id)

    @handle(SetBasketQuantities)
    def set_basket_quantities(self, command):
        quantities = _parse_quantities(command.quantities)
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.set_quantities(quantities)
        repo.add(basket)
        return str(basket.id)
