"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers

from storefront.basket.items import AddItemToBasket
from storefront.catalog.catalog_item import CatalogItem
from storefront.catalog.management import RegisterCatalogItem


@pytest.fixture()
def products():
    """Catalog item ids keyed by name."""
    return {}


@pytest.fixture()
def outcome():
    """Checkout result or the exception raised by the When step."""
    return {}


@given(parsers.cfparse('the catalog lists "{name}" at {price:f}'))
def catalog_lists(products, name, price):
    products[name] = current_domain.process(
        RegisterCatalogItem(name=name, price=price),
        asynchronous=False,
    )


@given(parsers.cfparse('shopper "{owner_key}" has {quantity:d} of "{name}" in the basket'))
def shopper_has_item(products, owner_key, quantity, name):
    item = current_domain.repository_for(CatalogItem).get(products[name])
    current_domain.process(
        AddItemToBasket(
            owner_key=owner_key,
            catalog_item_id=str(item.id),
            unit_price=item.price,
            quantity=quantity,
        ),
        asynchronous=False,
    )
