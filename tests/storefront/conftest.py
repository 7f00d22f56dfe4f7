"""Shared builders for storefront tests, exposed as fixtures."""

import pytest
from protean import current_domain

from storefront.basket.items import AddItemToBasket
from storefront.basket.repository import basket_for
from storefront.catalog.management import RegisterCatalogItem


@pytest.fixture()
def ship_to():
    return {
        "street": "1 Infinite Loop",
        "city": "Cupertino",
        "state": "CA",
        "country": "United States",
        "zip_code": "95014",
    }


@pytest.fixture()
def register_item():
    def _register(name="Mug", price=10.0, picture_uri=None):
        return current_domain.process(
            RegisterCatalogItem(
                name=name,
                price=price,
                picture_uri=picture_uri or f"https://cdn.example.com/{name.lower()}.png",
            ),
            asynchronous=False,
        )

    return _register


@pytest.fixture()
def add_to_basket():
    def _add(owner_key, catalog_item_id, unit_price, quantity=1):
        return current_domain.process(
            AddItemToBasket(
                owner_key=owner_key,
                catalog_item_id=catalog_item_id,
                unit_price=unit_price,
                quantity=quantity,
            ),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def line_for():
    def _line(owner_key, catalog_item_id):
        basket = basket_for(owner_key)
        return next(i for i in basket.items if str(i.catalog_item_id) == str(catalog_item_id))

    return _line


@pytest.fixture()
def catalog(register_item):
    """Two catalog items: A at 10.00 and B at 5.00."""
    return {
        "A": register_item("ItemA", 10.0),
        "B": register_item("ItemB", 5.0),
    }
