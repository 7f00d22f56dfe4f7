"""Outbound notification payloads — read-only projections of orders and baskets.

Both serialise with camelCase field names, the shape the order-processing
webhook and the reservation queue consumers expect.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class AddressPayload(_CamelModel):
    street: str
    city: str
    state: str | None = None
    country: str
    zip_code: str


class OrderItemPayload(_CamelModel):
    picture_url: str | None = None
    product_id: str
    product_name: str
    unit_price: float
    units: int


class OrderNotification(_CamelModel):
    id: str
    order_date: datetime
    order_items: list[OrderItemPayload]
    order_number: str
    shipping_address: AddressPayload
    total: float

    @classmethod
    def from_order(cls, order) -> "OrderNotification":
        address = order.ship_to_address
        return cls(
            id=str(order.id),
            order_date=order.order_date,
            order_items=[
                OrderItemPayload(
                    picture_url=item.picture_uri,
                    product_id=str(item.catalog_item_id),
                    product_name=item.product_name,
                    unit_price=item.unit_price,
                    units=item.units,
                )
                for item in order.items
            ],
            order_number=str(order.id),
            shipping_address=AddressPayload(
                street=address.street,
                city=address.city,
                state=address.state,
                country=address.country,
                zip_code=address.zip_code,
            ),
            total=order.total(),
        )


class BasketLinePayload(_CamelModel):
    id: str
    catalog_item_id: str
    unit_price: float
    quantity: int


class BasketSnapshot(_CamelModel):
    id: str
    buyer_id: str
    items: list[BasketLinePayload]
    total: float

    @classmethod
    def from_basket(cls, basket) -> "BasketSnapshot":
        return cls(
            id=str(basket.id),
            buyer_id=basket.owner_key,
            items=[
                BasketLinePayload(
                    id=str(item.id),
                    catalog_item_id=str(item.catalog_item_id),
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                )
                for item in basket.lines
            ],
            total=basket.total(),
        )
