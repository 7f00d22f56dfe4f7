"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    street: str = Field(max_length=180)
    city: str = Field(max_length=100)
    state: str | None = Field(None, max_length=60)
    country: str = Field(max_length=90)
    zip_code: str = Field(max_length=18)


class BasketLineQuantity(BaseModel):
    id: str
    quantity: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Basket Request Schemas
# ---------------------------------------------------------------------------
class AddBasketItemRequest(BaseModel):
    catalog_item_id: str
    quantity: int = Field(ge=1, default=1)


class UpdateBasketRequest(BaseModel):
    items: list[BasketLineQuantity]


class CheckoutRequest(BaseModel):
    items: list[BasketLineQuantity] = []
    shipping_address: AddressSchema | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"id": "line-001", "quantity": 3}],
                    "shipping_address": {
                        "street": "123 Main St.",
                        "city": "Kent",
                        "state": "OH",
                        "country": "United States",
                        "zip_code": "44240",
                    },
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Catalog Request Schemas
# ---------------------------------------------------------------------------
class RegisterCatalogItemRequest(BaseModel):
    name: str = Field(max_length=255)
    description: str | None = None
    price: float = Field(ge=0)
    picture_uri: str | None = Field(None, max_length=500)


class ChangePriceRequest(BaseModel):
    price: float = Field(ge=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class BasketLineResponse(BaseModel):
    id: str
    catalog_item_id: str
    unit_price: float
    quantity: int


class BasketResponse(BaseModel):
    id: str
    buyer_id: str
    items: list[BasketLineResponse]
    total: float

    @classmethod
    def from_basket(cls, basket) -> "BasketResponse":
        return cls(
            id=str(basket.id),
            buyer_id=basket.owner_key,
            items=[
                BasketLineResponse(
                    id=str(item.id),
                    catalog_item_id=str(item.catalog_item_id),
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                )
                for item in basket.lines
            ],
            total=basket.total(),
        )


class CheckoutResponse(BaseModel):
    order_id: str
    total: float


class OrderItemResponse(BaseModel):
    catalog_item_id: str
    product_name: str
    picture_uri: str | None = None
    unit_price: float
    units: int


class OrderResponse(BaseModel):
    id: str
    buyer_id: str
    order_date: datetime
    ship_to_address: AddressSchema
    items: list[OrderItemResponse]
    total: float

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        address = order.ship_to_address
        return cls(
            id=str(order.id),
            buyer_id=order.buyer_id,
            order_date=order.order_date,
            ship_to_address=AddressSchema(
                street=address.street,
                city=address.city,
                state=address.state,
                country=address.country,
                zip_code=address.zip_code,
            ),
            items=[
                OrderItemResponse(
                    catalog_item_id=str(item.catalog_item_id),
                    product_name=item.product_name,
                    picture_uri=item.picture_uri,
                    unit_price=item.unit_price,
                    units=item.units,
                )
                for item in order.items
            ],
            total=order.total(),
        )


class CatalogItemResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    picture_uri: str | None = None


class CatalogItemIdResponse(BaseModel):
    catalog_item_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
