"""FastAPI routes for the storefront — basket, checkout, orders and catalog.

Every basket-facing endpoint resolves the owner key once through
`current_owner_key` and passes it explicitly into commands.
"""

import json

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, Response
from fastapi.responses import RedirectResponse
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddBasketItemRequest,
    BasketResponse,
    CatalogItemIdResponse,
    CatalogItemResponse,
    ChangePriceRequest,
    CheckoutRequest,
    CheckoutResponse,
    OrderResponse,
    RegisterCatalogItemRequest,
    StatusResponse,
    UpdateBasketRequest,
)
from storefront.basket.basket import Basket
from storefront.basket.items import AddItemToBasket, SetBasketQuantities
from storefront.basket.management import TransferBasket
from storefront.basket.repository import basket_for
from storefront.catalog.catalog_item import CatalogItem
from storefront.catalog.management import ChangeCatalogItemPrice, RegisterCatalogItem
from storefront.checkout.orchestrator import CheckoutOrchestrator
from storefront.identity.owner import apply_cookie, authenticated_name, current_owner_key, pending_cookie
from storefront.identity.resolver import is_anonymous_token
from storefront.notifications.dispatch import publish_basket_snapshot
from storefront.notifications.projections import BasketSnapshot
from storefront.ordering.exceptions import EmptyBasketOnCheckout
from storefront.ordering.order import Order
from storefront.utils import settings

# ---------------------------------------------------------------------------
# Basket Router
# ---------------------------------------------------------------------------
basket_router = APIRouter(prefix="/basket", tags=["basket"])


@basket_router.get("", response_model=BasketResponse)
async def get_basket(owner_key: str = Depends(current_owner_key)) -> BasketResponse:
    return BasketResponse.from_basket(basket_for(owner_key))


@basket_router.post("/items", response_model=BasketResponse)
async def add_basket_item(
    body: AddBasketItemRequest,
    background_tasks: BackgroundTasks,
    owner_key: str = Depends(current_owner_key),
) -> BasketResponse:
    catalog_item = current_domain.repository_for(CatalogItem).get(body.catalog_item_id)

    basket_id = current_domain.process(
        AddItemToBasket(
            owner_key=owner_key,
            catalog_item_id=str(catalog_item.id),
            unit_price=catalog_item.price,
            quantity=body.quantity,
        ),
        asynchronous=False,
    )
    basket = current_domain.repository_for(Basket).get(basket_id)

    # Reservation consumers get the whole basket after every add
    background_tasks.add_task(publish_basket_snapshot, BasketSnapshot.from_basket(basket))

    return BasketResponse.from_basket(basket)


@basket_router.put("/items", response_model=BasketResponse)
async def update_basket_items(
    body: UpdateBasketRequest,
    owner_key: str = Depends(current_owner_key),
) -> BasketResponse:
    basket = basket_for(owner_key)
    current_domain.process(
        SetBasketQuantities(
            basket_id=str(basket.id),
            quantities=json.dumps({line.id: line.quantity for line in body.items}),
        ),
        asynchronous=False,
    )
    return BasketResponse.from_basket(current_domain.repository_for(Basket).get(basket.id))


@basket_router.post("/transfer", response_model=BasketResponse)
async def transfer_basket(request: Request, response: Response) -> BasketResponse:
    """Move the anonymous visitor's basket to the user who just signed in."""
    owner_key = authenticated_name(request)
    if owner_key is None:
        raise HTTPException(status_code=401, detail="Sign in to transfer a basket")

    anonymous_key = request.cookies.get(settings.BASKET_COOKIE_NAME)
    if is_anonymous_token(anonymous_key):
        current_domain.process(
            TransferBasket(anonymous_key=anonymous_key, owner_key=owner_key),
            asynchronous=False,
        )
        response.delete_cookie(settings.BASKET_COOKIE_NAME)

    return BasketResponse.from_basket(basket_for(owner_key))


@basket_router.post("/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout(
    body: CheckoutRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    owner_key: str = Depends(current_owner_key),
):
    """Place an order from the basket.

    An empty basket sends the shopper back to /basket with nothing changed.
    """
    orchestrator = CheckoutOrchestrator(schedule=background_tasks.add_task)
    try:
        result = orchestrator.checkout(
            owner_key,
            {line.id: line.quantity for line in body.items},
            body.shipping_address.model_dump() if body.shipping_address else None,
        )
    except EmptyBasketOnCheckout:
        redirect = RedirectResponse(url="/basket", status_code=303)
        cookie = pending_cookie(request)
        if cookie is not None:
            apply_cookie(redirect, cookie)
        return redirect

    return CheckoutResponse(order_id=result.order_id, total=result.total)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_my_orders(request: Request) -> list[OrderResponse]:
    buyer_id = authenticated_name(request)
    if buyer_id is None:
        raise HTTPException(status_code=401, detail="Sign in to see your orders")

    orders = current_domain.repository_for(Order).for_buyer(buyer_id)
    return [OrderResponse.from_order(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, owner_key: str = Depends(current_owner_key)) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    # Someone else's order is reported as missing
    if order.buyer_id != owner_key:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderResponse.from_order(order)


# ---------------------------------------------------------------------------
# Catalog Router
# ---------------------------------------------------------------------------
catalog_router = APIRouter(prefix="/catalog/items", tags=["catalog"])


def _catalog_item_response(item) -> CatalogItemResponse:
    return CatalogItemResponse(
        id=str(item.id),
        name=item.name,
        description=item.description,
        price=item.price,
        picture_uri=item.picture_uri,
    )


@catalog_router.post("", status_code=201, response_model=CatalogItemIdResponse)
async def register_catalog_item(body: RegisterCatalogItemRequest) -> CatalogItemIdResponse:
    command = RegisterCatalogItem(
        name=body.name,
        description=body.description,
        price=body.price,
        picture_uri=body.picture_uri,
    )
    result = current_domain.process(command, asynchronous=False)
    return CatalogItemIdResponse(catalog_item_id=result)


@catalog_router.get("", response_model=list[CatalogItemResponse])
async def list_catalog_items() -> list[CatalogItemResponse]:
    items = current_domain.repository_for(CatalogItem)._dao.query.all().items
    return [_catalog_item_response(item) for item in items]


@catalog_router.get("/{catalog_item_id}", response_model=CatalogItemResponse)
async def get_catalog_item(catalog_item_id: str) -> CatalogItemResponse:
    return _catalog_item_response(current_domain.repository_for(CatalogItem).get(catalog_item_id))


@catalog_router.put("/{catalog_item_id}/price", response_model=StatusResponse)
async def change_catalog_item_price(catalog_item_id: str, body: ChangePriceRequest) -> StatusResponse:
    command = ChangeCatalogItemPrice(catalog_item_id=catalog_item_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
