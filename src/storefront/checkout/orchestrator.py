"""Checkout — turns the shopper's basket into an order exactly once.

Flow for one checkout, strictly sequential:
    1. Apply submitted quantities to the owner's basket (SetBasketQuantities)
    2. Create the order from the basket (CreateOrder). An empty basket raises
       EmptyBasketOnCheckout and nothing else happens.
    3. Delete the basket. Failure here is logged for reconciliation; the order
       stands and checkout still succeeds.
    4. Re-read the order and project it into an OrderNotification.
    5. Hand the notification to best-effort dispatch, now or after the
       response when a scheduler is given.

States:
    PENDING → ADJUSTING_BASKET → CREATING_ORDER → ORDER_CREATED → NOTIFYING → DONE
                                               ↘ EMPTY_BASKET_REJECTED

Concurrent checkouts for the same owner are not serialised here. Each
command runs in its own unit of work and the persistence provider is
responsible for atomicity across requests.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

import structlog
from protean.utils.globals import current_domain

from storefront.basket.items import SetBasketQuantities
from storefront.basket.management import DeleteBasket
from storefront.basket.repository import basket_for
from storefront.notifications.dispatch import notify_order_placed
from storefront.notifications.projections import OrderNotification
from storefront.ordering.creation import CreateOrder
from storefront.ordering.exceptions import EmptyBasketOnCheckout
from storefront.ordering.order import Order
from storefront.utils import settings

logger = structlog.get_logger(__name__)


class CheckoutState(Enum):
    PENDING = "Pending"
    ADJUSTING_BASKET = "AdjustingBasket"
    CREATING_ORDER = "CreatingOrder"
    ORDER_CREATED = "OrderCreated"
    NOTIFYING = "Notifying"
    DONE = "Done"
    EMPTY_BASKET_REJECTED = "EmptyBasketRejected"


@dataclass(frozen=True)
class CheckoutResult:
    order_id: str
    basket_id: str
    total: float
    basket_deleted: bool
    notification: OrderNotification


class CheckoutOrchestrator:
    """Runs one checkout against the active domain.

    Args:
        notify: Delivers an OrderNotification. Defaults to the best-effort
            webhook dispatch.
        schedule: Optional `schedule(fn, *args)` used to run delivery later,
            e.g. FastAPI's `BackgroundTasks.add_task`. Without it delivery
            happens inline before `checkout` returns.
    """

    def __init__(
        self,
        notify: Callable[[OrderNotification], object] = notify_order_placed,
        schedule: Callable[..., object] | None = None,
    ):
        self.notify = notify
        self.schedule = schedule

    def checkout(
        self,
        owner_key: str,
        adjustments: Mapping[str, int],
        shipping_address: Mapping[str, str] | None = None,
    ) -> CheckoutResult:
        log = logger.bind(owner_key=owner_key)
        address = dict(shipping_address or settings.DEFAULT_SHIP_TO)

        state = CheckoutState.PENDING
        basket_id = str(basket_for(owner_key).id)

        state = self._advance(log, state, CheckoutState.ADJUSTING_BASKET, basket_id=basket_id)
        current_domain.process(
            SetBasketQuantities(
                basket_id=basket_id,
                quantities=json.dumps({str(k): v for k, v in adjustments.items()}),
            ),
            asynchronous=False,
        )

        state = self._advance(log, state, CheckoutState.CREATING_ORDER, basket_id=basket_id)
        try:
            order_id = current_domain.process(
                CreateOrder(basket_id=basket_id, **address),
                asynchronous=False,
            )
        except EmptyBasketOnCheckout as exc:
            self._advance(log, state, CheckoutState.EMPTY_BASKET_REJECTED, basket_id=basket_id)
            log.warning(str(exc), basket_id=basket_id)
            raise

        state = self._advance(log, state, CheckoutState.ORDER_CREATED, order_id=order_id)
        basket_deleted = self._delete_basket(log, basket_id, order_id)

        order = current_domain.repository_for(Order).get(order_id)
        notification = OrderNotification.from_order(order)

        state = self._advance(log, state, CheckoutState.NOTIFYING, order_id=order_id)
        self._dispatch(log, notification)
        self._advance(log, state, CheckoutState.DONE, order_id=order_id)

        return CheckoutResult(
            order_id=str(order.id),
            basket_id=basket_id,
            total=order.total(),
            basket_deleted=basket_deleted,
            notification=notification,
        )

    @staticmethod
    def _advance(log, current, target, **context):
        log.debug("Checkout state change", from_state=current.value, to_state=target.value, **context)
        return target

    @staticmethod
    def _delete_basket(log, basket_id, order_id) -> bool:
        try:
            current_domain.process(DeleteBasket(basket_id=basket_id), asynchronous=False)
        except Exception as exc:
            log.error(
                "Basket not deleted after order creation, reconciliation needed",
                basket_id=basket_id,
                order_id=order_id,
                error=str(exc),
            )
            return False
        return True

    def _dispatch(self, log, notification) -> None:
        try:
            if self.schedule is not None:
                self.schedule(self.notify, notification)
            else:
                self.notify(notification)
        except Exception as exc:
            log.error(
                "Order notification dropped",
                order_id=notification.id,
                error=str(exc),
            )
