"""Basket lifecycle — deletion after checkout and transfer on sign-in."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.basket.basket import Basket
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Basket")
class DeleteBasket:
    basket_id = Identifier(required=True)


@storefront.command(part_of="Basket")
class TransferBasket:
    """Move an anonymous visitor's lines into the basket of the user who just signed in."""

    anonymous_key = String(required=True, max_length=255)
    owner_key = String(required=True, max_length=255)


@storefront.command_handler(part_of=Basket)
class ManageBasketHandler:
    @handle(DeleteBasket)
    def delete_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        repo.remove(basket)
        logger.info("Basket deleted", basket_id=str(command.basket_id))

    @handle(TransferBasket)
    def transfer_basket(self, command):
        if command.anonymous_key == command.owner_key:
            return None

        repo = current_domain.repository_for(Basket)
        anonymous = repo.for_owner(command.anonymous_key)
        if anonymous is None:
            return None

        basket = repo.get_or_create_for(command.owner_key)
        basket.absorb(anonymous)
        repo.add(basket)
        repo.remove(anonymous)

        logger.info(
            "Anonymous basket transferred",
            source_basket_id=str(anonymous.id),
            basket_id=str(basket.id),
        )
        return str(basket.id)
