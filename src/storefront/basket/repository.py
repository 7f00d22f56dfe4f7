"""Repository for the Basket aggregate — lookups by owner key."""

from protean.utils.globals import current_domain

from storefront.basket.basket import Basket, BasketItem
from storefront.domain import storefront


@storefront.repository(part_of=Basket)
class BasketRepository:
    def for_owner(self, owner_key: str) -> Basket | None:
        """The basket owned by owner_key, or None."""
        results = self._dao.query.filter(owner_key=owner_key).all().items
        if not results:
            return None
        return self.get(results[0].id)

    def get_or_create_for(self, owner_key: str) -> Basket:
        basket = self.for_owner(owner_key)
        if basket is None:
            basket = Basket.create(owner_key=owner_key)
            self.add(basket)
        return basket

    def remove(self, basket: Basket) -> None:
        """Delete the basket together with its line rows."""
        line_dao = current_domain.repository_for(BasketItem)._dao
        for line in list(basket.items):
            line_dao.delete(line)
        self._dao.delete(basket)


def basket_for(owner_key: str) -> Basket:
    """Get-or-create the owner's basket in the active domain."""
    return current_domain.repository_for(Basket).get_or_create_for(owner_key)
