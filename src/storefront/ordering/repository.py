"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.ordering.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_buyer(self, buyer_id: str) -> list[Order]:
        """Orders placed by buyer_id, newest first."""
        results = self._dao.query.filter(buyer_id=buyer_id).all().items
        orders = [self.get(result.id) for result in results]
        return sorted(orders, key=lambda o: o.order_date, reverse=True)
