"""Basket aggregate (CQRS) — the shopper's lines before checkout.

A basket belongs to exactly one owner key: a signed-in principal name or an
anonymous visitor token. Lines keep insertion order. A quantity of zero
removes the line; the basket itself is deleted once an order is placed
from it.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.basket.events import (
    BasketItemAdded,
    BasketItemRemoved,
    BasketQuantitiesUpdated,
    BasketTransferred,
)
from storefront.domain import storefront


@storefront.entity(part_of="Basket")
class BasketItem:
    catalog_item_id = Identifier(required=True)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=0)
    added_at = DateTime(required=True)

    def add_quantity(self, quantity):
        if quantity < 0:
            raise ValidationError({"quantity": ["Quantity cannot be negative"]})
        self.quantity += quantity

    def set_quantity(self, quantity):
        if quantity < 0:
            raise ValidationError({"quantity": ["Quantity cannot be negative"]})
        self.quantity = quantity


@storefront.aggregate
class Basket:
    owner_key = String(required=True, max_length=255)
    items = HasMany(BasketItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, owner_key):
        now = datetime.now(UTC)
        return cls(owner_key=owner_key, created_at=now, updated_at=now)

    @property
    def lines(self):
        """Lines in the order they were first added.

        Reloaded children come back in whatever order the provider returns them.
        """
        return sorted(self.items, key=lambda item: item.added_at.replace(tzinfo=None))

    @property
    def is_empty(self):
        return not self.items

    def total(self):
        return sum(item.unit_price * item.quantity for item in self.items)

    def total_items(self):
        return sum(item.quantity for item in self.items)

    def _find_line(self, catalog_item_id):
        return next(
            (i for i in self.items if str(i.catalog_item_id) == str(catalog_item_id)),
            None,
        )

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_item(self, catalog_item_id, unit_price, quantity=1):
        """Add a catalog item, or grow the existing line for it."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        existing = self._find_line(catalog_item_id)

        if existing:
            existing.add_quantity(quantity)
            item_id = str(existing.id)
        else:
            item = BasketItem(
                catalog_item_id=catalog_item_id,
                unit_price=unit_price,
                quantity=quantity,
                added_at=now,
            )
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = now

        self.raise_(
            BasketItemAdded(
                basket_id=str(self.id),
                owner_key=self.owner_key,
                item_id=item_id,
                catalog_item_id=str(catalog_item_id),
                unit_price=unit_price,
                quantity=quantity,
            )
        )

    def set_quantities(self, quantities):
        """Apply desired quantities keyed by line id.

        Every value is validated before any line changes. Ids that are not in
        the basket are ignored. Lines left at zero are removed.
        """
        for item_id, quantity in quantities.items():
            if not isinstance(quantity, int) or isinstance(quantity, bool):
                raise ValidationError({"quantities": [f"Quantity for {item_id} must be an integer"]})
            if quantity < 0:
                raise ValidationError({"quantities": [f"Quantity for {item_id} cannot be negative"]})

        wanted = {str(k): v for k, v in quantities.items()}
        matched = 0
        for item in self.items:
            if str(item.id) in wanted:
                item.set_quantity(wanted[str(item.id)])
                matched += 1

        removed = self.remove_empty_items()
        if not matched and not removed:
            return

        self.updated_at = datetime.now(UTC)

        self.raise_(
            BasketQuantitiesUpdated(
                basket_id=str(self.id),
                updated_count=matched,
                removed_count=len(removed),
            )
        )

    def remove_empty_items(self):
        empty = [item for item in self.items if item.quantity == 0]
        for item in empty:
            self.remove_items(item)
            self.raise_(BasketItemRemoved(basket_id=str(self.id), item_id=str(item.id)))
        return [str(item.id) for item in empty]

    # -------------------------------------------------------------------
    # Sign-in transfer
    # -------------------------------------------------------------------
    def absorb(self, other):
        """Merge another basket's lines into this one (anonymous → signed-in)."""
        now = datetime.now(UTC)
        for line in other.lines:
            existing = self._find_line(line.catalog_item_id)
            if existing:
                existing.add_quantity(line.quantity)
            else:
                self.add_items(
                    BasketItem(
                        catalog_item_id=line.catalog_item_id,
                        unit_price=line.unit_price,
                        quantity=line.quantity,
                        added_at=line.added_at,
                    )
                )
        self.updated_at = now

        self.raise_(
            BasketTransferred(
                basket_id=str(self.id),
                source_owner_key=other.owner_key,
                owner_key=self.owner_key,
                items_merged_count=len(other.items),
            )
        )
