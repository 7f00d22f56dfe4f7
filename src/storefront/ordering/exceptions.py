"""Business rejections raised by the ordering side of the storefront."""


class EmptyBasketOnCheckout(Exception):
    """Checkout was attempted against a basket with no lines.

    An expected outcome rather than a fault: callers route the shopper back to
    the basket and leave every piece of state untouched.
    """

    def __init__(self, basket_id):
        self.basket_id = str(basket_id)
        super().__init__(f"Basket with id {self.basket_id} is empty")
