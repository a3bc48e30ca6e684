"""
Cart pricing.

The storefront keeps the cart in the browser; the server only needs the same
arithmetic at checkout. ``Cart`` mirrors the client behaviour: adding a product
already in the cart bumps its quantity, and a quantity of zero or less drops
the line.
"""

from dataclasses import dataclass, field
from typing import List

from database import new_id
from schemas import OrderItem, Product


def shipping_for(subtotal: float, threshold: float, fee: float) -> float:
    return 0 if subtotal >= threshold else fee


@dataclass
class CartItem:
    product: Product
    quantity: int
    id: str = field(default_factory=new_id)

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity

    def snapshot(self) -> OrderItem:
        return OrderItem(
            product_id=self.product.id,
            name=self.product.name,
            price=self.product.price,
            quantity=self.quantity,
            image=self.product.images[0] if self.product.images else "",
        )


@dataclass
class Cart:
    """Shipping is free at or above ``threshold``, otherwise a flat ``fee``."""
    threshold: float
    fee: float
    items: List[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        for item in self.items:
            if item.product_id == product.id:
                item.quantity += quantity
                return item
        item = CartItem(product=product, quantity=quantity)
        self.items.append(item)
        return item

    def update_quantity(self, item_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove(item_id)
            return
        for item in self.items:
            if item.id == item_id:
                item.quantity = quantity

    def remove(self, item_id: str) -> None:
        self.items = [i for i in self.items if i.id != item_id]

    def clear(self) -> None:
        self.items = []

    @property
    def total_items(self) -> int:
        return sum(i.quantity for i in self.items)

    @property
    def subtotal(self) -> float:
        return sum(i.line_total for i in self.items)

    @property
    def shipping(self) -> float:
        return shipping_for(self.subtotal, self.threshold, self.fee)

    @property
    def total(self) -> float:
        return self.subtotal + self.shipping

    def order_items(self) -> List[OrderItem]:
        return [i.snapshot() for i in self.items]
