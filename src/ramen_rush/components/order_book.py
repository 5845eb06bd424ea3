from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from ramen_rush.components.ingredient import IngredientType
from ramen_rush.components.line_match import LineMatch
from ramen_rush.constants import MAX_ORDERS, ORDER_MAX_QUANTITY, ORDER_MIN_QUANTITY


@dataclass(frozen=True, slots=True)
class Order:
    """Customer demand for an exact-length run of one ingredient.

    Quantity is clamped into the 1..3 range.
    """
    ingredient: IngredientType
    quantity: int

    def __post_init__(self) -> None:
        clamped = max(ORDER_MIN_QUANTITY, min(ORDER_MAX_QUANTITY, int(self.quantity)))
        object.__setattr__(self, "quantity", clamped)

    def matches(self, match: LineMatch) -> bool:
        return match.ingredient == self.ingredient and match.length == self.quantity

    @property
    def display_text(self) -> str:
        return f"x{self.quantity}"


@dataclass(slots=True)
class OrderBook:
    """Bounded list of active orders, kept in insertion order for display.

    Book order only decides which of several equal-valued orders is fulfilled first.
    """
    capacity: int = MAX_ORDERS
    orders: List[Order] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"OrderBook capacity must be positive, got {self.capacity}")
        del self.orders[self.capacity:]

    def __len__(self) -> int:
        return len(self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    @property
    def is_full(self) -> bool:
        return len(self.orders) >= self.capacity

    def add_order(self, order: Order) -> bool:
        """Append ``order`` unless the book is full; overflow is dropped, never queued."""
        if self.is_full:
            return False
        self.orders.append(order)
        return True

    def remove_order(self, order: Order) -> bool:
        try:
            self.orders.remove(order)
        except ValueError:
            return False
        return True

    def fulfill(self, match: LineMatch) -> Optional[Order]:
        """Return the first order the run satisfies exactly, without removing it."""
        for order in self.orders:
            if order.matches(match):
                return order
        return None

    def generate_orders(
        self,
        pool: Sequence[IngredientType],
        count: int,
        rng: random.Random,
    ) -> List[Order]:
        """Replace the book with up to ``count`` random orders drawn from ``pool``.

        An empty pool leaves the current orders untouched.
        """
        if not pool:
            return []
        self.orders = []
        for _ in range(min(count, self.capacity)):
            self.add_order(random_order(pool, rng))
        return list(self.orders)

    def replenish(self, pool: Sequence[IngredientType], rng: random.Random) -> Optional[Order]:
        """Append a single fresh order when there is room for one."""
        if not pool or self.is_full:
            return None
        order = random_order(pool, rng)
        self.add_order(order)
        return order


def random_order(pool: Sequence[IngredientType], rng: random.Random) -> Order:
    return Order(
        ingredient=rng.choice(list(pool)),
        quantity=rng.randint(ORDER_MIN_QUANTITY, ORDER_MAX_QUANTITY),
    )
