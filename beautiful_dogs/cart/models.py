"""
Cart - Data Models
"""
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Union

PriceLike = Union[Decimal, int, float, str]


def to_price(value: PriceLike) -> Decimal:
    """
    Coerce a user supplied price to Decimal.

    Floats go through str() so 10.0 becomes Decimal("10.0") and not the
    binary expansion. Raises ValueError for garbage or negative amounts.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        price = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid price: {value!r}") from e
    if not price.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    if price < 0:
        raise ValueError(f"Price must not be negative: {value!r}")
    return price


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(eq=False)
class CartEntry:
    """
    One line of the order list.

    Identity is `id`, generated when the entry is created; only `price`
    changes afterwards.
    """
    name: str
    price: Decimal
    id: str = field(default_factory=_new_id)

    def __eq__(self, other):
        if not isinstance(other, CartEntry):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)
