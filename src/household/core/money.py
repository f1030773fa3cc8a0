#!/usr/bin/env python3
"""
Money Value Type

Salaries, balances and totals are all carried as Money: a whole number of
cents, so sums over a year of pay dates or a column of balances are exact.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import cents_to_decimal, decimal_to_cents, format_cents, parse_dollars_to_cents


@dataclass(frozen=True, order=True)
class Money:
    """
    An amount in cents. Ordered and summable.

    Examples:
        >>> salary = Money.from_dollars("$2,150.00")
        >>> str(salary)
        '$2,150.00'
        >>> (salary * 2).to_decimal()
        Decimal('4300.00')
        >>> sum([salary, salary]) == salary * 2
        True
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        return cls(int(cents))

    @classmethod
    def from_dollars(cls, dollars: str | int | Decimal) -> "Money":
        """
        Whole dollars, a Decimal, or text such as "$1,234.45".

        Raises:
            ValueError: If text is not a valid amount
        """
        if isinstance(dollars, Decimal):
            return cls(decimal_to_cents(dollars))
        if isinstance(dollars, int):
            return cls(dollars * 100)
        return cls(parse_dollars_to_cents(dollars))

    def to_cents(self) -> int:
        return self.cents

    def to_decimal(self) -> Decimal:
        """Dollars with exactly two decimal places."""
        return cents_to_decimal(self.cents)

    def __add__(self, other: "Money") -> "Money":
        return Money(self.cents + other.cents)

    def __radd__(self, other: "Money | int") -> "Money":
        # sum() starts from the integer 0
        if other == 0:
            return self
        return self + other  # type: ignore[operator]

    def __sub__(self, other: "Money") -> "Money":
        return Money(self.cents - other.cents)

    def __mul__(self, count: int) -> "Money":
        return Money(self.cents * count)

    def __str__(self) -> str:
        return format_cents(self.cents)
