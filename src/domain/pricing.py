"""
Seat Pricing  (Strategy Pattern)
================================

Formula
-------
Seat price   = Base_Price                         (regular seat)
             = Base_Price x (1 + Premium_Fee/100)  (premium seat)
Refund value = Seat_Price x (1 - Refund_Cut/100)

* A seat is **premium** when ``seat_number % 3 == 1`` (the single seat on
  the left of the aisle in a 1+2 premium row).
* Cancellations refund the full seat price, not the refund value.

Complexity: O(1) per seat.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


def is_premium_seat(seat_number: int) -> bool:
    return seat_number % 3 == 1


# ── Strategy hierarchy ────────────────────────────────────────────────


class SeatPricing(ABC):
    def __init__(self, base_price: float, refund_cut: int = 0):
        self.base_price = base_price
        self.refund_cut = refund_cut

    @abstractmethod
    def seat_price(self, seat_number: int) -> float: ...

    def refund_value(self, seat_number: int) -> float:
        return self.seat_price(seat_number) * (1 - self.refund_cut / 100)

    def total(self, seat_numbers: list[int]) -> float:
        return sum(self.seat_price(seat) for seat in seat_numbers)

    def refund_total(self, seat_numbers: list[int]) -> float:
        return sum(self.refund_value(seat) for seat in seat_numbers)


class FlatPricing(SeatPricing):
    """Every seat costs the base price."""

    def seat_price(self, seat_number: int) -> float:
        return self.base_price


class PremiumPricing(SeatPricing):
    """Charges a percentage fee on top of the base price for premium seats."""

    def __init__(self, base_price: float, refund_cut: int = 0, premium_fee: int = 0):
        super().__init__(base_price, refund_cut)
        self.premium_fee = premium_fee

    @property
    def premium_price(self) -> float:
        return self.base_price * (1 + self.premium_fee / 100)

    def seat_price(self, seat_number: int) -> float:
        if is_premium_seat(seat_number):
            return self.premium_price
        return self.base_price
