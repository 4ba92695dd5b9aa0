"""
Domain entities with business logic.

Patterns used
-------------
- **Template Method** on ``Voyage``: seat bookkeeping, revenue and the
  state block are shared; each variant supplies its row width, aisle
  position, pricing strategy and initialisation summary.
- **Strategy Pattern** for pricing (see ``pricing.py``), chosen once at
  construction time.
- ``sell`` / ``refund`` are all-or-nothing: they validate every requested
  seat before touching the seat bitmap or revenue.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional

from .enums import SEATS_PER_ROW, VoyageType
from .layout import render_seat_map
from .money import format_amount
from .pricing import FlatPricing, PremiumPricing, SeatPricing


# ── Base entity ───────────────────────────────────────────────────────


@dataclass
class Voyage(ABC):
    id: int
    origin: str
    destination: str
    rows: int
    price: float
    refund_cut: int = 0
    revenue: float = field(default=0.0, init=False)
    seats_sold: list[bool] = field(default_factory=list, init=False, repr=False)
    pricing: SeatPricing = field(init=False, repr=False, compare=False)

    voyage_type: ClassVar[VoyageType]
    aisle_after: ClassVar[Optional[int]] = None
    refundable: ClassVar[bool] = True

    def __post_init__(self) -> None:
        self.seats_sold = [False] * self.total_seats
        self.pricing = self._build_pricing()

    @abstractmethod
    def _build_pricing(self) -> SeatPricing: ...

    @abstractmethod
    def describe_init(self, currency: str = "TL") -> str:
        """One-line summary logged when the voyage is created."""

    # ── Inventory ─────────────────────────────────────────────────

    @property
    def seats_per_row(self) -> int:
        return SEATS_PER_ROW[self.voyage_type]

    @property
    def total_seats(self) -> int:
        return self.rows * self.seats_per_row

    def is_valid_seat(self, seat_number: int) -> bool:
        return 1 <= seat_number <= self.total_seats

    def is_sold(self, seat_number: int) -> bool:
        return self.seats_sold[seat_number - 1]

    def sold_seats(self) -> list[int]:
        return [i + 1 for i, sold in enumerate(self.seats_sold) if sold]

    # ── Pricing ───────────────────────────────────────────────────

    def seat_price(self, seat_number: int) -> float:
        return self.pricing.seat_price(seat_number)

    def refund_value(self, seat_number: int) -> float:
        return self.pricing.refund_value(seat_number)

    # ── Sales ─────────────────────────────────────────────────────

    def can_sell(self, seat_numbers: Iterable[int]) -> bool:
        seats = list(seat_numbers)
        if not seats or len(set(seats)) != len(seats):
            return False
        return all(self.is_valid_seat(s) and not self.is_sold(s) for s in seats)

    def sell(self, seat_numbers: Iterable[int]) -> bool:
        """Mark every seat sold and book its price, or change nothing."""
        seats = list(seat_numbers)
        if not self.can_sell(seats):
            return False
        for seat in seats:
            self.seats_sold[seat - 1] = True
        self.revenue += self.pricing.total(seats)
        return True

    def can_refund(self, seat_numbers: Iterable[int]) -> bool:
        if not self.refundable:
            return False
        seats = list(seat_numbers)
        if not seats or len(set(seats)) != len(seats):
            return False
        return all(self.is_valid_seat(s) and self.is_sold(s) for s in seats)

    def refund(self, seat_numbers: Iterable[int]) -> bool:
        """Release every seat and give back its refund value, or change nothing."""
        seats = list(seat_numbers)
        if not self.can_refund(seats):
            return False
        for seat in seats:
            self.seats_sold[seat - 1] = False
        self.revenue -= self.pricing.refund_total(seats)
        return True

    def cancel_sales(self) -> float:
        """Pay back the full price of every sold seat.

        The seat bitmap is left untouched so the final state still shows
        which seats had been sold.
        """
        amount = self.cancellation_refund()
        self.revenue -= amount
        return amount

    def cancellation_refund(self) -> float:
        return self.pricing.total(self.sold_seats())

    # ── Presentation ──────────────────────────────────────────────

    def seat_map(self) -> str:
        return render_seat_map(self.seats_sold, self.seats_per_row, self.aisle_after)

    def describe_state(self, revenue: Optional[float] = None) -> str:
        """State block; *revenue* overrides the booked figure when given."""
        shown = self.revenue if revenue is None else revenue
        return "\n".join(
            [
                f"Voyage {self.id}",
                f"{self.origin}-{self.destination}",
                self.seat_map(),
                f"Revenue: {format_amount(shown)}",
            ]
        )


# ── Variants ──────────────────────────────────────────────────────────


@dataclass
class StandardVoyage(Voyage):
    voyage_type: ClassVar[VoyageType] = VoyageType.STANDARD
    aisle_after: ClassVar[Optional[int]] = 2

    def _build_pricing(self) -> SeatPricing:
        return FlatPricing(self.price, self.refund_cut)

    def describe_init(self, currency: str = "TL") -> str:
        return (
            f"Voyage {self.id} was initialized as a standard (2+2) voyage from "
            f"{self.origin} to {self.destination} with {format_amount(self.price)} "
            f"{currency} priced {self.total_seats} regular seats. Note that refunds "
            f"will be {self.refund_cut}% less than the paid amount."
        )


@dataclass
class PremiumVoyage(Voyage):
    premium_fee: int = 0

    voyage_type: ClassVar[VoyageType] = VoyageType.PREMIUM
    aisle_after: ClassVar[Optional[int]] = 1

    def _build_pricing(self) -> SeatPricing:
        return PremiumPricing(self.price, self.refund_cut, self.premium_fee)

    @property
    def premium_seat_count(self) -> int:
        return self.rows

    @property
    def regular_seat_count(self) -> int:
        return self.total_seats - self.premium_seat_count

    def describe_init(self, currency: str = "TL") -> str:
        premium_price = self.pricing.seat_price(1)
        return (
            f"Voyage {self.id} was initialized as a premium (1+2) voyage from "
            f"{self.origin} to {self.destination} with {format_amount(self.price)} "
            f"{currency} priced {self.regular_seat_count} regular seats and "
            f"{format_amount(premium_price)} {currency} priced "
            f"{self.premium_seat_count} premium seats. Note that refunds will be "
            f"{self.refund_cut}% less than the paid amount."
        )


@dataclass
class Minibus(Voyage):
    refund_cut: int = field(default=0, init=False)

    voyage_type: ClassVar[VoyageType] = VoyageType.MINIBUS
    refundable: ClassVar[bool] = False

    def _build_pricing(self) -> SeatPricing:
        return FlatPricing(self.price)

    def describe_init(self, currency: str = "TL") -> str:
        return (
            f"Voyage {self.id} was initialized as a minibus (2) voyage from "
            f"{self.origin} to {self.destination} with {format_amount(self.price)} "
            f"{currency} priced {self.total_seats} regular seats. Note that minibus "
            f"tickets are not refundable."
        )


VOYAGE_CLASSES: dict[VoyageType, type[Voyage]] = {
    VoyageType.STANDARD: StandardVoyage,
    VoyageType.PREMIUM: PremiumVoyage,
    VoyageType.MINIBUS: Minibus,
}
