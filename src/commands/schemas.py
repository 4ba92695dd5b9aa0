"""Pydantic argument schemas for the ledger commands.

Each schema is built from the raw tab-separated fields of one command line.
Fields are validated in declaration order and the first failing check
raises a ``CommandError`` (see ``errors.py``), so the logged message is
always the one for the earliest bad field.
"""

from __future__ import annotations

import math
import re
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from src.domain.entities import VOYAGE_CLASSES, Voyage
from src.domain.enums import INIT_ARITY, CommandName, VoyageType
from src.infrastructure.repositories import VoyageRepository

from .errors import ArgumentError, DuplicateVoyage, UsageError, VoyageNotFound

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

INIT_FIELDS = (
    "voyage_id",
    "origin",
    "destination",
    "rows",
    "price",
    "refund_cut",
    "premium_fee",
)


def parse_int(raw: Any) -> Optional[int]:
    """Integer literal with an optional sign, else ``None``."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw)
    return int(text) if _INTEGER.fullmatch(text) else None


def parse_number(raw: Any) -> Optional[float]:
    """Finite decimal literal (exponent allowed), else ``None``."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        text = str(raw)
        if not _DECIMAL.fullmatch(text):
            return None
        value = float(text)
    return value if math.isfinite(value) else None


def _voyages(info: ValidationInfo) -> Optional[VoyageRepository]:
    return (info.context or {}).get("voyages")


# ── INIT_VOYAGE ───────────────────────────────────────────────────────


class InitVoyageRequest(BaseModel):
    voyage_type: VoyageType
    voyage_id: int
    origin: str
    destination: str
    rows: int
    price: float
    refund_cut: Optional[int] = None
    premium_fee: Optional[int] = None

    @classmethod
    def from_fields(
        cls,
        fields: list[str],
        voyages: Optional[VoyageRepository] = None,
        max_rows: Optional[int] = None,
    ) -> "InitVoyageRequest":
        if len(fields) < 2 or fields[1] not in {t.value for t in VoyageType}:
            raise UsageError(CommandName.INIT_VOYAGE.value)
        voyage_type = VoyageType(fields[1])
        if len(fields) != INIT_ARITY[voyage_type]:
            raise UsageError(CommandName.INIT_VOYAGE.value)

        data: dict[str, Any] = dict(zip(INIT_FIELDS, fields[2:]))
        data["voyage_type"] = voyage_type
        return cls.model_validate(data, context={"voyages": voyages, "max_rows": max_rows})

    @field_validator("voyage_id", mode="before")
    @classmethod
    def _unused_positive_id(cls, value: Any, info: ValidationInfo) -> int:
        voyage_id = parse_int(value)
        if voyage_id is None or voyage_id <= 0:
            raise ArgumentError(
                f"{value} is not a positive integer, ID of a voyage must be a "
                f"positive integer!"
            )
        voyages = _voyages(info)
        if voyages is not None and voyage_id in voyages:
            raise DuplicateVoyage(voyage_id)
        return voyage_id

    @field_validator("rows", mode="before")
    @classmethod
    def _positive_rows(cls, value: Any, info: ValidationInfo) -> int:
        rows = parse_int(value)
        if rows is None or rows <= 0:
            raise ArgumentError(
                f"{value} is not a positive integer, number of seat rows of a "
                f"voyage must be a positive integer!"
            )
        max_rows = (info.context or {}).get("max_rows")
        if max_rows is not None and rows > max_rows:
            raise ArgumentError(
                f"{rows} is too many seat rows, number of seat rows of a voyage can "
                f"not exceed {max_rows}!"
            )
        return rows

    @field_validator("price", mode="before")
    @classmethod
    def _positive_price(cls, value: Any) -> float:
        price = parse_number(value)
        if price is None or price <= 0:
            raise ArgumentError(
                f"{value} is not a positive number, price must be a positive number!"
            )
        return price

    @field_validator("refund_cut", mode="before")
    @classmethod
    def _percentage_cut(cls, value: Any) -> int:
        cut = parse_int(value)
        if cut is None:
            raise ArgumentError("Invalid format for refund cut, must be a numeric value.")
        if not 0 <= cut <= 100:
            raise ArgumentError(
                f"{cut} is not an integer that is in range of [0, 100], refund cut "
                f"must be an integer that is in range of [0, 100]!"
            )
        return cut

    @field_validator("premium_fee", mode="before")
    @classmethod
    def _non_negative_fee(cls, value: Any) -> int:
        fee = parse_int(value)
        if fee is None:
            raise ArgumentError(f"{value} is not a valid integer.")
        if fee < 0:
            raise ArgumentError(
                f"{fee} is not a non-negative integer, premium fee must be a "
                f"non-negative integer!"
            )
        return fee

    def build_voyage(self) -> Voyage:
        kwargs: dict[str, Any] = dict(
            id=self.voyage_id,
            origin=self.origin,
            destination=self.destination,
            rows=self.rows,
            price=self.price,
        )
        if self.voyage_type != VoyageType.MINIBUS:
            kwargs["refund_cut"] = self.refund_cut or 0
        if self.voyage_type == VoyageType.PREMIUM:
            kwargs["premium_fee"] = self.premium_fee or 0
        return VOYAGE_CLASSES[self.voyage_type](**kwargs)


# ── SELL_TICKET / REFUND_TICKET ───────────────────────────────────────


class SeatRequest(BaseModel):
    voyage_id: int
    seats: list[int]

    @classmethod
    def from_fields(
        cls,
        command: str,
        fields: list[str],
        voyages: Optional[VoyageRepository] = None,
        seat_separator: str = "_",
    ) -> "SeatRequest":
        if len(fields) != 3:
            raise UsageError(command)
        return cls.model_validate(
            {"voyage_id": fields[1], "seats": fields[2]},
            context={"voyages": voyages, "seat_separator": seat_separator},
        )

    @field_validator("voyage_id", mode="before")
    @classmethod
    def _existing_voyage(cls, value: Any, info: ValidationInfo) -> int:
        voyage_id = parse_int(value)
        if voyage_id is None:
            raise ArgumentError("Invalid format for ID, ID must be an integer.")
        voyages = _voyages(info)
        if voyages is not None and voyage_id not in voyages:
            raise VoyageNotFound(voyage_id)
        return voyage_id

    @field_validator("seats", mode="before")
    @classmethod
    def _seats_on_board(cls, value: Any, info: ValidationInfo) -> list[int]:
        if isinstance(value, str):
            separator = (info.context or {}).get("seat_separator", "_")
            tokens: list[Any] = value.split(separator)
        else:
            tokens = list(value)

        voyages = _voyages(info)
        voyage = voyages.get_by_id(info.data["voyage_id"]) if voyages is not None else None

        seats = []
        for token in tokens:
            seat = parse_int(token)
            if seat is None or seat <= 0:
                shown = token if seat is None else seat
                raise ArgumentError(
                    f"{shown} is not a positive integer, seat number must be a "
                    f"positive integer!"
                )
            if voyage is not None and seat > voyage.total_seats:
                raise ArgumentError("There is no such a seat!")
            seats.append(seat)
        return seats

    @property
    def seat_label(self) -> str:
        return "-".join(str(seat) for seat in self.seats)


# ── PRINT_VOYAGE / CANCEL_VOYAGE ──────────────────────────────────────


class VoyageLookupRequest(BaseModel):
    voyage_id: int

    invalid_format_message: ClassVar[str] = "Invalid format for ID, ID must be an integer."

    @classmethod
    def from_fields(
        cls,
        command: str,
        fields: list[str],
        voyages: Optional[VoyageRepository] = None,
    ) -> "VoyageLookupRequest":
        if len(fields) != 2:
            raise UsageError(command)
        return cls.model_validate(
            {"voyage_id": fields[1]},
            context={"voyages": voyages, "invalid_format": cls.invalid_format_message},
        )

    @field_validator("voyage_id", mode="before")
    @classmethod
    def _existing_positive_id(cls, value: Any, info: ValidationInfo) -> int:
        context = info.context or {}
        voyage_id = parse_int(value)
        if voyage_id is None:
            raise ArgumentError(
                context.get("invalid_format", VoyageLookupRequest.invalid_format_message)
            )
        if voyage_id <= 0:
            raise ArgumentError(
                f"{voyage_id} is not a positive integer, ID of a voyage must be a "
                f"positive integer!"
            )
        voyages = context.get("voyages")
        if voyages is not None and voyage_id not in voyages:
            raise VoyageNotFound(voyage_id)
        return voyage_id


class PrintVoyageRequest(VoyageLookupRequest):
    pass


class CancelVoyageRequest(VoyageLookupRequest):
    invalid_format_message: ClassVar[str] = "Invalid ID format. ID must be an integer."
