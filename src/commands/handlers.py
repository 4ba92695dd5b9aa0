"""
Command handlers
================

INIT_VOYAGE   -- create a voyage and summarise its layout and prices
SELL_TICKET   -- sell one or more seats of a voyage
REFUND_TICKET -- refund one or more sold seats (not for minibuses)
PRINT_VOYAGE  -- current state of one voyage
CANCEL_VOYAGE -- refund every sold seat at full price and drop the voyage
Z_REPORT      -- state of every voyage, ascending by ID

Each handler receives the session and the raw fields of the line (command
name included) and returns the text to log.  Failures raise
``CommandError``.
"""

from __future__ import annotations

from typing import Callable

from src.domain.enums import CommandName
from src.domain.money import format_amount
from src.reporting.ledger import build_z_report

from .errors import RefundNotAllowed, SeatUnavailable, UsageError
from .schemas import (
    CancelVoyageRequest,
    InitVoyageRequest,
    PrintVoyageRequest,
    SeatRequest,
)
from .session import BookingSession

Handler = Callable[[BookingSession, list[str]], str]


def init_voyage(session: BookingSession, fields: list[str]) -> str:
    request = InitVoyageRequest.from_fields(
        fields, session.voyages, session.settings.max_rows
    )
    voyage = request.build_voyage()
    message = voyage.describe_init(session.settings.currency)
    session.voyages.add(voyage)
    return message


def sell_ticket(session: BookingSession, fields: list[str]) -> str:
    request = SeatRequest.from_fields(
        CommandName.SELL_TICKET.value,
        fields,
        session.voyages,
        session.settings.seat_separator,
    )
    voyage = session.voyages.get_by_id(request.voyage_id)
    assert voyage is not None

    if not voyage.can_sell(request.seats):
        raise SeatUnavailable("One or more seats already sold!")

    total = voyage.pricing.total(request.seats)
    message = (
        f"Seat {request.seat_label} of the Voyage {voyage.id} from {voyage.origin} "
        f"to {voyage.destination} was successfully sold for "
        f"{format_amount(total)} {session.settings.currency}."
    )
    voyage.sell(request.seats)
    return message


def refund_ticket(session: BookingSession, fields: list[str]) -> str:
    request = SeatRequest.from_fields(
        CommandName.REFUND_TICKET.value,
        fields,
        session.voyages,
        session.settings.seat_separator,
    )
    voyage = session.voyages.get_by_id(request.voyage_id)
    assert voyage is not None

    if not voyage.refundable:
        raise RefundNotAllowed("Minibus tickets are not refundable!")
    if not voyage.can_refund(request.seats):
        raise SeatUnavailable("One or more seats are already empty!")

    total = voyage.pricing.refund_total(request.seats)
    message = (
        f"Seat {request.seat_label} of the Voyage {voyage.id} from {voyage.origin} "
        f"to {voyage.destination} was successfully refunded for "
        f"{format_amount(total)} {session.settings.currency}."
    )
    voyage.refund(request.seats)
    return message


def print_voyage(session: BookingSession, fields: list[str]) -> str:
    request = PrintVoyageRequest.from_fields(
        CommandName.PRINT_VOYAGE.value, fields, session.voyages
    )
    voyage = session.voyages.get_by_id(request.voyage_id)
    assert voyage is not None
    return voyage.describe_state()


def cancel_voyage(session: BookingSession, fields: list[str]) -> str:
    request = CancelVoyageRequest.from_fields(
        CommandName.CANCEL_VOYAGE.value, fields, session.voyages
    )
    voyage = session.voyages.get_by_id(request.voyage_id)
    assert voyage is not None

    final_revenue = voyage.revenue - voyage.cancellation_refund()
    message = "\n".join(
        [
            f"Voyage {voyage.id} was successfully cancelled!",
            "Voyage details can be found below:",
            voyage.describe_state(revenue=final_revenue),
        ]
    )
    session.voyages.cancel(request.voyage_id)
    return message


def z_report(session: BookingSession, fields: list[str]) -> str:
    if len(fields) != 1:
        raise UsageError(CommandName.Z_REPORT.value)
    return build_z_report(session.voyages.list_by_id(), session.settings.report_divider)


HANDLERS: dict[CommandName, Handler] = {
    CommandName.INIT_VOYAGE: init_voyage,
    CommandName.SELL_TICKET: sell_ticket,
    CommandName.REFUND_TICKET: refund_ticket,
    CommandName.PRINT_VOYAGE: print_voyage,
    CommandName.CANCEL_VOYAGE: cancel_voyage,
    CommandName.Z_REPORT: z_report,
}
