"""
End-to-end tests for the command interpreter.

Each test feeds tab-separated command lines through a fresh session and
checks the log entries they produce.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from src.commands.interpreter import UNEXPECTED_FAILURE, CommandInterpreter
from src.commands.session import BookingSession
from tests.conftest import DIVIDER, cmd

STANDARD_1 = cmd("INIT_VOYAGE", "Standard", "1", "A", "B", "3", "100", "10")
PREMIUM_2 = cmd("INIT_VOYAGE", "Premium", "2", "A", "B", "2", "100", "10", "20")
MINIBUS_3 = cmd("INIT_VOYAGE", "Minibus", "3", "X", "Y", "2", "50")


class TestEcho:
    def test_every_command_is_echoed_before_its_result(self, execute):
        entries = execute(STANDARD_1)
        assert entries[0] == f"COMMAND: {STANDARD_1}"
        assert entries[1].startswith("Voyage 1 was initialized")

    def test_line_is_trimmed(self, execute):
        entries = execute("  Z_REPORT  \n")
        assert entries[0] == "COMMAND: Z_REPORT"

    def test_blank_lines_are_skipped(self, execute, interpreter):
        assert execute("", "   ", "\t") == []
        assert interpreter.processed == 0

    def test_unknown_command(self, execute):
        assert execute(cmd("BOOK", "1")) == [
            "COMMAND: BOOK\t1",
            "ERROR: There is no command namely BOOK!",
        ]


class TestWorkedExamples:
    def test_standard_sell_and_refund(self, execute, session):
        execute(STANDARD_1)
        voyage = session.voyages.get_by_id(1)
        assert voyage.total_seats == 12

        sold = execute(cmd("SELL_TICKET", "1", "1_2"))
        assert sold[1] == "Seat 1-2 of the Voyage 1 from A to B was successfully sold for 200.00 TL."
        assert voyage.revenue == pytest.approx(200.0)

        refunded = execute(cmd("REFUND_TICKET", "1", "1"))
        assert refunded[1] == (
            "Seat 1 of the Voyage 1 from A to B was successfully refunded for 90.00 TL."
        )
        assert voyage.revenue == pytest.approx(110.0)

    def test_premium_sale(self, execute, session):
        entries = execute(PREMIUM_2, cmd("SELL_TICKET", "2", "1_2"))
        assert entries[1] == (
            "Voyage 2 was initialized as a premium (1+2) voyage from A to B with 100.00 "
            "TL priced 4 regular seats and 120.00 TL priced 2 premium seats. Note that "
            "refunds will be 10% less than the paid amount."
        )
        assert entries[3] == (
            "Seat 1-2 of the Voyage 2 from A to B was successfully sold for 220.00 TL."
        )
        assert session.voyages.get_by_id(2).total_seats == 6

    def test_empty_z_report(self, execute):
        assert execute("Z_REPORT") == [
            "COMMAND: Z_REPORT",
            f"Z Report:\n{DIVIDER}\nNo Voyages Available!\n{DIVIDER}",
        ]

    def test_cancelled_voyage_is_gone(self, execute):
        execute(STANDARD_1)
        execute(cmd("CANCEL_VOYAGE", "1"))
        assert execute(cmd("PRINT_VOYAGE", "1"))[1] == "ERROR: There is no voyage with ID of 1!"


class TestInitVoyage:
    def test_minibus(self, execute):
        assert execute(MINIBUS_3)[1] == (
            "Voyage 3 was initialized as a minibus (2) voyage from X to Y with 50.00 TL "
            "priced 4 regular seats. Note that minibus tickets are not refundable."
        )

    def test_duplicate_id(self, execute):
        execute(STANDARD_1)
        assert execute(STANDARD_1)[1] == "ERROR: There is already a voyage with ID of 1!"

    def test_wrong_arity(self, execute):
        entries = execute(cmd("INIT_VOYAGE", "Minibus", "3", "X", "Y", "2", "50", "10"))
        assert entries[1] == 'ERROR: Erroneous usage of "INIT_VOYAGE" command!'

    def test_rejected_init_creates_nothing(self, execute, session):
        execute(cmd("INIT_VOYAGE", "Standard", "1", "A", "B", "3", "100", "150"))
        assert 1 not in session.voyages


class TestSellTicket:
    def test_already_sold(self, execute, session):
        execute(STANDARD_1, cmd("SELL_TICKET", "1", "2"))
        entries = execute(cmd("SELL_TICKET", "1", "1_2"))
        assert entries[1] == "ERROR: One or more seats already sold!"
        assert session.voyages.get_by_id(1).sold_seats() == [2]

    def test_duplicate_seat_in_request(self, execute, session):
        execute(STANDARD_1)
        assert execute(cmd("SELL_TICKET", "1", "3_3"))[1] == "ERROR: One or more seats already sold!"
        assert session.voyages.get_by_id(1).revenue == 0.0

    def test_no_such_seat(self, execute):
        execute(STANDARD_1)
        assert execute(cmd("SELL_TICKET", "1", "1_13"))[1] == "ERROR: There is no such a seat!"

    def test_non_positive_seat(self, execute):
        execute(STANDARD_1)
        assert execute(cmd("SELL_TICKET", "1", "0"))[1] == (
            "ERROR: 0 is not a positive integer, seat number must be a positive integer!"
        )

    def test_missing_voyage(self, execute):
        assert execute(cmd("SELL_TICKET", "8", "1"))[1] == "ERROR: There is no voyage with ID of 8!"

    def test_wrong_arity(self, execute):
        assert execute(cmd("SELL_TICKET", "1"))[1] == 'ERROR: Erroneous usage of "SELL_TICKET" command!'


class TestRefundTicket:
    def test_minibus_is_not_refundable(self, execute, session):
        execute(MINIBUS_3, cmd("SELL_TICKET", "3", "1"))
        assert execute(cmd("REFUND_TICKET", "3", "1"))[1] == (
            "ERROR: Minibus tickets are not refundable!"
        )
        assert session.voyages.get_by_id(3).revenue == pytest.approx(50.0)

    def test_seat_validation_precedes_minibus_check(self, execute):
        execute(MINIBUS_3)
        assert execute(cmd("REFUND_TICKET", "3", "5"))[1] == "ERROR: There is no such a seat!"

    def test_empty_seat(self, execute, session):
        execute(STANDARD_1, cmd("SELL_TICKET", "1", "1"))
        assert execute(cmd("REFUND_TICKET", "1", "1_2"))[1] == (
            "ERROR: One or more seats are already empty!"
        )
        assert session.voyages.get_by_id(1).sold_seats() == [1]

    def test_premium_refund_amount(self, execute):
        execute(PREMIUM_2, cmd("SELL_TICKET", "2", "1_2_4"))
        assert execute(cmd("REFUND_TICKET", "2", "4_2"))[1] == (
            "Seat 4-2 of the Voyage 2 from A to B was successfully refunded for 198.00 TL."
        )


class TestPrintVoyage:
    def test_state_block(self, execute):
        execute(STANDARD_1, cmd("SELL_TICKET", "1", "1_6"))
        assert execute(cmd("PRINT_VOYAGE", "1"))[1] == (
            "Voyage 1\nA-B\nX * | * *\n* X | * *\n* * | * *\nRevenue: 200.00"
        )

    def test_bad_id(self, execute):
        assert execute(cmd("PRINT_VOYAGE", "abc"))[1] == (
            "ERROR: Invalid format for ID, ID must be an integer."
        )
        assert execute(cmd("PRINT_VOYAGE", "0"))[1] == (
            "ERROR: 0 is not a positive integer, ID of a voyage must be a positive integer!"
        )


class TestCancelVoyage:
    def test_cancellation_refunds_full_price(self, execute):
        execute(PREMIUM_2, cmd("SELL_TICKET", "2", "1_2"))
        assert execute(cmd("CANCEL_VOYAGE", "2"))[1] == (
            "Voyage 2 was successfully cancelled!\n"
            "Voyage details can be found below:\n"
            "Voyage 2\nA-B\nX | X *\n* | * *\nRevenue: 0.00"
        )

    def test_missing(self, execute):
        assert execute(cmd("CANCEL_VOYAGE", "4"))[1] == "ERROR: There is no voyage with ID of 4!"

    def test_bad_id(self, execute):
        assert execute(cmd("CANCEL_VOYAGE", "x"))[1] == (
            "ERROR: Invalid ID format. ID must be an integer."
        )


class TestZReport:
    def test_sorted_by_id(self, execute):
        execute(MINIBUS_3, STANDARD_1)
        report = execute("Z_REPORT")[1]
        assert report.index("Voyage 1\n") < report.index("Voyage 3\n")
        assert report.startswith(f"Z Report:\n{DIVIDER}\nVoyage 1\n")
        assert report.endswith(f"Revenue: 0.00\n{DIVIDER}")

    def test_arguments_are_rejected(self, execute):
        assert execute(cmd("Z_REPORT", "1"))[1] == 'ERROR: Erroneous usage of "Z_REPORT" command!'


class TestRun:
    def test_appends_z_report_when_missing(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        output = interpreter.run([MINIBUS_3])
        assert output.endswith(
            f"Z Report:\n{DIVIDER}\nVoyage 3\nX-Y\n* *\n* *\nRevenue: 0.00\n{DIVIDER}"
        )
        assert not output.endswith("\n")

    def test_no_extra_z_report_when_last_command_is_one(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        output = interpreter.run([MINIBUS_3, "Z_REPORT"])
        assert output.count("Z Report:") == 1

    def test_erroneous_z_report_still_counts_as_last(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        output = interpreter.run([cmd("Z_REPORT", "x")])
        assert "Z Report:" not in output

    def test_auto_z_report_can_be_disabled(self, settings):
        settings.auto_z_report = False
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        assert interpreter.run([MINIBUS_3]).count("Z Report:") == 0

    def test_empty_input_still_reports(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        assert interpreter.run([]) == f"Z Report:\n{DIVIDER}\nNo Voyages Available!\n{DIVIDER}"

    def test_counters(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        interpreter.run([STANDARD_1, cmd("SELL_TICKET", "1", "99"), "NOPE"])
        assert interpreter.processed == 3
        assert interpreter.rejected == 2

    def test_unexpected_failure_does_not_stop_the_run(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        with patch(
            "src.domain.entities.StandardVoyage.describe_init",
            side_effect=RuntimeError("boom"),
        ):
            output = interpreter.run([STANDARD_1, MINIBUS_3])
        lines = output.split("\n")
        assert f"ERROR: {UNEXPECTED_FAILURE}" in lines
        assert any(line.startswith("Voyage 3 was initialized") for line in lines)

    def test_huge_prices_are_printed_in_full(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        output = interpreter.run(
            [
                cmd("INIT_VOYAGE", "Standard", "1", "A", "B", "1", "1e30", "10"),
                cmd("SELL_TICKET", "1", "1"),
            ]
        )
        amount = "1" + "0" * 30 + ".00"
        assert f"successfully sold for {amount} TL." in output
        assert output.endswith(f"Revenue: {amount}\n{DIVIDER}")
        assert UNEXPECTED_FAILURE not in output

    def test_failing_closing_report_is_logged(self, settings):
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        with patch("src.commands.handlers.build_z_report", side_effect=RuntimeError("boom")):
            output = interpreter.run([MINIBUS_3])
        assert output.endswith(f"ERROR: {UNEXPECTED_FAILURE}")

    def test_row_limit_comes_from_settings(self, settings):
        settings.max_rows = 5
        interpreter = CommandInterpreter(BookingSession(settings=settings))
        interpreter.run([cmd("INIT_VOYAGE", "Minibus", "3", "X", "Y", "6", "50")])
        assert 3 not in interpreter.session.voyages
        assert interpreter.rejected == 1


class TestFailedCommandsLeaveNoTrace:
    """A command that fails while building its message changes nothing."""

    def test_init_is_not_registered(self, execute, session):
        with patch("src.domain.entities.format_amount", side_effect=RuntimeError):
            assert execute(STANDARD_1)[1] == f"ERROR: {UNEXPECTED_FAILURE}"
        assert 1 not in session.voyages

    def test_sale_is_not_booked(self, execute, session):
        execute(STANDARD_1)
        with patch("src.commands.handlers.format_amount", side_effect=RuntimeError):
            assert execute(cmd("SELL_TICKET", "1", "1_2"))[1] == f"ERROR: {UNEXPECTED_FAILURE}"
        voyage = session.voyages.get_by_id(1)
        assert voyage.sold_seats() == []
        assert voyage.revenue == 0.0

    def test_refund_is_not_booked(self, execute, session):
        execute(STANDARD_1, cmd("SELL_TICKET", "1", "1"))
        with patch("src.commands.handlers.format_amount", side_effect=RuntimeError):
            assert execute(cmd("REFUND_TICKET", "1", "1"))[1] == f"ERROR: {UNEXPECTED_FAILURE}"
        voyage = session.voyages.get_by_id(1)
        assert voyage.sold_seats() == [1]
        assert voyage.revenue == pytest.approx(100.0)

    def test_cancellation_is_not_applied(self, execute, session):
        execute(STANDARD_1, cmd("SELL_TICKET", "1", "1"))
        with patch("src.domain.entities.format_amount", side_effect=RuntimeError):
            assert execute(cmd("CANCEL_VOYAGE", "1"))[1] == f"ERROR: {UNEXPECTED_FAILURE}"
        assert session.voyages.get_by_id(1).revenue == pytest.approx(100.0)
