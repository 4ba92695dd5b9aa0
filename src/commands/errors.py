"""
Command errors.

Every rejected command raises one of these; the message is the text that
follows ``ERROR: `` in the transaction log.  They must not derive
from ``ValueError``: raised inside a pydantic validator they then
propagate unchanged instead of being wrapped in a ``ValidationError``.
"""


class CommandError(Exception):
    """Base class for every command that cannot be carried out."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UsageError(CommandError):
    """Wrong number of fields or an unknown voyage type."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f'Erroneous usage of "{command}" command!')


class UnknownCommand(CommandError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"There is no command namely {name}!")


class ArgumentError(CommandError):
    """A field is malformed or out of range."""


class VoyageNotFound(CommandError):
    def __init__(self, voyage_id: int):
        self.voyage_id = voyage_id
        super().__init__(f"There is no voyage with ID of {voyage_id}!")


class DuplicateVoyage(CommandError):
    def __init__(self, voyage_id: int):
        self.voyage_id = voyage_id
        super().__init__(f"There is already a voyage with ID of {voyage_id}!")


class SeatUnavailable(CommandError):
    """Seats cannot be sold (already sold) or refunded (already empty)."""


class RefundNotAllowed(CommandError):
    pass
