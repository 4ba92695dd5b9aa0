"""Domain enumerations and per-variant layout rules."""

import enum


class VoyageType(str, enum.Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    MINIBUS = "Minibus"


class CommandName(str, enum.Enum):
    INIT_VOYAGE = "INIT_VOYAGE"
    SELL_TICKET = "SELL_TICKET"
    REFUND_TICKET = "REFUND_TICKET"
    PRINT_VOYAGE = "PRINT_VOYAGE"
    CANCEL_VOYAGE = "CANCEL_VOYAGE"
    Z_REPORT = "Z_REPORT"


# Seats in one row of each variant
SEATS_PER_ROW: dict[VoyageType, int] = {
    VoyageType.STANDARD: 4,
    VoyageType.PREMIUM: 3,
    VoyageType.MINIBUS: 2,
}

# Number of tab-separated fields (command name included) for INIT_VOYAGE
INIT_ARITY: dict[VoyageType, int] = {
    VoyageType.STANDARD: 8,
    VoyageType.PREMIUM: 9,
    VoyageType.MINIBUS: 7,
}
