"""Process-scoped state shared by every command of one run."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.config import Settings, settings as default_settings
from src.infrastructure.repositories import VoyageRepository
from src.reporting.ledger import TransactionLog


@dataclass
class BookingSession:
    settings: Settings = field(default_factory=lambda: default_settings)
    voyages: VoyageRepository = field(default_factory=VoyageRepository)
    log: TransactionLog = field(default_factory=TransactionLog)
