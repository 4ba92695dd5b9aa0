"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Messages
    currency: str = "TL"
    report_divider: str = "-" * 16

    # Input format
    field_separator: str = "\t"
    seat_separator: str = "_"
    file_encoding: str = "utf-8"

    # Ledger
    auto_z_report: bool = True  # append a Z report unless the input ends with one
    max_rows: int = 10_000  # INIT_VOYAGE rejects larger layouts

    # Diagnostics (stderr only, never the transaction log)
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "BUS_LEDGER_", "extra": "ignore"}


settings = Settings()
