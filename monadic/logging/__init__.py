"""
Logging configuration and utilities for the monadic value types.
"""
from .config import (
    configure_logging,
    drop_contract_violations,
    get_logger,
    log_contract_violation,
)

__all__ = [
    "configure_logging",
    "drop_contract_violations",
    "get_logger",
    "log_contract_violation",
]
