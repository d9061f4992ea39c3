"""Utility functions for dms3ns."""

from dms3ns.utils.logging import (
    setup_logging,
)

__all__ = ["setup_logging"]
