"""Shared utilities: UTC timestamps and record identifiers."""

from app.shared.utils.datetime import epoch_ms, utc_now
from app.shared.utils.generators import generate_cuid

__all__ = [
    "epoch_ms",
    "generate_cuid",
    "utc_now",
]
