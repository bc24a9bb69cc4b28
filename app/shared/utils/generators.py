"""Identifier generation for profiles, documents and agreements."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string, used as the primary key of every record."""
    return str(_next_cuid())
