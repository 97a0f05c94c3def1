"""Shared typed data models for microconf.

This package contains the datatypes used across scanner, resolver and parser
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    AttrSlot,
    Binding,
    CandidateLine,
    Destination,
    ItemSlot,
    ParseResult,
    Slot,
    ValueType,
)

__all__ = [
    "AttrSlot",
    "Binding",
    "CandidateLine",
    "Destination",
    "ItemSlot",
    "ParseResult",
    "Slot",
    "ValueType",
]
