"""Top-level package for microconf.

microconf populates caller-declared, typed destinations from flat
`key = value` config files. The main entry points are `parse` (result-code
API) and `load` (raising API).
"""

from .config import OptionsLoader, ParserOptions
from .errors import ErrorKind, MicroConfError
from .models import AttrSlot, Binding, CandidateLine, ItemSlot, ParseResult, Slot, ValueType
from .parser import load, parse, parse_stream
from .scanner import scan

__all__ = [
    "AttrSlot",
    "Binding",
    "CandidateLine",
    "ErrorKind",
    "ItemSlot",
    "MicroConfError",
    "OptionsLoader",
    "ParseResult",
    "ParserOptions",
    "Slot",
    "ValueType",
    "__version__",
    "load",
    "parse",
    "parse_stream",
    "scan",
]

__version__ = "0.1.0"
