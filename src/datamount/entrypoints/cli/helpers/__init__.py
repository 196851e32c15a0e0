"""CLI helpers for DATAMOUNT.

Utilities used by the command-line interface: the unit parameter type,
logger-level option parsing, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import success, warn
from .unit_param import UNIT, UnitChoice

__all__ = ["UNIT", "UnitChoice", "parse_log_level", "success", "warn"]
