from .errors import ValidationError, ValidationKind
from .rules import rule_number_to_table, lookup
from .engine import eca_step, normalize_start
from .sequence import RowSequence

__all__ = [
    "ValidationError",
    "ValidationKind",
    "rule_number_to_table",
    "lookup",
    "eca_step",
    "normalize_start",
    "RowSequence",
]
