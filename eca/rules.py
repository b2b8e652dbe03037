import numpy as np

from .errors import check_rule


def rule_number_to_table(rule_number: int) -> np.ndarray:
    """Return 8-bit table for ECA rule number.

    Bit i corresponds to neighborhood pattern with binary value i = (l<<2)|(c<<1)|r,
    where 0=000, 7=111. Table entries are in {0,1} (uint8).

    Raises ValidationError (kind RULE_OUT_OF_BOUNDS) outside [0,255].
    """
    rule_number = check_rule(rule_number)
    table = np.array([(rule_number >> i) & 1 for i in range(8)], dtype=np.uint8)
    return table


def lookup(table: np.ndarray, left: int, center: int, right: int) -> int:
    """Next cell for one neighborhood. Any nonzero input counts as 1."""
    idx = (int(bool(left)) << 2) | (int(bool(center)) << 1) | int(bool(right))
    return int(table[idx])
