import numpy as np


def to_bits(cells) -> np.ndarray:
    """Coerce a 1D sequence of ints to a uint8 row in {0,1} (nonzero -> 1)."""
    x = np.asarray(cells)
    if x.ndim != 1:
        raise ValueError("row must be 1D")
    return (x != 0).astype(np.uint8)


def normalize_start(start, width: int) -> np.ndarray:
    """Zero-pad on the right or truncate `start` to exactly `width` cells."""
    bits = to_bits(start)
    row = np.zeros(width, dtype=np.uint8)
    n = min(width, bits.shape[0])
    row[:n] = bits[:n]
    return row


def eca_step(state: np.ndarray, rule_table: np.ndarray) -> np.ndarray:
    """One ECA step with zero-padded edges.

    Cells beyond either end of the row read as 0; there is no wraparound.

    Args:
        state: 1D array (W,) with values {0,1}.
        rule_table: length-8 array in {0,1}, see `rule_number_to_table`.

    Returns:
        Newly allocated next state with shape (W,) and dtype uint8. `state`
        is left untouched.
    """
    x = to_bits(state)
    W = x.shape[0]
    if W == 0:
        return np.zeros(0, dtype=np.uint8)
    padded = np.pad(x, 1, mode="constant")
    left = padded[0:W]
    right = padded[2:W + 2]
    idx = (left << 2) | (x << 1) | right
    return np.asarray(rule_table, dtype=np.uint8)[idx].astype(np.uint8)
