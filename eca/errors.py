from __future__ import annotations

import enum


class ValidationKind(enum.Enum):
    RULE_OUT_OF_BOUNDS = "rule_out_of_bounds"
    WIDTH_NEGATIVE = "width_negative"


class ValidationError(ValueError):
    """Raised when a rule number or width is rejected.

    `kind` tells callers which check failed without parsing the message.
    """

    def __init__(self, kind: ValidationKind, message: str):
        super().__init__(message)
        self.kind = kind


def check_rule(rule_number: int) -> int:
    rule_number = int(rule_number)
    if not (0 <= rule_number <= 255):
        raise ValidationError(
            ValidationKind.RULE_OUT_OF_BOUNDS,
            f"rule_number must be in [0,255], got {rule_number}",
        )
    return rule_number


def check_width(width: int) -> int:
    width = int(width)
    if width < 0:
        raise ValidationError(
            ValidationKind.WIDTH_NEGATIVE,
            f"width must be >= 0, got {width}",
        )
    return width
