import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal


# Enough digits for any double written out in fixed-point form.
FIXED_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_fixed(value, places):
    """
    Format `value` with `places` decimals, rounding exact ties away from zero.

    The shortest decimal form of the float is rounded, so 0.125 becomes
    "0.13" and 2.675 becomes "2.68". Non-finite values are written as
    "NaN", "Infinity" and "-Infinity".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-places)
    return f"{Decimal(repr(float(value))).quantize(quantum, context=FIXED_CONTEXT):f}"


@dataclass(frozen=True)
class HistoryEntry:
    input_value: float
    from_unit: str
    result: float
    to_unit: str


    def __str__(self):
        return (
            f"{format_fixed(self.input_value, 2)} {self.from_unit} = "
            f"{format_fixed(self.result, 4)} {self.to_unit}"
        )
