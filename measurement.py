"""
Measurements and unit scaling for distance and elapsed time.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

import config


class Measurement(NamedTuple):
    value: float
    unit: str

    def __str__(self):
        return f"{self.value:g} {self.unit}"


def round_half_up_to(x: float, decimals: int) -> float:
    """Round to decimals places, halves away from zero (0.125 -> 0.13)."""
    step = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(float(x))).quantize(step, rounding=ROUND_HALF_UP))


def scale_by_ladder(raw: float, ladder, base_unit: str, decimals: int = None) -> Measurement:
    """
    Express raw (in base_unit) in the first ladder unit whose bound it exceeds.
    ladder: ordered (bound, divisor, unit) rows, largest unit first.
    """
    decimals = decimals if decimals is not None else config.MEASUREMENT_DECIMALS
    for bound, divisor, unit in ladder:
        if raw > bound:
            return Measurement(round_half_up_to(raw / divisor, decimals), unit)
    return Measurement(round_half_up_to(raw, decimals), base_unit)


def scale_distance(steps: int, stride_cm: float) -> Measurement:
    """Distance covered by steps of stride_cm, in cm, m or km."""
    return scale_by_ladder(stride_cm * steps, config.DISTANCE_LADDER, config.DISTANCE_UNIT)


def scale_time(raw_sample_count: int, rate_hz: float) -> Measurement:
    """Session duration in sec, minutes or hours. Expects rate_hz to round to > 0."""
    sampling_rate = round(rate_hz, config.RATE_DECIMALS)
    return scale_by_ladder(raw_sample_count / sampling_rate, config.TIME_LADDER, config.TIME_UNIT)
