"""
User profile: the stride length used to turn steps into distance.
"""

from numbers import Real

import config

GENDERS = tuple(config.STRIDE_MULTIPLIERS)


def _positive_or_none(value, name):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real) or value <= 0:
        raise ValueError(f"Invalid {name}: {value!r}")
    return float(value)


class User:
    """
    gender: 'female', 'male' or None.
    height: cm, optional. Used to estimate stride when stride is not given.
    stride: cm, optional. Falls back to height estimate, then config.DEFAULT_STRIDE_CM.
    """

    def __init__(self, gender: str = None, height: float = None, stride: float = None):
        if gender is not None:
            gender = str(gender).lower()
            if gender not in GENDERS:
                raise ValueError(f"Invalid gender: {gender!r}")
        self.gender = gender
        self.height = _positive_or_none(height, "height")
        self.stride = _positive_or_none(stride, "stride") or self._estimate_stride()

    def _estimate_stride(self) -> float:
        if self.height is None:
            return config.DEFAULT_STRIDE_CM
        if self.gender is not None:
            multiplier = config.STRIDE_MULTIPLIERS[self.gender]
        else:
            multiplier = sum(config.STRIDE_MULTIPLIERS.values()) / len(config.STRIDE_MULTIPLIERS)
        return round(self.height * multiplier, 2)

    def __repr__(self):
        return f"User(gender={self.gender!r}, height={self.height!r}, stride={self.stride!r})"
