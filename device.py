"""
Device recording: raw accelerometer sample text plus the rate it was sampled at.
"""

from numbers import Real
from pathlib import Path

import config


class Device:
    """
    A single recording from an accelerometer.

    data: samples separated by ';'. Each sample is either 'x,y,z' (total
    acceleration in g) or 'x,y,z|gx,gy,gz' (user acceleration and gravity).
    rate: samples per second. None uses config.DEFAULT_SAMPLE_RATE_HZ.
    """

    def __init__(self, data: str, rate: float = None):
        if not isinstance(data, str):
            raise ValueError("Device data must be text.")
        if rate is None:
            rate = config.DEFAULT_SAMPLE_RATE_HZ
        if isinstance(rate, bool) or not isinstance(rate, Real) or round(rate, config.RATE_DECIMALS) <= 0:
            raise ValueError(f"Invalid sampling rate: {rate!r}")
        self.data = data
        self.rate = float(rate)

    @classmethod
    def from_file(cls, filepath, rate: float = None) -> "Device":
        """Read sample text from a file."""
        return cls(Path(filepath).read_text(), rate)

    def __repr__(self):
        return f"Device(rate={self.rate}, {len(self.data)} chars)"
