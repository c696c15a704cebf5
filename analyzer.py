"""
Analyzer: steps, distance and elapsed time for one recording and one user.
"""

from functools import cached_property

import numpy as np

import config
from config import AnalysisConfig
from edge_detection import detect_edges, estimate_steps, min_edge_interval, threshold_split
from measurement import Measurement, scale_distance, scale_time
from user import User

SOURCE_ATTRIBUTES = ("sampling_rate_hz", "filtered_signal", "raw_sample_count")
USER_ATTRIBUTES = ("stride",)


def _check_contract(obj, attributes, name):
    if obj is None or any(not hasattr(obj, a) for a in attributes):
        raise ValueError(f"{name} invalid.")


class Analyzer:
    """
    source: any object with sampling_rate_hz, filtered_signal and raw_sample_count
            (e.g. a SampleParser).
    user: any object with a stride in cm. None uses a default User().
    Measurements stay at zero until measure() is called.
    """

    def __init__(self, source, user=None, analysis_config: AnalysisConfig = None):
        _check_contract(source, SOURCE_ATTRIBUTES, "Sample source")
        user = user if user is not None else User()
        _check_contract(user, USER_ATTRIBUTES, "User")

        self.source = source
        self.user = user
        self.config = analysis_config or AnalysisConfig()
        self.steps = 0
        self.distance = Measurement(0, config.DISTANCE_UNIT)
        self.time = Measurement(0, config.TIME_UNIT)

    # -- Edge detection -------------------------------------------------------

    @cached_property
    def min_interval(self) -> int:
        # Source and config are fixed per analyzer
        return min_edge_interval(self.source.sampling_rate_hz, self.config.max_steps_per_second)

    def split_on_threshold(self, positive: bool = True) -> np.ndarray:
        return threshold_split(self.source.filtered_signal, positive, self.config.threshold)

    def detect_edges(self, split: np.ndarray) -> int:
        return detect_edges(split, self.min_interval)

    # -- Measurement ----------------------------------------------------------

    def measure(self):
        self.measure_steps()
        self.measure_distance()
        self.measure_time()

    def measure_steps(self):
        self.steps = estimate_steps(
            self.source.filtered_signal,
            self.source.sampling_rate_hz,
            threshold=self.config.threshold,
            max_steps_per_second=self.config.max_steps_per_second,
            min_interval=self.min_interval,
        )

    def measure_distance(self):
        # Uses the current step count; zero until measure_steps() runs
        self.distance = scale_distance(self.steps, self.user.stride)

    def measure_time(self):
        self.time = scale_time(self.source.raw_sample_count, self.source.sampling_rate_hz)

    @property
    def step_measurement(self) -> Measurement:
        return Measurement(self.steps, config.STEP_UNIT)

    @property
    def distance_interval(self) -> str:
        return self.distance.unit

    @property
    def time_interval(self) -> str:
        return self.time.unit

    def summary(self) -> dict:
        return {
            "steps": self.steps,
            "step_unit": config.STEP_UNIT,
            "distance": self.distance.value,
            "distance_unit": self.distance.unit,
            "time": self.time.value,
            "time_unit": self.time.unit,
        }
