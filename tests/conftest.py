"""Shared fixtures for the pedometer tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


class StubSource:
    """Sample source with an exact filtered signal."""

    def __init__(self, filtered, sampling_rate_hz=100.0, raw_sample_count=None):
        self.filtered_signal = np.asarray(filtered, dtype=float)
        self.sampling_rate_hz = sampling_rate_hz
        self.raw_sample_count = len(self.filtered_signal) if raw_sample_count is None else raw_sample_count


@pytest.fixture
def make_source():
    return StubSource


@pytest.fixture
def symmetric_signal():
    """Build a signal with n positive and n negative lobes, one of each per 4 samples."""
    def build(n):
        return np.tile([0.0, 0.5, 0.0, -0.5], n)
    return build
