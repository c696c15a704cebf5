"""
Step detection: threshold the filtered signal into a binary sequence, count
debounced rising edges, and combine both polarities into a step count.
"""

import math
import warnings

import numpy as np

import config


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def threshold_split(
    signal: np.ndarray,
    positive: bool = True,
    threshold: float = None,
) -> np.ndarray:
    """
    Binary sequence (int array, same length as signal): 1 where the signal is
    outside the deadband on the chosen side, else 0.
    positive: v >= threshold. negative: v <= -threshold.
    """
    threshold = threshold if threshold is not None else config.EDGE_THRESHOLD
    x = np.asarray(signal, dtype=float)
    hit = x >= threshold if positive else x <= -threshold
    return hit.astype(int)


def min_edge_interval(sample_rate_hz: float, max_steps_per_second: float = None) -> int:
    """Minimum number of samples between two accepted edges."""
    max_steps_per_second = max_steps_per_second if max_steps_per_second is not None else config.MAX_STEPS_PER_SECOND
    if max_steps_per_second <= 0:
        raise ValueError(f"Invalid cadence: {max_steps_per_second!r} steps/s")
    interval = round_half_up(sample_rate_hz / max_steps_per_second)
    if interval < 1:
        warnings.warn(
            f"Sampling rate {sample_rate_hz} Hz is too low to debounce edges "
            f"at {max_steps_per_second} steps/s; every rising edge counts."
        )
    return interval


def rising_edges(split: np.ndarray) -> np.ndarray:
    """
    Indices i where split[i] == 1 and split[i - 1] == 0. Index -1 is the last
    element, so the first sample is compared against the end of the sequence.
    """
    split = np.asarray(split)
    if len(split) == 0:
        return np.array([], dtype=int)
    previous = np.roll(split, 1)
    return np.flatnonzero((split == 1) & (previous == 0))


def edge_indices(split: np.ndarray, min_interval: int) -> list[int]:
    """
    Rising edges that survive the debounce. An edge closer than min_interval
    samples to the last accepted one is dropped. The last accepted index only
    arms the debounce once it is past index 0.
    """
    accepted = []
    last = 0
    for i in rising_edges(split):
        if last > 0 and (i - last) < min_interval:
            continue
        accepted.append(int(i))
        last = i
    return accepted


def detect_edges(split: np.ndarray, min_interval: int) -> int:
    """Number of debounced rising edges in a binary sequence."""
    return len(edge_indices(split, min_interval))


def estimate_steps(
    signal: np.ndarray,
    sample_rate_hz: float,
    threshold: float = None,
    max_steps_per_second: float = None,
    min_interval: int = None,
) -> int:
    """
    A step swings the signal through both lobes, so the step count is the
    mean of positive and negative edge counts, rounded half up.
    min_interval overrides the interval derived from the rate and cadence.
    """
    if min_interval is not None:
        interval = min_interval
    else:
        interval = min_edge_interval(sample_rate_hz, max_steps_per_second)
    edges_positive = detect_edges(threshold_split(signal, True, threshold), interval)
    edges_negative = detect_edges(threshold_split(signal, False, threshold), interval)
    return round_half_up((edges_positive + edges_negative) / 2.0)
