"""Unit tests for thresholding, rising-edge debounce and step estimation."""

import numpy as np
import pytest

from edge_detection import (
    detect_edges,
    edge_indices,
    estimate_steps,
    min_edge_interval,
    rising_edges,
    round_half_up,
    threshold_split,
)


class TestRoundHalfUp:

    @pytest.mark.parametrize("x, expected", [(2.5, 3), (0.5, 1), (1.49, 1), (16.67, 17), (0.0, 0), (-2.5, -3)])
    def test_values(self, x, expected):
        assert round_half_up(x) == expected


class TestThresholdSplit:

    def test_positive_inclusive_threshold(self):
        signal = [0.2, 0.19, -0.2, -0.21, 0.5]
        np.testing.assert_array_equal(threshold_split(signal, positive=True), [1, 0, 0, 0, 1])

    def test_negative_inclusive_threshold(self):
        signal = [0.2, 0.19, -0.2, -0.21, 0.5]
        np.testing.assert_array_equal(threshold_split(signal, positive=False), [0, 0, 1, 1, 0])

    def test_custom_threshold(self):
        np.testing.assert_array_equal(threshold_split([0.3, 0.5, -0.5], True, threshold=0.4), [0, 1, 0])

    def test_length_and_domain(self):
        rng = np.random.default_rng(0)
        signal = rng.normal(0.0, 0.5, size=257)
        for positive in (True, False):
            split = threshold_split(signal, positive)
            assert len(split) == len(signal)
            assert set(np.unique(split)) <= {0, 1}

    def test_empty(self):
        assert len(threshold_split([])) == 0


class TestMinEdgeInterval:

    def test_default_cadence(self):
        assert min_edge_interval(100.0) == 17
        assert min_edge_interval(4.0) == 1
        assert min_edge_interval(3.0) == 1

    def test_custom_cadence(self):
        assert min_edge_interval(100.0, max_steps_per_second=4.0) == 25

    def test_low_rate_warns(self):
        with pytest.warns(UserWarning):
            assert min_edge_interval(2.0) == 0

    def test_explicit_zero_cadence_rejected(self):
        with pytest.raises(ValueError, match="cadence"):
            min_edge_interval(100.0, max_steps_per_second=0.0)


class TestDetectEdges:

    def test_no_rising_transitions(self):
        assert detect_edges(np.zeros(10, dtype=int), 1) == 0
        assert detect_edges(np.ones(10, dtype=int), 1) == 0
        assert detect_edges(np.array([], dtype=int), 1) == 0

    def test_counts_rising_edges(self):
        assert detect_edges(np.array([0, 1, 1, 0, 1, 0]), 1) == 2

    def test_first_sample_compared_with_last(self):
        # split[-1] == 0, so index 0 is a rising edge
        np.testing.assert_array_equal(rising_edges(np.array([1, 0, 0, 1, 1, 0])), [0, 3])
        # split[-1] == 1, so index 0 is not
        np.testing.assert_array_equal(rising_edges(np.array([1, 1, 0, 1])), [3])

    def test_edge_at_index_zero_does_not_arm_debounce(self):
        split = np.array([1, 0, 0, 1, 1, 0])
        assert edge_indices(split, 10) == [0, 3]

    def test_debounce_rejects_closer_than_interval(self):
        split = np.zeros(20, dtype=int)
        split[[2, 5]] = 1
        assert detect_edges(split, 4) == 1

    def test_debounce_accepts_exact_interval(self):
        split = np.zeros(20, dtype=int)
        split[[2, 5]] = 1
        assert detect_edges(split, 3) == 2

    def test_debounce_measured_from_last_accepted_edge(self):
        split = np.zeros(30, dtype=int)
        split[[2, 5, 8, 11]] = 1
        # 5 is rejected (3 < 5); 8 is 6 after 2 and accepted; 11 is rejected
        assert edge_indices(split, 5) == [2, 8]


class TestEstimateSteps:

    def test_symmetric_signal(self, symmetric_signal):
        assert estimate_steps(symmetric_signal(5), 6.0) == 5

    def test_averages_asymmetric_lobes(self):
        signal = np.tile([0.0, 0.5, 0.0, -0.5], 3)
        signal[-1] = 0.0  # drop the last negative lobe: 3 positive, 2 negative
        assert estimate_steps(signal, 6.0) == 3

    def test_within_deadband(self):
        assert estimate_steps(np.full(50, 0.1), 100.0) == 0

    def test_debounce_uses_rate(self, symmetric_signal):
        # At 100 Hz lobes 4 samples apart are one step
        assert estimate_steps(symmetric_signal(5), 100.0) == 1

    def test_explicit_interval(self, symmetric_signal):
        assert estimate_steps(symmetric_signal(5), 100.0, min_interval=1) == 5
