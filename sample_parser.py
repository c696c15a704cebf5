"""
Parse a device recording into the filtered signal the step detector works on.
"""

import numpy as np

import config
from device import Device
from signal_processing import iir_filter, project_on_gravity, split_gravity

BAD_INPUT_MESSAGE = "Bad input. Ensure data is properly formatted."


def parse_samples(text: str) -> np.ndarray:
    """
    Parse sample text into an array of shape (N, k, 3), where k is 1 for
    total acceleration samples and 2 for user|gravity samples.
    """
    chunks = [c.strip() for c in text.split(config.SAMPLE_SEPARATOR)]
    chunks = [c for c in chunks if c]
    if not chunks:
        raise ValueError(BAD_INPUT_MESSAGE)

    samples = []
    for chunk in chunks:
        vectors = []
        for part in chunk.split(config.VECTOR_SEPARATOR):
            axes = part.split(config.AXIS_SEPARATOR)
            if len(axes) != 3:
                raise ValueError(BAD_INPUT_MESSAGE)
            try:
                vectors.append([float(a) for a in axes])
            except ValueError as e:
                raise ValueError(BAD_INPUT_MESSAGE) from e
        samples.append(vectors)

    if len({len(s) for s in samples}) != 1 or len(samples[0]) not in (1, 2):
        raise ValueError(BAD_INPUT_MESSAGE)
    return np.array(samples, dtype=float)


class SampleParser:
    """
    Turns a Device recording into:
      parsed_data       (N, 2, 3) user acceleration and gravity per sample
      dot_product_data  (N,) user acceleration along gravity
      filtered_data     (N,) smoothed dot_product_data
    and exposes them as a sample source (sampling_rate_hz, filtered_signal, raw_sample_count).
    """

    def __init__(self, device: Device):
        if not isinstance(device, Device):
            raise ValueError("Device invalid.")
        self.device = device
        self.parsed_data = self._parse(device.data)
        self.dot_product_data = project_on_gravity(self.parsed_data[:, 0], self.parsed_data[:, 1])
        self.filtered_data = iir_filter(self.dot_product_data, config.SMOOTHING_COEFFICIENTS)

    @staticmethod
    def _parse(text: str) -> np.ndarray:
        samples = parse_samples(text)
        if samples.shape[1] == 2:
            return samples
        # Combined samples: separate gravity with the low-pass filter
        user, gravity = split_gravity(samples[:, 0], config.GRAVITY_COEFFICIENTS)
        return np.stack([user, gravity], axis=1)

    @property
    def sampling_rate_hz(self) -> float:
        return self.device.rate

    @property
    def filtered_signal(self) -> np.ndarray:
        return self.filtered_data

    @property
    def raw_sample_count(self) -> int:
        return len(self.parsed_data)
