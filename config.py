"""
Configuration and constants for the pedometer analysis pipeline.
Adjust these to calibrate for a different device or body type.
"""

from dataclasses import dataclass

# Sampling rate of the device (Hz) when the recording does not state one.
DEFAULT_SAMPLE_RATE_HZ = 100.0

# Stride length (cm) used when the user gives neither stride nor height.
DEFAULT_STRIDE_CM = 70.0

# Stride estimated from height (cm) by gender; the mean is used when gender is unknown.
STRIDE_MULTIPLIERS = {"female": 0.413, "male": 0.415}

# Deadband around zero (in g) that the filtered signal must leave to count as motion.
EDGE_THRESHOLD = 0.2

# Fastest plausible cadence. Edges closer than rate / this many samples are one step.
MAX_STEPS_PER_SECOND = 6.0

# Second-order IIR low-pass (~0.2 Hz at 100 Hz) that isolates gravity from total acceleration.
GRAVITY_COEFFICIENTS = {
    "alpha": [1.0, -1.979133761292768, 0.979521463540373],
    "beta": [0.000086384997973502, 0.000172769995947004, 0.000086384997973502],
}

# Second-order IIR smoothing of the acceleration-along-gravity signal.
SMOOTHING_COEFFICIENTS = {
    "alpha": [1.0, -1.80898117793047, 0.827224480562408],
    "beta": [0.095465967120306, -0.172688631608676, 0.095465967120306],
}

# Unit ladders: (exclusive lower bound, divisor, unit), checked top-down.
# Values at or below every bound stay in the canonical unit.
DISTANCE_UNIT = "cm"
DISTANCE_LADDER = (
    (99999, 100000, "km"),
    (99, 100, "m"),
)

TIME_UNIT = "sec"
TIME_LADDER = (
    (3600, 3600, "hours"),
    (60, 60, "minutes"),
)

STEP_UNIT = "count"

# Decimal places kept in scaled measurements.
MEASUREMENT_DECIMALS = 2
# The sampling rate is rounded to this many decimals before computing elapsed time.
RATE_DECIMALS = 1

# Sample text format: samples end with ';', user and gravity vectors split by '|'.
SAMPLE_SEPARATOR = ";"
VECTOR_SEPARATOR = "|"
AXIS_SEPARATOR = ","


@dataclass(frozen=True)
class AnalysisConfig:
    """Per-analysis calibration. Defaults come from the module constants."""

    threshold: float = EDGE_THRESHOLD
    max_steps_per_second: float = MAX_STEPS_PER_SECOND
