"""
Signal processing for accelerometer recordings: gravity separation, projection
onto gravity and smoothing. Accelerations are in g.
"""

import numpy as np
from scipy import signal as scipy_signal


def iir_filter(x: np.ndarray, coefficients: dict, axis: int = 0) -> np.ndarray:
    """
    Second-order IIR filter with coefficients {'alpha': a, 'beta': b}.
    The filter starts in the steady state of the first sample, so a constant
    input passes through unchanged instead of ringing up from zero.
    """
    x = np.asarray(x, dtype=float)
    if x.shape[axis] == 0:
        return x.copy()
    b = np.asarray(coefficients["beta"], dtype=float)
    a = np.asarray(coefficients["alpha"], dtype=float)
    zi = scipy_signal.lfilter_zi(b, a)
    first = np.take(x, [0], axis=axis)
    # Broadcast zi along the filter axis against the first sample of every channel
    shape = [1] * x.ndim
    shape[axis] = len(zi)
    zi = zi.reshape(shape) * first
    y, _ = scipy_signal.lfilter(b, a, x, axis=axis, zi=zi)
    return y


def split_gravity(total_accel: np.ndarray, coefficients: dict) -> tuple[np.ndarray, np.ndarray]:
    """Split total acceleration (Nx3) into user acceleration and gravity (both Nx3)."""
    gravity = iir_filter(total_accel, coefficients, axis=0)
    user = np.asarray(total_accel, dtype=float) - gravity
    return user, gravity


def project_on_gravity(user_accel: np.ndarray, gravity: np.ndarray) -> np.ndarray:
    """Per-sample dot product of user acceleration and gravity (N,)."""
    return np.einsum("ij,ij->i", user_accel, gravity)
