"""
Generate synthetic accelerometer recordings for trying the pipeline without
a real device. Simulates a phone carried while walking: gravity plus a
periodic vertical bounce, one cycle per step.
"""

import numpy as np

import config


def generate_synthetic_walk(
    duration_sec: float = 10.0,
    sample_rate_hz: float = 100.0,
    step_rate_hz: float = 2.0,
    amplitude_g: float = 0.8,
    noise_level: float = 0.02,
    seed: int = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Generate total acceleration (Nx3, in g, gravity along -Z) and time vector (N,).
    step_rate_hz = 0 gives a stationary recording.
    """
    rng = np.random.default_rng(seed)
    n = int(duration_sec * sample_rate_hz)
    t = np.arange(n) / sample_rate_hz

    accel = np.zeros((n, 3))
    accel[:, 2] = -1.0 + amplitude_g * np.sin(2 * np.pi * step_rate_hz * t)
    if noise_level > 0:
        accel += rng.normal(0.0, noise_level, size=(n, 3))
    return t, accel


def to_device_text(accel: np.ndarray, decimals: int = 4) -> str:
    """Encode Nx3 total acceleration as device sample text ('x,y,z;' per sample)."""
    sep = config.AXIS_SEPARATOR
    return "".join(
        sep.join(f"{v:.{decimals}f}" for v in row) + config.SAMPLE_SEPARATOR
        for row in accel
    )


def generate_synthetic_file(
    filepath: str,
    duration_sec: float = 10.0,
    sample_rate_hz: float = 100.0,
    step_rate_hz: float = 2.0,
    **kwargs,
) -> None:
    """Write a synthetic walk as device sample text."""
    _, accel = generate_synthetic_walk(
        duration_sec=duration_sec,
        sample_rate_hz=sample_rate_hz,
        step_rate_hz=step_rate_hz,
        **kwargs,
    )
    with open(filepath, "w") as f:
        f.write(to_device_text(accel))
    print(f"Wrote synthetic walk to {filepath} ({len(accel)} samples)")


if __name__ == "__main__":
    generate_synthetic_file("synthetic_walk.txt", duration_sec=30, step_rate_hz=1.8)
