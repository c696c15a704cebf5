"""
Run the pedometer on a recording (or on synthetic data).
Usage:
  python run_pipeline.py
  python run_pipeline.py --data path/to/recording.txt --rate 100
  python run_pipeline.py --data walk.txt --height 167 --gender female --out signal.csv
"""

import argparse
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pedometer: steps, distance and time from accelerometer data")
    parser.add_argument("--data", type=str, default=None, help="Path to sample text. If omitted, use synthetic data.")
    parser.add_argument("--rate", type=float, default=None, help="Sampling rate (Hz). Default 100.")
    parser.add_argument("--stride", type=float, default=None, help="Stride length (cm)")
    parser.add_argument("--height", type=float, default=None, help="Height (cm), used to estimate stride")
    parser.add_argument("--gender", choices=["female", "male"], default=None)
    parser.add_argument("--no-plot", action="store_true", help="Skip saving plots")
    parser.add_argument("--out", type=str, default=None, help="Save per-sample signal to this CSV path")
    args = parser.parse_args(argv)

    from pipeline import run_pipeline
    from user import User

    try:
        user = User(args.gender, args.height, args.stride)
        if args.data:
            result = run_pipeline(filepath=args.data, sample_rate_hz=args.rate, user=user,
                                  make_figures=not args.no_plot)
        else:
            from synthetic_data import generate_synthetic_walk, to_device_text
            import config
            rate = args.rate or config.DEFAULT_SAMPLE_RATE_HZ
            print("No data provided. Generating synthetic walk (30 s, 2 steps/s)...")
            _, accel = generate_synthetic_walk(duration_sec=30.0, sample_rate_hz=rate, step_rate_hz=2.0, seed=42)
            result = run_pipeline(data=to_device_text(accel), sample_rate_hz=rate, user=user,
                                  make_figures=not args.no_plot)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    s = result["summary"]
    print(f"Steps:    {s['steps']}")
    print(f"Distance: {s['distance']} {s['distance_unit']}")
    print(f"Time:     {s['time']} {s['time_unit']}")

    if args.out:
        result["df_signal"].to_csv(args.out, index=False)
        print(f"Saved signal to {args.out}")

    for i, fig in enumerate(result["figures"]):
        fig.savefig(f"pipeline_fig_{i+1}.png", dpi=120)
        print(f"Saved pipeline_fig_{i+1}.png")

    return 0


if __name__ == "__main__":
    sys.exit(main())
