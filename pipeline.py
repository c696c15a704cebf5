"""
End-to-end pipeline: device text -> parse and filter -> detect edges -> measure.
"""

import numpy as np
import pandas as pd

from analyzer import Analyzer
from device import Device
from edge_detection import edge_indices
from sample_parser import SampleParser
from user import User
from visualization import plot_filtered_signal, plot_threshold_splits


def signal_frame(analyzer: Analyzer) -> pd.DataFrame:
    """One row per sample: time, filtered value and both threshold splits."""
    filtered = np.asarray(analyzer.source.filtered_signal, dtype=float)
    n = len(filtered)
    return pd.DataFrame({
        "sample": np.arange(n),
        "time_s": np.arange(n) / analyzer.source.sampling_rate_hz,
        "filtered": filtered,
        "positive": analyzer.split_on_threshold(True),
        "negative": analyzer.split_on_threshold(False),
    })


def run_pipeline(
    filepath: str = None,
    data: str = None,
    sample_rate_hz: float = None,
    user: User = None,
    make_figures: bool = True,
) -> dict:
    """
    Run full pipeline on either a sample file (filepath) or sample text (data).
    Returns dict with: analyzer, summary, df_signal, positive_edges,
    negative_edges, figures (list of matplotlib figures).
    """
    if filepath is not None:
        device = Device.from_file(filepath, sample_rate_hz)
    elif data is not None:
        device = Device(data, sample_rate_hz)
    else:
        raise ValueError("Provide either filepath or data")

    analyzer = Analyzer(SampleParser(device), user)
    analyzer.measure()

    df_signal = signal_frame(analyzer)
    positive_edges = edge_indices(df_signal["positive"].values, analyzer.min_interval)
    negative_edges = edge_indices(df_signal["negative"].values, analyzer.min_interval)

    figures = []
    if make_figures:
        time_s = df_signal["time_s"].values
        figures.append(plot_filtered_signal(
            time_s, df_signal["filtered"].values, analyzer.config.threshold,
            positive_edges, negative_edges,
        ))
        figures.append(plot_threshold_splits(
            time_s, df_signal["positive"].values, df_signal["negative"].values,
        ))

    return {
        "analyzer": analyzer,
        "summary": analyzer.summary(),
        "df_signal": df_signal,
        "positive_edges": positive_edges,
        "negative_edges": negative_edges,
        "figures": figures,
    }
