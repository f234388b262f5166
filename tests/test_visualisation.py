"""Smoke tests for the matplotlib figures."""

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from qubit_lab import (
    MINUS,
    BellState,
    correlation_history,
    outcome_counts,
    plot_bloch_point,
    plot_correlation_history,
    plot_outcome_counts,
    sample_bell_states,
    to_bloch,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_bloch_point():
    fig = plot_bloch_point(to_bloch(MINUS), title="|−⟩")
    assert isinstance(fig, Figure)
    assert "|−⟩" in fig.axes[0].get_title()


def test_outcome_counts(rng):
    counts = outcome_counts(sample_bell_states(BellState.PHI_PLUS, 100, rng))
    fig = plot_outcome_counts(counts)
    heights = [patch.get_height() for patch in fig.axes[0].patches]
    assert heights == [counts["00"], counts["01"], counts["10"], counts["11"]]


def test_correlation_history(rng):
    history = correlation_history(sample_bell_states(BellState.PSI_MINUS, 100, rng))
    fig = plot_correlation_history(history)
    line = fig.axes[0].get_lines()[0]
    assert list(line.get_xdata()) == [n for n, _ in history]
    assert fig.axes[0].get_ylim() == (0, 1.05)


def test_correlation_history_empty():
    with pytest.raises(ValueError):
        plot_correlation_history([])
