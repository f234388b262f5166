"""
Public API for the qubit_lab package.

This module re-exports the most useful names from:
- qubit_state.py
- bell_states.py
- visualisation.py

So examples (and users) can simply:
    from qubit_lab import PLUS, to_bloch, sample_bell_states, correlation, ...
"""

# ----- 1-qubit exports -----
from .qubit_state import (
    # basis states
    QubitState,
    ZERO, ONE, PLUS, MINUS,
    BASIS_STATES,

    # Bloch sphere
    BlochCoordinates,
    to_bloch,
    bloch_vector_rho,

    # gate
    apply_hadamard,

    # measurement
    measure_qubit,
    measure_qubit_many,
)

# ----- Bell pair exports -----
from .bell_states import (
    BellState,
    BELL_STATES,

    # sampling
    sample_bell_state,
    sample_bell_states,

    # statistics
    correlation,
    outcome_counts,
    correlation_history,
    summarise,
    CorrelationSummary,
)

# ----- plots -----
from .visualisation import (
    plot_bloch_point,
    plot_outcome_counts,
    plot_correlation_history,
)

__version__ = "0.1.0"

__all__ = [
    # 1q
    "QubitState", "ZERO", "ONE", "PLUS", "MINUS", "BASIS_STATES",
    "BlochCoordinates", "to_bloch", "bloch_vector_rho", "apply_hadamard",
    "measure_qubit", "measure_qubit_many",

    # bell
    "BellState", "BELL_STATES", "sample_bell_state", "sample_bell_states",
    "correlation", "outcome_counts", "correlation_history", "summarise",
    "CorrelationSummary",

    # plots
    "plot_bloch_point", "plot_outcome_counts", "plot_correlation_history",
]
