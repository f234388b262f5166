# examples/example_bell.py
# Minimal usage demo for Bell-pair sampling and correlation.

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from qubit_lab import (
    BellState,
    sample_bell_states, summarise, correlation_history,
    plot_outcome_counts, plot_correlation_history,
)

matplotlib.use("Qt5Agg")

rng = np.random.default_rng(42)

for bell in BellState:
    pairs = sample_bell_states(bell, 500, rng)
    s = summarise(pairs)
    print(f"{bell.label} = {bell.formula}: counts={s.counts} r={s.correlation:+.3f}")

# --- Φ+ in detail ---
pairs = sample_bell_states(BellState.PHI_PLUS, 300, rng)
plot_outcome_counts(summarise(pairs).counts, "Φ+ outcomes")
plot_correlation_history(correlation_history(pairs), "Φ+ correlation")
plt.show()
