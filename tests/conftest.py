import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so sampled statistics are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_states(rng):
    """A handful of normalised states with a non-negligible |1⟩ component."""
    from qubit_lab import QubitState

    states = []
    while len(states) < 20:
        v = rng.normal(size=2) + 1j * rng.normal(size=2)
        v = v / np.linalg.norm(v)
        if abs(v[1]) ** 2 > 1e-2:
            states.append(QubitState(complex(v[0]), complex(v[1])))
    return states
