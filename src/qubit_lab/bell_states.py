####### Imports #######

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
from qiskit.quantum_info import Statevector

logger = logging.getLogger(__name__)

# |correlation| above this is reported as strong entanglement
STRONG_CORRELATION = 0.9
DEFAULT_HISTORY_STEP = 10

OUTCOMES = ("00", "01", "10", "11")


####### Bell states #######

class BellState(Enum):
    """The four maximally entangled two-qubit states."""

    PHI_PLUS = ("Φ+", "(|00⟩ + |11⟩) / √2")
    PHI_MINUS = ("Φ-", "(|00⟩ - |11⟩) / √2")
    PSI_PLUS = ("Ψ+", "(|01⟩ + |10⟩) / √2")
    PSI_MINUS = ("Ψ-", "(|01⟩ - |10⟩) / √2")

    def __init__(self, label: str, formula: str):
        self.label = label
        self.formula = formula

    @property
    def correlated(self) -> bool:
        """True for the Φ family (equal bits), False for Ψ (opposite bits)."""
        return self in (BellState.PHI_PLUS, BellState.PHI_MINUS)

    def statevector(self) -> Statevector:
        """Amplitudes over |00⟩, |01⟩, |10⟩, |11⟩."""
        s = 1.0 / np.sqrt(2.0)
        amps = {
            BellState.PHI_PLUS: [s, 0, 0, s],
            BellState.PHI_MINUS: [s, 0, 0, -s],
            BellState.PSI_PLUS: [0, s, s, 0],
            BellState.PSI_MINUS: [0, s, -s, 0],
        }[self]
        return Statevector(np.array(amps, dtype=complex))

    @classmethod
    def parse(cls, value: Union["BellState", str]) -> "BellState":
        """Accepts a member, its label ('Φ+'), its name ('PHI_PLUS') or an ascii alias ('phi+')."""
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for member in cls:
            if key == member.label or key.upper() == member.name:
                return member
        alias = key.lower().replace("_", "").replace("plus", "+").replace("minus", "-")
        aliases = {"phi+": cls.PHI_PLUS, "phi-": cls.PHI_MINUS, "psi+": cls.PSI_PLUS, "psi-": cls.PSI_MINUS}
        if alias in aliases:
            return aliases[alias]
        raise ValueError(f"Unknown Bell state {value!r}, expected one of {[m.label for m in cls]}.")

    def __str__(self) -> str:
        return self.label


BELL_STATES: Dict[BellState, str] = {member: member.formula for member in BellState}


####### Sampling #######

def _pair_from_draw(state: BellState, r: float) -> Tuple[int, int]:
    if state.correlated:
        return (0, 0) if r < 0.5 else (1, 1)
    return (0, 1) if r < 0.5 else (1, 0)


def sample_bell_state(state: Union[BellState, str], rng: Optional[np.random.Generator] = None) -> Tuple[int, int]:
    """
    Measures both qubits of a Bell pair in the computational basis.

    A single uniform draw decides both bits, so Φ± always give equal bits and
    Ψ± always give opposite bits. The sign of the variant does not change the outcome distribution.
    """
    state = BellState.parse(state)
    if rng is None:
        rng = np.random.default_rng()
    return _pair_from_draw(state, rng.random())


def sample_bell_states(state: Union[BellState, str], count: int,
                       rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Runs `count` independent measurements of the Bell pair.

    Returns:
        pairs: int array of shape (count, 2).
    """
    state = BellState.parse(state)
    if count < 0:
        raise ValueError("count must be ≥ 0.")
    if rng is None:
        rng = np.random.default_rng()
    draws = rng.random(int(count))
    first = (draws >= 0.5).astype(int)
    second = first if state.correlated else 1 - first
    logger.debug(f"Sampled {count} pairs from {state.label}")
    return np.column_stack([first, second]).reshape(-1, 2)


####### Statistics #######

def _as_pairs(pairs: Iterable[Tuple[int, int]]) -> np.ndarray:
    arr = np.asarray(list(pairs) if not isinstance(pairs, np.ndarray) else pairs)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("Measurements must have shape (N, 2).")
    if not np.all((arr == 0) | (arr == 1)):
        raise ValueError("Measurement outcomes must be 0 or 1.")
    return arr.astype(np.int64)


def correlation(pairs: Iterable[Tuple[int, int]]) -> float:
    """
    Pearson correlation coefficient between the first and second bits.

    Returns 0.0 for an empty sequence or when either column is constant.
    """
    M = _as_pairs(pairs)
    n = len(M)
    if n == 0:
        return 0.0

    a, b = M[:, 0], M[:, 1]
    sum_a, sum_b = int(a.sum()), int(b.sum())
    sum_ab = int((a * b).sum())
    sum_a2, sum_b2 = int((a * a).sum()), int((b * b).sum())

    numerator = n * sum_ab - sum_a * sum_b
    variance_product = (n * sum_a2 - sum_a ** 2) * (n * sum_b2 - sum_b ** 2)
    if variance_product == 0:
        return 0.0
    r = numerator / np.sqrt(float(variance_product))
    return float(np.clip(r, -1.0, 1.0))


def outcome_counts(pairs: Iterable[Tuple[int, int]]) -> Dict[str, int]:
    """Number of occurrences of each of '00', '01', '10', '11'."""
    M = _as_pairs(pairs)
    counts = {key: 0 for key in OUTCOMES}
    for a, b in M:
        counts[f"{a}{b}"] += 1
    return counts


def correlation_history(pairs: Iterable[Tuple[int, int]], step: int = DEFAULT_HISTORY_STEP) -> List[Tuple[int, float]]:
    """
    |correlation| of growing prefixes of the measurement record.

    Args:
        pairs: measurement record, oldest first.
        step: prefix length increment.

    Returns:
        history: list of (number of measurements, |correlation|) for lengths step, 2*step, ...
    """
    if step < 1:
        raise ValueError("step must be ≥ 1.")
    M = _as_pairs(pairs)
    return [(k, abs(correlation(M[:k]))) for k in range(step, len(M) + 1, step)]


@dataclass(frozen=True)
class CorrelationSummary:
    """Totals, outcome fractions and correlation of a measurement record."""
    total: int
    counts: Dict[str, int]
    correlation: float
    strongly_correlated: bool
    same_fraction: float
    different_fraction: float


def summarise(pairs: Iterable[Tuple[int, int]]) -> CorrelationSummary:
    """Builds a CorrelationSummary; fractions and correlation are 0.0 for an empty record."""
    M = _as_pairs(pairs)
    total = len(M)
    counts = outcome_counts(M)
    corr = correlation(M)
    same = counts["00"] + counts["11"]
    different = counts["01"] + counts["10"]
    return CorrelationSummary(
        total=total,
        counts=counts,
        correlation=corr,
        strongly_correlated=abs(corr) > STRONG_CORRELATION,
        same_fraction=same / total if total else 0.0,
        different_fraction=different / total if total else 0.0,
    )
