####### Imports #######

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
from qiskit.circuit.library import HGate, XGate, YGate, ZGate
from qiskit.quantum_info import DensityMatrix, Operator, Statevector

logger = logging.getLogger(__name__)

# below this |beta|^2 the relative phase is treated as 0
PHASE_EPSILON = 1e-4
NORMALISATION_TOL = 1e-6


####### Qubit state #######

@dataclass(frozen=True)
class QubitState:
    """
    Single qubit alpha|0⟩ + beta|1⟩, stored as two complex amplitudes.
    Callers are expected to pass normalised amplitudes; nothing is renormalised here.
    """
    alpha: complex
    beta: complex

    @property
    def prob0(self) -> float:
        # |amp|^2 overflows to inf for huge finite amplitudes
        with np.errstate(over="ignore"):
            return float(np.abs(self.alpha) ** 2)

    @property
    def prob1(self) -> float:
        with np.errstate(over="ignore"):
            return float(np.abs(self.beta) ** 2)

    def norm2(self) -> float:
        return self.prob0 + self.prob1

    def is_normalised(self, tol: float = NORMALISATION_TOL) -> bool:
        return abs(self.norm2() - 1.0) <= tol

    def as_array(self) -> np.ndarray:
        return np.array([self.alpha, self.beta], dtype=complex)

    def to_statevector(self) -> Statevector:
        return Statevector(self.as_array())

    @classmethod
    def from_statevector(cls, sv) -> "QubitState":
        """Builds a QubitState from a 1-qubit qiskit Statevector (or any length-2 vector)."""
        data = np.asarray(getattr(sv, "data", sv), dtype=complex)
        if data.shape != (2,):
            raise ValueError("A single qubit needs exactly 2 amplitudes.")
        return cls(complex(data[0]), complex(data[1]))

    def isclose(self, other: "QubitState", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self.as_array(), other.as_array(), atol=atol))


# Standard basis states
_SQRT2_INV = 1.0 / np.sqrt(2.0)

ZERO = QubitState(1 + 0j, 0j)
ONE = QubitState(0j, 1 + 0j)
PLUS = QubitState(complex(_SQRT2_INV), complex(_SQRT2_INV))
MINUS = QubitState(complex(_SQRT2_INV), complex(-_SQRT2_INV))

BASIS_STATES: Dict[str, QubitState] = {
    "|0⟩": ZERO,
    "|1⟩": ONE,
    "|+⟩": PLUS,
    "|−⟩": MINUS,
}


####### Bloch sphere #######

@dataclass(frozen=True)
class BlochCoordinates:
    x: float
    y: float
    z: float
    theta: float
    phi: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


def _check_finite(state: QubitState) -> None:
    if not np.all(np.isfinite(state.as_array())):
        raise ValueError(f"Amplitudes must be finite, got {state}.")


def to_bloch(state: QubitState) -> BlochCoordinates:
    """
    Maps a qubit state to its point on the Bloch sphere.

    theta = 2 arccos(|alpha|), phi = arg(beta) - arg(alpha) (0 when beta ~ 0).
    |alpha|^2 is clipped into [0, 1] before arccos, so a slightly
    non-normalised state still lands on (or near) the sphere instead of giving NaN.

    Args:
        state: the qubit state.

    Returns:
        BlochCoordinates with cartesian (x, y, z) and the angles (theta, phi).
    """
    _check_finite(state)
    if not state.is_normalised():
        logger.warning(f"State is not normalised (|alpha|^2 + |beta|^2 = {state.norm2():.6g}), clipping |alpha|^2 into [0, 1]")

    prob0 = float(np.clip(state.prob0, 0.0, 1.0))
    prob1 = state.prob1

    theta = 2.0 * np.arccos(np.sqrt(prob0))

    phi = 0.0
    if prob1 > PHASE_EPSILON:
        alpha_phase = np.arctan2(state.alpha.imag, state.alpha.real)
        beta_phase = np.arctan2(state.beta.imag, state.beta.real)
        phi = float(beta_phase - alpha_phase)

    x = np.sin(theta) * np.cos(phi)
    y = np.sin(theta) * np.sin(phi)
    z = np.cos(theta)
    return BlochCoordinates(float(x), float(y), float(z), float(theta), phi)


def bloch_vector_rho(state: QubitState) -> Tuple[float, float, float]:
    """
    Returns (x, y, z) = (Tr(ρ X), Tr(ρ Y), Tr(ρ Z)) for ρ = |ψ⟩⟨ψ|.
    """
    M = np.asarray(DensityMatrix(state.to_statevector()).data, dtype=complex)
    x = np.real(np.trace(M @ X.data))
    y = np.real(np.trace(M @ Y.data))
    z = np.real(np.trace(M @ Z.data))
    return float(x), float(y), float(z)


####### Gates #######

X = Operator(XGate())
Y = Operator(YGate())
Z = Operator(ZGate())
H = Operator(HGate())


def apply_hadamard(state: QubitState) -> QubitState:
    """(alpha, beta) -> ((alpha + beta)/√2, (alpha - beta)/√2). Returns a new state."""
    new_alpha, new_beta = np.asarray(H.data, dtype=complex) @ state.as_array()
    return QubitState(complex(new_alpha), complex(new_beta))


####### Measurement #######

def measure_qubit(state: QubitState, rng: Optional[np.random.Generator] = None) -> int:
    """Projective measurement in the computational basis: 0 with probability |alpha|^2."""
    if rng is None:
        rng = np.random.default_rng()
    return 0 if rng.random() < state.prob0 else 1


def measure_qubit_many(state: QubitState, shots: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Repeats measure_qubit `shots` times on fresh copies of the state.

    Returns:
        outcomes: int array of shape (shots,) with values in {0, 1}.
    """
    if shots < 0:
        raise ValueError("shots must be ≥ 0.")
    if rng is None:
        rng = np.random.default_rng()
    draws = rng.random(int(shots))
    return np.where(draws < state.prob0, 0, 1).astype(int)
