# examples/example_bloch.py
# Minimal usage demo for the single-qubit helpers.

import matplotlib
import matplotlib.pyplot as plt
from qubit_lab import (
    BASIS_STATES, ZERO,
    apply_hadamard, to_bloch, measure_qubit_many,
    plot_bloch_point,
)

matplotlib.use("Qt5Agg")

# --- basis states on the sphere ---
for label, state in BASIS_STATES.items():
    b = to_bloch(state)
    print(f"{label}: θ={b.theta:.3f} φ={b.phi:.3f} (x,y,z)=({b.x:.3f}, {b.y:.3f}, {b.z:.3f})")

# --- Hadamard: |0⟩ -> |+⟩ -> |0⟩ ---
plus = apply_hadamard(ZERO)
back = apply_hadamard(plus)
print("H|0⟩ ≈ |+⟩ :", plus.isclose(BASIS_STATES["|+⟩"]))
print("HH|0⟩ ≈ |0⟩:", back.isclose(ZERO))

# --- measurement statistics ---
shots = measure_qubit_many(plus, 1000)
print(f"P(0) over 1000 shots: {(shots == 0).mean():.3f}")

plot_bloch_point(to_bloch(ZERO), "|0⟩")
plot_bloch_point(to_bloch(plus), "H|0⟩")
plt.show()
