"""Command-line entry point for the :mod:`qubit_lab` package."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from .bell_states import DEFAULT_HISTORY_STEP, BellState, correlation_history, sample_bell_states, summarise
from .qubit_state import MINUS, ONE, PLUS, ZERO, apply_hadamard, to_bloch
from .visualisation import plot_correlation_history

logger = logging.getLogger(__name__)

STATE_CHOICES = {"0": ZERO, "1": ONE, "+": PLUS, "-": MINUS}
BELL_CHOICES = ("phi+", "phi-", "psi+", "psi-")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="qubit-lab",
        description="Bloch-sphere coordinates and Bell-pair measurement statistics.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    bloch = sub.add_parser("bloch", help="Print the Bloch coordinates of a basis state.")
    bloch.add_argument(
        "--state",
        choices=sorted(STATE_CHOICES),
        default="0",
        help="Starting state (default: 0).",
    )
    bloch.add_argument(
        "--hadamard",
        action="store_true",
        help="Apply a Hadamard gate before converting.",
    )

    bell = sub.add_parser("bell", help="Sample Bell-pair measurements and report correlation.")
    bell.add_argument(
        "--state",
        choices=BELL_CHOICES,
        default="phi+",
        help="Bell state to measure (default: phi+).",
    )
    bell.add_argument(
        "--count",
        type=int,
        default=100,
        help="Number of measurements (default: 100).",
    )
    bell.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator (default: None).",
    )
    bell.add_argument(
        "--history-step",
        type=int,
        default=DEFAULT_HISTORY_STEP,
        help=f"Prefix increment for the correlation history (default: {DEFAULT_HISTORY_STEP}).",
    )
    bell.add_argument(
        "--save-plot",
        type=Path,
        default=None,
        metavar="PATH",
        help="Save a plot of the correlation history to this path.",
    )
    args = parser.parse_args(argv)
    if args.command == "bell" and args.count < 0:
        parser.error("--count must be ≥ 0")
    if args.command == "bell" and args.history_step < 1:
        parser.error("--history-step must be ≥ 1")
    return args


def _run_bloch(args: argparse.Namespace) -> int:
    state = STATE_CHOICES[args.state]
    if args.hadamard:
        state = apply_hadamard(state)
    coords = to_bloch(state)

    print(f"State: alpha={state.alpha:.4f}, beta={state.beta:.4f}")
    print(f"θ: {coords.theta:.4f}")
    print(f"φ: {coords.phi:.4f}")
    print(f"(x, y, z): ({coords.x:.4f}, {coords.y:.4f}, {coords.z:.4f})")
    return 0


def _run_bell(args: argparse.Namespace) -> int:
    bell_state = BellState.parse(args.state)
    rng = np.random.default_rng(args.seed)
    pairs = sample_bell_states(bell_state, args.count, rng=rng)
    summary = summarise(pairs)
    logger.info(f"Sampled {summary.total} pairs from {bell_state.label}")

    print(f"Bell state {bell_state.label} = {bell_state.formula}")
    print("-------------------------------------")
    print(f"Measurements: {summary.total}")
    for outcome, n in summary.counts.items():
        print(f"|{outcome}⟩: {n}")
    print(f"Same outcome: {summary.same_fraction * 100:.1f}%")
    print(f"Different outcome: {summary.different_fraction * 100:.1f}%")
    print(f"Correlation: {summary.correlation:.3f}")
    if summary.total > 0:
        print("Strong entanglement" if summary.strongly_correlated else "Building correlation")

    if args.save_plot is not None:
        history = correlation_history(pairs, step=args.history_step)
        if not history:
            logger.warning(f"Fewer than {args.history_step} measurements, no correlation history to plot")
            return 0

        fig = plot_correlation_history(history, title=f"Correlation |r|(n) for {bell_state.label}")
        args.save_plot.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(args.save_plot, dpi=300, bbox_inches="tight")
        plt.close(fig)
        print(f"Saved correlation history to {args.save_plot}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    if args.command == "bloch":
        return _run_bloch(args)
    return _run_bell(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
