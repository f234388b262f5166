"""Tests for ``python -m qubit_lab``."""

import matplotlib
import pytest

from qubit_lab.__main__ import main, parse_args


def test_bloch_plus(capsys):
    assert main(["bloch", "--state", "+"]) == 0
    out = capsys.readouterr().out
    assert "θ: 1.5708" in out
    assert "(x, y, z): (1.0000, 0.0000, " in out


def test_bloch_hadamard_of_one(capsys):
    assert main(["bloch", "--state", "1", "--hadamard"]) == 0
    out = capsys.readouterr().out
    assert "φ: 3.1416" in out


def test_bell_psi_minus(capsys):
    assert main(["bell", "--state", "psi-", "--count", "200", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Measurements: 200" in out
    assert "|00⟩: 0" in out and "|11⟩: 0" in out
    assert "Same outcome: 0.0%" in out
    assert "Different outcome: 100.0%" in out
    assert "Correlation: -1.000" in out
    assert "Strong entanglement" in out


def test_bell_empty(capsys):
    assert main(["bell", "--count", "0"]) == 0
    assert "Correlation: 0.000" in capsys.readouterr().out


def test_bell_save_plot(tmp_path, capsys):
    target = tmp_path / "plots" / "history.png"
    assert main(["bell", "--count", "50", "--seed", "0", "--save-plot", str(target)]) == 0
    assert target.exists()
    assert str(target) in capsys.readouterr().out


def test_defaults():
    args = parse_args(["bell"])
    assert args.state == "phi+"
    assert args.count == 100
    assert args.history_step == 10
    assert args.log_level == "WARNING"


@pytest.mark.parametrize("argv", [
    ["bell", "--count", "-5"],
    ["bell", "--history-step", "0"],
    ["bell", "--state", "chi+"],
    [],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 2


def test_save_plot_keeps_backend(tmp_path, monkeypatch):
    def no_switch(*args, **kwargs):
        raise AssertionError("backend switched")

    backend = matplotlib.get_backend()
    monkeypatch.setattr(matplotlib, "use", no_switch)
    assert main(["bell", "--count", "20", "--seed", "1", "--save-plot", str(tmp_path / "h.png")]) == 0
    assert matplotlib.get_backend() == backend
