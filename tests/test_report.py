"""Tests for report formatting and the command-line entry point."""
import pytest

from linkage_solver import DEFAULT_PARAMETERS, solve_equilibrium
from linkage_solver.model import Residual
from linkage_solver.report import (
    format_parameters,
    format_solution,
    format_verification,
    format_residual_line,
    render_report,
)
from linkage_solver.run_solver import main, run_solver
from linkage_solver.utils import format_quantity, format_residual


def test_format_quantity():
    assert format_quantity(964.63665465, 'N') == '964.6367 N'
    assert format_quantity(-3.71282624, 'rad/s^2') == '-3.7128 rad/s^2'
    assert format_quantity(-0.00001, 'm') == '0.0000 m'
    assert format_quantity(2, '') == '2.0000'
    assert format_quantity(1.23456, 'm', decimals=2) == '1.23 m'


def test_format_residual():
    assert format_residual(1.23456e-13) == '1.2346e-13'
    assert format_residual(0.0) == '0.0000e+00'
    assert format_residual(-2.5e-9) == '-2.5000e-09'


def test_residual_lines():
    ok = Residual(1, 'kinematic_A', 1e-15, True)
    bad = Residual(3, 'arm3_force', 1e-9, False)
    assert format_residual_line(ok) == "[✓] Eq.1 kinematic_A: residual = 1.0000e-15 (satisfied)"
    assert format_residual_line(bad) == "[✗] Eq.3 arm3_force: residual = 1.0000e-09 (NOT SATISFIED)"
    text = format_verification([ok, bad])
    assert text.splitlines()[0] == "Verification:"
    assert "NOT SATISFIED" in text.splitlines()[2]


def test_format_parameters_lists_every_field():
    text = format_parameters(DEFAULT_PARAMETERS)
    assert "  T_c      = 266.0000 N*m" in text
    assert "  M3       = 5.0000 kg" in text
    assert "  r_A_K    = 0.4200 m" in text
    assert len(text.splitlines()) == 1 + 22


@pytest.fixture(scope="module")
def result():
    return solve_equilibrium()


def test_format_solution(result):
    text = format_solution(result.solution)
    assert "  alpha_b  = 298.5175 rad/s^2" in text
    assert "  alpha_k  = -3.7128 rad/s^2" in text
    assert "  a_b      = 36.8899 m/s^2" in text
    assert "  F_cb     = 964.6367 N" in text
    assert "  F_ba     = 1028.7562 N" in text
    assert "  F_b      = 1047.6810 N" in text
    lines = text.splitlines()
    assert lines.index("Angular accelerations:") < lines.index("Linear accelerations:") < lines.index("Forces:")


def test_render_report(result):
    text = render_report(result)
    assert "Parameters:" in text
    assert text.count("(satisfied)") == 8
    assert "NOT SATISFIED" not in text
    assert "8/8 equations satisfied" in text


def test_cli_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "F_cb     = 964.6367 N" in out
    assert "✅" in out


def test_cli_exact_run(capsys):
    assert main(['--exact']) == 0
    out = capsys.readouterr().out
    assert "precision: exact" in out


def test_cli_rejects_unknown_arguments(capsys):
    assert main(['--fast']) == 2
    assert "usage" in capsys.readouterr().out


def test_unsolvable_run_exits_nonzero(capsys):
    assert run_solver(parameters=DEFAULT_PARAMETERS.with_overrides(m_com_3=0)) == 1
    out = capsys.readouterr().out
    assert "❌" in out
    assert "Verification:" not in out
