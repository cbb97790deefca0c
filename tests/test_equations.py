"""Tests for equation construction."""
import sympy as sp

from linkage_solver.model import (
    DEFAULT_PARAMETERS,
    UNKNOWN_NAMES,
    KINEMATIC,
    FORCE,
    MOMENT,
    BaseArm,
    MiddleArm,
    EndArm,
    unknown_symbols,
)
from linkage_solver.solver.equations import build_equations, build_linkage, to_exact
from linkage_solver.solver.linear_core import to_matrix_form


def col(name):
    return UNKNOWN_NAMES.index(name)


def matrix_form(params):
    u = unknown_symbols()
    equations = build_equations(params, u)
    return to_matrix_form(equations, [u[name] for name in UNKNOWN_NAMES])


def test_to_exact_uses_decimal_representation():
    assert to_exact(0.362) == sp.Rational(181, 500)
    assert to_exact(5) == 5
    assert to_exact(-0.126847) == sp.Rational(-126847, 1000000)


def test_linkage_is_a_serial_chain():
    root = build_linkage(DEFAULT_PARAMETERS)
    assert isinstance(root, BaseArm)
    middle = root.children[0]
    end = middle.children[0]
    assert isinstance(middle, MiddleArm)
    assert isinstance(end, EndArm)
    assert end.children == []
    assert [link.name for link in end.path_to_root()] == ['arm3', 'arm2', 'arm1']


def test_equation_order_and_kinds():
    equations = build_equations(DEFAULT_PARAMETERS)
    assert [eq.index for eq in equations] == list(range(1, 9))
    assert [eq.name for eq in equations] == [
        'kinematic_A', 'kinematic_b',
        'arm3_force', 'arm3_moment',
        'arm2_force', 'arm2_moment',
        'arm1_force', 'arm1_moment',
    ]
    assert [eq.kind for eq in equations] == [KINEMATIC, KINEMATIC] + [FORCE, MOMENT] * 3


def test_kinematic_rows():
    A, b = matrix_form(DEFAULT_PARAMETERS)
    assert A[0, col('a_A')] == 1
    assert A[0, col('alpha_k')] == -sp.Rational('0.42')
    assert A[1, col('a_b')] == 1
    assert A[1, col('alpha_k')] == -sp.Rational('0.42')
    assert A[1, col('alpha_A')] == -sp.Rational('0.377')
    assert b[0] == 0 and b[1] == 0


def test_arm3_moment_row():
    A, b = matrix_form(DEFAULT_PARAMETERS)
    # T_c - W3*r1 - M3*g*L3 = 243.828266, moved to the right-hand side
    assert b[3] == -sp.Rational('243.828266')
    # m_com_3 * r_com_b^2
    assert A[3, col('alpha_b')] == -sp.Rational('0.816797252')
    nonzero = [UNKNOWN_NAMES[j] for j in range(8) if A[3, j] != 0]
    assert nonzero == ['alpha_b']


def test_arm2_moment_uses_signed_weight_arm():
    u = unknown_symbols()
    equations = build_equations(DEFAULT_PARAMETERS, u)
    p = {name: to_exact(value) for name, value in DEFAULT_PARAMETERS.as_dict().items()}
    expected = (p['T_a'] - u['F_cb'] * p['L2'] + p['W2'] * p['r2']
                - p['m_com_2'] * p['r2'] ** 2 * u['alpha_A'])
    assert sp.expand(equations[5].expression - expected) == 0


def test_all_equations_are_linear():
    u = unknown_symbols()
    for eq in build_equations(DEFAULT_PARAMETERS, u):
        poly = sp.Poly(eq.expression, *u.values())
        assert poly.total_degree() <= 1, eq.name


def test_payload_does_not_touch_arm1_rows():
    A, b = matrix_form(DEFAULT_PARAMETERS)
    A0, b0 = matrix_form(DEFAULT_PARAMETERS.with_overrides(M3=0))
    for row in (6, 7):
        assert A.row(row) == A0.row(row)
        assert b[row] == b0[row]
    # arm 3 force/moment constants depend on M3
    assert b[2] != b0[2]
    assert b[3] != b0[3]
