"""
求解层 (Solver Layer)
纯数学计算，负责方程组构建、系数矩阵提取、秩判定、线性方程组求解及残差校验
"""

from .equations import (
    build_linkage,
    build_kinematic_constraints,
    build_equations
)
from .linear_core import (
    to_matrix_form,
    check_rank,
    solve_linear_system
)
from .solve_equilibrium import (
    DEFAULT_TOLERANCE,
    verify_solution,
    solve_equilibrium
)
from .errors import (
    EquilibriumError,
    UnsolvableSystem,
    UnderdeterminedSystem,
    NonlinearSystem,
    ToleranceExceeded
)

__all__ = [
    'build_linkage',
    'build_kinematic_constraints',
    'build_equations',
    'to_matrix_form',
    'check_rank',
    'solve_linear_system',
    'DEFAULT_TOLERANCE',
    'verify_solution',
    'solve_equilibrium',
    'EquilibriumError',
    'UnsolvableSystem',
    'UnderdeterminedSystem',
    'NonlinearSystem',
    'ToleranceExceeded'
]
