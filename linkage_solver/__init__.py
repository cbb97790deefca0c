"""
三连杆机构瞬时平衡求解器

由固定物理参数建立 2 个运动学约束与 3 组力/力矩平衡方程（共 8 个线性方程），
求解连杆间反力与角/线加速度，并将解代回方程校验残差。
"""

from .model import LinkageParameters, DEFAULT_PARAMETERS, Solution, Residual, EquilibriumResult
from .solver import (
    build_equations,
    solve_linear_system,
    verify_solution,
    solve_equilibrium,
    DEFAULT_TOLERANCE,
    EquilibriumError,
    UnsolvableSystem,
    UnderdeterminedSystem,
    NonlinearSystem,
    ToleranceExceeded
)
from .report import render_report

__version__ = '0.1.0'

__all__ = [
    'LinkageParameters',
    'DEFAULT_PARAMETERS',
    'Solution',
    'Residual',
    'EquilibriumResult',
    'build_equations',
    'solve_linear_system',
    'verify_solution',
    'solve_equilibrium',
    'DEFAULT_TOLERANCE',
    'EquilibriumError',
    'UnsolvableSystem',
    'UnderdeterminedSystem',
    'NonlinearSystem',
    'ToleranceExceeded',
    'render_report'
]
