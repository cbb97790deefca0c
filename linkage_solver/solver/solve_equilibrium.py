"""
平衡求解流程：构建方程 -> 求解 -> 残差校验
"""
import math
from typing import Dict, List, Optional, Sequence

import sympy as sp

from ..model.equation import Equation
from ..model.parameters import LinkageParameters, DEFAULT_PARAMETERS
from ..model.result import Solution, Residual, EquilibriumResult
from ..model.unknowns import UNKNOWN_NAMES, unknown_symbols
from .equations import build_equations
from .errors import ToleranceExceeded
from .linear_core import FLOAT, PRECISION_MODES, to_matrix_form, row_scales, solve_linear_system

DEFAULT_TOLERANCE = 1e-10


def verify_solution(
    equations: Sequence[Equation],
    solution: Solution,
    tolerance: float = DEFAULT_TOLERANCE,
    unknowns: Optional[Dict[str, sp.Symbol]] = None,
    strict: bool = False
) -> List[Residual]:
    """
    将解代回每个方程，计算残差

    注意：容差是绝对值而非相对值。系数量级很大的方程（力矩方程）与量级很小的方程
    （运动学约束）使用同一个阈值，判定结果只能作为自检参考。

    :param equations: 方程列表
    :param solution: 求解结果
    :param tolerance: 绝对容差，|residual| < tolerance 视为满足
    :param unknowns: 未知量符号（可选，为 None 时自动创建）
    :param strict: 为 True 时，在全部方程校验完成后若有不满足的方程则抛出 ToleranceExceeded
    :return: 与方程一一对应的 Residual 列表
    """
    if unknowns is None:
        unknowns = unknown_symbols()
    substitutions = solution.substitutions(unknowns)

    A, b = to_matrix_form(equations, [unknowns[name] for name in UNKNOWN_NAMES])
    scales = row_scales(A, b)

    residuals: List[Residual] = []
    # 逐个校验，不因某个方程失败而中断
    for eq, scale in zip(equations, scales):
        value = float(eq.expression.xreplace(substitutions))
        residuals.append(Residual(
            index=eq.index,
            name=eq.name,
            value=value,
            passed=abs(value) < tolerance,
            scale=scale,
        ))

    failed = [r for r in residuals if not r.passed]
    if strict and failed:
        raise ToleranceExceeded(failed)
    return residuals


def solve_equilibrium(
    parameters: LinkageParameters = DEFAULT_PARAMETERS,
    precision: str = FLOAT,
    tolerance: float = DEFAULT_TOLERANCE
) -> EquilibriumResult:
    """
    求解三连杆机构的瞬时平衡

    :param parameters: 物理参数，默认使用固定工况
    :param precision: 'float'（LU 分解，float64）或 'exact'（有理数精确消元）
    :param tolerance: 残差校验的绝对容差，默认值1e-10
    :return: EquilibriumResult；方程组奇异/不相容时抛出 UnsolvableSystem / UnderdeterminedSystem
    """
    if precision not in PRECISION_MODES:
        raise ValueError(f"Unknown precision mode: {precision!r} (expected one of {PRECISION_MODES})")
    if not (isinstance(tolerance, (int, float)) and math.isfinite(tolerance) and tolerance > 0):
        raise ValueError(f"Tolerance must be a positive finite number, got {tolerance!r}")

    unknowns = unknown_symbols()
    equations = build_equations(parameters, unknowns)

    # 求解失败直接抛出，不产生部分结果
    solution = solve_linear_system(equations, [unknowns[name] for name in UNKNOWN_NAMES], precision)

    residuals = verify_solution(equations, solution, tolerance, unknowns)

    return EquilibriumResult(
        parameters=parameters,
        equations=tuple(equations),
        solution=solution,
        residuals=tuple(residuals),
        tolerance=tolerance,
        precision=precision,
    )
