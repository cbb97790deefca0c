"""
结果输出：将参数、解与校验结果渲染为可读文本
只做格式化，不做计算
"""
from typing import Dict, List, Sequence

from .model.parameters import LinkageParameters
from .model.result import Solution, Residual, EquilibriumResult
from .model.unknowns import (
    UNKNOWN_UNITS,
    ANGULAR_ACCELERATION_NAMES,
    LINEAR_ACCELERATION_NAMES,
    FORCE_NAMES
)
from .utils import format_quantity, format_residual

PARAMETER_UNITS: Dict[str, str] = {
    'W3': 'N', 'W2': 'N', 'W1': 'N',
    'M3': 'kg', 'm_com_3': 'kg', 'm_com_2': 'kg', 'm_com_1': 'kg',
    'T_c': 'N*m', 'T_a': 'N*m', 'T_k': 'N*m',
    'g': 'm/s^2',
}
# 其余参数均为长度
LENGTH_UNIT = 'm'

SATISFIED = 'satisfied'
NOT_SATISFIED = 'NOT SATISFIED'


def format_parameters(params: LinkageParameters) -> str:
    lines: List[str] = ["Parameters:"]
    for name, value in params.as_dict().items():
        unit = PARAMETER_UNITS.get(name, LENGTH_UNIT)
        lines.append(f"  {name:<8} = {format_quantity(value, unit)}")
    return '\n'.join(lines)


def format_solution(solution: Solution) -> str:
    """
    按 角加速度 / 线加速度 / 力 分组输出解，保留 4 位小数
    """
    groups = [
        ("Angular accelerations:", ANGULAR_ACCELERATION_NAMES),
        ("Linear accelerations:", LINEAR_ACCELERATION_NAMES),
        ("Forces:", FORCE_NAMES),
    ]
    lines: List[str] = []
    for title, names in groups:
        lines.append(title)
        for name in names:
            lines.append(f"  {name:<8} = {format_quantity(solution[name], UNKNOWN_UNITS[name])}")
    return '\n'.join(lines)


def format_residual_line(residual: Residual) -> str:
    marker = '✓' if residual.passed else '✗'
    verdict = SATISFIED if residual.passed else NOT_SATISFIED
    return (f"[{marker}] Eq.{residual.index} {residual.name}: "
            f"residual = {format_residual(residual.value)} ({verdict})")


def format_verification(residuals: Sequence[Residual]) -> str:
    lines = ["Verification:"]
    lines.extend(f"  {format_residual_line(r)}" for r in residuals)
    return '\n'.join(lines)


def render_report(result: EquilibriumResult) -> str:
    """
    完整报告：参数、解、逐方程校验与汇总
    """
    passed = sum(1 for r in result.residuals if r.passed)
    summary = (f"{passed}/{len(result.residuals)} equations satisfied "
               f"(|residual| < {result.tolerance:.0e}, precision: {result.precision})")
    sections = [
        format_parameters(result.parameters),
        format_solution(result.solution),
        format_verification(result.residuals),
        summary,
    ]
    return '\n\n'.join(sections)
