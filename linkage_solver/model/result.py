"""
求解结果：解、残差与整体结果
"""
import sympy as sp
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from .equation import Equation
from .parameters import LinkageParameters
from .unknowns import (
    UNKNOWN_NAMES,
    UNKNOWN_UNITS,
    FORCE_NAMES,
    ANGULAR_ACCELERATION_NAMES,
    LINEAR_ACCELERATION_NAMES,
)


class Solution(Mapping):
    """
    未知量名称 -> 数值 的只读映射，迭代顺序与 UNKNOWN_NAMES 一致。
    精确模式下同时保存有理数形式的精确解。
    """

    def __init__(self, values: Dict[str, float], exact: Optional[Dict[str, sp.Expr]] = None):
        missing = [name for name in UNKNOWN_NAMES if name not in values]
        if missing:
            raise ValueError(f"Solution is missing unknown(s): {', '.join(missing)}")
        self._values = MappingProxyType({name: float(values[name]) for name in UNKNOWN_NAMES})
        self._exact = None
        if exact is not None:
            self._exact = MappingProxyType({name: sp.sympify(exact[name]) for name in UNKNOWN_NAMES})

    def __getitem__(self, name: str) -> float:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def exact(self) -> Optional[Mapping]:
        """精确解（仅精确模式），否则为 None"""
        return self._exact

    def substitutions(self, symbols: Dict[str, sp.Symbol]) -> Dict[sp.Symbol, sp.Expr]:
        """
        生成代入用的 符号 -> 数值 字典；有精确解时优先使用精确解

        :param symbols: 未知量名称到符号的映射
        """
        if self._exact is not None:
            return {symbols[name]: self._exact[name] for name in UNKNOWN_NAMES}
        return {symbols[name]: sp.Float(self._values[name]) for name in UNKNOWN_NAMES}

    def __repr__(self):
        inner = ', '.join(f"{name}={value:.6g}" for name, value in self._values.items())
        return f"Solution({inner})"


@dataclass(frozen=True)
class Residual:
    """
    单个方程的残差

    :param index: 方程序号（从 1 开始）
    :param name: 方程名称
    :param value: 代入解后表达式的值
    :param passed: |value| < tolerance
    :param scale: 该方程最大系数（含常数项）的绝对值，仅用于诊断
    """
    index: int
    name: str
    value: float
    passed: bool
    scale: float = 0.0


@dataclass(frozen=True)
class EquilibriumResult:
    parameters: LinkageParameters
    equations: Tuple[Equation, ...]
    solution: Solution
    residuals: Tuple[Residual, ...]
    tolerance: float
    precision: str

    @property
    def all_satisfied(self) -> bool:
        return all(residual.passed for residual in self.residuals)

    @property
    def failed_residuals(self) -> List[Residual]:
        return [residual for residual in self.residuals if not residual.passed]

    @property
    def angular_accelerations(self) -> Dict[str, float]:
        return {name: self.solution[name] for name in ANGULAR_ACCELERATION_NAMES}

    @property
    def linear_accelerations(self) -> Dict[str, float]:
        return {name: self.solution[name] for name in LINEAR_ACCELERATION_NAMES}

    @property
    def forces(self) -> Dict[str, float]:
        return {name: self.solution[name] for name in FORCE_NAMES}

    def as_dict(self) -> Dict:
        """导出为纯 Python 结构（便于打印或序列化）"""
        return {
            'precision': self.precision,
            'tolerance': self.tolerance,
            'parameters': self.parameters.as_dict(),
            'solution': {
                name: {'value': value, 'unit': UNKNOWN_UNITS[name]}
                for name, value in self.solution.items()
            },
            'residuals': [
                {
                    'index': residual.index,
                    'name': residual.name,
                    'value': residual.value,
                    'passed': residual.passed,
                }
                for residual in self.residuals
            ],
            'all_satisfied': self.all_satisfied,
        }
