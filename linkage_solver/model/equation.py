"""
方程记录：expression == 0
"""
import sympy as sp
from dataclasses import dataclass

KINEMATIC = 'kinematic'
FORCE = 'force'
MOMENT = 'moment'


@dataclass(frozen=True)
class Equation:
    """
    单个线性方程，约定 expression == 0

    :param index: 在方程组中的位置（从 1 开始）
    :param name: 方程名称，如 'arm3_force'
    :param kind: 'kinematic' / 'force' / 'moment'
    :param expression: 关于未知量的 sympy 表达式
    """
    index: int
    name: str
    kind: str
    expression: sp.Expr

    def __repr__(self):
        return f"<Equation {self.index}: {self.name}>"
