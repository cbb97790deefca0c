"""
模型层 (Model Layer)
参数记录、未知量定义、连杆层次结构与结果记录

导出：
- LinkageParameters / DEFAULT_PARAMETERS: 只读的物理参数记录与固定工况
- UNKNOWN_NAMES / UNKNOWN_UNITS / unknown_symbols: 8 个待求量
- Equation: expression == 0 形式的方程记录
- LinkNode: 抽象基类，定义每根连杆的力/力矩平衡接口
- BaseArm / MiddleArm / EndArm: arm 1 / arm 2 / arm 3
- Solution / Residual / EquilibriumResult: 求解结果
"""

from .parameters import LinkageParameters, DEFAULT_PARAMETERS
from .unknowns import (
    UNKNOWN_NAMES,
    UNKNOWN_UNITS,
    FORCE_NAMES,
    ANGULAR_ACCELERATION_NAMES,
    LINEAR_ACCELERATION_NAMES,
    unknown_symbols
)
from .equation import Equation, KINEMATIC, FORCE, MOMENT
from .link import LinkNode, BaseArm, MiddleArm, EndArm
from .result import Solution, Residual, EquilibriumResult

__all__ = [
    'LinkageParameters',
    'DEFAULT_PARAMETERS',
    'UNKNOWN_NAMES',
    'UNKNOWN_UNITS',
    'FORCE_NAMES',
    'ANGULAR_ACCELERATION_NAMES',
    'LINEAR_ACCELERATION_NAMES',
    'unknown_symbols',
    'Equation',
    'KINEMATIC',
    'FORCE',
    'MOMENT',
    'LinkNode',
    'BaseArm',
    'MiddleArm',
    'EndArm',
    'Solution',
    'Residual',
    'EquilibriumResult'
]
