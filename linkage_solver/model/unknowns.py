"""
待求未知量的定义
"""
import sympy as sp
from typing import Dict, Tuple

# 求解顺序：连杆间反力、末端力、角加速度、线加速度
UNKNOWN_NAMES: Tuple[str, ...] = (
    'F_cb',
    'F_ba',
    'F_b',
    'alpha_b',
    'alpha_A',
    'alpha_k',
    'a_A',
    'a_b',
)

UNKNOWN_UNITS: Dict[str, str] = {
    'F_cb': 'N',
    'F_ba': 'N',
    'F_b': 'N',
    'alpha_b': 'rad/s^2',
    'alpha_A': 'rad/s^2',
    'alpha_k': 'rad/s^2',
    'a_A': 'm/s^2',
    'a_b': 'm/s^2',
}

FORCE_NAMES: Tuple[str, ...] = ('F_cb', 'F_ba', 'F_b')
ANGULAR_ACCELERATION_NAMES: Tuple[str, ...] = ('alpha_b', 'alpha_A', 'alpha_k')
LINEAR_ACCELERATION_NAMES: Tuple[str, ...] = ('a_A', 'a_b')


def unknown_symbols() -> Dict[str, sp.Symbol]:
    """
    为每个未知量创建符号

    :return: 按 UNKNOWN_NAMES 顺序排列的 名称 -> sympy.Symbol 字典
    """
    return {name: sp.Symbol(name, real=True) for name in UNKNOWN_NAMES}
