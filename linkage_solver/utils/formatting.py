"""
数值格式化工具函数
"""
import math
from typing import Union


def format_quantity(value: Union[int, float], unit: str, decimals: int = 4) -> str:
    """
    将物理量格式化为定点小数加单位

    :param value: 数值
    :param unit: 单位（如 'N', 'rad/s^2'），为空时不附加
    :param decimals: 小数位数，默认值4
    :return: 例如 '964.6367 N'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    text = f"{float(value):.{decimals}f}"
    # 避免输出 '-0.0000'
    if float(text) == 0.0:
        text = f"{0.0:.{decimals}f}"
    return f"{text} {unit}" if unit else text


def format_residual(value: float) -> str:
    """残差以科学计数法输出，如 '1.2346e-13'"""
    if not math.isfinite(value):
        return str(value)
    return f"{value:.4e}"
