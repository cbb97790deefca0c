"""
求解层异常定义
"""
from typing import Optional, Sequence


class EquilibriumError(RuntimeError):
    """求解失败的基类"""

    def __init__(self, message: str, rank: Optional[int] = None, augmented_rank: Optional[int] = None):
        super().__init__(message)
        self.rank = rank
        self.augmented_rank = augmented_rank


class UnsolvableSystem(EquilibriumError):
    """系数矩阵奇异且方程组矛盾：无解"""


class UnderdeterminedSystem(EquilibriumError):
    """系数矩阵奇异但方程组相容：存在自由变量，解不唯一"""


class NonlinearSystem(EquilibriumError):
    """方程中出现未知量的乘积或高次项"""


class ToleranceExceeded(EquilibriumError):
    """
    残差超过容差。仅在 strict 校验时抛出；默认情况下只在报告中标记。
    """

    def __init__(self, residuals: Sequence):
        names = ', '.join(f"Eq.{r.index} {r.name}" for r in residuals)
        super().__init__(f"{len(residuals)} equation(s) not satisfied: {names}")
        self.residuals = list(residuals)
