"""
线性方程组核心算法
方程 -> 系数矩阵 A 与常数向量 b（A x = b），秩判定，LU 分解求解
"""
import numpy as np
import scipy.linalg
import sympy as sp
from sympy.solvers.solveset import NonlinearError
from typing import List, Sequence, Tuple

from ..model.equation import Equation
from ..model.result import Solution
from .errors import UnsolvableSystem, UnderdeterminedSystem, NonlinearSystem

FLOAT = 'float'
EXACT = 'exact'
PRECISION_MODES = (FLOAT, EXACT)


def to_matrix_form(equations: Sequence[Equation],
                   unknown_symbols: Sequence[sp.Symbol]) -> Tuple[sp.Matrix, sp.Matrix]:
    """
    将 expression == 0 形式的方程组转换为 A x = b

    :param equations: 方程列表
    :param unknown_symbols: 未知量符号（决定 x 的顺序）
    :return: (A, b)，均为精确的 sympy 矩阵
    """
    expressions = [eq.expression for eq in equations]
    try:
        A, b = sp.linear_eq_to_matrix(expressions, list(unknown_symbols))
    except NonlinearError as e:
        raise NonlinearSystem(f"Equation system is not linear in the unknowns: {e}") from e
    return A, b


def to_numpy(matrix: sp.Matrix) -> np.ndarray:
    """sympy 矩阵 -> float64 数组"""
    return np.array(matrix.tolist(), dtype=np.float64)


def check_rank(A: sp.Matrix, b: sp.Matrix, precision: str = FLOAT) -> int:
    """
    根据 rank(A) 与 rank([A|b]) 判定方程组是否有唯一解

    - rank([A|b]) > rank(A): 方程组矛盾 -> UnsolvableSystem
    - rank(A) < 未知量个数: 存在自由变量 -> UnderdeterminedSystem

    :param A: 系数矩阵
    :param b: 常数向量
    :param precision: 'float' 使用 SVD 数值秩，'exact' 使用有理数精确秩
    :return: rank(A)
    """
    n = A.shape[1]
    if precision == EXACT:
        rank = A.rank()
        augmented_rank = A.row_join(b).rank()
    else:
        A_num = to_numpy(A)
        b_num = to_numpy(b)
        rank = int(np.linalg.matrix_rank(A_num))
        augmented_rank = int(np.linalg.matrix_rank(np.column_stack([A_num, b_num])))

    if augmented_rank > rank:
        raise UnsolvableSystem(
            f"Coefficient matrix is singular (rank {rank} < {n}) and the system is inconsistent",
            rank=rank, augmented_rank=augmented_rank
        )
    if rank < n:
        raise UnderdeterminedSystem(
            f"Coefficient matrix is singular (rank {rank} < {n}); "
            f"{n - rank} free variable(s) remain",
            rank=rank, augmented_rank=augmented_rank
        )
    return rank


def row_scales(A: sp.Matrix, b: sp.Matrix) -> List[float]:
    """每个方程最大系数（含常数项）的绝对值"""
    A_num = np.abs(to_numpy(A))
    b_num = np.abs(to_numpy(b)).reshape(-1)
    return [float(max(A_num[i].max(initial=0.0), b_num[i])) for i in range(A_num.shape[0])]


def solve_linear_system(equations: Sequence[Equation],
                        unknown_symbols: Sequence[sp.Symbol],
                        precision: str = FLOAT) -> Solution:
    """
    求解线性方程组

    :param equations: 方程列表（须为方阵系统）
    :param unknown_symbols: 待求符号，顺序与 UNKNOWN_NAMES 对应
    :param precision: 'float' -> 部分选主元的 LU 分解 (float64)；'exact' -> 有理数 LU 消元
    :return: Solution
    """
    if precision not in PRECISION_MODES:
        raise ValueError(f"Unknown precision mode: {precision!r} (expected one of {PRECISION_MODES})")

    unknown_symbols = list(unknown_symbols)
    A, b = to_matrix_form(equations, unknown_symbols)
    if A.shape[0] != A.shape[1]:
        raise ValueError(f"Expected a square system, got {A.shape[0]} equations "
                         f"in {A.shape[1]} unknowns")

    check_rank(A, b, precision)

    names = [str(symbol) for symbol in unknown_symbols]

    if precision == EXACT:
        x = A.LUsolve(b)
        exact = {name: x[i] for i, name in enumerate(names)}
        return Solution({name: float(value) for name, value in exact.items()}, exact=exact)

    try:
        lu, piv = scipy.linalg.lu_factor(to_numpy(A))
        x = scipy.linalg.lu_solve((lu, piv), to_numpy(b).reshape(-1))
    except np.linalg.LinAlgError as e:
        raise UnsolvableSystem(f"LU decomposition failed: {e}") from e

    return Solution({name: float(x[i]) for i, name in enumerate(names)})
