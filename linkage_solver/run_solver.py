import sys
import time
from typing import List, Optional

from .model.parameters import LinkageParameters, DEFAULT_PARAMETERS
from .solver.errors import EquilibriumError
from .solver.linear_core import FLOAT, EXACT
from .solver.solve_equilibrium import solve_equilibrium, DEFAULT_TOLERANCE
from .report import render_report

USAGE = "usage: linkage-solver [--exact]"


def run_solver(precision: str = FLOAT, parameters: Optional[LinkageParameters] = None) -> int:
    """
    求解固定工况并打印报告

    :param precision: 'float' 或 'exact'
    :param parameters: 物理参数，None 时使用固定工况
    :return: 退出码；0 表示求解成功（即使有方程未满足），1 表示方程组无法求解
    """
    if parameters is None:
        parameters = DEFAULT_PARAMETERS

    print("----------- Linkage Equilibrium Solver -----------")
    print(f"求解模式: {precision}")

    start_time = time.time()
    try:
        result = solve_equilibrium(parameters, precision=precision, tolerance=DEFAULT_TOLERANCE)
    except EquilibriumError as e:
        print(f"❌ 求解失败: {e}")
        return 1
    duration = time.time() - start_time
    print(f"求解完成，耗时: {duration:.2f} 秒")
    print()

    print(render_report(result))
    print()

    if result.all_satisfied:
        print("✅ 所有方程均满足！")
    else:
        failed = ', '.join(f"Eq.{r.index}" for r in result.failed_residuals)
        print(f"⚠️ 以下方程残差超出容差: {failed}（请检查模型或数值精度）")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    precision = FLOAT
    for arg in argv:
        if arg == '--exact':
            precision = EXACT
        elif arg in ('-h', '--help'):
            print(USAGE)
            return 0
        else:
            print(USAGE)
            print(f"❌ 未知参数: {arg}")
            return 2
    return run_solver(precision)


if __name__ == "__main__":
    sys.exit(main())
