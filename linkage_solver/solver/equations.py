"""
方程组构建
由参数记录实例化三根连杆，按固定顺序生成 8 个线性方程
"""
import sympy as sp
from typing import Dict, List, Optional, Union

from ..model.parameters import LinkageParameters
from ..model.equation import Equation, KINEMATIC
from ..model.link import LinkNode, BaseArm, MiddleArm, EndArm
from ..model.unknowns import unknown_symbols


def to_exact(value: Union[int, float]) -> sp.Rational:
    """
    将参数值转换为精确有理数（按十进制表示，0.362 -> 181/500）
    """
    return sp.Rational(str(value))


def build_linkage(params: LinkageParameters) -> BaseArm:
    """
    根据参数构建串联连杆链：arm 1（基座）-> arm 2 -> arm 3（末端）

    :param params: 物理参数
    :return: 基座连杆（链的根）
    """
    p = {name: to_exact(value) for name, value in params.as_dict().items()}

    arm1 = BaseArm(
        name='arm1',
        weight=p['W1'],
        mass=p['m_com_1'],
        r_com=p['r_com_k'],
        torque=p['T_k'],
        r_weight=p['r3'],
        length=p['L1'],
    )
    arm2 = MiddleArm(
        name='arm2',
        weight=p['W2'],
        mass=p['m_com_2'],
        r_com=p['r_com_A'],
        torque=p['T_a'],
        length=p['L2'],
        r_weight=p['r2'],
    )
    arm3 = EndArm(
        name='arm3',
        weight=p['W3'],
        payload=p['M3'],
        g=p['g'],
        mass=p['m_com_3'],
        r_com=p['r_com_b'],
        torque=p['T_c'],
        r_weight=p['r1'],
        length=p['L3'],
    )
    arm1.add_child(arm2)
    arm2.add_child(arm3)
    return arm1


def find_end_link(root: LinkNode) -> LinkNode:
    """沿 children 找到没有子节点的末端连杆"""
    node = root
    while node.children:
        node = node.children[0]
    return node


def build_kinematic_constraints(params: LinkageParameters, u: Dict[str, sp.Symbol]) -> List[Equation]:
    """
    刚性连杆绕固定距离转动所给出的加速度约束：
        a_A = alpha_k * r_A_K
        a_b = alpha_k * r_A_K + alpha_A * r_b_A
    """
    r_A_K = to_exact(params.r_A_K)
    r_b_A = to_exact(params.r_b_A)
    return [
        Equation(1, 'kinematic_A', KINEMATIC, u['a_A'] - u['alpha_k'] * r_A_K),
        Equation(2, 'kinematic_b', KINEMATIC, u['a_b'] - (u['alpha_k'] * r_A_K + u['alpha_A'] * r_b_A)),
    ]


def build_equations(params: LinkageParameters,
                    unknowns: Optional[Dict[str, sp.Symbol]] = None) -> List[Equation]:
    """
    构建完整方程组。顺序固定：运动学约束 x2，然后 arm 3、arm 2、arm 1 各自的力/力矩平衡。
    校验结果按位置报告，因此顺序不可改变。

    :param params: 物理参数
    :param unknowns: 未知量符号（可选，为 None 时自动创建）
    :return: 8 个 Equation
    """
    if unknowns is None:
        unknowns = unknown_symbols()

    equations = build_kinematic_constraints(params, unknowns)

    # 从末端连杆向上遍历到基座
    root = build_linkage(params)
    for link in find_end_link(root).path_to_root():
        link.append_to_system(equations, unknowns)

    return equations
