"""
连杆类层次结构实现
每根连杆负责给出自身的力平衡方程与力矩平衡方程（牛顿-欧拉形式）
"""
import sympy as sp
from abc import ABC, abstractmethod
from typing_extensions import override
from typing import Dict, List, Optional

from .equation import Equation, FORCE, MOMENT


class LinkNode(ABC):
    """
    所有连杆类型的抽象基类，定义方程构建接口。
    """

    def __init__(self, name: str, mass: sp.Expr, torque: sp.Expr):
        """
        初始化连杆节点

        :param name: 连杆名称（同时作为方程名前缀）
        :param mass: 连杆质量 m_com
        :param torque: 作用在转动中心上的电机力矩
        """
        self.name = name
        self.mass = mass
        self.torque = torque
        self.parent: Optional['LinkNode'] = None
        self.children: List['LinkNode'] = []

    def add_child(self, child: 'LinkNode'):
        """
        添加子连杆（串联链中靠近末端的一侧）
        """
        child.parent = self
        self.children.append(child)

    @abstractmethod
    def force_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        """
        力平衡方程（== 0）

        :param u: 未知量名称到符号的映射
        :return: sympy 表达式
        """
        pass

    @abstractmethod
    def moment_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        """
        绕转动中心的力矩平衡方程（== 0）

        :param u: 未知量名称到符号的映射
        :return: sympy 表达式
        """
        pass

    def append_to_system(self, equations: List[Equation], u: Dict[str, sp.Symbol]):
        """
        将本连杆的力平衡、力矩平衡方程依次追加到方程组末尾

        :param equations: 方程列表（引用传递，直接修改）
        :param u: 未知量名称到符号的映射
        """
        equations.append(Equation(len(equations) + 1, f"{self.name}_force", FORCE, self.force_balance(u)))
        equations.append(Equation(len(equations) + 1, f"{self.name}_moment", MOMENT, self.moment_balance(u)))

    def path_to_root(self) -> List['LinkNode']:
        """从本连杆沿 parent 向上直到基座的路径（含两端）"""
        path: List['LinkNode'] = []
        current = self
        while current is not None:
            path.append(current)
            current = current.parent
        return path

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.name}>"


class BaseArm(LinkNode):
    """
    arm 1 - 绕固定转动中心 K 转动的基座连杆
    """

    def __init__(self, name: str, weight: sp.Expr, mass: sp.Expr, r_com: sp.Expr,
                 torque: sp.Expr, r_weight: sp.Expr, length: sp.Expr):
        """
        :param weight: 连杆重力 W1
        :param mass: 连杆质量 m_com_1
        :param r_com: 质心到 K 的距离 r_com_k
        :param torque: 电机力矩 T_k
        :param r_weight: 重力力臂 r3（同时作为转动惯量半径）
        :param length: 连杆长度 L1（F_ba 的力臂）
        """
        super().__init__(name, mass, torque)
        self.weight = weight
        self.r_com = r_com
        self.r_weight = r_weight
        self.length = length

    @override
    def force_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        # 基座固定，质心加速度只来自 alpha_k
        return u['F_b'] - self.weight - u['F_ba'] - self.mass * (u['alpha_k'] * self.r_com)

    @override
    def moment_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        return (self.torque - self.weight * self.r_weight - u['F_ba'] * self.length
                - self.mass * self.r_weight ** 2 * u['alpha_k'])


class MiddleArm(LinkNode):
    """
    arm 2 - 绕转动中心 A 转动的中间连杆，A 点随 arm 1 一起运动
    """

    def __init__(self, name: str, weight: sp.Expr, mass: sp.Expr, r_com: sp.Expr,
                 torque: sp.Expr, length: sp.Expr, r_weight: sp.Expr):
        """
        :param weight: 连杆重力 W2
        :param mass: 连杆质量 m_com_2
        :param r_com: 质心到 A 的距离 r_com_A
        :param torque: 电机力矩 T_a
        :param length: 连杆长度 L2（F_cb 的力臂）
        :param r_weight: 重力力臂 r2（带符号，同时作为转动惯量半径）
        """
        super().__init__(name, mass, torque)
        self.weight = weight
        self.r_com = r_com
        self.length = length
        self.r_weight = r_weight

    @override
    def force_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        return (-self.weight - u['F_cb'] + u['F_ba']
                - self.mass * (u['a_A'] + u['alpha_A'] * self.r_com))

    @override
    def moment_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        # r2 带符号：重力力矩与 T_a 同向时 r2 < 0
        return (self.torque - u['F_cb'] * self.length + self.weight * self.r_weight
                - self.mass * self.r_weight ** 2 * u['alpha_A'])


class EndArm(LinkNode):
    """
    arm 3 - 绕转动中心 b 转动的末端连杆，末端挂有负载 M3
    """

    def __init__(self, name: str, weight: sp.Expr, payload: sp.Expr, g: sp.Expr, mass: sp.Expr,
                 r_com: sp.Expr, torque: sp.Expr, r_weight: sp.Expr, length: sp.Expr):
        """
        :param weight: 连杆重力 W3
        :param payload: 末端负载质量 M3
        :param g: 重力加速度
        :param mass: 连杆质量 m_com_3
        :param r_com: 质心到 b 的距离 r_com_b（同时作为转动惯量半径）
        :param torque: 电机力矩 T_c
        :param r_weight: 重力力臂 r1
        :param length: 连杆长度 L3（负载力臂）
        """
        super().__init__(name, mass, torque)
        self.weight = weight
        self.payload = payload
        self.g = g
        self.r_com = r_com
        self.r_weight = r_weight
        self.length = length

    @override
    def force_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        return (u['F_cb'] - self.weight - self.payload * self.g
                - self.mass * (u['a_b'] + u['alpha_b'] * self.r_com))

    @override
    def moment_balance(self, u: Dict[str, sp.Symbol]) -> sp.Expr:
        return (self.torque - self.weight * self.r_weight - self.payload * self.g * self.length
                - self.mass * self.r_com ** 2 * u['alpha_b'])
