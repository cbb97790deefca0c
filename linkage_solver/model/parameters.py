"""
三连杆机构的物理参数
"""
import math
from dataclasses import dataclass, fields, asdict, replace
from typing import Dict, Mapping


@dataclass(frozen=True)
class LinkageParameters:
    """
    三连杆机构的固定物理参数（只读）。

    命名沿用力学推导中的记号：W 为连杆重力，m_com 为连杆质量，r_com 为质心到转动中心的距离，
    T 为电机力矩，L 为连杆长度。arm 3 为末端连杆（带负载 M3），arm 1 为基座连杆。
    """
    # arm 3（末端，转动中心 b）
    W3: float
    M3: float
    r_com_b: float
    T_c: float
    r1: float
    L3: float
    m_com_3: float
    # arm 2（中间，转动中心 A）
    W2: float
    m_com_2: float
    r_com_A: float
    T_a: float
    L2: float
    r2: float
    # arm 1（基座，转动中心 K）
    W1: float
    m_com_1: float
    r_com_k: float
    T_k: float
    r3: float
    L1: float
    # 转动中心之间的距离
    r_A_K: float
    r_b_A: float
    g: float = 9.81

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            # bool 是 int 的子类，需要单独排除
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Parameter '{field.name}' must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Parameter '{field.name}' must be finite, got {value!r}")

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(field.name for field in fields(cls))

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> 'LinkageParameters':
        """
        从字典构建参数记录

        :param data: 参数名到数值的映射，g 可省略（默认 9.81）
        :return: LinkageParameters
        """
        unknown = set(data) - set(cls.field_names())
        if unknown:
            raise ValueError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")
        try:
            return cls(**data)
        except TypeError as e:
            # 缺少必需字段
            raise ValueError(f"Incomplete parameter set: {e}") from e

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def with_overrides(self, **changes: float) -> 'LinkageParameters':
        """
        返回修改了部分字段的新参数记录，原记录不变

        :param changes: 需要覆盖的字段
        :return: 新的 LinkageParameters
        """
        unknown = set(changes) - set(self.field_names())
        if unknown:
            raise ValueError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)


# 固定工况
DEFAULT_PARAMETERS = LinkageParameters(
    W3=12.093,
    M3=5,
    r_com_b=0.362,
    T_c=266,
    r1=0.138,
    L3=0.418,
    m_com_3=6.233,
    W2=29.688,
    m_com_2=3.0263,
    r_com_A=0.126847,
    T_a=372.4,
    L2=0.377,
    r2=-0.126847,
    W1=21.915,
    m_com_1=2.234,
    r_com_k=0.3605,
    T_k=438.9,
    r3=0.3605,
    L1=0.420,
    r_A_K=0.420,
    r_b_A=0.377,
    g=9.81,
)
