"""
四则运算题目生成器
递归生成完全加括号的表达式，同时计算精确值和题目文本。
约束：减法不产生负数，除法结果必须是真分数（0 <= 结果 < 1）。
"""
import random
from typing import Optional, Tuple

from rational import Rational

MAX_OPERATORS = 3            # 每道题最多3个运算符
LEAF_PROBABILITY = 0.3       # 提前生成叶子节点的概率
MAX_DIVISION_RETRIES = 20    # 除法被拒绝后的最大重试次数

ADD, SUB, MUL, DIV = '+', '-', '×', '÷'
OPERATORS = (ADD, SUB, MUL, DIV)
FALLBACK_OPERATORS = (ADD, SUB, MUL)


class Expression:
    """生成过程中的表达式节点：精确值和对应的文本"""

    __slots__ = ("value", "text")

    def __init__(self, value: Rational, text: str):
        self.value = value
        self.text = text

    @classmethod
    def leaf(cls, value: Rational) -> "Expression":
        return cls(value, value.to_text())

    def __repr__(self):
        return f"Expression({self.value!r}, {self.text!r})"


class ExpressionGenerator:
    """
    随机表达式生成器

    Args:
        max_value: 数值范围，叶子节点的数值都小于它，至少为2
        rng: random.Random 实例，不传则使用系统随机种子
        max_operators: 运算符数量上限
        leaf_probability: 非强制时提前结束递归的概率
        max_retries: 除法被拒绝时的重试次数，用完后改用非除法运算符
    """

    def __init__(self, max_value: int, rng: Optional[random.Random] = None,
                 max_operators: int = MAX_OPERATORS,
                 leaf_probability: float = LEAF_PROBABILITY,
                 max_retries: int = MAX_DIVISION_RETRIES):
        if isinstance(max_value, bool) or not isinstance(max_value, int):
            raise TypeError("数值范围必须是整数")
        if max_value < 2:
            raise ValueError("数值范围至少为2")
        if max_operators < 1:
            raise ValueError("运算符数量上限至少为1")
        if max_retries < 1:
            raise ValueError("重试次数至少为1")
        self.max_value = max_value
        self.rng = rng if rng is not None else random.Random()
        self.max_operators = max_operators
        self.leaf_probability = leaf_probability
        self.max_retries = max_retries

    def make_leaf(self) -> Expression:
        """生成自然数或真分数叶子"""
        if self.rng.choice([True, False]):
            return Expression.leaf(Rational(self.rng.randint(1, self.max_value - 1)))
        numer = self.rng.randint(1, self.max_value - 1)
        denom = self.rng.randint(numer + 1, self.max_value)
        return Expression.leaf(Rational(numer, denom))

    def generate(self, remaining_operators: Optional[int] = None,
                 force_operator: bool = False) -> Expression:
        """递归生成表达式，运算符个数不超过 remaining_operators"""
        if remaining_operators is None:
            remaining_operators = self.max_operators
        if remaining_operators <= 0 or (
                not force_operator and self.rng.random() < self.leaf_probability):
            return self.make_leaf()

        for _ in range(self.max_retries):
            # 当前节点占用一个运算符，剩余的分给左右子树
            left_ops = self.rng.randint(0, remaining_operators - 1)
            left = self.generate(left_ops)
            right = self.generate(remaining_operators - 1 - left_ops)
            expr = combine(self.rng.choice(OPERATORS), left, right)
            if expr is not None:
                return expr

        # 除法一直不合法，退化为加、减、乘
        return combine(self.rng.choice(FALLBACK_OPERATORS), left, right)


def combine(op: str, left: Expression, right: Expression) -> Optional[Expression]:
    """
    用运算符组合两个子表达式

    减法按数值大小排列操作数；除法在除数为零或结果不小于1时返回 None。
    """
    if op == ADD:
        value = left.value + right.value
    elif op == SUB:
        if left.value < right.value:
            return subtract(right, left)
        return subtract(left, right)
    elif op == MUL:
        value = left.value * right.value
    elif op == DIV:
        if right.value.numerator == 0:
            return None
        value = left.value / right.value
        if not value < 1:
            return None
    else:
        raise ValueError(f"未知运算符: {op!r}")
    return Expression(value, f"({left.text} {op} {right.text})")


def subtract(larger: Expression, smaller: Expression) -> Expression:
    return Expression(larger.value - smaller.value, f"({larger.text} {SUB} {smaller.text})")


def generate_problem(range_limit: int, rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """生成一道题目，返回 (题目文本, 答案文本)；题目文本以 "= " 结尾"""
    expr = ExpressionGenerator(range_limit, rng).generate(force_operator=True)
    return f"{expr.text} = ", expr.value.to_text()
