"""
精确有理数类型
分子分母始终约分到最简，符号只保存在分子上；
提供四则运算、大小比较以及题目文本格式（整数、真分数、带分数）的输出与解析。
"""
import math
import numbers
import re
from functools import total_ordering

# 带分数、分数、整数三种文本格式
MIXED_PATTERN = re.compile(r"(-?)([0-9]+)'([0-9]+)/([0-9]+)")
FRACTION_PATTERN = re.compile(r"(-?[0-9]+)/([0-9]+)")
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


class DivisionByZero(ZeroDivisionError):
    """分母为零或除数为零"""


class MalformedNumber(ValueError):
    """文本不是整数、分数或带分数"""


@total_ordering
class Rational:
    """不可变的有理数，构造时自动约分"""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if not isinstance(numerator, numbers.Integral) or isinstance(numerator, bool):
            raise TypeError(f"分子必须是整数: {numerator!r}")
        if not isinstance(denominator, numbers.Integral) or isinstance(denominator, bool):
            raise TypeError(f"分母必须是整数: {denominator!r}")
        if denominator == 0:
            raise DivisionByZero("分母不能为零")

        # gcd(0, n) == n，所以 0/n 会变成 0/1
        gcd = math.gcd(int(numerator), int(denominator))
        num, den = int(numerator) // gcd, int(denominator) // gcd
        if den < 0:
            num, den = -num, -den
        self._numerator = num
        self._denominator = den

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # ------------------------------------------------------------------
    # 四则运算
    @staticmethod
    def _coerce(value) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return Rational(int(value))
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if other._numerator == 0:
            raise DivisionByZero("除数为零")
        return Rational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    # ------------------------------------------------------------------
    # 比较
    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return (self._numerator, self._denominator) == (other._numerator, other._denominator)

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        # 两个分母都为正，交叉相乘不需要改变不等号方向
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __hash__(self):
        return hash((self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # 文本格式
    def to_text(self) -> str:
        """
        转换为题目中使用的文本

        整数输出 "3"，真分数输出 "1/2"，假分数输出带分数 "3'1/2"。
        带分数的整数部分按截断取整，负号只出现在整数部分。
        """
        num, den = self._numerator, self._denominator
        if den == 1:
            return str(num)
        if abs(num) > den:
            whole = abs(num) // den
            remainder = abs(num) % den
            sign = '-' if num < 0 else ''
            return f"{sign}{whole}'{remainder}/{den}"
        return f"{num}/{den}"

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """解析 to_text() 输出的格式，也接受未约分的分数如 "3/2" """
        s = text.strip()

        match = MIXED_PATTERN.fullmatch(s)
        if match:
            sign, whole, numer, denom = match.groups()
            whole, numer, denom = int(whole), int(numer), int(denom)
            if denom == 0:
                raise DivisionByZero(f"分母不能为零: {text!r}")
            if not 0 < numer < denom:
                raise MalformedNumber(f"带分数的分数部分必须是真分数: {text!r}")
            total = whole * denom + numer
            return cls(-total if sign else total, denom)

        match = FRACTION_PATTERN.fullmatch(s)
        if match:
            return cls(int(match.group(1)), int(match.group(2)))

        if INTEGER_PATTERN.fullmatch(s):
            return cls(int(s))

        raise MalformedNumber(f"无法识别的数字: {text!r}")

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"
