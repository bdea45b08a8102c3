"""
表达式计算
按题目文本重新计算答案：先处理最内层（最右侧）的括号，
括号内的运算从左到右依次计算，结果写回原文本，直到只剩一个数。
"""
import re
from typing import List

from rational import MalformedNumber, Rational

OPERATOR_SYMBOLS = '+-×÷'
WHITESPACE_PATTERN = re.compile(r'\s+')


class MalformedExpression(ValueError):
    """括号不匹配、运算符非法或缺少操作数"""


def parse_fraction(token: str) -> Rational:
    """解析表达式中的一个数"""
    try:
        return Rational.parse(token)
    except MalformedNumber as exc:
        raise MalformedExpression(f"无法识别的数字: {token!r}") from exc


def apply_operator(op: str, left: Rational, right: Rational) -> Rational:
    if op == '+':
        return left + right
    if op == '-':
        return left - right
    if op == '×':
        return left * right
    if op == '÷':
        return left / right
    raise MalformedExpression(f"未知运算符: {op!r}")


def tokenize_chain(text: str) -> List[str]:
    """将不含括号的表达式拆成 数, 运算符, 数, ... 的交替序列"""
    tokens = []
    current = ""
    for char in text:
        # 需要数字的位置出现的 '-' 是负号
        if char in OPERATOR_SYMBOLS and not (char == '-' and not current):
            if not current:
                raise MalformedExpression(f"运算符 {char!r} 缺少左操作数: {text!r}")
            tokens.append(current)
            tokens.append(char)
            current = ""
        else:
            current += char
    if not current:
        raise MalformedExpression(f"表达式不完整: {text!r}")
    tokens.append(current)
    return tokens


def eval_flat_chain(text: str) -> Rational:
    """从左到右计算不含括号的运算链，不区分优先级"""
    tokens = tokenize_chain(text)
    result = parse_fraction(tokens[0])
    for i in range(1, len(tokens), 2):
        result = apply_operator(tokens[i], result, parse_fraction(tokens[i + 1]))
    return result


def eval_parenthesized(text: str) -> Rational:
    """逐层计算括号，每次替换最后一个 '(' 及其对应的 ')'"""
    start = text.rfind('(')
    while start != -1:
        end = text.find(')', start)
        if end == -1:
            raise MalformedExpression(f"缺少右括号: {text!r}")
        # 括号两侧只能是运算符、括号或边界
        if start > 0 and text[start - 1] not in OPERATOR_SYMBOLS + '(':
            raise MalformedExpression(f"括号前缺少运算符: {text!r}")
        if end + 1 < len(text) and text[end + 1] not in OPERATOR_SYMBOLS + ')':
            raise MalformedExpression(f"括号后缺少运算符: {text!r}")

        value = eval_flat_chain(text[start + 1:end])
        text = text[:start] + value.to_text() + text[end + 1:]
        start = text.rfind('(')

    if ')' in text:
        raise MalformedExpression(f"多余的右括号: {text!r}")
    return eval_flat_chain(text)


def evaluate(text: str) -> Rational:
    """计算完全加括号的表达式"""
    return eval_parenthesized(WHITESPACE_PATTERN.sub('', text))


def evaluate_expression(expression_text: str) -> str:
    """计算题目文本（不含题号）并返回标准格式的答案"""
    return evaluate(expression_text).to_text()
