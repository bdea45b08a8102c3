"""
小学四则运算题目生成器
生成题目模式：-n 题目数量 -r 数值范围，输出 Exercises.txt 和 Answers.txt
批改模式：-e 题目文件 -a 答案文件，输出 Grade.txt
"""
import argparse
import os
import random
import re
import sys
from typing import List, Optional, Tuple

from evaluator import MalformedExpression, evaluate_expression
from generator import generate_problem
from rational import DivisionByZero, MalformedNumber

EXERCISE_FILE = 'Exercises.txt'
ANSWER_FILE = 'Answers.txt'
GRADE_FILE = 'Grade.txt'

INDEX_PREFIX_PATTERN = re.compile(r'^\d+\.\s*')
MAX_TRIES_PER_PROBLEM = 50


def produce_problems(count: int, range_limit: int,
                     rng: Optional[random.Random] = None) -> List[Tuple[str, str]]:
    """生成指定数量的不重复题目，返回 (题目, 答案) 列表"""
    if rng is None:
        rng = random.Random()
    problem_list = []
    seen_texts = set()
    tries = 0
    max_tries = count * MAX_TRIES_PER_PROBLEM

    while len(problem_list) < count and tries < max_tries:
        tries += 1
        problem_text, answer_text = generate_problem(range_limit, rng)
        key = problem_text.rstrip('= ')
        if key not in seen_texts:
            seen_texts.add(key)
            problem_list.append((problem_text, answer_text))

    if len(problem_list) < count:
        print(f"警告：只生成了 {len(problem_list)} 道不重复的题目")
    return problem_list


def write_problems_batch(quiz_set: List[Tuple[str, str]],
                         exercise_file: str = EXERCISE_FILE,
                         answer_file: str = ANSWER_FILE):
    """批量写入题目和答案"""
    exercise_lines = []
    answer_lines = []
    for idx, (problem_text, answer_text) in enumerate(quiz_set, start=1):
        exercise_lines.append(f"{idx}. {problem_text}\n")
        answer_lines.append(f"{idx}. {answer_text}\n")

    with open(exercise_file, 'w', encoding='utf-8') as exf:
        exf.writelines(exercise_lines)
    with open(answer_file, 'w', encoding='utf-8') as anf:
        anf.writelines(answer_lines)


def strip_index(line: str) -> str:
    """去掉行首的题号 "12. " """
    return INDEX_PREFIX_PATTERN.sub('', line.strip(), count=1)


def check_answers_batch(exercises: List[str], answers: List[str]) -> Tuple[List[int], List[int]]:
    """批量检查答案，返回 (正确题号, 错误题号)"""
    correct_ids = []
    wrong_ids = []

    for idx, ex_line in enumerate(exercises, start=1):
        expr_raw = strip_index(ex_line)
        if expr_raw.endswith('='):
            expr_raw = expr_raw[:-1].strip()

        if idx > len(answers):
            print(f"题目 {idx} 错误: 缺少答案")
            wrong_ids.append(idx)
            continue
        ans_part = strip_index(answers[idx - 1])

        try:
            expected = evaluate_expression(expr_raw)
        except (MalformedExpression, MalformedNumber, DivisionByZero) as e:
            print(f"题目 {idx} 错误: {e}")
            wrong_ids.append(idx)
            continue

        if expected == ans_part:
            correct_ids.append(idx)
        else:
            wrong_ids.append(idx)

    return correct_ids, wrong_ids


def read_files_batch(exercise_file: str, answer_file: str) -> Tuple[List[str], List[str]]:
    """批量读取文件，跳过空行"""
    # 检查文件是否存在
    if not os.path.exists(exercise_file):
        print(f"错误：题目文件不存在 '{exercise_file}'")
        sys.exit(1)
    if not os.path.exists(answer_file):
        print(f"错误：答案文件不存在 '{answer_file}'")
        sys.exit(1)

    with open(exercise_file, 'r', encoding='utf-8') as ef:
        exercises = [line.strip() for line in ef if line.strip()]
    with open(answer_file, 'r', encoding='utf-8') as af:
        answers = [line.strip() for line in af if line.strip()]
    return exercises, answers


def write_grade_batch(correct_ids: List[int], wrong_ids: List[int],
                      grade_file: str = GRADE_FILE):
    """批量写入对错"""
    with open(grade_file, 'w', encoding='utf-8') as gf:
        gf.write(f"Correct: {len(correct_ids)} ({', '.join(map(str, correct_ids))})\n")
        gf.write(f"Wrong: {len(wrong_ids)} ({', '.join(map(str, wrong_ids))})\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="小学算术题生成器")
    parser.add_argument('-n', type=int, help='题目数量')
    parser.add_argument('-r', type=int, help='数值范围（不包括该数）')
    parser.add_argument('-e', type=str, help='题目文件')
    parser.add_argument('-a', type=str, help='答案文件')
    parser.add_argument('--seed', type=int, help='随机种子（用于复现题目）')
    return parser


def run_app(argv: Optional[List[str]] = None):
    """主应用程序入口"""
    parser = build_parser()
    opts = parser.parse_args(argv)

    if opts.e and opts.a:
        exercises, answers = read_files_batch(opts.e, opts.a)
        correct_ids, wrong_ids = check_answers_batch(exercises, answers)
        write_grade_batch(correct_ids, wrong_ids)
        return

    if opts.n is None or opts.r is None:
        parser.print_help()
        print("\n错误：必须同时指定 -n 和 -r 参数")
        return

    if opts.r < 2:
        print("错误：-r 必须为不小于2的整数")
        return
    if opts.n < 1:
        print("错误：-n 必须为正整数")
        return

    quiz_set = produce_problems(opts.n, opts.r, random.Random(opts.seed))
    write_problems_batch(quiz_set)


if __name__ == '__main__':
    run_app()
