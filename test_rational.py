import math
import unittest

from rational import DivisionByZero, MalformedNumber, Rational


class TestRationalConstruction(unittest.TestCase):
    """测试构造和约分"""

    def test_simplification(self):
        value = Rational(10, 20)
        self.assertEqual(value.numerator, 1)
        self.assertEqual(value.denominator, 2)

    def test_sign_moves_to_numerator(self):
        value = Rational(2, -4)
        self.assertEqual((value.numerator, value.denominator), (-1, 2))
        value = Rational(-3, -9)
        self.assertEqual((value.numerator, value.denominator), (1, 3))

    def test_zero(self):
        self.assertEqual((Rational(0, 5).numerator, Rational(0, 5).denominator), (0, 1))
        self.assertEqual((Rational(0, -5).numerator, Rational(0, -5).denominator), (0, 1))
        self.assertFalse(Rational(0, 7))

    def test_zero_denominator(self):
        with self.assertRaises(DivisionByZero):
            Rational(1, 0)
        # 同时也是内置的 ZeroDivisionError
        with self.assertRaises(ZeroDivisionError):
            Rational(0, 0)

    def test_non_integer_components(self):
        with self.assertRaises(TypeError):
            Rational(1.5)
        with self.assertRaises(TypeError):
            Rational(1, "2")

    def test_normalization_idempotent(self):
        for n in range(-30, 31):
            for d in list(range(-12, 0)) + list(range(1, 13)):
                value = Rational(n, d)
                self.assertGreater(value.denominator, 0)
                self.assertEqual(math.gcd(abs(value.numerator), value.denominator), 1)
                again = Rational(value.numerator, value.denominator)
                self.assertEqual((again.numerator, again.denominator),
                                 (value.numerator, value.denominator))


class TestRationalArithmetic(unittest.TestCase):
    """测试四则运算和比较"""

    def test_arithmetic_operations(self):
        a = Rational(1, 3)
        b = Rational(1, 6)
        self.assertEqual(a + b, Rational(1, 2))
        self.assertEqual(a - b, Rational(1, 6))
        self.assertEqual(a * b, Rational(1, 18))
        self.assertEqual(a / b, Rational(2))

    def test_subtraction_can_go_negative(self):
        self.assertEqual(Rational(1, 6) - Rational(1, 3), Rational(-1, 6))

    def test_integer_operands(self):
        half = Rational(1, 2)
        self.assertEqual(half + 1, Rational(3, 2))
        self.assertEqual(1 - half, Rational(1, 2))
        self.assertEqual(3 * half, Rational(3, 2))
        self.assertEqual(2 / half, Rational(4))
        self.assertEqual(Rational(4, 2), 2)

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZero):
            Rational(1, 2) / Rational(0)
        with self.assertRaises(DivisionByZero):
            Rational(1, 2) / 0

    def test_ordering(self):
        self.assertLess(Rational(1, 3), Rational(1, 2))
        self.assertLess(Rational(-1, 2), Rational(1, 3))
        self.assertFalse(Rational(1, 2) < Rational(2, 4))
        self.assertGreaterEqual(Rational(7, 2), Rational(3))
        self.assertLess(Rational(2, 3), 1)

    def test_hash_matches_equality(self):
        self.assertEqual(len({Rational(1, 2), Rational(2, 4), Rational(-3, -6)}), 1)

    def test_results_are_new_values(self):
        a = Rational(1, 2)
        b = a + Rational(1, 4)
        self.assertEqual(a, Rational(1, 2))
        self.assertEqual(b, Rational(3, 4))
        with self.assertRaises(AttributeError):
            a.numerator = 5


class TestRationalText(unittest.TestCase):
    """测试文本格式的输出与解析"""

    def test_integer_rendering(self):
        self.assertEqual(Rational(5).to_text(), "5")
        self.assertEqual(Rational(0).to_text(), "0")
        self.assertEqual(Rational(6, 3).to_text(), "2")

    def test_proper_fraction_rendering(self):
        self.assertEqual(Rational(2, 4).to_text(), "1/2")
        self.assertEqual(Rational(3, 4).to_text(), "3/4")
        self.assertEqual(Rational(-1, 3).to_text(), "-1/3")

    def test_mixed_fraction_rendering(self):
        self.assertEqual(Rational(7, 2).to_text(), "3'1/2")
        self.assertEqual(Rational(7, 3).to_text(), "2'1/3")
        self.assertEqual(str(Rational(5, 2)), "2'1/2")

    def test_negative_mixed_rendering(self):
        # 整数部分截断取整，负号只在整数部分
        self.assertEqual(Rational(-7, 2).to_text(), "-3'1/2")

    def test_parse_forms(self):
        self.assertEqual(Rational.parse("5"), Rational(5))
        self.assertEqual(Rational.parse("1/2"), Rational(1, 2))
        self.assertEqual(Rational.parse("1'1/2"), Rational(3, 2))
        self.assertEqual(Rational.parse("3/2"), Rational(3, 2))
        self.assertEqual(Rational.parse(" 2/4 "), Rational(1, 2))
        self.assertEqual(Rational.parse("-3'1/2"), Rational(-7, 2))
        self.assertEqual(Rational.parse("-1/3"), Rational(-1, 3))

    def test_parse_malformed(self):
        for text in ["", "   ", "abc", "1/2/3", "2''1/2", "1.5", "1'2", "'1/2",
                     "1'3/2", "1'0/2", "1/-2", "+1",
                     "١/٢", "١", "١'١/٢", "１２"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedNumber):
                    Rational.parse(text)

    def test_parse_zero_denominator(self):
        with self.assertRaises(DivisionByZero):
            Rational.parse("1/0")
        with self.assertRaises(DivisionByZero):
            Rational.parse("1'1/0")

    def test_format_inverse(self):
        for n in range(-40, 41):
            for d in range(1, 13):
                value = Rational(n, d)
                self.assertEqual(Rational.parse(value.to_text()), value)


if __name__ == '__main__':
    unittest.main()
