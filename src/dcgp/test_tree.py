import unittest

import numpy as np

from dcgp import Dual, Node
from dcgp.tree import apply, const, var


class TestTree(unittest.TestCase):
    def setUp(self):
        # (x + x) * c1
        self.tree = apply("mul", apply("sum", var("x"), var("x")), const("c1"))

    def test_symbolic(self):
        self.assertEqual(self.tree.symbolic(), "((2*x)*c1)")
        self.assertEqual(str(self.tree), "((2*x)*c1)")

    def test_symbolic_with_constant_values(self):
        self.assertEqual(self.tree.symbolic({"c1": 1.0}), "(2*x)")
        self.assertEqual(self.tree.symbolic({"c1": 0.0}), "0")
        self.assertEqual(self.tree.symbolic({"c1": 2.5}), "((2*x)*2.5)")

    def test_eval(self):
        self.assertEqual(self.tree.eval({"x": 3.0}, {"c1": 2.0}), 12.0)

    def test_self_cancellation(self):
        tree = apply("diff", apply("sin", var("x"), var("y")), apply("sin", var("x"), const("c")))
        self.assertEqual(tree.symbolic(), "0")
        self.assertEqual(tree.eval({"x": 0.4, "y": 9.0}, {"c": 1.0}), 0.0)

    def test_nested_printing(self):
        tree = apply("pow", apply("log", var("x"), var("x")), apply("sig", var("t"), const("b")))
        self.assertEqual(tree.symbolic(), "abs(log(x))^(sig(t,b))")

    def test_eval_vectorised(self):
        tree = apply("sqrt", var("x"), var("y"))
        out = tree.eval({"x": np.array([1.0, -5.0]), "y": np.array([3.0, 1.0])})
        np.testing.assert_allclose(out, [2.0, 2.0])

    def test_eval_dual(self):
        tree = apply("pow", var("x"), const("c"))
        out = tree.eval({"x": Dual.variable("x", 3.0)}, {"c": 2.0})
        self.assertEqual(out.real, 9.0)
        self.assertEqual(out.derivative("x"), 6.0)

    def test_shape(self):
        self.assertEqual(self.tree.arity(), 2)
        self.assertEqual(var("x").arity(), 0)
        self.assertEqual(self.tree.symbol_count(), 5)
        self.assertEqual(self.tree.depth(), 3)

    def test_unknown_operator(self):
        with self.assertRaises(ValueError):
            Node("unknown_op", [var("x"), var("y")]).symbolic()

    def test_missing_constant_value(self):
        with self.assertRaisesRegex(ValueError, "c1"):
            self.tree.eval({"x": 3.0})
        with self.assertRaisesRegex(ValueError, "c1"):
            self.tree.eval({"x": 3.0}, {"c2": 1.0})

    def test_wrong_child_count(self):
        with self.assertRaises(ValueError):
            Node("sin", [var("x")]).eval({"x": 1.0})


if __name__ == '__main__':
    unittest.main()
