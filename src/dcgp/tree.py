# src/dcgp/tree.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional
from .pset import KERNELS, get_kernel

@dataclass
class Node:
    op: str                       # key in KERNELS or "var" or "const"
    children: List["Node"] = None
    value: str | None = None      # variable name or constant symbol

    def arity(self) -> int:
        if self.op in ("var", "const"):
            return 0
        get_kernel(self.op)
        return 2                  # every kernel takes two operands, unary ones ignore the second

    def symbol_count(self) -> int:
        if self.op in ("var", "const"):
            return 1
        return 1 + sum(c.symbol_count() for c in self.children or [])

    def depth(self) -> int:
        if not self.children:
            return 1
        return 1 + max(c.depth() for c in self.children)

    def _operands(self) -> List["Node"]:
        children = self.children or []
        if len(children) != self.arity():
            raise ValueError(f"{self.op!r} expects {self.arity()} children, got {len(children)}")
        return children

    def eval(self, X: Mapping[str, Any], consts: Optional[Mapping[str, Any]] = None) -> Any:
        """Evaluate bottom-up. Values may be floats, numpy arrays or duals."""
        if self.op == "var":
            return X[self.value]
        if self.op == "const":
            if consts is None or self.value not in consts:
                raise ValueError(f"No value for constant {self.value!r}")
            return consts[self.value]
        a, b = (ch.eval(X, consts) for ch in self._operands())
        return KERNELS[self.op](a, b)

    def symbolic(self, consts: Optional[Mapping[str, float]] = None) -> str:
        """Simplified expression string; constants print as symbols unless values are given."""
        if self.op == "var":
            return self.value
        if self.op == "const":
            if consts is not None and self.value in consts:
                return f"{float(consts[self.value]):g}"
            return self.value
        s1, s2 = (ch.symbolic(consts) for ch in self._operands())
        return KERNELS[self.op].symbolic(s1, s2)

    def __str__(self) -> str:
        return self.symbolic()


def var(name: str) -> Node:
    return Node("var", value=name)

def const(name: str) -> Node:
    return Node("const", value=name)

def apply(op: str, left: Node, right: Node) -> Node:
    return Node(op, [left, right])
