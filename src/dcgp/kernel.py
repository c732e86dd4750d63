# src/dcgp/kernel.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable

@dataclass(frozen=True)
class Kernel:
    """A named binary-arity primitive: numeric evaluator plus symbolic printer."""
    name: str
    function: Callable[[Any, Any], Any]
    printer: Callable[[str, str], str]

    def __call__(self, x, y):
        return self.function(x, y)

    def symbolic(self, s1: str, s2: str) -> str:
        return self.printer(s1, s2)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name
