# src/dcgp/dual.py — first-order forward-mode dual numbers
from __future__ import annotations
from typing import Dict, Mapping, Optional
import math


class Dual:
    """
    Value plus partial derivatives keyed by variable name.

    Implements the arithmetic the kernels need (+ - * / ** abs) and the methods
    numpy's object loop calls for np.exp/np.log/np.sin/np.sqrt. Instances are
    never mutated; every operation returns a new Dual.
    """

    __slots__ = ("real", "dual")

    def __init__(self, real, dual: Optional[Mapping[str, float]] = None):
        self.real = real.real if isinstance(real, Dual) else float(real)
        self.dual: Dict[str, float] = {} if dual is None else dict(dual)

    @classmethod
    def variable(cls, name: str, value) -> "Dual":
        return cls(value, {name: 1.0})

    def derivative(self, name: str) -> float:
        return self.dual.get(name, 0.0)

    def __repr__(self):
        return f"Dual({self.real!r}, {self.dual!r})"

    def _scaled(self, real, factor) -> "Dual":
        # chain rule: d f(u) = f'(u) du
        return Dual(real, {k: factor * v for k, v in self.dual.items()})

    # ----- comparisons
    def __eq__(self, other):
        if isinstance(other, Dual):
            return self.real == other.real and self.dual == other.dual
        return NotImplemented

    __hash__ = None

    # ----- unary
    def __neg__(self):
        return self._scaled(-self.real, -1.0)

    def __pos__(self):
        return self

    def __abs__(self):
        if self.real < 0:
            return -self
        return self

    # ----- addition / subtraction
    def __add__(self, other):
        if isinstance(other, Dual):
            dual = self.dual.copy()
            for k, v in other.dual.items():
                dual[k] = dual.get(k, 0.0) + v
            return Dual(self.real + other.real, dual)
        return Dual(self.real + other, self.dual)
    __radd__ = __add__

    def __sub__(self, other):
        return self + (-other)

    def __rsub__(self, other):
        return (-self) + other

    # ----- multiplication / division
    def __mul__(self, other):
        if isinstance(other, Dual):
            keys = set(self.dual) | set(other.dual)
            dual = {k: self.real * other.derivative(k) + other.real * self.derivative(k) for k in keys}
            return Dual(self.real * other.real, dual)
        return self._scaled(self.real * other, other)
    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Dual):
            a, b = self.real, other.real
            keys = set(self.dual) | set(other.dual)
            dual = {k: (b * self.derivative(k) - a * other.derivative(k)) / (b * b) for k in keys}
            return Dual(a / b, dual)
        return self._scaled(self.real / other, 1.0 / other)

    def __rtruediv__(self, other):
        b = self.real
        return self._scaled(other / b, -other / (b * b))

    # ----- power
    def _pow_partial(self, p, real, dx, dp):
        # d(u^v) = v u^(v-1) du + u^v ln(u) dv, dropping terms that vanish
        d = 0.0
        if dx and p != 0:
            d += p * self.real ** (p - 1) * dx
        if dp and not (self.real == 0 and p > 0):
            d += real * math.log(self.real) * dp
        return d

    def __pow__(self, p):
        if isinstance(p, Dual):
            real = self.real ** p.real
            keys = set(self.dual) | set(p.dual)
            return Dual(real, {k: self._pow_partial(p.real, real, self.derivative(k), p.derivative(k))
                               for k in keys})
        real = self.real ** p
        return Dual(real, {k: self._pow_partial(p, real, v, 0.0) for k, v in self.dual.items()})

    def __rpow__(self, base):
        real = base ** self.real
        if base == 0 and self.real > 0:
            return Dual(real, {k: 0.0 for k in self.dual})
        return self._scaled(real, real * math.log(base))

    # ----- named functions (picked up by numpy's object loop)
    def exp(self):
        real = math.exp(self.real)
        return self._scaled(real, real)

    def log(self):
        return self._scaled(math.log(self.real), 1.0 / self.real)

    def sin(self):
        return self._scaled(math.sin(self.real), math.cos(self.real))

    def cos(self):
        return self._scaled(math.cos(self.real), -math.sin(self.real))

    def sqrt(self):
        # at 0 only vanishing partials are defined; the others raise ZeroDivisionError
        real = math.sqrt(self.real)
        return Dual(real, {k: 0.5 * v / real if v else 0.0 for k, v in self.dual.items()})
