# src/dcgp/pset.py
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Iterator, Sequence, Tuple, Union

from . import functions as F
from .config import CATALOG, DcgpConfig
from .kernel import Kernel

logger = logging.getLogger(__name__)

KERNELS = MappingProxyType({
    "sum":  Kernel("sum", F.eval_sum, F.print_sum),
    "diff": Kernel("diff", F.eval_diff, F.print_diff),
    "mul":  Kernel("mul", F.eval_mul, F.print_mul),
    "div":  Kernel("div", F.eval_div, F.print_div),
    "pow":  Kernel("pow", F.eval_pow, F.print_pow),
    "sig":  Kernel("sig", F.eval_sig, F.print_sig),
    "sqrt": Kernel("sqrt", F.eval_sqrt, F.print_sqrt),
    "sin":  Kernel("sin", F.eval_sin, F.print_sin),
    "log":  Kernel("log", F.eval_log, F.print_log),
})


def get_kernel(name: str) -> Kernel:
    try:
        return KERNELS[name]
    except KeyError:
        raise ValueError(f"Unknown kernel {name!r}; available: {', '.join(KERNELS)}") from None


class KernelSet:
    """Ordered, immutable selection of kernels. Genomes refer to kernels by index."""

    def __init__(self, names: Sequence[str] = CATALOG):
        if isinstance(names, str):
            names = [names]
        kernels = tuple(get_kernel(n) for n in names)
        if not kernels:
            raise ValueError("A kernel set needs at least one kernel")
        self._kernels: Tuple[Kernel, ...] = kernels
        logger.debug("KernelSet built with %s", self.names)

    @classmethod
    def from_config(cls, config: DcgpConfig) -> "KernelSet":
        return cls(config.kernels)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(k.name for k in self._kernels)

    def index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise ValueError(f"Kernel {name!r} is not in this set {list(self.names)}") from None

    def __len__(self) -> int:
        return len(self._kernels)

    def __iter__(self) -> Iterator[Kernel]:
        return iter(self._kernels)

    def __getitem__(self, key: Union[int, str]) -> Kernel:
        if isinstance(key, str):
            return self._kernels[self.index(key)]
        return self._kernels[key]

    def __repr__(self) -> str:
        return f"KernelSet({list(self.names)})"
