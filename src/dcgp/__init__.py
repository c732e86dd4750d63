# dcgp — dual-mode primitive kernels for Cartesian genetic programming
#
# Each kernel evaluates numerically (floats, numpy arrays, dual numbers) and
# prints a simplified symbolic form of the same operation.

from .config import CATALOG, DcgpConfig
from .dual import Dual
from .kernel import Kernel
from .pset import KERNELS, KernelSet, get_kernel
from .tree import Node

__version__ = "0.1.0"

__all__ = [
    "CATALOG", "DcgpConfig",
    "Dual",
    "Kernel", "KERNELS", "KernelSet", "get_kernel",
    "Node",
]
