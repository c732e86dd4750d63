# src/dcgp/numeric.py
import numpy as np

# Named functions go through numpy ufuncs: floats and arrays use the C loops,
# any other object falls back to numpy's object loop, which calls the method of
# the same name (x.exp(), x.log(), ...). That is the hook for dual numbers.
# Domain errors follow numpy (nan/inf + RuntimeWarning) and are left visible.

def _unwrap(out):
    # numpy scalars back to Python scalars so they mix cleanly with duals
    if isinstance(out, np.generic):
        return out.item()
    return out

def exp(x):
    return _unwrap(np.exp(x))

def log(x):
    return _unwrap(np.log(x))

def sin(x):
    return _unwrap(np.sin(x))

def sqrt(x):
    return _unwrap(np.sqrt(x))

def power(a, b):
    return _unwrap(np.power(a, b))
