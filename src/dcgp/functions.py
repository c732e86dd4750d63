# src/dcgp/functions.py
from . import numeric

# ---------- binary ----------

def eval_sum(x, y):
    return x + y

def print_sum(s1: str, s2: str) -> str:
    if s1 == s2:
        return f"(2*{s1})"
    if s1 == "0":
        return s2
    if s2 == "0":
        return s1
    return f"({s1}+{s2})"

def eval_diff(x, y):
    return x - y

def print_diff(s1: str, s2: str) -> str:
    if s1 == s2:
        return "0"
    if s1 == "0":
        return f"(-{s2})"
    if s2 == "0":
        return s1
    return f"({s1}-{s2})"

def eval_mul(x, y):
    return x * y

def print_mul(s1: str, s2: str) -> str:
    if s1 == "0" or s2 == "0":
        return "0"
    if s1 == s2:
        return f"{s1}^2"
    if s1 == "1":
        return s2
    if s2 == "1":
        return s1
    return f"({s1}*{s2})"

def eval_div(x, y):
    return x / y

def print_div(s1: str, s2: str) -> str:
    if s1 == "0" and s2 != "0":
        return "0"
    if s1 == s2:
        # "0" / "0" never gets here
        return "1"
    if s2 == "1":
        return s1
    return f"({s1}/{s2})"

def eval_pow(x, y):
    return numeric.power(abs(x), y)

def print_pow(s1: str, s2: str) -> str:
    if s1 == "0" and s2 != "0":
        return "0"
    if s1 == "1":
        return "1"
    if s2 == "0" and s1 != "0":
        return "1"
    if s2 == "1":
        return s1
    return f"abs({s1})^({s2})"

def eval_sig(t, beta):
    """Sigmoid 1 / (1 + exp(-beta * t)); the second operand is the steepness."""
    return 1 / (1 + numeric.exp(-beta * t))

def print_sig(s1: str, s2: str) -> str:
    if s1 == "0" or s2 == "0":
        return "0.5"
    return f"sig({s1},{s2})"

def eval_sqrt(a, b):
    """Square root of |a + b|."""
    return numeric.sqrt(abs(a + b))

def print_sqrt(s1: str, s2: str) -> str:
    if s2 == "0" and s1 != "0":
        return f"sqrt({s1})"
    if s1 == "0" and s2 != "0":
        return f"sqrt({s2})"
    if s1 == "0" and s2 == "0":
        return "0"
    return f"sqrt({s1} + {s2})"

# ---------- unary (second operand ignored) ----------

def eval_sin(a, b):
    return numeric.sin(a)

def print_sin(s1: str, s2: str) -> str:
    return f"sin({s1})"

def eval_log(a, b):
    return numeric.log(a)

def print_log(s1: str, s2: str) -> str:
    if s1 == "1":
        return "0"
    return f"log({s1})"
