# src/dcgp/config.py
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

CATALOG = ("sum", "diff", "mul", "div", "pow", "sig", "sqrt", "sin", "log")

@dataclass
class DcgpConfig:
    # kernel names, in the order a genome indexes them
    kernels: Sequence[str] = CATALOG

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DcgpConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        kwargs = dict(data)
        if "kernels" in kwargs:
            kwargs["kernels"] = tuple(kwargs["kernels"])
        return cls(**kwargs)
