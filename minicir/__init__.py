"""Linear IR, scoped symbol tables and small helpers for a C-like language compiler."""

__version__ = "1.0.1"

__all__ = [
    "bitmap",
    "common",
    "core",
    "function",
    "indexset",
    "instruction",
    "instructions",
    "irtypes",
    "module",
    "scopes",
    "variables",
]