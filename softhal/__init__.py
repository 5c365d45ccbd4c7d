"""Software-emulated wide-integer arithmetic with vector and matrix kernels.

Submodules: wideint (128/256-bit scalar arithmetic), vector (wide-integer
vector kernels) and matrix (integer and float matrix products).
"""

__version__ = "1.0.0"
__all__ = ["wideint", "vector", "matrix"]