# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Tensorstep — a minimal tensor and optimizer layer on top of NumPy.

Usage::

    import tensorstep as ts
    from tensorstep.optim import SGD, Adam

    t = ts.zeros(2, 3).reshape(3, 2)
    opt = Adam(0.01, 0.9, 0.999, 1e-8, params)
    opt.update(params, grads)
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

# ── Core tensor class & factory functions ──
from .tensor import Tensor, tensor, zeros, from_shape

# ── Dtype constants ──
from .dtype import dtype, float16, float32, float64, half, double

# ── Errors ──
from .errors import TensorstepError, ShapeMismatch, SizeMismatch, LengthMismatch

# ── Sub-packages ──
from . import optim
from .optim import SGD, Adam, SGDOptimizer, AdamOptimizer

__all__ = [
    "__version__",
    "__author__",

    # Tensor
    'Tensor', 'tensor', 'zeros', 'from_shape',

    # Dtypes
    'dtype', 'float16', 'float32', 'float64', 'half', 'double',

    # Errors
    'TensorstepError', 'ShapeMismatch', 'SizeMismatch', 'LengthMismatch',

    # Optimizers
    'optim', 'SGD', 'Adam', 'SGDOptimizer', 'AdamOptimizer',
]
