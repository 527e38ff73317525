# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exceptions raised on contract violations in tensors and optimizers.

All of them derive from :class:`ValueError`: a mismatched shape or buffer
length is a bad argument, not a transient fault, so nothing here is ever
retried or recovered from internally.
"""
from __future__ import annotations


class TensorstepError(ValueError):
    """Base class for tensorstep errors."""


class ShapeMismatch(TensorstepError):
    """Reshape requested to a shape holding a different number of elements."""

    def __init__(self, size: int, new_size: int):
        self.size = size
        self.new_size = new_size
        super().__init__(
            f"Cannot reshape tensor of size {size} to size {new_size}")


class SizeMismatch(TensorstepError):
    """Element-wise op on two tensors with different element counts."""

    def __init__(self, op: str, left: int, right: int):
        self.op = op
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot {op} tensors of different sizes ({left} and {right})")


class LengthMismatch(TensorstepError):
    """Optimizer buffers (params, grads, moment state) disagree in length."""

    def __init__(self, **lengths: int):
        self.lengths = lengths
        detail = ', '.join(f"{k}={v}" for k, v in lengths.items())
        super().__init__(f"Buffer lengths do not match: {detail}")
