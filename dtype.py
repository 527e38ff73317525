# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Floating-point data types for tensor buffers."""
from __future__ import annotations

import enum
import numpy as np


class dtype(enum.Enum):
    """Float data types a tensor buffer may hold."""
    float16 = "float16"
    float32 = "float32"
    float64 = "float64"

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        return np.dtype(self.value)

    @staticmethod
    def from_numpy(np_dtype: np.dtype) -> 'dtype':
        """Convert numpy dtype to tensorstep dtype (float32 if unknown)."""
        _map = {
            np.dtype(np.float16): dtype.float16,
            np.dtype(np.float32): dtype.float32,
            np.dtype(np.float64): dtype.float64,
        }
        return _map.get(np.dtype(np_dtype), dtype.float32)

    def __repr__(self) -> str:
        return f"tensorstep.{self.name}"


float16 = dtype.float16
float32 = dtype.float32
float64 = dtype.float64
half = dtype.float16
double = dtype.float64
