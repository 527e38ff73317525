# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""tensorstep.optim — Optimizers."""
from __future__ import annotations

from .optimizer import Optimizer, SGD, Adam, SGDOptimizer, AdamOptimizer

__all__ = ['Optimizer', 'SGD', 'Adam', 'SGDOptimizer', 'AdamOptimizer']
