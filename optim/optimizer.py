# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Tensorstep — Tensor & Optimizer Core                                ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Optimizer base class, SGD and Adam.

Optimizers never own the parameters: the caller passes the parameter and
gradient buffers on every :meth:`Optimizer.update` call and the parameter
buffer is mutated in place.  A buffer is either a 1-D NumPy array (updated
in place, arithmetic in its own float dtype) or a mutable sequence of
Python floats such as a ``list`` (arithmetic in float64, elements
reassigned one by one).
"""
from __future__ import annotations

import logging
import numpy as np
from typing import MutableSequence, Sequence, Union

from ..errors import LengthMismatch

logger = logging.getLogger(__name__)

ParamBuffer = Union[np.ndarray, MutableSequence[float]]

_MOMENT_INITS = ('params', 'zeros')


def _working_dtype(buf) -> np.dtype:
    if isinstance(buf, np.ndarray) and np.issubdtype(buf.dtype, np.floating):
        return buf.dtype
    return np.dtype(np.float64)


def _flat(buf, dt: np.dtype) -> np.ndarray:
    return np.asarray(buf, dtype=dt).reshape(-1)


def _apply_step(params: ParamBuffer, step: np.ndarray) -> None:
    """``params -= step`` without rebinding the caller's buffer."""
    if isinstance(params, np.ndarray):
        params -= step.reshape(params.shape)
    else:
        for i, s in enumerate(step.tolist()):
            params[i] -= s


class Optimizer:
    """Base class for all optimizers.

    Hyperparameters live in ``defaults`` and are fixed at construction;
    ``lr`` is also exposed as ``learning_rate``.
    """

    def __init__(self, defaults: dict):
        lr = defaults.get('lr', 0.0)
        if not 0.0 <= lr:
            raise ValueError(f"Invalid learning rate: {lr}")
        self.defaults = defaults

    @property
    def lr(self) -> float:
        return self.defaults['lr']

    learning_rate = lr

    @staticmethod
    def _check_lengths(**lengths: int) -> None:
        if len(set(lengths.values())) > 1:
            raise LengthMismatch(**lengths)

    def update(self, params: ParamBuffer, grads: Sequence[float]) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        opts = ', '.join(f"{k}={v}" for k, v in self.defaults.items())
        return f"{type(self).__name__}({opts})"


class SGD(Optimizer):
    """Plain stochastic gradient descent: ``p -= lr * g``. Stateless."""

    def __init__(self, learning_rate: float = 1e-2):
        super().__init__(dict(lr=float(learning_rate)))
        logger.debug("SGD created with lr=%g", self.lr)

    def update(self, params: ParamBuffer, grads: Sequence[float]) -> None:
        dt = _working_dtype(params)
        g = _flat(grads, dt)
        self._check_lengths(params=np.size(params), grads=g.size)
        logger.debug("SGD update over %d params, lr=%g", g.size, self.lr)
        _apply_step(params, self.lr * g)


class Adam(Optimizer):
    """Adam (adaptive moment estimation) optimizer.

    For each index ``i``, with ``t = iteration``::

        m[i] = beta1 * m[i] + (1 - beta1) * g[i]
        v[i] = beta2 * v[i] + (1 - beta2) * g[i] ** 2
        m_hat = m[i] / (1 - beta1 ** t)
        v_hat = v[i] / (1 - beta2 ** t)
        p[i] -= lr * m_hat / (sqrt(v_hat) + epsilon)

    ``iteration`` starts at 1 and advances once per :meth:`update`.

    The moment buffers are sized from ``params`` at construction and never
    resized.  With ``moment_init='params'`` (the default) both start as a
    copy of the initial parameter values, which is what the reference
    numeric results were produced with; ``moment_init='zeros'`` gives the
    textbook zero start.
    """

    def __init__(
        self,
        learning_rate: float = 1e-3,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
        params: Sequence[float] | np.ndarray | None = None,
        *,
        moment_init: str = 'params',
    ):
        if params is None:
            raise ValueError(
                "Adam needs the initial parameter vector to size its moment state")
        if not 0.0 <= beta1 < 1.0:
            raise ValueError(f"Invalid beta1: {beta1}")
        if not 0.0 <= beta2 < 1.0:
            raise ValueError(f"Invalid beta2: {beta2}")
        if not 0.0 <= epsilon:
            raise ValueError(f"Invalid epsilon: {epsilon}")
        if moment_init not in _MOMENT_INITS:
            raise ValueError(
                f"moment_init must be one of {_MOMENT_INITS}, got {moment_init!r}")
        super().__init__(dict(lr=float(learning_rate), beta1=float(beta1),
                              beta2=float(beta2), epsilon=float(epsilon)))

        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.epsilon = float(epsilon)
        self.iteration = 1

        dt = _working_dtype(params)
        init = _flat(params, dt)
        if moment_init == 'zeros':
            init = np.zeros_like(init)
        self.m: np.ndarray = init.copy()
        self.v: np.ndarray = init.copy()
        logger.debug("Adam created for %d params (lr=%g, betas=(%g, %g), "
                     "eps=%g, moment_init=%s)", self.m.size, self.lr,
                     self.beta1, self.beta2, self.epsilon, moment_init)

    def update(self, params: ParamBuffer, grads: Sequence[float]) -> None:
        m, v = self.m, self.v
        g = _flat(grads, m.dtype)
        self._check_lengths(params=np.size(params), grads=g.size,
                            m=m.size, v=v.size)

        beta1, beta2 = self.beta1, self.beta2
        t = self.iteration
        logger.debug("Adam update, iteration=%d", t)

        # moments are committed only once params accepted the step
        new_m = beta1 * m + (1.0 - beta1) * g
        new_v = beta2 * v + (1.0 - beta2) * (g * g)

        bc1 = 1.0 - beta1 ** t
        bc2 = 1.0 - beta2 ** t
        m_hat = new_m / bc1
        v_hat = new_v / bc2
        _apply_step(params, self.lr * m_hat / (np.sqrt(v_hat) + self.epsilon))

        m[...] = new_m
        v[...] = new_v

        self.iteration += 1


SGDOptimizer = SGD
AdamOptimizer = Adam
