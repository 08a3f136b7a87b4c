# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from scipy.special import gammaln, kve

import MaternPy._src.math.numpy as np

# K_nu(z) overflows float64 near the origin. Below this order that only
# happens within about 1e-11 of the limiting correlation of one.
_UNIFORM_SMOOTHNESS = 50.0


def _matern_05_fn(dists: np.ndarray, **kwargs) -> np.ndarray:
    return np.exp(-dists)


def _matern_15_fn(dists: np.ndarray, **kwargs) -> np.ndarray:
    K = dists * np.sqrt(3)
    return (1.0 + K) * np.exp(-K)


def _matern_25_fn(dists: np.ndarray, **kwargs) -> np.ndarray:
    K = dists * np.sqrt(5)
    return (1.0 + K + K**2 / 3.0) * np.exp(-K)


def _log_kv_uniform(smoothness: float, z: np.ndarray) -> np.ndarray:
    """
    Uniform large-order asymptotic expansion of :math:`\\log K_\\nu(z)`.

    Truncated after the third correction term, which leaves a relative error
    of order :math:`\\nu^{-4}` uniformly in :math:`z > 0`.
    """
    t = z / smoothness
    s = np.sqrt(1.0 + t**2)
    p2 = 1.0 / s**2
    u1 = (3.0 - 5.0 * p2) / (24.0 * s)
    u2 = p2 * (81.0 - 462.0 * p2 + 385.0 * p2**2) / 1152.0
    u3 = (
        (30375.0 - 369603.0 * p2 + 765765.0 * p2**2 - 425425.0 * p2**3)
        / (414720.0 * s**3)
    )
    series = 1.0 - u1 / smoothness + u2 / smoothness**2 - u3 / smoothness**3
    return (
        0.5 * np.log(np.pi / (2.0 * smoothness))
        - 0.5 * np.log(s)
        - smoothness * (s + np.log(t / (1.0 + s)))
        + np.log(series)
    )


def _matern_gen_fn(
    dists: np.ndarray, smoothness: float, **kwargs
) -> np.ndarray:
    # zero distances are evaluated at a placeholder and overwritten below
    zeros = dists == 0.0
    tmp = np.sqrt(2 * smoothness) * np.where(zeros, 1.0, dists)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        log_kv = np.log(kve(smoothness, tmp)) - tmp
        if smoothness > _UNIFORM_SMOOTHNESS:
            log_kv = np.where(
                np.isposinf(log_kv), _log_kv_uniform(smoothness, tmp), log_kv
            )
        log_K = (
            (1.0 - smoothness) * np.log(2.0)
            - gammaln(smoothness)
            + smoothness * np.log(tmp)
            + log_kv
        )
        K = np.exp(np.minimum(log_K, 0.0))
    K = np.where(np.logical_or(zeros, np.isposinf(log_kv)), 1.0, K)
    return K.astype(dists.dtype, copy=False)
