# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from jax import jit
from jax.scipy.special import gammaln
from tensorflow_probability.substrates import jax as tfp

import MaternPy._src.math.jax as jnp

_UNIFORM_SMOOTHNESS = 50.0


@jit
def _matern_05_fn(dists: jnp.ndarray, **kwargs) -> jnp.ndarray:
    return jnp.exp(-dists)


@jit
def _matern_15_fn(dists: jnp.ndarray, **kwargs) -> jnp.ndarray:
    K = dists * jnp.sqrt(3)
    return (1.0 + K) * jnp.exp(-K)


@jit
def _matern_25_fn(dists: jnp.ndarray, **kwargs) -> jnp.ndarray:
    K = dists * jnp.sqrt(5)
    return (1.0 + K + K**2 / 3.0) * jnp.exp(-K)


def _log_kv_uniform(smoothness: float, z: jnp.ndarray) -> jnp.ndarray:
    t = z / smoothness
    s = jnp.sqrt(1.0 + t**2)
    p2 = 1.0 / s**2
    u1 = (3.0 - 5.0 * p2) / (24.0 * s)
    u2 = p2 * (81.0 - 462.0 * p2 + 385.0 * p2**2) / 1152.0
    u3 = (
        (30375.0 - 369603.0 * p2 + 765765.0 * p2**2 - 425425.0 * p2**3)
        / (414720.0 * s**3)
    )
    series = 1.0 - u1 / smoothness + u2 / smoothness**2 - u3 / smoothness**3
    return (
        0.5 * jnp.log(jnp.pi / (2.0 * smoothness))
        - 0.5 * jnp.log(s)
        - smoothness * (s + jnp.log(t / (1.0 + s)))
        + jnp.log(series)
    )


@jit
def _matern_gen_fn(
    dists: jnp.ndarray, smoothness: float, **kwargs
) -> jnp.ndarray:
    zeros = dists == 0.0
    tmp = jnp.sqrt(2 * smoothness) * jnp.where(zeros, 1.0, dists)
    log_kv = tfp.math.log_bessel_kve(smoothness, tmp) - tmp
    log_kv = jnp.where(
        jnp.logical_and(
            jnp.isposinf(log_kv), smoothness > _UNIFORM_SMOOTHNESS
        ),
        _log_kv_uniform(smoothness, tmp),
        log_kv,
    )
    log_K = (
        (1.0 - smoothness) * jnp.log(2.0)
        - gammaln(smoothness)
        + smoothness * jnp.log(tmp)
        + log_kv
    )
    return jnp.where(
        jnp.logical_or(zeros, jnp.isposinf(log_kv)),
        1.0,
        jnp.exp(jnp.minimum(log_K, 0.0)),
    ).astype(dists.dtype)
