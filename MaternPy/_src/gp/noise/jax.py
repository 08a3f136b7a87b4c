# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import MaternPy._src.math.jax as jnp


def _zero_distance_sill(
    Kcorr: jnp.ndarray,
    dists: jnp.ndarray,
    variance: float,
    nugget: float,
) -> jnp.ndarray:
    Kcov = jnp.where(jnp.isposinf(dists), 0.0, variance * Kcorr)
    return jnp.where(dists == 0.0, variance + nugget, Kcov)
