# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import MaternPy._src.math.numpy as np


def _zero_distance_sill(
    Kcorr: np.ndarray,
    dists: np.ndarray,
    variance: float,
    nugget: float,
) -> np.ndarray:
    Kcov = np.where(np.isposinf(dists), 0.0, variance * Kcorr)
    return np.where(dists == 0.0, variance + nugget, Kcov)
