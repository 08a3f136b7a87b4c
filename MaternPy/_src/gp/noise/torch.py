# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import MaternPy._src.math.torch as torch


def _zero_distance_sill(
    Kcorr: torch.ndarray,
    dists: torch.ndarray,
    variance: float,
    nugget: float,
) -> torch.ndarray:
    Kcov = variance * Kcorr
    Kcov = torch.where(
        torch.isposinf(dists), torch.full_like(Kcov, 0.0), Kcov
    )
    return torch.where(
        dists == 0.0, torch.full_like(Kcov, variance + nugget), Kcov
    )
