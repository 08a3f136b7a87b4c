# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import MaternPy._src.math.torch as torch
from MaternPy._src.gp.kernels.numpy import _matern_gen_fn as _matern_gen_fn_n
from MaternPy._src.mpi_utils import _warn0


def _matern_05_fn(dists: torch.ndarray, **kwargs) -> torch.ndarray:
    return torch.exp(-dists)


def _matern_15_fn(dists: torch.ndarray, **kwargs) -> torch.ndarray:
    K = dists * torch.sqrt(torch.array(3))
    return (1.0 + K) * torch.exp(-K)


def _matern_25_fn(dists: torch.ndarray, **kwargs) -> torch.ndarray:
    K = dists * torch.sqrt(torch.array(5))
    return (1.0 + K + K**2 / 3.0) * torch.exp(-K)


def _matern_gen_fn(
    dists: torch.ndarray, smoothness: float, **kwargs
) -> torch.ndarray:
    # torch has no fractional order modified Bessel function of the second
    # kind, so the general form is evaluated by scipy on the host.
    if dists.requires_grad:
        _warn0(
            f"Matern smoothness={smoothness} is evaluated outside of torch; "
            "gradients with respect to the distances are not tracked."
        )
    K = _matern_gen_fn_n(dists.detach().cpu().numpy(), smoothness)
    return torch.from_numpy(K).to(device=dists.device, dtype=dists.dtype)
