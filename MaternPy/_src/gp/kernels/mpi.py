# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from MaternPy._src.gp.kernels.numpy import (
    _matern_05_fn as _matern_05_fn_n,
    _matern_15_fn as _matern_15_fn_n,
    _matern_25_fn as _matern_25_fn_n,
    _matern_gen_fn as _matern_gen_fn_n,
)
from MaternPy._src.mpi_utils import (
    _consistent_chunk_tensor,
    _consistent_unchunk_tensor,
)


def _distribute_rows(fn):
    def distributed_fn(dists, **kwargs):
        if dists.ndim == 0:
            return fn(dists, **kwargs)
        local_dists = _consistent_chunk_tensor(dists)
        return _consistent_unchunk_tensor(fn(local_dists, **kwargs))

    return distributed_fn


_matern_05_fn = _distribute_rows(_matern_05_fn_n)
_matern_15_fn = _distribute_rows(_matern_15_fn_n)
_matern_25_fn = _distribute_rows(_matern_25_fn_n)
_matern_gen_fn = _distribute_rows(_matern_gen_fn_n)
