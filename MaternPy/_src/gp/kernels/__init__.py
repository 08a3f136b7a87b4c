# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from MaternPy._src.util import _collect_implementation

(
    _matern_05_fn,
    _matern_15_fn,
    _matern_25_fn,
    _matern_gen_fn,
) = _collect_implementation(
    "MaternPy._src.gp.kernels",
    "_matern_05_fn",
    "_matern_15_fn",
    "_matern_25_fn",
    "_matern_gen_fn",
)
