# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from MaternPy._src.util import _collect_implementation

(
    any,
    fasarray,
    ftype,
    ndarray,
) = _collect_implementation(
    "MaternPy._src.math",
    "any",
    "fasarray",
    "ftype",
    "ndarray",
)
