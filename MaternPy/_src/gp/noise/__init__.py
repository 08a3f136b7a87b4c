# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from MaternPy._src.util import _collect_implementation

(_zero_distance_sill,) = _collect_implementation(
    "MaternPy._src.gp.noise",
    "_zero_distance_sill",
)
