# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

"""Public MaternPy modules and functions."""

__version__ = "0.1.0"

from MaternPy._src.config import (
    config as config,
    jax_config as jax_config,
    MPI as MPI,
)
