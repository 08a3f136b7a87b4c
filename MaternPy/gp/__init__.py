# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

"""Covariance parameters, kernels and exceptions."""

from .errors import InvalidDistanceError, InvalidParameterError
from .parameters import CovarianceParameters
