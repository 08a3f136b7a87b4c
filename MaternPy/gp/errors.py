# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

"""
Exceptions raised by MaternPy covariance evaluation.

Both exceptions subclass :class:`ValueError` and are raised before any entry
of the output is computed.
"""


class InvalidParameterError(ValueError):
    """
    A covariance parameter vector is malformed or out of its domain.

    Raised for a parameter vector whose length is not four, a nonpositive or
    nonfinite smoothness or range, or a negative or nonfinite variance or
    nugget.
    """


class InvalidDistanceError(ValueError):
    """
    A distance tensor contains negative entries.

    Only raised when the `maternpy_negative_distances` option is `"raise"`.
    """
