# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

"""
Covariance parameters

Defines the ordered four-parameter vector consumed by the Matérn covariance,
`[smoothness, range, variance, nugget]`, along with its validation.

Example:
    >>> from MaternPy.gp import CovarianceParameters
    >>> params = CovarianceParameters.from_vector([0.5, 1.0, 2.0, 0.1])
    >>> params.sill
    2.1
"""

import math
from collections.abc import Iterable
from typing import Iterator, Tuple

from MaternPy.gp.errors import InvalidParameterError


def _check_scalar(name: str, val, strict: bool) -> float:
    try:
        val = float(val)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"Covariance parameter {name} must be a real scalar, not {val!r}"
        ) from e
    if not math.isfinite(val):
        raise InvalidParameterError(
            f"Covariance parameter {name} must be finite, not {val}"
        )
    if strict is True and val <= 0.0:
        raise InvalidParameterError(
            f"Covariance parameter {name} must be strictly positive, not {val}"
        )
    if strict is False and val < 0.0:
        raise InvalidParameterError(
            f"Covariance parameter {name} must be nonnegative, not {val}"
        )
    return val


class CovarianceParameters:
    """
    Matérn covariance parameters.

    An immutable, validated record of the smoothness :math:`\\nu`, range
    :math:`\\phi`, variance :math:`\\sigma^2` and nugget :math:`\\tau^2`
    parameters. Iterating over the record yields the values in that order.

    Args:
        smoothness:
            Strictly positive smoothness :math:`\\nu`.
        range:
            Strictly positive range (length scale) :math:`\\phi`.
        variance:
            Nonnegative variance :math:`\\sigma^2`.
        nugget:
            Nonnegative nugget :math:`\\tau^2`, added only at zero distance.

    Raises:
        InvalidParameterError:
            A nonnumeric or nonfinite value, a nonpositive smoothness or range,
            or a negative variance or nugget will produce an error.
    """

    names = ("smoothness", "range", "variance", "nugget")

    def __init__(
        self,
        smoothness: float = 0.5,
        range: float = 1.0,
        variance: float = 1.0,
        nugget: float = 0.0,
    ):
        self._values = (
            _check_scalar("smoothness", smoothness, strict=True),
            _check_scalar("range", range, strict=True),
            _check_scalar("variance", variance, strict=False),
            _check_scalar("nugget", nugget, strict=False),
        )

    @classmethod
    def from_vector(cls, covparms) -> "CovarianceParameters":
        """
        Build a parameter record from an ordered vector.

        Args:
            covparms:
                An iterable of exactly four real values, ordered as
                `[smoothness, range, variance, nugget]`. An existing
                `CovarianceParameters` is returned unchanged.

        Returns:
            A validated parameter record.

        Raises:
            InvalidParameterError:
                A noniterable or a vector of length other than four, in
                addition to the value errors raised by the constructor.
        """
        if isinstance(covparms, cls):
            return covparms
        if isinstance(covparms, str) or not isinstance(covparms, Iterable):
            raise InvalidParameterError(
                "Covariance parameters must be a vector of four values, not "
                f"{covparms!r}"
            )
        values = list(covparms)
        if len(values) != 4:
            raise InvalidParameterError(
                "Covariance parameters must be ordered as [smoothness, range, "
                f"variance, nugget]; got {len(values)} values"
            )
        return cls(*values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, CovarianceParameters):
            return NotImplemented
        return self._values == rhs._values

    def __hash__(self):
        return hash(self._values)

    def __repr__(self) -> str:
        members = ", ".join(
            f"{name}={val}" for name, val in zip(self.names, self._values)
        )
        return f"{type(self).__name__}({members})"

    __str__ = __repr__

    def astuple(self) -> Tuple[float, float, float, float]:
        return self._values

    @property
    def smoothness(self) -> float:
        return self._values[0]

    @property
    def range(self) -> float:
        return self._values[1]

    @property
    def variance(self) -> float:
        return self._values[2]

    @property
    def nugget(self) -> float:
        return self._values[3]

    @property
    def sill(self) -> float:
        """The covariance at zero distance, :math:`\\sigma^2 + \\tau^2`."""
        return self.variance + self.nugget
