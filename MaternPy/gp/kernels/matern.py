# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

"""
Matérn covariance

Defines the Matérn covariance functor :class:`Matern` and the functional form
:func:`matern_covariance`, both of which transform a tensor of nonnegative
distances into a covariance tensor of the same shape.

See the following example, which evaluates the covariance between two points
at unit distance.

Example:
    >>> from MaternPy.gp.kernels import matern_covariance
    >>> dists = [[0.0, 1.0], [1.0, 0.0]]
    >>> K = matern_covariance(dists, [0.5, 1.0, 2.0, 0.1])

The same covariance is produced by a functor, which fixes the smoothness
dispatch at construction time and can be reused across distance tensors.

Example:
    >>> from MaternPy.gp.kernels import Matern
    >>> kern = Matern(smoothness=0.5, range=1.0, variance=2.0, nugget=0.1)
    >>> K = kern(dists)
"""

from typing import Callable

import MaternPy._src.math as mm
from MaternPy import config
from MaternPy._src.gp.kernels import (
    _matern_05_fn,
    _matern_15_fn,
    _matern_25_fn,
    _matern_gen_fn,
)
from MaternPy._src.gp.noise import _zero_distance_sill
from MaternPy._src.mpi_utils import _warn0
from MaternPy._src.util import auto_str
from MaternPy.gp.errors import InvalidDistanceError
from MaternPy.gp.parameters import CovarianceParameters

_LARGE_SMOOTHNESS = 50.0


def _set_matern_fn(
    smoothness: float,
    tolerance: float = 0.0,
    _backend_05_fn: Callable = _matern_05_fn,
    _backend_15_fn: Callable = _matern_15_fn,
    _backend_25_fn: Callable = _matern_25_fn,
    _backend_gen_fn: Callable = _matern_gen_fn,
) -> Callable:
    for case, fn in (
        (0.5, _backend_05_fn),
        (1.5, _backend_15_fn),
        (2.5, _backend_25_fn),
    ):
        if smoothness == case:
            return fn
        elif abs(smoothness - case) <= tolerance:
            _warn0(
                f"Matern smoothness={smoothness} is within {tolerance} of "
                f"{case}; evaluating the closed form for {case}."
            )
            return fn

    if smoothness > _LARGE_SMOOTHNESS:
        _warn0(
            f"Matern smoothness={smoothness} is large; near the origin the "
            "Bessel function is replaced by its uniform asymptotic expansion."
        )
    return _backend_gen_fn


def _check_distances(dists: mm.ndarray, policy: str) -> None:
    if policy == "raise" and bool(mm.any(dists < 0.0)):
        raise InvalidDistanceError(
            "Distance tensor contains negative entries. Set "
            '"maternpy_negative_distances" to "propagate" to evaluate them '
            "anyway."
        )


@auto_str
class Matern:
    """
    The Matérn covariance.

    The Matérn covariance is parameterized by a smoothness :math:`\\nu>0`, a
    range :math:`\\phi>0`, a variance :math:`\\sigma^2\\geq 0` and a nugget
    :math:`\\tau^2\\geq 0`. :math:`\\nu` is proportional to the smoothness of
    sampled functions. When :math:`\\nu = 1/2`, the Matérn kernel is identical
    to the absolute exponential kernel. Important intermediate values are
    :math:`\\nu=1.5` (once differentiable functions) and :math:`\\nu=2.5`
    (twice differentiable functions).

    The covariance at distance :math:`d > 0` is

    .. math::
         C(d) = \\frac{\\sigma^2}{\\Gamma(\\nu)2^{\\nu-1}}\\Bigg(
         \\frac{\\sqrt{2\\nu}}{\\phi} d \\Bigg)^\\nu K_\\nu\\Bigg(
         \\frac{\\sqrt{2\\nu}}{\\phi} d\\Bigg),

    where :math:`K_{\\nu}(\\cdot)` is the modified Bessel function of the
    second kind and :math:`\\Gamma(\\cdot)` is the gamma function. At
    :math:`d = 0` the covariance is the sill :math:`\\sigma^2 + \\tau^2`.

    Smoothness values within `maternpy_smoothness_tolerance` of 0.5, 1.5 or
    2.5 are evaluated with the corresponding exponential-times-polynomial
    closed form. Other values use a log-domain evaluation of the general form
    with the exponentially scaled Bessel function. The dispatch is fixed at
    construction time.

    Args:
        smoothness:
            A parameter determining the differentiability of the function
            distribution.
        range:
            The length scale by which distances are divided.
        variance:
            The marginal variance of the process.
        nugget:
            Additional variance at zero distance only.

    Raises:
        InvalidParameterError:
            Any parameter outside of its domain will produce an error.
    """

    def __init__(
        self,
        smoothness: float = 0.5,
        range: float = 1.0,
        variance: float = 1.0,
        nugget: float = 0.0,
        **_backend_fns,
    ):
        params = CovarianceParameters(smoothness, range, variance, nugget)
        (
            self.smoothness,
            self.range,
            self.variance,
            self.nugget,
        ) = params.astuple()
        self._sill_fn = _backend_fns.pop(
            "_backend_sill_fn", _zero_distance_sill
        )
        self._backend_fns = _backend_fns
        self._make()

    @classmethod
    def from_parameters(cls, covparms, **_backend_fns) -> "Matern":
        """
        Construct a Matérn covariance from an ordered parameter vector.

        Args:
            covparms:
                A :class:`~MaternPy.gp.parameters.CovarianceParameters` or an
                iterable of four values ordered as
                `[smoothness, range, variance, nugget]`.

        Returns:
            The corresponding covariance functor.
        """
        params = CovarianceParameters.from_vector(covparms)
        return cls(*params, **_backend_fns)

    def _make(self):
        self._kernel_fn = _set_matern_fn(
            self.smoothness,
            config.state.smoothness_tolerance,
            **self._backend_fns,
        )

    def parameters(self) -> CovarianceParameters:
        return CovarianceParameters(
            self.smoothness, self.range, self.variance, self.nugget
        )

    def __call__(self, dists) -> mm.ndarray:
        """
        Compute a Matérn covariance tensor from a distance tensor.

        Args:
            dists:
                A tensor of nonnegative distances of any shape, e.g. a square
                `(count, count)` pairwise distance matrix, a rectangular
                crosswise distance matrix or a batched
                `(batch_count, nn_count, nn_count)` tensor. It is not
                modified.

        Returns:
            A newly allocated covariance tensor of the same shape, whose
            entries at zero distance equal `variance + nugget`.

        Raises:
            InvalidDistanceError:
                Negative distances will produce an error if the
                `maternpy_negative_distances` option is `"raise"`.
        """
        dists = mm.fasarray(dists)
        _check_distances(dists, config.state.negative_distances)
        Kcorr = self._kernel_fn(dists / self.range, smoothness=self.smoothness)
        return self._sill_fn(Kcorr, dists, self.variance, self.nugget)


def matern_covariance(dists, covparms, **_backend_fns) -> mm.ndarray:
    """
    Compute a Matérn covariance tensor from distances and parameters.

    All parameters are validated before any entry is evaluated.

    Args:
        dists:
            A tensor of nonnegative distances of any shape.
        covparms:
            Four values ordered as `[smoothness, range, variance, nugget]`.

    Returns:
        A newly allocated covariance tensor of the same shape as `dists`.

    Raises:
        InvalidParameterError:
            A parameter vector of the wrong length or with values outside of
            their domain will produce an error.
        InvalidDistanceError:
            Negative distances will produce an error if the
            `maternpy_negative_distances` option is `"raise"`.
    """
    return Matern.from_parameters(covparms, **_backend_fns)(dists)
