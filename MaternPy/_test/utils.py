# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from typing import Callable, Optional, Tuple, Type

import MaternPy._src.math as mm
import MaternPy._src.math.numpy as np
from MaternPy import config
from MaternPy._src.mpi_utils import _is_mpi_mode

_special_smoothness_options = (0.5, 1.5, 2.5)

_general_smoothness_options = (0.42, 1.0, 3.1)

_smoothness_options = _special_smoothness_options + _general_smoothness_options

_large_smoothness_options = (120.3, 300.3)


def _make_gaussian_matrix(
    data_count: int,
    feature_count: int,
) -> np.ndarray:
    """
    Create a matrix of i.i.d. Gaussian datapoints.

    Args:
        data_count:
            The number of data rows.
        feature_count:
            The number of data columns.

    Returns:
        An i.i.d. Gaussian matrix of shape `(data_count, feature_count)`.
    """
    return np.random.normal(0, 5, size=(data_count, feature_count))


def _make_pairwise_dists(locs: np.ndarray) -> np.ndarray:
    """
    Compute the Euclidean distances between all pairs of rows of a matrix.

    Args:
        locs:
            A matrix of shape `(data_count, feature_count)`.

    Returns:
        A symmetric matrix of shape `(data_count, data_count)` with a zero
        diagonal.
    """
    return np.linalg.norm(locs[:, None, :] - locs[None, :, :], axis=-1)


def _make_crosswise_dists(
    test_locs: np.ndarray, train_locs: np.ndarray
) -> np.ndarray:
    """
    Compute the Euclidean distances between the rows of two matrices.

    Args:
        test_locs:
            A matrix of shape `(test_count, feature_count)`.
        train_locs:
            A matrix of shape `(train_count, feature_count)`.

    Returns:
        A matrix of shape `(test_count, train_count)`.
    """
    return np.linalg.norm(
        test_locs[:, None, :] - train_locs[None, :, :], axis=-1
    )


def _check_ndarray(
    assert_fn: Callable,
    array: mm.ndarray,
    dtype: Type,
    ctype: Type = mm.ndarray,
    shape: Optional[Tuple[int, ...]] = None,
):
    assert_fn(type(array), ctype)
    assert_fn(array.dtype, dtype)
    if shape is not None:
        assert_fn(array.shape, shape)


def _precision_assert(assert_fn, *args, low_bound=4, high_bound=7):
    if config.state.ftype == "32":
        return assert_fn(*args, low_bound)
    else:
        return assert_fn(*args, high_bound)


def _consistent_assert(assert_fn, *args):
    """
    Performs an assert on the root core if in mpi, otherwise performs the assert
    as normal.

    The purpose of this function is to allow the existing serial testing harness
    to also test the mpi implementations without the need for additional codes.

    Args:
        assert_fn:
            An absl assert function.
        args:
            Arguments to the assert function
    """
    if _is_mpi_mode() is True:
        if config.mpi_state.comm_world.Get_rank() == 0:
            assert_fn(*args)
    else:
        assert_fn(*args)


class ConfigUser:
    """
    Temporarily update a config option within a `with` block.
    """

    def __init__(self, name: str, val):
        self.name = name
        self.val = val

    def __enter__(self):
        self.state = config.read(self.name)
        config.update(self.name, self.val)
        return self.state

    def __exit__(self, *args):
        config.update(self.name, self.state)
