# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from jax.numpy import (
    any,
    exp,
    float32,
    float64,
    isposinf,
    log,
    logical_and,
    logical_or,
    minimum,
    pi,
    sqrt,
    where,
)
from jax.numpy import (
    array as _array,
    asarray as _asarray,
)

from MaternPy._src.math.meta import (
    fix_function_type,
    set_type,
)


ftype = set_type(float64, float32)

farray = fix_function_type(ftype, _array)
array = farray
fasarray = fix_function_type(ftype, _asarray)

ndarray = type(array(1))  # type: ignore
