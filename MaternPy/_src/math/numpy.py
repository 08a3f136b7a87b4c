# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from numpy import (
    all,
    allclose,
    any,
    diagonal,
    errstate,
    exp,
    float32,
    float64,
    inf,
    isclose,
    isfinite,
    isnan,
    isposinf,
    linalg,
    log,
    logical_or,
    minimum,
    nan,
    ndarray,
    pi,
    random,
    sqrt,
    where,
    vstack,
)
from numpy import (
    array as _array,
    asarray as _asarray,
    linspace as _linspace,
    ones as _ones,
)

from MaternPy._src.math.meta import (
    fix_function_type,
    fix_function_types,
    set_type,
)


ftype = set_type(float64, float32)

farray = fix_function_type(ftype, _array)
array = farray
fasarray = fix_function_type(ftype, _asarray)

linspace, ones = fix_function_types(ftype, _linspace, _ones)
