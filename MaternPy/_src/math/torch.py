# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from torch import tensor as _array, Tensor as ndarray
from torch import (
    any,
    diagonal,
    exp,
    float32,
    float64,
    from_numpy,
    full_like,
    isposinf,
    sqrt,
    where,
)
from torch import as_tensor as _asarray

from MaternPy._src.math.meta import (
    fix_function_type,
    set_type,
)


ftype = set_type(float64, float32)

farray = fix_function_type(ftype, _array)
array = farray
fasarray = fix_function_type(ftype, _asarray)
