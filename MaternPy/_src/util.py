# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from MaternPy import config


def _collect_implementation(package, *funcs):
    if config.state.backend == "numpy":
        return _collect_functions(package + ".numpy", *funcs)
    elif config.state.backend == "jax":
        return _collect_functions(package + ".jax", *funcs)
    elif config.state.backend == "torch":
        return _collect_functions(package + ".torch", *funcs)
    elif config.state.backend == "mpi":
        return _collect_functions(package + ".mpi", *funcs)
    else:
        raise ValueError(
            f'MaternPy backend is in bad state "{config.state.backend}"'
        )


def _collect_functions(package, *funcs):
    return tuple([getattr(__import__(package, fromlist=[f]), f) for f in funcs])


def auto_str(klass):
    def __str__(self):
        public_members = ", ".join(
            "%s=%s" % item
            for item in vars(self).items()
            if not item[0].startswith("_")
        )
        return f"{type(self).__name__}({public_members})"

    klass.__str__ = __str__
    return klass
