# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import itertools
import os
import sys


def _parse_bool(val) -> bool:
    if isinstance(val, str):
        lowered = val.strip().lower()
        if lowered in ("1", "true", "t", "yes", "y", "on"):
            return True
        if lowered in ("0", "false", "f", "no", "n", "off"):
            return False
        raise ValueError(f"Cannot interpret {val!r} as a boolean")
    return bool(val)


def _make_enum_parser(enum_values):
    def parse_enum(val) -> str:
        val = str(val)
        if val not in enum_values:
            raise ValueError(
                f"Value {val!r} is not one of the supported values "
                f"{enum_values}"
            )
        return val

    return parse_enum


def _make_float_parser(lower_bound):
    def parse_float(val) -> float:
        val = float(val)
        if lower_bound is not None and val < lower_bound:
            raise ValueError(
                f"Value {val} is below the lower bound {lower_bound}"
            )
        return val

    return parse_float


class MaternPyConfig:
    """
    Global MaternPy option registry.

    Options are defined with a default, which may be overridden by an
    environment variable of the same name in upper case (e.g.
    `MATERNPY_BACKEND=jax`), by `--maternpy_*` absl flags, or by calling
    :meth:`update`. Every option mirrors its value into :attr:`state` through
    an update hook.
    """

    def __init__(self):
        self.values = dict()
        self.meta = dict()
        self._parsers = dict()
        self._update_hooks = dict()
        self.state = MaternPyState()
        self.mpi_state = MPIState()

    def __getattr__(self, name):
        values = self.__dict__.get("values", dict())
        if name in values:
            return values[name]
        raise AttributeError(f"Unrecognized config option: {name}")

    def read(self, name):
        if name not in self.values:
            raise AttributeError(f"Unrecognized config option: {name}")
        return self.values[name]

    def update(self, name, val):
        if name not in self.values:
            raise AttributeError(f"Unrecognized config option: {name}")
        val = self._parsers[name](val)
        self.values[name] = val
        hook = self._update_hooks[name]
        if hook is not None:
            hook(val)

    def _define_state(
        self, name, default, parser, flag_type, help, update_hook, **flag_kwargs
    ):
        if name in self.values:
            raise ValueError(f"Config option {name} already defined")
        self.values[name] = None
        self.meta[name] = (flag_type, help, flag_kwargs)
        self._parsers[name] = parser
        self._update_hooks[name] = update_hook
        self.update(name, os.getenv(name.upper(), default))
        return name

    def define_bool_state(
        self, name, default, help, update_global_hook=None
    ) -> str:
        return self._define_state(
            name, default, _parse_bool, "bool", help, update_global_hook
        )

    def define_enum_state(
        self, name, enum_values, default, help, update_global_hook=None
    ) -> str:
        return self._define_state(
            name,
            default,
            _make_enum_parser(enum_values),
            "enum",
            help,
            update_global_hook,
            enum_values=enum_values,
        )

    def define_float_state(
        self, name, default, help, lower_bound=None, update_global_hook=None
    ) -> str:
        return self._define_state(
            name,
            default,
            _make_float_parser(lower_bound),
            "float",
            help,
            update_global_hook,
            lower_bound=lower_bound,
        )

    def config_with_absl(self):
        import absl.flags

        for name, (flag_type, help, kwargs) in self.meta.items():
            if name in absl.flags.FLAGS:
                continue
            if flag_type == "bool":
                absl.flags.DEFINE_bool(name, self.values[name], help)
            elif flag_type == "enum":
                absl.flags.DEFINE_enum(
                    name, self.values[name], kwargs["enum_values"], help
                )
            elif flag_type == "float":
                absl.flags.DEFINE_float(
                    name,
                    self.values[name],
                    help,
                    lower_bound=kwargs["lower_bound"],
                )

    def complete_absl_config(self, absl_flags):
        for name in self.values:
            if name not in absl_flags.FLAGS:
                continue
            flag = absl_flags.FLAGS[name]
            if flag.present:
                self.update(name, flag.value)

    def parse_flags_with_absl(self):
        if self.state.already_configured_with_absl is False:
            # Extract just the --maternpy... flags (before the first --) from
            # argv. In some environments (e.g. ipython/colab) argv might be a
            # mess of things parseable by absl and other junk.
            maternpy_argv = itertools.takewhile(lambda a: a != "--", sys.argv)
            maternpy_argv = [
                "",
                *(a for a in maternpy_argv if a.startswith("--maternpy")),
            ]

            import absl.flags

            self.config_with_absl()
            absl.flags.FLAGS(maternpy_argv, known_only=True)
            self.complete_absl_config(absl.flags)
            self.state.already_configured_with_absl = True


class MaternPyState:
    def __init__(self):
        self.jax_enabled = False
        self.torch_enabled = False
        self.gpu_enabled = False
        self.mpi_enabled = False
        self.backend = "numpy"
        self.ftype = "64"
        self.smoothness_tolerance = 1e-10
        self.negative_distances = "raise"
        self.already_configured_with_absl = False


class MPIState:
    def __init__(self):
        self._comm_world = None

    @property
    def comm_world(self):
        return self._comm_world

    def set_comm(self, comm):
        self._comm_world = comm


config = MaternPyConfig()


# JAX and GPU states


def _update_jax(val):
    config.state.jax_enabled = val


enable_jax = config.define_bool_state(
    name="maternpy_jax_enabled",
    default=False,
    help="Enable use of jax implementations of math functions.",
    update_global_hook=_update_jax,
)


def _update_gpu(val):
    config.state.gpu_enabled = val


enable_gpu = config.define_bool_state(
    name="maternpy_gpu_enabled",
    default=False,
    help="Enable use of GPUs with JAX.",
    update_global_hook=_update_gpu,
)


try:
    from jax import config as jax_config
    from jax import default_backend as _default_backend

    config.update("maternpy_jax_enabled", True)
    if _default_backend() in ["gpu", "tpu"]:
        config.update("maternpy_gpu_enabled", True)
    del _default_backend
except Exception:
    jax_config = None  # type: ignore
    config.update("maternpy_jax_enabled", False)
    config.update("maternpy_gpu_enabled", False)


# MPI states


def _update_mpi(val):
    config.state.mpi_enabled = val


enable_mpi = config.define_bool_state(
    name="maternpy_mpi_enabled",
    default=False,
    help="Enable use of mpi for parallelization.",
    update_global_hook=_update_mpi,
)

try:
    from mpi4py import MPI
    from mpi4py.util.pkl5 import Intracomm

    # wrap COMM_WORLD with pkl5 for large number of messages per
    # https://mpi4py.readthedocs.io/en/3.1.4/mpi4py.util.pkl5.html
    config.mpi_state.set_comm(Intracomm(MPI.COMM_WORLD))

    config.update("maternpy_mpi_enabled", True)
except Exception:
    MPI = None  # type: ignore
    config.update("maternpy_mpi_enabled", False)


# torch states


def _update_torch(val):
    config.state.torch_enabled = val


enable_torch = config.define_bool_state(
    name="maternpy_torch_enabled",
    default=False,
    help="Enable use of torch implementations of math functions.",
    update_global_hook=_update_torch,
)


try:
    import torch as _torch

    config.update("maternpy_torch_enabled", True)
    del _torch
except Exception:
    config.update("maternpy_torch_enabled", False)

# Backend state


def _update_backend(val):
    config.state.backend = val


backend = config.define_enum_state(
    name="maternpy_backend",
    enum_values=["numpy", "jax", "torch", "mpi"],
    default="numpy",
    help="Specify which backend to select at import time",
    update_global_hook=_update_backend,
)

if (
    config.state.backend == "jax"
    and config.state.jax_enabled is False
    or config.state.backend == "torch"
    and config.state.torch_enabled is False
    or config.state.backend == "mpi"
    and config.state.mpi_enabled is False
):
    be = config.state.backend
    raise ValueError(
        f'MaternPy backend is set to "{be}", but "{be}" is not enabled! '
        f"The {be} dependencies are most likely not installed in your "
        f"environment."
    )


def _update_ftype(val):
    config.state.ftype = val


ftype = config.define_enum_state(
    name="maternpy_ftype",
    enum_values=["32", "64"],
    default="64",
    help="Specify the float precision to be used",
    update_global_hook=_update_ftype,
)

if config.state.jax_enabled is True and config.state.ftype == "64":
    jax_config.update("jax_enable_x64", True)


# Kernel evaluation states


def _update_smoothness_tolerance(val):
    config.state.smoothness_tolerance = val


smoothness_tolerance = config.define_float_state(
    name="maternpy_smoothness_tolerance",
    default=1e-10,
    help=(
        "Absolute tolerance used when matching the Matern smoothness against "
        "the closed-form cases 0.5, 1.5 and 2.5."
    ),
    lower_bound=0.0,
    update_global_hook=_update_smoothness_tolerance,
)


def _update_negative_distances(val):
    config.state.negative_distances = val


negative_distances = config.define_enum_state(
    name="maternpy_negative_distances",
    enum_values=["raise", "propagate"],
    default="raise",
    help=(
        "Policy for negative entries in a distance tensor. `raise` rejects "
        "them before evaluation, `propagate` evaluates them as given."
    ),
    update_global_hook=_update_negative_distances,
)
