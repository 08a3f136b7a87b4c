# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import os
import sys
from unittest import mock

from absl.testing import absltest
from absl.testing import parameterized

from MaternPy import config
from MaternPy._src.config import MaternPyConfig
from MaternPy._test.utils import ConfigUser


class GlobalConfigTest(parameterized.TestCase):
    def test_defaults(self):
        self.assertIn(config.maternpy_backend, ["numpy", "jax", "torch", "mpi"])
        self.assertEqual(config.state.backend, config.maternpy_backend)
        self.assertEqual(config.state.ftype, config.maternpy_ftype)
        self.assertEqual(
            config.state.smoothness_tolerance,
            config.maternpy_smoothness_tolerance,
        )
        self.assertEqual(
            config.state.negative_distances,
            config.maternpy_negative_distances,
        )

    @parameterized.parameters(
        (
            (name, val)
            for name, val in [
                ("maternpy_smoothness_tolerance", 1e-4),
                ("maternpy_negative_distances", "propagate"),
            ]
        )
    )
    def test_update_restores(self, name, val):
        original = config.read(name)
        with ConfigUser(name, val):
            self.assertEqual(config.read(name), val)
        self.assertEqual(config.read(name), original)

    def test_update_hooks(self):
        with ConfigUser("maternpy_smoothness_tolerance", "0.25"):
            self.assertEqual(config.state.smoothness_tolerance, 0.25)
        with ConfigUser("maternpy_negative_distances", "propagate"):
            self.assertEqual(config.state.negative_distances, "propagate")

    @parameterized.parameters(
        (
            (name, val)
            for name, val in [
                ("maternpy_smoothness_tolerance", -1.0),
                ("maternpy_smoothness_tolerance", "tight"),
                ("maternpy_negative_distances", "clip"),
                ("maternpy_ftype", "16"),
            ]
        )
    )
    def test_bad_values(self, name, val):
        original = config.read(name)
        with self.assertRaises(ValueError):
            config.update(name, val)
        self.assertEqual(config.read(name), original)

    def test_unknown_option(self):
        with self.assertRaisesRegex(AttributeError, "Unrecognized"):
            config.update("maternpy_not_an_option", True)
        with self.assertRaisesRegex(AttributeError, "Unrecognized"):
            config.maternpy_not_an_option
        with self.assertRaisesRegex(AttributeError, "Unrecognized"):
            config.read("maternpy_not_an_option")


class FreshConfigTest(parameterized.TestCase):
    def test_define_twice(self):
        cfg = MaternPyConfig()
        cfg.define_bool_state("maternpy_fresh_flag", False, "A flag.")
        with self.assertRaisesRegex(ValueError, "already defined"):
            cfg.define_bool_state("maternpy_fresh_flag", True, "A flag.")

    @parameterized.parameters(
        (
            (env_val, expected)
            for env_val, expected in [
                ("1", True),
                ("true", True),
                ("Off", False),
                ("no", False),
            ]
        )
    )
    def test_bool_environment(self, env_val, expected):
        cfg = MaternPyConfig()
        with mock.patch.dict(os.environ, {"MATERNPY_ENV_FLAG": env_val}):
            cfg.define_bool_state("maternpy_env_flag", not expected, "A flag.")
        self.assertEqual(cfg.maternpy_env_flag, expected)

    def test_enum_environment(self):
        cfg = MaternPyConfig()
        seen = list()
        with mock.patch.dict(os.environ, {"MATERNPY_ENV_ENUM": "b"}):
            cfg.define_enum_state(
                "maternpy_env_enum",
                ["a", "b"],
                "a",
                "An enum.",
                update_global_hook=seen.append,
            )
        self.assertEqual(cfg.maternpy_env_enum, "b")
        self.assertEqual(seen, ["b"])

    def test_bad_environment(self):
        cfg = MaternPyConfig()
        with mock.patch.dict(os.environ, {"MATERNPY_ENV_FLOAT": "-2.0"}):
            with self.assertRaises(ValueError):
                cfg.define_float_state(
                    "maternpy_env_float", 1.0, "A float.", lower_bound=0.0
                )

    def test_absl_flags(self):
        cfg = MaternPyConfig()
        cfg.define_float_state(
            "maternpy_absl_tolerance", 1.0, "A float.", lower_bound=0.0
        )
        cfg.define_enum_state(
            "maternpy_absl_policy", ["raise", "propagate"], "raise", "An enum."
        )
        argv = [
            "prog",
            "--maternpy_absl_tolerance=2.5",
            "--other_flag=3",
            "--",
            "--maternpy_absl_policy=propagate",
        ]
        with mock.patch.object(sys, "argv", argv):
            cfg.parse_flags_with_absl()
        self.assertEqual(cfg.maternpy_absl_tolerance, 2.5)
        self.assertEqual(cfg.maternpy_absl_policy, "raise")
        self.assertTrue(cfg.state.already_configured_with_absl)


if __name__ == "__main__":
    absltest.main()
