# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from absl.testing import absltest
from absl.testing import parameterized

import MaternPy._src.math.numpy as np
from MaternPy.gp import CovarianceParameters, InvalidParameterError


class CovarianceParametersTest(parameterized.TestCase):
    @parameterized.parameters(
        (
            (covparms,)
            for covparms in [
                [0.5, 1.0, 2.0, 0.1],
                (1.5, 3.0, 0.0, 0.0),
                np.array([0.42, 0.1, 1.0, 1e-5]),
            ]
        )
    )
    def test_from_vector(self, covparms):
        params = CovarianceParameters.from_vector(covparms)
        self.assertEqual(len(params), 4)
        self.assertEqual(params.smoothness, float(covparms[0]))
        self.assertEqual(params.range, float(covparms[1]))
        self.assertEqual(params.variance, float(covparms[2]))
        self.assertEqual(params.nugget, float(covparms[3]))
        self.assertEqual(params.sill, float(covparms[2]) + float(covparms[3]))
        self.assertEqual(tuple(params), tuple(float(v) for v in covparms))

    def test_keywords(self):
        params = CovarianceParameters(
            smoothness=2.5, range=0.3, variance=4.0, nugget=0.5
        )
        self.assertEqual(params.astuple(), (2.5, 0.3, 4.0, 0.5))
        self.assertEqual(params.sill, 4.5)
        self.assertEqual(
            params, CovarianceParameters.from_vector([2.5, 0.3, 4.0, 0.5])
        )
        self.assertIs(CovarianceParameters.from_vector(params), params)

    def test_defaults(self):
        self.assertEqual(
            CovarianceParameters().astuple(), (0.5, 1.0, 1.0, 0.0)
        )

    def test_immutable(self):
        params = CovarianceParameters()
        with self.assertRaises(AttributeError):
            params.smoothness = 1.5

    def test_repr(self):
        self.assertEqual(
            repr(CovarianceParameters(1.5, 2.0, 3.0, 0.0)),
            "CovarianceParameters(smoothness=1.5, range=2.0, variance=3.0, "
            "nugget=0.0)",
        )

    @parameterized.parameters(
        (
            (kwargs, msg)
            for kwargs, msg in [
                ({"smoothness": -1.0}, "strictly positive"),
                ({"smoothness": 0.0}, "strictly positive"),
                ({"range": 0.0}, "strictly positive"),
                ({"range": -3.0}, "strictly positive"),
                ({"variance": -1e-8}, "nonnegative"),
                ({"nugget": -0.1}, "nonnegative"),
                ({"smoothness": np.nan}, "finite"),
                ({"variance": np.inf}, "finite"),
                ({"nugget": "fixed"}, "real scalar"),
                ({"range": None}, "real scalar"),
            ]
        )
    )
    def test_bad_values(self, kwargs, msg):
        with self.assertRaisesRegex(InvalidParameterError, msg):
            CovarianceParameters(**kwargs)

    @parameterized.parameters(
        (
            (covparms,)
            for covparms in [
                [],
                [1.0, 1.0, 1.0],
                [1.0, 1.0, 1.0, 1.0, 1.0],
                np.ones(5),
                1.0,
                "0.5",
                None,
            ]
        )
    )
    def test_bad_vectors(self, covparms):
        with self.assertRaises(InvalidParameterError):
            CovarianceParameters.from_vector(covparms)

    def test_zero_variance_and_nugget(self):
        params = CovarianceParameters(0.5, 1.0, 0.0, 0.0)
        self.assertEqual(params.sill, 0.0)


if __name__ == "__main__":
    absltest.main()
