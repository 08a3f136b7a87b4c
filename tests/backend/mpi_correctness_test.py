# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from absl.testing import absltest
from absl.testing import parameterized

import MaternPy._src.math.numpy as np
from MaternPy import config
from MaternPy._src.gp.kernels.mpi import (
    _matern_05_fn as matern_05_fn_m,
    _matern_15_fn as matern_15_fn_m,
    _matern_25_fn as matern_25_fn_m,
    _matern_gen_fn as matern_gen_fn_m,
)
from MaternPy._src.gp.kernels.numpy import (
    _matern_05_fn as matern_05_fn_n,
    _matern_15_fn as matern_15_fn_n,
    _matern_25_fn as matern_25_fn_n,
    _matern_gen_fn as matern_gen_fn_n,
)
from MaternPy._src.mpi_utils import (
    _get_chunk_sizes,
    _prepare_parallel_data,
)
from MaternPy._test.utils import (
    _consistent_assert,
    _make_gaussian_matrix,
    _make_pairwise_dists,
)

config.parse_flags_with_absl()  # Affords option setting from CLI


class ChunkTest(parameterized.TestCase):
    @parameterized.parameters(
        (
            (count, size)
            for count in [1, 7, 10, 97]
            for size in [1, 2, 3, 8]
        )
    )
    def test_chunk_sizes(self, count, size):
        chunk_sizes = _get_chunk_sizes(count, size)
        self.assertEqual(len(chunk_sizes), size)
        self.assertEqual(sum(chunk_sizes), count)
        self.assertLessEqual(max(chunk_sizes) - min(chunk_sizes), 1)
        self.assertEqual(sorted(chunk_sizes), chunk_sizes)

    def test_prepare_parallel_data(self):
        tensor = np.array([[2 * i, 2 * i + 1] for i in range(10)])
        chunk_sizes = _get_chunk_sizes(10, 3)
        (chunks,) = _prepare_parallel_data(3, chunk_sizes, tensor)
        self.assertEqual([c.shape[0] for c in chunks], chunk_sizes)
        self.assertTrue(np.all(np.vstack(chunks) == tensor))


class KernelTest(parameterized.TestCase):
    @classmethod
    def setUpClass(cls):
        super(KernelTest, cls).setUpClass()
        cls.batch_count = 13
        cls.nn_count = 9
        locs = _make_gaussian_matrix(
            cls.batch_count * cls.nn_count, 3
        ).reshape(cls.batch_count, cls.nn_count, 3)
        if config.mpi_state.comm_world is not None:
            locs = config.mpi_state.comm_world.bcast(locs, root=0)
        cls.pairwise_dists = np.array(
            [_make_pairwise_dists(mat) for mat in locs]
        )

    @parameterized.parameters(
        (
            (fn_n, fn_m)
            for fn_n, fn_m in [
                (matern_05_fn_n, matern_05_fn_m),
                (matern_15_fn_n, matern_15_fn_m),
                (matern_25_fn_n, matern_25_fn_m),
            ]
        )
    )
    def test_closed_forms(self, fn_n, fn_m):
        K_m = fn_m(self.pairwise_dists)
        _consistent_assert(
            self.assertEqual, K_m.shape, self.pairwise_dists.shape
        )
        _consistent_assert(
            self.assertTrue, np.allclose(fn_n(self.pairwise_dists), K_m)
        )

    @parameterized.parameters(s for s in [0.42, 1.0, 3.1, 300.3])
    def test_general_form(self, smoothness):
        K_m = matern_gen_fn_m(self.pairwise_dists, smoothness=smoothness)
        K_n = matern_gen_fn_n(self.pairwise_dists, smoothness=smoothness)
        _consistent_assert(self.assertTrue, np.allclose(K_n, K_m))

    def test_scalar_distance(self):
        dist = np.array(0.7)
        _consistent_assert(
            self.assertTrue,
            np.allclose(matern_15_fn_n(dist), matern_15_fn_m(dist)),
        )


if __name__ == "__main__":
    absltest.main()
