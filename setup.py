# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup


INSTALL_REQUIRES = [
    "numpy>=1.21.0",
    "scipy>=1.7.0",
]

TEST_REQUIRES = [
    "absl-py>=0.13.0",
    "scikit-learn>=1.0.0",
]

DEV_REQUIRES = [
    "black>=21.1.0",
    "build>=0.7.0",
    "mypy>=0.910",
    "twine>=3.7.1",
]

JAX_REQUIRES = [
    "tensorflow-probability[jax]>=0.16.0",
]

JAX_CPU_REQUIRES = [
    "jax[cpu]>=0.2.26",
]

MPI_REQUIRES = [
    "mpi4py>=3.1.3",
]

TORCH_REQUIRES = [
    "torch>=1.13.0",
]

setup(
    name="MaternPy",
    version="0.1.0",
    description="Matérn covariance kernels for numpy, jax, torch and MPI.",
    license="MIT",
    packages=find_packages(include=["MaternPy", "MaternPy.*"]),
    python_requires=">=3.8",
    install_requires=INSTALL_REQUIRES,
    extras_require={
        "dev": DEV_REQUIRES + TEST_REQUIRES,
        "tests": TEST_REQUIRES,
        "jax_cpu": JAX_CPU_REQUIRES + JAX_REQUIRES,
        "mpi": MPI_REQUIRES,
        "torch": TORCH_REQUIRES,
    },
)
