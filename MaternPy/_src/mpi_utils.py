# Copyright 2021-2023 Lawrence Livermore National Security, LLC and other
# MaternPy Project Developers. See the top-level COPYRIGHT file for details.
#
# SPDX-License-Identifier: MIT

import warnings

import numpy as np

from MaternPy import config

world = config.mpi_state.comm_world
if world is not None:
    rank = config.mpi_state.comm_world.Get_rank()
    size = config.mpi_state.comm_world.Get_size()
else:
    rank = 0
    size = 1


def _get_chunk_sizes(count: int, size: int):
    floor = int(count / size)
    remainder = count - floor * size
    return [
        floor + 1 if i >= (size - remainder) else floor for i in range(size)
    ]


def _prepare_parallel_data(size, chunk_sizes, *args):
    count = len(args)
    ret = [list() for _ in range(count)]
    offsets = np.array(
        [np.sum(chunk_sizes[:i]) for i in range(size)], dtype=int
    )
    for i in range(size):
        for j, arg in enumerate(args):
            ret[j].append(arg[offsets[i] : offsets[i] + chunk_sizes[i]])
    return ret


def _big_scatter(chunks, root=0):
    """
    Based upon this reply from a mpi4py dev
    https://github.com/mpi4py/mpi4py/issues/119#issuecomment-945390731
    """
    if size == 1:
        my_chunk = chunks[0]
    elif rank == root:
        for i, chunk in enumerate(chunks):
            if i == root:
                my_chunk = chunk
            else:
                world.send(chunk, dest=i)
    else:
        my_chunk = world.recv(source=root)
    return my_chunk


def _chunk_tensor(tensor, root=0):
    """
    Scatter the leading dimension of a tensor across all cores.

    Only the root core's `tensor` is read. Chunk sizes differ by at most one
    row, with the larger chunks on the higher ranks.

    Args:
        tensor:
            A tensor of shape `(row_count, ...)`.
        root:
            The rank that owns the tensor to be scattered.

    Returns:
        This core's contiguous chunk of rows.
    """
    if rank == root:
        chunk_sizes = _get_chunk_sizes(tensor.shape[0], size)
        (chunks,) = _prepare_parallel_data(size, chunk_sizes, tensor)
    else:
        chunks = None
    return _big_scatter(chunks, root=root)


def _consistent_unchunk_tensor(tensor) -> np.ndarray:
    """
    If we are using an MPI implementation, allgather the tensor across all
    cores. Otherwise NOOP.

    Args:
        tensor:
            A tensor, which might be a simple serial tensors or distributed
            chunks if it is the product of the mpi implementation.

    Return:
        The same tensor if a serial implementation, else an allgathered tensor
        of the distributed chunks.
    """
    if tensor is None:
        return tensor
    if _is_mpi_mode() is True:
        if len(tensor.shape) > 1:
            return np.vstack(config.mpi_state.comm_world.allgather(tensor))
        else:
            return np.concatenate(config.mpi_state.comm_world.allgather(tensor))
    else:
        return tensor


def _consistent_chunk_tensor(tensor) -> np.ndarray:
    if _is_mpi_mode() is True:
        return _chunk_tensor(tensor)
    else:
        return tensor


def _is_mpi_mode() -> bool:
    return (
        config.state.backend == "mpi"
        and config.state.mpi_enabled is True
        and world is not None
    )


def _warn0(*args, **kwargs):
    """
    Issue a warning from the root core only.

    Accepts the same arguments as :func:`warnings.warn`. `stacklevel` defaults
    to pointing at the caller of the function that invoked `_warn0`.
    """
    if rank == 0:
        kwargs.setdefault("stacklevel", 3)
        warnings.warn(*args, **kwargs)
