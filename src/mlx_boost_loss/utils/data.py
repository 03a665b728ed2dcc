"""Data utilities for MLX boosting losses."""

import mlx.core as mx
import numpy as np


def to_mlx_array(data: np.ndarray | mx.array | list | float | int) -> mx.array:
    """Convert input data to a float32 MLX array.

    Python scalars become 0-d arrays so that scalar and vector inputs
    go through the same loss operations.

    Args:
        data: Input data as MLX array, numpy array, list or scalar.

    Returns:
        MLX array of dtype float32.

    Raises:
        TypeError: If input type is not supported.
    """
    if isinstance(data, mx.array):
        return data.astype(mx.float32)
    if isinstance(data, np.ndarray):
        return mx.array(data.astype(np.float32))
    if isinstance(data, (list, tuple)):
        return mx.array(np.asarray(data, dtype=np.float32))
    if isinstance(data, (int, float, np.number)) and not isinstance(data, bool):
        return mx.array(float(data), dtype=mx.float32)
    raise TypeError(f"Unsupported data type: {type(data)}")


def check_same_length(observed: mx.array, values: mx.array) -> None:
    """Check that two sequences are index-aligned.

    Raises:
        ValueError: If the element counts differ.
    """
    if observed.size != values.size:
        raise ValueError(
            f"observed and values must have the same length, "
            f"got {observed.size} and {values.size}"
        )


def check_inclusive_range(begin: int, end: int, length: int) -> None:
    """Check that ``[begin, end]`` is a valid inclusive index range.

    Raises:
        ValueError: If ``begin > end`` or either index is out of bounds.
    """
    if begin < 0 or end >= length or begin > end:
        raise ValueError(
            f"Invalid range [{begin}, {end}] for sequence of length {length}"
        )
