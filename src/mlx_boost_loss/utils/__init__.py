"""Utilities for MLX boosting losses."""

from mlx_boost_loss.utils.data import (
    check_inclusive_range,
    check_same_length,
    to_mlx_array,
)

__all__ = ["to_mlx_array", "check_same_length", "check_inclusive_range"]
