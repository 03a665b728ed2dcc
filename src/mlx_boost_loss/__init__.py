"""MLX Boost Loss - second-order boosting losses on MLX arrays."""

from mlx_boost_loss.base import BaseLoss
from mlx_boost_loss.losses import SSELoss, available_losses, get_loss

__version__ = "1.0.0"
__all__ = [
    "BaseLoss",
    "SSELoss",
    "available_losses",
    "get_loss",
    "__version__",
]
