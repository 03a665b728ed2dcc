"""Loss functions for MLX boosting."""

import logging
from typing import Any

from mlx_boost_loss.base import BaseLoss
from mlx_boost_loss.losses.regression import SSELoss

logger = logging.getLogger(__name__)

_LOSSES: dict[str, type[BaseLoss]] = {
    "reg:squarederror": SSELoss,
    "squared_error": SSELoss,
    "sse": SSELoss,
}


def available_losses() -> list[str]:
    """Names accepted by :func:`get_loss`."""
    return sorted(_LOSSES)


def get_loss(objective: str = "reg:squarederror", **params: Any) -> BaseLoss:
    """Create a loss from its objective name.

    Args:
        objective: Objective name, e.g. "reg:squarederror".
        **params: Regularization parameters (``alpha``, ``reg_lambda``).

    Returns:
        Configured loss instance.

    Raises:
        ValueError: If the objective is unknown.
    """
    try:
        loss_cls = _LOSSES[objective]
    except KeyError:
        raise ValueError(
            f"Unknown objective {objective!r}. "
            f"Available: {', '.join(available_losses())}"
        ) from None

    logger.debug(f"Resolved objective {objective!r} to {loss_cls.__name__}")
    return loss_cls(**params)


__all__ = ["SSELoss", "available_losses", "get_loss"]
