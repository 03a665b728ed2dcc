"""Base class for MLX boosting loss functions."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import mlx.core as mx
import numpy as np

from mlx_boost_loss.utils.data import (
    check_inclusive_range,
    check_same_length,
    to_mlx_array,
)

logger = logging.getLogger(__name__)


class BaseLoss(ABC):
    """Abstract base class for second-order boosting losses.

    A loss is a stateless bundle of operations parameterized by L1 (``alpha``)
    and L2 (``reg_lambda``) regularization, both fixed at construction. The
    tree builder calls it at every node to get gradients, leaf values and
    split scores.

    Subclasses implement the per-sample derivatives; the regularized leaf
    value and similarity score are derived from them here.

    Args:
        alpha: L1 regularization on the leaf gradient sum. Default is 0.0.
        reg_lambda: L2 regularization added to the leaf Hessian sum.
            Default is 0.0.

    Raises:
        ValueError: If either parameter is negative or not finite.
    """

    objective: str = ""

    def __init__(self, alpha: float = 0.0, reg_lambda: float = 0.0) -> None:
        for name, value in (("alpha", alpha), ("reg_lambda", reg_lambda)):
            if not np.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite value >= 0, got {value}")

        self._alpha = float(alpha)
        self._reg_lambda = float(reg_lambda)
        logger.debug(
            f"Created {type(self).__name__} with alpha={self._alpha}, "
            f"reg_lambda={self._reg_lambda}"
        )

    @property
    def alpha(self) -> float:
        """L1 regularization parameter."""
        return self._alpha

    @property
    def reg_lambda(self) -> float:
        """L2 regularization parameter."""
        return self._reg_lambda

    @abstractmethod
    def initial_prediction(self, values: mx.array) -> float:
        """Constant base prediction of the ensemble."""

    @abstractmethod
    def gradients(self, observed: mx.array, values: mx.array) -> mx.array:
        """First derivative of the loss with respect to ``values``."""

    @abstractmethod
    def hessians(self, observed: mx.array, values: mx.array) -> mx.array:
        """Second derivative of the loss with respect to ``values``."""

    @abstractmethod
    def residuals(self, observed: mx.array, f: mx.array) -> mx.array:
        """Pseudo-residuals (negative gradient) at the current prediction."""

    @abstractmethod
    def loss(self, observed: mx.array, values: mx.array) -> float:
        """Total loss of ``values`` against ``observed``."""

    def apply_l1(self, sum_gradients: float | mx.array) -> float | mx.array:
        """Soft-threshold a gradient sum by ``alpha``.

        Returns ``s - alpha`` if ``s > alpha``, ``s + alpha`` if
        ``s < -alpha`` and 0 otherwise. Arrays are thresholded element-wise.

        Args:
            sum_gradients: Gradient sum, as a scalar or an MLX array.

        Returns:
            Shrunk value, with the same kind (float or array) as the input.
        """
        alpha = self._alpha
        if isinstance(sum_gradients, mx.array):
            s = sum_gradients
            return mx.where(
                s > alpha,
                s - alpha,
                mx.where(s < -alpha, s + alpha, mx.zeros_like(s)),
            )

        s = float(sum_gradients)
        if s > alpha:
            return s - alpha
        if s < -alpha:
            return s + alpha
        return 0.0

    def output_value(
        self,
        gradients: mx.array | np.ndarray | list,
        hessians: mx.array | np.ndarray | list,
    ) -> float:
        """Compute the regularized optimal leaf value.

        Uses the formula: w* = -L1(G) / (H + λ)

        Callers must keep ``H + λ`` non-zero, either with ``reg_lambda > 0``
        or with non-empty leaves.

        Args:
            gradients: Gradients of the samples in the leaf.
            hessians: Hessians of the samples in the leaf.

        Returns:
            Leaf output value.
        """
        gradients = to_mlx_array(gradients)
        hessians = to_mlx_array(hessians)
        check_same_length(gradients, hessians)

        value = -self.apply_l1(mx.sum(gradients)) / (
            mx.sum(hessians) + self._reg_lambda
        )
        mx.eval(value)
        return float(value)

    def similarity_score(
        self,
        observed: mx.array | np.ndarray | list,
        residuals: mx.array | np.ndarray | list,
        begin: int,
        end: int,
    ) -> float:
        """Compute the similarity score of the samples in ``[begin, end]``.

        Uses the formula: S = L1(G)² / (H + λ), where G and H are the
        gradient and Hessian sums over the inclusive range. The score is
        never negative, so it can be compared across candidate splits.

        Args:
            observed: True observed values.
            residuals: Values the gradients are taken with respect to,
                index-aligned with ``observed``.
            begin: First index of the range.
            end: Last index of the range (inclusive).

        Returns:
            Similarity score.

        Raises:
            ValueError: If the sequences are not aligned or the range is
                invalid.
        """
        observed = to_mlx_array(observed).reshape(-1)
        residuals = to_mlx_array(residuals).reshape(-1)
        check_same_length(observed, residuals)
        check_inclusive_range(begin, end, observed.size)

        observed = observed[begin : end + 1]
        residuals = residuals[begin : end + 1]
        gradients = self.gradients(observed, residuals)
        hessians = self.hessians(observed, residuals)

        score = self.apply_l1(mx.sum(gradients)) ** 2 / (
            mx.sum(hessians) + self._reg_lambda
        )
        mx.eval(score)
        return float(score)

    def split_gain(
        self,
        observed: mx.array | np.ndarray | list,
        residuals: mx.array | np.ndarray | list,
        begin: int,
        split: int,
        end: int,
    ) -> float:
        """Compute the gain of splitting ``[begin, end]`` after ``split``.

        Gain = S(begin, split) + S(split + 1, end) - S(begin, end)

        Args:
            observed: True observed values.
            residuals: Values the gradients are taken with respect to.
            begin: First index of the parent range.
            split: Last index of the left child.
            end: Last index of the parent range (inclusive).

        Returns:
            Split gain.

        Raises:
            ValueError: If ``split`` does not leave both children non-empty.
        """
        if not begin <= split < end:
            raise ValueError(
                f"split must satisfy begin <= split < end, "
                f"got begin={begin}, split={split}, end={end}"
            )
        observed = to_mlx_array(observed).reshape(-1)
        residuals = to_mlx_array(residuals).reshape(-1)

        left = self.similarity_score(observed, residuals, begin, split)
        right = self.similarity_score(observed, residuals, split + 1, end)
        parent = self.similarity_score(observed, residuals, begin, end)
        return left + right - parent

    def get_params(self) -> dict[str, Any]:
        """Get regularization parameters of this loss.

        Returns:
            Parameter names mapped to their values.
        """
        return {"alpha": self._alpha, "reg_lambda": self._reg_lambda}

    def clone(self, **params: Any) -> "BaseLoss":
        """Create a copy of this loss with some parameters replaced.

        Args:
            **params: Parameters to override.

        Returns:
            New loss of the same class.
        """
        return type(self)(**{**self.get_params(), **params})

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alpha={self._alpha}, "
            f"reg_lambda={self._reg_lambda})"
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.get_params() == other.get_params()

    def __hash__(self) -> int:
        return hash((type(self), self._alpha, self._reg_lambda))
