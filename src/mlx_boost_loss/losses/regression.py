"""Regression loss functions."""

import mlx.core as mx
import numpy as np

from mlx_boost_loss.base import BaseLoss
from mlx_boost_loss.utils.data import check_same_length, to_mlx_array


class SSELoss(BaseLoss):
    """Sum of Squared Errors loss for XGBoost regression trees.

    Measures the quality of the predictions in each tree node and is
    minimized during training:

        L = 1/2 * (observed - predicted)^2

    Args:
        alpha: L1 regularization. Default is 0.0.
        reg_lambda: L2 regularization. Default is 0.0.

    Example:
        >>> import mlx.core as mx
        >>> from mlx_boost_loss import SSELoss
        >>> loss = SSELoss(reg_lambda=2.0)
        >>> y = mx.array([1.0, 2.0, 3.0, 4.0])
        >>> loss.similarity_score(y, mx.ones(4), 0, 3)
        6.0
    """

    objective = "reg:squarederror"

    def initial_prediction(self, values: mx.array | np.ndarray | list) -> float:
        """Compute the initial prediction for gradient boosting.

        Args:
            values: Target values.

        Returns:
            Mean of ``values``, or 0.0 if ``values`` is empty.
        """
        values = to_mlx_array(values)
        if values.size == 0:
            return 0.0

        mean = mx.mean(values)
        mx.eval(mean)
        return float(mean)

    def gradients(
        self,
        observed: mx.array | np.ndarray | list,
        values: mx.array | np.ndarray | list,
    ) -> mx.array:
        """Compute gradient of SSE loss.

        Positive where the values overshoot the observations.

        Args:
            observed: True observed values.
            values: Values the gradient is taken with respect to.

        Returns:
            ``values - observed``.
        """
        observed = to_mlx_array(observed)
        values = to_mlx_array(values)
        check_same_length(observed, values)
        return values - observed

    def hessians(
        self,
        observed: mx.array | np.ndarray | list,
        values: mx.array | np.ndarray | list,
    ) -> mx.array:
        """Compute hessian of SSE loss.

        Args:
            observed: True observed values (unused).
            values: Values the hessian is taken with respect to.

        Returns:
            Hessian (constant 1 for SSE), shaped like ``values``.
        """
        return mx.ones_like(to_mlx_array(values))

    def residuals(
        self,
        observed: mx.array | np.ndarray | list,
        f: mx.array | np.ndarray | list,
    ) -> mx.array:
        """Compute the pseudo residuals of the predictions.

        Args:
            observed: True observed values.
            f: Prediction at the current step of boosting.

        Returns:
            ``observed - f``, the negative gradient.
        """
        observed = to_mlx_array(observed)
        f = to_mlx_array(f)
        check_same_length(observed, f)
        return observed - f

    def loss(
        self,
        observed: mx.array | np.ndarray | list,
        values: mx.array | np.ndarray | list,
    ) -> float:
        """Compute SSE loss.

        Args:
            observed: True observed values.
            values: Predicted values.

        Returns:
            Half the sum of squared errors.
        """
        observed = to_mlx_array(observed)
        values = to_mlx_array(values)
        check_same_length(observed, values)

        sse = 0.5 * mx.sum((observed - values) ** 2)
        mx.eval(sse)
        return float(sse)
