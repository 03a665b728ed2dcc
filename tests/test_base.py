"""Tests for the loss base class and objective registry."""

import logging

import mlx.core as mx
import numpy as np
import pytest

from mlx_boost_loss import BaseLoss, SSELoss, available_losses, get_loss


class TestRegularization:
    """Tests for regularization parameters."""

    def test_defaults(self) -> None:
        """Test default loss has no regularization."""
        loss = SSELoss()
        assert loss.alpha == 0.0
        assert loss.reg_lambda == 0.0

    def test_explicit(self) -> None:
        """Test positional construction with alpha then lambda."""
        loss = SSELoss(0.5, 2.0)
        assert loss.get_params() == {"alpha": 0.5, "reg_lambda": 2.0}

    @pytest.mark.parametrize(
        "params",
        [
            {"alpha": -1.0},
            {"reg_lambda": -0.1},
            {"alpha": float("nan")},
            {"reg_lambda": float("inf")},
        ],
    )
    def test_invalid(self, params: dict) -> None:
        """Test negative or non-finite parameters are rejected."""
        with pytest.raises(ValueError, match="must be a finite value"):
            SSELoss(**params)

    def test_immutable(self) -> None:
        """Test parameters cannot be reassigned."""
        loss = SSELoss(alpha=1.0)
        with pytest.raises(AttributeError):
            loss.alpha = 2.0
        with pytest.raises(AttributeError):
            loss.reg_lambda = 2.0
        assert loss.alpha == 1.0

    def test_clone(self) -> None:
        """Test clone overrides parameters without touching the original."""
        loss = SSELoss(alpha=1.0, reg_lambda=2.0)
        other = loss.clone(reg_lambda=5.0)
        assert isinstance(other, SSELoss)
        assert other.get_params() == {"alpha": 1.0, "reg_lambda": 5.0}
        assert loss.reg_lambda == 2.0

    def test_equality(self) -> None:
        """Test losses compare by class and parameters."""
        assert SSELoss(1.0, 2.0) == SSELoss(alpha=1.0, reg_lambda=2.0)
        assert SSELoss(1.0, 2.0) != SSELoss(1.0, 3.0)
        assert len({SSELoss(), SSELoss()}) == 1

    def test_repr(self) -> None:
        """Test repr shows the parameters."""
        assert repr(SSELoss(1.0, 2.0)) == "SSELoss(alpha=1.0, reg_lambda=2.0)"

    def test_construction_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test construction emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="mlx_boost_loss"):
            SSELoss(alpha=0.25)
        assert "alpha=0.25" in caplog.text

    def test_abstract(self) -> None:
        """Test the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseLoss()


class TestApplyL1:
    """Tests for L1 soft-thresholding."""

    @pytest.mark.parametrize(
        "value,expected",
        [(5.0, 3.0), (-5.0, -3.0), (1.0, 0.0), (-1.0, 0.0), (2.0, 0.0), (-2.0, 0.0)],
    )
    def test_scalar(self, value: float, expected: float) -> None:
        """Test thresholding of scalars with alpha=2."""
        assert SSELoss(alpha=2.0).apply_l1(value) == pytest.approx(expected)

    def test_no_alpha_is_identity(self) -> None:
        """Test alpha=0 leaves the sum unchanged."""
        assert SSELoss().apply_l1(-6.0) == -6.0
        assert SSELoss().apply_l1(0.0) == 0.0

    def test_array(self) -> None:
        """Test element-wise thresholding of arrays."""
        out = SSELoss(alpha=2.0).apply_l1(mx.array([5.0, -5.0, 1.0, -1.0, 2.0]))
        mx.eval(out)
        assert isinstance(out, mx.array)
        assert mx.allclose(out, mx.array([3.0, -3.0, 0.0, 0.0, 0.0]))

    def test_array_matches_scalar(self) -> None:
        """Test array and scalar paths agree."""
        np.random.seed(42)
        values = np.random.randn(100).astype(np.float32) * 3
        loss = SSELoss(alpha=1.5)
        out = loss.apply_l1(mx.array(values))
        mx.eval(out)
        expected = np.array([loss.apply_l1(float(v)) for v in values])
        assert np.allclose(np.array(out), expected, atol=1e-5)


class TestRegistry:
    """Tests for objective lookup."""

    @pytest.mark.parametrize("name", ["reg:squarederror", "squared_error", "sse"])
    def test_sse_names(self, name: str) -> None:
        """Test all SSE aliases resolve to SSELoss."""
        assert isinstance(get_loss(name), SSELoss)

    def test_default_objective(self) -> None:
        """Test default objective is squared error."""
        loss = get_loss()
        assert isinstance(loss, SSELoss)
        assert loss.objective == "reg:squarederror"

    def test_params_forwarded(self) -> None:
        """Test regularization is passed to the loss."""
        loss = get_loss("sse", alpha=1.0, reg_lambda=2.0)
        assert loss == SSELoss(1.0, 2.0)

    def test_unknown(self) -> None:
        """Test error for unknown objective."""
        with pytest.raises(ValueError, match="Unknown objective"):
            get_loss("binary:logistic")

    def test_available(self) -> None:
        """Test registered names are listed sorted."""
        assert available_losses() == ["reg:squarederror", "squared_error", "sse"]
