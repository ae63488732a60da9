"""Tests for factories, numpy/torch conversion and text formatting."""

import io
import pytest
import numpy as np
import tensorlib as tl


class TestFactoryFunctions:
    """Tests for factory functions."""

    def test_tensor(self):
        data = [[1.0, 2.0], [3.0, 4.0]]
        x = tl.tensor(data)
        assert x.shape == (2, 2)
        assert x.dtype == tl.float64
        np.testing.assert_array_equal(x.numpy(), np.array(data))

    def test_tensor_scalar(self):
        x = tl.tensor(5)
        assert x.shape == (1,)
        assert x.at([0]) == 5

    def test_zeros(self):
        x = tl.zeros(2, 3)
        assert x.shape == (2, 3)
        np.testing.assert_array_equal(x.numpy(), np.zeros((2, 3)))
        assert tl.zeros((4,), dtype=tl.int64).shape == (4,)

    def test_from_numpy(self):
        arr = np.arange(6, dtype=np.int32).reshape(2, 3)
        x = tl.from_numpy(arr)
        assert x.shape == (2, 3)
        assert x.dtype == tl.int32
        assert x.at([1, 1]) == 4
        np.testing.assert_array_equal(tl.to_numpy(x), arr)


class TestTorch:
    """Tests for torch conversion."""

    def test_round_trip(self):
        torch = pytest.importorskip("torch")
        t = torch.arange(12, dtype=torch.float32).reshape(3, 4)
        x = tl.from_torch(t)
        assert x.shape == (3, 4)
        assert x.dtype == tl.float32
        assert x.at([2, 3]) == 11.0
        back = tl.to_torch(x.element_wise_apply(lambda v: v * 2))
        assert torch.equal(back, t * 2)

    def test_object_dtype_rejected(self):
        pytest.importorskip("torch")
        x = tl.Tensor([1], [tl.Complex(1.0, 1.0)], dtype=tl.object_)
        with pytest.raises(TypeError):
            tl.to_torch(x)


class TestFormatting:
    """Tests for text dumps."""

    def test_format_dimensions(self, matrix):
        assert tl.format_dimensions(matrix) == "Shape: (2, 3), strides: (3, 1), elements: 6"

    def test_format_tensor(self, matrix):
        assert tl.format_tensor(matrix) == "[[1 2 3]\n [4 5 6]]"

    def test_print_functions_write_stdout(self, matrix, capsys):
        """Printing works without any logging setup."""
        tl.print_dimensions(matrix)
        tl.print_tensor(matrix)
        out = capsys.readouterr().out
        assert "Shape: (2, 3)" in out
        assert "[4 5 6]" in out

    def test_print_to_stream(self, matrix):
        stream = io.StringIO()
        tl.print_tensor(matrix, stream=stream)
        assert stream.getvalue() == "[[1 2 3]\n [4 5 6]]\n"
