"""
Tests for tensorstep.Tensor: shape bookkeeping, reshape and element-wise ops.
"""
import math

import numpy as np
import pytest

import tensorstep as ts
from tensorstep import Tensor, ShapeMismatch, SizeMismatch


def test_from_shape_zero_filled():
    t = Tensor.from_shape([2, 3])
    assert t.size() == 6
    assert t.rank() == 2
    assert t.shape == (2, 3)
    assert t.tolist() == [0.0] * 6
    assert t.dtype is ts.float32


def test_factories_agree():
    a = ts.zeros(2, 3)
    b = ts.zeros((2, 3))
    c = ts.from_shape([2, 3])
    for t in (a, b, c):
        assert t.shape == (2, 3)
        assert t.size() == 6


def test_from_shape_scalar_and_empty():
    scalar = Tensor.from_shape([])
    assert scalar.size() == 1
    assert scalar.rank() == 0
    empty = Tensor.from_shape([3, 0])
    assert empty.size() == 0
    assert empty.shape == (3, 0)


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        Tensor.from_shape([2, -1])


def test_reshape_in_place():
    t = Tensor.from_shape([2, 3])
    out = t.reshape([3, 2])
    assert out is t
    assert t.size() == 6
    assert t.rank() == 2
    assert t.shape == (3, 2)
    t.reshape(6)
    assert t.shape == (6,)
    t.reshape(1, 2, 3)
    assert t.rank() == 3


def test_size_matches_shape_product_after_reshapes():
    t = Tensor.from_shape([4, 3, 2])
    for shape in ([24], [2, 12], [3, 2, 2, 2], [1, 24, 1]):
        t.reshape(shape)
        assert t.size() == math.prod(t.shape)


def test_reshape_mismatch_leaves_tensor_untouched():
    t = Tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [2, 3])
    with pytest.raises(ShapeMismatch) as exc:
        t.reshape([4, 2])
    assert exc.value.size == 6
    assert exc.value.new_size == 8
    assert t.shape == (2, 3)
    assert t.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_shape_mismatch_is_value_error():
    t = Tensor.from_shape([2, 2])
    with pytest.raises(ValueError):
        t.reshape(5)


def test_add():
    t1 = Tensor([1.0, 2.0, 3.0, 4.0], [2, 2])
    t2 = Tensor([5.0, 6.0, 7.0, 8.0], [2, 2])
    t3 = t1.add(t2)
    assert t3.tolist() == [6.0, 8.0, 10.0, 12.0]
    assert t3.shape == (2, 2)
    assert (t1 + t2).tolist() == t3.tolist()


def test_multiply():
    t1 = Tensor([1.0, 2.0, 3.0, 4.0], [2, 2])
    t2 = Tensor([5.0, 6.0, 7.0, 8.0], [2, 2])
    t3 = t1.multiply(t2)
    assert t3.tolist() == [5.0, 12.0, 21.0, 32.0]
    assert t3.shape == (2, 2)
    assert (t1 * t2).tolist() == t3.tolist()


def test_ops_do_not_mutate_operands():
    t1 = Tensor([1.0, 2.0, 3.0], [3])
    t2 = Tensor([4.0, 5.0, 6.0], [3])
    t1 + t2
    t1 * t2
    assert t1.tolist() == [1.0, 2.0, 3.0]
    assert t2.tolist() == [4.0, 5.0, 6.0]


def test_ops_commute():
    rng = np.random.default_rng(0)
    a = Tensor(rng.standard_normal(12), [3, 4])
    b = Tensor(rng.standard_normal(12), [3, 4])
    np.testing.assert_array_equal((a + b).numpy(), (b + a).numpy())
    np.testing.assert_array_equal((a * b).numpy(), (b * a).numpy())


def test_size_mismatch():
    a = Tensor.from_shape([2, 2])
    b = Tensor.from_shape([3])
    with pytest.raises(SizeMismatch):
        a.add(b)
    with pytest.raises(SizeMismatch):
        b.multiply(a)
    with pytest.raises(SizeMismatch) as exc:
        a + b
    assert (exc.value.left, exc.value.right) == (4, 3)


def test_only_sizes_are_checked():
    a = Tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [2, 3])
    b = Tensor([1.0, 1.0, 1.0, 1.0, 1.0, 1.0], [3, 2])
    assert (a + b).shape == (2, 3)
    assert (b + a).shape == (3, 2)


def test_operators_reject_scalars():
    t = Tensor.from_shape([2])
    with pytest.raises(TypeError):
        t + 1.0
    with pytest.raises(TypeError):
        t.add([1.0, 2.0])


def test_construction_does_not_validate_shape():
    # three values declared as 2x2: accepted, size() follows the data
    t = Tensor([1.0, 2.0, 3.0], [2, 2])
    assert t.size() == 3
    assert t.shape == (2, 2)
    u = Tensor([10.0, 20.0, 30.0], [3])
    s = t + u
    assert s.size() == 3
    assert s.shape == (2, 2)
    assert s.tolist() == [11.0, 22.0, 33.0]
    with pytest.raises(SizeMismatch):
        t + Tensor.from_shape([2, 2])


def test_reshape_uses_shape_product_not_data_length():
    t = Tensor([1.0, 2.0, 3.0], [2, 2])
    t.reshape([4, 1])
    assert t.shape == (4, 1)
    with pytest.raises(ShapeMismatch):
        t.reshape([3])


def test_data_is_copied_and_flattened():
    src = np.arange(6, dtype=np.float64).reshape(2, 3)
    t = Tensor(src)
    assert t.shape == (2, 3)
    assert t.dtype is ts.float32
    src[0, 0] = 100.0
    assert t.tolist()[0] == 0.0
    out = t.numpy()
    out[1] = -1.0
    assert t.tolist()[1] == 1.0


def test_explicit_dtype():
    t = ts.tensor([1.0, 2.0], dtype=ts.float64)
    assert t.dtype is ts.float64
    assert (t + ts.tensor([1.0, 1.0], dtype=ts.float64)).dtype is ts.float64


def test_non_float_dtype_rejected():
    with pytest.raises(ValueError):
        ts.tensor([1, 2], dtype="int64")
    with pytest.raises(ValueError):
        Tensor.from_shape([2], dtype=np.bool_)
    t = ts.tensor([1, 2], dtype="float64")
    assert t.dtype is ts.float64
    assert t.numpy().dtype == np.float64


def test_ndarray_shapes_accepted():
    t = ts.zeros(np.array([2, 3]))
    assert t.shape == (2, 3)
    t.reshape(np.array([3, 2]))
    assert t.shape == (3, 2)
    assert Tensor.from_shape(np.array([4])).size() == 4


def test_copy_from_tensor():
    a = Tensor([1.0, 2.0, 3.0, 4.0], [2, 2])
    b = Tensor(a)
    assert b.shape == (2, 2)
    b.reshape(4)
    assert a.shape == (2, 2)
    assert b.tolist() == a.tolist()


def test_repr():
    t = Tensor([1.0, 2.0], [2])
    assert repr(t) == "tensor([1.0, 2.0], shape=(2,))"
