"""
Tests for vector storage -- the narrow backing interface

These tests validate:
- DenseStorage construction rules and element access
- Structural equality and content hash agree
- Range copy-out, both the array fast path and the generic loop
"""

import numpy as np
import pytest

from numvec.core.errors import InvalidArgument
from numvec.core.storage import DenseStorage, VectorStorage


class ListStorage(VectorStorage):
    """Minimal storage over a Python list, for the generic code paths."""

    def __init__(self, values, dtype=np.float64):
        self.values = list(values)
        self._dtype = np.dtype(dtype)

    @property
    def dtype(self):
        return self._dtype

    def __len__(self):
        return len(self.values)

    def get(self, index):
        self.check_index(index)
        return self.values[index]

    def set(self, index, value):
        self.check_index(index)
        self.values[index] = value

    def equals(self, other):
        if not isinstance(other, VectorStorage):
            return False
        return (len(self) == len(other) and self.dtype == other.dtype
                and all(self.get(i) == other.get(i) for i in range(len(self))))

    def content_hash(self):
        return hash((self._dtype.str, tuple(float(v) for v in self.values)))

    def copy(self):
        return ListStorage(self.values, self._dtype)


class TestDenseStorageConstruction:
    """Accepted and rejected inputs."""

    def test_from_list(self):
        """A list of numbers becomes a 1-D array."""
        storage = DenseStorage([1, 2, 3], dtype=np.int64)
        assert len(storage) == 3
        assert storage.dtype == np.dtype("int64")

    def test_copies_by_default(self):
        """The source array is not shared unless copy=False."""
        source = np.array([1.0, 2.0])
        storage = DenseStorage(source)
        storage.set(0, 9.0)
        assert source[0] == 1.0

    def test_wraps_without_copy(self):
        """copy=False writes through to the caller's array."""
        source = np.array([1.0, 2.0])
        storage = DenseStorage(source, copy=False)
        storage.set(0, 9.0)
        assert source[0] == 9.0

    def test_rejects_two_dimensional(self):
        """Only 1-D data is storage."""
        with pytest.raises(InvalidArgument) as exc_info:
            DenseStorage(np.zeros((2, 2)))
        assert exc_info.value.param == "data"

    def test_rejects_non_numeric(self):
        """Strings are not numeric elements."""
        with pytest.raises(InvalidArgument):
            DenseStorage(["a", "b"])

    def test_bool_is_allowed(self):
        """Booleans count as numeric."""
        assert DenseStorage([True, False]).dtype == np.dtype(bool)

    def test_zeros(self):
        """zeros() gives the requested length and type."""
        storage = DenseStorage.zeros(4, np.int32)
        assert storage.to_list() == [0, 0, 0, 0]
        assert storage.dtype == np.dtype("int32")


class TestDenseStorageAccess:
    """get/set and bounds."""

    def test_get_set(self):
        """set() replaces, get() reads back."""
        storage = DenseStorage([1.0, 2.0, 3.0])
        storage.set(1, 5.0)
        assert storage.get(1) == 5.0

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range(self, index):
        """Storage indices are non-negative and below the length."""
        storage = DenseStorage([1.0, 2.0, 3.0])
        with pytest.raises(IndexError):
            storage.get(index)
        with pytest.raises(IndexError):
            storage.set(index, 0.0)

    def test_to_list_gives_python_numbers(self):
        """to_list() converts numpy scalars."""
        values = DenseStorage([1.5, 2.5]).to_list()
        assert values == [1.5, 2.5]
        assert all(type(v) is float for v in values)


class TestEqualityAndHash:
    """Structural equality and a hash consistent with it."""

    def test_equal_content_equal_hash(self):
        """Separate storages with the same elements agree."""
        a = DenseStorage([1.0, 2.0, 3.0])
        b = DenseStorage([1.0, 2.0, 3.0])
        assert a.equals(b)
        assert a == b
        assert a.content_hash() == b.content_hash()

    def test_different_element(self):
        """One differing element breaks equality."""
        assert not DenseStorage([1.0, 2.0]).equals(DenseStorage([1.0, 2.5]))

    def test_different_length(self):
        """Prefix is not equal."""
        assert not DenseStorage([1.0, 2.0]).equals(DenseStorage([1.0]))

    def test_different_dtype(self):
        """Same numbers in another element type are not equal."""
        assert not DenseStorage([1, 2], dtype=np.int64).equals(DenseStorage([1.0, 2.0]))

    def test_non_storage(self):
        """Non-storages are never equal."""
        storage = DenseStorage([1.0])
        assert not storage.equals(None)
        assert not storage.equals([1.0])

    def test_signed_zero(self):
        """-0.0 and 0.0 are equal and hash alike."""
        a = DenseStorage([0.0, 1.0])
        b = DenseStorage([-0.0, 1.0])
        assert a.equals(b)
        assert a.content_hash() == b.content_hash()

    def test_nan_matches_nan(self):
        """NaN equals NaN whatever its sign bit, and hashes alike."""
        a = DenseStorage([1.0, np.nan])
        b = DenseStorage([1.0, -np.nan])
        assert a.equals(b)
        assert a.content_hash() == b.content_hash()
        assert a.equals(ListStorage([1.0, float("nan")]))

    def test_hash_follows_mutation(self):
        """The hash is recomputed from current content."""
        storage = DenseStorage([1.0, 2.0])
        before = storage.content_hash()
        storage.set(0, 7.0)
        assert storage.content_hash() != before

    def test_dense_equals_other_storage(self):
        """Equality works across storage implementations."""
        dense = DenseStorage([1.0, 2.0])
        assert dense.equals(ListStorage([1.0, 2.0]))
        assert ListStorage([1.0, 2.0]).equals(dense)


class TestCopy:
    """copy() and copy_range_to()."""

    def test_copy_is_independent(self):
        """Mutating a copy leaves the original alone."""
        original = DenseStorage([1.0, 2.0])
        duplicate = original.copy()
        duplicate.set(0, 9.0)
        assert original.get(0) == 1.0
        assert duplicate.dtype == original.dtype

    def test_copy_range_dense(self):
        """Fast path between two dense storages."""
        source = DenseStorage([1.0, 2.0, 3.0, 4.0])
        target = DenseStorage.zeros(5)
        source.copy_range_to(target, 1, 2, 3)
        assert target.to_list() == [0.0, 0.0, 2.0, 3.0, 4.0]

    def test_copy_range_generic(self):
        """Other targets go through get/set."""
        source = DenseStorage([1.0, 2.0, 3.0])
        target = ListStorage([0.0] * 4)
        source.copy_range_to(target, 0, 1, 3)
        assert target.values == [0.0, 1.0, 2.0, 3.0]

    def test_zero_count_is_noop(self):
        """Copying nothing succeeds and writes nothing."""
        target = DenseStorage.zeros(2)
        DenseStorage([5.0]).copy_range_to(target, 0, 2, 0)
        assert target.to_list() == [0.0, 0.0]

    def test_none_target(self):
        """None target is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            DenseStorage([1.0]).copy_range_to(None, 0, 0, 1)
        assert exc_info.value.param == "target"

    def test_target_too_small(self):
        """Destination overflow is rejected before writing."""
        target = DenseStorage.zeros(2)
        with pytest.raises(InvalidArgument) as exc_info:
            DenseStorage([1.0, 2.0, 3.0]).copy_range_to(target, 0, 0, 3)
        assert exc_info.value.param == "dest_offset"
        assert target.to_list() == [0.0, 0.0]

    def test_source_range_too_long(self):
        """Reading past the source end is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            DenseStorage([1.0, 2.0]).copy_range_to(DenseStorage.zeros(5), 1, 0, 2)
        assert exc_info.value.param == "src_offset"

    def test_negative_count(self):
        """Negative counts are rejected."""
        with pytest.raises(InvalidArgument):
            DenseStorage([1.0]).copy_range_to(DenseStorage.zeros(1), 0, 0, -1)
