"""
Storage -- Backing capability for vector elements

A vector never touches its elements directly. Everything goes through
the narrow VectorStorage interface:
- get/set by index
- length
- structural equality and content hash
- range copy-out into another storage

DenseStorage is the one concrete layout shipped here: a 1-D numpy array.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

import numpy as np
import xxhash

from .errors import InvalidArgument


def same_element(a: Any, b: Any) -> bool:
    """Element equality where NaN matches NaN."""
    if a == b:
        return True
    # NaN is the only value unequal to itself
    return a != a and b != b


class VectorStorage(ABC):
    """
    Abstract storage of a fixed-length run of numeric elements.

    Implementations must keep equals() and content_hash() consistent:
    equal storages report equal hashes.
    """

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Element type of every stored value."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def get(self, index: int) -> Any:
        """Return the element at a non-negative index."""

    @abstractmethod
    def set(self, index: int, value: Any) -> None:
        """Replace the element at a non-negative index."""

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Structural equality: same length, same element type, same elements."""

    @abstractmethod
    def content_hash(self) -> int:
        """Hash derived only from the stored content."""

    @abstractmethod
    def copy(self) -> "VectorStorage":
        """Return an independent storage holding the same elements."""

    def copy_range_to(
        self,
        target: "VectorStorage",
        src_offset: int,
        dest_offset: int,
        count: int
    ) -> None:
        """
        Copy `count` elements starting at `src_offset` into `target`.

        Args:
            target: Destination storage
            src_offset: First source index to copy
            dest_offset: First destination index to write
            count: Number of elements

        Raises:
            InvalidArgument: If target is None or either range is out of bounds
        """
        self._check_range(target, src_offset, dest_offset, count)
        for k in range(count):
            target.set(dest_offset + k, self.get(src_offset + k))

    def to_list(self) -> list:
        """Elements in index order as a plain list."""
        return [self.get(i) for i in range(len(self))]

    def check_index(self, index: int) -> None:
        """Raise IndexError unless 0 <= index < len(self)."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for length {len(self)}")

    def _check_range(self, target, src_offset: int, dest_offset: int, count: int) -> None:
        if target is None:
            raise InvalidArgument("destination must not be None", "target")
        if count < 0:
            raise InvalidArgument(f"count must be non-negative, got {count}", "count")
        if src_offset < 0 or src_offset + count > len(self):
            raise InvalidArgument(
                f"source range [{src_offset}, {src_offset + count}) exceeds length {len(self)}",
                "src_offset"
            )
        if dest_offset < 0 or dest_offset + count > len(target):
            raise InvalidArgument(
                f"destination range [{dest_offset}, {dest_offset + count}) "
                f"exceeds capacity {len(target)}",
                "dest_offset"
            )

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return self.content_hash()


class DenseStorage(VectorStorage):
    """
    Contiguous storage backed by a 1-D numpy array.

    With copy=False an existing ndarray is wrapped in place, so writes
    through the storage are visible to the array's owner. This is how
    bulk copy-out targets a caller-supplied array.
    """

    def __init__(self, data: Iterable, dtype: Optional[Any] = None, copy: bool = True):
        if copy:
            array = np.array(data, dtype=dtype)
        else:
            array = np.asarray(data, dtype=dtype)

        if array.ndim != 1:
            raise InvalidArgument(
                f"storage must be one-dimensional, got {array.ndim} dimensions", "data"
            )
        if not (np.issubdtype(array.dtype, np.number) or array.dtype == np.bool_):
            raise InvalidArgument(
                f"storage elements must be numeric, got dtype '{array.dtype}'", "data"
            )

        self.data = array

    @classmethod
    def zeros(cls, length: int, dtype: Any = np.float64) -> "DenseStorage":
        """Create storage of `length` zero elements."""
        return cls(np.zeros(length, dtype=dtype), copy=False)

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def __len__(self) -> int:
        return self.data.shape[0]

    def get(self, index: int) -> Any:
        self.check_index(index)
        return self.data[index]

    def set(self, index: int, value: Any) -> None:
        self.check_index(index)
        self.data[index] = value

    def equals(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, VectorStorage):
            return False
        if len(self) != len(other) or self.dtype != other.dtype:
            return False
        if isinstance(other, DenseStorage):
            return bool(np.array_equal(
                self.data, other.data, equal_nan=np.issubdtype(self.dtype, np.inexact)
            ))
        return all(same_element(self.data[i], other.get(i)) for i in range(len(self)))

    def content_hash(self) -> int:
        normalized = self.data
        # -0.0 == 0.0 but their bytes differ
        if np.issubdtype(self.dtype, np.inexact):
            normalized = normalized + self.dtype.type(0)
            # NaN equals NaN, so every NaN hashes with one bit pattern
            normalized[np.isnan(normalized)] = np.nan

        h = xxhash.xxh64()
        h.update(self.dtype.str.encode())
        h.update(np.ascontiguousarray(normalized).tobytes())
        return h.intdigest()

    def copy(self) -> "DenseStorage":
        return DenseStorage(self.data, copy=True)

    def copy_range_to(
        self,
        target: VectorStorage,
        src_offset: int,
        dest_offset: int,
        count: int
    ) -> None:
        if not isinstance(target, DenseStorage):
            super().copy_range_to(target, src_offset, dest_offset, count)
            return

        self._check_range(target, src_offset, dest_offset, count)
        target.data[dest_offset:dest_offset + count] = self.data[src_offset:src_offset + count]

    def to_list(self) -> list:
        return self.data.tolist()

    def __repr__(self) -> str:
        return f"DenseStorage(length={len(self)}, dtype={self.dtype})"
