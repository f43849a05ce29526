"""
Vector -- Fixed-size numeric vector over pluggable storage

One class carries every view of the vector:
- Value semantics: equality and hash come from storage content only
- Sequence view: indexing, membership, lazy enumeration
- Fixed size: insert/remove/add always raise UnsupportedOperation
- Bulk copy-out into a caller-supplied array, list or storage
- Text description: type string and column-wise value layout

Element replacement (v[i] = x) is allowed and goes straight to storage.
No locking is done; concurrent writers must be serialized by the caller.
"""

import numbers
import operator
from collections.abc import Sequence
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING

import numpy as np

from .errors import InvalidArgument, UnsupportedOperation
from .storage import DenseStorage, VectorStorage, same_element

if TYPE_CHECKING:
    from ..output.layout import Grid


def is_element(value: Any) -> bool:
    """True if value can be compared against vector elements."""
    return isinstance(value, (numbers.Number, np.number, np.bool_))


class Vector(Sequence):
    """
    Numeric vector of fixed length backed by a VectorStorage.

    Two vectors are equal when their storages hold the same elements
    of the same type at the same positions. Identity doesn't matter.
    """

    def __init__(self, storage: VectorStorage):
        if not isinstance(storage, VectorStorage):
            raise InvalidArgument(
                f"expected a VectorStorage, got {type(storage).__name__}", "storage"
            )
        self._storage = storage

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def storage(self) -> VectorStorage:
        """Backing storage shared by every view of this vector."""
        return self._storage

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def kind(self) -> str:
        """Vector kind shown in the type string (e.g. 'DenseVector')."""
        return type(self).__name__

    @property
    def is_read_only(self) -> bool:
        # Elements can be replaced in place, only the length is fixed
        return False

    @property
    def is_fixed_size(self) -> bool:
        return True

    @property
    def is_synchronized(self) -> bool:
        return False

    @property
    def sync_root(self) -> VectorStorage:
        """Object callers should lock on when sharing the vector across threads."""
        return self._storage

    def __len__(self) -> int:
        return len(self._storage)

    # =========================================================================
    # Element Access
    # =========================================================================

    def _normalize(self, index: Any) -> int:
        index = operator.index(index)
        if index < 0:
            index += len(self)
        return index

    def get(self, index: int) -> Any:
        """Element at index (negative indices count from the end)."""
        return self._storage.get(self._normalize(index))

    def set(self, index: int, value: Any) -> None:
        """Replace the element at index."""
        self._storage.set(self._normalize(index), value)

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return [self._storage.get(i) for i in range(*index.indices(len(self)))]
        return self.get(index)

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            positions = range(*index.indices(len(self)))
            values = list(value)
            if len(values) != len(positions):
                raise UnsupportedOperation("resizing slice assignment")
            # Convert everything before the first write
            converted = np.asarray(values, dtype=self.dtype)
            for i, v in zip(positions, converted):
                self._storage.set(i, v)
            return
        self.set(index, value)

    def __delitem__(self, index: Any) -> None:
        raise UnsupportedOperation("remove_at")

    # =========================================================================
    # Search
    # =========================================================================

    def index_of(self, item: Any) -> int:
        """
        Index of the first element equal to item.

        Returns -1 when nothing matches or item isn't a number.
        """
        if not is_element(item):
            return -1
        for i, value in enumerate(self.enumerate()):
            if same_element(value, item):
                return i
        return -1

    def contains(self, item: Any) -> bool:
        """True if any element equals item. Non-numbers are never contained."""
        return self.index_of(item) >= 0

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    # =========================================================================
    # Fixed Size
    # =========================================================================

    def insert(self, index: int, value: Any) -> None:
        raise UnsupportedOperation("insert")

    def remove_at(self, index: int) -> None:
        raise UnsupportedOperation("remove_at")

    def add(self, value: Any) -> None:
        raise UnsupportedOperation("add")

    def append(self, value: Any) -> None:
        raise UnsupportedOperation("append")

    def extend(self, values: Any) -> None:
        raise UnsupportedOperation("extend")

    def remove(self, value: Any) -> None:
        raise UnsupportedOperation("remove")

    def pop(self, index: int = -1) -> Any:
        raise UnsupportedOperation("pop")

    # =========================================================================
    # Copy-Out
    # =========================================================================

    def copy_to(self, dest: Any, dest_offset: int = 0) -> None:
        """
        Copy every element into dest, starting at dest_offset.

        Args:
            dest: 1-D numpy array, list, Vector or VectorStorage
            dest_offset: First destination index to write

        Raises:
            InvalidArgument: If dest is None, not one-dimensional, of an
                incompatible element type, or too small
        """
        if dest is None:
            raise InvalidArgument("destination must not be None", "dest")

        if isinstance(dest, Vector):
            target = dest.storage
            self._check_element_type(target.dtype)
        elif isinstance(dest, VectorStorage):
            target = dest
            self._check_element_type(target.dtype)
        elif isinstance(dest, np.ndarray):
            target = self._wrap_array(dest)
        elif isinstance(dest, list):
            self._copy_to_list(dest, dest_offset)
            return
        else:
            raise InvalidArgument(
                f"unsupported destination type {type(dest).__name__}", "dest"
            )

        self._storage.copy_range_to(target, 0, dest_offset, len(self))

    def _wrap_array(self, array: np.ndarray) -> DenseStorage:
        if array.ndim != 1:
            raise InvalidArgument(
                f"destination must be one-dimensional, got {array.ndim} dimensions", "dest"
            )
        if not array.flags.writeable:
            raise InvalidArgument("destination array is read-only", "dest")
        self._check_element_type(array.dtype)
        return DenseStorage(array, copy=False)

    def _check_element_type(self, dtype: np.dtype) -> None:
        if not np.can_cast(self.dtype, dtype, casting="same_kind"):
            raise InvalidArgument(
                f"cannot copy {self.dtype} elements into a {dtype} destination", "dest"
            )

    def _copy_to_list(self, dest: list, dest_offset: int) -> None:
        count = len(self)
        if dest_offset < 0 or dest_offset + count > len(dest):
            raise InvalidArgument(
                f"destination range [{dest_offset}, {dest_offset + count}) "
                f"exceeds capacity {len(dest)}",
                "dest_offset"
            )
        dest[dest_offset:dest_offset + count] = self._storage.to_list()

    # =========================================================================
    # Enumeration
    # =========================================================================

    def enumerate(self) -> Iterator[Any]:
        """Lazy pass over the elements in index order. Each call starts fresh."""
        storage = self._storage
        for i in range(len(storage)):
            yield storage.get(i)

    def enumerate_indexed(self) -> Iterator[Tuple[int, Any]]:
        """Lazy (index, element) pairs in index order."""
        storage = self._storage
        for i in range(len(storage)):
            yield i, storage.get(i)

    def __iter__(self) -> Iterator[Any]:
        return self.enumerate()

    def to_list(self) -> List[Any]:
        return self._storage.to_list()

    # =========================================================================
    # Equality / Hash
    # =========================================================================

    def equals(self, other: Any) -> bool:
        """Content equality. None or a non-vector is never equal."""
        if not isinstance(other, Vector):
            return False
        return self._storage.equals(other._storage)

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.equals(other)

    def __hash__(self) -> int:
        return self._storage.content_hash()

    # =========================================================================
    # Cloning
    # =========================================================================

    def clone(self) -> "Vector":
        """Independent vector of the same kind holding a copy of the elements."""
        clone = type(self).__new__(type(self))
        Vector.__init__(clone, self._storage.copy())
        return clone

    def __copy__(self) -> "Vector":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Vector":
        return self.clone()

    # =========================================================================
    # Text Description
    # =========================================================================

    def to_type_string(self) -> str:
        """Kind, length and element type, e.g. 'DenseVector 13-float64'."""
        return f"{self.kind} {len(self)}-{self.dtype.name}"

    def to_vector_string_array(
        self,
        max_per_column: int,
        max_width: int,
        padding: int,
        ellipsis: str,
        format: Callable[[Any], str]
    ) -> "Grid":
        """Lay the elements out into display columns. See output.layout."""
        from ..output.layout import layout
        return layout(self, max_per_column, max_width, padding, ellipsis, format)

    def to_vector_string(
        self,
        max_per_column: Optional[int] = None,
        max_width: Optional[int] = None,
        format: Any = None,
        ellipsis: Optional[str] = None,
        column_separator: Optional[str] = None,
        row_separator: Optional[str] = None
    ) -> str:
        """Elements rendered column by column, without the type line."""
        from ..output import DescribeOptions, render_vector_string
        options = DescribeOptions.with_overrides(
            max_per_column=max_per_column,
            max_width=max_width,
            format=format,
            ellipsis=ellipsis,
            column_separator=column_separator,
            row_separator=row_separator,
        )
        return render_vector_string(self, options)

    def to_string(
        self,
        max_per_column: Optional[int] = None,
        max_width: Optional[int] = None,
        format: Any = None
    ) -> str:
        """Type string followed by the column-wise element rendering."""
        from ..output import DescribeOptions, describe
        options = DescribeOptions.with_overrides(
            max_per_column=max_per_column,
            max_width=max_width,
            format=format,
        )
        return describe(self, options)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        from ..presentation.formatters import format_debug
        values = ", ".join(format_debug(value) for value in self.enumerate())
        return f"{self.kind}([{values}])"


class DenseVector(Vector):
    """
    Vector over contiguous DenseStorage.

    Accepts any 1-D array-like of numbers; the data is copied unless an
    existing storage is passed in.
    """

    def __init__(self, data: Any, dtype: Optional[Any] = None):
        if isinstance(data, DenseStorage):
            storage = data
        else:
            storage = DenseStorage(data, dtype=dtype)
        super().__init__(storage)

    @classmethod
    def zeros(cls, length: int, dtype: Any = np.float64) -> "DenseVector":
        return cls(DenseStorage.zeros(length, dtype))

    @classmethod
    def of_array(cls, array: np.ndarray) -> "DenseVector":
        """Wrap an existing 1-D array without copying it."""
        return cls(DenseStorage(array, copy=False))

    @property
    def values(self) -> np.ndarray:
        """The backing array. Writes are visible through the vector."""
        return self._storage.data
