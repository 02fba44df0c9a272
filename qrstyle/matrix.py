# -*- coding: utf-8 -*-
"""
QR Module Matrix

A read-only square grid of dark/light modules, indexed [row, col] with (0, 0)
at the top-left corner. Backed by a numpy boolean array with the writeable
flag cleared, so a matrix cannot change after the encoder produced it.
"""

from typing import Any, Iterable, List

import numpy as np


class ModuleMatrix:
    """
    Immutable N x N module grid.

    Args:
        modules (np.ndarray): Square 2D array; it is copied and frozen

    Raises:
        ValueError: If the array is empty or not square

    Example:
        >>> m = ModuleMatrix.from_rows([[1, 0], [0, 1]])
        >>> m.size, m[0, 0], m[0, 1]
        (2, True, False)
    """

    __slots__ = ('_modules',)

    def __init__(self, modules: np.ndarray):
        arr = np.array(modules, dtype=bool)
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Module matrix must be square and non-empty, got shape {arr.shape}")
        arr.setflags(write=False)
        self._modules = arr

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> 'ModuleMatrix':
        """Build a matrix from rows of truthy values (segno bytearrays, lists, ...)."""
        return cls(np.array([[bool(v) for v in row] for row in rows], dtype=bool))

    @property
    def size(self) -> int:
        return int(self._modules.shape[0])

    @property
    def array(self) -> np.ndarray:
        """The underlying read-only boolean array."""
        return self._modules

    def __getitem__(self, key):
        value = self._modules[key]
        if isinstance(value, np.ndarray):
            return value
        return bool(value)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModuleMatrix):
            return NotImplemented
        return np.array_equal(self._modules, other._modules)

    def __hash__(self) -> int:
        return hash((self.size, self._modules.tobytes()))

    def __repr__(self) -> str:
        return f"ModuleMatrix(size={self.size}, dark={self.dark_count()})"

    def rows(self) -> List[List[bool]]:
        """Plain nested-list copy of the grid."""
        return self._modules.tolist()

    def dark_count(self) -> int:
        return int(np.count_nonzero(self._modules))


def as_module_matrix(matrix: Any) -> ModuleMatrix:
    """Accept a ModuleMatrix, numpy array, or any iterable of rows."""
    if isinstance(matrix, ModuleMatrix):
        return matrix
    if isinstance(matrix, np.ndarray):
        return ModuleMatrix(matrix)
    return ModuleMatrix.from_rows(matrix)
