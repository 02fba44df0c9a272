import unittest

import numpy as np

from qrstyle.matrix import ModuleMatrix, as_module_matrix


class TestModuleMatrix(unittest.TestCase):
    def test_from_rows_accepts_truthy_values(self) -> None:
        m = ModuleMatrix.from_rows([bytearray([1, 0]), [0, 5]])
        self.assertEqual(m.size, 2)
        self.assertIs(m[0, 0], True)
        self.assertIs(m[0, 1], False)
        self.assertIs(m[1, 1], True)
        self.assertEqual(m.dark_count(), 2)

    def test_rejects_non_square(self) -> None:
        with self.assertRaises(ValueError):
            ModuleMatrix(np.zeros((2, 3), dtype=bool))

    def test_rejects_empty(self) -> None:
        with self.assertRaises(ValueError):
            ModuleMatrix(np.zeros((0, 0), dtype=bool))

    def test_is_read_only(self) -> None:
        m = ModuleMatrix(np.eye(3, dtype=bool))
        with self.assertRaises(ValueError):
            m.array[0, 1] = True

    def test_source_array_is_copied(self) -> None:
        source = np.eye(3, dtype=bool)
        m = ModuleMatrix(source)
        source[0, 1] = True
        self.assertFalse(m[0, 1])

    def test_equality_and_hash(self) -> None:
        a = ModuleMatrix.from_rows([[1, 0], [0, 1]])
        b = ModuleMatrix(np.eye(2, dtype=bool))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(a.rows(), [[True, False], [False, True]])

    def test_as_module_matrix(self) -> None:
        m = ModuleMatrix(np.eye(2, dtype=bool))
        self.assertIs(as_module_matrix(m), m)
        self.assertEqual(as_module_matrix(np.eye(2)), m)
        self.assertEqual(as_module_matrix([[True, False], [False, True]]), m)


if __name__ == "__main__":
    unittest.main()
