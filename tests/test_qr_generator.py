import base64
import unittest

import segno

from qrstyle import params, qr_generator
from qrstyle.config import ConfigurationError, EccLevel, QrOptions
from qrstyle.matrix import ModuleMatrix
from qrstyle.qr_generator import (
    decode_payload,
    encode,
    encode_text,
    encode_with_options,
    make_qr,
)


class TestMakeQr(unittest.TestCase):
    def test_smallest_version(self) -> None:
        qr = make_qr(b"hello", EccLevel.LOW)
        self.assertEqual(qr.version, 1)
        self.assertFalse(qr.is_micro)

    def test_min_version_is_honored(self) -> None:
        qr = make_qr(b"hello", EccLevel.MEDIUM, min_version=5)
        self.assertEqual(qr.version, 5)

    def test_overflow_above_max_version(self) -> None:
        with self.assertRaises(segno.DataOverflowError):
            make_qr(b"x" * 200, EccLevel.HIGH, max_version=2)

    def test_overflow_beyond_any_version(self) -> None:
        with self.assertRaises(segno.DataOverflowError):
            make_qr(b"x" * 4000, EccLevel.HIGH)

    def test_explicit_mask(self) -> None:
        self.assertEqual(make_qr(b"hello", mask=3).mask, 3)

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            make_qr(b"hello", min_version=10, max_version=5)
        with self.assertRaises(ValueError):
            make_qr(b"hello", max_version=41)
        with self.assertRaises(ValueError):
            make_qr(b"hello", mask=8)


class TestEncode(unittest.TestCase):
    def test_matrix_size_follows_version(self) -> None:
        for version in (1, 2, 7):
            matrix = encode(b"abc", EccLevel.LOW, min_version=version, max_version=version)
            self.assertIsInstance(matrix, ModuleMatrix)
            self.assertEqual(matrix.size, 4 * version + 17)

    def test_finder_pattern_present(self) -> None:
        matrix = encode_text("finder")
        n = matrix.size
        for r0, c0 in ((0, 0), (0, n - 7), (n - 7, 0)):
            self.assertTrue(all(matrix[r0, c0 + i] for i in range(7)))
            self.assertFalse(matrix[r0 + 1, c0 + 1])
            self.assertTrue(matrix[r0 + 3, c0 + 3])

    def test_encode_with_options(self) -> None:
        matrix = encode_with_options(b"opts", QrOptions(ecc=EccLevel.HIGH, min_version=3))
        self.assertEqual(matrix.size, 29)

    def test_same_input_same_matrix(self) -> None:
        self.assertEqual(encode_text("stable"), encode_text("stable"))


class TestDecodePayload(unittest.TestCase):
    def test_utf8(self) -> None:
        self.assertEqual(decode_payload("Zürich"), "Zürich".encode("utf-8"))
        self.assertEqual(decode_payload("abc", "UTF-8"), b"abc")

    def test_latin1(self) -> None:
        self.assertEqual(decode_payload("Zürich", "latin1"), b"Z\xfcrich")
        self.assertEqual(decode_payload("abc", "ISO-8859-1"), b"abc")

    def test_base64(self) -> None:
        raw = bytes(range(8))
        self.assertEqual(decode_payload(base64.b64encode(raw).decode("ascii"), "base64"), raw)

    def test_errors(self) -> None:
        with self.assertRaises(ConfigurationError):
            decode_payload("abc", "ebcdic")
        with self.assertRaises(ConfigurationError):
            decode_payload("not base64!", "base64")
        with self.assertRaises(ConfigurationError):
            decode_payload("☃", "latin1")

    def test_error_shared_with_parameter_layer(self) -> None:
        self.assertIs(qr_generator.ConfigurationError, ConfigurationError)
        self.assertIs(params.ConfigurationError, ConfigurationError)
        self.assertNotIn("params", qr_generator.__dict__)


if __name__ == "__main__":
    unittest.main()
