import random
from unittest import TestCase

from bitcrc.engine import MAX_DEGREE, MIN_DEGREE, compute, register_mask, validate_degree
from bitcrc.exceptions import InvalidDegree, InvalidDegreeError

from .common import reference_crc


class TestEngine(TestCase):
    def setUp(self):
        self.rng = random.Random(0x5EED)

    def random_bits(self, length: int) -> list[int]:
        return [self.rng.getrandbits(1) for _ in range(length)]

    def test_golden_trace(self):
        # x**3 + x + 1, register after each of the input bits 1, 1, 0, 0
        trace = [0b011, 0b101, 0b001, 0b010]
        bits = [1, 1, 0, 0]
        for idx, expected in enumerate(trace):
            self.assertEqual(compute(bits[: idx + 1], 0b011, 3), expected)
        self.assertEqual(compute(bits, polynomial=0b011, degree=3), 0b010)

    def test_empty_stream(self):
        for degree in range(MIN_DEGREE, MAX_DEGREE + 1):
            self.assertEqual(compute([], self.rng.getrandbits(64), degree), 0)
        self.assertEqual(compute(iter(()), 0x1021, 16), 0)

    def test_zero_stream(self):
        for degree in (1, 2, 3, 7, 16, 31, 32, 63, 64):
            poly = self.rng.getrandbits(64)
            for length in (0, 1, degree, 3 * degree + 5):
                self.assertEqual(compute([0] * length, poly, degree), 0)

    def test_deterministic(self):
        bits = self.random_bits(200)
        first = compute(bits, 0x04C11DB7, 32)
        for _ in range(5):
            self.assertEqual(compute(bits, 0x04C11DB7, 32), first)

    def test_degree_one_is_parity(self):
        for length in (1, 2, 17, 100):
            bits = self.random_bits(length)
            self.assertEqual(compute(bits, 0x1, 1), sum(bits) % 2)

    def test_single_one_bit(self):
        # the first set bit lands in the register as the generator without its top term
        self.assertEqual(compute([1], 0x1021, 16), 0x1021)
        self.assertEqual(compute([1], 0x1020, 16), 0x1021)
        self.assertEqual(compute([1], 0x0, 64), 0x1)

    def test_matches_long_division(self):
        for degree in (1, 3, 5, 8, 12, 16, 24, 32, 40, 64):
            poly = self.rng.getrandbits(degree)
            generator = (1 << degree) | poly | 1
            for length in (1, 8, 64, 129):
                bits = self.random_bits(length)
                self.assertEqual(
                    compute(bits, poly, degree),
                    reference_crc(bits, generator),
                    msg=f"degree {degree}, polynomial 0x{poly:x}, length {length}",
                )

    def test_high_polynomial_bits_ignored(self):
        bits = self.random_bits(96)
        for degree in (1, 3, 16, 33, 63, 64):
            poly = self.rng.getrandbits(degree)
            expected = compute(bits, poly, degree)
            for garbage in (1, 0b1011, self.rng.getrandbits(64) | 1):
                mutated = poly | (garbage << degree)
                self.assertEqual(compute(bits, mutated, degree), expected)

    def test_tap_bit_zero_ignored(self):
        bits = self.random_bits(50)
        self.assertEqual(compute(bits, 0x8004, 16), compute(bits, 0x8005, 16))

    def test_result_width(self):
        for degree in (1, 2, 9, 33, 64):
            bits = self.random_bits(300)
            result = compute(bits, self.rng.getrandbits(64), degree)
            self.assertGreaterEqual(result, 0)
            self.assertEqual(result >> degree, 0)
        self.assertEqual(compute([1] * 64, 0xFFFFFFFFFFFFFFFF, 64) >> 64, 0)

    def test_only_lowest_bit_of_each_element_used(self):
        self.assertEqual(
            compute([3, 2, True, False, 5], 0x07, 8), compute([1, 0, 1, 0, 1], 0x07, 8)
        )

    def test_invalid_degree(self):
        for degree in (0, -1, 65, 128, 8.0, True, "8", None):
            with self.assertRaises(InvalidDegreeError) as cm:
                compute([1, 0, 1], 0x07, degree)
            self.assertEqual(cm.exception.degree, degree)
        with self.assertRaises(ValueError):
            validate_degree(0)
        with self.assertRaises(InvalidDegree):
            validate_degree(65)

    def test_invalid_degree_before_consuming_bits(self):
        consumed = []

        def bit_source():
            for bit in (1, 0, 1):
                consumed.append(bit)
                yield bit

        with self.assertRaises(InvalidDegreeError):
            compute(bit_source(), 0x07, 0)
        self.assertEqual(consumed, [])

    def test_invalid_degree_message(self):
        with self.assertRaises(InvalidDegreeError) as cm:
            validate_degree(65)
        self.assertEqual(
            str(cm.exception), "invalid CRC degree 65, must be an integer between 1 and 64"
        )

    def test_register_mask(self):
        self.assertEqual(register_mask(1), 0x1)
        self.assertEqual(register_mask(5), 0x1F)
        self.assertEqual(register_mask(64), 0xFFFFFFFFFFFFFFFF)
        with self.assertRaises(InvalidDegreeError):
            register_mask(65)

    def test_high_polynomial_bits_logged(self):
        with self.assertLogs("bitcrc.engine", level="DEBUG") as cm:
            compute([1, 0], 0x11021, 16)
        self.assertEqual(len(cm.records), 1)
        self.assertIn("degree 16", cm.output[0])
