import unittest

from mex_tracker import MexRangeError, PresenceVector
from mex_tracker.utils import as_value


class TestPresenceVector(unittest.TestCase):
    def test_set_and_get(self):
        vector = PresenceVector(130)
        self.assertEqual(len(vector), 130)
        self.assertEqual(vector.word_count, 3)
        for index in (0, 63, 64, 129):
            self.assertFalse(vector.get(index))
            vector.set(index)
            self.assertTrue(vector.get(index))
        self.assertFalse(vector.get(1))
        self.assertFalse(vector.get(65))

    def test_reads_out_of_range_are_absent(self):
        vector = PresenceVector(4)
        self.assertFalse(vector.get(4))
        self.assertFalse(vector.get(-1))

    def test_write_out_of_range(self):
        vector = PresenceVector(4)
        with self.assertRaises(MexRangeError):
            vector.set(4)


class TestAsValue(unittest.TestCase):
    def test_int_like(self):
        self.assertEqual(as_value(5), 5)
        self.assertEqual(as_value(True), 1)
        self.assertIs(type(as_value(True)), int)

    def test_negative(self):
        with self.assertRaises(MexRangeError) as ctx:
            as_value(-3)
        self.assertEqual(ctx.exception.code, "VALUE_NEGATIVE")
        self.assertIn("VALUE_NEGATIVE", str(ctx.exception))

    def test_not_integral(self):
        for value in (1.0, "1", None):
            with self.assertRaises(TypeError):
                as_value(value)


if __name__ == "__main__":
    unittest.main()
