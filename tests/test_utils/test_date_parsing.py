import unittest
from datetime import date, datetime

from hotel_booking.utils.date_parsing import from_iso_date, optional_iso_date


class TestDateParsing(unittest.TestCase):
    def test_from_iso_string(self):
        self.assertEqual(from_iso_date("2024-03-01"), date(2024, 3, 1))

    def test_date_passes_through(self):
        self.assertEqual(from_iso_date(date(2024, 3, 1)), date(2024, 3, 1))

    def test_datetime_truncated_to_date(self):
        self.assertEqual(from_iso_date(datetime(2024, 3, 1, 15, 30)), date(2024, 3, 1))

    def test_invalid_string_raises(self):
        with self.assertRaises(ValueError):
            from_iso_date("03/01/2024")

    def test_non_string_raises(self):
        with self.assertRaises(ValueError):
            from_iso_date(20240301)

    def test_optional_empty(self):
        self.assertIsNone(optional_iso_date(None))
        self.assertIsNone(optional_iso_date(""))
        self.assertEqual(optional_iso_date("2024-03-01"), date(2024, 3, 1))

if __name__ == "__main__":
    unittest.main()
