import importlib
import json
import unittest
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

from hotel_booking.models.bookings import Booking
from hotel_booking.utils.custom_exceptions import StorageUnavailable


class GetBookingsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.resource = patch("boto3.resource", return_value=MagicMock())
        cls.resource.start()
        import handlers.bookings.get_bookings as mod
        cls.mod = importlib.reload(mod)

    @classmethod
    def tearDownClass(cls):
        cls.resource.stop()

    def setUp(self):
        self.p_customer = patch.object(self.mod.booking_service, "get_customer_bookings")
        self.p_upcoming = patch.object(self.mod.booking_service, "get_upcoming_bookings")
        self.mock_customer = self.p_customer.start()
        self.mock_upcoming = self.p_upcoming.start()
        self.booking = Booking(
            "b1", "r1", "c1", date(2024, 1, 1), date(2024, 1, 3), 1, Decimal("240.00")
        )

    def tearDown(self):
        self.p_customer.stop()
        self.p_upcoming.stop()

    def test_requires_a_filter(self):
        resp = self.mod.get_bookings({}, None)
        self.assertEqual(400, resp["statusCode"])

    def test_customer_bookings(self):
        self.mock_customer.return_value = [self.booking]

        resp = self.mod.get_bookings({"queryStringParameters": {"customer_id": "c1"}}, None)

        self.assertEqual(200, resp["statusCode"])
        data = json.loads(resp["body"])["data"]
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["bookings"][0]["customerId"], "c1")
        self.mock_customer.assert_called_once_with("c1")

    def test_upcoming_bookings_with_date(self):
        self.mock_upcoming.return_value = []

        resp = self.mod.get_bookings(
            {"queryStringParameters": {"upcoming": "true", "as_of": "2024-02-01"}}, None
        )

        self.assertEqual(200, resp["statusCode"])
        self.mock_upcoming.assert_called_once_with(date(2024, 2, 1))

    def test_upcoming_bookings_default_date(self):
        self.mock_upcoming.return_value = []

        self.mod.get_bookings({"queryStringParameters": {"upcoming": "true"}}, None)

        self.mock_upcoming.assert_called_once_with(None)

    def test_bad_date_returns_400(self):
        resp = self.mod.get_bookings(
            {"queryStringParameters": {"upcoming": "true", "as_of": "tomorrow"}}, None
        )
        self.assertEqual(400, resp["statusCode"])

    def test_storage_unavailable_returns_503(self):
        self.mock_customer.side_effect = StorageUnavailable("down")
        resp = self.mod.get_bookings({"queryStringParameters": {"customer_id": "c1"}}, None)
        self.assertEqual(503, resp["statusCode"])


if __name__ == "__main__":
    unittest.main()
