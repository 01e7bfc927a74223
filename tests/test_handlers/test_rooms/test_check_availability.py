import importlib
import json
import unittest
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

from hotel_booking.models.bookings import Booking


class CheckAvailabilityTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.resource = patch("boto3.resource", return_value=MagicMock())
        cls.resource.start()
        import handlers.rooms.check_availability as mod
        cls.mod = importlib.reload(mod)

    @classmethod
    def tearDownClass(cls):
        cls.resource.stop()

    def setUp(self):
        self.p_find = patch.object(self.mod.booking_service, "find_overlapping_bookings")
        self.mock_find = self.p_find.start()

    def tearDown(self):
        self.p_find.stop()

    def _event(self, check_in="2024-01-03", check_out="2024-01-07"):
        return {
            "pathParameters": {"room_id": "r1"},
            "queryStringParameters": {"check_in": check_in, "check_out": check_out},
        }

    def test_missing_params_return_400(self):
        resp = self.mod.check_availability({"pathParameters": {"room_id": "r1"}}, None)
        self.assertEqual(400, resp["statusCode"])

    def test_invalid_range_returns_400(self):
        resp = self.mod.check_availability(self._event(check_out="2024-01-03"), None)
        self.assertEqual(400, resp["statusCode"])
        self.mock_find.assert_not_called()

    def test_available_room(self):
        self.mock_find.return_value = []

        resp = self.mod.check_availability(self._event(), None)

        data = json.loads(resp["body"])["data"]
        self.assertEqual(200, resp["statusCode"])
        self.assertTrue(data["available"])
        self.assertEqual(data["overlappingBookings"], [])
        self.mock_find.assert_called_once_with("r1", date(2024, 1, 3), date(2024, 1, 7))

    def test_unavailable_room_lists_overlaps(self):
        self.mock_find.return_value = [
            Booking("b1", "r1", "c1", date(2024, 1, 1), date(2024, 1, 5), 1, Decimal("480.00"))
        ]

        resp = self.mod.check_availability(self._event(), None)

        data = json.loads(resp["body"])["data"]
        self.assertFalse(data["available"])
        self.assertEqual(data["overlappingBookings"][0]["id"], "b1")

    def test_generic_error_returns_500(self):
        self.mock_find.side_effect = RuntimeError("boom")
        resp = self.mod.check_availability(self._event(), None)
        self.assertEqual(500, resp["statusCode"])


if __name__ == "__main__":
    unittest.main()
