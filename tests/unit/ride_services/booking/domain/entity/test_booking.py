from decimal import Decimal

from ride_services.booking.domain.enum import BookingStatus, TaxiTier


class TestBooking:
    def test_default_status_is_pending(self, create_booking):
        booking = create_booking()
        assert booking.status == BookingStatus.PENDING

    def test_optional_fields_default_to_none(self, create_booking):
        booking = create_booking()
        assert booking.taxi_id is None
        assert booking.eta is None

    def test_booking_properties(self, create_booking):
        booking = create_booking(
            booking_id="BK9",
            tier=TaxiTier.PREMIUM,
            taxi_id="TX-1",
            eta=0,
        )
        assert booking.id == "BK9"
        assert booking.user_phone == "555-0100"
        assert booking.tier == TaxiTier.PREMIUM
        assert booking.distance == Decimal("7.40")
        assert booking.taxi_id == "TX-1"
        assert booking.eta == 0
        assert booking.end_location.address == "Shibuya"

    def test_equality_is_based_on_id(self, create_booking):
        assert create_booking(booking_id="BK1", fare=Decimal("1")) == create_booking(
            booking_id="BK1", fare=Decimal("2")
        )
        assert create_booking(booking_id="BK1") != create_booking(booking_id="BK2")

    def test_hashable_by_id(self, create_booking):
        bookings = {create_booking(booking_id="BK1"), create_booking(booking_id="BK1")}
        assert len(bookings) == 1

    def test_status_values_match_lifecycle(self):
        assert [status.value for status in BookingStatus] == [
            "pending",
            "assigned",
            "in-progress",
            "completed",
            "cancelled",
        ]
