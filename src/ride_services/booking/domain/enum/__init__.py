from .booking_status import BookingStatus as BookingStatus
from .taxi_tier import TaxiTier as TaxiTier
