from .booking_row import BookingRow as BookingRow
from .booking_row import from_record as from_record
from .booking_row import from_row as from_row
from .booking_row import to_row as to_row
from .data_api_booking_repository import (
    DataApiBookingRepository as DataApiBookingRepository,
)
from .fallback_booking_repository import (
    FallbackBookingRepository as FallbackBookingRepository,
)
from .in_memory_booking_repository import (
    InMemoryBookingRepository as InMemoryBookingRepository,
)
