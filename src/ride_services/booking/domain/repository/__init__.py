from .booking_repository import DEFAULT_RECENT_LIMIT as DEFAULT_RECENT_LIMIT
from .booking_repository import BookingRepository as BookingRepository
