from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .enum import TaxiTier as TaxiTier
from .factory import BookingFactory as BookingFactory
from .factory import RideDetails as RideDetails
from .repository import BookingRepository as BookingRepository
from .value_object import Location as Location
