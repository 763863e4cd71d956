from .location import Location as Location
