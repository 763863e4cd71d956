from .book_ride import BookRideService as BookRideService
