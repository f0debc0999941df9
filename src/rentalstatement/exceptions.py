"""
Custom exceptions
"""


class RentalStatementError(Exception):
    """Base exception"""
    pass


class InvalidInputError(RentalStatementError):
    """Rental days that are not a positive integer"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Rental days must be a positive integer (received: {value!r})")


class MovieNotFoundError(RentalStatementError):
    """Rental references a movie missing from the catalog"""

    def __init__(self, movie_id: str):
        self.movie_id = movie_id
        super().__init__(f"Movie not found for ID: {movie_id}")
