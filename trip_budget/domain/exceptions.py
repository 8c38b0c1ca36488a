"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateError(DomainException):
    """Departure or target date is before today"""

    def __init__(self, departure_date, today):
        self.departure_date = departure_date
        self.today = today
        super().__init__(
            f"Departure date {departure_date.isoformat()} is in the past (today is {today.isoformat()})"
        )


class TripStoreError(DomainException):
    """Hosted trip database returned an error or is unavailable"""

    pass


class TripNotFoundError(DomainException):
    """Requested trip does not exist in the hosted database"""

    pass
