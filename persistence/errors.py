class StoreError(Exception):
    """
    A booking store operation failed.
    The driver exception is kept as `original` (and chained as __cause__).
    `partial` holds whatever was built before a failed create was rolled back.
    """

    def __init__(self, message: str, original: Exception = None, partial=None):
        super().__init__(message)
        self.original = original
        self.partial = partial


class BookingNotFound(StoreError):
    def __init__(self, booking_id):
        super().__init__(f"booking {booking_id} not found")
        self.booking_id = booking_id
