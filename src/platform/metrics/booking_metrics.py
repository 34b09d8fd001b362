from prometheus_client import Counter


class BookingMetrics:
    """Booking lifecycle counters exposed on /metrics"""

    def __init__(self) -> None:
        self.bookings_created = Counter(
            'booking_created_total',
            'Total bookings created',
        )

        self.bookings_cancelled = Counter(
            'booking_cancelled_total',
            'Total cancellation requests',
            ['result'],  # result: cancelled / not_found
        )

        self.booked_seats = Counter(
            'booking_seats_total',
            'Total seats booked',
        )

    def record_booking_created(self, *, seats: int) -> None:
        self.bookings_created.inc()
        if seats > 0:
            self.booked_seats.inc(seats)

    def record_cancellation(self, *, result: str) -> None:
        self.bookings_cancelled.labels(result=result).inc()


booking_metrics = BookingMetrics()
