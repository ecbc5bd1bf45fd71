from prometheus_client import Counter, Histogram


class ReservationMetrics:
    """
    Call Reservation Core Metrics Collector

    Tracks reservation lifecycle operations and reminder dispatches.
    """

    def __init__(self):
        # ========== Reservation Lifecycle Metrics ==========
        self.reservation_operations = Counter(
            'reservation_operations_total',
            'Reservation lifecycle operations',
            ['action', 'result'],  # action: book/reschedule/cancel/accept/reject/complete
        )

        # ========== Reminder Metrics ==========
        self.reminder_dispatches = Counter(
            'reminder_dispatches_total',
            'Reminder notifications dispatched',
            ['channel', 'result'],  # result: sent/failed/skipped
        )

        self.reminder_scan_duration = Histogram(
            'reminder_scan_duration_seconds',
            'Reminder scan duration',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

    # ========== Helper Methods ==========

    def record_operation(self, *, action: str, result: str) -> None:
        self.reservation_operations.labels(action=action, result=result).inc()

    def record_reminder(self, *, channel: str, result: str) -> None:
        self.reminder_dispatches.labels(channel=channel, result=result).inc()

    def observe_scan(self, *, duration: float) -> None:
        self.reminder_scan_duration.observe(duration)


# Global metrics instance
metrics = ReservationMetrics()
