"""Classic operating-system algorithms: CPU and disk scheduling, the banker's algorithm and a bounded buffer."""

__version__ = "0.1.0"
__all__ = ["bankers", "cpu", "disk", "producer_consumer"]