"""Service layer for mdtrack."""

from .tracking import ScanResult, TrackingResult, TrackingService

__all__ = ["ScanResult", "TrackingResult", "TrackingService"]
