from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyticsError:
    message: str


@dataclass(frozen=True)
class IngestError(AnalyticsError):
    source_path: str
    detail: str = ""


class AnalyticsConfigError(Exception):
    """Raised when calibration settings are invalid."""
