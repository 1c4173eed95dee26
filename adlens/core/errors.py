"""AdLens — Error Types.

Malformed or partial payloads are never errors; they coerce to zeros.
These exceptions cover out-of-contract calls only.
"""


class AdLensError(Exception):
    """Base class for AdLens errors."""


class UnknownMetricError(AdLensError, ValueError):
    """Raised when a metric name is not in the registry."""

    def __init__(self, metric: str):
        self.metric = metric
        super().__init__(f"Unknown metric: {metric!r}")


class UnknownPlatformError(AdLensError, ValueError):
    """Raised when no extractor is registered for a platform key."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Unknown platform: {platform!r}")
