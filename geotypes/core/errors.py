from typing import Any


class GeoTypesError(Exception):
    """Base error of the package."""


class CRSError(GeoTypesError):
    """A coordinate reference system could not be resolved."""


class GeocoderError(GeoTypesError):
    """Reverse geocoding failed; ``response`` holds the raw provider payload."""

    def __init__(self, status: str | None, response: Any):
        super().__init__(f'Reverse geocoding failed with status {status!r}')
        self.status = status
        self.response = response
