"""Custom exception hierarchy for pyboundaries."""

from __future__ import annotations


class BoundaryError(Exception):
    """Base exception for all pyboundaries errors."""


class BoundaryConfigError(BoundaryError):
    """Invalid or missing configuration."""


class LoadError(BoundaryError):
    """The raw boundary dataset could not be loaded.

    The cache is left unset when this is raised, so calling the loader
    again retries the fetch.
    """

    def __init__(self, message: str, *, resource: str = "") -> None:
        self.resource = resource
        super().__init__(message)

    @property
    def cause(self) -> BaseException | None:
        """The underlying exception, if any."""
        return self.__cause__


class BoundaryTransportError(LoadError):
    """Network, HTTP or file level failure (non-200, unreadable, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        resource: str = "",
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, resource=resource)


class BoundaryTimeoutError(BoundaryTransportError):
    """Fetching the dataset took longer than the configured timeout."""

    def __init__(self, message: str, *, resource: str = "", timeout: float | None = None) -> None:
        self.timeout = timeout
        super().__init__(message, resource=resource)


class BoundaryDataError(LoadError):
    """The payload is neither a feature collection nor a feature list."""


class NoBoundariesFoundError(BoundaryError):
    """No canton matched the requested province.

    Retrying with the same input will not help; this usually means the
    province name and the dataset attributes disagree.
    """

    def __init__(self, province: str) -> None:
        self.province = province
        super().__init__(f"No boundaries found for province {province!r}")


class CantonNotFoundError(BoundaryError):
    """No canton matched the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Canton {name!r} not found")
