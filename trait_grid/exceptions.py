from typing import Optional


class TraitGridError(Exception):
    """Base class for all exceptions thrown by trait_grid."""


class InvalidCropBoxError(TraitGridError, ValueError):
    """Thrown when a crop box is empty or does not lie within its image."""


class InvalidInputError(TraitGridError, ValueError):
    """Thrown when a required input (e.g. an image URL) is missing."""


class GridFileError(TraitGridError):
    """Thrown when a grid description file cannot be read or is malformed."""


class FetchFailedError(TraitGridError):
    """
    Thrown when a request to the iNaturalist API fails or returns a
    non-success status. The HTTP status is given in :py:attr:`status_code`
    (None when no response was received at all).
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
