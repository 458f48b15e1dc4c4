"""
A minimal client for the parts of the `iNaturalist API
<https://api.inaturalist.org/v1/docs/>`_ used to populate a grid: searching
for taxa and listing observation photos.

.. autofunction:: search_taxa

.. autoclass:: Photo
    :members:

.. autofunction:: fetch_observation_photos

Both functions throw :py:exc:`~trait_grid.exceptions.FetchFailedError` when
the API cannot be reached or responds with a non-success status.
"""

from typing import Any, Dict, List, Mapping, Optional

import logging

from dataclasses import dataclass

import requests

from trait_grid.grid import Taxon

from trait_grid.exceptions import FetchFailedError


__all__ = [
    "INATURALIST_API_URL",
    "REQUEST_TIMEOUT",
    "Photo",
    "search_taxa",
    "fetch_observation_photos",
]


logger = logging.getLogger(__name__)


INATURALIST_API_URL = "https://api.inaturalist.org/v1"

REQUEST_TIMEOUT = 20
"""Timeout (seconds) for API requests."""

SEARCH_RESULTS = 10
MAX_PHOTO_OBSERVATIONS = 200


@dataclass(frozen=True)
class Photo:
    id: int
    """The iNaturalist photo ID."""

    url: str
    """The URL of the image file."""

    observation_url: str
    """The URL of the observation page the photo belongs to."""

    attribution: str
    """The attribution/license text supplied by iNaturalist."""


def _get_json(
    path: str,
    params: Mapping[str, Any],
    session: Optional[requests.Session] = None,
) -> Any:
    url = f"{INATURALIST_API_URL}/{path}"
    logger.debug("GET %s %r", url, params)

    try:
        response = (session or requests).get(
            url, params=params, timeout=REQUEST_TIMEOUT
        )
    except requests.RequestException as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise FetchFailedError(f"Request to {url} failed: {e}")

    if not response.ok:
        logger.warning("Request to %s returned %d", url, response.status_code)
        raise FetchFailedError(
            f"Request to {url} returned HTTP {response.status_code}",
            response.status_code,
        )

    try:
        return response.json()
    except ValueError:
        raise FetchFailedError(
            f"Request to {url} returned invalid JSON", response.status_code
        )


def taxon_from_record(record: Mapping[str, Any]) -> Taxon:
    return Taxon(
        id=record["id"],
        name=record["name"],
        preferred_common_name=record.get("preferred_common_name"),
        rank=record.get("rank"),
    )


def search_taxa(
    query: str,
    session: Optional[requests.Session] = None,
) -> List[Taxon]:
    """
    Search for taxa matching the given (partial) name. Returns an empty list,
    without making a request, when the query is blank.
    """
    if not query.strip():
        return []

    data = _get_json(
        "search",
        {"q": query, "sources": "taxa", "per_page": SEARCH_RESULTS},
        session,
    )

    try:
        return [
            taxon_from_record(result["record"])
            for result in data["results"]
            if result.get("type") == "Taxon"
        ]
    except (KeyError, TypeError, AttributeError):
        raise FetchFailedError("Unexpected response to taxon search")


def resize_photo_url(url: str, size: str) -> str:
    """
    Photo URLs returned by the API point at square thumbnails. Returns the URL
    of the same photo at a different size (e.g. 'small', 'medium', 'large' or
    'original').
    """
    return url.replace("/square.", f"/{size}.")


def fetch_observation_photos(
    taxon_id: Optional[int] = None,
    session: Optional[requests.Session] = None,
    photo_size: str = "large",
) -> List[Photo]:
    """
    List the photos of the most-voted-for observations (of the given taxon,
    if specified).

    Up to 200 observations are considered, in the order given by the API, and
    all photos of each are returned in that order.
    """
    params: Dict[str, Any] = {
        "photos": "true",
        "order_by": "votes",
        "per_page": MAX_PHOTO_OBSERVATIONS,
    }
    if taxon_id is not None:
        params["taxon_id"] = taxon_id

    data = _get_json("observations", params, session)

    photos = []
    try:
        for observation in data["results"]:
            for photo in observation.get("photos") or []:
                photos.append(
                    Photo(
                        id=photo["id"],
                        url=resize_photo_url(photo["url"], photo_size),
                        observation_url=observation["uri"],
                        attribution=photo.get("attribution") or "",
                    )
                )
    except (KeyError, TypeError, AttributeError):
        raise FetchFailedError("Unexpected response to observation search")

    logger.debug("Found %d photos", len(photos))
    return photos
