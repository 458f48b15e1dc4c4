r"""
The :py:mod:`trait_grid.grid` module defines the data model describing a
comparison grid of taxa (columns) against traits (rows).

Overview
========

A :py:class:`GridModel` holds an ordered sequence of :py:class:`Taxon`
objects, an ordered sequence of :py:class:`Trait` objects and a collection of
:py:class:`Cell`\ s. The grid is sparse: each :py:class:`Cell` gives the
content for one (taxon, trait) intersection and intersections without a
:py:class:`Cell` are simply rendered empty.

A cell may include an image. When only part of the image is to be shown, a
:py:class:`CropBox` describes the selected rectangle in the source image's
pixel coordinates along with the full dimensions of that image.

The order of :py:attr:`GridModel.taxa` and :py:attr:`GridModel.traits`
dictates the column and row order of the rendered table.

.. autoclass:: Taxon
    :members:

.. autoclass:: Trait
    :members:

.. autoclass:: CropBox
    :members:

.. autoclass:: Cell
    :members:

.. autoclass:: GridModel
    :members:

Grid files
==========

Grids may be loaded from JSON files (or any JSON-like data) using:

.. autofunction:: load_grid

.. autofunction:: grid_from_dict
"""

from typing import (
    Any,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
)

import json

import math

from pathlib import Path

from dataclasses import dataclass, field

from trait_grid.exceptions import InvalidCropBoxError, GridFileError


__all__ = [
    "Taxon",
    "Trait",
    "CropBox",
    "Cell",
    "GridModel",
    "grid_from_dict",
    "load_grid",
]


@dataclass(frozen=True)
class Taxon:
    id: int
    """The iNaturalist taxon ID."""

    name: str
    """The scientific name of this taxon (e.g. 'Canis lupus')."""

    preferred_common_name: Optional[str] = None
    """The common name of this taxon, if it has one."""

    rank: Optional[str] = None
    """The taxonomic rank (e.g. 'species', 'genus')."""


@dataclass(frozen=True)
class Trait:
    id: str
    """A unique (within a grid) identifier for this trait."""

    description: str
    """The human readable description, shown in the row's label cell."""


@dataclass(frozen=True)
class CropBox:
    """
    A rectangular selection within an image, in source-image pixels.

    All values must be finite. The selection must be non-empty and must lie
    entirely within the image, otherwise
    :py:exc:`~trait_grid.exceptions.InvalidCropBoxError` is thrown on
    construction.
    """

    x: float
    """The horizontal offset of the left edge of the selection."""

    y: float
    """The vertical offset of the top edge of the selection."""

    width: float
    """The width of the selection."""

    height: float
    """The height of the selection."""

    img_width: float
    """The width of the complete source image."""

    img_height: float
    """The height of the complete source image."""

    def __post_init__(self) -> None:
        values = (
            self.x,
            self.y,
            self.width,
            self.height,
            self.img_width,
            self.img_height,
        )
        if not all(math.isfinite(value) for value in values):
            raise InvalidCropBoxError(
                f"Crop box values must be finite numbers (got {values})."
            )
        if self.img_width <= 0 or self.img_height <= 0:
            raise InvalidCropBoxError(
                f"Image dimensions must be positive "
                f"(got {self.img_width}x{self.img_height})."
            )
        if self.width <= 0 or self.height <= 0:
            raise InvalidCropBoxError(
                f"Crop size must be positive (got {self.width}x{self.height})."
            )
        if self.x < 0 or self.y < 0:
            raise InvalidCropBoxError(
                f"Crop offset must not be negative (got {self.x}, {self.y})."
            )
        if self.x + self.width > self.img_width:
            raise InvalidCropBoxError(
                f"Crop extends beyond the right edge of the image "
                f"({self.x} + {self.width} > {self.img_width})."
            )
        if self.y + self.height > self.img_height:
            raise InvalidCropBoxError(
                f"Crop extends beyond the bottom edge of the image "
                f"({self.y} + {self.height} > {self.img_height})."
            )


@dataclass(frozen=True)
class Cell:
    taxon_id: int
    """The ID of the taxon (column) this cell belongs to."""

    trait_id: str
    """The ID of the trait (row) this cell belongs to."""

    description: str = ""
    """Free text shown in the cell. May be empty."""

    image_url: Optional[str] = None
    """The URL of an image to show in this cell, if any."""

    crop_box: Optional[CropBox] = None
    """
    The region of the image to show. Ignored when no :py:attr:`image_url` is
    given. When None, the whole image is shown.
    """

    photo_attribution: Optional[str] = None
    """If given, shown as a caption beneath the image."""

    link_url: Optional[str] = None
    """If given, the image is made into a link to this URL."""


@dataclass(frozen=True)
class GridModel:
    taxa: Sequence[Taxon] = field(default_factory=list)
    """The taxa (columns) of the grid, in display order."""

    traits: Sequence[Trait] = field(default_factory=list)
    """The traits (rows) of the grid, in display order."""

    cells: Sequence[Cell] = field(default_factory=list)
    """
    The non-empty cells of the grid. There should be at most one cell for any
    (taxon, trait) pair. When duplicates are present, the first is used and
    the rest are ignored.
    """

    def find_cell(self, taxon_id: int, trait_id: str) -> Optional[Cell]:
        """
        Return the cell at the given intersection, or None if that cell is
        empty.
        """
        for cell in self.cells:
            if cell.taxon_id == taxon_id and cell.trait_id == trait_id:
                return cell
        return None

    def cells_for_taxon(self, taxon_id: int) -> Iterator[Cell]:
        """Iterate over the cells in the column of the given taxon."""
        return (cell for cell in self.cells if cell.taxon_id == taxon_id)

    def cells_for_trait(self, trait_id: str) -> Iterator[Cell]:
        """Iterate over the cells in the row of the given trait."""
        return (cell for cell in self.cells if cell.trait_id == trait_id)


def _get(data: Mapping[str, Any], key: str, expected_type: Any, what: str) -> Any:
    if not isinstance(data, Mapping):
        raise GridFileError(f"{what} must be an object.")
    try:
        value = data[key]
    except KeyError:
        raise GridFileError(f"{what} is missing required field '{key}'.")
    if not isinstance(value, expected_type) or isinstance(value, bool):
        raise GridFileError(f"{what} field '{key}' has the wrong type.")
    return value


def _get_optional(
    data: Mapping[str, Any], key: str, expected_type: Any, what: str
) -> Any:
    if isinstance(data, Mapping) and data.get(key) is None:
        return None
    return _get(data, key, expected_type, what)


def _list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise GridFileError(f"Grid field '{key}' must be a list.")
    return value


def grid_from_dict(data: Mapping[str, Any]) -> GridModel:
    """
    Construct a :py:class:`GridModel` from JSON-style data of the form::

        {
            "taxa": [
                {"id": 42048, "name": "Canis lupus", "rank": "species",
                 "preferred_common_name": "Gray Wolf"},
                ...
            ],
            "traits": [
                {"id": "ears", "description": "Ear shape"},
                ...
            ],
            "cells": [
                {"taxon_id": 42048, "trait_id": "ears",
                 "description": "Pointed",
                 "image_url": "https://...",
                 "crop_box": {"x": 10, "y": 20, "width": 100, "height": 50,
                              "img_width": 640, "img_height": 480},
                 "photo_attribution": "(c) Someone",
                 "link_url": "https://..."},
                ...
            ]
        }

    Optional fields may be omitted or null. Trait descriptions must not be
    blank. Throws
    :py:exc:`~trait_grid.exceptions.GridFileError` when the data is
    malformed and :py:exc:`~trait_grid.exceptions.InvalidCropBoxError` when a
    crop box is invalid.
    """
    if not isinstance(data, Mapping):
        raise GridFileError("Grid must be an object.")

    taxa = [
        Taxon(
            id=_get(taxon, "id", int, "Taxon"),
            name=_get(taxon, "name", str, "Taxon"),
            preferred_common_name=_get_optional(
                taxon, "preferred_common_name", str, "Taxon"
            ),
            rank=_get_optional(taxon, "rank", str, "Taxon"),
        )
        for taxon in _list(data, "taxa")
    ]

    traits = []
    for trait in _list(data, "traits"):
        description = _get(trait, "description", str, "Trait")
        # Used as the alt text of images in cells without a description
        if not description.strip():
            raise GridFileError("Trait field 'description' must not be empty.")
        traits.append(
            Trait(id=_get(trait, "id", str, "Trait"), description=description)
        )

    cells = []
    for cell in _list(data, "cells"):
        crop_box: Optional[CropBox] = None
        crop_box_data = _get_optional(cell, "crop_box", dict, "Cell")
        if crop_box_data is not None:
            crop_box = CropBox(
                **{
                    name: _get(crop_box_data, name, (int, float), "Crop box")
                    for name in ["x", "y", "width", "height", "img_width", "img_height"]
                }
            )

        cells.append(
            Cell(
                taxon_id=_get(cell, "taxon_id", int, "Cell"),
                trait_id=_get(cell, "trait_id", str, "Cell"),
                description=_get_optional(cell, "description", str, "Cell") or "",
                image_url=_get_optional(cell, "image_url", str, "Cell"),
                crop_box=crop_box,
                photo_attribution=_get_optional(
                    cell, "photo_attribution", str, "Cell"
                ),
                link_url=_get_optional(cell, "link_url", str, "Cell"),
            )
        )

    return GridModel(taxa, traits, cells)


def load_grid(filename: Path) -> GridModel:
    """
    Load a grid from a JSON file in the format accepted by
    :py:func:`grid_from_dict`.
    """
    try:
        with filename.open() as f:
            data = json.load(f)
    except OSError as e:
        raise GridFileError(f"Could not read {filename}: {e.strerror}")
    except json.JSONDecodeError as e:
        raise GridFileError(f"{filename} is not valid JSON: {e}")

    return grid_from_dict(data)
