"""
This module implements :py:class:`~trait_grid.grid.GridModel` to HTML
conversion in the following routines:

.. autofunction:: render_grid

.. autofunction:: render_table

Taxon names in the column headers are formatted according to a
:py:class:`NameFormat`:

.. autoclass:: NameFormat
    :members:

.. autofunction:: render_taxon_name

Generated table structure
=========================

The generated ``<table>`` (with the CSS class ``table``) has a ``<thead>``
containing a single row of taxon names and a ``<tbody>`` with one row per
trait. The first column holds the trait descriptions (in ``<th>`` cells) and
every following column one taxon.

Column widths are given as ``width`` attributes: 10% for the label column
and an equal share of the remaining 90% for each taxon column (rounded down).
When there are no taxa, the label column is given the full 90%.

Where a cell has a description, it is given in a ``<p>`` preceding the image
(see :py:mod:`trait_grid.renderer.images`).

When a footer is requested (journal mode only), a credit line (``<p>`` with
the CSS class ``trait-grid-credit``) follows the table.
"""

from typing import Optional, Sequence

import html

from enum import Enum, auto

from trait_grid.grid import GridModel, Taxon, Trait, Cell

from trait_grid.renderer.tags import t

from trait_grid.renderer.images import (
    ImageStrategy,
    RenderMode,
    image_strategy_for_mode,
)


__all__ = [
    "NameFormat",
    "INATURALIST_TAXON_URL",
    "DEFAULT_SITE_URL",
    "render_taxon_name",
    "taxon_column_width",
    "label_column_width",
    "render_header",
    "render_cell",
    "render_trait_row",
    "render_footer",
    "render_table",
    "render_grid",
]


INATURALIST_TAXON_URL = "https://www.inaturalist.org/taxa/"
"""Prefix for the public page of a taxon (the taxon ID is appended)."""

DEFAULT_SITE_URL = "https://trait-grid.example.org/"
"""The address linked to by the credit line when none is given."""

LABEL_COLUMN_WIDTH = 10
TAXA_COLUMNS_WIDTH = 90
"""Widths (in percent) of the label column and all taxa columns combined."""


class NameFormat(Enum):
    scientific = auto()
    """Show the (italicised) scientific name only."""

    common = auto()
    """
    Show the common name only, falling back on the (italicised) scientific
    name when the taxon has no common name.
    """

    both = auto()
    """
    Show the common name followed by the (italicised) scientific name in
    parentheses, or just the scientific name when there is no common name.
    """


def render_taxon_name(taxon: Taxon, name_format: NameFormat) -> str:
    scientific_name = t("i", html.escape(taxon.name))
    common_name = taxon.preferred_common_name

    if name_format == NameFormat.scientific or not common_name:
        return scientific_name
    elif name_format == NameFormat.common:
        return html.escape(common_name)
    elif name_format == NameFormat.both:
        return f"{html.escape(common_name)} ({scientific_name})"
    else:
        raise NotImplementedError(name_format)


def taxon_column_width(num_taxa: int) -> int:
    """The width (percent) of each taxon column."""
    if num_taxa == 0:
        return TAXA_COLUMNS_WIDTH
    # NB: May not sum to exactly 90% when num_taxa does not divide 90
    return TAXA_COLUMNS_WIDTH // num_taxa


def label_column_width(num_taxa: int) -> int:
    """The width (percent) of the trait label column."""
    if num_taxa == 0:
        return TAXA_COLUMNS_WIDTH
    return LABEL_COLUMN_WIDTH


def render_header(
    taxa: Sequence[Taxon],
    name_format: NameFormat,
    link_taxa: bool = True,
) -> str:
    """
    Render the ``<thead>`` of the table, containing the taxon names. When
    ``link_taxa`` is True, each name links to the taxon's iNaturalist page.
    """
    width = f"{taxon_column_width(len(taxa))}%"

    header_cells = [t("th", "", width=f"{label_column_width(len(taxa))}%")]
    for taxon in taxa:
        name = render_taxon_name(taxon, name_format)
        if link_taxa:
            name = t("a", name, href=f"{INATURALIST_TAXON_URL}{taxon.id}")
        header_cells.append(t("th", name, width=width))

    return t("thead", t("tr", "\n".join(header_cells)))


def render_cell(
    cell: Optional[Cell],
    trait: Trait,
    width: int,
    image_strategy: ImageStrategy,
) -> str:
    """
    Render the ``<td>`` for a (possibly empty) cell.
    """
    parts = []
    if cell is not None:
        if cell.description:
            parts.append(t("p", html.escape(cell.description)))
        image = image_strategy.render(cell, trait)
        if image:
            parts.append(image)

    return t("td", "\n".join(parts), width=f"{width}%")


def render_trait_row(
    grid: GridModel,
    trait: Trait,
    image_strategy: ImageStrategy,
) -> str:
    """
    Render the ``<tr>`` for a trait: the trait's label followed by one cell
    per taxon.
    """
    width = taxon_column_width(len(grid.taxa))
    return t(
        "tr",
        "\n".join(
            [
                t(
                    "th",
                    t("p", html.escape(trait.description)),
                    width=f"{label_column_width(len(grid.taxa))}%",
                )
            ]
            + [
                render_cell(
                    grid.find_cell(taxon.id, trait.id), trait, width, image_strategy
                )
                for taxon in grid.taxa
            ]
        ),
    )


def render_footer(site_url: str) -> str:
    """Render the credit line placed beneath the table."""
    return t(
        "p",
        t("small", "Table made with " + t("a", "Trait Grid", href=site_url)),
        class_="trait-grid-credit",
    )


def render_table(
    grid: GridModel,
    image_strategy: ImageStrategy,
    name_format: NameFormat = NameFormat.scientific,
    include_footer: bool = False,
    site_url: str = DEFAULT_SITE_URL,
    link_taxa: bool = True,
) -> str:
    """
    Render a grid as a HTML table.

    Parameters
    ==========
    grid : :py:class:`~trait_grid.grid.GridModel`
        The grid to render. Rows and columns appear in the same order as the
        grid's traits and taxa.
    image_strategy : :py:class:`~trait_grid.renderer.images.ImageStrategy`
        The strategy used to render cell images.
    name_format : :py:class:`NameFormat`
        How taxon names are shown in the column headers.
    include_footer : bool
        If True, and the image strategy permits it, a credit line is added
        after the table.
    site_url : str
        The address linked to by the credit line. Callers should supply the
        canonical address of the page which generated the table.
    link_taxa : bool
        If True, taxon names link to their iNaturalist pages.
    """
    table = t(
        "table",
        render_header(grid.taxa, name_format, link_taxa)
        + "\n"
        + t(
            "tbody",
            "\n".join(
                render_trait_row(grid, trait, image_strategy) for trait in grid.traits
            ),
        ),
        class_="table",
    )

    if include_footer and image_strategy.allows_footer:
        table += "\n" + render_footer(site_url)

    return table


def render_grid(
    grid: GridModel,
    mode: RenderMode = RenderMode.comment,
    name_format: NameFormat = NameFormat.scientific,
    include_footer: bool = False,
    site_url: str = DEFAULT_SITE_URL,
    link_taxa: bool = True,
) -> str:
    """
    Render a grid as a HTML table using the image strategy for the specified
    :py:class:`~trait_grid.renderer.images.RenderMode`. See
    :py:func:`render_table` for the other arguments.
    """
    return render_table(
        grid,
        image_strategy_for_mode(mode),
        name_format=name_format,
        include_footer=include_footer,
        site_url=site_url,
        link_taxa=link_taxa,
    )
