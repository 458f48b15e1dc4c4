"""
The ``trait-grid`` command renders a grid description (JSON) file into a HTML
table.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ trait-grid GRID_FILE [OUTPUT_FILENAME]

This will render the grid in the indicated JSON file (see
:py:func:`trait_grid.grid.grid_from_dict` for the format). If no output
filename is given, the input filename with the suffix replaced with '.html' is
used. Use '-' to write the HTML to stdout.

Rendering modes
===============

By default, HTML suitable for iNaturalist comments is produced (``--mode
comment``) in which images are cropped by a remote image proxy. Use ``--mode
journal`` to produce HTML for journal posts in which images are cropped using
CSS. In journal mode, a credit line linking to ``--site-url`` may be added
using ``--footer``.

Taxon names
===========

Column headings show scientific names by default. Use ``--names common`` or
``--names both`` to show common names where available. Use
``--no-taxon-links`` to prevent the names linking to their iNaturalist pages.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from trait_grid.exceptions import TraitGridError

from trait_grid.grid import load_grid

from trait_grid.renderer.images import RenderMode

from trait_grid.renderer.html import NameFormat, DEFAULT_SITE_URL, render_grid


def main() -> None:
    parser = ArgumentParser(
        description="""
            Render a trait grid JSON file as a HTML table.
        """,
    )

    parser.add_argument(
        "grid",
        type=Path,
        help="""
            The filename of the grid JSON file to render.
        """,
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="""
            The output filename for the generated HTML. Defaults to the input
            filename with the extension replaced with .html if no name is
            given. Use '-' for stdout.
        """,
    )

    parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.name for mode in RenderMode],
        default=RenderMode.comment.name,
        help="""
            The kind of HTML to generate: 'comment' (plain images cropped by a
            remote service) or 'journal' (images cropped using CSS).
            Defaults to %(default)s.
        """,
    )
    parser.add_argument(
        "--names",
        "-n",
        choices=[name_format.name for name_format in NameFormat],
        default=NameFormat.scientific.name,
        help="""
            How to show taxon names. Defaults to %(default)s.
        """,
    )
    parser.add_argument(
        "--no-taxon-links",
        action="store_false",
        dest="link_taxa",
        default=True,
        help="""
            Don't link taxon names to their iNaturalist pages.
        """,
    )

    parser.add_argument(
        "--footer",
        "-f",
        action="store_true",
        default=False,
        help="""
            Add a credit line after the table (journal mode only).
        """,
    )
    parser.add_argument(
        "--no-footer",
        "-F",
        action="store_false",
        dest="footer",
        help="""
            Don't add a credit line. This is the default.
        """,
    )
    parser.add_argument(
        "--site-url",
        default=DEFAULT_SITE_URL,
        help="""
            The address linked to by the credit line. Defaults to
            %(default)s.
        """,
    )

    args = parser.parse_args()

    try:
        html = render_grid(
            load_grid(args.grid),
            mode=RenderMode[args.mode],
            name_format=NameFormat[args.names],
            include_footer=args.footer,
            site_url=args.site_url,
            link_taxa=args.link_taxa,
        )
    except TraitGridError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    if args.output == "-":
        sys.stdout.write(html + "\n")
        return

    if args.output is None:
        output = args.grid.with_suffix(".html")
    else:
        output = Path(args.output)

    with output.open("w") as f:
        f.write(html + "\n")


if __name__ == "__main__":
    main()
