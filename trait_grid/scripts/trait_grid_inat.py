"""
The ``trait-grid-inat`` command looks up the taxon IDs and photo URLs needed
to write a grid file.

.. highlight:: bash

Usage
=====

Search for taxa by name::

    $ trait-grid-inat taxa QUERY

This prints one taxon per line as tab separated ID, scientific name and
common name.

List photos from the most popular observations, optionally of a specific
taxon::

    $ trait-grid-inat photos [--taxon TAXON_ID] [--size SIZE]

This prints one photo per line as tab separated ID, image URL, observation
URL and attribution.
"""

import sys

import logging

from argparse import ArgumentParser

from trait_grid.exceptions import TraitGridError

from trait_grid.inat import search_taxa, fetch_observation_photos


def main() -> None:
    parser = ArgumentParser(
        description="""
            Search iNaturalist for taxa and observation photos.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="""
            Log API requests to stderr.
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    taxa_parser = subparsers.add_parser(
        "taxa",
        help="""
            Search for taxa by name.
        """,
    )
    taxa_parser.add_argument(
        "query",
        help="""
            The (partial) scientific or common name to search for.
        """,
    )

    photos_parser = subparsers.add_parser(
        "photos",
        help="""
            List photos from the most voted-for observations.
        """,
    )
    photos_parser.add_argument(
        "--taxon",
        "-t",
        type=int,
        default=None,
        help="""
            Only list photos of observations of this taxon ID.
        """,
    )
    photos_parser.add_argument(
        "--size",
        "-s",
        choices=["square", "small", "medium", "large", "original"],
        default="large",
        help="""
            The size of image to link to. Defaults to %(default)s.
        """,
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.command == "taxa":
            for taxon in search_taxa(args.query):
                print(f"{taxon.id}\t{taxon.name}\t{taxon.preferred_common_name or ''}")
        elif args.command == "photos":
            for photo in fetch_observation_photos(args.taxon, photo_size=args.size):
                print(
                    f"{photo.id}\t{photo.url}\t{photo.observation_url}\t"
                    f"{photo.attribution}"
                )
    except TraitGridError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
