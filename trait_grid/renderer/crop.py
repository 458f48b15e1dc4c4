"""
Two approaches are provided for showing just the cropped region of an image.

Remote cropping
===============

The image is passed through the `weserv.nl <https://images.weserv.nl/>`_
image proxy which crops the image server-side. The resulting URL can be used
as the ``src`` of a plain ``<img>`` and so works in contexts where inline
styles are stripped (e.g. forum comments).

.. autofunction:: remote_crop_url

CSS cropping
============

The original image is used unmodified, but is scaled-up and positioned
inside a clipping container such that only the cropped region is visible.

The container uses the 'padding trick' to fix its aspect ratio to that of the
crop: it has zero height and a bottom padding given as a percentage (which
CSS always computes relative to the container's *width*).

The image is then absolutely positioned with its center placed at the
container's center (``left: 50%; top: 50%`` combined with a ``translate(-50%,
-50%)``), scaled so that the crop region spans the container's width, and
shifted by the distance between the image's center and the crop region's
center.

.. autofunction:: css_crop_container_style

.. autofunction:: css_crop_image_style
"""

from typing import Tuple

import math

from urllib.parse import quote

from trait_grid.grid import CropBox

from trait_grid.number_formatting import format_percentage, round_percentage

from trait_grid.exceptions import InvalidInputError


__all__ = [
    "WESERV_URL",
    "remote_crop_url",
    "css_crop_aspect_ratio",
    "css_crop_scale",
    "css_crop_offset",
    "css_crop_container_style",
    "css_crop_image_style",
]


WESERV_URL = "https://images.weserv.nl/"
"""The image proxy used for remote cropping."""

# Characters left unescaped by the browser's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"


def remote_crop_url(image_url: str, crop_box: CropBox) -> str:
    """
    Produce the URL of the cropped version of an image via the image proxy.

    Example::

        >>> remote_crop_url(
        ...     "https://example.com/a.jpg",
        ...     CropBox(10, 20, 30, 40, 100, 100),
        ... )
        'https://images.weserv.nl/?url=https%3A%2F%2Fexample.com%2Fa.jpg&cx=10&cy=20&cw=30&ch=40'

    Fractional crop boxes are expanded to whole pixels: the top-left corner is
    rounded down and the bottom-right corner rounded up. The cropped region
    therefore always contains the selection and never extends beyond the
    image.
    """  # noqa: E501
    if not image_url:
        raise InvalidInputError("An image URL is required.")

    left = math.floor(crop_box.x)
    top = math.floor(crop_box.y)
    right = math.ceil(crop_box.x + crop_box.width)
    bottom = math.ceil(crop_box.y + crop_box.height)

    return (
        f"{WESERV_URL}?url={quote(image_url, safe=URI_COMPONENT_SAFE)}"
        f"&cx={left}"
        f"&cy={top}"
        f"&cw={right - left}"
        f"&ch={bottom - top}"
    )


def css_crop_aspect_ratio(crop_box: CropBox) -> str:
    """
    The height of the crop as a percentage of its width (formatted to two
    decimal places).
    """
    return format_percentage(crop_box.height / crop_box.width * 100)


def css_crop_scale(crop_box: CropBox) -> str:
    """
    The width of the whole image as a percentage of the crop region's width
    (formatted to two decimal places).
    """
    return format_percentage(crop_box.img_width / crop_box.width * 100)


def css_crop_offset(crop_box: CropBox) -> Tuple[str, str]:
    """
    The (x, y) distance between the center of the crop region and the center
    of the image as percentages of the image's dimensions (formatted to two
    decimal places).
    """
    center_x = crop_box.x + crop_box.width / 2
    center_y = crop_box.y + crop_box.height / 2

    # NB: Offsets are computed from the already-rounded center positions
    center_x_percent = round_percentage(center_x / crop_box.img_width * 100)
    center_y_percent = round_percentage(center_y / crop_box.img_height * 100)

    return (
        format_percentage(center_x_percent - 50),
        format_percentage(center_y_percent - 50),
    )


def css_crop_container_style(crop_box: CropBox) -> str:
    """
    Generate the inline style for the clipping container of a CSS-cropped
    image.
    """
    return (
        f"width: 100%; "
        f"padding-bottom: {css_crop_aspect_ratio(crop_box)}%; "
        f"position: relative; "
        f"overflow: hidden; "
        f"display: block;"
    )


def css_crop_image_style(crop_box: CropBox) -> str:
    """
    Generate the inline style for an image within a container styled by
    :py:func:`css_crop_container_style`.
    """
    offset_x, offset_y = css_crop_offset(crop_box)
    return (
        f"position: absolute; "
        f"width: {css_crop_scale(crop_box)}%; "
        f"height: auto; "
        f"left: 50%; "
        f"top: 50%; "
        f"transform: translate(calc(-50% - {offset_x}%), calc(-50% - {offset_y}%));"
    )
