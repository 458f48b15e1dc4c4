"""
Each cell's image is rendered by one of two interchangeable strategies,
depending on where the generated HTML will be published.

.. autoclass:: RenderMode
    :members:

.. autofunction:: image_strategy_for_mode

.. autoclass:: ImageStrategy
    :members:

.. autoclass:: CommentImageStrategy

.. autoclass:: JournalImageStrategy

Both strategies share the following conventions:

* Cells without an image produce no output.
* The image's alt text is the cell's description or, when that is empty, the
  trait's description.
* When the cell has a photo attribution, the image is wrapped in a
  ``<figure>`` with the attribution as its ``<figcaption>``. Otherwise the
  image is wrapped in a plain block element.
"""

from typing import Mapping, Optional

import html

from abc import ABC, abstractmethod

from enum import Enum, auto

from trait_grid.grid import Cell, Trait

from trait_grid.renderer.tags import t

from trait_grid.renderer.crop import (
    remote_crop_url,
    css_crop_container_style,
    css_crop_image_style,
)


__all__ = [
    "RenderMode",
    "ImageStrategy",
    "CommentImageStrategy",
    "JournalImageStrategy",
    "image_strategy_for_mode",
    "alt_text",
    "wrap_image",
]


class RenderMode(Enum):
    comment = auto()
    """
    Plain ``<img>`` based markup suitable for pasting into comments, where
    inline styles are not permitted. Cropping is performed remotely.
    """

    journal = auto()
    """
    Richer markup for journal posts. Cropping is performed using inline CSS
    and the table may be followed by a credit line.
    """


def alt_text(cell: Cell, trait: Trait) -> str:
    return cell.description or trait.description


def wrap_image(image: str, photo_attribution: Optional[str], block_tag: str) -> str:
    """
    Wrap the image markup in a captioned ``<figure>`` when an attribution is
    given, or in the given block element otherwise.
    """
    if photo_attribution:
        return t(
            "figure",
            image + "\n" + t("figcaption", html.escape(photo_attribution)),
        )
    else:
        return t(block_tag, image)


def link(body: str, link_url: Optional[str]) -> str:
    if link_url:
        return t("a", body, href=link_url)
    else:
        return body


class ImageStrategy(ABC):
    """
    Base class for image rendering strategies.
    """

    block_tag: str = "p"
    """The element which wraps uncaptioned images."""

    allows_footer: bool = False
    """True if tables rendered with this strategy may include a credit line."""

    def render(self, cell: Cell, trait: Trait) -> str:
        """
        Render the image (if any) for the specified cell. Returns an empty
        string when the cell has no image.
        """
        if not cell.image_url:
            return ""

        return wrap_image(
            self.render_image(cell, cell.image_url, alt_text(cell, trait)),
            cell.photo_attribution,
            self.block_tag,
        )

    @abstractmethod
    def render_image(self, cell: Cell, image_url: str, alt: str) -> str:
        """
        Render the (possibly linked) image markup for a cell with an image.
        """
        raise NotImplementedError()


class CommentImageStrategy(ImageStrategy):
    """
    Renders cropped images via the remote image proxy (see
    :py:func:`~trait_grid.renderer.crop.remote_crop_url`).
    """

    def render_image(self, cell: Cell, image_url: str, alt: str) -> str:
        if cell.crop_box is not None:
            src = remote_crop_url(image_url, cell.crop_box)
        else:
            src = image_url

        return link(t("img", class_="img-responsive", src=src, alt=alt), cell.link_url)


class JournalImageStrategy(ImageStrategy):
    """
    Renders cropped images using CSS (see
    :py:func:`~trait_grid.renderer.crop.css_crop_container_style`).

    When the image is also a link, the link is used as the clipping container
    so that the whole visible region is clickable.
    """

    block_tag = "div"
    allows_footer = True

    def render_image(self, cell: Cell, image_url: str, alt: str) -> str:
        if cell.crop_box is None:
            return link(
                t("img", src=image_url, style="width: 100%;", alt=alt),
                cell.link_url,
            )

        image = t(
            "img",
            src=image_url,
            style=css_crop_image_style(cell.crop_box),
            alt=alt,
        )
        container_style = css_crop_container_style(cell.crop_box)
        if cell.link_url:
            return t("a", image, href=cell.link_url, style=container_style)
        else:
            return t("div", image, style=container_style)


IMAGE_STRATEGIES: Mapping[RenderMode, ImageStrategy] = {
    RenderMode.comment: CommentImageStrategy(),
    RenderMode.journal: JournalImageStrategy(),
}


def image_strategy_for_mode(mode: RenderMode) -> ImageStrategy:
    return IMAGE_STRATEGIES[mode]
