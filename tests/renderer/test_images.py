import pytest

from xml.sax.saxutils import quoteattr

from trait_grid.grid import Trait, Cell, CropBox

from trait_grid.renderer.crop import (
    remote_crop_url,
    css_crop_container_style,
    css_crop_image_style,
)

from trait_grid.renderer.images import (
    RenderMode,
    ImageStrategy,
    CommentImageStrategy,
    JournalImageStrategy,
    image_strategy_for_mode,
    alt_text,
    wrap_image,
)


IMAGE = "https://example.com/photos/1/large.jpg"
LINK = "https://example.com/observations/1"
CROP_BOX = CropBox(100, 50, 200, 100, 800, 400)
TRAIT = Trait("size", "Size")


def test_image_strategy_for_mode() -> None:
    assert isinstance(image_strategy_for_mode(RenderMode.comment), CommentImageStrategy)
    assert isinstance(image_strategy_for_mode(RenderMode.journal), JournalImageStrategy)


@pytest.mark.parametrize(
    "cell, exp",
    [
        (Cell(1, "size", "large"), "large"),
        (Cell(1, "size", ""), "Size"),
    ],
)
def test_alt_text(cell: Cell, exp: str) -> None:
    assert alt_text(cell, TRAIT) == exp


class TestWrapImage:
    def test_no_attribution(self) -> None:
        assert wrap_image("<img/>", None, "p") == "<p><img/></p>"
        assert wrap_image("<img/>", "", "div") == "<div><img/></div>"

    def test_attribution(self) -> None:
        assert wrap_image("<img/>", "(c) Jo & Sam", "p") == (
            "<figure>\n"
            "  <img/>\n"
            "  <figcaption>(c) Jo &amp; Sam</figcaption>\n"
            "</figure>"
        )


@pytest.mark.parametrize(
    "strategy",
    [CommentImageStrategy(), JournalImageStrategy()],
)
class TestCommonBehaviour:
    def test_no_image(self, strategy: ImageStrategy) -> None:
        assert strategy.render(Cell(1, "size", "large"), TRAIT) == ""
        assert strategy.render(Cell(1, "size", "large", image_url=""), TRAIT) == ""

    def test_no_image_ignores_crop_box(self, strategy: ImageStrategy) -> None:
        cell = Cell(1, "size", "large", crop_box=CROP_BOX, link_url=LINK)
        assert strategy.render(cell, TRAIT) == ""

    def test_alt_text_never_empty(self, strategy: ImageStrategy) -> None:
        assert 'alt="large"' in strategy.render(
            Cell(1, "size", "large", image_url=IMAGE), TRAIT
        )
        assert 'alt="Size"' in strategy.render(
            Cell(1, "size", "", image_url=IMAGE), TRAIT
        )

    def test_attribution_caption(self, strategy: ImageStrategy) -> None:
        html = strategy.render(
            Cell(1, "size", image_url=IMAGE, photo_attribution="(c) Jo"),
            TRAIT,
        )
        assert html.startswith("<figure>\n")
        assert html.endswith("\n  <figcaption>(c) Jo</figcaption>\n</figure>")


class TestCommentImageStrategy:
    def test_plain(self) -> None:
        assert CommentImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE), TRAIT
        ) == (
            "<p>"
            '<img class="img-responsive" '
            'src="https://example.com/photos/1/large.jpg" alt="large"/>'
            "</p>"
        )

    def test_link(self) -> None:
        assert CommentImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE, link_url=LINK), TRAIT
        ) == (
            '<p><a href="https://example.com/observations/1">'
            '<img class="img-responsive" '
            'src="https://example.com/photos/1/large.jpg" alt="large"/>'
            "</a></p>"
        )

    def test_crop(self) -> None:
        html = CommentImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE, crop_box=CROP_BOX), TRAIT
        )
        assert html == (
            "<p>"
            '<img class="img-responsive" '
            f"src={quoteattr(remote_crop_url(IMAGE, CROP_BOX))} "
            'alt="large"/>'
            "</p>"
        )
        assert "style=" not in html

    def test_crop_link_and_attribution(self) -> None:
        assert CommentImageStrategy().render(
            Cell(
                1,
                "size",
                "large",
                image_url=IMAGE,
                crop_box=CROP_BOX,
                link_url=LINK,
                photo_attribution="(c) Jo",
            ),
            TRAIT,
        ) == (
            "<figure>\n"
            '  <a href="https://example.com/observations/1">'
            '<img class="img-responsive" '
            f"src={quoteattr(remote_crop_url(IMAGE, CROP_BOX))} "
            'alt="large"/></a>\n'
            "  <figcaption>(c) Jo</figcaption>\n"
            "</figure>"
        )


class TestJournalImageStrategy:
    def test_plain(self) -> None:
        assert JournalImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE), TRAIT
        ) == (
            "<div>"
            '<img src="https://example.com/photos/1/large.jpg" '
            'style="width: 100%;" alt="large"/>'
            "</div>"
        )

    def test_link(self) -> None:
        assert JournalImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE, link_url=LINK), TRAIT
        ) == (
            '<div><a href="https://example.com/observations/1">'
            '<img src="https://example.com/photos/1/large.jpg" '
            'style="width: 100%;" alt="large"/>'
            "</a></div>"
        )

    def test_crop(self) -> None:
        html = JournalImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE, crop_box=CROP_BOX), TRAIT
        )
        assert html == (
            "<div>"
            f'<div style="{css_crop_container_style(CROP_BOX)}">'
            '<img src="https://example.com/photos/1/large.jpg" '
            f'style="{css_crop_image_style(CROP_BOX)}" alt="large"/>'
            "</div>"
            "</div>"
        )

        # The original image is used, not a remotely cropped one
        assert "weserv" not in html

    def test_crop_styles(self) -> None:
        html = JournalImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE, crop_box=CROP_BOX), TRAIT
        )
        container, _, image = html.partition("<img ")
        assert "padding-bottom: 50.00%;" in container
        assert "transform: translate(" in image
        assert "width: 400.00%;" in image

    def test_crop_link_wraps_container(self) -> None:
        assert JournalImageStrategy().render(
            Cell(1, "size", "large", image_url=IMAGE, crop_box=CROP_BOX, link_url=LINK),
            TRAIT,
        ) == (
            "<div>"
            '<a href="https://example.com/observations/1" '
            f'style="{css_crop_container_style(CROP_BOX)}">'
            '<img src="https://example.com/photos/1/large.jpg" '
            f'style="{css_crop_image_style(CROP_BOX)}" alt="large"/>'
            "</a>"
            "</div>"
        )
