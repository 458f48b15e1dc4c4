"""
A minimal helper for generating HTML tags.

.. autofunction:: t
"""

from typing import Optional

from textwrap import indent

from xml.sax.saxutils import quoteattr


def t(tag: str, body: Optional[str] = None, **attrs: str) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("br")
        '<br />'
        >>> t("img", src="file.png")
        '<img src="file.png"/>'
        >>> t("a", "Click here", href="elsewhere.html")
        '<a href="elsewhere.html">Click here</a>'
        >>> t("p", "Hiya", class_="fancy")
        '<p class="fancy">Hiya</p>'
        >>> t("td", "", data__taxon="42")
        '<td data-taxon="42"></td>'

    Note that trailing underscores (``_``) are trimmed from attribute names and
    double underscores (``__``) are replaced with hyphens. Bodies spanning
    several lines are placed on their own lines and indented.

    Attribute values are escaped but the body is inserted verbatim: escape any
    text with :py:func:`html.escape` first.
    """

    attrs_str = " ".join(
        name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        if "\n" in body:
            body = "\n" + indent(body, "  ").rstrip() + "\n"
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"
