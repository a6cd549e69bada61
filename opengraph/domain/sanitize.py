import html
import re

_COMMENT = re.compile(r"<!--.*?(?:-->|$)", re.DOTALL)
# A tag starts with a letter, "/", "!" or "?"; quoted attribute values may hold ">".
# An unclosed quote or tag runs to the end of the text, so every match attempt succeeds.
_TAG = re.compile(r"""<[a-zA-Z/!?](?:"[^"]*(?:"|$)|'[^']*(?:'|$)|[^'">])*(?:>|$)""")


def strip_tags(text: str) -> str:
    """
    Remove markup from text.
    Entities are left as written. A "<" not followed by a tag name is kept,
    so "a < b" survives unchanged. A tag left open, even inside a quoted
    attribute, is removed up to the end of the text.
    """
    if "<" not in text:
        return text

    text = _COMMENT.sub("", text)
    return _TAG.sub("", text)


def escape_path(path: str) -> str:
    """
    Make a request path safe to embed in an attribute value.
    Markup is stripped first, then HTML special characters are escaped.
    """
    return html.escape(strip_tags(path), quote=True)
