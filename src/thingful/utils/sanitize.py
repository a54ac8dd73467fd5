"""
XSS sanitization for user-supplied text.

Markup outside the allowlist is escaped rather than dropped, so
`<script>alert(1)</script>` comes back as `&lt;script&gt;alert(1)&lt;/script&gt;`
and the reader still sees what was written. Allowed tags keep only their
allowed attributes (`<img src=... onerror=...>` loses `onerror`).

Plain text comes back untouched, bare ampersands included ("Salt & pepper"
stays as written; bleach alone would serialize it as `&amp;`). Entities
already present in the input are preserved, so sanitizing stored text a
second time is a no-op.
"""

import bleach
from bleach import html5lib_shim

ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "code",
        "del",
        "div",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "u",
        "ul",
    }
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# First private-use code point tried as a stand-in for bare ampersands
_PLACEHOLDER_START = 0xE000


def _placeholder_for(text: str) -> str:
    """A private-use character that does not occur in text."""
    codepoint = _PLACEHOLDER_START
    while chr(codepoint) in text:
        codepoint += 1
    return chr(codepoint)


def _hide_bare_ampersands(text: str, placeholder: str) -> str:
    """
    Replace every `&` that does not start a character entity.

    Entities are recognised with bleach's own matcher, so `&lt;` and `&#39;`
    stay put while the `&` in "Salt & pepper" is hidden from the serializer.
    """
    parts = []
    for part in html5lib_shim.next_possible_entity(text):
        if part.startswith("&") and html5lib_shim.match_entity(part) is None:
            part = placeholder + part[1:]
        parts.append(part)
    return "".join(parts)


def sanitize(text: str | None) -> str | None:
    """Escape unsafe markup in text. None passes through."""
    if text is None:
        return None
    if "&" not in text:
        return _clean(text)

    placeholder = _placeholder_for(text)
    cleaned = _clean(_hide_bare_ampersands(text, placeholder))
    return cleaned.replace(placeholder, "&")


def _clean(text: str) -> str:
    # bleach.Cleaner is not thread-safe; clean() builds one per call
    return bleach.clean(
        text,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
        strip_comments=True,
    )
