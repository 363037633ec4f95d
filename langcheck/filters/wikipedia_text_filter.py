"""Extract checkable plain text from MediaWiki markup.

Only the markup found in ordinary article text is handled: internal links,
images, templates, references, external links, emphasis, lists, headings and
inline HTML. Anything not recognised is kept as text.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Callable

import regex

# Internal links with these namespaces are dropped with all their content
DROPPED_LINK_PREFIXES = (
    "datei",
    "file",
    "image",
    "bild",
    "imatge",
    "fitxer",
    "файл",
    "изображение",
    "category",
    "kategorie",
    "categoria",
    "категория",
)

_COMMENT = regex.compile(r"<!--.*?-->", regex.DOTALL)
_REF_BLOCK = regex.compile(r"<ref\b[^>/]*>.*?</ref\s*>", regex.DOTALL | regex.IGNORECASE)
_REF_EMPTY = regex.compile(r"<ref\b[^>]*/>", regex.IGNORECASE)
_TAG = regex.compile(r"</?[A-Za-z][^>]*>")
_EXTERNAL_LINK = regex.compile(r"\[(?:https?|ftp)://[^\s\]]+(?:\s+([^\]]*))?\]")
_EMPHASIS = regex.compile(r"'{2,}")
_HEADING = regex.compile(r"^(=+)[ \t]*(.*?)[ \t]*\1[ \t]*$", regex.MULTILINE)
_LIST_ITEM = regex.compile(r"^[*#:;]+[ \t]*(.*)$", regex.MULTILINE)
_SPACES = regex.compile(r"[ \t]+")
_SPACES_AROUND_NEWLINE = regex.compile(r" *\n *")
_MANY_NEWLINES = regex.compile(r"\n{3,}")


@dataclass(frozen=True)
class PlainText:
    """Result of filtering one markup document."""

    plain_text: str

    def __str__(self) -> str:
        return self.plain_text


def _replace_balanced(text: str, opener: str, closer: str, handler: Callable[[str], str]) -> str:
    """Replace every outermost ``opener...closer`` block with ``handler(inner)``.

    Nested blocks are passed to ``handler`` untouched. An unclosed block is
    kept as text.
    """
    out: list[str] = []
    pos = 0
    while True:
        start = text.find(opener, pos)
        if start < 0:
            out.append(text[pos:])
            break
        depth = 0
        cursor = start
        end = -1
        while cursor < len(text):
            if text.startswith(opener, cursor):
                depth += 1
                cursor += len(opener)
            elif text.startswith(closer, cursor):
                depth -= 1
                cursor += len(closer)
                if depth == 0:
                    end = cursor
                    break
            else:
                cursor += 1
        if end < 0:
            out.append(text[pos:])
            break
        out.append(text[pos:start])
        out.append(handler(text[start + len(opener) : end - len(closer)]))
        pos = end
    return "".join(out)


def _split_top_level(inner: str, separator: str = "|") -> list[str]:
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    i = 0
    while i < len(inner):
        if inner.startswith("[[", i):
            depth += 1
            current.append("[[")
            i += 2
        elif inner.startswith("]]", i):
            depth -= 1
            current.append("]]")
            i += 2
        elif inner[i] == separator and depth == 0:
            parts.append("".join(current))
            current = []
            i += 1
        else:
            current.append(inner[i])
            i += 1
    parts.append("".join(current))
    return parts


class WikipediaTextFilter:
    """Turns MediaWiki markup into the text a reader would see."""

    def __init__(self, dropped_link_prefixes: tuple[str, ...] = DROPPED_LINK_PREFIXES) -> None:
        self.dropped_link_prefixes = tuple(prefix.lower() for prefix in dropped_link_prefixes)

    def filter(self, markup: str) -> PlainText:
        if not isinstance(markup, str):
            raise TypeError("markup must be a string")
        text = markup.replace("\r\n", "\n")
        text = _COMMENT.sub("", text)
        text = _REF_BLOCK.sub("", text)
        text = _REF_EMPTY.sub("", text)
        text = _replace_balanced(text, "{{", "}}", lambda _inner: "")
        text = self._resolve_internal_links(text)
        text = _EXTERNAL_LINK.sub(lambda m: m.group(1) or "", text)
        text = _TAG.sub("", text)
        text = html.unescape(text).replace("\xa0", " ")
        text = _EMPHASIS.sub("", text)
        text = _HEADING.sub(lambda m: m.group(2), text)
        # a list item becomes its own paragraph
        text = _LIST_ITEM.sub(lambda m: m.group(1) + "\n", text)
        text = _SPACES.sub(" ", text)
        text = _SPACES_AROUND_NEWLINE.sub("\n", text)
        text = _MANY_NEWLINES.sub("\n\n", text)
        return PlainText(text.strip())

    def _resolve_internal_links(self, text: str) -> str:
        return _replace_balanced(text, "[[", "]]", self._link_text)

    def _link_text(self, inner: str) -> str:
        target = inner.split("|", 1)[0].strip()
        namespace, colon, _rest = target.partition(":")
        if colon and namespace.strip().lower() in self.dropped_link_prefixes:
            return ""
        label = _split_top_level(inner)[-1]
        return self._resolve_internal_links(label)
