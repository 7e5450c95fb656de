# site_index/crawler/link_extractor.py
"""
Reference extraction and resolution for SiteIndex.

Every raw value found in a ``tag.attribute`` slot of a page is turned into an
:class:`AbsoluteRef`: joined to the page base with exactly one path separator,
stripped of its fragment and classified as a reference into the scanned site
or out to the internet.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from site_index.parser.html_parser import ParsedPage, attr
from site_index.utils import join_url, strip_fragment

__all__ = ("AbsoluteRef", "resolve", "extract_references")

_ABSOLUTE_REF_RE = re.compile(r"https?://.*")


@dataclass(frozen=True, slots=True)
class AbsoluteRef:
    """A raw reference resolved against a page base. Equality ignores the raw input."""

    raw_input: str = field(compare=False)
    absolute_ref: str
    ref_is_absolute: bool
    site_reference: bool

    def site_reference_description(self) -> str:
        """Loggable marker of the classification."""
        return "Site-Reference" if self.site_reference else "Internet-Reference"


def resolve(base: str, ref: str, domain: str) -> AbsoluteRef:
    """
    Resolve *ref* found on a page whose reference base is *base*.

    *domain* is the domain prefix of the scan's homepage (see
    :func:`site_index.utils.extract_domain`); the reference belongs to the
    site when its absolute form starts with it.
    """
    is_absolute = _ABSOLUTE_REF_RE.fullmatch(ref) is not None
    absolute = strip_fragment(ref if is_absolute else join_url(base, ref))
    return AbsoluteRef(
        raw_input=ref,
        absolute_ref=absolute,
        ref_is_absolute=is_absolute,
        site_reference=absolute.startswith(domain),
    )


def extract_references(
    page: ParsedPage, templates: Iterable[Tuple[str, str]]
) -> Iterator[Tuple[str, str, str]]:
    """
    Yield ``(tag, attribute, value)`` for every element matching each template.

    Templates are processed in the given order, elements in document order.
    Elements lacking the attribute yield an empty value.
    """
    for tag_name, attr_name in templates:
        for element in page.select(tag_name):
            yield tag_name, attr_name, attr(element, attr_name)
