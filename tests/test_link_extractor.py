# File: tests/test_link_extractor.py
from site_index.crawler.link_extractor import AbsoluteRef, extract_references, resolve
from site_index.parser.html_parser import parse_html

DOMAIN = "http://x.com/"


def test_resolve_relative_site_reference():
    ref = resolve("http://x.com/", "about.html", DOMAIN)
    assert ref.absolute_ref == "http://x.com/about.html"
    assert ref.site_reference
    assert not ref.ref_is_absolute
    assert ref.site_reference_description() == "Site-Reference"


def test_resolve_external_reference():
    ref = resolve("http://x.com/", "http://other.com/page.html", DOMAIN)
    assert ref.absolute_ref == "http://other.com/page.html"
    assert ref.ref_is_absolute
    assert not ref.site_reference
    assert ref.site_reference_description() == "Internet-Reference"


def test_resolve_classifies_against_scan_domain():
    # the referring page lives elsewhere, membership still follows the scanned site
    ref = resolve("http://other.com/blog/", "post.html", DOMAIN)
    assert ref.absolute_ref == "http://other.com/blog/post.html"
    assert not ref.site_reference


def test_resolve_strips_fragment():
    plain = resolve("http://x.com/", "page.html", DOMAIN)
    with_fragment = resolve("http://x.com/", "page.html#section2", DOMAIN)
    assert with_fragment.absolute_ref == "http://x.com/page.html"
    assert with_fragment == plain
    assert with_fragment.raw_input == "page.html#section2"


def test_resolve_absolute_https_with_fragment():
    ref = resolve("http://x.com/", "https://x.com/a.html#top", "https://x.com/")
    assert ref.absolute_ref == "https://x.com/a.html"
    assert ref.site_reference


def test_resolve_is_deterministic():
    assert resolve("http://x.com/a/", "b.html", DOMAIN) == resolve("http://x.com/a/", "b.html", DOMAIN)


def test_absolute_and_relative_forms_differ():
    relative = resolve("http://x.com/", "", DOMAIN)
    absolute = resolve("http://x.com/", "http://x.com/", DOMAIN)
    assert relative.absolute_ref == absolute.absolute_ref
    assert relative != absolute


def test_self_reference_of_directory_page():
    page = "http://x.com/docs/"
    self_ref = resolve(page, "", DOMAIN)
    assert resolve("http://x.com/docs/", "", DOMAIN) == self_ref
    assert resolve("http://x.com/docs/", "/", DOMAIN) == self_ref
    assert isinstance(self_ref, AbsoluteRef)


def test_extract_references_order_and_missing_attributes():
    page = parse_html(
        "<html><head><title>T</title><link rel='stylesheet' href='s.css'></head><body>"
        "<a href='one.html'>1</a><a name='anchor'>no href</a><a href='two.html'>2</a>"
        "<img src='i.png'></body></html>"
    )
    refs = list(extract_references(page, [("a", "href"), ("img", "src")]))
    assert refs == [
        ("a", "href", "one.html"),
        ("a", "href", ""),
        ("a", "href", "two.html"),
        ("img", "src", "i.png"),
    ]
    assert page.title == "T"


def test_extract_references_multi_valued_attribute():
    page = parse_html('<link rel="alternate icon" href="f.ico">')
    assert list(extract_references(page, [("link", "rel")])) == [("link", "rel", "alternate icon")]
