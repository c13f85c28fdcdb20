from unittest.mock import patch

from metafetcher.parser import MISSING, parse_html


SAMPLE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <title>
        Best Camping Tents
        for 2024
    </title>
    <meta name="description" content="A guide to the top camping tents for outdoor enthusiasts.">
    <meta property="og:title" content="Top Camping Tents">
    <meta property="og:description" content="Expert picks for campers.">
    <meta property="og:image" content="https://example.com/tent.jpg">
</head>
<body>
    <h1>Best Camping Tents</h1>
</body>
</html>
"""


def test_title_whitespace_collapsed():
    result = parse_html(SAMPLE_HTML)
    assert result["title"] == "Best Camping Tents for 2024"


def test_meta_description():
    result = parse_html(SAMPLE_HTML)
    assert result["description"] == "A guide to the top camping tents for outdoor enthusiasts."


def test_og_tags():
    result = parse_html(SAMPLE_HTML)
    assert result["og_title"] == "Top Camping Tents"
    assert result["og_description"] == "Expert picks for campers."
    assert result["og_image"] == "https://example.com/tent.jpg"


def test_absent_tags_are_none():
    result = parse_html("<html><head></head><body><p>hi</p></body></html>")
    assert result == {
        "title": None,
        "description": None,
        "og_title": None,
        "og_description": None,
        "og_image": None,
    }


def test_tag_without_content_is_marked_missing():
    result = parse_html('<meta property="og:title"><meta name="description">')
    assert result["og_title"] is MISSING
    assert result["description"] is MISSING


def test_empty_content_is_kept():
    result = parse_html('<meta property="og:title" content="">')
    assert result["og_title"] == ""


def test_only_meta_elements_count():
    result = parse_html('<body><span property="og:title" content="Not a meta"></span></body>')
    assert result["og_title"] is None


def test_empty_html_does_not_crash():
    result = parse_html("")
    assert result["title"] is None
    assert result["og_image"] is None


def test_parser_failure_degrades_to_empty():
    with patch("metafetcher.parser.BeautifulSoup", side_effect=ValueError("boom")):
        result = parse_html("<title>x</title>")
    assert all(value is None for value in result.values())
