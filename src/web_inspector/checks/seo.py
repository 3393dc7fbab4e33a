"""Search, social sharing and structured data checks."""

import re
from urllib.parse import urlparse

import httpx

from ..evidence import count, extract_snippet, find_all, has
from ..models import Verdict


_JSON_LD = r"""<script[^>]+type=["']application/ld\+json["'][^>]*>"""
_JSON_LD_BLOCK = r"""<script[^>]+type=["']application/ld\+json["'][^>]*>([\s\S]*?)</script>"""
_SPECIFIC_SCHEMA_TYPE = re.compile(
    r"(Article|Product|Recipe|Event|Organization|Person|Review|FAQ|JobPosting|Course)"
)
_CANONICAL = r"""<link[^>]+rel=["']canonical["']"""


def check_title(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Title present and between 10 and 60 characters."""
    match = re.search(r"<title>([^<]+)</title>", html, re.IGNORECASE)
    title = match.group(1).strip() if match else ""
    good_length = 10 <= len(title) <= 60
    passed = bool(title) and good_length

    evidence = None
    if not passed:
        if match:
            evidence = extract_snippet(html, r"<title>", 1)
        else:
            evidence = extract_snippet(html, r"<head", 3)

    return Verdict(
        passed=passed,
        details=(
            f'Title "{title}" ({len(title)} chars). Optimal: 50-60 chars.'
            if title
            else "Missing or empty page title."
        ),
        recommendation="Add a unique, descriptive title between 50-60 characters to every page.",
        evidence=evidence,
    )


def check_meta_description(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Description present and between 120 and 160 characters."""
    match = re.search(
        r"""<meta[^>]+name=["']description["'][^>]+content=["']([^"']+)["']""",
        html,
        re.IGNORECASE,
    )
    description = match.group(1).strip() if match else ""
    passed = bool(description) and 120 <= len(description) <= 160

    evidence = None
    if not passed:
        if match:
            evidence = extract_snippet(html, r"""<meta[^>]+name=["']description["']""", 1)
        else:
            evidence = extract_snippet(html, r"<head", 3)

    return Verdict(
        passed=passed,
        details=(
            f'Description: "{description[:100]}..." ({len(description)} chars). Optimal: 150-160 chars.'
            if description
            else "Missing meta description."
        ),
        recommendation="Add a unique meta description of 150-160 characters to every page.",
        evidence=evidence,
    )


def check_heading_hierarchy(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    h1 = count(r"<h1[^>]*>", html)
    h2 = count(r"<h2[^>]*>", html)
    h3 = count(r"<h3[^>]*>", html)
    skips_levels = h3 > 0 and h2 == 0

    evidence = None
    if h1 != 1:
        evidence = extract_snippet(html, r"<h1", 2)
    elif skips_levels:
        evidence = extract_snippet(html, r"<h3", 2)

    details = f"Headings: {h1} <h1>, {h2} <h2>, {h3} <h3>."
    if skips_levels:
        details += " Skips heading levels!"

    return Verdict(
        passed=h1 == 1 and not skips_levels,
        details=details,
        recommendation="Use exactly one <h1> per page. Maintain logical hierarchy: h1→h2→h3, never skip levels.",
        evidence=evidence,
    )


def check_structured_data(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """JSON-LD or microdata."""
    has_json_ld = has(_JSON_LD, html)
    has_microdata = has(r"itemscope|itemprop", html)
    passed = has_json_ld or has_microdata
    return Verdict(
        passed=passed,
        details=f"Structured data: JSON-LD({has_json_ld}), Microdata({has_microdata})",
        recommendation="Implement Schema.org structured data with JSON-LD for rich search results.",
        evidence=None if passed else extract_snippet(html, r"<head", 6),
    )


def check_sitemap(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    # Only looks for a reference in the page; /sitemap.xml itself is not fetched.
    mentions_sitemap = has(r"sitemap", html)
    return Verdict(
        passed=mentions_sitemap,
        details=(
            "Sitemap referenced in page."
            if mentions_sitemap
            else "No sitemap reference found. Check /sitemap.xml manually."
        ),
        recommendation="Create an XML sitemap at /sitemap.xml and reference it in robots.txt.",
        evidence=None if mentions_sitemap else extract_snippet(html, r"<footer|<body", 4),
    )


def check_canonical(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_canonical = has(_CANONICAL, html)
    return Verdict(
        passed=has_canonical,
        details="Canonical URL link is present." if has_canonical else "Missing canonical URL.",
        recommendation='Add <link rel="canonical" href="..."> to prevent duplicate content issues.',
        evidence=None if has_canonical else extract_snippet(html, r"<head", 5),
    )


def check_url_structure(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Lowercase, hyphenated paths under 100 characters."""
    path = urlparse(site_url).path or "/"
    has_underscores = "_" in path
    has_uppercase = re.search(r"[A-Z]", path) is not None
    return Verdict(
        passed=not has_underscores and not has_uppercase and len(path) < 100,
        details=(
            f"URL: {path}. Underscores: {has_underscores}, "
            f"CamelCase: {has_uppercase}, Length: {len(path)}"
        ),
        recommendation=(
            "Use hyphens (kebab-case) in URLs. Keep URLs under 100 characters. "
            "Avoid underscores and camelCase."
        ),
    )


def check_open_graph(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    tags = {
        name: has(rf"""<meta[^>]+property=["']og:{name}["']""", html)
        for name in ("title", "description", "image", "url")
    }
    found = sum(tags.values())
    return Verdict(
        passed=found >= 3,
        details="Open Graph tags: " + ", ".join(f"{name}({present})" for name, present in tags.items()),
        recommendation="Add all 4 essential Open Graph meta tags: og:title, og:description, og:image, og:url.",
        evidence=None if found >= 3 else extract_snippet(html, r"<head", 5),
    )


def check_og_image_dimensions(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    match = re.search(
        r"""<meta[^>]+property=["']og:image["'][^>]+content=["']([^"']+)["']""",
        html,
        re.IGNORECASE,
    )
    image_url = match.group(1) if match else None
    has_dimensions = has(r"""<meta[^>]+property=["']og:image:(width|height)["']""", html)
    return Verdict(
        passed=has_dimensions or not image_url,
        details=(
            f"OG image: {image_url[:50]}... Dimensions specified: {has_dimensions}"
            if image_url
            else "No OG image found."
        ),
        recommendation="Use 1200x630px images for og:image. Specify og:image:width and og:image:height.",
    )


def check_twitter_card(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_card = has(r"""<meta[^>]+name=["']twitter:card["']""", html)
    has_title = has(r"""<meta[^>]+name=["']twitter:title["']""", html)
    has_description = has(r"""<meta[^>]+name=["']twitter:description["']""", html)
    passed = has_card and has_title

    def yes_no(flag: bool) -> str:
        return "Yes" if flag else "No"

    return Verdict(
        passed=passed,
        details=(
            f"Twitter Card: {yes_no(has_card)}, Title: {yes_no(has_title)}, "
            f"Description: {yes_no(has_description)}"
        ),
        recommendation="Add Twitter Card meta tags for better tweet previews.",
        evidence=None if passed else extract_snippet(html, r"<head", 5),
    )


def check_json_ld(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_json_ld = has(_JSON_LD, html)
    return Verdict(
        passed=has_json_ld,
        details="Found JSON-LD structured data." if has_json_ld else "No structured data (JSON-LD) found.",
        recommendation=(
            "Add Schema.org structured data using JSON-LD format "
            "for better search engine understanding."
        ),
        evidence=None if has_json_ld else extract_snippet(html, r"<head", 6),
    )


def check_schema_types(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    blocks = find_all(_JSON_LD_BLOCK, html)
    specific = any(_SPECIFIC_SCHEMA_TYPE.search(block) for block in blocks)
    return Verdict(
        passed=specific,
        details=(
            "Found specific Schema.org types (Article, Product, etc.)."
            if specific
            else "No specific Schema.org types found. Avoid generic types like Thing."
        ),
        recommendation="Use specific Schema.org types: Article, Product, Recipe, Event, Organization, etc.",
        evidence=None if specific or not blocks else extract_snippet(html, r"application/ld\+json", 3),
    )
