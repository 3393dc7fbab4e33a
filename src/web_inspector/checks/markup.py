"""HTML document and CSS delivery checks."""

import re

import httpx

from ..evidence import count, extract_snippet, has
from ..models import Verdict


# A tag with no matching close tag anywhere after it.
_UNCLOSED_TAG = re.compile(r"<(div|p|span|a|button)[^>]*>(?![\s\S]*</\1>)", re.IGNORECASE)
_OBSOLETE_TAG = r"<(font|center|marquee|blink)"
_STYLESHEET_LINK = r"""<link[^>]+rel=["']stylesheet["']"""
_VIEWPORT_META = r"""<meta[^>]+name=["']viewport["']"""


def check_valid_html(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Unclosed tags near the top of the document, or obsolete elements."""
    unclosed = _UNCLOSED_TAG.search(html[:5000]) is not None
    obsolete = has(_OBSOLETE_TAG, html)

    evidence = None
    if obsolete:
        evidence = extract_snippet(html, _OBSOLETE_TAG, 2)
    elif unclosed:
        evidence = extract_snippet(html, r"<html", 4)

    if obsolete:
        details = "Found obsolete HTML tags (font, center, marquee, etc.)."
    elif unclosed:
        details = "Found elements without a matching closing tag."
    else:
        details = "No obvious HTML validation errors detected."

    return Verdict(
        passed=not unclosed and not obsolete,
        details=details,
        recommendation="Use W3C HTML Validator to check for all validation errors. Remove obsolete tags.",
        evidence=evidence,
    )


def check_language(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_lang = has(r"<html[^>]+lang=", html)
    return Verdict(
        passed=has_lang,
        details="HTML lang attribute is present." if has_lang else "Missing lang attribute on <html> tag.",
        recommendation='Add lang="en" (or appropriate language code) to <html> tag.',
        evidence=None if has_lang else extract_snippet(html, r"<html", 1),
    )


def check_doctype(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_doctype = has(r"<!doctype\s+html", html)
    return Verdict(
        passed=has_doctype,
        details=(
            "Document has proper HTML5 DOCTYPE."
            if has_doctype
            else "Missing or incorrect DOCTYPE declaration."
        ),
        recommendation="Add <!DOCTYPE html> as the first line of your HTML document.",
    )


def check_meta_tags(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Charset and viewport are required; description is reported only."""
    has_charset = has(r"<meta[^>]+charset=", html)
    has_viewport = has(_VIEWPORT_META, html)
    has_description = has(r"""<meta[^>]+name=["']description["']""", html)

    marks = {True: "✓", False: "✗"}
    return Verdict(
        passed=has_charset and has_viewport,
        details=(
            f"Charset: {marks[has_charset]}, Viewport: {marks[has_viewport]}, "
            f"Description: {marks[has_description]}"
        ),
        recommendation=(
            'Add essential meta tags: <meta charset="UTF-8"> and '
            '<meta name="viewport" content="width=device-width, initial-scale=1">'
        ),
        evidence=None if has_viewport else extract_snippet(html, r"<head", 3),
    )


def check_external_css(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    style_blocks = count(r"<style[^>]*>", html)
    external = count(_STYLESHEET_LINK, html)
    style_attrs = count(r"\sstyle=", html)

    evidence = None
    if style_attrs >= 10:
        evidence = extract_snippet(html, r"\sstyle=", 2)
    elif style_blocks > 1:
        evidence = extract_snippet(html, r"<style", 2)

    return Verdict(
        passed=external > 0 and style_blocks <= 1 and style_attrs < 10,
        details=f"External: {external}, Inline <style>: {style_blocks}, Inline style= attributes: {style_attrs}",
        recommendation="Use external CSS files for better caching and maintainability. Inline only critical CSS.",
        evidence=evidence,
    )


def check_css_delivery(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_preload = has(r"""<link[^>]+rel=["']preload["'][^>]+as=["'](style|font)["']""", html)
    style_blocks = count(r"<style[^>]*>", html)
    external = count(_STYLESHEET_LINK, html)
    passed = has_preload or (style_blocks > 0 and external > 0)

    evidence = None
    if not passed:
        if external > 0:
            evidence = extract_snippet(html, _STYLESHEET_LINK, 2)
        else:
            evidence = extract_snippet(html, r"<head", 5)

    return Verdict(
        passed=passed,
        details=f"Preload: {has_preload}, Inline styles: {style_blocks}, External: {external}",
        recommendation='Inline critical CSS and use <link rel="preload"> for fonts. Defer non-critical CSS.',
        evidence=evidence,
    )


def check_responsive_design(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_media_query = has(r"@media", html)
    has_viewport = has(_VIEWPORT_META, html)

    evidence = None
    if not has_media_query:
        evidence = extract_snippet(html, r"<style", 4)
    elif not has_viewport:
        evidence = extract_snippet(html, r"<head", 3)

    return Verdict(
        passed=has_media_query and has_viewport,
        details=(
            f"Media queries: {'Yes' if has_media_query else 'No'}, "
            f"Viewport meta: {'Yes' if has_viewport else 'No'}"
        ),
        recommendation="Implement responsive design with @media queries and viewport meta tag.",
        evidence=evidence,
    )
