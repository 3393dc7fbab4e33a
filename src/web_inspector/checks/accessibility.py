"""Accessibility checks (WCAG 2.1, The A11Y Project, WebAIM)."""

import re

import httpx

from ..evidence import count, extract_snippet, find_all, has, literal, percent
from ..models import Verdict


_LIGHT_COLOR = r"#fff|#ffffff|white|#f[0-9a-f]{2,5}|rgb\(25[0-5],\s*25[0-5],\s*25[0-5]\)"
_LIGHT_BACKGROUND = re.compile(rf"background[^:]*:\s*({_LIGHT_COLOR})", re.IGNORECASE)
# Also matches background-color, so a light background alone is enough to flag.
_LIGHT_TEXT = re.compile(rf"color[^:]*:\s*({_LIGHT_COLOR})", re.IGNORECASE)

_GENERIC_LINK = r"<a[^>]*>(\s*)(click here|here|more|read more|link)(\s*)</a>"


def check_alt_text(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    images = find_all(r"<img[^>]*>", html)
    missing = [img for img in images if not has(r"<img[^>]+alt=", img)]

    if not images:
        details = "No images found on page."
    else:
        details = f"{len(images)} images found, {len(missing)} without alt text."

    return Verdict(
        passed=not missing,
        details=details,
        recommendation='Add descriptive alt text to all <img> tags. Use alt="" for decorative images.',
        evidence=extract_snippet(html, literal(missing[0]), 1) if missing else None,
    )


def check_color_contrast(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Flag pages declaring both light backgrounds and light text."""
    suspicious = bool(_LIGHT_BACKGROUND.search(html)) and bool(_LIGHT_TEXT.search(html))
    return Verdict(
        passed=not suspicious,
        details=(
            "Potential low-contrast combinations detected in CSS. Use tools like WebAIM contrast checker."
            if suspicious
            else "No obvious contrast issues detected in inline styles. "
                 "Use contrast checker tools for thorough verification."
        ),
        recommendation="Ensure 4.5:1 contrast ratio for normal text, 3:1 for large text. Test with WebAIM Contrast Checker.",
        evidence=extract_snippet(html, r"color[^:]*:\s*(#fff|white)", 2) if suspicious else None,
    )


def check_keyboard_access(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    interactive = count(r"<(button|a|input|select|textarea)[^>]*>", html)
    with_tabindex = count(r"tabindex=", html)
    negative = count(r"""tabindex=["']-1["']""", html)
    return Verdict(
        passed=negative == 0 or with_tabindex > interactive * 0.5,
        details=f"{interactive} interactive elements, {with_tabindex} with tabindex, {negative} with tabindex=-1",
        recommendation=(
            "Ensure all interactive elements are keyboard accessible. "
            'Avoid tabindex="-1" on interactive elements.'
        ),
        evidence=extract_snippet(html, r"""tabindex=["']-1["']""", 2) if negative else None,
    )


def check_semantic_html(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    elements = {tag: has(rf"<{tag}", html) for tag in ("nav", "main", "header", "footer")}
    found = sum(elements.values())
    return Verdict(
        passed=found >= 2,
        details=f"Found {found}/4 key semantic elements: "
                + ", ".join(f"{tag}({present})" for tag, present in elements.items()),
        recommendation=(
            "Use semantic HTML5 elements like <nav>, <main>, <header>, "
            "<footer>, <article>, and <section>."
        ),
        evidence=extract_snippet(html, r"<body", 5) if found < 2 else None,
    )


def check_focus_indicators(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    removes_outline = has(r":focus\s*\{\s*outline\s*:\s*none", html)
    return Verdict(
        passed=not removes_outline,
        details=(
            "CSS removes focus outline without providing alternative."
            if removes_outline
            else "Focus styles appear to be preserved."
        ),
        recommendation="Never use :focus { outline: none; } without providing a visible alternative focus indicator.",
        evidence=extract_snippet(html, r":focus\s*\{", 2) if removes_outline else None,
    )


def check_aria_labels(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    label = has(r"aria-label=", html)
    labelledby = has(r"aria-labelledby=", html)
    describedby = has(r"aria-describedby=", html)
    passed = label or labelledby or describedby
    return Verdict(
        passed=passed,
        details=(
            f"ARIA attributes found: aria-label({label}), "
            f"aria-labelledby({labelledby}), aria-describedby({describedby})"
        ),
        recommendation="Use ARIA labels to enhance accessibility of custom widgets and dynamic content.",
        evidence=None if passed else extract_snippet(html, r"<(div|button|span|a)[^>]*role=", 2),
    )


def check_link_text(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    generic = count(_GENERIC_LINK, html)
    total = count(r"<a[^>]*href=", html)
    return Verdict(
        passed=generic == 0,
        details=f'{total} links found, {generic} with generic text like "click here" or "more"',
        recommendation=(
            "Use descriptive link text that makes sense out of context. "
            'Avoid "click here", "read more", etc.'
        ),
        evidence=extract_snippet(html, r"<a[^>]*>(click here|here|more|read more)", 1) if generic else None,
    )


def check_form_labels(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    inputs = count(r"<input[^>]*>", html)
    labelled = count(r"""<label[^>]*for=["'][^"']+["'][^>]*>""", html)
    passed = inputs == 0 or labelled >= inputs * 0.8
    return Verdict(
        passed=passed,
        details=f"{inputs} inputs found, {labelled} with associated labels ({percent(labelled, inputs)}%)",
        recommendation='Every form input must have an associated <label> element with for="id" attribute.',
        evidence=None if passed else extract_snippet(html, r"<input[^>]*>", 2),
    )


def check_skip_link(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_skip_link = has(r"""<a[^>]*href=["']#(main|content|skip)["'][^>]*>(skip|skip to|jump to)""", html)
    return Verdict(
        passed=has_skip_link,
        details="Skip navigation link found." if has_skip_link else "No skip link detected.",
        recommendation='Add <a href="#main" class="skip-link">Skip to main content</a> at the beginning of the page.',
        evidence=None if has_skip_link else extract_snippet(html, r"<body", 4),
    )


def check_media_transcripts(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_audio = has(r"<audio[^>]*>", html)
    has_video = has(r"<video[^>]*>", html)
    has_transcript = has(r"transcript|transkript|текст", html)
    return Verdict(
        passed=not (has_audio or has_video) or has_transcript,
        details=f"Audio: {has_audio}, Video: {has_video}, Transcript: {has_transcript}",
        recommendation="Provide text transcripts for all audio/video content for accessibility.",
    )


def check_link_spacing(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    links = count(r"<a[^>]*>", html)
    interactive = count(r"<(a|button)[^>]*>", html)
    has_spacing = has(r"padding|margin", html)
    return Verdict(
        passed=links < 10 or has_spacing,
        details=(
            f"{links} links, {interactive} interactive elements. "
            f"Spacing: {'CSS found' if has_spacing else 'Check manually'}"
        ),
        recommendation="Ensure sufficient spacing between links and buttons (min 8px) for touch accessibility.",
    )


def check_div_buttons(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_onclick = has(r"onclick=", html)
    div_buttons = has(r"<div[^>]*onclick=", html)
    real_buttons = has(r"<button[^>]*>", html)
    passed = not div_buttons or real_buttons

    def found(flag: bool) -> str:
        return "Found" if flag else "None"

    return Verdict(
        passed=passed,
        details=(
            f"onclick handlers: {found(has_onclick)}, <div> as buttons: {found(div_buttons)}, "
            f"Real buttons: {found(real_buttons)}"
        ),
        recommendation=(
            'Use semantic <button> elements instead of <div onclick="...">. '
            "Test all functionality with keyboard only."
        ),
        evidence=None if passed else extract_snippet(html, r"<div[^>]*onclick=", 2),
    )
