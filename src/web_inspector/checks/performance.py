"""Loading performance checks.

These are byte-size and markup heuristics. Nothing here measures real
paint or interaction timings.
"""

import re
from urllib.parse import urljoin, urlparse

import httpx

from ..evidence import count, extract_snippet, find_all, has, literal, percent, round_half_up
from ..models import Verdict


MAX_HTML_SIZE = 500_000

_IMG = r"<img[^>]*>"
_BLOCKING_SCRIPT = r"""<script(?![^>]*\b(?:defer|async)\b)[^>]*src=["'][^"']+["'][^>]*>"""
_BLOCKING_STYLESHEET = r"""<link[^>]+rel=["']stylesheet["'](?![^>]*\bmedia=["']print["'])[^>]*>"""
_STYLESHEET_LINK = r"""<link[^>]+rel=["']stylesheet["']"""
# Stops at the end of the src value; attributes after it are not seen.
_SCRIPT_WITH_SRC = re.compile(r"""<script[^>]+src=["']([^"']+)["']""", re.IGNORECASE)


def _kb(size: int) -> int:
    return round_half_up(size / 1024)


def check_lazy_loading(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Most images lazy (or few images), and at least one deferred/async script."""
    images = count(_IMG, html)
    lazy = count(r"""<img[^>]*loading=["']lazy["']""", html)
    deferred = count(r"<script[^>]*defer", html)
    asynchronous = count(r"<script[^>]*async", html)

    images_ok = images < 5 or lazy / images > 0.5
    return Verdict(
        passed=images_ok and deferred + asynchronous > 0,
        details=(
            f"{lazy}/{images} images lazy-loaded, {deferred} deferred scripts, "
            f"{asynchronous} async scripts"
        ),
        recommendation='Use loading="lazy" for below-fold images. Add defer/async to scripts to improve LCP.',
    )


def check_layout_shift(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    total = count(_IMG, html)
    sized = count(r"<img[^>]+(width=|height=)[^>]*>", html)
    unsized = find_all(r"<img(?![^>]+(width=|height=))[^>]*>", html)
    return Verdict(
        passed=total == 0 or sized / total > 0.8,
        details=f"{sized}/{total} images have width/height attributes ({percent(sized, total)}%)",
        recommendation="Add width and height attributes to all images to prevent layout shifts (CLS).",
        evidence=extract_snippet(html, literal(unsized[0]), 1) if unsized else None,
    )


def check_render_blocking(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    scripts = find_all(_BLOCKING_SCRIPT, html)
    stylesheets = find_all(_BLOCKING_STYLESHEET, html)

    evidence = None
    if scripts:
        evidence = extract_snippet(html, literal(scripts[0]), 2)
    elif stylesheets:
        evidence = extract_snippet(html, _STYLESHEET_LINK, 2)

    return Verdict(
        passed=not scripts and not stylesheets,
        details=(
            f"Found {len(scripts)} render-blocking scripts and "
            f"{len(stylesheets)} render-blocking stylesheets."
        ),
        recommendation=(
            "Add defer or async attributes to <script> tags. Use media=\"print\" "
            "or load CSS asynchronously for non-critical styles."
        ),
        evidence=evidence,
    )


def check_image_optimization(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Modern formats offered through <source> and lazy loading used."""
    images = find_all(_IMG, html)
    webp = has(r"""<source[^>]+type=["']image/webp["']""", html)
    avif = has(r"""<source[^>]+type=["']image/avif["']""", html)
    lazy = any(has(r"""loading=["']lazy["']""", img) for img in images)
    passed = (webp or avif) and lazy

    def yes_no(flag: bool) -> str:
        return "Yes" if flag else "No"

    return Verdict(
        passed=passed,
        details=(
            f"Images: {len(images)}, WebP: {yes_no(webp)}, AVIF: {yes_no(avif)}, "
            f"Lazy Loading: {yes_no(lazy)}"
        ),
        recommendation='Use <picture> with WebP/AVIF formats. Add loading="lazy" to below-fold images.',
        evidence=extract_snippet(html, _IMG, 2) if images and not passed else None,
    )


def check_payload_size(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    size = len(html)
    resources = count(r"<(script|link|img)[^>]*src=|href=", html)
    return Verdict(
        passed=size < MAX_HTML_SIZE,
        details=(
            f"HTML size: {_kb(size)}KB, External resources: {resources}. "
            f"Estimated total: ~{_kb(size + resources * 50_000)}KB"
        ),
        recommendation="Keep total network payload under 1.6MB. Minify, compress, and optimize all assets.",
    )


def check_passive_listeners(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    touch = has(r"""addEventListener\s*\(\s*['"]touch""", html)
    wheel = has(r"""addEventListener\s*\(\s*['"]wheel""", html)
    passive = has(r"\{\s*passive\s*:\s*true\s*\}", html)
    return Verdict(
        passed=not (touch or wheel) or passive,
        details=f"Touch events: {touch}, Wheel events: {wheel}, Passive: {passive}",
        recommendation=(
            "Mark touch and wheel event listeners as passive: "
            'addEventListener("touchstart", handler, { passive: true });'
        ),
    )


def check_third_party_scripts(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Third-party scripts should mostly load with async or defer."""
    site_host = urlparse(site_url).hostname
    third_party = []
    for match in _SCRIPT_WITH_SRC.finditer(html):
        src = match.group(1)
        # Root-relative and ./ paths are first-party by definition.
        if src.startswith(("/", "./")):
            continue
        if urlparse(urljoin(site_url, src)).hostname != site_host:
            third_party.append(match.group(0))

    # Counted over every script with a src, first-party ones included.
    non_blocking = sum(1 for m in _SCRIPT_WITH_SRC.finditer(html) if re.search(r"async|defer", m.group(0)))
    share = non_blocking / len(third_party) if third_party else 0
    return Verdict(
        passed=not third_party or share > 0.8,
        details=(
            f"{len(third_party)} third-party scripts, {non_blocking} loaded async/defer "
            f"({percent(non_blocking, len(third_party))}%)"
        ),
        recommendation="Load third-party scripts asynchronously. Consider self-hosting critical dependencies.",
        evidence=extract_snippet(html, literal(third_party[0]), 1) if third_party and share <= 0.8 else None,
    )


def check_request_count(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    images = count(_IMG, html)
    scripts = count(r"<script[^>]*src=", html)
    styles = count(_STYLESHEET_LINK, html)
    fonts = count(r"""<link[^>]+rel=["']preload["'][^>]+as=["']font["']""", html)
    total = images + scripts + styles + fonts
    return Verdict(
        passed=total < 50,
        details=(
            f"Total HTTP requests: {total} (images: {images}, scripts: {scripts}, "
            f"styles: {styles}, fonts: {fonts})"
        ),
        recommendation=(
            "Reduce HTTP requests: bundle JS/CSS, sprite images, "
            "inline critical resources. Target <50 requests."
        ),
    )


def check_touch_targets(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Many tiny font sizes hint at touch targets that are too small."""
    sizes = [int(m.group(1)) for m in re.finditer(r"font-size:\s*([0-9]+)px", html, re.IGNORECASE)]
    tiny = sum(1 for size in sizes if size < 14)
    return Verdict(
        passed=tiny < 5,
        details=(
            f"Found {tiny} elements with very small font sizes (<14px) which may indicate small touch targets."
            if tiny
            else "Touch target sizes appear adequate."
        ),
        recommendation="Ensure all interactive elements are at least 48x48 CSS pixels with 8px spacing.",
        evidence=extract_snippet(html, r"font-size:\s*([0-9]|1[0-3])px", 2) if tiny >= 5 else None,
    )


def check_interstitials(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_popup = has(r"(modal|popup|overlay|interstitial)", html)
    hidden_by_default = has(r"display:\s*none", html)
    return Verdict(
        passed=not has_popup or hidden_by_default,
        details=(
            "Potential modal/popup detected. Ensure it's not intrusive on mobile."
            if has_popup
            else "No obvious intrusive interstitials detected."
        ),
        recommendation="Avoid full-screen popups on mobile. Use dismissible banners instead.",
    )


def check_mobile_payload(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    size = len(html)
    images = count(_IMG, html)
    scripts = count(r"<script[^>]*src=", html)
    return Verdict(
        passed=size < MAX_HTML_SIZE,
        details=f"HTML size: {_kb(size)}KB, {images} images, {scripts} external scripts",
        recommendation=(
            "Optimize for mobile: compress images, minify code, lazy load resources. "
            "Keep total page under 2MB."
        ),
    )
