"""User experience, content, PWA and design system checks."""

import re

import httpx

from ..evidence import count, extract_snippet, has, round_half_up
from ..models import Verdict


def check_navigation(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """A <nav> element holding at least three links."""
    nav = re.search(r"<nav[\s\S]*?</nav>", html, re.IGNORECASE)
    has_nav = has(r"<nav[^>]*>", html)
    links = count(r"<a[^>]*>", nav.group(0)) if has_nav and nav else 0
    passed = has_nav and links >= 3

    evidence = None
    if not passed:
        evidence = extract_snippet(html, r"<nav", 3) if has_nav else extract_snippet(html, r"<body", 5)

    return Verdict(
        passed=passed,
        details=f"Navigation found with {links} links." if has_nav else "No <nav> element found.",
        recommendation="Include clear, consistent navigation with <nav> element containing main site links.",
        evidence=evidence,
    )


def check_form_usability(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    forms = count(r"<form[^>]*>", html)
    labels = count(r"<label[^>]*>", html)
    inputs = count(r"<input[^>]*>", html)
    placeholders = has(r"placeholder=", html)
    passed = forms == 0 or (labels > 0 and placeholders)
    return Verdict(
        passed=passed,
        details=f"{forms} forms, {inputs} inputs, {labels} labels, Placeholders: {placeholders}",
        recommendation="Use clear labels, appropriate input types, placeholders, and validation for all forms.",
        evidence=None if passed else extract_snippet(html, r"<form", 3),
    )


def check_loading_indicators(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_indicator = has(r"(spinner|loading|loader)", html)
    return Verdict(
        passed=has_indicator,
        details="Loading indicators found in HTML/CSS." if has_indicator else "No loading indicators detected.",
        recommendation=(
            "Provide visual feedback during async operations with spinners, "
            "progress bars, or skeleton screens."
        ),
    )


def check_readability(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Average characters per whitespace-separated token, tags stripped."""
    text_length = len(re.sub(r"<[^>]+>", "", html).strip())
    tokens = len(re.split(r"\s+", html)) or 1
    average = text_length / tokens
    return Verdict(
        passed=average < 6 and text_length > 100,
        details=f"Content length: {text_length} chars, Average word length: {round_half_up(average)} chars",
        recommendation="Write clear, concise content at 8th-grade reading level. Use short sentences and simple words.",
    )


def check_contact_info(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    email = has(r"mailto:|@", html)
    phone = has(r"tel:|phone|telefon", html)
    contact = has(r"(contact|kontakt|impressum)", html)
    return Verdict(
        passed=(email or phone) and contact,
        details=f"Email: {email}, Phone: {phone}, Contact page: {contact}",
        recommendation="Provide clear contact information: email, phone, and/or contact form.",
    )


def check_manifest(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    pattern = r"""<link[^>]+rel=["']manifest["']"""
    has_manifest = has(pattern, html)
    return Verdict(
        passed=has_manifest,
        details="Web app manifest link found." if has_manifest else "No web app manifest detected.",
        recommendation='Add <link rel="manifest" href="/manifest.json"> for PWA installability.',
        evidence=None if has_manifest else extract_snippet(html, r"<head", 5),
    )


def check_service_worker(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    registered = has(r"navigator\.serviceWorker\.register", html)
    return Verdict(
        passed=registered,
        details=(
            "Service worker registration found in JavaScript."
            if registered
            else "No service worker registration detected."
        ),
        recommendation="Register a service worker for offline support and caching.",
        evidence=None if registered else extract_snippet(html, r"<script", 3),
    )


def check_offline_fallback(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    service_worker = has(r"navigator\.serviceWorker", html)
    offline_page = has(r"offline\.html|offline-fallback", html)
    return Verdict(
        passed=offline_page or service_worker,
        details=f"Service worker: {service_worker}, Offline page: {offline_page}",
        recommendation="Create offline.html fallback page served by service worker when network is unavailable.",
    )


def check_spacing_scale(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Spacing values off the 8px grid (above 8px) must stay under 30%."""
    declarations = [m.group(0) for m in re.finditer(r"padding|margin:\s*(\d+)px", html, re.IGNORECASE)]

    def pixels(declaration: str) -> int:
        digits = re.search(r"(\d+)", declaration)
        return int(digits.group(1)) if digits else 0

    irregular = sum(1 for d in declarations if pixels(d) % 8 != 0 and pixels(d) > 8)
    return Verdict(
        passed=irregular < len(declarations) * 0.3,
        details=f"{len(declarations)} spacing declarations, {irregular} not on 8px scale",
        recommendation="Use consistent spacing scale: 8px, 16px, 24px, 32px, etc. (8px base unit).",
    )


def check_contrast_tokens(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    mentions_contrast = has(r"contrast|color-contrast", html)
    return Verdict(
        passed=mentions_contrast,
        details="Contrast considerations in CSS: " + ("Found" if mentions_contrast else "Not evident"),
        recommendation=(
            "Follow Carbon Design System color contrast guidelines. "
            "Ensure 4.5:1 ratio for text."
        ),
    )


def check_elevation(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    shadows = count(r"box-shadow:", html)
    elevation = has(r"elevation|shadow-", html)
    return Verdict(
        passed=shadows > 0 or elevation,
        details=(
            f"{shadows} box-shadow declarations found. "
            f"Elevation system: {'Detected' if elevation else 'Not detected'}"
        ),
        recommendation=(
            "Use consistent elevation system: Cards at elevation 1 (0-2px shadow), "
            "Dialogs at elevation 24."
        ),
    )


def check_ripple_feedback(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    ripple = has(r"ripple|wave|touch-feedback", html)
    buttons = has(r"<button[^>]*>", html)
    return Verdict(
        passed=not buttons or ripple,
        details=(
            f"Buttons: {'Found' if buttons else 'None'}, "
            f"Ripple effects: {'Detected' if ripple else 'Not detected'}"
        ),
        recommendation="Add ripple/wave effects to buttons for touch feedback (Material Design pattern).",
    )
