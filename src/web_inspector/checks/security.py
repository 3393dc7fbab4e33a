"""Transport and header security checks."""

from urllib.parse import urlparse

import httpx

from ..evidence import has
from ..models import Verdict


def _mark(present) -> str:
    return "✓" if present else "✗"


def check_https(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    secure = urlparse(site_url).scheme == "https"
    return Verdict(
        passed=secure,
        details="Site uses HTTPS encryption." if secure else "Site uses insecure HTTP protocol.",
        recommendation=(
            "Migrate to HTTPS with a valid SSL certificate. "
            "Use services like Let's Encrypt for free certificates."
        ),
    )


def check_content_security_policy(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    csp = headers.get("content-security-policy")
    return Verdict(
        passed=bool(csp),
        details=f"CSP header present: {csp[:100]}..." if csp else "Missing Content-Security-Policy header.",
        recommendation="Implement Content-Security-Policy header to prevent XSS attacks.",
    )


def check_security_headers(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """At least two of X-Content-Type-Options, X-Frame-Options, Referrer-Policy."""
    content_type = headers.get("x-content-type-options")
    frame = headers.get("x-frame-options")
    referrer = headers.get("referrer-policy")
    present = sum(1 for value in (content_type, frame, referrer) if value)
    return Verdict(
        passed=present >= 2,
        details=(
            f"Security headers: X-Content-Type({bool(content_type)}), "
            f"X-Frame({bool(frame)}), Referrer-Policy({bool(referrer)})"
        ),
        recommendation=(
            "Add security headers: X-Content-Type-Options: nosniff, "
            "X-Frame-Options: DENY, Referrer-Policy: strict-origin."
        ),
    )


def check_baseline_security_headers(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Any one of CSP, X-Content-Type-Options or X-Frame-Options."""
    csp = headers.get("content-security-policy")
    content_type = headers.get("x-content-type-options")
    frame = headers.get("x-frame-options")
    return Verdict(
        passed=bool(csp or content_type or frame),
        details=(
            f"CSP: {_mark(csp)}, X-Content-Type-Options: {_mark(content_type)}, "
            f"X-Frame-Options: {_mark(frame)}"
        ),
        recommendation=(
            "Implement security headers: Content-Security-Policy, "
            "X-Content-Type-Options: nosniff, X-Frame-Options: DENY"
        ),
    )


def check_input_validation(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    has_forms = has(r"<form[^>]*>", html)
    has_validation = has(r"required|pattern=|minlength=|maxlength=", html)
    if has_forms:
        details = f"Forms found. Client-side validation: {'Yes' if has_validation else 'No'}"
    else:
        details = "No forms found on page."
    return Verdict(
        passed=not has_forms or has_validation,
        details=details,
        recommendation="Implement both client-side (HTML5) and server-side input validation for all forms.",
    )
