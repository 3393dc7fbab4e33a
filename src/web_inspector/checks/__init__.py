"""Rule checks and the table routing rule ids to them.

Every check has the signature ``(html, headers, site_url) -> Verdict``.
Several ids share one check where the catalog repeats a concern.
"""

from types import MappingProxyType
from typing import Callable, Mapping

import httpx

from ..models import Verdict
from . import accessibility, experience, javascript, markup, performance, security, seo

Check = Callable[[str, httpx.Headers, str], Verdict]


CHECKS: Mapping[str, Check] = MappingProxyType({
    # Accessibility
    "wcag-001": accessibility.check_alt_text,
    "wcag-002": accessibility.check_color_contrast,
    "wcag-003": accessibility.check_keyboard_access,
    "wcag-004": accessibility.check_semantic_html,
    "wcag-005": accessibility.check_focus_indicators,
    "wcag-006": accessibility.check_aria_labels,
    "a11y-001": accessibility.check_link_text,
    "a11y-002": accessibility.check_form_labels,
    "a11y-003": accessibility.check_skip_link,
    "webaim-001": accessibility.check_media_transcripts,
    "webaim-002": accessibility.check_link_spacing,
    "webaim-003": accessibility.check_div_buttons,

    # Performance
    "cwv-001": performance.check_lazy_loading,
    "perf-001": performance.check_lazy_loading,
    "cwv-002": performance.check_layout_shift,
    "cwv-003": javascript.check_script_execution,
    "perf-002": performance.check_image_optimization,
    "lighthouse-001": performance.check_image_optimization,
    "perf-003": performance.check_render_blocking,
    "lighthouse-002": performance.check_render_blocking,
    "lighthouse-003": performance.check_payload_size,
    "lighthouse-004": performance.check_passive_listeners,
    "httparch-001": performance.check_third_party_scripts,
    "httparch-002": performance.check_request_count,
    "mobile-001": performance.check_touch_targets,
    "mobile-002": performance.check_interstitials,
    "mobile-003": performance.check_mobile_payload,

    # SEO, social and structured data
    "seo-001": seo.check_title,
    "seo-002": seo.check_meta_description,
    "seo-003": seo.check_heading_hierarchy,
    "seo-004": seo.check_structured_data,
    "seo-005": seo.check_sitemap,
    "seo-006": seo.check_canonical,
    "seo-007": seo.check_url_structure,
    "og-001": seo.check_open_graph,
    "og-002": seo.check_og_image_dimensions,
    "og-003": seo.check_twitter_card,
    "schema-001": seo.check_json_ld,
    "schema-002": seo.check_schema_types,

    # Security
    "sec-001": security.check_https,
    "pwa-003": security.check_https,
    "sec-002": security.check_content_security_policy,
    "sec-003": security.check_security_headers,
    "sec-004": security.check_input_validation,
    "sec-005": security.check_baseline_security_headers,

    # HTML and CSS
    "html-001": markup.check_valid_html,
    "html-002": markup.check_language,
    "html-003": markup.check_meta_tags,
    "html-004": markup.check_doctype,
    "css-001": markup.check_external_css,
    "css-002": markup.check_css_delivery,
    "css-003": markup.check_responsive_design,

    # JavaScript
    "js-001": javascript.check_script_execution,
    "js-002": performance.check_render_blocking,
    "js-003": javascript.check_error_handling,
    "airbnb-001": javascript.check_const_let,
    "airbnb-002": javascript.check_arrow_functions,
    "airbnb-003": javascript.check_template_literals,
    "airbnb-004": javascript.check_destructuring,
    "airbnb-005": javascript.check_default_parameters,
    "googlejs-001": javascript.check_semicolons,
    "googlejs-002": javascript.check_jsdoc,
    "googlejs-003": javascript.check_strict_equality,
    "googlejs-004": javascript.check_global_variables,
    "eslint-001": javascript.check_unused_variables,
    "eslint-002": javascript.check_console_statements,
    "eslint-003": javascript.check_debugger_statements,
    "eslint-004": javascript.check_duplicate_keys,

    # User experience, content, PWA and design systems
    "ux-001": experience.check_navigation,
    "ux-002": experience.check_form_usability,
    "ux-003": experience.check_loading_indicators,
    "content-001": experience.check_readability,
    "content-002": experience.check_contact_info,
    "pwa-001": experience.check_manifest,
    "pwa-002": experience.check_service_worker,
    "pwa-004": experience.check_offline_fallback,
    "carbon-001": experience.check_spacing_scale,
    "carbon-002": experience.check_contrast_tokens,
    "material-001": experience.check_elevation,
    "material-002": experience.check_ripple_feedback,
})


__all__ = ["CHECKS", "Check"]
