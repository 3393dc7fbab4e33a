"""Rule catalog, rule sources and rule selection.

The catalog is built once at import time and exposed as immutable tuples.
Based on WCAG, Google Core Web Vitals, SEO, W3C, MDN, OWASP and common
JavaScript style guides.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from .models import Rule, RuleSource, Severity


ERROR = Severity.ERROR
WARNING = Severity.WARNING
INFO = Severity.INFO


RULES: tuple[Rule, ...] = (
    # Accessibility (WCAG 2.1)
    Rule(
        id="wcag-001",
        name="Provide Text Alternatives for Non-Text Content",
        category="Accessibility (WCAG 2.1)",
        severity=ERROR,
        description="All images, icons, and non-text content must have descriptive alt text.",
        rationale="Screen readers rely on alt text to describe images to visually impaired users.",
        impact="Missing alt text makes content inaccessible to blind users and fails WCAG Level A compliance.",
        source="WCAG 2.1 Success Criterion 1.1.1",
        source_url="https://www.w3.org/WAI/WCAG21/Understanding/non-text-content",
        good_examples=('<img src="logo.png" alt="Company Logo">', '<button aria-label="Close dialog">×</button>'),
        bad_examples=('<img src="photo.jpg">', '<img src="icon.png" alt="">'),
    ),
    Rule(
        id="wcag-002",
        name="Ensure Sufficient Color Contrast",
        category="Accessibility (WCAG 2.1)",
        severity=ERROR,
        description="Text must have a contrast ratio of at least 4.5:1 for normal text and 3:1 for large text.",
        rationale="Low contrast makes text difficult to read for users with visual impairments or in bright light.",
        impact="Insufficient contrast fails WCAG AA compliance and excludes users with low vision.",
        source="WCAG 2.1 Success Criterion 1.4.3",
        source_url="https://www.w3.org/WAI/WCAG21/Understanding/contrast-minimum",
        good_examples=("Black text on white background (21:1)", "Dark gray #595959 on white (7:1)"),
        bad_examples=("Light gray #aaa on white (2.3:1)", "Yellow text on white background"),
    ),
    Rule(
        id="wcag-003",
        name="Make All Functionality Keyboard Accessible",
        category="Accessibility (WCAG 2.1)",
        severity=ERROR,
        description="All interactive elements must be accessible via keyboard (Tab, Enter, Space, Arrows).",
        rationale="Many users cannot use a mouse due to motor disabilities and rely solely on keyboard navigation.",
        impact="Keyboard-inaccessible interfaces exclude users with motor disabilities and power users.",
        source="WCAG 2.1 Success Criterion 2.1.1",
        source_url="https://www.w3.org/WAI/WCAG21/Understanding/keyboard",
        good_examples=("<button>, <a>, <input> elements", 'tabindex="0" for custom widgets', "Focus indicators visible"),
        bad_examples=('<div onclick="..."> without keyboard handler', 'tabindex="-1" on interactive elements'),
    ),
    Rule(
        id="wcag-004",
        name="Use Semantic HTML Elements",
        category="Accessibility (WCAG 2.1)",
        severity=WARNING,
        description="Use proper HTML5 semantic elements (<nav>, <main>, <article>, <header>, <footer>, etc.).",
        rationale="Semantic HTML provides structure that assistive technologies use to navigate content.",
        impact="Generic <div> soup makes it difficult for screen reader users to understand page structure.",
        source="WCAG 2.1 Success Criterion 1.3.1",
        source_url="https://www.w3.org/WAI/WCAG21/Understanding/info-and-relationships",
        good_examples=("<nav>, <main>, <article>, <aside>", "<h1>-<h6> hierarchy", "<button> for actions"),
        bad_examples=('<div class="header">', '<span class="button">', "Skipping heading levels"),
    ),
    Rule(
        id="wcag-005",
        name="Provide Clear Focus Indicators",
        category="Accessibility (WCAG 2.1)",
        severity=WARNING,
        description="Interactive elements must have visible focus indicators when navigated via keyboard.",
        rationale="Users need to see which element currently has keyboard focus.",
        impact="Invisible focus makes keyboard navigation impossible for sighted keyboard users.",
        source="WCAG 2.1 Success Criterion 2.4.7",
        source_url="https://www.w3.org/WAI/WCAG21/Understanding/focus-visible",
        good_examples=(":focus { outline: 2px solid blue; }", "Custom focus ring with box-shadow"),
        bad_examples=(":focus { outline: none; } without alternative", "Removing default focus styles"),
    ),
    Rule(
        id="wcag-006",
        name="Use ARIA Labels and Roles Appropriately",
        category="Accessibility (WCAG 2.1)",
        severity=WARNING,
        description="Use ARIA attributes to enhance accessibility of custom widgets and dynamic content.",
        rationale="ARIA provides semantic information for custom components that HTML alone cannot convey.",
        impact="Missing ARIA makes custom widgets unusable with assistive technologies.",
        source="WCAG 2.1 Success Criterion 4.1.2",
        source_url="https://www.w3.org/WAI/WCAG21/Understanding/name-role-value",
        good_examples=('role="dialog"', 'aria-label="Menu"', 'aria-expanded="true"', 'aria-live="polite"'),
        bad_examples=("Overusing ARIA on semantic HTML", "Incorrect role assignments", "Missing required ARIA"),
    ),

    # Performance (Core Web Vitals)
    Rule(
        id="cwv-001",
        name="Optimize Largest Contentful Paint (LCP)",
        category="Performance (Core Web Vitals)",
        severity=ERROR,
        description="Largest Contentful Paint should occur within 2.5 seconds of page load.",
        rationale="LCP measures loading performance and directly impacts user experience and SEO rankings.",
        impact="Slow LCP leads to high bounce rates and poor Google search rankings.",
        source="Google Core Web Vitals - LCP",
        source_url="https://web.dev/lcp/",
        good_examples=("Optimize images with WebP/AVIF", "Preload critical resources", "Use CDN", "Lazy load below-fold"),
        bad_examples=("Large unoptimized images", "Render-blocking resources", "Slow server response"),
    ),
    Rule(
        id="cwv-002",
        name="Minimize Cumulative Layout Shift (CLS)",
        category="Performance (Core Web Vitals)",
        severity=ERROR,
        description="Cumulative Layout Shift should be less than 0.1 to avoid visual instability.",
        rationale="Layout shifts frustrate users and cause accidental clicks on wrong elements.",
        impact="High CLS damages user experience, accessibility, and SEO rankings.",
        source="Google Core Web Vitals - CLS",
        source_url="https://web.dev/cls/",
        good_examples=("Reserve space for images (width/height)", "Fixed dimensions for ads", "Transform instead of layout properties"),
        bad_examples=("Images without dimensions", "Inserting content above existing", "Dynamically sized ads"),
    ),
    Rule(
        id="cwv-003",
        name="Optimize First Input Delay (FID) / Interaction to Next Paint (INP)",
        category="Performance (Core Web Vitals)",
        severity=WARNING,
        description="First Input Delay should be less than 100ms; INP should be less than 200ms.",
        rationale="Users expect immediate response to interactions. Delays feel sluggish and unresponsive.",
        impact="Slow interactivity frustrates users and damages conversion rates.",
        source="Google Core Web Vitals - FID/INP",
        source_url="https://web.dev/fid/",
        good_examples=("Code splitting", "Break up long tasks", "Use web workers", "Optimize JavaScript execution"),
        bad_examples=("Heavy JavaScript on main thread", "Blocking the main thread", "Synchronous operations"),
    ),
    Rule(
        id="perf-001",
        name="Lazy Load Offscreen Resources",
        category="Performance (Core Web Vitals)",
        severity=WARNING,
        description="Defer loading of below-the-fold images and non-critical scripts.",
        rationale="Loading only what is visible shortens the critical path and speeds up first render.",
        impact="Eagerly loading every resource wastes bandwidth and delays the largest contentful paint.",
        source="Google Web.dev - Lazy Loading",
        source_url="https://web.dev/browser-level-image-lazy-loading/",
        good_examples=('<img src="photo.jpg" loading="lazy" alt="...">', '<script defer src="app.js">'),
        bad_examples=("All images loaded eagerly", "Synchronous scripts in <head>"),
    ),
    Rule(
        id="perf-002",
        name="Serve Images in Modern Formats",
        category="Performance (Core Web Vitals)",
        severity=WARNING,
        description="Use WebP or AVIF images with lazy loading for offscreen images.",
        rationale="Modern formats compress 25-50% better than JPEG and PNG at equal quality.",
        impact="Legacy image formats inflate page weight and slow down loading on mobile networks.",
        source="Google Web.dev - Image Optimization",
        source_url="https://web.dev/uses-webp-images/",
        good_examples=('<picture><source type="image/webp" srcset="photo.webp"><img src="photo.jpg" loading="lazy" alt="..."></picture>',),
        bad_examples=("Large PNG photographs", "No lazy loading for offscreen images"),
    ),
    Rule(
        id="perf-003",
        name="Eliminate Render-Blocking Resources",
        category="Performance (Core Web Vitals)",
        severity=WARNING,
        description="Scripts and stylesheets in <head> should not block the first paint.",
        rationale="The browser cannot render until blocking scripts and stylesheets are downloaded and parsed.",
        impact="Render-blocking resources delay First Contentful Paint and Largest Contentful Paint.",
        source="Google Lighthouse - Render-Blocking Resources",
        source_url="https://developer.chrome.com/docs/lighthouse/performance/render-blocking-resources/",
        good_examples=('<script defer src="app.js">', '<link rel="stylesheet" href="print.css" media="print">'),
        bad_examples=('<script src="app.js"> in <head>', "Large synchronous stylesheets"),
    ),

    # SEO (Search Engine Optimization)
    Rule(
        id="seo-001",
        name="Use Unique, Descriptive Page Titles",
        category="SEO (Search Engine Optimization)",
        severity=ERROR,
        description="Every page needs a unique <title> of roughly 50-60 characters describing its content.",
        rationale="The title is the primary headline shown in search results and browser tabs.",
        impact="Missing or poor titles reduce click-through rates and search visibility.",
        source="Google Search Central - Title Links",
        source_url="https://developers.google.com/search/docs/appearance/title-link",
        good_examples=("<title>Handmade Leather Wallets | Acme Goods</title>",),
        bad_examples=("<title>Home</title>", "Same title on every page", "Keyword-stuffed titles"),
    ),
    Rule(
        id="seo-002",
        name="Write Compelling Meta Descriptions",
        category="SEO (Search Engine Optimization)",
        severity=WARNING,
        description="Provide a unique meta description of 150-160 characters summarizing the page.",
        rationale="Search engines often use the meta description as the result snippet.",
        impact="Missing descriptions let search engines pick arbitrary page text as the snippet.",
        source="Google Search Central - Snippets",
        source_url="https://developers.google.com/search/docs/appearance/snippet",
        good_examples=('<meta name="description" content="Browse handmade leather wallets crafted from full-grain leather. Free shipping and a lifetime warranty on every order.">',),
        bad_examples=("No meta description", "Duplicate descriptions across pages", "Descriptions under 50 characters"),
    ),
    Rule(
        id="seo-003",
        name="Use Proper Heading Hierarchy",
        category="SEO (Search Engine Optimization)",
        severity=WARNING,
        description="Use exactly one <h1> per page and nest headings without skipping levels.",
        rationale="Headings communicate document structure to search engines and assistive technologies.",
        impact="Broken heading structure confuses crawlers and screen reader users.",
        source="Google Search Central - SEO Starter Guide",
        source_url="https://developers.google.com/search/docs/fundamentals/seo-starter-guide",
        good_examples=("<h1>Page topic</h1><h2>Section</h2><h3>Subsection</h3>",),
        bad_examples=("Multiple <h1> elements", "<h1> followed directly by <h3>", "Headings used for styling only"),
    ),
    Rule(
        id="seo-004",
        name="Implement Structured Data",
        category="SEO (Search Engine Optimization)",
        severity=INFO,
        description="Describe page content with Schema.org structured data (JSON-LD or microdata).",
        rationale="Structured data enables rich results and helps search engines understand entities.",
        impact="Pages without structured data miss rich result features in search.",
        source="Google Search Central - Structured Data",
        source_url="https://developers.google.com/search/docs/appearance/structured-data/intro-structured-data",
        good_examples=('<script type="application/ld+json">{"@context": "https://schema.org", "@type": "Organization"}</script>',),
        bad_examples=("No structured data", "Markup that does not match visible content"),
    ),
    Rule(
        id="seo-005",
        name="Provide an XML Sitemap",
        category="SEO (Search Engine Optimization)",
        severity=INFO,
        description="Publish an XML sitemap listing all indexable pages and reference it from robots.txt.",
        rationale="Sitemaps help crawlers discover pages that are poorly linked internally.",
        impact="Without a sitemap, new or deep pages may be indexed late or not at all.",
        source="Google Search Central - Sitemaps",
        source_url="https://developers.google.com/search/docs/crawling-indexing/sitemaps/overview",
        good_examples=("/sitemap.xml referenced in robots.txt", '<a href="/sitemap.xml">Sitemap</a>'),
        bad_examples=("No sitemap", "Sitemap listing redirected or blocked URLs"),
    ),
    Rule(
        id="seo-006",
        name="Specify Canonical URLs",
        category="SEO (Search Engine Optimization)",
        severity=WARNING,
        description='Declare the preferred URL of each page with <link rel="canonical">.',
        rationale="Canonical URLs consolidate ranking signals for duplicate or near-duplicate pages.",
        impact="Duplicate content splits ranking signals and may cause the wrong URL to be indexed.",
        source="Google Search Central - Canonicalization",
        source_url="https://developers.google.com/search/docs/crawling-indexing/consolidate-duplicate-urls",
        good_examples=('<link rel="canonical" href="https://example.com/page">',),
        bad_examples=("No canonical link", "Canonical pointing to a 404 page"),
    ),
    Rule(
        id="seo-007",
        name="Use Clean, Descriptive URLs",
        category="SEO (Search Engine Optimization)",
        severity=INFO,
        description="Use short, lowercase, hyphen-separated URLs that describe the page.",
        rationale="Readable URLs are easier to share and give users and crawlers context.",
        impact="Cryptic or inconsistent URLs reduce click-through rates and cause duplicate URLs.",
        source="Google Search Central - URL Structure",
        source_url="https://developers.google.com/search/docs/crawling-indexing/url-structure",
        good_examples=("https://example.com/leather-wallets",),
        bad_examples=("https://example.com/Leather_Wallets", "https://example.com/index.php?id=123&cat=7"),
    ),

    # Security
    Rule(
        id="sec-001",
        name="Use HTTPS Everywhere",
        category="Security",
        severity=ERROR,
        description="Serve every page over HTTPS with a valid TLS certificate.",
        rationale="HTTPS protects the integrity and confidentiality of data between users and the site.",
        impact="Plain HTTP exposes users to eavesdropping and tampering, and browsers flag it as not secure.",
        source="OWASP Transport Layer Security Cheat Sheet",
        source_url="https://cheatsheetseries.owasp.org/cheatsheets/Transport_Layer_Security_Cheat_Sheet.html",
        good_examples=("https://example.com with HSTS", "Redirect all HTTP traffic to HTTPS"),
        bad_examples=("http://example.com", "Mixed content on HTTPS pages"),
    ),
    Rule(
        id="sec-002",
        name="Implement Content Security Policy",
        category="Security",
        severity=WARNING,
        description="Send a Content-Security-Policy header restricting where scripts and resources load from.",
        rationale="CSP is an effective defence-in-depth layer against cross-site scripting.",
        impact="Without CSP, injected scripts run with full page privileges.",
        source="OWASP Content Security Policy Cheat Sheet",
        source_url="https://cheatsheetseries.owasp.org/cheatsheets/Content_Security_Policy_Cheat_Sheet.html",
        good_examples=("Content-Security-Policy: default-src 'self'; script-src 'self'",),
        bad_examples=("No CSP header", "script-src 'unsafe-inline' 'unsafe-eval' *"),
    ),
    Rule(
        id="sec-003",
        name="Set Security Headers",
        category="Security",
        severity=WARNING,
        description="Send X-Content-Type-Options, X-Frame-Options and Referrer-Policy headers.",
        rationale="These headers disable MIME sniffing, block clickjacking and limit referrer leakage.",
        impact="Missing headers leave the site open to clickjacking and content-type confusion attacks.",
        source="OWASP HTTP Headers Cheat Sheet",
        source_url="https://cheatsheetseries.owasp.org/cheatsheets/HTTP_Headers_Cheat_Sheet.html",
        good_examples=("X-Content-Type-Options: nosniff", "X-Frame-Options: DENY", "Referrer-Policy: strict-origin-when-cross-origin"),
        bad_examples=("No security headers", "X-Frame-Options: ALLOWALL"),
    ),
    Rule(
        id="sec-004",
        name="Validate All User Input",
        category="Security",
        severity=ERROR,
        description="Validate form input on the client for usability and always on the server for security.",
        rationale="Unvalidated input is the root cause of injection attacks.",
        impact="Missing validation enables injection, data corruption and poor user feedback.",
        source="OWASP Input Validation Cheat Sheet",
        source_url="https://cheatsheetseries.owasp.org/cheatsheets/Input_Validation_Cheat_Sheet.html",
        good_examples=('<input type="email" required maxlength="254">', "Server-side allow-list validation"),
        bad_examples=("Forms without any validation", "Client-side validation only"),
    ),
    Rule(
        id="sec-005",
        name="Send Baseline Security Headers",
        category="Security",
        severity=WARNING,
        description="Send at least one of Content-Security-Policy, X-Content-Type-Options or X-Frame-Options.",
        rationale="Any of these headers shows the server is configured with basic browser protections.",
        impact="A response with none of them has no browser-enforced protection at all.",
        source="OWASP Secure Headers Project",
        source_url="https://owasp.org/www-project-secure-headers/",
        good_examples=("X-Content-Type-Options: nosniff", "Content-Security-Policy: default-src 'self'"),
        bad_examples=("Default server configuration without security headers",),
    ),

    # HTML Best Practices
    Rule(
        id="html-001",
        name="Use Valid HTML5",
        category="HTML Best Practices",
        severity=WARNING,
        description="HTML should validate against W3C HTML5 standards with no errors.",
        rationale="Valid HTML ensures consistent rendering across browsers and assistive technologies.",
        impact="Invalid HTML can cause rendering issues, accessibility problems, and SEO penalties.",
        source="W3C HTML5 Specification",
        source_url="https://www.w3.org/TR/html52/",
        good_examples=("Properly closed tags", "Valid nesting", "Correct attribute usage"),
        bad_examples=("Unclosed tags", "Invalid nesting (div inside p)", "Obsolete elements (font, center)"),
    ),
    Rule(
        id="html-002",
        name="Include DOCTYPE and Language Declaration",
        category="HTML Best Practices",
        severity=ERROR,
        description='Every HTML document must start with <!DOCTYPE html> and specify language with <html lang="en">.',
        rationale="DOCTYPE ensures standards mode rendering; lang attribute helps screen readers and search engines.",
        impact="Missing DOCTYPE triggers quirks mode with inconsistent rendering; missing lang confuses assistive tech.",
        source="W3C HTML5 Specification",
        source_url="https://www.w3.org/TR/html52/syntax.html#the-doctype",
        good_examples=("<!DOCTYPE html>", '<html lang="en">', '<html lang="de">'),
        bad_examples=("No DOCTYPE", "Old DOCTYPE (HTML4/XHTML)", "<html> without lang"),
    ),
    Rule(
        id="html-003",
        name="Include Essential Meta Tags",
        category="HTML Best Practices",
        severity=ERROR,
        description="Include charset, viewport, and description meta tags in <head>.",
        rationale="Meta tags ensure correct rendering, mobile responsiveness, and SEO.",
        impact="Missing meta tags cause encoding issues, poor mobile experience, and reduced search visibility.",
        source="MDN Web Docs",
        source_url="https://developer.mozilla.org/en-US/docs/Web/HTML/Element/meta",
        good_examples=('<meta charset="UTF-8">', '<meta name="viewport" content="width=device-width, initial-scale=1">'),
        bad_examples=("No charset declaration", "No viewport meta tag", "User-scalable=no (accessibility issue)"),
    ),
    Rule(
        id="html-004",
        name="Declare the HTML5 DOCTYPE",
        category="HTML Best Practices",
        severity=ERROR,
        description="Start every document with <!DOCTYPE html>.",
        rationale="Without a DOCTYPE browsers fall back to quirks mode.",
        impact="Quirks mode renders layouts inconsistently across browsers.",
        source="W3C HTML5 Specification",
        source_url="https://html.spec.whatwg.org/multipage/syntax.html#the-doctype",
        good_examples=("<!DOCTYPE html>",),
        bad_examples=("No DOCTYPE", '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN">'),
    ),

    # CSS Best Practices
    Rule(
        id="css-001",
        name="Use External CSS Files",
        category="CSS Best Practices",
        severity=INFO,
        description="Prefer external stylesheets over inline styles for maintainability and caching.",
        rationale="External CSS can be cached, minified, and maintained separately from HTML.",
        impact="Inline styles bloat HTML, prevent caching, and make maintenance difficult.",
        source="Google Web Fundamentals",
        source_url="https://web.dev/extract-critical-css/",
        good_examples=('<link rel="stylesheet" href="styles.css">', "Inline only critical CSS"),
        bad_examples=("<style> tags in body", "Excessive inline styles", "Style attributes everywhere"),
    ),
    Rule(
        id="css-002",
        name="Optimize CSS Delivery",
        category="CSS Best Practices",
        severity=WARNING,
        description="Inline critical CSS and defer non-critical CSS to improve First Contentful Paint.",
        rationale="CSS is render-blocking. Optimizing delivery significantly improves perceived performance.",
        impact="Render-blocking CSS delays page rendering and frustrates users.",
        source="Google Web.dev",
        source_url="https://web.dev/defer-non-critical-css/",
        good_examples=("Inline critical CSS in <head>", '<link rel="preload"> for fonts', "Defer non-critical CSS"),
        bad_examples=("Large CSS file blocking render", "No CSS optimization"),
    ),
    Rule(
        id="css-003",
        name="Use Responsive Design",
        category="CSS Best Practices",
        severity=ERROR,
        description="Implement responsive design with media queries, flexible layouts, and flexible images.",
        rationale="60%+ of traffic is mobile. Non-responsive sites provide poor mobile experience.",
        impact="Non-responsive sites are unusable on mobile, hurting mobile rankings and conversions.",
        source="Google Mobile-Friendly Test",
        source_url="https://search.google.com/test/mobile-friendly",
        good_examples=("@media queries", "Flexbox/Grid", "Relative units (%, em, rem)", "max-width on images"),
        bad_examples=("Fixed pixel widths", "No media queries", "Horizontal scrolling on mobile"),
    ),

    # JavaScript Best Practices
    Rule(
        id="js-001",
        name="Minimize JavaScript Execution Time",
        category="JavaScript Best Practices",
        severity=WARNING,
        description="Keep JavaScript execution under 2 seconds on mobile devices.",
        rationale="Heavy JavaScript blocks the main thread, delaying interactivity and increasing INP.",
        impact="Long-running scripts cause janky scrolling, slow interactions, and poor Core Web Vitals scores.",
        source="Google Lighthouse",
        source_url="https://developer.chrome.com/docs/lighthouse/performance/bootup-time/",
        good_examples=("Code splitting", "Tree shaking", "Lazy loading", "Web workers for heavy tasks"),
        bad_examples=("Large bundles", "Blocking operations", "No code splitting"),
    ),
    Rule(
        id="js-002",
        name="Avoid Render-Blocking JavaScript",
        category="JavaScript Best Practices",
        severity=WARNING,
        description="Use defer or async attributes on script tags to avoid blocking HTML parsing.",
        rationale="Synchronous scripts block HTML parsing and delay First Contentful Paint.",
        impact="Blocking scripts make pages feel slow and hurt Core Web Vitals scores.",
        source="MDN Web Docs",
        source_url="https://developer.mozilla.org/en-US/docs/Web/HTML/Element/script",
        good_examples=('<script defer src="app.js">', '<script async src="analytics.js">'),
        bad_examples=("<script> in <head> without defer/async", "document.write()"),
    ),
    Rule(
        id="js-003",
        name="Handle Errors Gracefully",
        category="JavaScript Best Practices",
        severity=WARNING,
        description="Implement error handling and fallbacks for all JavaScript functionality.",
        rationale="JavaScript errors can break entire pages. Graceful degradation ensures functionality.",
        impact="Unhandled errors make features unusable and frustrate users.",
        source="MDN Web Docs",
        source_url="https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide/Control_flow_and_error_handling",
        good_examples=("try/catch blocks", "window.onerror handler", "Fallback content", "Progressive enhancement"),
        bad_examples=("No error handling", "Features requiring JS with no fallback"),
    ),

    # Mobile Optimization
    Rule(
        id="mobile-001",
        name="Optimize for Touch Interactions",
        category="Mobile Optimization",
        severity=WARNING,
        description="Touch targets should be at least 48x48 CSS pixels with sufficient spacing.",
        rationale="Small touch targets are difficult to tap accurately, especially for users with motor impairments.",
        impact="Small targets cause mis-taps, frustration, and accessibility failures.",
        source="Google Web.dev",
        source_url="https://web.dev/accessible-tap-targets/",
        good_examples=("Buttons min 48x48px", "8px spacing between targets", "Large hit areas"),
        bad_examples=("Tiny buttons (<40px)", "Links too close together", "Small touch areas"),
    ),
    Rule(
        id="mobile-002",
        name="Avoid Intrusive Interstitials",
        category="Mobile Optimization",
        severity=WARNING,
        description="Don't show intrusive popups or interstitials on mobile that cover main content.",
        rationale="Intrusive interstitials frustrate mobile users and are penalized by Google.",
        impact="Intrusive popups hurt mobile rankings and increase bounce rates.",
        source="Google Search Central",
        source_url="https://developers.google.com/search/blog/2016/08/helping-users-easily-access-content-on",
        good_examples=("Banner notifications", "Dismissible overlays", "Age verification when legally required"),
        bad_examples=("Full-screen app install prompts", "Newsletter popups on page load", "Ads covering content"),
    ),
    Rule(
        id="mobile-003",
        name="Optimize for Mobile Networks",
        category="Mobile Optimization",
        severity=WARNING,
        description="Total page size should be under 2MB; aim for under 1MB for optimal mobile experience.",
        rationale="Mobile users often have slower connections and limited data plans.",
        impact="Large pages cost users money, take long to load, and increase bounce rates.",
        source="Google Web.dev",
        source_url="https://web.dev/total-byte-weight/",
        good_examples=("Compressed assets", "Lazy loading", "Adaptive serving", "Efficient formats"),
        bad_examples=("Unoptimized images", "Large videos auto-playing", "Excessive resources"),
    ),

    # User Experience
    Rule(
        id="ux-001",
        name="Provide Clear Navigation",
        category="User Experience",
        severity=WARNING,
        description="Include clear, consistent navigation that helps users find content.",
        rationale="Good navigation reduces bounce rates and improves user satisfaction.",
        impact="Poor navigation frustrates users and reduces conversions.",
        source="Nielsen Norman Group",
        source_url="https://www.nngroup.com/articles/navigation-is-the-foundation/",
        good_examples=("Consistent menu location", "Breadcrumbs", "Search functionality", "Clear labels"),
        bad_examples=("Hidden navigation", "Inconsistent menus", "No search", "Vague labels"),
    ),
    Rule(
        id="ux-002",
        name="Optimize Form Usability",
        category="User Experience",
        severity=WARNING,
        description="Forms should have clear labels, appropriate input types, validation, and error messages.",
        rationale="Well-designed forms increase completion rates and reduce user frustration.",
        impact="Poor forms have high abandonment rates and reduce conversions.",
        source="Baymard Institute",
        source_url="https://baymard.com/blog/checkout-usability",
        good_examples=("<label> for each input", 'type="email"', "Inline validation", "Clear error messages"),
        bad_examples=("No labels", 'Generic type="text"', "Unclear errors", "CAPTCHA on every form"),
    ),
    Rule(
        id="ux-003",
        name="Include Loading Indicators",
        category="User Experience",
        severity=INFO,
        description="Show loading states for async operations to provide feedback to users.",
        rationale="Users need feedback that the system is working to avoid confusion.",
        impact="No loading indicators make users think the site is broken.",
        source="Material Design Guidelines",
        source_url="https://material.io/design/communication/loading-indicators.html",
        good_examples=("Spinners for loading", "Progress bars", "Skeleton screens", "Disabled buttons during submit"),
        bad_examples=("No feedback", "Button clickable multiple times", "Silent failures"),
    ),

    # Content Quality
    Rule(
        id="content-001",
        name="Write Clear, Readable Content",
        category="Content Quality",
        severity=INFO,
        description="Content should be written at 8th-grade reading level with clear language.",
        rationale="Clear content is more accessible, engaging, and easier to understand.",
        impact="Complex language excludes users and reduces engagement.",
        source="Nielsen Norman Group",
        source_url="https://www.nngroup.com/articles/writing-for-lower-literacy-users/",
        good_examples=("Short sentences", "Simple words", "Clear headings", "Bullet points"),
        bad_examples=("Jargon", "Long paragraphs", "Complex sentences", "Walls of text"),
    ),
    Rule(
        id="content-002",
        name="Provide Contact Information",
        category="Content Quality",
        severity=INFO,
        description="Include clear contact information and methods to reach support.",
        rationale="Users need ways to get help or ask questions to build trust.",
        impact="No contact info reduces trust and credibility.",
        source="E-A-T Guidelines (Google)",
        source_url="https://developers.google.com/search/docs/fundamentals/creating-helpful-content",
        good_examples=("Email address", "Contact form", "Phone number", "Physical address", "Support hours"),
        bad_examples=("No contact info", "Only social media", "Generic form with no response"),
    ),

    # Accessibility (A11Y Project)
    Rule(
        id="a11y-001",
        name="Use Descriptive Link Text",
        category="Accessibility (A11Y Project)",
        severity=WARNING,
        description="Link text must describe the destination when read out of context.",
        rationale="Screen reader users often navigate by a list of links stripped of surrounding text.",
        impact='A list of "click here" links is meaningless to assistive technology users.',
        source="The A11Y Project Checklist",
        source_url="https://www.a11yproject.com/checklist/",
        good_examples=('<a href="/pricing">View pricing plans</a>',),
        bad_examples=('<a href="/pricing">Click here</a>', '<a href="/blog/post">Read more</a>'),
    ),
    Rule(
        id="a11y-002",
        name="Label Every Form Input",
        category="Accessibility (A11Y Project)",
        severity=ERROR,
        description="Every form control needs a programmatically associated <label>.",
        rationale="Labels tell assistive technologies what a field is for and enlarge the click target.",
        impact="Unlabelled inputs cannot be identified by screen reader users.",
        source="The A11Y Project Checklist",
        source_url="https://www.a11yproject.com/checklist/#forms",
        good_examples=('<label for="email">Email</label><input id="email" type="email">',),
        bad_examples=('<input type="text" placeholder="Email">',),
    ),
    Rule(
        id="a11y-003",
        name="Provide a Skip Link",
        category="Accessibility (A11Y Project)",
        severity=WARNING,
        description="Offer a link at the top of the page that jumps to the main content.",
        rationale="Keyboard users should not have to tab through the whole navigation on every page.",
        impact="Without a skip link keyboard users repeat dozens of tab presses per page.",
        source="The A11Y Project Checklist",
        source_url="https://www.a11yproject.com/posts/skip-nav-links/",
        good_examples=('<a href="#main" class="skip-link">Skip to main content</a>',),
        bad_examples=("No skip link", "Skip link pointing to a missing id"),
    ),

    # Accessibility (WebAIM)
    Rule(
        id="webaim-001",
        name="Provide Transcripts for Audio and Video",
        category="Accessibility (WebAIM)",
        severity=WARNING,
        description="Audio and video content needs a text transcript.",
        rationale="Deaf and hard-of-hearing users cannot access spoken content otherwise.",
        impact="Media without transcripts excludes deaf users and is invisible to search engines.",
        source="WebAIM Accessibility Principles",
        source_url="https://webaim.org/techniques/captions/",
        good_examples=('<video src="talk.mp4"></video><a href="/talk-transcript">Transcript</a>',),
        bad_examples=("Podcast without transcript", "Video without captions"),
    ),
    Rule(
        id="webaim-002",
        name="Space Links and Buttons Apart",
        category="Accessibility (WebAIM)",
        severity=INFO,
        description="Leave enough spacing between adjacent links and buttons.",
        rationale="Crowded targets lead to accidental activation, especially on touch screens.",
        impact="Users with tremors or large fingers activate the wrong control.",
        source="WebAIM Accessibility Principles",
        source_url="https://webaim.org/articles/motor/",
        good_examples=("a { padding: 8px; }", "margin between inline links"),
        bad_examples=("Adjacent links without spacing",),
    ),
    Rule(
        id="webaim-003",
        name="Support Keyboard-Only Operation",
        category="Accessibility (WebAIM)",
        severity=ERROR,
        description="Use native buttons instead of clickable <div> elements.",
        rationale="Native controls are focusable and operable with Enter and Space out of the box.",
        impact="Clickable divs cannot be reached or activated without a mouse.",
        source="WebAIM Keyboard Accessibility",
        source_url="https://webaim.org/techniques/keyboard/",
        good_examples=('<button type="button" onclick="openMenu()">Menu</button>',),
        bad_examples=('<div onclick="openMenu()">Menu</div>',),
    ),

    # JavaScript Style (Airbnb)
    Rule(
        id="airbnb-001",
        name="Use const and let Instead of var",
        category="JavaScript Style (Airbnb)",
        severity=WARNING,
        description="Declare bindings with const, or let when they are reassigned. Never use var.",
        rationale="Block scoping prevents hoisting bugs and accidental reassignment.",
        impact="var declarations leak out of blocks and make reassignment bugs likely.",
        source="Airbnb JavaScript Style Guide",
        source_url="https://github.com/airbnb/javascript#references",
        good_examples=("const total = 0;", "let count = 1;"),
        bad_examples=("var total = 0;",),
    ),
    Rule(
        id="airbnb-002",
        name="Prefer Arrow Functions for Callbacks",
        category="JavaScript Style (Airbnb)",
        severity=INFO,
        description="Use arrow function notation for anonymous functions and callbacks.",
        rationale="Arrow functions bind this lexically and are more concise.",
        impact="Anonymous function expressions invite this-binding mistakes.",
        source="Airbnb JavaScript Style Guide",
        source_url="https://github.com/airbnb/javascript#arrow-functions",
        good_examples=("[1, 2].map((x) => x * 2);",),
        bad_examples=("[1, 2].map(function (x) { return x * 2; });",),
    ),
    Rule(
        id="airbnb-003",
        name="Use Template Literals",
        category="JavaScript Style (Airbnb)",
        severity=INFO,
        description="Build strings with template literals instead of concatenation.",
        rationale="Template literals are easier to read and avoid missing-space bugs.",
        impact="Concatenated strings are harder to read and maintain.",
        source="Airbnb JavaScript Style Guide",
        source_url="https://github.com/airbnb/javascript#es6-template-literals",
        good_examples=("`Hello, ${name}!`",),
        bad_examples=("'Hello, ' + name + '!'",),
    ),
    Rule(
        id="airbnb-004",
        name="Use Object Destructuring",
        category="JavaScript Style (Airbnb)",
        severity=INFO,
        description="Destructure objects when accessing several of their properties.",
        rationale="Destructuring avoids repeated property access and temporary references.",
        impact="Repeated property access adds noise and makes refactoring harder.",
        source="Airbnb JavaScript Style Guide",
        source_url="https://github.com/airbnb/javascript#destructuring",
        good_examples=("const { firstName, lastName } = user;",),
        bad_examples=("const firstName = user.firstName; const lastName = user.lastName;",),
    ),
    Rule(
        id="airbnb-005",
        name="Use Default Parameter Syntax",
        category="JavaScript Style (Airbnb)",
        severity=INFO,
        description="Use default parameter syntax rather than mutating function arguments.",
        rationale="Default parameters document intent and avoid falsy-value bugs.",
        impact="Fallbacks with || silently replace valid falsy arguments such as 0.",
        source="Airbnb JavaScript Style Guide",
        source_url="https://github.com/airbnb/javascript#es6-default-parameters",
        good_examples=("function handle(opts = {}) { }",),
        bad_examples=("function handle(opts) { opts = opts || {}; }",),
    ),

    # JavaScript Style (Google)
    Rule(
        id="googlejs-001",
        name="Terminate Statements with Semicolons",
        category="JavaScript Style (Google)",
        severity=INFO,
        description="Every statement must be terminated with a semicolon.",
        rationale="Relying on automatic semicolon insertion causes subtle parsing bugs.",
        impact="ASI surprises break code after minification or concatenation.",
        source="Google JavaScript Style Guide",
        source_url="https://google.github.io/styleguide/jsguide.html#formatting-semicolons-are-required",
        good_examples=("const a = 1;",),
        bad_examples=("const a = 1",),
    ),
    Rule(
        id="googlejs-002",
        name="Document Functions with JSDoc",
        category="JavaScript Style (Google)",
        severity=INFO,
        description="Document functions with JSDoc including @param and @return tags.",
        rationale="JSDoc documents contracts and enables type checking by tools.",
        impact="Undocumented functions are harder to use correctly and to maintain.",
        source="Google JavaScript Style Guide",
        source_url="https://google.github.io/styleguide/jsguide.html#jsdoc",
        good_examples=("/** @param {string} name @return {string} */",),
        bad_examples=("Public functions without any documentation",),
    ),
    Rule(
        id="googlejs-003",
        name="Use Strict Equality",
        category="JavaScript Style (Google)",
        severity=WARNING,
        description="Compare with === and !== instead of == and !=.",
        rationale="Loose equality applies type coercion with surprising results.",
        impact='Type coercion causes bugs such as "0" == false being true.',
        source="Google JavaScript Style Guide",
        source_url="https://google.github.io/styleguide/jsguide.html",
        good_examples=("if (count === 0) { }",),
        bad_examples=("if (count == 0) { }",),
    ),
    Rule(
        id="googlejs-004",
        name="Avoid Global Variables",
        category="JavaScript Style (Google)",
        severity=WARNING,
        description="Do not declare globals with var; use modules and block-scoped bindings.",
        rationale="Globals collide between scripts and make state hard to reason about.",
        impact="Global pollution causes hard-to-find conflicts with third-party scripts.",
        source="Google JavaScript Style Guide",
        source_url="https://google.github.io/styleguide/jsguide.html#features-local-variable-declarations",
        good_examples=("const config = {};  // inside an ES module",),
        bad_examples=("var config = {};  // at top level of a classic script",),
    ),

    # JavaScript Quality (ESLint)
    Rule(
        id="eslint-001",
        name="Remove Unused Variables",
        category="JavaScript Quality (ESLint)",
        severity=WARNING,
        description="Variables that are declared but never used should be removed.",
        rationale="Unused code adds weight and hides real bugs.",
        impact="Dead code increases bundle size and maintenance cost.",
        source="ESLint Recommended Rules",
        source_url="https://eslint.org/docs/latest/rules/no-unused-vars",
        good_examples=("Tree-shaken bundles", "Linting with no-unused-vars"),
        bad_examples=("const unused = compute();",),
    ),
    Rule(
        id="eslint-002",
        name="Remove Console Statements",
        category="JavaScript Quality (ESLint)",
        severity=WARNING,
        description="Production code must not contain console.log and similar calls.",
        rationale="Console output leaks internals and costs performance in production.",
        impact="Console statements expose debugging information to every visitor.",
        source="ESLint Recommended Rules",
        source_url="https://eslint.org/docs/latest/rules/no-console",
        good_examples=("A logging library with production log levels",),
        bad_examples=('console.log("user", user);',),
    ),
    Rule(
        id="eslint-003",
        name="Remove Debugger Statements",
        category="JavaScript Quality (ESLint)",
        severity=ERROR,
        description="Production code must not contain debugger statements.",
        rationale="debugger pauses execution whenever developer tools are open.",
        impact="Leftover debugger statements halt the page for anyone with devtools open.",
        source="ESLint Recommended Rules",
        source_url="https://eslint.org/docs/latest/rules/no-debugger",
        good_examples=("Breakpoints set in developer tools instead of code",),
        bad_examples=("debugger;",),
    ),
    Rule(
        id="eslint-004",
        name="Disallow Duplicate Object Keys",
        category="JavaScript Quality (ESLint)",
        severity=ERROR,
        description="Object literals must not define the same key twice.",
        rationale="A duplicate key silently overwrites the earlier value.",
        impact="Duplicate keys cause values to disappear without any error.",
        source="ESLint Recommended Rules",
        source_url="https://eslint.org/docs/latest/rules/no-dupe-keys",
        good_examples=("{ name: 'a', label: 'b' }",),
        bad_examples=("{ name: 'a', name: 'b' }",),
    ),

    # Performance (Lighthouse)
    Rule(
        id="lighthouse-001",
        name="Properly Size and Encode Images",
        category="Performance (Lighthouse)",
        severity=WARNING,
        description="Serve next-gen image formats and defer offscreen images.",
        rationale="Images are usually the largest part of a page's weight.",
        impact="Oversized legacy images slow down loading and waste data.",
        source="Google Lighthouse",
        source_url="https://developer.chrome.com/docs/lighthouse/performance/uses-webp-images/",
        good_examples=('<source type="image/avif" srcset="hero.avif">', '<img loading="lazy" ...>'),
        bad_examples=("5MB PNG hero images",),
    ),
    Rule(
        id="lighthouse-002",
        name="Avoid Render-Blocking Resources",
        category="Performance (Lighthouse)",
        severity=WARNING,
        description="Defer scripts and non-critical stylesheets that block the first paint.",
        rationale="Blocking resources must finish downloading before anything renders.",
        impact="Users stare at a blank page while blocking resources load.",
        source="Google Lighthouse",
        source_url="https://developer.chrome.com/docs/lighthouse/performance/render-blocking-resources/",
        good_examples=('<script defer src="app.js">',),
        bad_examples=('<script src="app.js"> in <head>',),
    ),
    Rule(
        id="lighthouse-003",
        name="Avoid Enormous Network Payloads",
        category="Performance (Lighthouse)",
        severity=WARNING,
        description="Keep the total network payload under 1.6MB.",
        rationale="Large payloads cost users money and correlate with long load times.",
        impact="Heavy pages load slowly on mobile networks.",
        source="Google Lighthouse",
        source_url="https://developer.chrome.com/docs/lighthouse/performance/total-byte-weight/",
        good_examples=("Minified and compressed assets", "Code splitting"),
        bad_examples=("Multi-megabyte bundles",),
    ),
    Rule(
        id="lighthouse-004",
        name="Use Passive Event Listeners",
        category="Performance (Lighthouse)",
        severity=INFO,
        description="Mark touch and wheel listeners as passive to improve scrolling.",
        rationale="Passive listeners let the browser scroll without waiting for JavaScript.",
        impact="Non-passive touch listeners make scrolling janky.",
        source="Google Lighthouse",
        source_url="https://developer.chrome.com/docs/lighthouse/best-practices/uses-passive-event-listeners/",
        good_examples=('addEventListener("touchstart", onTouch, { passive: true });',),
        bad_examples=('addEventListener("touchstart", onTouch);',),
    ),

    # Performance (HTTP Archive)
    Rule(
        id="httparch-001",
        name="Load Third-Party Scripts Asynchronously",
        category="Performance (HTTP Archive)",
        severity=WARNING,
        description="Third-party scripts should be loaded with async or defer.",
        rationale="Third-party code is a leading cause of slow pages on the web.",
        impact="Synchronous third-party scripts block rendering on servers you do not control.",
        source="HTTP Archive Web Almanac",
        source_url="https://almanac.httparchive.org/en/2022/third-parties",
        good_examples=('<script async src="https://cdn.example.net/widget.js">',),
        bad_examples=('<script src="https://cdn.example.net/widget.js">',),
    ),
    Rule(
        id="httparch-002",
        name="Limit the Number of HTTP Requests",
        category="Performance (HTTP Archive)",
        severity=INFO,
        description="Keep the number of requested resources under 50.",
        rationale="Every request adds latency, especially on high-latency mobile networks.",
        impact="Many small requests slow down page loads.",
        source="HTTP Archive Web Almanac",
        source_url="https://almanac.httparchive.org/en/2022/page-weight",
        good_examples=("Bundled JS/CSS", "SVG sprites", "Inlined critical resources"),
        bad_examples=("Dozens of separate scripts and stylesheets",),
    ),

    # Progressive Web Apps
    Rule(
        id="pwa-001",
        name="Provide a Web App Manifest",
        category="Progressive Web Apps",
        severity=INFO,
        description='Link a web app manifest with <link rel="manifest">.',
        rationale="The manifest makes a site installable and controls its launch appearance.",
        impact="Without a manifest the site cannot be installed as an app.",
        source="Google PWA Checklist",
        source_url="https://web.dev/pwa-checklist/",
        good_examples=('<link rel="manifest" href="/manifest.json">',),
        bad_examples=("No manifest",),
    ),
    Rule(
        id="pwa-002",
        name="Register a Service Worker",
        category="Progressive Web Apps",
        severity=INFO,
        description="Register a service worker for offline support and caching.",
        rationale="Service workers enable offline use, background sync and fast repeat visits.",
        impact="Without a service worker the site fails completely when offline.",
        source="Google PWA Checklist",
        source_url="https://web.dev/service-workers-cache-storage/",
        good_examples=('navigator.serviceWorker.register("/sw.js");',),
        bad_examples=("No service worker",),
    ),
    Rule(
        id="pwa-003",
        name="Serve the App over HTTPS",
        category="Progressive Web Apps",
        severity=ERROR,
        description="Progressive web apps must be served over HTTPS.",
        rationale="Service workers and many modern APIs are only available in secure contexts.",
        impact="Over HTTP the app cannot register a service worker or be installed.",
        source="Google PWA Checklist",
        source_url="https://web.dev/pwa-checklist/",
        good_examples=("https://app.example.com",),
        bad_examples=("http://app.example.com",),
    ),
    Rule(
        id="pwa-004",
        name="Provide an Offline Fallback",
        category="Progressive Web Apps",
        severity=INFO,
        description="Serve an offline page when the network is unavailable.",
        rationale="A custom offline page keeps users oriented instead of showing a browser error.",
        impact="Users see the browser's generic offline error.",
        source="Google PWA Checklist",
        source_url="https://web.dev/offline-fallback-page/",
        good_examples=("Service worker serving /offline.html",),
        bad_examples=("No offline handling",),
    ),

    # Social Media (Open Graph)
    Rule(
        id="og-001",
        name="Include Open Graph Tags",
        category="Social Media (Open Graph)",
        severity=INFO,
        description="Provide og:title, og:description, og:image and og:url meta tags.",
        rationale="Open Graph tags control how a page appears when shared on social platforms.",
        impact="Shared links without Open Graph tags show poor or random previews.",
        source="Open Graph Protocol",
        source_url="https://ogp.me/",
        good_examples=('<meta property="og:title" content="Page title">',),
        bad_examples=("No Open Graph tags",),
    ),
    Rule(
        id="og-002",
        name="Specify Open Graph Image Dimensions",
        category="Social Media (Open Graph)",
        severity=INFO,
        description="Declare og:image:width and og:image:height for the share image.",
        rationale="Dimensions let platforms render the preview before downloading the image.",
        impact="Previews render late or with the wrong crop.",
        source="Open Graph Protocol",
        source_url="https://ogp.me/#structured",
        good_examples=('<meta property="og:image:width" content="1200">', '<meta property="og:image:height" content="630">'),
        bad_examples=("og:image without dimensions",),
    ),
    Rule(
        id="og-003",
        name="Add Twitter Card Tags",
        category="Social Media (Open Graph)",
        severity=INFO,
        description="Provide twitter:card and twitter:title meta tags.",
        rationale="Twitter Cards control how links appear in posts on X.",
        impact="Links shared on X show a bare URL instead of a rich card.",
        source="X (Twitter) Developer Platform - Cards",
        source_url="https://developer.x.com/en/docs/twitter-for-websites/cards/overview/abouts-cards",
        good_examples=('<meta name="twitter:card" content="summary_large_image">',),
        bad_examples=("No Twitter Card tags",),
    ),

    # Structured Data (Schema.org)
    Rule(
        id="schema-001",
        name="Add JSON-LD Structured Data",
        category="Structured Data (Schema.org)",
        severity=INFO,
        description='Embed Schema.org data in a <script type="application/ld+json"> block.',
        rationale="JSON-LD is the structured data format recommended by search engines.",
        impact="Search engines cannot show rich results for the page.",
        source="Schema.org",
        source_url="https://schema.org/docs/gs.html",
        good_examples=('<script type="application/ld+json">{"@type": "Organization"}</script>',),
        bad_examples=("No structured data",),
    ),
    Rule(
        id="schema-002",
        name="Use Specific Schema Types",
        category="Structured Data (Schema.org)",
        severity=INFO,
        description="Use specific types such as Article, Product or Event rather than Thing.",
        rationale="Specific types unlock type-specific rich results.",
        impact="Generic types are ignored for rich results.",
        source="Schema.org",
        source_url="https://schema.org/docs/full.html",
        good_examples=('"@type": "Product"',),
        bad_examples=('"@type": "Thing"',),
    ),

    # Design System (IBM Carbon)
    Rule(
        id="carbon-001",
        name="Use a Consistent Spacing Scale",
        category="Design System (IBM Carbon)",
        severity=INFO,
        description="Use spacing values from an 8px based scale.",
        rationale="A spacing scale creates visual rhythm and consistent layouts.",
        impact="Arbitrary spacing makes layouts look uneven.",
        source="IBM Carbon Design System",
        source_url="https://carbondesignsystem.com/elements/spacing/overview/",
        good_examples=("padding: 16px;", "margin: 24px;"),
        bad_examples=("padding: 13px;", "margin: 27px;"),
    ),
    Rule(
        id="carbon-002",
        name="Apply Accessible Color Tokens",
        category="Design System (IBM Carbon)",
        severity=INFO,
        description="Choose text and background colors from contrast-checked tokens.",
        rationale="Tokens with verified contrast keep text readable across themes.",
        impact="Ad hoc colors drift below required contrast ratios.",
        source="IBM Carbon Design System",
        source_url="https://carbondesignsystem.com/guidelines/color/overview/",
        good_examples=("color: var(--cds-text-primary);",),
        bad_examples=("Hard-coded light gray text",),
    ),

    # Design System (Material)
    Rule(
        id="material-001",
        name="Use a Consistent Elevation System",
        category="Design System (Material)",
        severity=INFO,
        description="Express depth with a consistent set of shadows.",
        rationale="Elevation communicates hierarchy and focus between surfaces.",
        impact="Flat or inconsistent surfaces make hierarchy hard to read.",
        source="Material Design Guidelines",
        source_url="https://m3.material.io/styles/elevation/overview",
        good_examples=("box-shadow: 0 1px 2px rgba(0, 0, 0, 0.3);",),
        bad_examples=("Random shadow values on every component",),
    ),
    Rule(
        id="material-002",
        name="Give Touch Feedback on Buttons",
        category="Design System (Material)",
        severity=INFO,
        description="Show a ripple or similar state layer when a button is pressed.",
        rationale="Immediate visual feedback confirms that a tap registered.",
        impact="Users tap repeatedly when nothing acknowledges their input.",
        source="Material Design Guidelines",
        source_url="https://m3.material.io/foundations/interaction/states/state-layers",
        good_examples=("Ripple effect on press",),
        bad_examples=("Buttons without pressed state",),
    ),
)


def _index(rules: Iterable[Rule]) -> Mapping[str, Rule]:
    index: dict[str, Rule] = {}
    for rule in rules:
        if rule.id in index:
            raise ValueError(f"Duplicate rule id in catalog: {rule.id}")
        index[rule.id] = rule
    return MappingProxyType(index)


RULES_BY_ID: Mapping[str, Rule] = _index(RULES)


RULE_SOURCES: tuple[RuleSource, ...] = (
    RuleSource(
        id="all",
        name="All Sources (Comprehensive)",
        organization="Mixed",
        description="Validate against all web design and development guidelines from all sources for a complete analysis.",
        url="",
        rule_ids=(),  # empty means all rules
    ),
    RuleSource(
        id="wcag",
        name="WCAG 2.1 (Web Content Accessibility Guidelines)",
        organization="W3C",
        description="International standard for web accessibility covering perceivable, operable, understandable, and robust content.",
        url="https://www.w3.org/WAI/WCAG21/quickref/",
        rule_ids=("wcag-001", "wcag-002", "wcag-003", "wcag-004", "wcag-005", "wcag-006"),
    ),
    RuleSource(
        id="core-web-vitals",
        name="Google Core Web Vitals",
        organization="Google",
        description="Key metrics for measuring user experience: LCP, CLS, FID/INP, and overall page performance.",
        url="https://web.dev/vitals/",
        rule_ids=("cwv-001", "cwv-002", "cwv-003", "perf-001", "perf-002", "perf-003"),
    ),
    RuleSource(
        id="seo",
        name="SEO Best Practices",
        organization="Google Search Central",
        description="Search engine optimization guidelines to improve visibility and rankings in search results.",
        url="https://developers.google.com/search/docs",
        rule_ids=("seo-001", "seo-002", "seo-003", "seo-004", "seo-005", "seo-006", "seo-007"),
    ),
    RuleSource(
        id="security",
        name="Web Security Standards",
        organization="OWASP",
        description="Critical security practices including HTTPS, CSP, security headers, and input validation.",
        url="https://owasp.org/www-project-top-ten/",
        rule_ids=("sec-001", "sec-002", "sec-003", "sec-004", "sec-005"),
    ),
    RuleSource(
        id="html-css",
        name="HTML & CSS Best Practices",
        organization="W3C / MDN",
        description="Standards-compliant markup, responsive design, and optimized CSS delivery.",
        url="https://www.w3.org/standards/",
        rule_ids=("html-001", "html-002", "html-003", "html-004", "css-001", "css-002", "css-003"),
    ),
    RuleSource(
        id="javascript",
        name="JavaScript Best Practices",
        organization="MDN Web Docs",
        description="Modern JavaScript patterns including performance optimization, error handling, and async loading.",
        url="https://developer.mozilla.org/en-US/docs/Web/JavaScript",
        rule_ids=("js-001", "js-002", "js-003"),
    ),
    RuleSource(
        id="mobile",
        name="Mobile Optimization",
        organization="Google Web.dev",
        description="Touch-friendly interfaces, mobile-first design, and optimization for mobile networks.",
        url="https://web.dev/mobile/",
        rule_ids=("mobile-001", "mobile-002", "mobile-003"),
    ),
    RuleSource(
        id="ux",
        name="User Experience Guidelines",
        organization="Nielsen Norman Group",
        description="Research-based UX principles for navigation, forms, feedback, and overall usability.",
        url="https://www.nngroup.com/",
        rule_ids=("ux-001", "ux-002", "ux-003"),
    ),
    RuleSource(
        id="content",
        name="Content Quality Standards",
        organization="Google E-A-T",
        description="Guidelines for clear, readable content and establishing expertise, authority, and trustworthiness.",
        url="https://developers.google.com/search/docs/fundamentals/creating-helpful-content",
        rule_ids=("content-001", "content-002"),
    ),
    RuleSource(
        id="a11y",
        name="Practical Accessibility Checklists",
        organization="The A11Y Project / WebAIM",
        description="Hands-on accessibility checks for links, forms, skip navigation, media and keyboard use.",
        url="https://www.a11yproject.com/checklist/",
        rule_ids=("a11y-001", "a11y-002", "a11y-003", "webaim-001", "webaim-002", "webaim-003"),
    ),
    RuleSource(
        id="js-style",
        name="JavaScript Style Guides",
        organization="Airbnb / Google / ESLint",
        description="Code style and quality conventions for inline JavaScript.",
        url="https://github.com/airbnb/javascript",
        rule_ids=(
            "airbnb-001", "airbnb-002", "airbnb-003", "airbnb-004", "airbnb-005",
            "googlejs-001", "googlejs-002", "googlejs-003", "googlejs-004",
            "eslint-001", "eslint-002", "eslint-003", "eslint-004",
        ),
    ),
    RuleSource(
        id="lighthouse",
        name="Lighthouse & HTTP Archive Audits",
        organization="Google / HTTP Archive",
        description="Lab performance audits for images, blocking resources, payload size and request counts.",
        url="https://developer.chrome.com/docs/lighthouse/",
        rule_ids=("lighthouse-001", "lighthouse-002", "lighthouse-003", "lighthouse-004", "httparch-001", "httparch-002"),
    ),
    RuleSource(
        id="pwa",
        name="Progressive Web App Checklist",
        organization="Google",
        description="Installability, offline support and secure context requirements for progressive web apps.",
        url="https://web.dev/pwa-checklist/",
        rule_ids=("pwa-001", "pwa-002", "pwa-003", "pwa-004"),
    ),
    RuleSource(
        id="social",
        name="Social Sharing & Structured Data",
        organization="Open Graph / Schema.org",
        description="Link previews on social platforms and machine-readable page data.",
        url="https://ogp.me/",
        rule_ids=("og-001", "og-002", "og-003", "schema-001", "schema-002"),
    ),
    RuleSource(
        id="design-systems",
        name="Design System Guidelines",
        organization="IBM Carbon / Google Material",
        description="Spacing, color, elevation and interaction feedback conventions from established design systems.",
        url="https://carbondesignsystem.com/",
        rule_ids=("carbon-001", "carbon-002", "material-001", "material-002"),
    ),
)


def select_rules(source_filter: Optional[str] = "all", rules: Sequence[Rule] = RULES) -> list[Rule]:
    """Select the rules to evaluate for a filter token.

    ``"all"`` or an empty token selects every rule. Any other token
    selects the union of rules whose id starts with the token and rules
    whose source citation contains it (case-insensitive), in catalog
    order. A token matching nothing selects nothing.
    """
    if not source_filter or source_filter == "all":
        return list(rules)

    needle = source_filter.lower()
    return [
        rule for rule in rules
        if rule.id.startswith(source_filter) or needle in rule.source.lower()
    ]


def get_rule(rule_id: str) -> Rule:
    return RULES_BY_ID[rule_id]


def get_source(source_id: str) -> RuleSource:
    for source in RULE_SOURCES:
        if source.id == source_id:
            return source
    raise KeyError(source_id)
