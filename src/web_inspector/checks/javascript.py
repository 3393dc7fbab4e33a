"""Checks on inline and referenced JavaScript.

Covers general practice plus the Airbnb, Google and ESLint style rules.
Inline code is inspected as raw text inside the page.
"""

import re

import httpx

from ..evidence import count, extract_snippet, find_all, has, round_half_up
from ..models import Verdict


_INLINE_SCRIPT = r"<script(?![^>]*src=)[^>]*>[\s\S]*?</script>"
_OBJECT_LITERAL = re.compile(r"\{[^{}]*\}")
_OBJECT_KEY = re.compile(r"(\w+)\s*:")
_REPEATED_MEMBER_ACCESS = re.compile(r"(\w+)\.(\w+)[^=]*\1\.(\w+)", re.IGNORECASE)


def _found(flag: bool, yes: str = "Found", no: str = "None") -> str:
    return yes if flag else no


def check_script_execution(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Fewer than 15 script tags and fewer than 5 inline scripts."""
    scripts = count(r"<script[^>]*>", html)
    inline = count(_INLINE_SCRIPT, html)
    passed = scripts < 15 and inline < 5
    return Verdict(
        passed=passed,
        details=f"Total scripts: {scripts} ({scripts - inline} external, {inline} inline)",
        recommendation=(
            "Minimize JavaScript: bundle files, remove unused code, "
            "use code splitting, lazy load non-critical scripts."
        ),
        evidence=None if passed else extract_snippet(html, r"<script", 3),
    )


def check_error_handling(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    try_catch = has(r"try\s*\{[\s\S]*?\}\s*catch", html)
    handler = has(r"""\.catch\(|onerror|addEventListener\(['"]error['"]|window\.onerror""", html)
    passed = try_catch or handler
    return Verdict(
        passed=passed,
        details=f"Error handling: try/catch({try_catch}), error handlers({handler})",
        recommendation="Implement try/catch blocks and global error handlers for graceful error handling.",
        evidence=None if passed else extract_snippet(html, r"<script", 4),
    )


def check_const_let(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    uses_var = has(r"\bvar\s+", html)
    uses_const = has(r"\bconst\s+", html)
    uses_let = has(r"\blet\s+", html)
    return Verdict(
        passed=not uses_var and (uses_const or uses_let),
        details=f"JavaScript declarations: var({uses_var}), const({uses_const}), let({uses_let})",
        recommendation="Use const for non-reassigned variables, let for reassignable ones. Never use var.",
        evidence=extract_snippet(html, r"\bvar\s+", 2) if uses_var else None,
    )


def check_arrow_functions(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    arrows = has(r"=>\s*\{|=>\s*[^{]", html)
    function_keyword = has(r"function\s*\(", html)
    passed = arrows or not function_keyword
    return Verdict(
        passed=passed,
        details=(
            f"Arrow functions: {_found(arrows, 'Used', 'Not found')}, "
            f"function keyword: {_found(function_keyword, 'Used', 'Not used')}"
        ),
        recommendation="Prefer arrow functions for callbacks and anonymous functions.",
        evidence=None if passed else extract_snippet(html, r"function\s*\(", 2),
    )


def check_template_literals(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    templates = has(r"`[^`]*\$\{[^}]+\}[^`]*`", html)
    concatenation = has(r"""["'][^"']*["']\s*\+\s*["'][^"']*["']""", html)
    return Verdict(
        passed=templates or not concatenation,
        details=(
            f"Template literals: {_found(templates, 'Used', 'Not used')}, "
            f"String concatenation: {_found(concatenation, 'Used', 'Not used')}"
        ),
        recommendation="Use template literals (`Hello ${name}`) instead of string concatenation.",
    )


def check_destructuring(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    destructuring = has(r"const\s*\{[^}]+\}\s*=|let\s*\{[^}]+\}\s*=", html)
    repeated = _REPEATED_MEMBER_ACCESS.search(html) is not None
    return Verdict(
        passed=destructuring or not repeated,
        details=(
            f"Destructuring: {_found(destructuring, 'Used', 'Not detected')}, "
            f"Repetitive access: {_found(repeated)}"
        ),
        recommendation=(
            "Use object destructuring: const { name, age } = user; "
            "instead of user.name, user.age repeatedly."
        ),
    )


def check_default_parameters(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    defaults = has(r"function\s+\w+\s*\([^)]*=[^)]*\)|=\s*\([^)]*=[^)]*\)\s*=>", html)
    fallback = "||" in html
    return Verdict(
        passed=defaults or not fallback,
        details=(
            f"Default parameters: {_found(defaults, 'Used', 'Not found')}, "
            f"Fallback pattern (||): {_found(fallback, 'Used', 'Not used')}"
        ),
        recommendation="Use default parameter syntax: function test(val = 1) { } instead of val = val || 1;",
    )


def check_semicolons(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    blocks = find_all(r"<script[^>]*>[\s\S]*?</script>", html)
    inline = [block for block in blocks if not has(r"<script[^>]+src=", block)]
    return Verdict(
        passed=not inline or any(";" in block for block in inline),
        details=(
            f"Found {len(inline)} inline scripts. Ensure semicolons are used."
            if inline
            else "No inline scripts found to check."
        ),
        recommendation="Always use semicolons to terminate JavaScript statements.",
    )


def check_jsdoc(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    jsdoc = has(r"/\*\*[\s\S]*?@(param|return|type)[\s\S]*?\*/", html)
    functions = has(r"function\s+\w+\s*\(|const\s+\w+\s*=\s*\([^)]*\)\s*=>", html)
    passed = jsdoc or not functions
    return Verdict(
        passed=passed,
        details=f"JSDoc: {_found(jsdoc, 'Found', 'Not found')}, Functions: {_found(functions)}",
        recommendation="Document functions with JSDoc comments: /** @param {type} name @return {type} */",
        evidence=None if passed else extract_snippet(html, r"function\s+\w+\s*\(", 2),
    )


def check_strict_equality(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    loose = has(r"[^=!]==[^=]|[^!]!=[^=]", html)
    strict = has(r"===|!==", html)
    passed = not loose or strict
    return Verdict(
        passed=passed,
        details=f"Loose equality (==, !=): {_found(loose)}, Strict (===, !==): {_found(strict)}",
        recommendation="Always use === and !== for comparisons to avoid type coercion bugs.",
        evidence=None if passed else extract_snippet(html, r"[^=!]==[^=]|[^!]!=[^=]", 2),
    )


def check_global_variables(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    global_var = has(r"\bvar\s+\w+\s*=", html)
    return Verdict(
        passed=not global_var,
        details=(
            "Found var declarations which create global variables. Use const/let instead."
            if global_var
            else "No global var declarations detected."
        ),
        recommendation=(
            "Avoid var. Use const for constants and let for variables. "
            "Use modules or IIFEs to avoid global pollution."
        ),
        evidence=extract_snippet(html, r"\bvar\s+\w+\s*=", 2) if global_var else None,
    )


def check_unused_variables(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    """Large scripts with many declarations likely carry dead code."""
    declarations = count(r"\b(const|let|var)\s+\w+\s*=", html)
    script_bytes = sum(len(block) for block in find_all(r"<script[\s\S]*?</script>", html))
    return Verdict(
        passed=script_bytes < 10_000 or declarations < 50,
        details=f"{declarations} variable declarations, {round_half_up(script_bytes / 1024)}KB of JavaScript",
        recommendation="Remove unused variables and dead code. Use tree-shaking and code splitting.",
    )


def check_console_statements(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    pattern = r"console\.(log|error|warn|info|debug)\("
    has_console = has(pattern, html)
    return Verdict(
        passed=not has_console,
        details=(
            "Found console statements in JavaScript code. Should be removed for production."
            if has_console
            else "No console statements detected in inline scripts."
        ),
        recommendation=(
            "Remove all console.log, console.error, and similar statements from "
            "production code. Use proper logging libraries instead."
        ),
        evidence=extract_snippet(html, pattern, 2) if has_console else None,
    )


def check_debugger_statements(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    pattern = r"\bdebugger\s*;"
    has_debugger = has(pattern, html)
    return Verdict(
        passed=not has_debugger,
        details="Found debugger statements in JavaScript code." if has_debugger else "No debugger statements found.",
        recommendation="Remove all debugger; statements from production code.",
        evidence=extract_snippet(html, pattern, 2) if has_debugger else None,
    )


def check_duplicate_keys(html: str, headers: httpx.Headers, site_url: str) -> Verdict:
    def has_duplicates(literal_text: str) -> bool:
        keys = [m.group(0) for m in _OBJECT_KEY.finditer(literal_text)]
        return len(set(keys)) != len(keys)

    duplicates = any(has_duplicates(m.group(0)) for m in _OBJECT_LITERAL.finditer(html))
    return Verdict(
        passed=not duplicates,
        details=(
            "Potential duplicate keys detected in object literals."
            if duplicates
            else "No duplicate object keys detected."
        ),
        recommendation="Ensure object literals have unique keys. Duplicates cause bugs.",
    )
