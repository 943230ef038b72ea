"""
Utilities for rendering phrases in log and error messages.
"""

import unicodedata


def _escape_ctrl_chars(s: str) -> str:
    """Replace all Unicode control characters with their escape sequences."""
    cleaned = []
    for c in s:
        # control category codes vary: Cc, Cf, Cn etc.
        # so check via first character
        if unicodedata.category(c)[0] != "C":
            cleaned.append(c)
        else:
            cleaned.append(f"\\u{ord(c):04x}")
    return "".join(cleaned)


def render_text(s: str, max_len: int = 40) -> str:
    """Escape control characters and truncate long text for display."""
    rendered = _escape_ctrl_chars(s)
    if len(rendered) > max_len:
        rendered = rendered[: max_len - 3] + "..."
    return rendered
