"""Advisory scan for embedded script and markup patterns."""

import re

# Only the head of the file is scanned
SCAN_WINDOW_BYTES = 10_000

# Pattern sources are reported verbatim in warnings, so "/" stays escaped
SUSPICIOUS_PATTERNS = [
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"data:text\/html", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),  # Event handlers like onclick=
    re.compile(r"eval\s*\(", re.IGNORECASE),
    re.compile(r"exec\s*\(", re.IGNORECASE),
]


def scan_for_suspicious_content(buffer: bytes) -> list[str]:
    """Return one warning per suspicious pattern found in the first 10 KB."""
    content = buffer[:SCAN_WINDOW_BYTES].decode("utf-8", errors="replace")

    return [
        f"Suspicious pattern detected: {pattern.pattern}"
        for pattern in SUSPICIOUS_PATTERNS
        if pattern.search(content)
    ]
