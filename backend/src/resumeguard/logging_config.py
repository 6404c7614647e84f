"""Logging configuration with untrusted-input filtering."""

import logging
import re


class UntrustedInputFilter(logging.Filter):
    """Neutralize control characters and mask credentials in log records.

    Uploaded filenames and declared content types are attacker-controlled and
    end up in log messages; a CR/LF in them must not forge extra log lines.
    """

    # Patterns to match and replace sensitive data
    SENSITIVE_PATTERNS = [
        # API keys
        (r'api[_-]?key["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)', r"api_key=***REDACTED***"),
        # Bearer tokens in Authorization headers
        (r"Bearer\s+([A-Za-z0-9\-._~+/]+=*)", r"Bearer ***REDACTED***"),
        # JWT tokens (starting with eyJ)
        (r"eyJ[A-Za-z0-9\-._~+/]+=*", r"***JWT_REDACTED***"),
    ]

    # C0 controls (tab excluded) and DEL
    CONTROL_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")

    def _clean(self, value: str) -> str:
        value = self.CONTROL_CHARS.sub(lambda m: f"\\x{ord(m.group()):02x}", value)
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            value = re.sub(pattern, replacement, value, flags=re.IGNORECASE)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter and clean log message and arguments."""
        if isinstance(record.msg, str):
            record.msg = self._clean(record.msg)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                self._clean(arg) if isinstance(arg, str) else arg for arg in record.args
            )

        return True


def setup_logging(settings):
    """
    Setup logging configuration with untrusted-input filtering.

    Args:
        settings: Application settings instance
    """
    # Configure logging level
    log_level = logging.DEBUG if settings.debug else logging.INFO

    handler = logging.StreamHandler()
    handler.addFilter(UntrustedInputFilter())

    # Configure basic logging
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
        force=True,  # Override any existing configuration
    )
