"""Security utilities for SolarRoots.

Provides input sanitization and output escaping.
"""

import html
import re
from urllib.parse import urlparse


class InputSanitizer:
    """Sanitize user input and escape text for HTML output.

    Every value submitted through the API passes through this sanitizer
    before it is stored, and every stored value is escaped before it is
    embedded in a page.
    """

    # Maximum lengths for different input types
    MAX_NAME_LENGTH = 200
    MAX_DESCRIPTION_LENGTH = 2000
    MAX_MESSAGE_LENGTH = 5000
    MAX_URL_LENGTH = 500
    MAX_TAG_LENGTH = 100
    MAX_ARRAY_ITEMS = 50

    ALLOWED_URL_SCHEMES = ("http", "https")

    # Control characters other than tab and newlines
    CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

    @classmethod
    def _clean(cls, value: str, max_length: int) -> str:
        value = value[:max_length].strip()
        value = value.encode("utf-8", errors="ignore").decode("utf-8")
        return cls.CONTROL_CHARS.sub("", value)

    @classmethod
    def sanitize_name(cls, name: str | None) -> str:
        """Sanitize a name (site name, person name, organization).

        Args:
            name: The raw name

        Returns:
            Sanitized name
        """
        if not name:
            return ""
        return cls._clean(name, cls.MAX_NAME_LENGTH)

    @classmethod
    def sanitize_description(cls, description: str | None) -> str:
        """Sanitize a description field."""
        if not description:
            return ""
        return cls._clean(description, cls.MAX_DESCRIPTION_LENGTH)

    @classmethod
    def sanitize_message(cls, message: str | None) -> str:
        """Sanitize a free-text message from the interest form."""
        if not message:
            return ""
        return cls._clean(message, cls.MAX_MESSAGE_LENGTH)

    @classmethod
    def sanitize_array(cls, items: list | None, max_item_length: int = MAX_TAG_LENGTH) -> list[str]:
        """Sanitize an array of strings.

        Args:
            items: The raw list of items
            max_item_length: Maximum length for each item

        Returns:
            Sanitized list with bounded size, blanks removed
        """
        if not items:
            return []

        items = items[:cls.MAX_ARRAY_ITEMS]
        cleaned = (cls._clean(str(item), max_item_length) for item in items if item)
        return [item for item in cleaned if item]

    @classmethod
    def is_safe_url(cls, url: str) -> bool:
        """Check that a URL is an absolute http(s) link."""
        if len(url) > cls.MAX_URL_LENGTH:
            return False
        parsed = urlparse(url)
        return parsed.scheme.lower() in cls.ALLOWED_URL_SCHEMES and bool(parsed.netloc)

    @classmethod
    def escape_html(cls, text: str) -> str:
        """Escape & < > " ' for embedding in HTML text."""
        return html.escape(text, quote=True).replace("&#x27;", "&#39;")

    @classmethod
    def escape_attribute(cls, text: str) -> str:
        """Escape a value for an HTML attribute, including backticks."""
        return cls.escape_html(text).replace("`", "&#96;")
