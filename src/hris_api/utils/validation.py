"""Input validation utilities for free-text query parameters."""

import re

# Maximum lengths for common fields
MAX_SEARCH_LENGTH = 200
MAX_DEPARTMENT_LENGTH = 100

# Pattern for safe text input (letters, numbers, spaces, common punctuation)
SAFE_TEXT_PATTERN = re.compile(r'^[\w\s\-.,&()\'"/]+$', re.UNICODE)


def sanitize_search(search: str | None, max_length: int = MAX_SEARCH_LENGTH) -> str | None:
    """Sanitize search input.

    Args:
        search: Raw search string
        max_length: Maximum allowed length

    Returns:
        Sanitized search string or None
    """
    if search is None:
        return None

    search = search[:max_length]

    # Statements are parameterized; this only strips obvious SQL noise
    search = search.replace(";", "").replace("--", "")

    return search.strip() or None


def sanitize_department(
    department: str | None, max_length: int = MAX_DEPARTMENT_LENGTH
) -> str | None:
    """Sanitize a department label filter.

    Args:
        department: Raw department string
        max_length: Maximum allowed length

    Returns:
        Sanitized department string or None
    """
    if department is None:
        return None

    department = department[:max_length].strip()

    if not department:
        return None

    if not SAFE_TEXT_PATTERN.match(department):
        return None

    return department


def escape_like_wildcards(value: str) -> str:
    """Escape SQL LIKE wildcards so they match literally.

    The result must be used with a backslash escape character on the
    like/ilike call.
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
