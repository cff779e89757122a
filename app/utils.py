import math
import re
from datetime import datetime, timezone

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def slugify(text: str) -> str:
    """Lower-case, collapse non-alphanumeric runs to one hyphen, trim hyphens."""
    return _NON_ALNUM.sub("-", (text or "").lower()).strip("-")


def calculate_reading_time(text: str) -> str:
    words = (text or "").split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def like_pattern(term: str) -> str:
    """Substring LIKE pattern with ``\\`` as the escape for literal % and _."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
