from slugify import slugify


def slug(text: str) -> str:
    """Return the URL slug for *text*, e.g. ``"Brand 7"`` -> ``"brand-7"``."""
    return slugify(text)
