"""Slug generation for entity identifiers."""

import re

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Convert a human-readable name to a filesystem-safe slug.

    Lowercases, collapses every run of characters outside ``[a-z0-9]`` to a
    single hyphen, and trims leading/trailing hyphens.

    Distinct names may map to the same slug ("Acme Corp" and "acme-corp");
    that collision is reported when the entity is created.

    Examples:
        >>> slugify("Acme Corp!")
        'acme-corp'
        >>> slugify("  --Foo_Bar--  ")
        'foo-bar'
    """
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")
