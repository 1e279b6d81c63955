# blogapp/utils/slug.py
from slugify import slugify

# "&" reads as "and"; quotes are dropped rather than turned into separators
SLUG_REPLACEMENTS = [
    ["&", " and "],
    ["'", ""],
    ['"', ""],
]


def generate_slug(name):
    """Deterministic URL slug for a category name.

    No collision suffix is added; two names that normalise to the same slug
    are rejected by the unique constraint on ``categories.slug``.
    """
    return slugify(name, lowercase=True, replacements=SLUG_REPLACEMENTS)
