"""Lookups over the in-memory movie catalog.

Every function takes the catalog tuple as its first argument and never
modifies it. A lookup that finds nothing returns None.
"""

import re

NO_SCORE = 'N/A'

# ASCII digits only: no sign, whitespace or underscores
POSITION_PATTERN = re.compile(r'[0-9]+')


def _id_text(value):
    if value is None:
        return None
    # 7.0 from a JSON number must match the query "7"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def get_by_position(catalog, index):
    """Return the movie at a zero-based position, or None if out of range"""
    if isinstance(index, bool):
        return None

    if isinstance(index, int):
        position = index
    elif isinstance(index, str) and POSITION_PATTERN.fullmatch(index):
        position = int(index)
    else:
        return None

    if position < 0 or position >= len(catalog):
        return None

    return catalog[position]


def get_by_id(catalog, query_id):
    """
    Find a movie by its Movie_ID

    IDs are compared as text, so a numeric 12 matches the query "12".
    When several movies share an ID the first one in the catalog wins.
    """
    wanted = _id_text(query_id)
    if wanted is None:
        return None

    for movie in catalog:
        if _id_text(movie.get('Movie_ID')) == wanted:
            return movie

    return None


def search_by_title(catalog, query_text):
    """
    Case-insensitive substring search on Title

    Returns:
        list: matching movies in catalog order (possibly empty),
        or None when no query text was given
    """
    if not query_text:
        return None

    needle = query_text.lower()

    return [
        movie for movie in catalog
        if isinstance(movie.get('Title'), str) and needle in movie['Title'].lower()
    ]


def has_quality_score(metascore):
    """False for a missing, blank or "N/A" metascore"""
    if metascore is None:
        return False

    text = str(metascore).strip()

    return bool(text) and text.upper() != NO_SCORE
