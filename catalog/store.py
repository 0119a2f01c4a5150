"""Read-only movie catalog loaded once from a JSON snapshot"""
import json
import logging

logger = logging.getLogger(__name__)


def load_catalog(path):
    """
    Load the movie catalog from a JSON file

    Args:
        path: path to a JSON array of movie objects

    Returns:
        tuple: movie records in file order, empty if the file
        is missing or malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Failed to load movies data: {path} not found")
        return ()
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load movies data from {path}: {e}")
        return ()

    if not isinstance(data, list):
        logger.error(
            f"Failed to load movies data from {path}: "
            f"expected a JSON array, got {type(data).__name__}"
        )
        return ()

    movies = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning(f"Skipping entry {position} in {path}: not an object")
            continue
        movies.append(item)

    logger.info(f"Loaded {len(movies)} movies from {path}")

    return tuple(movies)
