from .store import load_catalog
from .queries import get_by_position, get_by_id, search_by_title, has_quality_score

__all__ = [
    'load_catalog',
    'get_by_position',
    'get_by_id',
    'search_by_title',
    'has_quality_score'
]
