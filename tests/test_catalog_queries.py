import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from catalog.queries import get_by_position, get_by_id, search_by_title, has_quality_score


@pytest.fixture
def catalog():
    return (
        {'Movie_ID': 101, 'Title': 'The Matrix', 'Metascore': '73'},
        {'Movie_ID': '102', 'Title': 'Matrix Reloaded', 'Metascore': 'N/A'},
        {'Movie_ID': 103, 'Title': 'Inception', 'Metascore': ''},
        {'Movie_ID': 101, 'Title': 'Duplicate Matrix', 'Metascore': '50'},
        {'Movie_ID': 104.0, 'Title': None},
        {'Title': 'No Identifier'}
    )


def test_get_by_position_valid(catalog):
    for i, movie in enumerate(catalog):
        assert get_by_position(catalog, i) is movie
        assert get_by_position(catalog, str(i)) is movie


@pytest.mark.parametrize('index', [
    -1, '-1', 6, '6', 100, 'abc', '', '1.5', None,
    '1_0', ' 1', '1 ', '+1', '\u0661', 1.5, True, False
])
def test_get_by_position_not_found(catalog, index):
    assert get_by_position(catalog, index) is None


def test_get_by_id_matches_numeric_as_text(catalog):
    assert get_by_id(catalog, '103')['Title'] == 'Inception'
    assert get_by_id(catalog, 103)['Title'] == 'Inception'
    assert get_by_id(catalog, '102')['Title'] == 'Matrix Reloaded'


def test_get_by_id_first_duplicate_wins(catalog):
    assert get_by_id(catalog, '101') is catalog[0]


def test_get_by_id_integral_float(catalog):
    assert get_by_id(catalog, '104') is catalog[4]


def test_get_by_id_exact_text_only(catalog):
    assert get_by_id(catalog, '10') is None
    assert get_by_id(catalog, ' 101') is None
    assert get_by_id(catalog, '999') is None
    assert get_by_id(catalog, None) is None


def test_get_by_id_every_record(catalog):
    for movie in catalog:
        if 'Movie_ID' not in movie:
            continue
        found = get_by_id(catalog, movie['Movie_ID'])
        assert found is not None
        assert str(found['Movie_ID']) == str(movie['Movie_ID'])


def test_search_by_title_case_insensitive_in_order(catalog):
    results = search_by_title(catalog, 'matrix')

    assert [m['Title'] for m in results] == ['The Matrix', 'Matrix Reloaded', 'Duplicate Matrix']


def test_search_by_title_example():
    catalog = (
        {'Title': 'The Matrix'},
        {'Title': 'Matrix Reloaded'},
        {'Title': 'Inception'}
    )

    results = search_by_title(catalog, 'matrix')

    assert [m['Title'] for m in results] == ['The Matrix', 'Matrix Reloaded']


@pytest.mark.parametrize('query', ['', None])
def test_search_by_title_requires_query(catalog, query):
    assert search_by_title(catalog, query) is None


def test_search_by_title_no_matches_is_empty_list(catalog):
    assert search_by_title(catalog, 'godfather') == []


def test_search_by_title_is_literal(catalog):
    assert search_by_title(catalog, ' matrix ') == []
    assert [m['Title'] for m in search_by_title(catalog, 'THE MAT')] == ['The Matrix']


@pytest.mark.parametrize('metascore, expected', [
    (None, False),
    ('', False),
    ('   ', False),
    ('N/A', False),
    ('n/a', False),
    (' N/A ', False),
    ('75', True),
    ('0', True),
    ('tbd', True),
    (75, True)
])
def test_has_quality_score(metascore, expected):
    assert has_quality_score(metascore) is expected
