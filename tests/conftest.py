import pytest
from bs4 import BeautifulSoup

from medal_standings.config import Settings
from medal_standings.reference import build_identity_table

HEADER = ('Rank', 'NOC', 'Gold', 'Silver', 'Bronze', 'Total')

# Rows from a typical mid-Games table; the third row is tied with the second
SAMPLE_ROWS = [
    ['1', 'Italy (ITA)', '2', '1', '0', '3'],
    ['2', 'Canada (CAN)', '1', '1', '1', '3'],
    ['', 'Norway (NOR)', '1', '0', '0', '1'],
]


def medal_table_html(rows, header=HEADER, before=''):
    head = ''.join(f'<th>{h}</th>' for h in header)
    body = ''.join(
        '<tr>' + ''.join(f'<td>{c}</td>' for c in row) + '</tr>'
        for row in rows
    )
    return (f'<html><body>{before}<table class="wikitable sortable">'
            f'<tr>{head}</tr>{body}</table></body></html>')


def soup_of(html):
    return BeautifulSoup(html, 'lxml')


@pytest.fixture
def table():
    return build_identity_table()


@pytest.fixture
def empty_table():
    return build_identity_table({}, {})


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sample_html():
    return medal_table_html(SAMPLE_ROWS)
