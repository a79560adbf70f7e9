"""
Raw row extraction from a located medal table or text window.

Every raw row is a dict:
    {'rank': int | None, 'name_text': str, 'link_text': str | None,
     'medals': [gold, silver, bronze, total], 'has_leading_rank': bool}
Cells are left as text; normalize.py turns them into numbers.
"""

import re

from .normalize import to_int

# Fewest cells a data row may have, keyed by settings.rank_column
MIN_CELLS = {
    'required': 6,  # rank, name, gold, silver, bronze, total
    'optional': 5,  # tied rows lose their rank cell to the row above (rowspan)
}

_PLAIN_INT_RE = re.compile(r'^\d+$')

# rank, name (letters, apostrophes, hyphens, spaces, optional host '*'), 4 counts
TEXT_ROW_RE = re.compile(
    r"(\d+)\s+((?:[^\W\d_]|['\- ])+?\s*\*?)\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)"
)


def _cell_text(cell):
    return re.sub(r'\s+', ' ', cell.get_text(' ')).strip()


def _first_link_text(cell):
    for a in cell.find_all('a'):
        text = _cell_text(a)
        if text:
            return text
    return None


# ── Rank Presence ─────────────────────────────────────────────────────────
# Each layout check takes the row's cell texts and returns (rank, name_index)
# or None. Checks run in order; the first answer decides where the name is.

def leading_integer_rank(texts):
    """'1' | 'Italy' | ... -> explicit rank, name in the second cell."""
    first = texts[0].strip()
    if _PLAIN_INT_RE.match(first):
        return int(first), 1
    return None


def blank_rank_cell(texts):
    """'' | 'Norway' | ... -> rank cell present but empty (full-width row)."""
    if not texts[0].strip() and len(texts) >= MIN_CELLS['required']:
        return None, 1
    return None


def rank_cell_omitted(texts):
    """'Norway' | 2 | ... -> no rank cell at all, the first cell is the name."""
    return None, 0


def rank_cell_always_present(texts):
    return to_int(texts[0]) or None, 1


RANK_LAYOUTS = {
    'optional': [leading_integer_rank, blank_rank_cell, rank_cell_omitted],
    'required': [rank_cell_always_present],
}


def detect_rank(texts, rank_column='optional'):
    for check in RANK_LAYOUTS[rank_column]:
        found = check(texts)
        if found is not None:
            return found
    return None, 0


# ── Extractors ────────────────────────────────────────────────────────────

def extract_table_rows(table, settings):
    """Yield raw rows from a medal <table>, skipping the header row."""
    min_cells = MIN_CELLS[settings.rank_column]
    for tr in table.find_all('tr')[1:]:
        cells = tr.find_all(['td', 'th'], recursive=False)
        if len(cells) < min_cells:
            continue
        texts = [_cell_text(c) for c in cells]

        # Must happen before anything reads the name or medal columns
        rank, name_idx = detect_rank(texts, settings.rank_column)
        if len(texts) < name_idx + 5:
            continue

        yield {
            'rank': rank,
            'name_text': texts[name_idx],
            'link_text': _first_link_text(cells[name_idx]),
            'medals': texts[name_idx + 1:name_idx + 5],
            'has_leading_rank': name_idx == 1,
        }


def extract_text_rows(window, settings=None):
    """Yield raw rows matched left to right in a plain-text window."""
    for m in TEXT_ROW_RE.finditer(window):
        yield {
            'rank': int(m.group(1)),
            'name_text': m.group(2),
            'link_text': None,
            'medals': [m.group(3), m.group(4), m.group(5), m.group(6)],
            'has_leading_rank': True,
        }


EXTRACTORS = {
    'structured': extract_table_rows,
    'text': extract_text_rows,
}


def extract_rows(region, settings):
    return EXTRACTORS[settings.source_mode](region, settings)
