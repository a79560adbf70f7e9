"""Cell-level cleanup: medal counts to integers, display names to plain text."""

import re

from .reference import flag_url

MEDAL_KEYS = ('gold', 'silver', 'bronze', 'total')

# Host-nation and annotation glyphs Wikipedia appends to country names
HOST_MARKERS = '*†‡^'

_FOOTNOTE_RE = re.compile(r'\s*\[[^\]]*\]')
_TRAILING_MARKERS_RE = re.compile(r'[\s' + re.escape(HOST_MARKERS) + r']+$')


def to_int(value):
    """'12,345' -> 12345. Non-digits are dropped; nothing left means 0."""
    if value is None:
        return 0
    digits = re.sub(r'\D', '', str(value))
    return int(digits) if digits else 0


def clean_name(text):
    """Collapse whitespace, drop footnote markers like [a] and trailing host glyphs."""
    if not text:
        return ''
    name = re.sub(r'\s+', ' ', str(text)).strip()
    name = _FOOTNOTE_RE.sub('', name)
    name = _TRAILING_MARKERS_RE.sub('', name)
    return name.strip()


def build_record(identity, medals, rank, table, placeholder=False):
    """Assemble one canonical record.

    identity is the dict returned by identity.resolve_identity(); medals is a
    sequence of four cell values (gold, silver, bronze, total). total is kept
    as the source states it.
    """
    counts = dict(zip(MEDAL_KEYS, (to_int(v) for v in medals)))
    code = identity['code']
    return {
        'rank': rank if rank else None,
        'code': code or identity['name'],
        'name': identity['name'],
        'gold': counts.get('gold', 0),
        'silver': counts.get('silver', 0),
        'bronze': counts.get('bronze', 0),
        'total': counts.get('total', 0),
        'flag_url': flag_url(code, table),
        'is_placeholder': placeholder,
    }
