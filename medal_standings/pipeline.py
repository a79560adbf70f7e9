"""
Medal standings pipeline.

document -> locate_region -> extract_rows -> resolve_identity + build_record
         -> is_live -> rank_records (live) or build_placeholders (not live)

No network or file access happens here; update_medals.py does both.
"""

from bs4 import BeautifulSoup, Tag

from .extract import extract_rows
from .identity import resolve_identity
from .liveness import is_live
from .locate import locate_region
from .normalize import build_record
from .placeholders import build_placeholders
from .ranking import rank_records, top_n


def _as_document(document, source_mode):
    """Accept raw HTML, a parsed soup or any tag within one, for either mode."""
    if source_mode == 'structured':
        if isinstance(document, str):
            return BeautifulSoup(document, 'lxml')
        return document
    if isinstance(document, Tag):
        return document.get_text(' ')
    return document or ''


def parse_records(document, settings, table):
    """Canonical records in source order. Empty list when no region is found."""
    document = _as_document(document, settings.source_mode)
    region = locate_region(document, settings)
    if region is None:
        print(f'  ↳ No medal standings found ({settings.source_mode} mode)')
        return []

    records = []
    dropped = 0
    for row in extract_rows(region, settings):
        identity = resolve_identity(row['name_text'], row['link_text'], table)
        if identity is None:
            dropped += 1
            continue
        records.append(build_record(identity, row['medals'], row['rank'], table))

    unresolved = sum(1 for r in records if r['flag_url'] is None)
    print(f'  ✓ Parsed {len(records)} rows ({dropped} dropped, {unresolved} without flag)')
    return records


def extract_standings(document, settings, table):
    """Return (ranked records, is_live). Not-live results still carry their rows."""
    records = parse_records(document, settings, table)
    live = is_live(records)
    return rank_records(records, settings.ranking_mode), live


def build_standings(document, settings, table):
    """Rows to publish: top-N live rows, or placeholders when nothing is live."""
    records, live = extract_standings(document, settings, table)
    if live:
        return top_n(records, settings.top_n), True
    print(f'  ↳ No medals awarded yet, using {settings.placeholder_count} placeholder rows')
    return build_placeholders(settings.placeholder_count, table), False
