"""
Olympics Medal Table Updater
============================
Called by GitHub Actions on a schedule. Fetches the Games' medal table page
from the Wikipedia API, extracts per-country standings and writes a JSON
payload for the medals widget.

Data flow:
  1. Page HTML: Wikipedia API (action=parse) for GAME_PAGE
  2. Standings: medal_standings pipeline (structured table or text fallback)
  3. Placeholders: zero-medal rows until the first medal is awarded
  4. Output: OUT_FILE (public/medals.json by default)

All settings come from environment variables, see medal_standings/config.py.
"""

import json
import os
import sys
import traceback
from datetime import datetime, timezone
from urllib.parse import quote

from medal_standings import build_standings, load_identity_table, load_settings
from medal_standings.validate import validate_records

WIKI_API = 'https://en.wikipedia.org/w/api.php'
WIKI_PAGE_URL = 'https://en.wikipedia.org/wiki/{page}'
USER_AGENT = 'olympics-medals-widget/1.0 (GitHub Actions)'


# ── Wikipedia Fetch ───────────────────────────────────────────────────────

def fetch_medal_page(page):
    """Fetch rendered page HTML from the Wikipedia API. Returns (url, html)."""
    import requests
    resp = requests.get(WIKI_API, params={
        'action': 'parse',
        'page': page,
        'format': 'json',
        'prop': 'text',
        'redirects': 1,
    }, timeout=30, headers={'User-Agent': USER_AGENT})
    resp.raise_for_status()
    html = resp.json().get('parse', {}).get('text', {}).get('*', '')
    if not html:
        raise ValueError(f'Empty Wikipedia response for {page}')

    url = WIKI_PAGE_URL.format(page=quote(page))
    print(f'  ✓ Wikipedia: fetched {len(html)} bytes from {url}')
    return url, html


# ── Payload ───────────────────────────────────────────────────────────────

def to_public_row(record):
    """Canonical record -> the row shape the widget reads."""
    return {
        'rank': record['rank'],
        'noc': record['code'],
        'name': record['name'],
        'gold': record['gold'],
        'silver': record['silver'],
        'bronze': record['bronze'],
        'total': record['total'],
        'flag': record['flag_url'],
        'placeholder': record['is_placeholder'],
    }


def build_payload(settings, url, rows, live, now=None):
    now = now or datetime.now(timezone.utc)
    return {
        'updatedAt': now.isoformat().replace('+00:00', 'Z'),
        'source': 'Wikipedia',
        'sourceUrl': url,
        'games': settings.games_name,
        'gamePage': settings.game_page,
        'isLiveData': live,
        'rows': [to_public_row(r) for r in rows],
    }


def write_payload(payload, out_file):
    out_dir = os.path.dirname(out_file)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(out_file, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return os.path.getsize(out_file)


# ── Entry Point ────────────────────────────────────────────────────────────

def main(environ=None):
    print(f'Starting medal table update at {datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")}')
    settings = load_settings(environ)
    print(f'  Page {settings.game_page} ({settings.source_mode} source, {settings.ranking_mode} ranks)')

    table = load_identity_table(settings.map_file)

    # ── Step 1: Page from Wikipedia ───────────────────────────────────────
    # A failed fetch leaves the previous OUT_FILE in place.
    try:
        url, html = fetch_medal_page(settings.game_page)
    except Exception as e:
        print(f'FATAL: Wikipedia fetch failed: {e}')
        traceback.print_exc()
        return 1

    # ── Step 2: Standings (or placeholders) ───────────────────────────────
    rows, live = build_standings(html, settings, table)

    # ── Step 3: Validation ────────────────────────────────────────────────
    if live:
        print('\n── Validation ──')
        warnings = validate_records(rows)
        if warnings:
            for w in warnings:
                print(f'  ⚠ {w}')
            print(f'  → {len(warnings)} validation warning(s), review above')
        else:
            print('  ✓ All validation checks passed')

    # ── Write JSON ────────────────────────────────────────────────────────
    payload = build_payload(settings, url, rows, live)
    file_size = write_payload(payload, settings.out_file)
    print(f'\nWrote {settings.out_file} with {len(rows)} rows '
          f'({"live" if live else "placeholder"}, {file_size} bytes) from {url}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
