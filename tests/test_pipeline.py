import pytest

from conftest import SAMPLE_ROWS, medal_table_html, soup_of
from medal_standings import Settings, build_standings, extract_standings


def summary(records):
    return [(r['name'], r['code'], r['rank']) for r in records]


def test_end_to_end_preserve(sample_html, settings, table):
    records, live = extract_standings(sample_html, settings, table)
    assert live is True
    assert summary(records) == [('Italy', 'ITA', 1), ('Canada', 'CAN', 2), ('Norway', 'NOR', 3)]
    assert records[2]['total'] == 1
    assert records[0]['flag_url'] == 'https://flagcdn.com/w40/it.png'


def test_end_to_end_recompute(table):
    rows = [['9', 'Italy (ITA)', '2', '1', '0', '3'],
            ['4', 'Canada (CAN)', '1', '1', '1', '3'],
            ['', 'Norway (NOR)', '1', '0', '0', '1']]
    records, live = extract_standings(medal_table_html(rows), Settings(ranking_mode='recompute'), table)
    assert live is True
    assert summary(records) == [('Italy', 'ITA', 1), ('Canada', 'CAN', 2), ('Norway', 'NOR', 3)]


def test_accepts_parsed_soup(sample_html, settings, table):
    records, _ = extract_standings(soup_of(sample_html), settings, table)
    assert len(records) == 3


def test_rank_omitted_row_keeps_its_own_name(settings, table):
    html = medal_table_html([['1', 'Italy', '2', '1', '0', '3'], ['Norway', '2', '1', '0', '3']])
    records, _ = extract_standings(html, settings, table)
    assert records[1]['name'] == 'Norway'
    assert records[1]['code'] == 'NOR'
    assert (records[1]['gold'], records[1]['total']) == (2, 3)


def test_total_is_taken_verbatim(settings, table):
    html = medal_table_html([['1', 'Italy', '2', '1', '0', '99']])
    records, _ = extract_standings(html, settings, table)
    assert records[0]['total'] == 99


def test_garbled_document(settings, table):
    records, live = extract_standings('<html><body><p>Not yet</p></body></html>', settings, table)
    assert records == []
    assert live is False


def test_unresolved_identity_is_kept(settings, empty_table):
    html = medal_table_html([['1', 'Freedonia', '1', '0', '0', '1']])
    records, _ = extract_standings(html, settings, empty_table)
    assert records[0]['code'] == 'Freedonia'
    assert records[0]['flag_url'] is None


def test_footer_and_junk_rows_dropped(settings, table):
    rows = SAMPLE_ROWS + [['Totals (3 entries)', '4', '2', '1', '7'], ['', '', '0', '0', '0', '0']]
    records, _ = extract_standings(medal_table_html(rows), settings, table)
    assert [r['name'] for r in records] == ['Italy', 'Canada', 'Norway']


def test_all_zero_table_is_not_live(settings, table):
    html = medal_table_html([['1', 'Italy', '0', '0', '0', '0'], ['1', 'Canada', '0', '0', '0', '0']])
    records, live = extract_standings(html, settings, table)
    assert len(records) == 2
    assert live is False


def test_text_mode(table):
    text = 'Medal table. Rank NOC Gold Silver Bronze Total 1 Italy* 2 1 0 3 2 Canada 1 1 1 3 3 Great Britain 1 0 0 1'
    records, live = extract_standings(text, Settings(source_mode='text'), table)
    assert live is True
    assert summary(records) == [('Italy', 'ITA', 1), ('Canada', 'CAN', 2), ('Great Britain', 'GBR', 3)]


def test_text_mode_from_soup(table):
    html = medal_table_html([['1', 'Italy*', '2', '1', '0', '3'], ['2', 'Canada', '1', '1', '1', '3']])
    records, _ = extract_standings(soup_of(html), Settings(source_mode='text'), table)
    assert [r['code'] for r in records] == ['ITA', 'CAN']


def test_text_mode_missing_anchor(table):
    records, live = extract_standings('nothing to see', Settings(source_mode='text'), table)
    assert (records, live) == ([], False)


# ── build_standings ───────────────────────────────────────────────────────

def test_build_standings_truncates_live_rows(sample_html, table):
    rows, live = build_standings(sample_html, Settings(top_n=2), table)
    assert live is True
    assert [r['code'] for r in rows] == ['ITA', 'CAN']


@pytest.mark.parametrize('html', [
    '<p>garbled</p>',
    medal_table_html([['1', 'Italy', '0', '0', '0', '0']]),
])
def test_build_standings_falls_back_to_placeholders(html, table):
    rows, live = build_standings(html, Settings(placeholder_count=4), table)
    assert live is False
    assert len(rows) == 4
    assert all(r['is_placeholder'] for r in rows)


def test_text_mode_from_tag(table):
    html = medal_table_html([['1', 'Italy*', '2', '1', '0', '3'], ['2', 'Canada', '1', '1', '1', '3']],
                            before='<p>Rank of nations</p>')
    medal_table = soup_of(html).find('table')
    records, live = extract_standings(medal_table, Settings(source_mode='text'), table)
    assert live is True
    assert [r['code'] for r in records] == ['ITA', 'CAN']
