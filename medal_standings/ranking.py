"""Ordering of canonical records. One mode per run, chosen by configuration."""

RANKING_MODES = ('preserve', 'recompute')


def _medal_order(record):
    return (-record['gold'], -record['silver'], -record['bronze'],
            -record['total'], record['name'])


def preserve_ranks(records):
    """Keep the source rank (position when the source gave none), sort ascending.

    Records with equal ranks keep their source order.
    """
    ranked = []
    for position, record in enumerate(records, start=1):
        ranked.append(dict(record, rank=record['rank'] or position))
    ranked.sort(key=lambda r: r['rank'])
    return ranked


def recompute_ranks(records):
    """Ignore source ranks; order by medals and number 1..n."""
    ordered = sorted(records, key=_medal_order)
    return [dict(r, rank=i) for i, r in enumerate(ordered, start=1)]


RANKERS = {
    'preserve': preserve_ranks,
    'recompute': recompute_ranks,
}


def rank_records(records, mode):
    if mode not in RANKERS:
        raise ValueError(f'Unknown ranking mode {mode!r}, expected one of {RANKING_MODES}')
    return RANKERS[mode](records)


def top_n(records, n):
    """First n records; n <= 0 keeps everything."""
    return list(records[:n]) if n and n > 0 else list(records)
