"""Zero-medal rows shown before the first medal event is decided."""

from .normalize import build_record
from .reference import PLACEHOLDER_SEEDS


def build_placeholders(count, table, seeds=PLACEHOLDER_SEEDS):
    """count rows cycling through seeds, ranked 1..count with every medal at 0."""
    if not seeds:
        return []
    rows = []
    for i in range(max(count, 0)):
        name, code = seeds[i % len(seeds)]
        rows.append(build_record({'name': name, 'code': code}, (0, 0, 0, 0),
                                 i + 1, table, placeholder=True))
    return rows
