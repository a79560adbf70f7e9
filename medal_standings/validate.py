"""Consistency checks over canonical records. Reports only; never edits a record."""

from collections import Counter


def validate_records(records):
    """Validate medal rows for consistency. Returns list of warnings."""
    warnings = []

    # 1. Medal math (totals come from the source and are not corrected)
    for r in records:
        expected = r['gold'] + r['silver'] + r['bronze']
        if expected != r['total']:
            warnings.append(f"Medal math: {r['name']} {r['gold']}+{r['silver']}+{r['bronze']}={expected} != total={r['total']}")

    # 2. Duplicate entrants
    counts = Counter(r['code'] for r in records)
    for code, n in sorted(counts.items()):
        if n > 1:
            warnings.append(f'Duplicate code: {code} appears {n} times')

    # 3. Flags
    missing = [r['name'] for r in records if not r['flag_url']]
    if missing:
        warnings.append(f'No flag for {len(missing)} row(s): {", ".join(missing)}')

    return warnings
