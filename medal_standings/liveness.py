"""Live vs not-yet-started decision for a set of canonical records."""

def is_live(records):
    """True once any entrant has won a medal. No records means not live."""
    return any(r['gold'] + r['silver'] + r['bronze'] > 0 for r in records)
