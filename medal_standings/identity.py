"""
Country identity resolution for a medal-table name cell.

A name cell can look like any of these, depending on the page revision:
    <a>Italy</a>*                     -> name from the link, code from the table
    Italy (ITA)                       -> code in parentheses
    <a>Italy</a> ITA                  -> bare code after the link
Codes are found by trying CODE_STRATEGIES in order; the first hit wins.
"""

import re

from .normalize import clean_name

_PAREN_CODE_RE = re.compile(r'\(([A-Z]{3})\)$')
_BARE_CODE_RE = re.compile(r'^[A-Z]{3}$')
_FOOTER_PREFIX = 'totals'


def code_from_parentheses(cell_text, name, table):
    m = _PAREN_CODE_RE.search(cell_text)
    return m.group(1) if m else None


def code_from_last_token(cell_text, name, table):
    tokens = cell_text.split()
    if tokens and _BARE_CODE_RE.match(tokens[-1]):
        return tokens[-1]
    return None


def code_from_name_table(cell_text, name, table):
    code = table.name_to_code.get(name)
    if code:
        return code
    folded = name.casefold()
    for known, code in table.name_to_code.items():
        if known.casefold() == folded:
            return code
    return None


CODE_STRATEGIES = [
    code_from_parentheses,
    code_from_last_token,
    code_from_name_table,
]


def resolve_code(cell_text, name, table, strategies=CODE_STRATEGIES):
    """Run the strategies in order and return the first code found, else None."""
    for strategy in strategies:
        code = strategy(cell_text, name, table)
        if code:
            return code
    return None


def _strip_code_suffix(name, code):
    """'Italy (ITA)' / 'Italy ITA' -> 'Italy'. Never strips a name down to nothing."""
    stripped = re.sub(r'\s*\(' + re.escape(code) + r'\)$', '', name)
    stripped = re.sub(r'\s+' + re.escape(code) + r'$', '', stripped)
    stripped = clean_name(stripped)
    return stripped or name


def resolve_identity(cell_text, link_text, table):
    """Resolve a name cell to {'name': ..., 'code': ...}.

    link_text is the text of the first hyperlink inside the cell (or None).
    Returns None for rows that must be dropped: empty names and the
    'Totals (N entries)' footer. code is None when nothing matched.
    """
    full = clean_name(cell_text)
    name = clean_name(link_text)
    from_link = bool(name)
    if not from_link:
        name = full

    code = resolve_code(full, name, table)
    if code and not from_link:
        name = _strip_code_suffix(name, code)

    if not name or name.lower().startswith(_FOOTER_PREFIX):
        return None
    return {'name': name, 'code': code}
