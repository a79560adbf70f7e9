"""
Find the part of a page that holds the medal standings.

structured: the first <table> whose header row mentions gold, silver, bronze
            and total (case-insensitive, any order). First match wins.
text:       a fixed-size window of text right after an anchor phrase.
Either locator returns None when nothing qualifies.
"""

HEADER_TOKENS = ('gold', 'silver', 'bronze', 'total')


def find_medal_table(soup, settings=None):
    """Return the first table whose header row names all four medal columns."""
    for table in soup.find_all('table'):
        header = table.find('tr')
        if header is None:
            continue
        header_text = header.get_text(' ').lower()
        if all(token in header_text for token in HEADER_TOKENS):
            return table
    return None


def find_text_window(text, settings):
    """Slice settings.text_window characters following the first anchor occurrence."""
    anchor = settings.text_anchor
    if not text or not anchor:
        return None
    idx = text.find(anchor)
    if idx < 0:
        return None
    start = idx + len(anchor)
    return text[start:start + settings.text_window]


LOCATORS = {
    'structured': find_medal_table,
    'text': find_text_window,
}


def locate_region(document, settings):
    return LOCATORS[settings.source_mode](document, settings)
