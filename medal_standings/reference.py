"""
Built-in reference data for country identity resolution.

NOC codes follow the IOC list; iso2 codes are the ones flagcdn.com serves.
Callers can replace either table through build_identity_table().
"""

import json
from collections import namedtuple
from types import MappingProxyType


# Country name to NOC code mapping
COUNTRY_CODES = {
    'Norway': 'NOR', 'Italy': 'ITA', 'United States': 'USA', 'United States of America': 'USA',
    'Netherlands': 'NED', 'Sweden': 'SWE', 'France': 'FRA', 'Germany': 'GER',
    'Austria': 'AUT', 'Switzerland': 'SUI', 'Japan': 'JPN', 'Australia': 'AUS',
    'Great Britain': 'GBR', 'Czechia': 'CZE', 'Czech Republic': 'CZE',
    'Slovenia': 'SLO', 'Canada': 'CAN', 'South Korea': 'KOR', 'Brazil': 'BRA',
    'Kazakhstan': 'KAZ', 'Finland': 'FIN', 'China': 'CHN', 'New Zealand': 'NZL',
    'Poland': 'POL', 'Estonia': 'EST', 'Belgium': 'BEL', 'Spain': 'ESP',
    'Latvia': 'LAT', 'Croatia': 'CRO', 'Slovakia': 'SVK', 'Bulgaria': 'BUL',
    'Denmark': 'DEN', 'Hungary': 'HUN', 'Ukraine': 'UKR', 'Belarus': 'BLR',
    'Liechtenstein': 'LIE', 'Georgia': 'GEO', 'Lithuania': 'LTU', 'Romania': 'ROU',
    'Ireland': 'IRL', 'Iceland': 'ISL', 'Israel': 'ISR', 'Turkey': 'TUR',
    'Argentina': 'ARG', 'Chile': 'CHI', 'Mexico': 'MEX', 'Hong Kong': 'HKG',
    'Chinese Taipei': 'TPE', 'Andorra': 'AND', 'Monaco': 'MON', 'Serbia': 'SRB',
}

# NOC code to ISO 3166-1 alpha-2, used for flag image URLs
NOC_TO_ISO2 = {
    'NOR': 'NO', 'ITA': 'IT', 'USA': 'US', 'NED': 'NL', 'SWE': 'SE', 'FRA': 'FR',
    'GER': 'DE', 'AUT': 'AT', 'SUI': 'CH', 'JPN': 'JP', 'AUS': 'AU', 'GBR': 'GB',
    'CZE': 'CZ', 'SLO': 'SI', 'CAN': 'CA', 'KOR': 'KR', 'BRA': 'BR', 'KAZ': 'KZ',
    'FIN': 'FI', 'CHN': 'CN', 'NZL': 'NZ', 'POL': 'PL', 'EST': 'EE', 'BEL': 'BE',
    'ESP': 'ES', 'LAT': 'LV', 'CRO': 'HR', 'SVK': 'SK', 'BUL': 'BG', 'DEN': 'DK',
    'HUN': 'HU', 'UKR': 'UA', 'BLR': 'BY', 'LIE': 'LI', 'GEO': 'GE', 'LTU': 'LT',
    'ROU': 'RO', 'IRL': 'IE', 'ISL': 'IS', 'ISR': 'IL', 'TUR': 'TR', 'ARG': 'AR',
    'CHI': 'CL', 'MEX': 'MX', 'HKG': 'HK', 'TPE': 'TW', 'AND': 'AD', 'MON': 'MC',
    'SRB': 'RS',
}

# Shown before the first medal event; cycled when more rows are requested
PLACEHOLDER_SEEDS = [
    ('Italy', 'ITA'),
    ('United States', 'USA'),
    ('Canada', 'CAN'),
    ('Germany', 'GER'),
    ('Norway', 'NOR'),
    ('Sweden', 'SWE'),
    ('France', 'FRA'),
    ('Switzerland', 'SUI'),
    ('Austria', 'AUT'),
    ('Netherlands', 'NED'),
]

FLAG_URL_TEMPLATE = 'https://flagcdn.com/w40/{iso2}.png'


# ── Identity Table ────────────────────────────────────────────────────────

IdentityTable = namedtuple('IdentityTable', ['name_to_code', 'code_to_iso2'])


def build_identity_table(name_to_code=None, code_to_iso2=None):
    """Freeze the two lookup mappings into a read-only IdentityTable.

    Missing arguments default to the built-in tables above. Pass an empty
    dict to run with no entries at all.
    """
    if name_to_code is None:
        name_to_code = COUNTRY_CODES
    if code_to_iso2 is None:
        code_to_iso2 = NOC_TO_ISO2
    return IdentityTable(
        name_to_code=MappingProxyType(dict(name_to_code)),
        code_to_iso2=MappingProxyType(dict(code_to_iso2)),
    )


def load_identity_table(map_file):
    """Build an IdentityTable whose NOC->iso2 side comes from a JSON file.

    A missing or unreadable file is not an error; the built-in mapping is used.
    """
    try:
        with open(map_file, encoding='utf-8') as f:
            code_to_iso2 = json.load(f)
        if not isinstance(code_to_iso2, dict):
            raise ValueError(f'{map_file} is not a JSON object')
    except (OSError, ValueError) as e:
        print(f'  ↳ NOC map unavailable ({e}), using built-in mapping')
        return build_identity_table()
    print(f'  ✓ NOC map: {len(code_to_iso2)} codes from {map_file}')
    return build_identity_table(code_to_iso2=code_to_iso2)


def flag_url(code, table):
    """Flag image URL for a NOC code, or None when no iso2 is known."""
    if not code:
        return None
    iso2 = table.code_to_iso2.get(code)
    if not iso2:
        return None
    return FLAG_URL_TEMPLATE.format(iso2=iso2.lower())
