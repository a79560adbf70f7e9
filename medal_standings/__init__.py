"""Medal table extraction: HTML or text standings to canonical per-country rows."""

from .config import Settings, load_settings
from .pipeline import build_standings, extract_standings
from .reference import build_identity_table, load_identity_table

__all__ = [
    'Settings',
    'build_identity_table',
    'build_standings',
    'extract_standings',
    'load_identity_table',
    'load_settings',
]
