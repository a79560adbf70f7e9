"""Run settings, read from the environment (GitHub Actions sets these)."""

import os
from dataclasses import dataclass

from .extract import MIN_CELLS
from .locate import LOCATORS
from .ranking import RANKING_MODES

SOURCE_MODES = tuple(LOCATORS)
RANK_COLUMNS = tuple(MIN_CELLS)


@dataclass(frozen=True)
class Settings:
    game_page: str = '2026_Winter_Olympics_medal_table'
    games_name: str = 'Milano Cortina 2026'
    source_mode: str = 'structured'      # 'structured' table or 'text' regex fallback
    ranking_mode: str = 'preserve'       # 'preserve' source ranks or 'recompute' from medals
    rank_column: str = 'optional'        # 'optional' handles rowspan-tied rows, 'required' always reads cell 0
    top_n: int = 10                      # rows kept when live, 0 for all
    placeholder_count: int = 10
    text_anchor: str = 'Rank'
    text_window: int = 6000              # characters scanned after the anchor
    out_file: str = os.path.join('public', 'medals.json')
    map_file: str = os.path.join('scripts', 'noc_to_iso2.json')

    def __post_init__(self):
        _check_choice('SOURCE_MODE', self.source_mode, SOURCE_MODES)
        _check_choice('RANKING_MODE', self.ranking_mode, RANKING_MODES)
        _check_choice('RANK_COLUMN', self.rank_column, RANK_COLUMNS)


def _check_choice(name, value, choices):
    if value not in choices:
        raise ValueError(f'{name}={value!r} is not one of {", ".join(choices)}')


def _env_int(environ, key, default):
    try:
        return int(environ.get(key, default))
    except (TypeError, ValueError):
        print(f'  ↳ {key}={environ.get(key)!r} is not a number, using {default}')
        return default


def load_settings(environ=None):
    """Build Settings from environment variables; unset keys keep their defaults."""
    env = os.environ if environ is None else environ
    d = Settings()
    return Settings(
        game_page=env.get('GAME_PAGE', d.game_page),
        games_name=env.get('GAMES_NAME', d.games_name),
        source_mode=env.get('SOURCE_MODE', d.source_mode).strip().lower(),
        ranking_mode=env.get('RANKING_MODE', d.ranking_mode).strip().lower(),
        rank_column=env.get('RANK_COLUMN', d.rank_column).strip().lower(),
        top_n=_env_int(env, 'TOP_N', d.top_n),
        placeholder_count=_env_int(env, 'PLACEHOLDER_COUNT', d.placeholder_count),
        text_anchor=env.get('TEXT_ANCHOR', d.text_anchor),
        text_window=_env_int(env, 'TEXT_WINDOW', d.text_window),
        out_file=env.get('OUT_FILE', d.out_file),
        map_file=env.get('MAP_FILE', d.map_file),
    )
