"""Internationalisation strings for the Noughts UI.

Usage::

    from noughts.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_restart)              # "Заново"
    print(t().msg_win.format(mark="X"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_restart: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    msg_turn: str  # "It's {mark}'s turn!"
    msg_win: str  # "{mark} Won!"
    msg_draw: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_restart: str

    # ── EndgameDialog ────────────────────────────────────────────────────
    endgame_title: str
    endgame_restart: str
    endgame_close: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board_theme: str
    settings_highlight_line: str
    settings_show_endgame: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Noughts",
    menu_game="&Game",
    menu_restart="&Restart",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    msg_turn="It's {mark}'s turn!",
    msg_win="{mark} Won!",
    msg_draw="It's a Draw!",
    btn_restart="Restart",
    endgame_title="Game Over",
    endgame_restart="Restart",
    endgame_close="Close",
    settings_title="Settings",
    settings_language="Language:",
    settings_board_theme="Board theme:",
    settings_highlight_line="Highlight winning line",
    settings_show_endgame="Show game-over dialog",
)

_RU = Strings(
    window_title="Крестики-нолики",
    menu_game="&Игра",
    menu_restart="&Заново",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_settings_action="&Настройки...",
    msg_turn="Ходит {mark}!",
    msg_win="{mark} победил!",
    msg_draw="Ничья!",
    btn_restart="Заново",
    endgame_title="Игра окончена",
    endgame_restart="Заново",
    endgame_close="Закрыть",
    settings_title="Настройки",
    settings_language="Язык:",
    settings_board_theme="Тема доски:",
    settings_highlight_line="Подсвечивать выигрышную линию",
    settings_show_endgame="Показывать окно конца игры",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
