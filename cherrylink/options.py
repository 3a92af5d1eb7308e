"""Core options as read from the front end's variables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .compositor import ScreenLayout

MAX_CONSOLES = 16

_RUMBLE_LEVELS = {"Off": 0, "Weak": 1, "Strong": 2}
_CONSOLE_COUNTS = {str(n): n for n in range(1, MAX_CONSOLES + 1)}
_PLAYER_SCREENS = {f"player {n} only": n - 1 for n in range(1, MAX_CONSOLES + 1)}
_AUDIO_OUTPUTS = {f"Game Boy #{n}": n - 1 for n in range(1, MAX_CONSOLES + 1)}
_PLACEMENTS = {
    "left-right": (False, False),
    "top-down": (True, False),
    "splitscreen": (False, True),
}

AUDIO_OUTPUT_KEY = "dcgb_audio_output"


def _audio_label(index: int) -> str:
    return f"Game Boy #{index + 1}"


@dataclass
class CoreOptions:
    """The settings chosen through the front end's core options.

    Some settings (the console count and link cable emulation) take effect only
    on the first ``apply``; later changes to them are ignored until reload.
    """

    emulated_gbs: int = 4
    number_of_local_screens: int = 1
    power_antenna_use_rumble: int = 0
    auto_random_tv_remote: bool = False
    use_multi_adapter: bool = False
    gblink_enable: bool = False
    logging_allowed: bool = False
    screen_vertical: bool = False
    screen_split: bool = False
    screen_switched: bool = False
    show_player_screen: int = 1
    audio_2p_mode: int = 0
    already_checked_options: bool = False

    @property
    def shows_all_players(self) -> bool:
        return self.show_player_screen == self.emulated_gbs

    def layout(self) -> ScreenLayout:
        """The screen arrangement these options describe."""
        return ScreenLayout(
            emulated_gbs=self.emulated_gbs,
            number_of_local_screens=self.number_of_local_screens,
            show_player_screen=self.show_player_screen,
            vertical=self.screen_vertical,
            split=self.screen_split,
            switched=self.screen_switched,
        )

    def apply(self, variables: Mapping[str, str | None]) -> dict[str, str]:
        """Read the front end's current ``variables`` into these options.

        A key that is missing (or maps to None) counts as an unset variable.
        Returns the variables that should be written back to the front end.
        """
        updates: dict[str, str] = {}

        def value(key: str) -> str | None:
            return variables.get(key)

        rumble = value("dcgb_power_antenna_use_rumble")
        if rumble is not None and rumble in _RUMBLE_LEVELS:
            self.power_antenna_use_rumble = _RUMBLE_LEVELS[rumble]

        remote = value("dcgb_tv_remote")
        if remote is not None:
            self.auto_random_tv_remote = not remote.startswith("use Numpa")

        count = value("dcgb_emulated_gameboys")
        if count is not None and not self.already_checked_options:
            if count in _CONSOLE_COUNTS:
                self.emulated_gbs = _CONSOLE_COUNTS[count]

        screens = value("dcgb_number_of_local_screens")
        if screens == "1":
            self.number_of_local_screens = 1
        elif screens == "2":
            self.number_of_local_screens = 2

        if self.emulated_gbs > 2:
            device = value("dcgbt_gblink_device")
            if device is not None:
                if device == "4-player adapter":
                    self.use_multi_adapter = True
                elif device == "2x2 - player link":
                    self.use_multi_adapter = False
            else:
                self.screen_vertical = False

        if self.emulated_gbs > 1:
            self._apply_multiplayer(value, updates)

        self.already_checked_options = True
        return updates

    def _apply_multiplayer(self, value, updates: dict[str, str]) -> None:
        link = value("dcgb_gblink_enable")
        if link is not None:
            if not self.already_checked_options:
                if link == "disabled":
                    self.gblink_enable = False
                elif link == "enabled":
                    self.gblink_enable = True
        else:
            self.gblink_enable = False

        log_link = value("dcgb_log_link")
        if log_link is not None:
            self.logging_allowed = log_link == "On"

        placement = value("dcgb_screen_placement")
        if placement is not None:
            if placement in _PLACEMENTS:
                self.screen_vertical, self.screen_split = _PLACEMENTS[placement]
        else:
            self.screen_vertical = False

        switch = value("dcgb_switch_screens")
        if switch == "normal":
            self.screen_switched = False
        elif switch == "switched":
            self.screen_switched = True
        elif switch is None:
            self.screen_switched = False

        shown = value("dcgb_single_screen_mp")
        if shown is not None:
            if shown == "all players":
                self.show_player_screen = self.emulated_gbs
            elif shown in _PLAYER_SCREENS:
                self.show_player_screen = _PLAYER_SCREENS[shown]
            if not self.shows_all_players:
                self.audio_2p_mode = self.show_player_screen
                updates[AUDIO_OUTPUT_KEY] = _audio_label(self.audio_2p_mode)
        else:
            self.show_player_screen = self.emulated_gbs

        audio = value(AUDIO_OUTPUT_KEY)
        if audio is not None:
            if not self.shows_all_players:
                self.audio_2p_mode = self.show_player_screen
                updates[AUDIO_OUTPUT_KEY] = _audio_label(self.audio_2p_mode)
            elif audio in _AUDIO_OUTPUTS:
                self.audio_2p_mode = _AUDIO_OUTPUTS[audio]
        else:
            self.screen_switched = False