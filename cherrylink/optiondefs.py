"""Core option definitions announced to the front end for each console count."""

from __future__ import annotations

from dataclasses import dataclass

MAX_CONSOLES = 16


@dataclass(frozen=True)
class OptionDefinition:
    """One core option: its key, a label, and its ``|``-separated choices."""

    key: str
    label: str
    spec: str

    def choices(self) -> tuple[str, ...]:
        """The selectable values, in the order offered; the first is the default."""
        return tuple(choice for choice in self.spec.split("|") if choice)

    @property
    def default(self) -> str:
        """The value the front end selects when nothing has been chosen."""
        return self.choices()[0]

    @property
    def declaration(self) -> str:
        """The option as the front end expects it: ``label; a|b|c``."""
        return f"{self.label}; {self.spec}"


def _option(key: str, declaration: str) -> OptionDefinition:
    label, _, spec = declaration.partition("; ")
    return OptionDefinition(key, label, spec)


_CONSOLE_COUNT = _option(
    "dcgb_emulated_gameboys",
    "Number of emulated Gameboys (reload); "
    "1|2|3|4|5|6|7|8|9|10|11|12|13|14|15|16",
)
_LINK_ENABLE = _option(
    "dcgb_gblink_enable", "Link cable emulation (reload); disabled|enabled"
)

_SINGLE: tuple[OptionDefinition, ...] = (
    _CONSOLE_COUNT,
    _option(
        "dcgb_tv_remote",
        "TV Remote Emulation; use Numpad|auto (send random signal)",
    ),
    _option(
        "dcgb_power_antenna_use_rumble",
        "Power Antenna/Bugsensor use rumble; Strong|Weak|Off",
    ),
)

_DUAL: tuple[OptionDefinition, ...] = (
    _CONSOLE_COUNT,
    _LINK_ENABLE,
    _option("dcgb_screen_placement", "Screen layout; left-right|top-down"),
    _option(
        "dcgb_single_screen_mp",
        "Show player screens; all players|player 1 only|player 2 only",
    ),
    _option("dcgb_audio_output", "Audio output; Game Boy #1|Game Boy #2"),
)

_TRIPLE: tuple[OptionDefinition, ...] = (
    _CONSOLE_COUNT,
    _LINK_ENABLE,
    _option("dcgbt_gblink_device", "Link cable device (reload); 4-player adapter"),
    _option(
        "dcgb_screen_placement", "Screen layout; left-right|splitscreen|top-down"
    ),
    _option(
        "dcgb_single_screen_mp",
        "Show player screens; all players|player 1 only|player 2 only|player 3 only",
    ),
    _option(
        "dcgb_audio_output", "Audio output; Game Boy #1|Game Boy #2|Game Boy #3"
    ),
)

_QUAD: tuple[OptionDefinition, ...] = (
    _CONSOLE_COUNT,
    _LINK_ENABLE,
    _option(
        "dcgbt_gblink_device",
        "Link cable device (reload); 4-player adapter|2x2-player link",
    ),
    _option(
        "dcgb_screen_placement", "Screen layout; splitscreen|top-down|left-right|"
    ),
    _option(
        "dcgb_number_of_local_screens",
        "Netplay: Nummer of local players (splitscreen); 1|2",
    ),
    _option(
        "dcgb_single_screen_mp",
        "Show player screens; all players|"
        + "|".join(f"player {n} only" for n in range(1, MAX_CONSOLES + 1)),
    ),
    _option(
        "dcgb_audio_output",
        "Audio output; "
        + "|".join(f"Game Boy #{n}" for n in range(1, MAX_CONSOLES + 1)),
    ),
)

_BY_COUNT: dict[int, tuple[OptionDefinition, ...]] = {
    1: _SINGLE,
    2: _DUAL,
    3: _TRIPLE,
}


def option_definitions(emulated_gbs: int) -> tuple[OptionDefinition, ...]:
    """The options offered when ``emulated_gbs`` consoles are emulated.

    Four or more consoles share the full set.
    """
    if not 1 <= emulated_gbs <= MAX_CONSOLES:
        raise ValueError(f"emulated consoles out of range: {emulated_gbs}")
    return _BY_COUNT.get(emulated_gbs, _QUAD)