"""Choice of the accessory plugged into the link port or infrared port of a cartridge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .barcodes import SUPPORTED_CARTS, Barcode, barcodes_for

MAX_CONSOLES = 16
TITLE_OFFSET = 0x134
TITLE_LENGTH = 16

_TV_REMOTE_PREFIXES = ("SUN", "STAR", "B-MAX", "F.MEGA", "DORAEMONMEM")
_POWER_ANTENNA_PREFIXES = ("TELEFANG", "BUGSITE")
_UBIKEY_PREFIXES = ("LAURA", "CARL LEWIS", "FLIPPER")


class Accessory(Enum):
    """Devices the core can emulate on a link cable or infrared port."""

    LINK_CABLE = "link cable"
    FOUR_PLAYER_ADAPTER = "four-player adapter"
    FOUR_PLAYER_ADAPTER_X4 = "four four-player adapters"
    TETRIS_HACK = "tetris multiplayer hack"
    KWIRK_HACK = "kwirk multiplayer hack"
    BURGER_TIME_HACK = "burger time deluxe multiplayer hack"
    FACEBALL_RING_CABLE = "faceball ring link cable"
    POKEBUDDY = "pokebuddy"
    TV_REMOTE = "tv remote"
    BARCODE_BOY = "barcode boy"
    BARDIGUN = "barcode taisen bardigun"
    POWER_ANTENNA = "power antenna"

    @property
    def handles_hotkeys(self) -> bool:
        """Whether the device is driven by the special hotkeys."""
        return self in _HOTKEY_DEVICES

    @property
    def is_infrared(self) -> bool:
        """Whether the device talks through the infrared port."""
        return self is Accessory.TV_REMOTE


_HOTKEY_DEVICES = frozenset(
    {Accessory.POKEBUDDY, Accessory.TV_REMOTE, Accessory.BARCODE_BOY, Accessory.BARDIGUN}
)


@dataclass(frozen=True)
class AccessoryChoice:
    """The accessory chosen for a cartridge and the messages shown to the player."""

    accessory: Accessory | None
    messages: tuple[str, ...] = ()
    barcodes: tuple[Barcode, ...] = ()


def cart_name(rom: bytes) -> str:
    """The cartridge title from the ROM header, up to its first NUL byte."""
    if len(rom) < TITLE_OFFSET + TITLE_LENGTH:
        raise ValueError(
            f"ROM of {len(rom)} bytes is too short to hold a cartridge header"
        )
    title = bytes(rom[TITLE_OFFSET : TITLE_OFFSET + TITLE_LENGTH])
    return title.split(b"\0", 1)[0].decode("latin-1")


def _single_player(name: str, auto_random_tv_remote: bool) -> AccessoryChoice:
    if name.startswith("POKEMON"):
        return AccessoryChoice(
            Accessory.POKEBUDDY,
            (
                "PKMBUDDY BOY plugged in",
                "Check out the CABLE CLUB for weekly GEN1 Distributions!",
            ),
        )
    if name.startswith(_TV_REMOTE_PREFIXES):
        mode = (
            "TV REMOTE Emulation enabled (auto random signals) "
            if auto_random_tv_remote
            else "TV REMOTE EMULATION enabled (use the Numpad to send signals)"
        )
        return AccessoryChoice(
            Accessory.TV_REMOTE,
            ("Game can unlock content with a TV REMOTE", mode),
        )
    if name in SUPPORTED_CARTS:
        return AccessoryChoice(
            Accessory.BARCODE_BOY,
            ("Game supports BARCODE BOY! BARCODE BOY plugged in",),
            barcodes_for(name),
        )
    if name == "BARDIGUN":
        return AccessoryChoice(
            Accessory.BARDIGUN,
            ("Game supports BARCODE TAISEN BARDIGUN! BARDIGUN plugged in",),
        )
    if name.startswith(_POWER_ANTENNA_PREFIXES):
        return AccessoryChoice(
            Accessory.POWER_ANTENNA,
            (
                "Game supports POWER ANTENNA/BUGSENSOR! "
                "POWER ANTENNA/BUGSENSOR plugged in",
            ),
        )
    return AccessoryChoice(None)


def _four_player_hack(name: str, fallback: Accessory) -> AccessoryChoice:
    if name == "TETRIS":
        return AccessoryChoice(
            Accessory.TETRIS_HACK,
            ("TETRIS Battle Royal Multiplayer Hack Adapter plugged in",),
        )
    if name == "KWIRK":
        return AccessoryChoice(
            Accessory.KWIRK_HACK,
            ("KWIRK Multiplayer Hack Adapter plugged in",),
        )
    if name == "BURGER TIME":
        return AccessoryChoice(
            Accessory.BURGER_TIME_HACK,
            ("Burger Time Deluxe Multiplayer Hack Adapter plugged in",),
        )
    return AccessoryChoice(fallback)


def _many_players(name: str) -> AccessoryChoice:
    if name.startswith("FACEBALL 2000"):
        return AccessoryChoice(
            Accessory.FACEBALL_RING_CABLE, ("RING LINK CABLE plugged in",)
        )
    if name == "KWIRK":
        return AccessoryChoice(
            Accessory.KWIRK_HACK, ("KWIRK Multiplayer Hack Adapter plugged in",)
        )
    if name == "TETRIS":
        return AccessoryChoice(
            Accessory.TETRIS_HACK,
            ("TETRIS Battle Royal Multiplayer Hack Adapter plugged in",),
        )
    return AccessoryChoice(
        Accessory.FOUR_PLAYER_ADAPTER_X4,
        ("4x FOUR PLAYER ADAPTERs are plugged in",),
    )


def select_accessory(
    name: str, emulated_gbs: int, auto_random_tv_remote: bool = False
) -> AccessoryChoice:
    """Pick the accessory for cartridge ``name`` with ``emulated_gbs`` consoles.

    One console gets a game-specific accessory, if any; two are joined by a
    link cable; three or four share a four-player adapter unless the game has
    a dedicated multiplayer hack; more use four adapters or a game-specific link.
    """
    if not 1 <= emulated_gbs <= MAX_CONSOLES:
        raise ValueError(f"emulated consoles out of range: {emulated_gbs}")
    if emulated_gbs == 1:
        return _single_player(name, auto_random_tv_remote)
    if emulated_gbs == 2:
        return AccessoryChoice(Accessory.LINK_CABLE)
    if emulated_gbs <= 4:
        return _four_player_hack(name, Accessory.FOUR_PLAYER_ADAPTER)
    return _many_players(name)