import pytest

from cherrylink.accessories import (
    Accessory,
    AccessoryChoice,
    cart_name,
    select_accessory,
)
from cherrylink.barcodes import barcodes_for


def _rom_with_title(title: bytes) -> bytes:
    rom = bytearray(0x8000)
    rom[0x134 : 0x134 + len(title)] = title
    return bytes(rom)


def test_cart_name_reads_header_title():
    assert cart_name(_rom_with_title(b"TETRIS")) == "TETRIS"


def test_cart_name_uses_full_sixteen_bytes():
    rom = _rom_with_title(b"POKEMON RED\0\0\0\0\0EXTRA")
    assert cart_name(rom) == "POKEMON RED"
    assert cart_name(_rom_with_title(b"ABCDEFGHIJKLMNOPQRS")) == "ABCDEFGHIJKLMNOP"


def test_cart_name_short_rom_raises():
    with pytest.raises(ValueError):
        cart_name(b"\0" * 0x140)


def test_pokemon_gets_pokebuddy():
    choice = select_accessory("POKEMON BLUE", 1, False)
    assert choice.accessory is Accessory.POKEBUDDY
    assert choice.messages == (
        "PKMBUDDY BOY plugged in",
        "Check out the CABLE CLUB for weekly GEN1 Distributions!",
    )
    assert choice.accessory.handles_hotkeys


@pytest.mark.parametrize("name", ["SUN", "STAR", "B-MAX BLUE", "F.MEGA", "DORAEMONMEM"])
def test_tv_remote_games(name):
    choice = select_accessory(name, 1, True)
    assert choice.accessory is Accessory.TV_REMOTE
    assert choice.accessory.is_infrared
    assert choice.messages[1] == "TV REMOTE Emulation enabled (auto random signals) "


def test_tv_remote_numpad_message():
    choice = select_accessory("SUN", 1, False)
    assert choice.messages == (
        "Game can unlock content with a TV REMOTE",
        "TV REMOTE EMULATION enabled (use the Numpad to send signals)",
    )


@pytest.mark.parametrize(
    "name", ["BATTLE SPACE", "MONSTER MAKER", "KATTOBI ROAD", "FAMILY JOCKEY2", "FAMISTA3"]
)
def test_barcode_boy_games(name):
    choice = select_accessory(name, 1)
    assert choice.accessory is Accessory.BARCODE_BOY
    assert choice.barcodes == barcodes_for(name)
    assert choice.messages == ("Game supports BARCODE BOY! BARCODE BOY plugged in",)


def test_barcode_boy_needs_exact_title():
    assert select_accessory("BATTLE SPACE 2", 1).accessory is None


def test_bardigun():
    choice = select_accessory("BARDIGUN", 1)
    assert choice.accessory is Accessory.BARDIGUN
    assert choice.accessory.handles_hotkeys


@pytest.mark.parametrize("name", ["TELEFANG PW", "BUGSITE ALPHA"])
def test_power_antenna(name):
    choice = select_accessory(name, 1)
    assert choice.accessory is Accessory.POWER_ANTENNA
    assert not choice.accessory.handles_hotkeys


@pytest.mark.parametrize("name", ["ZOKZOK", "G&W GALLERY2", "LAURA", "UNKNOWN GAME"])
def test_single_player_without_accessory(name):
    assert select_accessory(name, 1) == AccessoryChoice(None)


def test_two_consoles_use_link_cable():
    assert select_accessory("POKEMON RED", 2).accessory is Accessory.LINK_CABLE


@pytest.mark.parametrize("count", [3, 4])
def test_three_and_four_consoles(count):
    assert select_accessory("F1 RACE", count).accessory is Accessory.FOUR_PLAYER_ADAPTER
    assert select_accessory("TETRIS", count).accessory is Accessory.TETRIS_HACK
    assert select_accessory("KWIRK", count).accessory is Accessory.KWIRK_HACK
    burger = select_accessory("BURGER TIME", count)
    assert burger.accessory is Accessory.BURGER_TIME_HACK
    assert burger.messages == (
        "Burger Time Deluxe Multiplayer Hack Adapter plugged in",
    )


def test_many_consoles():
    assert select_accessory("FACEBALL 2000", 8).messages == ("RING LINK CABLE plugged in",)
    assert select_accessory("FACEBALL 2000", 8).accessory is Accessory.FACEBALL_RING_CABLE
    assert select_accessory("KWIRK", 16).accessory is Accessory.KWIRK_HACK
    assert select_accessory("TETRIS", 5).accessory is Accessory.TETRIS_HACK
    plain = select_accessory("F1 RACE", 12)
    assert plain.accessory is Accessory.FOUR_PLAYER_ADAPTER_X4
    assert plain.messages == ("4x FOUR PLAYER ADAPTERs are plugged in",)


def test_burger_time_has_no_hack_beyond_four():
    assert select_accessory("BURGER TIME", 6).accessory is Accessory.FOUR_PLAYER_ADAPTER_X4


@pytest.mark.parametrize("count", [0, 17, -1])
def test_console_count_out_of_range(count):
    with pytest.raises(ValueError):
        select_accessory("TETRIS", count)