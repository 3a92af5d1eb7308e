"""Barcode sets for the games that talk to the Barcode Boy reader."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Barcode:
    """A scannable code and the name of what it unlocks."""

    code: str
    name: str


def _pairs(*items: tuple[str, str]) -> tuple[Barcode, ...]:
    return tuple(Barcode(code, name) for code, name in items)


_BARCODES: dict[str, tuple[Barcode, ...]] = {
    "BATTLE SPACE": _pairs(
        ("4907981000301", "Berserker"),
        ("4908052808369", "Valkyrie"),
        ("4916911302309", "Grizzly Bear"),
        ("4902776809367", "Magic Soldier"),
        ("4905672306367", "Knight"),
        ("4912713004366", "Wraith"),
        ("4913508504399", "Shaman"),
        ("4918156001351", "Thier"),
        ("4911826551347", "Sorcerer"),
        ("4909062206350", "Warrior"),
    ),
    "MONSTER MAKER": _pairs(
        ("9998017308336", "Archer Lorian"),
        ("9447410810323", "Archer Elysice"),
        ("9052091324955", "Knight Lauren"),
        ("9322158686716", "Dragon Knight Haagun"),
        ("9752412234900", "Warrior Diane"),
        ("9362462085911", "Warrior Tamron"),
    ),
    "KATTOBI ROAD": _pairs(
        ("4902105002063", "Truck"),
        ("4901121110004", "Sedan"),
        ("4903301160625", "Racecar"),
        ("4902888119101", "Japanese Street Car"),
        ("4901780161157", "4x4 Jeep"),
        ("4987084410924", "F1-style racecar"),
    ),
    "FAMISTA3": _pairs(
        ("8357933639923", "Home-Run Batter"),
        ("7814374127798", "Senior Batter"),
        ("9880692151263", "Swift Batter"),
        ("1414213562177", "Pitcher"),
    ),
    "FAMILY JOCKEY2": _pairs(
        ("5893713522816", "A1"),
        ("2378649896765", "A2"),
        ("9845554422318", "A4"),
        ("1509843019075", "B1"),
        ("4232978865152", "B2"),
        ("3572821107673", "B4"),
        ("7164625542390", "C3"),
        ("6319537443513", "C5"),
    ),
}

SUPPORTED_CARTS: tuple[str, ...] = tuple(_BARCODES)


def barcodes_for(name: str) -> tuple[Barcode, ...]:
    """The barcodes a cartridge with header title ``name`` accepts.

    Raises KeyError when the cartridge does not use the Barcode Boy.
    """
    try:
        return _BARCODES[name]
    except KeyError:
        raise KeyError(f"no Barcode Boy codes for cartridge {name!r}") from None