"""System description and output picture geometry for the front end."""

from __future__ import annotations

from dataclasses import dataclass

from .compositor import SCREEN_HEIGHT, SCREEN_WIDTH
from .options import CoreOptions

MAX_CONSOLES = 16
CPU_CLOCK = 4194304.0
CYCLES_PER_FRAME = 70224.0
FPS = CPU_CLOCK / CYCLES_PER_FRAME
SAMPLE_RATE = 44100.0

LIBRARY_NAME = "DoubleCherryGB"
LIBRARY_VERSION = "v0.17.0"
VALID_EXTENSIONS = "gb|dmg|gbc|cgb|sgb"


@dataclass(frozen=True)
class SystemInfo:
    """What the core tells the front end about itself."""

    library_name: str
    library_version: str
    need_fullpath: bool
    valid_extensions: str

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(self.valid_extensions.split("|"))


@dataclass(frozen=True)
class Geometry:
    """Output picture size and timing."""

    base_width: int
    base_height: int
    max_width: int = SCREEN_WIDTH * MAX_CONSOLES
    max_height: int = SCREEN_HEIGHT * MAX_CONSOLES
    fps: float = FPS
    sample_rate: float = SAMPLE_RATE

    @property
    def aspect_ratio(self) -> float:
        return self.base_width / self.base_height


def system_info() -> SystemInfo:
    """The core's name, version and accepted content."""
    return SystemInfo(LIBRARY_NAME, LIBRARY_VERSION, False, VALID_EXTENSIONS)


def _grid(count: int) -> int:
    if count <= 4:
        return 2
    if count <= 9:
        return 3
    return 4


def av_geometry(options: CoreOptions) -> Geometry:
    """The picture size announced when the content is loaded."""
    w, h = SCREEN_WIDTH, SCREEN_HEIGHT
    count = options.emulated_gbs
    local = options.number_of_local_screens

    if options.show_player_screen == count:
        if options.screen_split:
            factor = _grid(count)
            w, h = w * factor, h * factor
        elif options.screen_vertical:
            h *= count
        else:
            w *= count
    elif local > 1:
        if options.screen_split and local > 2:
            factor = _grid(local)
            w, h = w * factor, h * factor
        elif options.screen_vertical:
            h *= local
        else:
            w *= local

    return Geometry(w, h)


def multiplayer_geometry(options: CoreOptions) -> Geometry:
    """The picture size after the core options have been applied.

    A single emulated console always uses one plain screen.
    """
    w, h = SCREEN_WIDTH, SCREEN_HEIGHT
    count = options.emulated_gbs
    local = options.number_of_local_screens

    if count <= 1:
        return Geometry(w, h)

    if options.screen_split and (local == 1 or options.show_player_screen == count):
        factor = _grid(count)
        w, h = w * factor, h * factor
    elif options.show_player_screen == 2 and local == 1:
        if options.screen_vertical:
            h *= count
        else:
            w *= count
    elif local > 1:
        if options.screen_vertical:
            h *= local
        else:
            w *= local

    return Geometry(w, h)