"""Composition of several consoles' frames into the picture sent to the display."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 144
MAX_CONSOLES = 16


@dataclass
class ScreenLayout:
    """How the screens of the emulated consoles are arranged on the display."""

    emulated_gbs: int = 1
    number_of_local_screens: int = 1
    show_player_screen: int = 1
    vertical: bool = False
    split: bool = False
    switched: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.emulated_gbs <= MAX_CONSOLES:
            raise ValueError(f"emulated consoles out of range: {self.emulated_gbs}")
        if self.number_of_local_screens < 1:
            raise ValueError(
                f"local screens out of range: {self.number_of_local_screens}"
            )

    @property
    def shows_all_players(self) -> bool:
        return self.show_player_screen == self.emulated_gbs


@dataclass(frozen=True)
class Picture:
    """A finished picture: pixel data, size in pixels and bytes per row."""

    data: bytes
    width: int
    height: int
    pitch: int


def _grid_size(count: int) -> int:
    if count <= 4:
        return 2
    if count <= 9:
        return 3
    return 4


class ScreenCompositor:
    """Collects per-console frames and emits the combined picture once complete.

    Frames are submitted in console order; ``submit`` returns a picture when the
    frame just given completes one, and None otherwise.
    """

    def __init__(
        self,
        layout: ScreenLayout,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        depth: int = 16,
    ) -> None:
        if width <= 0 or height <= 0 or depth <= 0:
            raise ValueError("screen dimensions must be positive")
        self.layout = layout
        self.width = width
        self.height = height
        self.pitch = width * ((depth + 7) // 8)
        self.screen_bytes = self.pitch * height
        self._solo = bytearray(self.screen_bytes)
        self._canvases: dict[tuple[int, int], bytearray] = {}

    def submit(self, which: int, frame: bytes) -> Picture | None:
        """Take the frame of console ``which`` and return a picture if one is due."""
        layout = self.layout
        count = layout.emulated_gbs
        if not 0 <= which < count:
            raise ValueError(f"console index out of range: {which}")
        if len(frame) != self.screen_bytes:
            raise ValueError(
                f"frame holds {len(frame)} bytes, expected {self.screen_bytes}"
            )

        if layout.number_of_local_screens == 1 or layout.shows_all_players:
            if count == 1:
                return Picture(bytes(frame), self.width, self.height, self.pitch)
            if layout.shows_all_players:
                return self._all_players(which, frame)
            return self._single_player(which, frame)

        if layout.number_of_local_screens == 2:
            first = layout.show_player_screen
            if which in (first, first + 1):
                return self._local_pair(which, frame)
        return None

    def _position(self, index: int) -> int:
        if self.layout.switched and 0 <= index < 2:
            return 1 - index
        return index

    def _canvas(self, columns: int, rows: int) -> bytearray:
        key = (columns, rows)
        canvas = self._canvases.get(key)
        if canvas is None:
            canvas = bytearray(self.screen_bytes * columns * rows)
            self._canvases[key] = canvas
        return canvas

    def _blit(
        self, canvas: bytearray, columns: int, column: int, row: int, frame: bytes
    ) -> None:
        source = memoryview(frame)
        target = memoryview(canvas)
        pitch = self.pitch
        first_line = row * self.height
        for line in range(self.height):
            start = ((first_line + line) * columns + column) * pitch
            target[start : start + pitch] = source[line * pitch : (line + 1) * pitch]

    def _emit(self, canvas: bytearray, columns: int, rows: int) -> Picture:
        return Picture(
            bytes(canvas),
            self.width * columns,
            self.height * rows,
            self.pitch * columns,
        )

    def _arrange(
        self, position: int, count: int, frame: bytes, grid: int | None
    ) -> tuple[bytearray, int, int]:
        if grid is not None:
            columns, rows = grid, grid
            row, column = divmod(position, grid)
        elif self.layout.vertical:
            columns, rows = 1, count
            row, column = position, 0
        else:
            columns, rows = count, 1
            row, column = 0, position
        canvas = self._canvas(columns, rows)
        self._blit(canvas, columns, column, row, frame)
        return canvas, columns, rows

    def _all_players(self, which: int, frame: bytes) -> Picture | None:
        count = self.layout.emulated_gbs
        grid = _grid_size(count) if self.layout.split and count >= 3 else None
        canvas, columns, rows = self._arrange(self._position(which), count, frame, grid)
        if which == count - 1:
            return self._emit(canvas, columns, rows)
        return None

    def _single_player(self, which: int, frame: bytes) -> Picture | None:
        if self.layout.show_player_screen == which:
            self._solo[:] = frame
        if which == self.layout.emulated_gbs - 1:
            return Picture(bytes(self._solo), self.width, self.height, self.pitch)
        return None

    def _local_pair(self, which: int, frame: bytes) -> Picture | None:
        first = self.layout.show_player_screen
        canvas, columns, rows = self._arrange(
            self._position(which - first), 2, frame, None
        )
        if which == first + 1:
            return self._emit(canvas, columns, rows)
        return None