import pytest

from cherrylink.compositor import Picture, ScreenCompositor, ScreenLayout

W, H = 2, 2
PITCH = W * 2
SCREEN = PITCH * H


def frame(value: int) -> bytes:
    return bytes([value]) * SCREEN


def compositor(**kwargs) -> ScreenCompositor:
    return ScreenCompositor(ScreenLayout(**kwargs), width=W, height=H, depth=16)


def rows(picture: Picture) -> list[bytes]:
    return [
        picture.data[i * picture.pitch : (i + 1) * picture.pitch]
        for i in range(picture.height)
    ]


def test_single_console_passes_frame_through():
    comp = compositor(emulated_gbs=1)
    data = bytes(range(SCREEN))
    picture = comp.submit(0, data)
    assert picture == Picture(data, W, H, PITCH)


def test_default_size_is_game_boy_screen():
    comp = ScreenCompositor(ScreenLayout(emulated_gbs=1))
    assert comp.screen_bytes == 160 * 144 * 2


def test_two_players_side_by_side():
    comp = compositor(emulated_gbs=2, show_player_screen=2)
    assert comp.submit(0, frame(1)) is None
    picture = comp.submit(1, frame(2))
    assert (picture.width, picture.height, picture.pitch) == (2 * W, H, 2 * PITCH)
    for line in rows(picture):
        assert line[:PITCH] == frame(1)[:PITCH]
        assert line[PITCH:] == frame(2)[:PITCH]


def test_two_players_top_down():
    comp = compositor(emulated_gbs=2, show_player_screen=2, vertical=True)
    comp.submit(0, frame(1))
    picture = comp.submit(1, frame(2))
    assert (picture.width, picture.height) == (W, 2 * H)
    assert picture.data == frame(1) + frame(2)


def test_switched_screens_swap_players():
    comp = compositor(
        emulated_gbs=2, show_player_screen=2, vertical=True, switched=True
    )
    comp.submit(0, frame(1))
    picture = comp.submit(1, frame(2))
    assert picture.data == frame(2) + frame(1)


def test_four_player_split_grid():
    comp = compositor(emulated_gbs=4, show_player_screen=4, split=True)
    for which in range(3):
        assert comp.submit(which, frame(which + 1)) is None
    picture = comp.submit(3, frame(4))
    assert (picture.width, picture.height) == (2 * W, 2 * H)
    lines = rows(picture)
    assert lines[0] == frame(1)[:PITCH] + frame(2)[:PITCH]
    assert lines[H] == frame(3)[:PITCH] + frame(4)[:PITCH]


def test_five_player_split_uses_three_by_three_grid_with_empty_slots():
    comp = compositor(emulated_gbs=5, show_player_screen=5, split=True)
    picture = None
    for which in range(5):
        picture = comp.submit(which, frame(which + 1))
    assert (picture.width, picture.height) == (3 * W, 3 * H)
    lines = rows(picture)
    assert lines[H][:PITCH] == frame(4)[:PITCH]
    assert lines[H][2 * PITCH :] == bytes(PITCH)
    assert lines[2 * H] == bytes(3 * PITCH)


def test_two_players_split_falls_back_to_columns():
    comp = compositor(emulated_gbs=2, show_player_screen=2, split=True)
    comp.submit(0, frame(1))
    picture = comp.submit(1, frame(2))
    assert (picture.width, picture.height) == (2 * W, H)


def test_single_player_view_emits_chosen_screen():
    comp = compositor(emulated_gbs=3, show_player_screen=1)
    assert comp.submit(0, frame(1)) is None
    assert comp.submit(1, frame(2)) is None
    picture = comp.submit(2, frame(3))
    assert picture.data == frame(2)
    assert (picture.width, picture.height) == (W, H)


def test_two_local_screens_show_pair():
    comp = compositor(
        emulated_gbs=4, show_player_screen=2, number_of_local_screens=2
    )
    assert comp.submit(0, frame(1)) is None
    assert comp.submit(2, frame(3)) is None
    picture = comp.submit(3, frame(4))
    assert (picture.width, picture.height) == (2 * W, H)
    assert rows(picture)[0] == frame(3)[:PITCH] + frame(4)[:PITCH]


def test_wrong_frame_size_rejected():
    comp = compositor(emulated_gbs=2, show_player_screen=2)
    with pytest.raises(ValueError):
        comp.submit(0, bytes(SCREEN - 1))


def test_console_index_out_of_range_rejected():
    comp = compositor(emulated_gbs=2, show_player_screen=2)
    with pytest.raises(ValueError):
        comp.submit(2, frame(0))


def test_layout_rejects_too_many_consoles():
    with pytest.raises(ValueError):
        ScreenLayout(emulated_gbs=17)