# cherrylink

cherrylink holds building blocks for a Game Boy emulator front end. The front
end can run up to sixteen Game Boys side by side and connect them through
link-cable accessories. The package has no dependencies beyond the standard
library.

## What is inside

- `cherrylink.cb_ops` covers the CB-prefixed instruction set: BIT, SET, RES,
  RLC, RRC, RL, RR, SLA, SRA, SWAP and SRL.
  - `execute_cb(regs, opcode, memory)` runs one opcode on a `Registers` value.
  - It uses `memory` for the `(HL)` operand forms.
  - It returns the cycle count: 8, 12 or 16.
- `cherrylink.compositor` joins the frames of several Game Boys into one
  picture.
  - `ScreenLayout` describes the arrangement: side by side, top to bottom, or a
    split-screen grid. It can also swap the first two screens, or show a
    single player.
  - `ScreenCompositor.submit(which, frame)` takes each console's frame in
    turn. When the frame completes a picture, it returns a `Picture` with the
    data, width, height and pitch. Otherwise it returns `None`.
- `cherrylink.optiondefs` gives the option definitions offered for a given
  number of consoles.
  - `option_definitions(emulated_gbs)` returns a tuple of `OptionDefinition`.
  - Each `OptionDefinition` has `choices()`, `default` and `declaration`.
- `cherrylink.options` holds the selected settings.
  - `CoreOptions.apply(variables)` reads a mapping of option keys to values.
  - It returns the variables that should be written back, such as an adjusted
    `dcgb_audio_output`.
  - The console count and link cable setting are taken only on the first call.
  - `CoreOptions.layout()` builds the matching `ScreenLayout`.
- `cherrylink.geometry` describes the core and its output.
  - `system_info()` returns a `SystemInfo` with the core name, version and
    accepted extensions.
  - `av_geometry(options)` and `multiplayer_geometry(options)` return a
    `Geometry` with the output size, aspect ratio, frame rate and sample rate.
- `cherrylink.barcodes` lists the Barcode Boy cards of each supported game.
  - `barcodes_for(name)` returns them as `Barcode` values.
  - It raises `KeyError` for other games.
- `cherrylink.pokemon_text` covers the character table of the first-generation
  Pokémon games.
  - `ascii_to_table` and `table_to_ascii` convert single characters.
  - `encode_name` and `decode_name` convert whole names.
  - `uint24_to_bytes` and `uint16_to_bytes` give big-endian byte forms.
- `cherrylink.accessories` picks the accessory for a cartridge.
  - `cart_name(rom)` reads the title from a ROM header.
  - `select_accessory(name, emulated_gbs, auto_random_tv_remote)` returns an
    `AccessoryChoice`. It holds the chosen `Accessory`, the messages to show
    the player, and the barcodes for Barcode Boy games.

## Example

```python
from cherrylink.accessories import Accessory, cart_name, select_accessory
from cherrylink.compositor import ScreenCompositor, ScreenLayout

rom = bytearray(0x8000)
rom[0x134:0x134 + 6] = b"TETRIS"
choice = select_accessory(cart_name(bytes(rom)), 4)
assert choice.accessory is Accessory.TETRIS_HACK

compositor = ScreenCompositor(ScreenLayout(emulated_gbs=2, show_player_screen=2))
blank = bytes(compositor.screen_bytes)
assert compositor.submit(0, blank) is None
picture = compositor.submit(1, blank)
assert (picture.width, picture.height) == (320, 144)
```

## What it does not do

The package emulates no complete Game Boy. It has only the CB instruction
group, with no other CPU instructions, memory map, graphics or sound. It also
has none of the following:

- pixel colour conversion;
- joypad reading;
- a real-time clock;
- hotkey handling.

It opens no window, plays no audio, and has no command to start. Accessories
are only chosen, not run: there is no link-cable traffic.

## Running the tests

```
pip install -e ".[test]"
pytest
```