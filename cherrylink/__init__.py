"""Multi-Game Boy helpers: CB opcodes, screen compositing, core options, geometry and link accessories."""

__version__ = "0.17.0"