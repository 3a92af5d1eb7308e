"""The CB-prefixed bit, rotate and shift instructions of the Game Boy CPU."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from dataclasses import dataclass, fields

Z_FLAG = 0x40
H_FLAG = 0x10
N_FLAG = 0x02
C_FLAG = 0x01

# Operand order encoded in the low three bits of a CB opcode; None means (HL).
_TARGETS: tuple[str | None, ...] = ("b", "c", "d", "e", "h", "l", None, "a")

REGISTER_CYCLES = 8
BIT_HL_CYCLES = 12
MODIFY_HL_CYCLES = 16


@dataclass
class Registers:
    """The 8-bit register file touched by CB instructions."""

    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"register {field.name} out of range: {value}")

    def hl(self) -> int:
        """The 16-bit address held in the H and L pair."""
        return (self.h << 8) | self.l


def _zero(value: int) -> int:
    return Z_FLAG if value == 0 else 0


def _rlc(value: int, flags: int) -> tuple[int, int]:
    carry = value >> 7
    result = ((value << 1) | carry) & 0xFF
    return result, carry | _zero(result)


def _rrc(value: int, flags: int) -> tuple[int, int]:
    carry = value & 0x01
    result = (value >> 1) | (carry << 7)
    return result, carry | _zero(result)


def _rl(value: int, flags: int) -> tuple[int, int]:
    carry = value >> 7
    result = ((value << 1) | (flags & C_FLAG)) & 0xFF
    return result, carry | _zero(result)


def _rr(value: int, flags: int) -> tuple[int, int]:
    carry = value & 0x01
    result = (value >> 1) | ((flags & C_FLAG) << 7)
    return result, carry | _zero(result)


def _sla(value: int, flags: int) -> tuple[int, int]:
    carry = value >> 7
    result = (value << 1) & 0xFF
    return result, carry | _zero(result)


def _sra(value: int, flags: int) -> tuple[int, int]:
    carry = value & 0x01
    result = (value >> 1) | (value & 0x80)
    return result, carry | _zero(result)


def _swap(value: int, flags: int) -> tuple[int, int]:
    result = ((value >> 4) | (value << 4)) & 0xFF
    return result, _zero(result)


def _srl(value: int, flags: int) -> tuple[int, int]:
    carry = value & 0x01
    result = value >> 1
    return result, carry | _zero(result)


_SHIFTS: tuple[Callable[[int, int], tuple[int, int]], ...] = (
    _rlc,
    _rrc,
    _rl,
    _rr,
    _sla,
    _sra,
    _swap,
    _srl,
)


def execute_cb(regs: Registers, opcode: int, memory: MutableSequence[int]) -> int:
    """Execute the CB-prefixed ``opcode`` and return the cycles it took.

    ``memory`` is indexed by address and is used for the (HL) operand forms.
    """
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"CB opcode out of range: {opcode}")

    slot = _TARGETS[opcode & 0x07]
    group = opcode >> 6
    bit = (opcode >> 3) & 0x07

    if slot is None:
        address = regs.hl()
        value = memory[address] & 0xFF
    else:
        value = getattr(regs, slot)

    if group == 1:
        tested = Z_FLAG if not (value >> bit) & 1 else 0
        regs.f = (regs.f & C_FLAG) | H_FLAG | tested
        return BIT_HL_CYCLES if slot is None else REGISTER_CYCLES

    if group == 2:
        result = value & ~(1 << bit) & 0xFF
    elif group == 3:
        result = value | (1 << bit)
    else:
        result, regs.f = _SHIFTS[bit](value, regs.f)

    if slot is None:
        memory[address] = result
        return MODIFY_HL_CYCLES
    setattr(regs, slot, result)
    return REGISTER_CYCLES