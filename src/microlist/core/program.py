from dataclasses import dataclass, field

from microlist.core.constants import CREATE_LIST, OUTPUT_LIST


@dataclass(frozen=True)
class Instruction:
    """A single VM instruction. Fields an opcode does not use stay at their defaults"""
    opcode: int
    list_id: int = 0
    value: str = ""
    ref_id: int = 0


@dataclass
class MicroList:
    """A numbered list of 8 bit values. Only lists declared with ml. are rendered"""
    id: int
    can_output: bool = False
    values: bytearray = field(default_factory=bytearray)


def declare(instr):
    """Creates the empty list an ml/ml. instruction declares"""
    return MicroList(instr.list_id, can_output=instr.opcode == OUTPUT_LIST)


def is_declaration(instr):
    return instr.opcode in (CREATE_LIST, OUTPUT_LIST)

