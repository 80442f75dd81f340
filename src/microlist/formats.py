import struct
import logging

from microlist.core.constants import MAGIC, VERSION, IDMASK, BMASK, MAXVALUE
from microlist.core.program import Instruction
from microlist.errors import FormatError

log = logging.getLogger(__name__)

# Magic, version, instruction count
HEADER = struct.Struct(">5s2BI")
# Opcode, list id, reference id, value length
ENTRY = struct.Struct(">BHHB")


def encode_value(value):
    """Value text as stored, cut to what the length field can describe"""
    return value.encode("utf8", "surrogateescape")[:MAXVALUE]


def pack(instructions):
    """Serializes an instruction sequence into the MLIST container"""
    b = HEADER.pack(MAGIC, VERSION[0], VERSION[1], len(instructions))
    for instr in instructions:
        if not 0 <= instr.opcode <= BMASK:
            raise FormatError("opcode %s does not fit in one byte" % instr.opcode)
        data = encode_value(instr.value)
        b += ENTRY.pack(instr.opcode, instr.list_id & IDMASK, instr.ref_id & IDMASK, len(data))
        b += data
    log.debug("Packed %i instructions into %i bytes", len(instructions), len(b))
    return b


def unpack(b):
    """Restores the instruction sequence from an MLIST container"""
    if len(b) < HEADER.size:
        raise FormatError("truncated header")
    magic, major, minor, count = HEADER.unpack_from(b, 0)
    if magic != MAGIC:
        raise FormatError("bad magic %r" % magic)
    if (major, minor) != VERSION:
        raise FormatError("unsupported version %i.%i" % (major, minor))

    instructions = []
    offset = HEADER.size
    for i in range(count):
        if offset + ENTRY.size > len(b):
            raise FormatError("truncated instruction %i" % i)
        opcode, listid, refid, length = ENTRY.unpack_from(b, offset)
        offset += ENTRY.size
        if offset + length > len(b):
            raise FormatError("truncated value in instruction %i" % i)
        value = b[offset:offset+length].decode("utf8", "surrogateescape")
        offset += length
        instructions.append(Instruction(opcode, list_id=listid, value=value, ref_id=refid))

    if offset != len(b):
        raise FormatError("%i trailing bytes" % (len(b) - offset))
    log.debug("Unpacked %i instructions from %i bytes", len(instructions), len(b))
    return instructions


def isbinary(b):
    return b[:len(MAGIC)] == MAGIC


def write(path, b):
    with open(path, "wb") as f:
        f.write(b)

