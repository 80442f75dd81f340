from microlist.core.constants import INSTR, SET_VALUE, SET_STRING, REFERENCE_LIST
from microlist.core.program import is_declaration


def operand(instr):
    if is_declaration(instr):
        return str(instr.list_id)
    elif instr.opcode == SET_VALUE:
        return instr.value
    elif instr.opcode == SET_STRING:
        return '"%s"' % instr.value
    elif instr.opcode == REFERENCE_LIST:
        return str(instr.ref_id)
    return ""


def disasm(instructions):
    """Lists an instruction sequence, one instruction per line"""
    result = []
    for index, instr in enumerate(instructions):
        if 0 <= instr.opcode < len(INSTR):
            name = INSTR[instr.opcode]
        else:
            name = "???"
            result.append("%04i\t%s\t%i" % (index, name, instr.opcode))
            continue
        arg = operand(instr)
        if arg:
            result.append("%04i\t%s\t%s" % (index, name, arg))
        else:
            result.append("%04i\t%s" % (index, name))
    return "\n".join(result)
