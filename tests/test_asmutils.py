from __future__ import annotations

from microlist.asmutils import disasm
from microlist.compiler import compile
from microlist.core.program import Instruction


def test_disasm_lists_every_instruction():
    text = disasm(compile('1 ml\n"hi"\n7\n2 ml.\n1[]'))
    assert text.splitlines() == [
        "0000\tCREATE_LIST\t1",
        '0001\tSET_STRING\t"hi"',
        "0002\tSET_VALUE\t7",
        "0003\tOUTPUT_LIST\t2",
        "0004\tREFERENCE_LIST\t1",
        "0005\tHALT",
    ]


def test_disasm_unknown_opcode():
    assert disasm([Instruction(99)]) == "0000\t???\t99"


def test_disasm_empty_string_operand_is_quoted():
    assert disasm([Instruction(2, value="")]) == '0000\tSET_STRING\t""'
