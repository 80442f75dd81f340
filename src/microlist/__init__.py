"""
MicroList - compiler and virtual machine for a tiny list language

Source lines declare numbered byte lists (ml / ml.), append numbers and
strings to the current list, or copy another list's contents into it.
The compiler turns source into instructions, the VM executes them and
renders output lists at HALT, and formats reads and writes the binary
MLIST container.
"""

from microlist.compiler import compile
from microlist.core.program import Instruction, MicroList
from microlist.core.vm import VM
from microlist.errors import CompileError, VMError, FormatError

__version__ = "2.0.0"

__all__ = [
    "CompileError",
    "FormatError",
    "Instruction",
    "MicroList",
    "VM",
    "VMError",
    "compile",
]
