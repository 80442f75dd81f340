import sys
import logging

from microlist.core.constants import *
from microlist.core.program import declare
from microlist.errors import VMError
from microlist.formats import pack
from microlist.utils import stringToBytes, render

log = logging.getLogger(__name__)


class VM:
    """Executes MicroList instructions against a set of numbered lists"""

    def __init__(self, out=None, scan=BOUNDED):
        if scan not in SCANMODES:
            raise ValueError("unknown scan mode %s" % scan)
        self.out = out
        self.scan = scan
        self.lists = {}
        self.instructions = []
        self.pc = 0
        self.status = READY

    def load_program(self, instructions):
        self.instructions = list(instructions)
        self.lists = {}
        self.pc = 0
        self.status = READY

    def execute(self):
        """Runs the loaded program from the start until HALT, an error or the end of code"""
        self.lists = {}
        self.pc = 0
        self.status = RUNNING
        current = None

        while self.pc < len(self.instructions):
            instr = self.instructions[self.pc]
            if log.isEnabledFor(logging.DEBUG):
                log.debug("%04i %s", self.pc, INSTR[instr.opcode] if 0 <= instr.opcode < len(INSTR) else instr.opcode)

            try:
                current = self.step(instr, current)
            except VMError:
                self.status = FAILED
                log.debug("Failed at %i", self.pc)
                raise

            if self.status == HALTED:
                self.output()
                log.debug("Halted at %i with %i lists", self.pc, len(self.lists))
                return
            self.pc += 1

        # Ran out of code without HALT, nothing is rendered
        self.status = EXHAUSTED
        log.debug("Reached end of code without HALT")

    def step(self, instr, current):
        """Executes one instruction and returns the list that is current afterwards"""
        op = instr.opcode
        if op == CREATE_LIST or op == OUTPUT_LIST:
            current = declare(instr)
            self.lists[instr.list_id] = current
        elif op == SET_VALUE:
            if current is None:
                raise VMError("no current list to add value to")
            try:
                value = int(instr.value)
            except ValueError:
                raise VMError("invalid value: %s" % instr.value)
            current.values.append(value & BMASK)
        elif op == SET_STRING:
            if current is None:
                raise VMError("no current list to add string to")
            current.values.extend(stringToBytes(instr.value))
        elif op == REFERENCE_LIST:
            if instr.ref_id not in self.lists:
                raise VMError("referenced list %i does not exist" % instr.ref_id)
            # Unreachable once any list exists, the cursor is never unbound
            if current is None:
                raise VMError("no current list to add reference to")
            # Replace, don't append. The copy never aliases the source
            current.values = bytearray(self.lists[instr.ref_id].values)
        elif op == HALT:
            self.status = HALTED
        else:
            raise VMError("unknown opcode: %s" % op)
        return current

    def output_ids(self):
        """List ids visited at HALT, in ascending order"""
        if self.scan == REGISTERED:
            return sorted(self.lists)
        return range(1, len(self.lists) + SCANSLACK + 1)

    def output(self):
        out = self.out if self.out is not None else sys.stdout
        for listid in self.output_ids():
            ml = self.lists.get(listid)
            if ml is not None and ml.can_output:
                out.write(render(ml.values) + "\n")
        out.flush()

    def serialize_to_binary(self):
        return pack(self.instructions)
