import logging

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from microlist.core.constants import CREATE_LIST, SET_VALUE, SET_STRING, OUTPUT_LIST, REFERENCE_LIST, HALT, BMASK
from microlist.core.program import Instruction
from microlist.errors import CompileError

log = logging.getLogger(__name__)

# One source line, already stripped. Alternatives are disjoint, so the
# order declaration, reference, string, number needs no priorities.
grammar = r"""
INT: /[+-]?[0-9]+/
KIND: /ml\.?/
STRING: /".*"/
REST: /.+/
_WS: /\s+/

start: line
?line: declaration | reference | string | number

declaration: INT _WS KIND (_WS REST)?
reference: INT "[]"
string: STRING
number: INT
"""

l = Lark(grammar, parser="lalr")


class LineTransformer(Transformer):
    def start(self, node):
        return node[0]

    def declaration(self, node):
        listnum = int(node[0].value)
        if node[1].value == "ml.":
            return Instruction(OUTPUT_LIST, list_id=listnum)
        return Instruction(CREATE_LIST, list_id=listnum)

    def reference(self, node):
        return Instruction(REFERENCE_LIST, ref_id=int(node[0].value))

    def string(self, node):
        # Remove quotes
        return Instruction(SET_STRING, value=node[0].value[1:-1])

    def number(self, node):
        num = int(node[0].value)
        if num < 0 or num > BMASK:
            raise CompileError("value %i out of range (0-%i)" % (num, BMASK))
        return Instruction(SET_VALUE, value=str(num))


lt = LineTransformer()


def parse_line(line):
    """Translates one stripped, non-empty source line into an instruction"""
    try:
        tree = l.parse(line)
    except UnexpectedInput:
        raise CompileError("unknown instruction: %s" % line)
    try:
        return lt.transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, CompileError):
            raise e.orig_exc
        raise


def compile(source):
    """Compiles MicroList source into a list of instructions ending in HALT"""
    instructions = []
    lines = source.split("\n")

    for lineno, line in enumerate(lines, 1):
        clean = line.strip()

        # Skip empty lines and comments
        if clean == "" or clean.startswith("//"):
            continue

        try:
            instructions.append(parse_line(clean))
        except CompileError as e:
            raise CompileError(e.message, line=lineno, text=clean) from None

    instructions.append(Instruction(HALT))
    log.debug("Compiled %i lines into %i instructions", len(lines), len(instructions))
    return instructions
