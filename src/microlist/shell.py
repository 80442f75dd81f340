import sys
import logging

from microlist.compiler import compile
from microlist.core.constants import BOUNDED, EXTENSION, SOURCE_EXTENSION
from microlist.core.vm import VM
from microlist.errors import CompileError, VMError
from microlist.formats import isbinary, unpack, write
from microlist.utils import outpath

log = logging.getLogger(__name__)

SYNTAX = """MicroList Syntax:
  NUM ml        - Create storage list
  NUM ml.       - Create output list
  "text"        - Add string to current list
  123           - Add number (0-255) to current list
  NUM[]         - Reference another list's content
  // comment    - Comment line"""

BANNER = """MicroList Interactive Mode v2.0
Enter your code line by line.
Commands: 'run' to execute, 'clear' to reset, 'help' for syntax, 'quit' to exit
"""

PROMPT = "ML> "


def readfile(path):
    # Raw bytes, so only \n splits lines on every path
    with open(path, "rb") as f:
        return f.read()


def load(path):
    """Reads a source file or a compiled container and returns its instructions"""
    data = readfile(path)
    if isbinary(data):
        log.debug("%s is a compiled container", path)
        return unpack(data)
    return compile(data.decode("utf8"))


def run_file(path, out=None, scan=BOUNDED):
    vm = VM(out=out, scan=scan)
    vm.load_program(load(path))
    vm.execute()
    return vm


def compile_file(path, dest=None):
    """Compiles a source file to a binary container, returns the path and size written"""
    vm = VM()
    vm.load_program(compile(readfile(path).decode("utf8")))
    binary = vm.serialize_to_binary()
    if dest is None:
        dest = outpath(path, EXTENSION, SOURCE_EXTENSION)
    write(dest, binary)
    log.debug("Wrote %i bytes to %s", len(binary), dest)
    return dest, len(binary), len(vm.instructions)


def interactive(stdin=None, stdout=None, scan=BOUNDED):
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    def say(text=""):
        stdout.write(text + "\n")

    say(BANNER)
    lines = []

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        raw = stdin.readline()
        if raw == "":
            break
        line = raw.strip()

        if line in ("quit", "exit"):
            break
        elif line == "run":
            try:
                instructions = compile("\n".join(lines))
            except CompileError as e:
                say("Compilation error: %s" % e)
                continue
            vm = VM(out=stdout, scan=scan)
            vm.load_program(instructions)
            try:
                vm.execute()
            except VMError as e:
                say("Runtime error: %s" % e)
            say()
        elif line == "clear":
            lines = []
            say("Source cleared.")
        elif line == "help":
            say(SYNTAX)
        else:
            lines.append(line)
            say("    [%i lines entered]" % len(lines))

    return 0
