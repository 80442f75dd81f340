import sys
import logging
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from microlist.asmutils import disasm
from microlist.core.constants import BOUNDED, SCANMODES
from microlist.errors import CompileError, VMError, FormatError
from microlist.shell import SYNTAX, interactive, load, run_file, compile_file

USAGE = """Usage:
  microlist <source.ml>           - Compile and run
  microlist -c <source.ml>        - Compile to binary
  microlist -d <source.ml>        - Show compiled instructions
  microlist -i                    - Interactive mode

MicroList Syntax Examples:
  1 ml          // Create list 1 (no output)
  "hello"       // Add string to current list
  42            // Add number to current list
  2 ml.         // Create list 2 (with output)
  "world"       // Add string to list 2
  3 ml.         // Create list 3 (with output)
  1[]           // Reference list 1's content

Only 'ml.' lists produce output, 'ml' lists are storage only."""


def parser():
    parser = ArgumentParser(
        prog="microlist",
        description="MicroList compiler and virtual machine",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=SYNTAX,
    )
    parser.add_argument("filename", nargs="?", default=None)
    parser.add_argument("-c", "--compile", default=False, action="store_true",
                        help="compile to a binary container instead of running")
    parser.add_argument("-o", "--out", default=None,
                        help="binary output path, defaults to <source>.mlist")
    parser.add_argument("-d", "--disasm", default=False, action="store_true",
                        help="print the compiled instructions")
    parser.add_argument("-i", "--interactive", default=False, action="store_true")
    parser.add_argument("--scan", default=BOUNDED, choices=SCANMODES,
                        help="which list ids HALT renders")
    parser.add_argument("--debug", default=False, action="store_true")
    return parser


def main(argv=None):
    args = parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    if args.interactive:
        return interactive(scan=args.scan)

    if args.filename is None:
        print("MicroList Compiler v2.0")
        print(USAGE)
        return 0

    try:
        if args.compile:
            dest, size, count = compile_file(args.filename, args.out)
            print("Compiled to binary: %s (%i bytes)" % (dest, size))
            print("Instructions: %i" % count)
        elif args.disasm:
            print(disasm(load(args.filename)))
        else:
            run_file(args.filename, scan=args.scan)
    except OSError as e:
        print("Error reading file: %s" % e, file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print("Error reading file: %s" % e, file=sys.stderr)
        return 1
    except CompileError as e:
        print("Compilation error: %s" % e, file=sys.stderr)
        if e.text is not None:
            print("    %s" % e.text, file=sys.stderr)
        return 1
    except FormatError as e:
        print("Format error: %s" % e, file=sys.stderr)
        return 1
    except VMError as e:
        print("Runtime error: %s" % e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
