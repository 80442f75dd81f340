from microlist.compiler.compiler import compile, parse_line

__all__ = ["compile", "parse_line"]
