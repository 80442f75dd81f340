from microlist.core.constants import BMASK, PRINTMIN, PRINTMAX
from microlist.errors import VMError


def stringToBytes(text):
    """Converts string literal content to byte values, no escape processing"""
    new = []
    for c in text:
        # Only the upper bound is checked
        if ord(c) > BMASK:
            raise VMError("character %s out of 8-bit range" % c)
        new.append(ord(c))
    return new


def render(values):
    """Renders printable ASCII as characters and every other byte as [N]"""
    out = ""
    for value in values:
        if PRINTMIN <= value <= PRINTMAX:
            out += chr(value)
        else:
            out += "[%i]" % value
    return out


def outpath(path, extension, source_extension):
    """Replaces a trailing source extension with the binary one"""
    if path.endswith(source_extension):
        path = path[:-len(source_extension)]
    return path + extension
