class CompileError(Exception):
    def __init__(self, message, line=None, text=None):
        self.message = message
        self.line = line
        self.text = text
        prefix = ""
        if line is not None:
            prefix = "line %i: " % line
        super().__init__(prefix + str(message))


class VMError(Exception):
    pass


class FormatError(Exception):
    pass
