class ChaoError(Exception):
    """ Base class for all chao host errors"""
    pass


class ParseError(ChaoError):
    """ Raised when source text cannot be read as an expression

    `position` is the 0-based character offset of the offending input;
    `incomplete` is set when more input could still complete the text.
    """

    def __init__(self, message: str, text: str = "", position: int = 0, incomplete: bool = False):
        self.message = message
        self.text = text
        self.position = position
        self.incomplete = incomplete
        super().__init__(f"{message} at line {self.line}, column {self.column}")

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1


class ChaoUnboundSymbol(ChaoError):
    """ Raised when a name is looked up before it is bound"""


class ChaoScopeError(ChaoError):
    """ Raised when the scope stack would lose its global frame"""


class ChaoTypeError(ChaoError):
    """ Raised when a Python object that is not an expression reaches the engine"""


class ChaoConfigError(ChaoError):
    """ Raised when a configuration value is invalid"""
