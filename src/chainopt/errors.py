## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class ChainoptError(Exception):
    """Base class for all errors raised by chainopt."""
    pass

class GrammarSpecError(ChainoptError, ValueError):
    def __init__(self, message, *, spec=None, column=None, token=None):
        super().__init__(message)
        self.spec = spec
        self.column = column
        self.token = token

class ArgvError(ChainoptError, ValueError):
    def __init__(self, message, *, index=None):
        super().__init__(message)
        self.index = index


class CommandLineError(ChainoptError):
    """Raised on request when a parse reported fatal diagnostics."""
    def __init__(self, message: str = "", *, diagnostics=()):
        super().__init__(message)
        self.diagnostics: tuple = tuple(diagnostics)
