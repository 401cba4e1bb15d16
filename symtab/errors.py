class SymtabError(Exception):
    """ Base class for all symbol table errors"""
    pass


class EmptyStringError(SymtabError):
    """ Raised when an empty string is added to a symbol table"""

    def __init__(self, msg: str = "a symbol table cannot contain an empty string"):
        super().__init__(msg)


class AlreadyAddedError(SymtabError):
    """ Raised when a string already has a symbol"""

    def __init__(self, string: str):
        super().__init__(f"failed to add {string!r}: a string is already added")
        self.string = string


class OrdinalLimitExceededError(SymtabError):
    """ Raised when no more ordinals can be issued"""

    def __init__(self, ordinal: int, max_ordinal: int):
        super().__init__(
            f"no more symbols can be issued because the maximum number of symbols "
            f"has been reached (ordinal {ordinal} > {max_ordinal})"
        )
        self.ordinal = ordinal
        self.max_ordinal = max_ordinal


class InvalidFlagsError(SymtabError, ValueError):
    """ Raised when flags do not fit in 16 bits"""
    pass


class InvalidOrdinalError(SymtabError, ValueError):
    """ Raised when an ordinal or ordinal ceiling is out of range"""
    pass
