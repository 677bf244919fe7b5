# regex_engine/errors.py


class RegexEngineError(Exception):
    """Base class for everything the regex engine raises."""
    pass


class RegexSyntaxException(RegexEngineError):
    def __init__(self, message, index):
        super().__init__(f"{message} at index {index}")
        self.message = message
        self.index = index


class RegexDepthError(RegexEngineError):
    """Pattern nests deeper than the engine is allowed to recurse."""
    def __init__(self, message, index=None):
        super().__init__(message)
        self.message = message
        self.index = index


class MalformedTreeError(RegexEngineError):
    """Expression tree that the parser could never have produced."""
    pass
