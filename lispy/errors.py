class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass

class LispyInvalidSymbol(LispyError):
    """ Raised when a non-symbol is used where a symbol is required"""
    pass

class LispyUnboundSymbol(LispyError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Unbound symbol '{name}'")
        self.name = name

class LispySyntaxError(LispyError):
    """ Raised when the reader meets malformed source text"""

class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispyTypeError(LispyError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class LispyZeroDivision(LispyError):
    """ Raised when a builtin divides by zero"""

class LispyOverflowError(LispyError):
    """ Raised when an integer result leaves the signed 64-bit range"""
