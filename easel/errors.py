

class EaselError(Exception):
    """ Base class for all Easel errors"""
    pass

class EaselLookupError(EaselError, LookupError):
    """ Raised when an identifier, struct or property is not found"""
    pass

class EaselTypeError(EaselError, TypeError):
    """ Raised when a value is used in a way its type does not support"""

class EaselArityError(EaselTypeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class UnknownNodeError(EaselError):
    """ Raised when an AST node, or one of its fields, has an unrecognized shape"""

class EaselReturnError(EaselError):
    """ Raised when a return statement runs outside of any function body"""

class EaselSyntaxError(EaselError):
    """ Raised when a serialized program cannot be read as a list of nodes"""

class EaselRecursionError(EaselError, RecursionError):
    """ Raised when calls nest deeper than the configured recursion limit"""
