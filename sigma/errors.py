
class SigmaError(Exception):
    """ Base class for all Sigma errors"""
    pass

class SigmaSyntaxError(SigmaError):
    """ Raised when the token stream is malformed or incomplete"""

class SigmaUndefinedVariable(SigmaError):
    """ Raised when a symbol lookup exhausts the environment chain"""

class SigmaInvalidIdentifier(SigmaError):
    """ Raised when a name that is not a valid symbol is bound"""

class SigmaInvalidDefinition(SigmaError):
    """ Raised when define is used with the wrong shape"""

class SigmaInvalidLambda(SigmaError):
    """ Raised when lambda is used with the wrong shape"""

class SigmaNotCallable(SigmaError):
    """ Raised when the operator position does not evaluate to a function"""

class SigmaArityError(SigmaError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class SigmaTypeError(SigmaError):
    """ Raised when the types of arguments passed to a function are incorrect"""
