

class RlispError(Exception):
    """ Base class for all rlisp errors"""
    pass

class RlispSyntaxError(RlispError):
    """ Raised when the reader is given malformed text"""

class RlispUnboundSymbol(RlispError):
    """ Raised when a symbol has no binding anywhere in the environment chain"""

class RlispIllegalCall(RlispError):
    """ Raised when something that is not a function is applied"""

class RlispTypeError(RlispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class RlispArityError(RlispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class RlispZeroDivisionError(RlispError):
    """ Raised when a division has a zero divisor"""

class RlispSpecialFormError(RlispError):
    """ Raised when a special form is used with a malformed shape"""

class RlispInvalidSymbol(RlispSpecialFormError):
    """ Raised when a definition form is given something other than a symbol as its name"""
