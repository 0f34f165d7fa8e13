
class CalcError(Exception):
    """ Base class for all typedcalc errors"""
    pass

class CalcInvalidSymbol(CalcError):
    """ Raised when something that is not a name is used as a symbol"""
    pass

class CalcUnboundSymbol(CalcError):
    """ Raised when a symbol is used before it is bound"""
    pass

class CalcSyntaxError(CalcError):
    """ Raised when a lambda or delay form has the wrong shape"""

class CalcArityError(CalcError):
    """ Raised when a callable is invoked with, or leaves, the wrong number of values"""

class CalcTypeError(CalcError):
    """ Raised when a value does not carry the type a callable expects"""

class CalcStackError(CalcError):
    """ Raised on operand stack underflow or a built-in breaking its stack contract"""

class CalcRecursionError(CalcError):
    """ Raised when nested calls exceed the configured call depth"""
