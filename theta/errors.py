from __future__ import annotations


class ThetaError(Exception):
    """ Base class for all Theta errors"""
    kind = "Error"


class ThetaSyntaxError(ThetaError):
    """ Raised when the source text cannot be parsed"""
    kind = "ParseError"

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ThetaTokenError(ThetaSyntaxError):
    """ Raised when the source text cannot be split into tokens"""
    kind = "Tokenization Error"


class ThetaRuntimeError(ThetaError):
    """ Base class for errors raised while evaluating a program"""
    kind = "RuntimeError"


class ThetaUnboundSymbol(ThetaRuntimeError):
    """ Raised when an identifier is used before it is bound"""


class ThetaNotCallable(ThetaRuntimeError):
    """ Raised when the operator of a call is not a callable value"""


class ThetaArityError(ThetaRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class ThetaTypeError(ThetaRuntimeError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class ThetaNotPrintable(ThetaTypeError):
    """ Raised when Unit or a callable is converted to a string"""


class ThetaOverflowError(ThetaRuntimeError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""


class ThetaDefinitionError(ThetaRuntimeError):
    """ Raised when a definition form is malformed or used below the top level"""


class ThetaInputError(ThetaRuntimeError):
    """ Raised when readline finds no more input"""


class ThetaRecursionError(ThetaRuntimeError):
    """ Raised when evaluation nests deeper than the Python stack allows"""


class ThetaInternalError(ThetaRuntimeError):
    """ Raised when a node reaches the evaluator that its caller should have handled"""
