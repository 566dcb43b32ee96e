"""yall: parser for a small bracket-delimited, Lisp-like language."""

from yall.errors import ErrorKind, ParseError
from yall.parser import parse_program

__version__ = "0.1.0"

__all__ = ["ErrorKind", "ParseError", "__version__", "parse_program"]
