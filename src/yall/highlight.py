"""Pygments lexer for yall source files."""

from pygments.lexer import RegexLexer
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
)


class YallLexer(RegexLexer):
    """Pygments lexer for the yall language."""

    name = "yall"
    aliases = ["yall"]
    filenames = ["*.yall"]
    mimetypes = ["text/x-yall"]

    tokens = {
        "root": [
            (r"\s+", Text),
            (r";.*?$", Comment.Single),
            (r'"', String, "string"),
            # Type annotation suffix (::Name)
            (r"::[A-Za-z0-9_]+", Keyword.Type),
            (r":[^\W_]+", Name.Label),
            (r"[0-9][0-9]*(\.[0-9]*)?", Number),
            (r"[A-Za-z][A-Za-z0-9_]*", Name),
            (r"[*+\-/<>=!$|?^~]+", Operator),
            (r"[{}\[\]()]", Punctuation),
        ],
        # Escapes are kept verbatim, so only \" needs care
        "string": [
            (r"\\.", String.Escape),
            (r'[^"\\]+', String),
            (r'"', String, "#pop"),
        ],
    }
