from symbelix.reader.parser import lex, read, TokenStream
from symbelix.reader.printer import render, show

__all__ = ["lex", "read", "TokenStream", "render", "show"]
