from stylegen.errors import ParseError
from stylegen.parser.transformer import parse_style

__all__ = ["ParseError", "parse_style"]
