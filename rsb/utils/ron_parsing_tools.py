"""
RON Parsing Tools

Reader for Rusty Object Notation (RON) data files.

Produces plain Python containers so RON input can share the resume decoder used
for JSON5 and YAML:
- Structs `Name(field: value)` and anonymous structs `(field: value)` -> dict
  (the struct name is dropped)
- Tuples `(a, b)` and lists `[a, b]` -> list
- Maps `{"key": value}` -> dict
- `Some(x)` -> x, `None` and unit `()` -> None
- Unit enum variants `Variant` -> "Variant"
- Strings, raw strings, chars, integers, floats, booleans

Comments (`//` and nestable `/* */`), trailing commas and leading `#![enable(...)]`
attributes are accepted.
"""

import re
from typing import Any, Dict, List, Tuple

IDENT_REGEX = re.compile(r"(?:r#)?[A-Za-z_][A-Za-z0-9_]*")
NUMBER_REGEX = re.compile(
    r"[+-]?(?:"
    r"0x[0-9A-Fa-f_]+|0o[0-7_]+|0b[01_]+"
    r"|inf|NaN"
    r"|(?:[0-9][0-9_]*)?\.?[0-9][0-9_]*(?:[eE][+-]?[0-9_]+)?"
    r")"
)
ATTRIBUTE_REGEX = re.compile(r"#!\[[^\]]*\]")
RAW_STRING_START_REGEX = re.compile(r'r(#*)"')

SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "b": "\b",
    "f": "\f",
    "/": "/",
}


class RonSyntaxError(ValueError):
    """
    Exception raised when RON text cannot be parsed.

    Attributes:
        line: 1-indexed line of the failure
        column: 1-indexed column of the failure
    """

    def __init__(self, message: str, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line} column {column}")


def parse_ron(text: str) -> Any:
    """
    Parse a RON document into Python containers.

    Args:
        text: RON source

    Returns:
        Parsed value (dict for a top-level struct)

    Raises:
        RonSyntaxError: If text is not valid RON

    Example:
        parse_ron('Resume(basics: (name: Some("Ada")))')
        # {'basics': {'name': 'Ada'}}
    """
    reader = _RonReader(text)
    reader.skip_attributes()
    value = reader.parse_value()
    reader.skip_whitespace()
    if not reader.at_end():
        reader.fail("Unexpected trailing content")
    return value


class _RonReader:
    """Recursive descent reader over a RON string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # Position helpers

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def location(self) -> Tuple[int, int]:
        consumed = self.text[: self.pos]
        line = consumed.count("\n") + 1
        column = self.pos - (consumed.rfind("\n") + 1) + 1
        return line, column

    def fail(self, message: str) -> None:
        line, column = self.location()
        raise RonSyntaxError(message, line, column)

    def expect(self, char: str) -> None:
        self.skip_whitespace()
        if self.peek() != char:
            found = repr(self.peek()) if not self.at_end() else "end of input"
            self.fail(f"Expected '{char}', found {found}")
        self.pos += 1

    def skip_whitespace(self) -> None:
        while not self.at_end():
            char = self.peek()
            if char.isspace():
                self.pos += 1
            elif self.text.startswith("//", self.pos):
                newline = self.text.find("\n", self.pos)
                self.pos = len(self.text) if newline == -1 else newline + 1
            elif self.text.startswith("/*", self.pos):
                self._skip_block_comment()
            else:
                break

    def _skip_block_comment(self) -> None:
        depth = 0
        while not self.at_end():
            if self.text.startswith("/*", self.pos):
                depth += 1
                self.pos += 2
            elif self.text.startswith("*/", self.pos):
                depth -= 1
                self.pos += 2
                if depth == 0:
                    return
            else:
                self.pos += 1
        self.fail("Unterminated block comment")

    def skip_attributes(self) -> None:
        self.skip_whitespace()
        while True:
            match = ATTRIBUTE_REGEX.match(self.text, self.pos)
            if match is None:
                return
            self.pos = match.end()
            self.skip_whitespace()

    # Values

    def parse_value(self) -> Any:
        self.skip_whitespace()
        char = self.peek()

        if char == "":
            self.fail("Unexpected end of input")
        if char == "(":
            return self._parse_parenthesized()
        if char == "[":
            return self._parse_list()
        if char == "{":
            return self._parse_map()
        if char == '"':
            return self._parse_string()
        if char == "r":
            # r"..." / r#"..."#; anything else starting with r is an identifier
            raw = self._try_parse_raw_string()
            if raw is not None:
                return raw
        if char == "'":
            return self._parse_char()
        if char.isdigit() or char in "+-." or self.text.startswith(("inf", "NaN"), self.pos):
            number = self._try_parse_number()
            if number is not None:
                return number
        if IDENT_REGEX.match(self.text, self.pos):
            return self._parse_identifier_value()

        self.fail(f"Unexpected character {char!r}")

    def _parse_identifier_value(self) -> Any:
        name = self._parse_identifier()

        if name == "true":
            return True
        if name == "false":
            return False
        if name == "None":
            return None

        self.skip_whitespace()
        if name == "Some" and self.peek() == "(":
            self.pos += 1
            value = self.parse_value()
            self.skip_whitespace()
            if self.peek() == ",":
                self.pos += 1
            self.expect(")")
            return value

        if self.peek() == "(":
            # Named struct, tuple struct or enum variant with data
            return self._parse_parenthesized()

        return name

    def _parse_identifier(self) -> str:
        match = IDENT_REGEX.match(self.text, self.pos)
        if match is None:
            self.fail("Expected identifier")
        self.pos = match.end()
        return match.group(0).removeprefix("r#")

    def _parse_parenthesized(self) -> Any:
        self.expect("(")
        self.skip_whitespace()

        if self.peek() == ")":
            self.pos += 1
            return None

        if self._at_struct_field():
            return self._parse_struct_fields()

        items = self._parse_sequence(")")
        return items[0] if len(items) == 1 else items

    def _at_struct_field(self) -> bool:
        match = IDENT_REGEX.match(self.text, self.pos)
        if match is None:
            return False
        saved = self.pos
        self.pos = match.end()
        self.skip_whitespace()
        is_field = self.peek() == ":" and self.peek(1) != ":"
        self.pos = saved
        return is_field

    def _parse_struct_fields(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        while True:
            self.skip_whitespace()
            if self.peek() == ")":
                self.pos += 1
                return result

            key = self._parse_identifier()
            if key in result:
                self.fail(f"Duplicate field '{key}'")
            self.expect(":")
            result[key] = self.parse_value()

            self.skip_whitespace()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != ")":
                self.fail("Expected ',' or ')' after struct field")

    def _parse_list(self) -> List[Any]:
        self.expect("[")
        return self._parse_sequence("]")

    def _parse_sequence(self, closing: str) -> List[Any]:
        items = []
        while True:
            self.skip_whitespace()
            if self.peek() == closing:
                self.pos += 1
                return items

            items.append(self.parse_value())

            self.skip_whitespace()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != closing:
                self.fail(f"Expected ',' or '{closing}'")

    def _parse_map(self) -> Dict[Any, Any]:
        self.expect("{")
        result: Dict[Any, Any] = {}
        while True:
            self.skip_whitespace()
            if self.peek() == "}":
                self.pos += 1
                return result

            key = self.parse_value()
            if isinstance(key, (list, dict)):
                self.fail("Map keys must be scalar values")
            self.expect(":")
            result[key] = self.parse_value()

            self.skip_whitespace()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != "}":
                self.fail("Expected ',' or '}' after map entry")

    # Scalars

    def _parse_string(self) -> str:
        self.pos += 1  # opening quote
        chars = []
        while True:
            if self.at_end():
                self.fail("Unterminated string")
            char = self.peek()
            if char == '"':
                self.pos += 1
                return "".join(chars)
            if char == "\\":
                chars.append(self._parse_escape())
            else:
                chars.append(char)
                self.pos += 1

    def _try_parse_raw_string(self):
        match = RAW_STRING_START_REGEX.match(self.text, self.pos)
        if match is None:
            return None
        terminator = '"' + match.group(1)
        end = self.text.find(terminator, match.end())
        if end == -1:
            self.fail("Unterminated raw string")
        self.pos = end + len(terminator)
        return self.text[match.end():end]

    def _parse_char(self) -> str:
        self.pos += 1  # opening quote
        if self.peek() == "\\":
            value = self._parse_escape()
        else:
            value = self.peek()
            self.pos += 1
        if self.peek() != "'":
            self.fail("Expected closing quote of char literal")
        self.pos += 1
        return value

    def _parse_escape(self) -> str:
        self.pos += 1  # backslash
        code = self.peek()
        if code in SIMPLE_ESCAPES:
            self.pos += 1
            return SIMPLE_ESCAPES[code]
        if code == "u" and self.peek(1) == "{":
            end = self.text.find("}", self.pos)
            if end == -1:
                self.fail("Unterminated unicode escape")
            digits = self.text[self.pos + 2:end]
            self.pos = end + 1
            return self._code_point(digits)
        if code == "u":
            digits = self.text[self.pos + 1:self.pos + 5]
            self.pos += 5
            return self._code_point(digits)
        if code == "x":
            digits = self.text[self.pos + 1:self.pos + 3]
            self.pos += 3
            return self._code_point(digits)
        self.fail(f"Unknown escape sequence '\\{code}'")

    def _code_point(self, digits: str) -> str:
        try:
            return chr(int(digits, 16))
        except ValueError:
            self.fail(f"Invalid escape digits '{digits}'")

    def _try_parse_number(self):
        match = NUMBER_REGEX.match(self.text, self.pos)
        if match is None or match.group(0) in ("", "+", "-"):
            return None
        literal = match.group(0)
        self.pos = match.end()

        cleaned = literal.replace("_", "")
        unsigned = cleaned.lstrip("+-")
        try:
            if unsigned.startswith(("0x", "0o", "0b")):
                return int(cleaned, 0)
            if unsigned in ("inf", "NaN") or any(c in unsigned for c in ".eE"):
                return float(cleaned)
            return int(cleaned)
        except ValueError:
            self.fail(f"Invalid number '{literal}'")
