"""Parse ENVI .hdr text: tokenize key = value lines, convert values per field registry, check required fields."""

import logging
from typing import Any, Dict

from .fields import REQUIRED_FIELDS, FieldDescriptor, lookup_field
from .models import Header

logger = logging.getLogger(__name__)

SENTINEL = "ENVI"


class HeaderParser:
    """Turn header text into a Header; problems are reported (unless quiet), never raised."""

    def __init__(self, quiet: bool = True):
        self.quiet = quiet

    def _warn(self, msg: str, *args, exc_info: bool = False):
        if not self.quiet:
            logger.warning(msg, *args, exc_info=exc_info)

    def parse(self, text: str) -> Header:
        """Tokenize, interpret and check text; return the resulting Header."""
        raw = self.parse_text(text)
        values = self.interpret(raw)
        self.check(values)
        return Header(raw, values, self.quiet)

    def parse_text(self, text: str) -> Dict[str, str]:
        """Split text into raw key/value strings; brace values may span several lines."""
        result = {}
        key, value, multi = None, None, False
        for line in text.splitlines():
            line = line.strip()
            if line == SENTINEL:
                continue
            if multi:
                value += "\n" + line
                if line.endswith("}"):
                    result[key] = value
                    key, value, multi = None, None, False
                continue
            if "=" in line:
                key_part, value_part = line.split("=", 1)
                key, value = key_part.strip(), value_part.strip()
                multi = value.startswith("{") and not value.endswith("}")
                if not multi:
                    result[key] = value
                    key, value = None, None
            elif line:
                self._warn("Failed to parse as key=value: %s", line)
        if multi:
            self._warn("Unterminated multi-line value for field '%s'", key)
        return result

    def interpret(self, raw: Dict[str, str]) -> Dict[FieldDescriptor, Any]:
        """Convert raw strings to typed values; unknown fields and bad values are dropped."""
        result = {}
        for key, value in raw.items():
            field = lookup_field(key)
            if field is None:
                self._warn("non-standard header field '%s'", key)
                continue
            try:
                result[field] = field.parse_value(value)
            except ValueError:
                self._warn("Failed to parse the value of field '%s': %s", field.name, value, exc_info=True)
        return result

    def check(self, values: Dict[FieldDescriptor, Any]):
        """Report every required field missing from values."""
        for field in REQUIRED_FIELDS:
            if field not in values:
                self._warn("Missing required field: %s", field.name)


def parse_header(text: str, quiet: bool = True) -> Header:
    """Parse ENVI header text into a Header."""
    return HeaderParser(quiet=quiet).parse(text)
