from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional
import logging

from pkgmap.location.uri import Location, as_location, resolve
from pkgmap.mapping.errors import ArgumentError, FormatError
from pkgmap.mapping.identifier import check_identifier
from pkgmap.mapping.table import Packages

logger = logging.getLogger(__name__)

_EQUALS = "="
_CR = "\r"
_NL = "\n"
_NUMBER_SIGN = "#"


def parse(source: str, base_location) -> Packages:
    """Parse mapping-file text into a `Packages` table.

    One entry per line, `name=location`. Lines starting with `#` are
    comments; empty lines are skipped; CR, LF or end of input end a line.
    Relative locations are resolved against `base_location`, and every
    location gets a trailing `/`.

    Raises `FormatError` (with the offending offset) on the first malformed
    line; no partial table is returned.
    """
    base_location = as_location(base_location)
    if not base_location.is_absolute:
        raise ArgumentError("base location must be absolute", base_location, "base_location")

    index = 0
    length = len(source)
    result: Dict[str, Location] = {}
    while index < length:
        start = index
        eq_index = -1
        end = length
        char = source[index]
        index += 1
        if char == _CR or char == _NL:
            continue
        if char == _EQUALS:
            raise FormatError("missing package name", source, index - 1)
        is_comment = char == _NUMBER_SIGN
        while index < length:
            char = source[index]
            index += 1
            if char == _EQUALS and eq_index < 0:
                eq_index = index - 1
            elif char == _NL or char == _CR:
                end = index - 1
                break
        if is_comment:
            continue
        if eq_index < 0:
            raise FormatError("no '=' on line", source, end)
        check_identifier(source, start, eq_index)
        name = source[start:eq_index]

        location = Location.parse(source, eq_index + 1, end)
        if not location.path.endswith("/"):
            location = location.with_path(location.path + "/")
        location = resolve(base_location, location)
        if name in result:
            raise FormatError("same package name occurred twice", source, start)
        result[name] = location

    logger.debug("parsed %d package(s) against %s", len(result), base_location)
    return Packages(result)


def parse_file(path: str | Path, base_location=None, encoding: str = "utf-8") -> Packages:
    """Read and parse a mapping file; relative entries default to the file's own location."""
    p = Path(path)
    if base_location is None:
        base_location = Location.parse(p.resolve().as_uri())
    return parse(p.read_text(encoding=encoding), base_location)
