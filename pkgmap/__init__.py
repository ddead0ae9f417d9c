"""pkgmap: `package:` URI mapping files.

Parses `name=location` mapping files, resolves `package:` references through
them, and writes mappings back out (optionally relative to a base location).

- location/: location references, resolution, normalization, relativization
- mapping/: identifier checks, parser, table + resolver, writer
- resolver/cli.py, api/server.py: command-line and HTTP front ends
"""

from pkgmap.location.relativize import relativize
from pkgmap.location.uri import Location, normalize_path
from pkgmap.mapping.errors import ArgumentError, FormatError, MappingError
from pkgmap.mapping.identifier import check_identifier, is_valid_identifier
from pkgmap.mapping.parser import parse, parse_file
from pkgmap.mapping.table import Packages
from pkgmap.mapping.writer import to_text, write

__all__ = [
    "ArgumentError",
    "FormatError",
    "Location",
    "MappingError",
    "Packages",
    "check_identifier",
    "is_valid_identifier",
    "normalize_path",
    "parse",
    "parse_file",
    "relativize",
    "to_text",
    "write",
]
