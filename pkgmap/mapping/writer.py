from __future__ import annotations
from datetime import datetime
from typing import Optional
import io

from pkgmap.config.env import get_mapping_config
from pkgmap.location.relativize import relativize
from pkgmap.location.uri import as_location
from pkgmap.mapping.errors import ArgumentError
from pkgmap.mapping.identifier import check_identifier


def write(packages, output, base_location=None, comment: Optional[str] = None) -> None:
    """Write `packages` in mapping-file format to the text sink `output`.

    - comment: emitted with `#` before each line; defaults to a generated
      marker line with the current time
    - base_location: when given, locations are made relative to it where
      possible

    Names are re-checked, so a table built from unchecked input fails here.
    The sink is written to directly and never closed.
    """
    if base_location is not None:
        base_location = as_location(base_location)
        if not base_location.is_absolute:
            raise ArgumentError("must be absolute", base_location, "base_location")

    if comment is not None:
        for comment_line in comment.split("\n"):
            output.write("#")
            output.write(comment_line)
            output.write("\n")
    else:
        output.write(f"# {get_mapping_config().comment_marker} at {datetime.now()}\n")

    for package_name, location in packages.package_mapping.items():
        check_identifier(package_name)
        output.write(package_name)
        output.write("=")
        if base_location is not None:
            location = relativize(location, base_location)
        output.write(str(location))
        if not location.path.endswith("/"):
            output.write("/")
        output.write("\n")


def to_text(packages, base_location=None, comment: Optional[str] = None) -> str:
    buf = io.StringIO()
    write(packages, buf, base_location=base_location, comment=comment)
    return buf.getvalue()
