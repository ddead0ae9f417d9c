from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional
import logging

from pkgmap.location.uri import Location, as_location, normalize_path, resolve
from pkgmap.mapping.errors import ArgumentError
from pkgmap.mapping.writer import to_text, write

logger = logging.getLogger(__name__)

PACKAGE_SCHEME = "package"


class Packages:
    """Package name -> package location table.

    The constructor trusts its input: names and locations are not checked
    (`parse` does that, and `write` re-checks names on the way out).
    """

    def __init__(self, package_mapping: Mapping[str, Location]):
        self._mapping = dict(package_mapping)

    @property
    def package_mapping(self) -> Mapping[str, Location]:
        return MappingProxyType(self._mapping)

    def resolve(self, uri) -> Location:
        """Resolve a `package:` reference to a concrete location.

        Any other scheme is returned unchanged. `package:foo/bar.py` looks up
        `foo` and resolves `bar.py` against its location.
        """
        uri = as_location(uri)
        if uri.scheme.lower() != PACKAGE_SCHEME:
            return uri
        if uri.has_authority:
            raise ArgumentError("must not have authority", uri, "uri")
        if uri.path.startswith("/"):
            raise ArgumentError("path must not start with '/'", uri, "uri")
        uri = normalize_path(uri)
        package_name, _, rest = uri.path.partition("/")
        package_location = self._mapping.get(package_name)
        if package_location is None:
            raise ArgumentError(f"unknown package name: {package_name}", uri, "uri")
        resolved = resolve(package_location, Location(path=rest))
        logger.debug("resolved %s -> %s", uri, resolved)
        return resolved

    def write(self, output, base_location=None, comment: Optional[str] = None) -> None:
        write(self, output, base_location=base_location, comment=comment)

    def to_text(self, base_location=None, comment: Optional[str] = None) -> str:
        return to_text(self, base_location=base_location, comment=comment)

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, name: object) -> bool:
        return name in self._mapping

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Packages):
            return NotImplemented
        return self._mapping == other._mapping

    def __repr__(self) -> str:
        return f"Packages({self._mapping!r})"

    def __str__(self) -> str:
        return self.to_text()
