"""Generic location references (RFC 3986 URI references).

- Location: immutable scheme/authority/path/query/fragment record
- resolve(): base + reference resolution (RFC 3986 section 5.2)
- normalize_path(): removes '.' and '..' segments without touching anything else

`urllib.parse.urljoin` only resolves schemes it knows about, and `package:`
mapping values may use any scheme, so resolution is done here.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple
import re

from pkgmap.mapping.errors import FormatError

# RFC 3986, appendix B
_URI_RE = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?\Z", re.DOTALL)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def _split_authority(authority: str) -> Tuple[Optional[str], str, str]:
    user_info, at, host_port = authority.rpartition("@")
    if host_port.startswith("["):
        close = host_port.find("]")
        if close < 0:
            host, port = host_port, ""
        else:
            host, port = host_port[: close + 1], host_port[close + 1:]
            port = port[1:] if port.startswith(":") else port
    else:
        host, _, port = host_port.partition(":")
    return (user_info if at else None), host, port


@dataclass(frozen=True)
class Location:
    scheme: str = ""
    authority: Optional[str] = None
    path: str = ""
    query: Optional[str] = None
    fragment: Optional[str] = None

    @staticmethod
    def parse(text: str, start: int = 0, end: Optional[int] = None) -> "Location":
        """Parse `text[start:end]`; errors report offsets into `text`."""
        if end is None:
            end = len(text)
        m = _URI_RE.match(text[start:end])
        scheme, authority, path, query, fragment = m.groups()
        if scheme is not None and not _SCHEME_RE.match(scheme):
            raise FormatError("invalid scheme", text, start)
        if authority is not None:
            _, _, port = _split_authority(authority)
            if port and not port.isdigit():
                offset = start + m.start(2) + authority.rfind(port)
                raise FormatError("invalid port", text, offset)
        return Location(
            scheme=(scheme or "").lower(),
            authority=authority,
            path=path,
            query=query,
            fragment=fragment,
        )

    @property
    def has_authority(self) -> bool:
        return self.authority is not None

    @property
    def user_info(self) -> str:
        if self.authority is None:
            return ""
        return _split_authority(self.authority)[0] or ""

    @property
    def host(self) -> str:
        if self.authority is None:
            return ""
        return _split_authority(self.authority)[1]

    @property
    def port(self) -> Optional[int]:
        if self.authority is None:
            return None
        port = _split_authority(self.authority)[2]
        return int(port) if port else None

    @property
    def is_absolute(self) -> bool:
        return bool(self.scheme) and self.fragment is None

    @property
    def path_segments(self) -> List[str]:
        # rooted paths keep their leading empty segment
        return self.path.split("/")

    def with_path(self, path: str) -> "Location":
        return replace(self, path=path)

    def __str__(self) -> str:
        out = []
        if self.scheme:
            out.append(self.scheme + ":")
        if self.authority is not None:
            out.append("//" + self.authority)
        out.append(self.path)
        if self.query is not None:
            out.append("?" + self.query)
        if self.fragment is not None:
            out.append("#" + self.fragment)
        return "".join(out)


def as_location(value) -> Location:
    if isinstance(value, Location):
        return value
    return Location.parse(str(value))


def remove_dot_segments(path: str) -> str:
    """RFC 3986 section 5.2.4."""
    output: List[str] = []
    while path:
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../"):
            path = path[3:]
            if output:
                output.pop()
        elif path == "/..":
            path = "/"
            if output:
                output.pop()
        elif path in (".", ".."):
            path = ""
        else:
            cut = path.find("/", 1 if path.startswith("/") else 0)
            if cut < 0:
                cut = len(path)
            output.append(path[:cut])
            path = path[cut:]
    return "".join(output)


def normalize_path(location: Location) -> Location:
    """Return `location` with '.' and '..' path segments resolved away.

    A rootless path stays rootless ('a/../b' becomes 'b', not '/b').
    """
    path = remove_dot_segments(location.path)
    if path.startswith("/") and not location.path.startswith("/"):
        path = path[1:]
    return location.with_path(path)


def _merge(base: Location, ref_path: str) -> str:
    if base.authority is not None and base.path == "":
        return "/" + ref_path
    return base.path[: base.path.rfind("/") + 1] + ref_path


def resolve(base: Location, reference: Location) -> Location:
    """Resolve `reference` against `base` (RFC 3986 section 5.2.2, strict)."""
    if reference.scheme:
        return normalize_path(reference)
    if reference.authority is not None:
        return Location(
            scheme=base.scheme,
            authority=reference.authority,
            path=remove_dot_segments(reference.path),
            query=reference.query,
            fragment=reference.fragment,
        )
    if reference.path == "":
        path = base.path
        query = reference.query if reference.query is not None else base.query
    elif reference.path.startswith("/"):
        path = remove_dot_segments(reference.path)
        query = reference.query
    else:
        path = remove_dot_segments(_merge(base, reference.path))
        query = reference.query
    return Location(
        scheme=base.scheme,
        authority=base.authority,
        path=path,
        query=query,
        fragment=reference.fragment,
    )
