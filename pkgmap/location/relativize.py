from __future__ import annotations

from pkgmap.location.uri import Location, as_location, normalize_path
from pkgmap.mapping.errors import ArgumentError


def _relative(path: str, nested: bool) -> Location:
    # keep the result from reading as a scheme or an authority, or as root-relative when it is not
    first = path.split("/", 1)[0]
    if path == "" or ":" in first or path.startswith("//") or (nested and path.startswith("/")):
        path = "./" + path
    return Location(path=path)


def relativize(location, base_location) -> Location:
    """Shortest reference that resolves against `base_location` to `location`.

    Only the path is relativized; query and fragment are dropped. The
    location comes back unchanged when it is already relative, when scheme
    or authority differ, or when the two paths share no leading segment.
    """
    location = as_location(location)
    base_location = as_location(base_location)
    if location.query is not None or location.fragment is not None:
        location = Location(
            scheme=location.scheme,
            authority=location.authority if location.has_authority else None,
            path=location.path,
        )
    if not base_location.is_absolute:
        raise ArgumentError("base location must be absolute", base_location, "base_location")
    # Already relative.
    if not location.is_absolute:
        return location

    if location.scheme.lower() != base_location.scheme.lower():
        return location
    if location.has_authority != base_location.has_authority:
        return location
    if location.has_authority:
        if (
            location.user_info != base_location.user_info
            or location.host.lower() != base_location.host.lower()
            or location.port != base_location.port
        ):
            return location

    # no path to express relative to a directory
    if location.has_authority and location.path == "":
        return location

    base = normalize_path(base_location).path_segments[:-1]
    target = normalize_path(location).path_segments
    index = 0
    while index < len(base) and index < len(target):
        if base[index] != target[index]:
            break
        index += 1
    if index == len(base):
        return _relative("/".join(target[index:]), index > 0)
    elif index > 0:
        return Location(path="../" * (len(base) - index) + "/".join(target[index:]))
    return location
