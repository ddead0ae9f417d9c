"""Location references: parsing, RFC 3986 resolution, path normalization, relativization.

- uri.py: Location record, resolve(), normalize_path()
- relativize.py: shortest relative form of one location against another
"""
