"""Command-line front end for resolving package: URIs. See `pkgmap/resolver/cli.py`."""
