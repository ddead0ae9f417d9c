"""HTTP front end (Flask) over parse/resolve/relativize. See `pkgmap/api/server.py`."""
