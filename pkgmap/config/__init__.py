"""Environment-driven configuration. See `pkgmap/config/env.py`."""
