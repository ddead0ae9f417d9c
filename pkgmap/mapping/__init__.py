"""Mapping files: `name=location` lines mapping package names to locations.

- parser.py: single-pass scanner producing a Packages table
- table.py: Packages table and package: URI resolution
- writer.py: emits a table back as mapping-file text
"""
