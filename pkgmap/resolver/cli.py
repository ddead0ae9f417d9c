import argparse
import json
import logging
import sys

from pkgmap.config.env import get_mapping_config
from pkgmap.location.relativize import relativize
from pkgmap.location.uri import Location
from pkgmap.mapping.errors import FormatError, MappingError
from pkgmap.mapping.parser import parse_file

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    cfg = get_mapping_config()
    ap = argparse.ArgumentParser(prog="pkgmap", description="Resolve package: URIs through a mapping file.")
    ap.add_argument("--packages", default=cfg.mapping_file, help="mapping file (default: %(default)s)")
    ap.add_argument("--base", default=cfg.base_location, help="base location for relative entries (default: the mapping file)")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    p_resolve = sub.add_parser("resolve", help="resolve package: URIs")
    p_resolve.add_argument("uris", nargs="+")

    p_rel = sub.add_parser("relativize", help="express a location relative to a base")
    p_rel.add_argument("location")
    p_rel.add_argument("against")

    p_norm = sub.add_parser("normalize", help="re-emit the mapping file")
    p_norm.add_argument("--output-base", default=None, help="relativize locations against this location")
    p_norm.add_argument("--comment", default=None)
    return ap


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        if args.command == "relativize":
            print(relativize(Location.parse(args.location), Location.parse(args.against)))
            return 0

        packages = parse_file(args.packages, args.base)
        if args.command == "resolve":
            print(json.dumps([
                {"uri": u, "location": str(packages.resolve(u))}
                for u in args.uris
            ], indent=2))
        else:
            packages.write(sys.stdout, base_location=args.output_base, comment=args.comment)
    except FormatError as e:
        logger.debug("format error in %s", args.packages)
        print(e.render(), file=sys.stderr)
        return 1
    except MappingError as e:
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"cannot read {args.packages}: {e.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
