import argparse
import json
import sys

from placesquery.app.builder import PlacesQueryBuilder
from placesquery.core.entities import SearchKind
from placesquery.core.errors import PlacesError
from placesquery.utils.logging import setup_logging

# subcommand -> (kind, request fields it takes)
COMMANDS = {
    "nearby": (SearchKind.NEARBY, ("location", "radius")),
    "radar": (SearchKind.RADAR, ("location", "radius")),
    "text": (SearchKind.TEXT, ("query",)),
    "next-page": (SearchKind.NEXT_PAGE, ("next_page_token",)),
    "details": (SearchKind.DETAILS, ("details_reference",)),
}


def _param(s: str):
    name, sep, value = s.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {s!r}")
    return name, value


def build_parser():
    ap = argparse.ArgumentParser(description="Google Places web service client")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--format", default=None, help='"json" or "xml"')
    common.add_argument("--language", default=None)
    common.add_argument("--sensor", default=None, help='"true" or "false"')
    common.add_argument(
        "--param", type=_param, action="append", default=[], help="extra param NAME=VALUE"
    )
    common.add_argument("--encode", action="store_true", help="percent-encode values")
    common.add_argument("--dry-run", action="store_true", help="print the URL and exit")

    sub = ap.add_subparsers(dest="cmd", required=True)

    for name in ("nearby", "radar"):
        p = sub.add_parser(name, parents=[common])
        p.add_argument("--location", required=True, help="lat,lng")
        p.add_argument("--radius", type=int, required=True, help="meters, max 50000")

    p = sub.add_parser("text", parents=[common])
    p.add_argument("--query", required=True)

    p = sub.add_parser("next-page", parents=[common])
    p.add_argument("--token", dest="next_page_token", required=True)

    p = sub.add_parser("details", parents=[common])
    p.add_argument("--reference", dest="details_reference", required=True)

    return ap


def _configure(builder: PlacesQueryBuilder, args):
    if args.format:
        builder.set_results_format(args.format)
    if args.language:
        builder.set_language(args.language)
    if args.sensor:
        builder.set_sensor(args.sensor)
    for name, value in args.param:
        builder.add_extra_param(name, value)
    builder.encode_values = args.encode

    kind, field_names = COMMANDS[args.cmd]
    return builder.prepare(kind, **{f: getattr(args, f) for f in field_names})


def main(argv=None):
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        with PlacesQueryBuilder.from_env() as builder:
            request = _configure(builder, args)
            if args.dry_run:
                print(builder.request_url(request))
                return 0
            result = builder.execute(request)
    except PlacesError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
