import argparse
import json
import logging
import sys

import gpxpy.gpx

from gpx_model.config import DEFAULTS, load_config
from gpx_model.formatters import format_summary
from gpx_model.models import Document
from gpx_model.parser import parse_gpx

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser(config: dict | None = None) -> argparse.ArgumentParser:
    """Build argument parser with defaults from config file."""
    if config is None:
        config = {}

    def get_default(key: str):
        return config.get(key, DEFAULTS[key])

    log_level = str(get_default("log_level")).upper()
    if log_level not in LOG_LEVELS:
        log_level = DEFAULTS["log_level"]

    parser = argparse.ArgumentParser(
        description="Inspect the tracks of a GPX file and their geometry."
    )
    parser.add_argument("gpx_file", help="Path to GPX file")
    parser.add_argument(
        "--geojson",
        action="store_true",
        help="Print track geometry as a GeoJSON GeometryCollection",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=get_default("indent"),
        help=f"GeoJSON indentation (default: {DEFAULTS['indent']})",
    )
    parser.add_argument(
        "--log-level",
        default=log_level,
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"Logging level (default: {DEFAULTS['log_level']})",
    )
    return parser


def to_geojson(doc: Document) -> dict:
    """GeometryCollection with one MultiLineString per track."""
    return {
        "type": "GeometryCollection",
        "geometries": [
            track.multilinestring().__geo_interface__ for track in doc.tracks
        ],
    }


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        doc = parse_gpx(args.gpx_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.gpx_file}", file=sys.stderr)
        sys.exit(1)
    except (gpxpy.gpx.GPXException, OSError, UnicodeDecodeError) as e:
        print(f"Error parsing GPX file: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.geojson:
            print(json.dumps(to_geojson(doc), indent=args.indent))
        else:
            print(format_summary(doc))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
