"""Mini README: Coordinate ingestion for mission planning.

Exports the readers that turn operator text and uploaded JSON files into
ordered vertices for the path generator.
"""

from .coordinates import (
    format_coordinate_text,
    load_coordinates_file,
    load_coordinates_json,
    parse_coordinate_text,
)

__all__ = [
    "format_coordinate_text",
    "load_coordinates_file",
    "load_coordinates_json",
    "parse_coordinate_text",
]
