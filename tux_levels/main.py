#!/usr/bin/env python3
"""
main.py

Command-line entry point for tux_levels. It mounts the requested data
directories, then reads names of, loads or creates levels depending on the chosen
sub-command and prints the results.
"""
import logging
import sys
from typing import List, Optional

from tux_levels.errors import LevelError
from tux_levels.level import Level
from tux_levels.level_parser import LevelParser
from tux_levels.utils.parse_args import parse_args
from tux_levels.utils.vfs import VirtualFileSystem

logger = logging.getLogger(__name__)


def _print_level(level: Level) -> None:
    metadata = level.get_metadata()
    for key in ("filename", "name", "author", "contact", "license", "tileset", "target_time"):
        print(f"{key}: {metadata[key]}")
    print(f"sectors: {level.get_sector_count()}")
    for sector in level.sectors:
        width, height = sector.get_size()
        print(f"  - {sector.name or '<unnamed>'}: {width}x{height} tiles, {len(sector.objects)} objects")
    stats = level.stats
    print(f"coins: {stats.total_coins} badguys: {stats.total_badguys} secrets: {stats.total_secrets}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ``tux_levels`` tool.

    Returns:
        int: Process exit code; 1 when a level could not be loaded.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s: %(message)s",
        stream=sys.stdout,
    )
    vfs = VirtualFileSystem(args.data_dir)

    if args.command == "name":
        for filename in args.files:
            print(f"{filename}: {LevelParser.get_level_name(filename, vfs=vfs)}")
        return 0

    if args.command == "info":
        try:
            level = LevelParser.from_file(args.file, args.editable, vfs=vfs)
        except LevelError:
            logger.fatal("Error loading level %s", args.file, exc_info=True)
            return 1
        _print_level(level)
        return 0

    if args.command == "new":
        _print_level(LevelParser.from_nothing(args.basedir, vfs=vfs))
        return 0

    if args.command == "new-worldmap":
        _print_level(LevelParser.from_nothing_worldmap(args.basedir, args.name, vfs=vfs))
        return 0

    logger.error("Unknown command %s", args.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
