import argparse
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command-line arguments for the ``tux_levels`` tool.

    The tool has one sub-command per public operation: ``name`` prints level
    names, ``info`` loads a level fully and summarises it, ``new`` and
    ``new-worldmap`` show the level that would be created in a directory.

    Args:
        argv (Optional[List[str]]): Arguments to parse; defaults to ``sys.argv[1:]``.

    Returns:
        argparse.Namespace: Parsed arguments; ``command`` holds the sub-command.
    """
    parser = argparse.ArgumentParser(
        description="Inspect SuperTux level files and create new ones"
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        action="append",
        default=None,
        help="Directory mounted into the virtual filesystem; repeatable (default: current directory)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    names = subparsers.add_parser("name", help="Print the name of each level file")
    names.add_argument("files", nargs="+", help="Virtual paths of level files")

    info = subparsers.add_parser("info", help="Load a level and print a summary")
    info.add_argument("file", help="Virtual path of the level file")
    info.add_argument(
        "--editable",
        action="store_true",
        help="Load the level as the editor would (keeps editor-only data)"
    )

    new = subparsers.add_parser("new", help="Show the level that would be created in a directory")
    new.add_argument("basedir", help="Virtual directory for the new level")

    new_worldmap = subparsers.add_parser("new-worldmap", help="Show the worldmap that would be created in a directory")
    new_worldmap.add_argument("basedir", help="Virtual directory for the new worldmap")
    new_worldmap.add_argument("name", help="Display name of the worldmap")

    return parser.parse_args(argv)
