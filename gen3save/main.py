import argparse
import logging
import os
import sys
from typing import List, Optional

"""
Gen 3 Save Reader - command line entry point.

Loads a Pokemon FireRed .sav file, picks the active save slot and prints the
trainer record or the party. The party can be printed as a detailed dump or
as Showdown import text ready to paste into a battle simulator.

The last opened path is remembered, so `--path` can be omitted on later runs.

Usage:
    gen3save --path firered.sav
    gen3save --kind trainer
    gen3save --format showdown --db data/knowledge_base.db
"""

from .config import UserSettings, config
from .core.enums import RecordKind
from .core.exceptions import Gen3SaveError
from .db import PokemonDatabase
from .export import format_party, format_pokemon_details, format_sections, format_trainer
from .firered.reader import SaveReader

logger = logging.getLogger(__name__)

def print_separator(char: str = '-', length: int = 60) -> None:
    """Prints a visual separator line."""
    print(char * length)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode trainer and party data from a Gen 3 (FireRed) save file.")
    parser.add_argument("--path", help="Path to the .sav file (defaults to the last one used)")
    parser.add_argument("--kind", choices=[k.value for k in RecordKind], default=RecordKind.PARTY.value,
                        help="Which records to decode")
    parser.add_argument("--format", choices=["text", "showdown"], default="text", dest="output_format",
                        help="Output format for party records")
    parser.add_argument("--db", default=config.database.db_path, help="Knowledge base used for names")
    parser.add_argument("--settings", default=None, help="Settings file remembering the last path")
    parser.add_argument("--sections", action="store_true", help="Also list section signature status")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    settings_kwargs = {"path": args.settings} if args.settings else {}
    settings = UserSettings.load(**settings_kwargs)
    path = args.path or settings.last_save_path
    if not path:
        logger.error("No save file given. Use --path <path-to-sav-file>")
        return 1

    try:
        reader = SaveReader.from_file(path)
        result = reader.decode(RecordKind(args.kind))
    except Gen3SaveError as e:
        logger.error(f"Failed to decode save: {e}")
        return 1

    settings.last_save_path = str(path)
    try:
        settings.save(**settings_kwargs)
    except OSError as e:
        logger.warning(f"Could not remember save path: {e}")

    print(f"Using slot {reader.slot.label} (save index {result.save_index})")

    if args.sections:
        print_separator('=')
        print(format_sections(reader.sections.sections, result.warnings))

    if result.kind is RecordKind.TRAINER:
        print_separator('=')
        print(format_trainer(result.records[0]))
        return 0

    db = None
    if os.path.exists(args.db):
        db = PokemonDatabase(args.db)
        db.connect()
    else:
        logger.debug(f"No knowledge base at {args.db}, showing raw ids")

    try:
        print_separator('=')
        print(f"Party ({len(result.records)} Pokemon)")
        print_separator('=')
        lookup = db if db and db.is_connected else None
        if args.output_format == "showdown":
            print(format_party(result.records, lookup))
        else:
            for pokemon in result.records:
                print(format_pokemon_details(pokemon, lookup))
    finally:
        if db:
            db.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
