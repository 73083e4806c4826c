import argparse
import logging
import os
import sys

"""
Name Seeder.

Reads 1-indexed name lists (one name per line, e.g. `Species.txt`,
`Moves.txt`, `Items.txt`) into the knowledge base used to print decoded ids
as names. An optional `species,primary,secondary,hidden` CSV assigns
abilities to the seeded species.

Usage:
    python3 scripts/seed_names.py --species data/raw/Species.txt --moves data/raw/Moves.txt
    python3 scripts/seed_names.py --species data/raw/Species.txt --abilities data/raw/species_abilities.csv
"""

# Ensure project root is in sys.path for direct execution
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from gen3save.config import config
from gen3save.core.db import Species, Move, Item
from gen3save.db import PokemonDatabase, read_ability_table, read_name_list

def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the knowledge base with species, move and item names.")
    parser.add_argument("--db", default=config.database.db_path, help="Database file to create or update")
    parser.add_argument("--species", help="Species name list")
    parser.add_argument("--moves", help="Move name list")
    parser.add_argument("--items", help="Item name list")
    parser.add_argument("--abilities", help="Species abilities CSV (applied after species names)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    sources = [(Species, args.species), (Move, args.moves), (Item, args.items)]
    if not args.abilities and not any(path for _, path in sources):
        parser.error("Give at least one of --species, --moves, --items, --abilities")

    db_dir = os.path.dirname(args.db)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    db = PokemonDatabase(args.db)
    db.connect(create=True)
    try:
        for model, path in sources:
            if not path:
                continue
            if not os.path.exists(path):
                print(f"Name list not found at {path}")
                return 1
            names = read_name_list(path)
            print(f"Seeding {len(names)} {model.__tablename__}...")
            db.seed(model, names)
        if args.abilities:
            if not os.path.exists(args.abilities):
                print(f"Ability table not found at {args.abilities}")
                return 1
            rows = read_ability_table(args.abilities)
            print(f"Assigning abilities for {len(rows)} species...")
            db.seed_species_abilities(rows)
    finally:
        db.close()
    print("Done.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
