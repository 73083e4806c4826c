import csv
import os
import logging
from typing import Iterable, List, Optional, Tuple, Type

from sqlalchemy.exc import SQLAlchemyError

from .core.db import Base, Species, Move, Item, Ability, Session, get_engine, init_db, make_identifier
from .core.enums import AbilitySlot
from .core.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

class PokemonDatabase:
    """Handles interactions with the SQLite knowledge base.

    This class provides read-only access to the names of species, moves and
    items, used to turn decoded ids into readable text.

    Attributes:
        db_path (str): Path to the SQLite database file, or ":memory:".
        session (Session): Active ORM session or None.
    """

    def __init__(self, db_path: str = "data/knowledge_base.db"):
        """Initializes the database handler.

        Args:
            db_path (str): Relative or absolute path to the .db file.
        """
        self.db_path = db_path
        self.engine = None
        self.session = None

    def __enter__(self) -> "PokemonDatabase":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def connect(self, create: bool = False) -> None:
        """Opens a session on the database.

        Logs an error and stays disconnected if the file does not exist,
        unless `create` is set, in which case the tables are created.
        """
        if self.db_path != ":memory:" and not create and not os.path.exists(self.db_path):
            logger.error(f"Database not found at {self.db_path}")
            return
        try:
            self.engine = get_engine(self.db_path)
            if create or self.db_path == ":memory:":
                init_db(self.engine)
            self.session = Session(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Database connection error: {e}")
            self.engine = None
            self.session = None

    def close(self) -> None:
        """Closes the current session if active."""
        if self.session:
            self.session.close()
            self.session = None
        if self.engine:
            self.engine.dispose()
            self.engine = None

    @property
    def is_connected(self) -> bool:
        return self.session is not None

    def _get(self, model: Type[Base], entity_id: int):
        if not self.session:
            return None
        try:
            return self.session.get(model, entity_id)
        except SQLAlchemyError as e:
            logger.error(f"Lookup of {model.__tablename__} #{entity_id} failed: {e}")
            self.session.rollback()
            return None

    def get_species(self, species_id: int) -> Species:
        """Retrieves a species row.

        Raises:
            EntityNotFoundError: If the id is not in the database.
        """
        row = self._get(Species, species_id)
        if row is None:
            raise EntityNotFoundError("Species", species_id)
        return row

    def get_species_name(self, species_id: int) -> str:
        """Helper to get just the name of a species."""
        row = self._get(Species, species_id)
        return row.name if row else f"Species#{species_id}"

    def get_move_name(self, move_id: int) -> str:
        """Helper to get just the name of a move."""
        if move_id == 0:
            return "---"
        row = self._get(Move, move_id)
        return row.name if row else f"Move#{move_id}"

    def get_item_name(self, item_id: int) -> Optional[str]:
        """Helper to get just the name of an item. None means no held item."""
        if item_id == 0:
            return None
        row = self._get(Item, item_id)
        return row.name if row else f"Item#{item_id}"

    def get_ability_name(self, species_id: int, slot: AbilitySlot) -> Optional[str]:
        """Resolves the ability a species has in the given slot.

        A species without a secondary or hidden ability falls back to its
        primary one. Returns None when the species or its abilities are unknown.
        """
        species = self._get(Species, species_id)
        if species is None:
            return None
        by_slot = {
            AbilitySlot.PRIMARY: species.ability1_id,
            AbilitySlot.SECONDARY: species.ability2_id,
            AbilitySlot.HIDDEN: species.hidden_ability_id,
        }
        ability_id = by_slot[slot] or species.ability1_id
        if ability_id is None:
            return None
        row = self._get(Ability, ability_id)
        return row.name if row else None

    def seed(self, model: Type[Base], rows: Iterable[Tuple[int, str]]) -> int:
        """Inserts or replaces (id, name) rows for one table.

        Args:
            model: Species, Move or Item.
            rows: (id, display name) pairs.

        Returns:
            int: Number of rows written.
        """
        if not self.session:
            raise RuntimeError("Database is not connected")
        count = 0
        seen = set()
        for entity_id, name in rows:
            identifier = make_identifier(name)
            if identifier in seen:
                logger.warning(f"Skipping duplicate {model.__tablename__} name {name!r} (id {entity_id})")
                continue
            seen.add(identifier)
            self.session.merge(model(id=entity_id, identifier=identifier, name=name))
            count += 1
        self.session.commit()
        return count

    def _ability_id(self, name: Optional[str]) -> Optional[int]:
        if not name:
            return None
        identifier = make_identifier(name)
        row = self.session.query(Ability).filter_by(identifier=identifier).one_or_none()
        if row is None:
            row = Ability(identifier=identifier, name=name)
            self.session.add(row)
            self.session.flush()
        return row.id

    def seed_species_abilities(self, rows: Iterable[Tuple[str, Optional[str], Optional[str], Optional[str]]]) -> int:
        """Assigns abilities to already-seeded species.

        Args:
            rows: (species name, primary, secondary, hidden) tuples. Empty
                slots are None. Abilities are created on first use.

        Returns:
            int: Number of species updated.
        """
        if not self.session:
            raise RuntimeError("Database is not connected")
        count = 0
        for species_name, primary, secondary, hidden in rows:
            species = self.session.query(Species).filter_by(identifier=make_identifier(species_name)).one_or_none()
            if species is None:
                logger.warning(f"Skipping abilities for unknown species {species_name!r}")
                continue
            species.ability1_id = self._ability_id(primary)
            species.ability2_id = self._ability_id(secondary)
            species.hidden_ability_id = self._ability_id(hidden)
            count += 1
        self.session.commit()
        return count


def read_name_list(path: str) -> List[Tuple[int, str]]:
    """Parses a 1-indexed name list (one name per line) into (id, name) pairs.

    Line 1 is id 1. Blank lines keep their id but produce no row.

    Args:
        path (str): Path to e.g. `Species.txt`.

    Returns:
        List[Tuple[int, str]]: List of (id, name) tuples.
    """
    names = []
    with open(path, 'r', encoding='utf-8') as f:
        for line_no, line in enumerate(f, start=1):
            name = line.strip()
            if name:
                names.append((line_no, name))
    return names


def read_ability_table(path: str) -> List[Tuple[str, Optional[str], Optional[str], Optional[str]]]:
    """Parses a species,primary,secondary,hidden CSV with a header row.

    Blank ability cells become None. Rows with fewer than four columns are skipped.
    """
    rows = []
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.reader(f)
        next(reader, None)
        for cols in reader:
            if len(cols) < 4:
                continue
            species, primary, secondary, hidden = (c.strip() for c in cols[:4])
            rows.append((species, primary or None, secondary or None, hidden or None))
    return rows
