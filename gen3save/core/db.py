from sqlalchemy import create_engine, Column, Integer, String
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

class Species(Base):
    __tablename__ = 'species'

    id = Column(Integer, primary_key=True)
    identifier = Column(String, unique=True, nullable=False) # e.g. "bulbasaur"
    name = Column(String, nullable=False) # Display name

    # Abilities by slot; a missing secondary or hidden slot uses ability1
    ability1_id = Column(Integer, nullable=True)
    ability2_id = Column(Integer, nullable=True)
    hidden_ability_id = Column(Integer, nullable=True)

class Move(Base):
    __tablename__ = 'moves'

    id = Column(Integer, primary_key=True)
    identifier = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)

class Item(Base):
    __tablename__ = 'items'

    id = Column(Integer, primary_key=True)
    identifier = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)

class Ability(Base):
    __tablename__ = 'abilities'

    id = Column(Integer, primary_key=True)
    identifier = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)


def make_identifier(name: str) -> str:
    """Converts a display name into a slug, e.g. Water Pulse -> water-pulse."""
    return name.strip().lower().replace(' ', '-')


# Database Setup
def get_engine(db_path: str) -> Engine:
    """Creates an engine for a file path, or an in-memory database for ":memory:"."""
    if db_path == ":memory:":
        return create_engine('sqlite://', poolclass=StaticPool)
    return create_engine(f'sqlite:///{db_path}')

def init_db(engine: Engine) -> None:
    Base.metadata.create_all(engine)

Session = sessionmaker()
