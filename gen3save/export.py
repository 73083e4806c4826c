"""
Text rendering of decoded records.

- Showdown-style import text for party Pokemon (one block per Pokemon)
- Plain reports for the trainer record and section integrity, used by the CLI
"""
from typing import Iterable, List, Optional

from .config import ExportConfig, config
from .core.dataclasses import EV_LABELS, IntegrityWarning, PartyPokemon, Section, TrainerInfo
from .db import PokemonDatabase


def _species_name(species_id: int, db: Optional[PokemonDatabase]) -> str:
    return db.get_species_name(species_id) if db else f"Species#{species_id}"

def _move_name(move_id: int, db: Optional[PokemonDatabase]) -> str:
    return db.get_move_name(move_id) if db else f"Move#{move_id}"

def _item_name(item_id: int, db: Optional[PokemonDatabase]) -> Optional[str]:
    if item_id == 0:
        return None
    return db.get_item_name(item_id) if db else f"Item#{item_id}"


def _ability_name(pokemon: PartyPokemon, db: Optional[PokemonDatabase]) -> str:
    name = db.get_ability_name(pokemon.species_id, pokemon.ability_slot) if db else None
    return name or pokemon.ability_slot.label


def format_showdown(
    pokemon: PartyPokemon,
    db: Optional[PokemonDatabase] = None,
    export_config: Optional[ExportConfig] = None,
) -> str:
    """Formats one Pokemon as a battle-simulator import block.

    Example output:
        Kaeman (Arbok) @ Oran Berry
        Level: 28
        Jolly Nature
        Ability: Intimidate
        EVs: 4 HP / 252 Atk / 252 Spe
        - Thunder Fang
        - Poison Jab

    Args:
        pokemon (PartyPokemon): The decoded record.
        db (Optional[PokemonDatabase]): Name lookups; ids are shown without one.
        export_config (Optional[ExportConfig]): Optional lines to include.

    Returns:
        str: The block, without a trailing newline.
    """
    cfg = export_config or config.export
    species = _species_name(pokemon.species_id, db)
    item = _item_name(pokemon.item_id, db)

    if cfg.use_nicknames and pokemon.nickname and pokemon.nickname != species:
        header = f"{pokemon.nickname} ({species})"
    else:
        header = species
    if item:
        header += f" @ {item}"

    lines = [header]
    if cfg.include_level:
        lines.append(f"Level: {pokemon.level}")
    if cfg.include_nature:
        lines.append(f"{pokemon.nature} Nature")
    if cfg.include_ability:
        lines.append(f"Ability: {_ability_name(pokemon, db)}")
    if cfg.include_evs:
        spread = [f"{ev} {label}" for ev, label in zip(pokemon.evs, EV_LABELS) if ev]
        if spread:
            lines.append("EVs: " + " / ".join(spread))
    for move_id in pokemon.moves:
        lines.append(f"- {_move_name(move_id, db)}")
    return "\n".join(lines)


def format_party(
    party: Iterable[PartyPokemon],
    db: Optional[PokemonDatabase] = None,
    export_config: Optional[ExportConfig] = None,
) -> str:
    """Showdown blocks for a whole party, separated by blank lines. Empty slots are skipped."""
    blocks = [format_showdown(p, db, export_config) for p in party if not p.is_empty]
    return "\n\n".join(blocks)


def format_pokemon_details(pokemon: PartyPokemon, db: Optional[PokemonDatabase] = None) -> str:
    """Multi-line dump of every decoded field of one Pokemon."""
    species = _species_name(pokemon.species_id, db)
    evs = " ".join(f"{label}={ev}" for label, ev in zip(EV_LABELS, pokemon.evs))
    ivs = " ".join(f"{label}={iv}" for label, iv in zip(EV_LABELS, pokemon.ivs))
    moves = ", ".join(_move_name(m, db) for m in pokemon.moves)
    lines = [
        f"--- {pokemon.nickname} ({species} #{pokemon.species_id}) ---",
        f"  OT: {pokemon.ot_name} | Level: {pokemon.level} | HP: {pokemon.current_hp}/{pokemon.max_hp}",
        f"  Stats: ATK={pokemon.attack} DEF={pokemon.defense} SPD={pokemon.speed} "
        f"SPATK={pokemon.sp_attack} SPDEF={pokemon.sp_defense}",
        f"  EXP: {pokemon.experience} | Moves: [{moves}]",
        f"  EVs: {evs}",
        f"  IVs: {ivs}",
        f"  Ability: {_ability_name(pokemon, db)}",
        f"  Personality: {pokemon.personality} ({pokemon.nature})",
    ]
    if pokemon.is_egg:
        lines.append("  (Egg)")
    if not pokemon.checksum_valid:
        lines.append("  WARNING: checksum mismatch")
    return "\n".join(lines)


def format_trainer(trainer: TrainerInfo) -> str:
    return "\n".join([
        f"Name:       {trainer.name}",
        f"Gender:     {trainer.gender.label}",
        f"Trainer ID: {trainer.trainer_id}",
        f"Secret ID:  {trainer.secret_id}",
    ])


def format_sections(sections: Iterable[Section], warnings: List[IntegrityWarning]) -> str:
    """One line per section in physical order: id and signature status."""
    bad = {w.physical_index for w in warnings}
    return "\n".join(
        f"Section {s.section_id:2d}: signature {'BAD' if s.physical_index in bad else 'OK'}"
        for s in sections
    )
