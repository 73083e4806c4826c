import logging
from typing import List

from ..core.dataclasses import PartyPokemon, Section, TrainerInfo
from ..core.enums import AbilitySlot, Gender, Substructure
from .binary import read_u8, read_u16, read_u32
from .charmap import decode_string
from .constants import (
    POKEMON_SIZE_BYTES, PARTY_SIZE, PARTY_OFFSET, PARTY_SIZE_OFFSET,
    TRAINER_NAME_OFFSET, TRAINER_NAME_LENGTH, TRAINER_GENDER_OFFSET,
    TRAINER_ID_OFFSET, TRAINER_SECRET_ID_OFFSET,
    PKM_PERSONALITY, PKM_OT_ID, PKM_NICKNAME, PKM_NICKNAME_LENGTH,
    PKM_OT_NAME, PKM_OT_NAME_LENGTH, PKM_CHECKSUM, PKM_DATA_START, PKM_DATA_END,
    PKM_LEVEL, PKM_CURRENT_HP, PKM_MAX_HP, PKM_ATTACK, PKM_DEFENSE,
    PKM_SPEED, PKM_SP_ATTACK, PKM_SP_DEFENSE,
    GROWTH_SPECIES, GROWTH_ITEM, GROWTH_EXPERIENCE, GROWTH_FRIENDSHIP,
    ATTACKS_MOVES, ATTACKS_PP_BONUSES, EVS_START, EV_COUNT,
    MISC_IV_EGG_ABILITY, IV_BITS, IV_MASK, EGG_BIT, ABILITY_BIT,
)
from .decryption import decrypt_pokemon, get_substructure, verify_checksum

logger = logging.getLogger(__name__)


def unpack_ivs(iv_word: int) -> List[int]:
    """Splits the packed IV word into HP, Atk, Def, Spe, SpA, SpD."""
    return [(iv_word >> (i * IV_BITS)) & IV_MASK for i in range(EV_COUNT)]


class FireRedDecoder:
    """Turns the trainer-info and team sections into records.

    Stateless: every method is a pure function of the bytes it is given.
    """

    def decode_trainer(self, section: Section) -> TrainerInfo:
        data = section.data
        name_end = TRAINER_NAME_OFFSET + TRAINER_NAME_LENGTH
        return TrainerInfo(
            name=decode_string(data[TRAINER_NAME_OFFSET:name_end]),
            gender=Gender.from_flag(read_u8(data, TRAINER_GENDER_OFFSET)),
            trainer_id=read_u16(data, TRAINER_ID_OFFSET),
            secret_id=read_u16(data, TRAINER_SECRET_ID_OFFSET),
        )

    def party_count(self, section: Section) -> int:
        """Declared party size, capped at six slots."""
        declared = read_u32(section.data, PARTY_SIZE_OFFSET)
        if declared > PARTY_SIZE:
            logger.debug(f"Declared party size {declared} capped to {PARTY_SIZE}")
        return min(declared, PARTY_SIZE)

    def decode_party(self, section: Section) -> List[PartyPokemon]:
        """Decodes every occupied party slot of the team section.

        Args:
            section (Section): Section id 1.

        Returns:
            List[PartyPokemon]: min(declared count, 6) records, in slot order.
        """
        party = []
        for i in range(self.party_count(section)):
            off = PARTY_OFFSET + i * POKEMON_SIZE_BYTES
            party.append(self.decode_pokemon(section.data[off:off + POKEMON_SIZE_BYTES]))
        return party

    def decode_pokemon(self, data: bytes) -> PartyPokemon:
        """Decodes one encrypted 100-byte party record.

        Args:
            data (bytes): The raw record as stored in the save.

        Returns:
            PartyPokemon: The decoded record. A failed checksum is flagged,
                not raised.
        """
        pkmn = decrypt_pokemon(data)

        # 1. Personality & OT (First 8 bytes, never encrypted)
        pid = read_u32(pkmn, PKM_PERSONALITY)
        ot_id = read_u32(pkmn, PKM_OT_ID)

        # 2. Checksum over the decrypted 48-byte block
        checksum = read_u16(pkmn, PKM_CHECKSUM)
        checksum_valid = verify_checksum(pkmn[PKM_DATA_START:PKM_DATA_END], checksum)
        if not checksum_valid and pid != 0:
            logger.warning(f"Checksum failed for PID {pid:08X}")

        # 3. Substructures, located through the PID permutation
        growth = get_substructure(pkmn, Substructure.GROWTH)
        attacks = get_substructure(pkmn, Substructure.ATTACKS)
        ev_block = get_substructure(pkmn, Substructure.EVS)
        misc = get_substructure(pkmn, Substructure.MISC)

        move_ids = [read_u16(attacks, ATTACKS_MOVES + i * 2) for i in range(4)]
        iv_word = read_u32(misc, MISC_IV_EGG_ABILITY)

        # 4. Status & Stats (Last 20 bytes, UNENCRYPTED)
        return PartyPokemon(
            personality=pid,
            ot_id=ot_id,
            nickname=decode_string(pkmn[PKM_NICKNAME:PKM_NICKNAME + PKM_NICKNAME_LENGTH]),
            ot_name=decode_string(pkmn[PKM_OT_NAME:PKM_OT_NAME + PKM_OT_NAME_LENGTH]),
            level=read_u8(pkmn, PKM_LEVEL),
            current_hp=read_u16(pkmn, PKM_CURRENT_HP),
            max_hp=read_u16(pkmn, PKM_MAX_HP),
            attack=read_u16(pkmn, PKM_ATTACK),
            defense=read_u16(pkmn, PKM_DEFENSE),
            speed=read_u16(pkmn, PKM_SPEED),
            sp_attack=read_u16(pkmn, PKM_SP_ATTACK),
            sp_defense=read_u16(pkmn, PKM_SP_DEFENSE),
            species_id=read_u16(growth, GROWTH_SPECIES),
            experience=read_u32(growth, GROWTH_EXPERIENCE),
            moves=[m for m in move_ids if m != 0],
            evs=list(ev_block[EVS_START:EVS_START + EV_COUNT]),
            item_id=read_u16(growth, GROWTH_ITEM),
            friendship=read_u8(growth, GROWTH_FRIENDSHIP),
            pp_bonuses=read_u8(attacks, ATTACKS_PP_BONUSES),
            ivs=unpack_ivs(iv_word),
            is_egg=bool((iv_word >> EGG_BIT) & 1),
            ability_slot=AbilitySlot.from_record(pid, (iv_word >> ABILITY_BIT) & 1),
            checksum_valid=checksum_valid,
        )
