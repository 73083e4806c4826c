"""
Save File Offsets for Pokemon FireRed / LeafGreen (US)

Layout cross-referenced with the pret/pokefirered decompilation project
and Bulbapedia's "Save data structure (Generation III)" article.

File Regions:
- Slot A: 0x00000 - 0x0E000 (14 sections x 4 KB)
- Slot B: 0x0E000 - 0x1C000 (14 sections x 4 KB)
- Anything after 0x1C000 (Hall of Fame, Mystery Gift, Recorded Battle) is ignored.

Reading Strategy:
- Pick the slot with the higher save index (written last)
- Find sections by the id in their footer, never by physical position
"""

# ==============================================================================
# SLOT / SECTION LAYOUT
# ==============================================================================
# Each section is a 4096-byte block. The game rotates the physical order of
# sections on every save, so the footer id is the only stable key.
#
# Section footer (last 12 bytes of each block):
#   0xFF4: u16 Section ID (0-13)
#   0xFF6: u16 Checksum
#   0xFF8: u32 Signature (always 0x08012025 on a healthy section)
#   0xFFC: u32 Save index (incremented on every save)

SECTION_SIZE = 0x1000                       # 4096 bytes
SECTION_COUNT = 14
SLOT_SIZE = SECTION_SIZE * SECTION_COUNT    # 0xE000
SAVE_MIN_SIZE = SLOT_SIZE * 2               # Both slots must be present

SECTION_ID_OFFSET = 0xFF4         # u16
SECTION_CHECKSUM_OFFSET = 0xFF6   # u16
SECTION_SIGNATURE_OFFSET = 0xFF8  # u32
SECTION_SAVE_INDEX_OFFSET = 0xFFC # u32

SECTION_SIGNATURE = 0x08012025

# Logical section ids used by the decoder
SECTION_TRAINER_INFO = 0
SECTION_TEAM_ITEMS = 1

# ==============================================================================
# SECTION 0 - TRAINER INFO
# ==============================================================================

TRAINER_NAME_OFFSET = 0x00        # 7 bytes, Gen3 encoding, 0xFF terminated
TRAINER_NAME_LENGTH = 7
TRAINER_GENDER_OFFSET = 0x08      # u8: 0 = Boy, otherwise Girl
TRAINER_ID_OFFSET = 0x0A          # u16: public trainer id
TRAINER_SECRET_ID_OFFSET = 0x0C   # u16: secret id

# ==============================================================================
# SECTION 1 - TEAM / ITEMS (FireRed offsets)
# ==============================================================================

PARTY_SIZE_OFFSET = 0x0034        # u32: declared party count
PARTY_OFFSET = 0x0038             # First Pokemon record
PARTY_SIZE = 6                    # Maximum Pokemon per party

# ==============================================================================
# POKEMON RECORD - 100 bytes
# ==============================================================================
# Each 100-byte Pokemon structure contains:
#   Bytes 0-3:    Personality Value (PID) - substructure order, nature
#   Bytes 4-7:    Original Trainer ID (OTID) - used for encryption key
#   Bytes 8-17:   Nickname (10 bytes)
#   Bytes 18-19:  Language
#   Bytes 20-26:  OT Name (7 bytes)
#   Byte  27:     Markings
#   Bytes 28-29:  Checksum (validates decrypted data)
#   Bytes 30-31:  Padding
#   Bytes 32-79:  Encrypted Substructures (48 bytes, 4 blocks x 12 bytes)
#                 - Encryption key = PID XOR OTID
#                 - Block order shuffled based on PID % 24
#   Bytes 80-99:  UNENCRYPTED status, level and stats

POKEMON_SIZE_BYTES = 100
SUBSTRUCT_SIZE_BYTES = 12
SUBSTRUCT_COUNT = 4

PKM_PERSONALITY = 0           # u32
PKM_OT_ID = 4                 # u32
PKM_NICKNAME = 8              # 10 bytes
PKM_NICKNAME_LENGTH = 10
PKM_OT_NAME = 20              # 7 bytes
PKM_OT_NAME_LENGTH = 7
PKM_CHECKSUM = 28             # u16
PKM_DATA_START = 32           # Start of encrypted block
PKM_DATA_END = PKM_DATA_START + SUBSTRUCT_COUNT * SUBSTRUCT_SIZE_BYTES  # 80, exclusive
PKM_LEVEL = 84                # u8
PKM_CURRENT_HP = 86           # u16
PKM_MAX_HP = 88               # u16
PKM_ATTACK = 90               # u16
PKM_DEFENSE = 92              # u16
PKM_SPEED = 94                # u16
PKM_SP_ATTACK = 96            # u16
PKM_SP_DEFENSE = 98           # u16

# Offsets inside a 12-byte substructure
GROWTH_SPECIES = 0            # u16
GROWTH_ITEM = 2               # u16
GROWTH_EXPERIENCE = 4         # u32
GROWTH_FRIENDSHIP = 9         # u8
ATTACKS_MOVES = 0             # 4 x u16
ATTACKS_PP_BONUSES = 8        # u8
EVS_START = 0                 # 6 x u8: HP, Atk, Def, Spe, SpA, SpD
EV_COUNT = 6
MISC_IV_EGG_ABILITY = 4       # u32: IVs (6 x 5 bits), egg bit 30, ability bit 31
IV_BITS = 5
IV_MASK = 0x1F
EGG_BIT = 30
ABILITY_BIT = 31
