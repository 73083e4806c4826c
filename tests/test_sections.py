import sys
import os
import logging
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from helpers import SLOT_SIZE, build_save, build_slot, trainer_payload
from gen3save.core.exceptions import SectionNotFoundError
from gen3save.firered.sections import SectionIndex, locate_active_slot, parse_save_slot


def test_parse_slot_reads_footers():
    order = [3, 0, 1, 2, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13]
    raw = build_save(build_slot(9, order=order), build_slot(8))
    slot = parse_save_slot(raw, 0)
    assert len(slot.sections) == 14
    assert [s.section_id for s in slot.sections] == order
    assert [s.physical_index for s in slot.sections] == list(range(14))
    assert all(s.save_index == 9 for s in slot.sections)
    assert all(len(s.data) == 0x1000 for s in slot.sections)


def test_active_slot_prefers_higher_save_index():
    raw = build_save(build_slot(5), build_slot(7))
    slot = locate_active_slot(raw)
    assert slot.offset == SLOT_SIZE
    assert slot.save_index == 7
    assert slot.label == "B"

    raw = build_save(build_slot(7), build_slot(5))
    assert locate_active_slot(raw).offset == 0


def test_active_slot_tie_goes_to_first_slot():
    raw = build_save(build_slot(6, payloads={0: b'\x01'}), build_slot(6, payloads={0: b'\x02'}))
    slot = locate_active_slot(raw)
    assert slot.offset == 0
    assert slot.sections[0].data[0] == 0x01


def test_active_slot_uses_first_physical_section_counter():
    # Only the first physical section is consulted, whatever its id
    raw = build_save(build_slot(10, order=[5] + [i for i in range(14) if i != 5]), build_slot(3))
    slot = locate_active_slot(raw)
    assert slot.offset == 0
    assert slot.sections[0].section_id == 5


def test_index_lookup_ignores_physical_order():
    order = list(reversed(range(14)))
    raw = build_save(build_slot(1, payloads={0: trainer_payload("MAY")}, order=order), build_slot(0))
    index = SectionIndex.from_slot(locate_active_slot(raw))
    section = index.lookup(0)
    assert section.section_id == 0
    assert section.physical_index == 13
    assert len(index) == 14
    assert index.ids == list(range(14))
    assert 13 in index


def test_lookup_missing_id_raises():
    order = [0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 13]
    raw = build_save(build_slot(1, order=order), build_slot(0))
    index = SectionIndex.from_slot(locate_active_slot(raw))
    assert 1 not in index
    with pytest.raises(SectionNotFoundError) as exc_info:
        index.lookup(1)
    assert exc_info.value.section_id == 1
    assert 1 not in exc_info.value.available
    assert "Section 1 not found" in str(exc_info.value)


def test_signature_mismatch_is_a_warning(caplog):
    raw = build_save(build_slot(1, bad_signatures=[4, 9]), build_slot(0))
    index = SectionIndex.from_slot(locate_active_slot(raw))
    with caplog.at_level(logging.WARNING):
        warnings = index.verify_signatures()
    assert [w.section_id for w in warnings] == [4, 9]
    assert warnings[0].expected == 0x08012025
    assert warnings[0].actual == 0xDEADBEEF
    assert "signature BAD" in caplog.text
    # Bad sections are still reachable
    assert index.lookup(4).section_id == 4


def test_healthy_slot_has_no_warnings():
    raw = build_save(build_slot(1), build_slot(0))
    assert SectionIndex.from_slot(locate_active_slot(raw)).verify_signatures() == []
