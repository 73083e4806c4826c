import sys
import os
import json

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from helpers import (
    attacks_block, build_pokemon, build_save, build_slot, evs_block,
    growth_block, misc_block, party_payload, trainer_payload,
)
from gen3save.config import UserSettings
from gen3save.main import main


def write_save(tmp_path, bad_signatures=()):
    mon = build_pokemon(
        pid=1,
        otid=2,
        physical_blocks=[growth_block(4, 300, item=0), attacks_block([10, 52]), misc_block(),
                         evs_block([0, 0, 0, 0, 0, 0])],
        nickname="Char",
        level=7,
    )
    payloads = {0: trainer_payload("RED", trainer_id=100, secret_id=200), 1: party_payload(1, [mon])}
    path = tmp_path / "firered.sav"
    path.write_bytes(build_save(build_slot(2, payloads=payloads, bad_signatures=bad_signatures), build_slot(1)))
    return path


def test_cli_prints_party_and_remembers_path(tmp_path, capsys):
    save = write_save(tmp_path)
    settings = tmp_path / "settings.json"
    db = tmp_path / "missing.db"

    code = main(["--path", str(save), "--settings", str(settings), "--db", str(db)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Using slot A (save index 2)" in out
    assert "Party (1 Pokemon)" in out
    assert "--- Char (Species#4 #4) ---" in out
    assert UserSettings.load(settings).last_save_path == str(save)

    # Second run without --path reuses the remembered file
    code = main(["--settings", str(settings), "--db", str(db), "--kind", "trainer"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Name:       RED" in out
    assert "Trainer ID: 100" in out


def test_cli_showdown_and_sections(tmp_path, capsys):
    save = write_save(tmp_path, bad_signatures=[5])
    code = main(["--path", str(save), "--settings", str(tmp_path / "s.json"),
                 "--db", str(tmp_path / "missing.db"), "--format", "showdown", "--sections"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Section  5: signature BAD" in out
    assert "Char (Species#4)" in out
    assert "- Move#10" in out


def test_cli_without_path_fails(tmp_path):
    assert main(["--settings", str(tmp_path / "empty.json")]) == 1


def test_cli_reports_decode_errors(tmp_path):
    bad = tmp_path / "short.sav"
    bad.write_bytes(b"\x00" * 100)
    settings = tmp_path / "settings.json"
    assert main(["--path", str(bad), "--settings", str(settings)]) == 1
    assert UserSettings.load(settings).last_save_path is None


def test_cli_ignores_wrong_typed_settings(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"last_save_path": 5}))
    # Treated as "no remembered path" rather than crashing on a non-string path
    assert main(["--settings", str(settings), "--db", str(tmp_path / "missing.db")]) == 1


def test_cli_survives_unreadable_database(tmp_path, capsys):
    save = write_save(tmp_path)
    db = tmp_path / "kb.db"
    db.write_bytes(b"not sqlite at all" * 100)
    code = main(["--path", str(save), "--settings", str(tmp_path / "s.json"), "--db", str(db)])
    out = capsys.readouterr().out
    assert code == 0
    assert "--- Char (Species#4 #4) ---" in out
