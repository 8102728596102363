from __future__ import annotations

import signal
from pathlib import Path

import pytest

from cardledger import main as main_module
from cardledger.adapters.catalog_snapshot import CatalogLoadResult
from cardledger.domain.apply_list import ApplyListResult, ApplyStatus
from cardledger.domain.errors import InputError


def test_add_list_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_add(list_path: Path, **kwargs: object) -> ApplyListResult:
        captured["list_path"] = list_path
        captured.update(kwargs)
        return ApplyListResult(fingerprint=b"\x01", status=ApplyStatus.APPLIED)

    monkeypatch.setattr(main_module, "add_card_list", fake_add)

    main_module.main(["add-list", "cards.txt"])

    assert captured == {
        "list_path": Path("cards.txt"),
        "database_path": None,
        "spellfix_extension": None,
        "save_on_error": None,
    }


def test_add_list_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_add(list_path: Path, **kwargs: object) -> ApplyListResult:
        captured.update(kwargs)
        return ApplyListResult(fingerprint=b"\x01", status=ApplyStatus.SKIPPED)

    monkeypatch.setattr(main_module, "add_card_list", fake_add)

    main_module.main(
        [
            "add-list",
            "cards.txt",
            "--database",
            "ledger.db",
            "-s",
            "spellfix.so",
            "-o",
            "resume.txt",
        ]
    )

    assert captured["database_path"] == Path("ledger.db")
    assert captured["spellfix_extension"] == Path("spellfix.so")
    assert captured["save_on_error"] == Path("resume.txt")


def test_load_catalog_without_vocabulary(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_load(snapshot_path: Path, **kwargs: object) -> CatalogLoadResult:
        captured["snapshot_path"] = snapshot_path
        captured.update(kwargs)
        return CatalogLoadResult(declared=1, cards=1, faces=0, vocabulary_built=False)

    monkeypatch.setattr(main_module, "load_catalog", fake_load)

    main_module.main(["load-catalog", "catalog.jsonl", "--no-vocabulary"])

    assert captured["snapshot_path"] == Path("catalog.jsonl")
    assert captured["build_vocabulary"] is False


def test_input_errors_exit_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_add(*_: object, **__: object) -> ApplyListResult:
        raise InputError("unreadable")

    monkeypatch.setattr(main_module, "add_card_list", fake_add)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["add-list", "cards.txt"])

    assert excinfo.value.code == 2


def test_unexpected_errors_exit_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_add(*_: object, **__: object) -> ApplyListResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(main_module, "add_card_list", fake_add)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["add-list", "cards.txt"])

    assert excinfo.value.code == 1


def test_missing_command_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 2


def test_interrupt_exits_with_failure_status() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.sigint_handler(signal.SIGINT, None)

    assert excinfo.value.code == 130
