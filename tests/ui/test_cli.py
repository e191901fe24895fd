from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from catalogsync.config import DEFAULT_BATCH_SIZE
from catalogsync.sync import SyncStatistics
from catalogsync.ui import cli

if TYPE_CHECKING:
    from pathlib import Path

    from catalogsync.sync import SyncOptions


def _statistics(*, created: int = 0, failed: int = 0) -> SyncStatistics:
    statistics = SyncStatistics(label="products")
    for _ in range(created):
        statistics.record_created()
    for index in range(failed):
        statistics.record_failed(f"key-{index}")
    return statistics


def _fake_product_sync(
    monkeypatch: pytest.MonkeyPatch, statistics: SyncStatistics
) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_load(path: Path) -> list[str]:
        captured["path"] = path
        return ["draft"]

    def fake_sync(drafts: list[str], *, options: SyncOptions[object, object]) -> SyncStatistics:
        captured["drafts"] = drafts
        captured["options"] = options
        return statistics

    monkeypatch.setattr(cli, "load_product_drafts", fake_load)
    monkeypatch.setattr(cli, "sync_products", fake_sync)
    return captured


def test_cli_defaults(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    captured = _fake_product_sync(monkeypatch, _statistics(created=2))

    cli.main(["products", "--input", str(tmp_path / "products.json")])

    options = captured["options"]
    assert captured["path"] == tmp_path / "products.json"
    assert captured["drafts"] == ["draft"]
    assert options.batch_size == DEFAULT_BATCH_SIZE  # type: ignore[attr-defined]
    assert options.ensure_channels is False  # type: ignore[attr-defined]
    assert options.remove_other_locales is True  # type: ignore[attr-defined]
    assert "2 products were processed" in capsys.readouterr().out


def test_cli_with_flags(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured = _fake_product_sync(monkeypatch, _statistics(created=1))

    cli.main(
        [
            "products",
            "--input",
            str(tmp_path / "products.json"),
            "--batch-size",
            "5",
            "--parallelism",
            "3",
            "--ensure-channels",
            "--keep-other-locales",
            "--keep-other-collection-entries",
        ]
    )

    options = captured["options"]
    assert options.batch_size == 5  # type: ignore[attr-defined]
    assert options.parallelism == 3  # type: ignore[attr-defined]
    assert options.ensure_channels is True  # type: ignore[attr-defined]
    assert options.remove_other_locales is False  # type: ignore[attr-defined]
    assert options.remove_other_collection_entries is False  # type: ignore[attr-defined]
    assert options.remove_other_set_entries is True  # type: ignore[attr-defined]
    assert options.remove_other_properties is True  # type: ignore[attr-defined]


def test_cli_flags_override_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("CATALOG_SYNC_BATCH_SIZE", "40")
    monkeypatch.setenv("CATALOG_SYNC_PARALLELISM", "8")
    captured = _fake_product_sync(monkeypatch, _statistics())

    cli.main(["products", "--input", str(tmp_path / "p.json"), "--parallelism", "2"])

    options = captured["options"]
    assert options.batch_size == 40  # type: ignore[attr-defined]
    assert options.parallelism == 2  # type: ignore[attr-defined]


def test_cli_exits_with_failure_when_drafts_failed(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _fake_product_sync(monkeypatch, _statistics(created=1, failed=1))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["products", "--input", str(tmp_path / "products.json")])

    assert excinfo.value.code == 1


def test_cli_invalid_input_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def fake_load(path: Path) -> list[object]:
        raise ValueError(f"bad drafts in {path}")

    monkeypatch.setattr(cli, "load_category_drafts", fake_load)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["categories", "--input", str(tmp_path / "categories.json")])

    assert excinfo.value.code == 2


def test_cli_unexpected_error_exits_with_failure(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def fake_load(_: Path) -> list[object]:
        return []

    def fake_sync(*_: object, **__: object) -> SyncStatistics:
        raise RuntimeError("platform down")

    monkeypatch.setattr(cli, "load_cart_discount_drafts", fake_load)
    monkeypatch.setattr(cli, "sync_cart_discounts", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["cart-discounts", "--input", str(tmp_path / "discounts.json")])

    assert excinfo.value.code == 1


def test_cli_invalid_environment_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("CATALOG_SYNC_BATCH_SIZE", "many")
    _fake_product_sync(monkeypatch, _statistics())

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["products", "--input", str(tmp_path / "products.json")])

    assert excinfo.value.code == 2


def test_cli_rejects_non_positive_batch_size(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["products", "--input", str(tmp_path / "p.json"), "--batch-size", "0"])

    assert excinfo.value.code == 2


def test_cli_inventory_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_load(path: Path) -> list[str]:
        captured["path"] = path
        return ["entry"]

    def fake_sync(drafts: list[str], *, options: SyncOptions[object, object]) -> SyncStatistics:
        captured["drafts"] = drafts
        captured["options"] = options
        return SyncStatistics(label="inventory entries")

    monkeypatch.setattr(cli, "load_inventory_drafts", fake_load)
    monkeypatch.setattr(cli, "sync_inventory_entries", fake_sync)

    cli.main(["inventory", "--input", str(tmp_path / "inventory.json"), "--ensure-channels"])

    assert captured["path"] == tmp_path / "inventory.json"
    assert captured["drafts"] == ["entry"]
    assert captured["options"].ensure_channels is True  # type: ignore[attr-defined]
