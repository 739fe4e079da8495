from pathlib import Path

import pytest
from pydantic import ValidationError

from ..core.config import Settings
from ..core.errors import AccountNotFoundError, InsufficientFundsError
from ..main import create_ledger
from ..services import AccountRegistry, HistoryStep, LedgerService, SnapshotStore


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(snapshot_path=tmp_path / "bank.data", log_level="DEBUG")


@pytest.fixture
def ledger(settings: Settings) -> LedgerService:
    return LedgerService.from_settings(settings)


def test_operations_by_name(ledger: LedgerService) -> None:
    ledger.create_account("A")
    ledger.create_account("B")

    assert ledger.deposit("A", 100) == 100
    assert ledger.transfer("A", "B", 60) == (40, 60)
    assert ledger.withdraw("B", 10) == 50

    assert ledger.get_account("A").balance == 40
    assert list(ledger.history("B")) == [
        HistoryStep(60, 60, True),
        HistoryStep(-10, 50, False),
    ]


def test_unknown_names_raise(ledger: LedgerService) -> None:
    ledger.create_account("A")

    with pytest.raises(AccountNotFoundError):
        ledger.deposit("Ghost", 1)
    with pytest.raises(AccountNotFoundError):
        ledger.transfer("A", "Ghost", 0)
    with pytest.raises(AccountNotFoundError):
        ledger.history("Ghost")


def test_failed_transfer_by_name(ledger: LedgerService) -> None:
    ledger.create_account("A")
    ledger.create_account("B")
    ledger.deposit("A", 100)
    ledger.transfer("A", "B", 100)

    with pytest.raises(InsufficientFundsError) as excinfo:
        ledger.transfer("A", "B", 100)

    assert excinfo.value.balances == (0, 100)


def test_list_accounts(ledger: LedgerService) -> None:
    ledger.create_account("Pike")
    ledger.deposit("Pike", 7)

    assert ledger.list_accounts() == "Accounts:\nAccount: Pike, balance: 7\n"


def test_save_and_restart(settings: Settings, ledger: LedgerService) -> None:
    ledger.create_account("Hiasl")
    ledger.deposit("Hiasl", 25)
    ledger.save()

    restarted = create_ledger(settings)

    assert restarted.registry == ledger.registry
    assert restarted.get_account("Hiasl").balance == 25


def test_create_ledger_without_snapshot_is_empty(settings: Settings) -> None:
    ledger = create_ledger(settings)

    assert len(ledger.registry) == 0
    assert ledger.store.path == settings.snapshot_path


def test_settings_read_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BANK_SNAPSHOT_PATH", str(tmp_path / "env.data"))
    monkeypatch.setenv("BANK_LOG_LEVEL", "WARNING")

    settings = Settings()

    assert settings.snapshot_path == tmp_path / "env.data"
    assert settings.log_level == "WARNING"


def test_injected_empty_registry_is_used(settings: Settings) -> None:
    registry = AccountRegistry()
    store = SnapshotStore(settings.snapshot_path)
    ledger = LedgerService(registry, store)

    ledger.create_account("A")
    ledger.deposit("A", 3)

    assert ledger.registry is registry
    assert ledger.store is store
    assert registry.get_account("A").balance == 3


def test_load_goes_into_injected_registry(settings: Settings) -> None:
    source = LedgerService.from_settings(settings)
    source.create_account("Pike")
    source.save()

    registry = AccountRegistry()
    LedgerService(registry, SnapshotStore(settings.snapshot_path)).load()

    assert "Pike" in registry


def test_settings_normalize_values(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = Settings(snapshot_path="~/bank.data", log_level="debug")

    assert settings.snapshot_path == tmp_path / "bank.data"
    assert settings.log_level == "DEBUG"


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")
