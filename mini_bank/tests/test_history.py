import pytest

from ..core.errors import HistoryExhaustedError
from ..models import Account, HistoryEntry
from ..services import HistoryReader, HistoryStep, deposit, history, withdraw


@pytest.fixture
def pike() -> Account:
    return Account.restore(
        "Pike",
        93,
        [
            HistoryEntry(100, 100),
            HistoryEntry(10, 110),
            HistoryEntry(-40, 70),
            HistoryEntry(23, 93),
        ],
    )


def test_reader_returns_entries_oldest_first(pike: Account) -> None:
    reader = history(pike)

    steps = [reader() for _ in range(4)]

    assert [step.amount for step in steps] == [100, 10, -40, 23]
    assert [step.balance for step in steps] == [100, 110, 70, 93]
    assert [step.more for step in steps] == [True, True, True, False]
    assert reader.exhausted


def test_reader_fails_loudly_after_last_entry(pike: Account) -> None:
    reader = HistoryReader(pike)
    for _ in range(4):
        reader.read()

    with pytest.raises(HistoryExhaustedError):
        reader.read()


def test_empty_history_reads_zero_once() -> None:
    reader = history(Account("Thompson"))

    assert reader.read() == HistoryStep(0, 0, False)
    with pytest.raises(HistoryExhaustedError):
        reader.read()


def test_reader_is_iterable(pike: Account) -> None:
    steps = list(history(pike))

    assert steps == [
        HistoryStep(100, 100, True),
        HistoryStep(10, 110, True),
        HistoryStep(-40, 70, True),
        HistoryStep(23, 93, False),
    ]


def test_new_reader_starts_over(pike: Account) -> None:
    first = history(pike)
    list(first)

    second = history(pike)
    assert second.read() == HistoryStep(100, 100, True)


def test_reader_picks_up_entries_added_after_creation() -> None:
    account = Account("Griesemer")
    deposit(account, 10)
    reader = history(account)

    withdraw(account, 4)

    assert list(reader) == [HistoryStep(10, 10, True), HistoryStep(-4, 6, False)]


def test_reader_sees_entries_appended_between_reads() -> None:
    account = Account("Griesemer")
    deposit(account, 10)
    deposit(account, 20)
    reader = history(account)

    assert reader.read() == HistoryStep(10, 10, True)
    deposit(account, 5)

    assert reader.read() == HistoryStep(20, 30, True)
    assert reader.read() == HistoryStep(5, 35, False)
    assert reader.exhausted


def test_iterating_empty_history_yields_nothing() -> None:
    reader = history(Account("Thompson"))

    assert list(reader) == []
    assert reader.exhausted
    with pytest.raises(HistoryExhaustedError):
        reader.read()
