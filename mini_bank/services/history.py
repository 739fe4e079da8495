from __future__ import annotations

from typing import NamedTuple

from ..core.errors import HistoryExhaustedError
from ..models import Account


class HistoryStep(NamedTuple):
    amount: int
    balance: int
    more: bool


class HistoryReader:
    """Single-pass cursor over an account's history, oldest entry first.

    Each ``read()`` returns one ``HistoryStep``; ``more`` turns False on the
    last entry. An empty history reads as ``(0, 0, False)``. Reading past
    that point raises ``HistoryExhaustedError``; build a new reader to start
    over. Entries appended to the account before the last one is read are
    picked up; iterating yields only real entries, so an empty history
    iterates as nothing.
    """

    def __init__(self, account: Account) -> None:
        self._account = account
        self._position = 0
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def read(self) -> HistoryStep:
        if self._exhausted:
            raise HistoryExhaustedError("History reader called after its last entry")

        entries = self._account._history
        if not entries:
            self._exhausted = True
            return HistoryStep(0, 0, False)

        entry = entries[self._position]
        self._position += 1
        more = self._position < len(entries)
        self._exhausted = not more
        return HistoryStep(entry.amount, entry.balance, more)

    __call__ = read

    def __iter__(self) -> HistoryReader:
        return self

    def __next__(self) -> HistoryStep:
        if self._exhausted:
            raise StopIteration
        if not self._account._history:
            self._exhausted = True
            raise StopIteration
        return self.read()


def history(account: Account) -> HistoryReader:
    return HistoryReader(account)
