from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class HistoryEntry:
    amount: int
    balance: int


class Account:
    """A named account with a balance and its ordered transaction history.

    ``name`` and ``balance`` are read-only. The balance only moves through
    ``deposit``, ``withdraw`` and ``transfer`` in ``mini_bank.services``.
    """

    __slots__ = ("_name", "_balance", "_history")

    def __init__(self, name: str) -> None:
        self._name = name
        self._balance = 0
        self._history: List[HistoryEntry] = []

    @classmethod
    def restore(
        cls, name: str, balance: int, history: Iterable[HistoryEntry]
    ) -> Account:
        """Rebuild an account from persisted data.

        Raises ``ValueError`` if replaying ``history`` from zero does not
        reproduce every recorded balance and end at ``balance``.
        """
        account = cls(name)
        running = 0
        for entry in history:
            running += entry.amount
            if entry.balance != running:
                raise ValueError(
                    f"Account {name!r}: history entry {entry} does not match "
                    f"replayed balance {running}"
                )
            account._history.append(entry)
        if running != balance:
            raise ValueError(
                f"Account {name!r}: balance {balance} does not match "
                f"replayed history ({running})"
            )
        account._balance = balance
        return account

    @property
    def name(self) -> str:
        return self._name

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def _apply(self, amount: int) -> int:
        # Callers validate the amount; this only books it.
        self._balance += amount
        self._history.append(HistoryEntry(amount=amount, balance=self._balance))
        return self._balance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return (
            self._name == other._name
            and self._balance == other._balance
            and self._history == other._history
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Account(name={self._name!r}, balance={self._balance}, "
            f"history={self._history!r})"
        )
