from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator

from ..core.errors import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidAccountNameError,
)
from ..models import Account


logger = logging.getLogger(__name__)


class AccountRegistry:
    """Owns every account of one ledger, keyed by unique name."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def create_account(self, name: str, *, replace: bool = True) -> Account:
        if not isinstance(name, str) or not name:
            raise InvalidAccountNameError("Account name must be a non-empty string")

        previous = self._accounts.get(name)
        if previous is not None:
            if not replace:
                raise DuplicateAccountError(f"Account '{name}' already exists")
            logger.warning(
                "account.replaced",
                extra={
                    "account_name": name,
                    "discarded_balance": previous.balance,
                    "discarded_entries": len(previous.history),
                },
            )

        account = Account(name)
        self._accounts[name] = account
        logger.info("account.created", extra={"account_name": name})
        return account

    def get_account(self, name: str) -> Account:
        try:
            return self._accounts[name]
        except KeyError as exc:
            raise AccountNotFoundError(f"Account '{name}' does not exist") from exc

    def list_accounts(self) -> str:
        lines = ["Accounts:\n"]
        for account in self._accounts.values():
            lines.append(f"Account: {account.name}, balance: {account.balance}\n")
        return "".join(lines)

    def replace_all(self, accounts: Iterable[Account]) -> None:
        """Swap the whole content of the registry for ``accounts``."""
        self._accounts = {account.name: account for account in accounts}

    def clear(self) -> None:
        self._accounts = {}

    def __contains__(self, name: object) -> bool:
        return name in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))

    def __len__(self) -> int:
        return len(self._accounts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountRegistry):
            return NotImplemented
        return self._accounts == other._accounts

    __hash__ = None  # type: ignore[assignment]
