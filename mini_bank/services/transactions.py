"""Money movements on accounts.

Every function validates first and mutates afterwards, so a rejected call
leaves balances and histories exactly as they were.
"""
from __future__ import annotations

import logging
from typing import Tuple

from ..core.errors import (
    InsufficientFundsError,
    InvalidAmountError,
    SameAccountTransferError,
)
from ..models import Account


logger = logging.getLogger(__name__)


def _check_amount(operation: str, amount: object, balances: Tuple[int, ...]) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError(
            f"{operation}: amount must be an integer, but is {amount!r}.", balances
        )
    if amount < 0:
        raise InvalidAmountError(
            f"{operation}: amount must be positive, but is {amount}.", balances
        )


def deposit(account: Account, amount: int) -> int:
    """Add ``amount`` to the balance of ``account`` and return the new balance."""
    _check_amount("Deposit", amount, (account.balance,))

    balance = account._apply(amount)
    logger.info(
        "account.deposit",
        extra={"account_name": account.name, "amount": amount, "balance": balance},
    )
    return balance


def withdraw(account: Account, amount: int) -> int:
    """Remove ``amount`` from the balance of ``account`` and return the new balance."""
    _check_amount("Withdraw", amount, (account.balance,))
    if amount > account.balance:
        raise InsufficientFundsError(
            f"Withdraw: amount ({amount}) must be less than actual balance "
            f"({account.balance}).",
            (account.balance,),
        )

    balance = account._apply(-amount)
    logger.info(
        "account.withdraw",
        extra={"account_name": account.name, "amount": amount, "balance": balance},
    )
    return balance


def transfer(source: Account, destination: Account, amount: int) -> Tuple[int, int]:
    """Move ``amount`` from ``source`` to ``destination``.

    Returns the resulting ``(source_balance, destination_balance)``. On failure
    the raised error carries both balances, unchanged.
    """
    balances = (source.balance, destination.balance)
    _check_amount("Transfer", amount, balances)
    if source is destination:
        raise SameAccountTransferError("Cannot transfer to the same account", balances)
    if amount > source.balance:
        raise InsufficientFundsError(
            f"Transfer: amount ({amount}) must be less than actual balance of "
            f"sending account ({source.balance}).",
            balances,
        )

    source_balance = source._apply(-amount)
    destination_balance = destination._apply(amount)
    logger.info(
        "account.transfer",
        extra={
            "source_account_name": source.name,
            "destination_account_name": destination.name,
            "amount": amount,
        },
    )
    return source_balance, destination_balance
