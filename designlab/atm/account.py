"""Bank accounts whose balance changes with deposits and withdrawals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class TransType(IntEnum):
    """Kinds of operation a user can choose at the ATM."""

    WITHDRAW = 0
    DEPOSIT = 1
    TRANSFER = 2
    BALANCE = 3
    CHECK_DEPOSIT = 4
    MINI_STATEMENT = 5


class InsufficientBalanceError(ValueError):
    """A withdrawal asks for more than the account holds."""


class Account(ABC):
    """An account tied to a card number."""

    def __init__(self, acc_no: str, card: int, balance: int) -> None:
        self.acc_no = acc_no
        self.card = card
        self.balance = balance

    @abstractmethod
    def available_balance(self) -> int:
        """Return the balance that can be used."""

    def update_balance(self, amount: int, trans_type: TransType) -> None:
        """Apply ``amount`` for deposits and withdrawals; other types leave it alone."""
        if trans_type == TransType.DEPOSIT:
            self.balance += amount
        elif trans_type == TransType.WITHDRAW:
            if amount > self.balance:
                raise InsufficientBalanceError("Insufficient balance!!!")
            self.balance -= amount


class SavingAccount(Account):
    """A savings account with a fixed withdrawal limit."""

    def __init__(self, acc_no: str, card: int, balance: int) -> None:
        super().__init__(acc_no, card, balance)
        self.withdraw_limit = 20000

    def available_balance(self) -> int:
        return self.balance


class CheckingAccount(Account):
    def available_balance(self) -> int:
        return self.balance