"""ATM transactions and their printed receipts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

from designlab.atm.account import TransType

_RULE = "\n" + "-" * 30 + "\n"


class TransactionStatus(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    BLOCKED = 2
    FULL = 3
    PARTIAL = 4
    NONE = 5


@dataclass
class Transaction(ABC):
    """One operation on an account."""

    trans_id: int
    amount: int
    status: TransactionStatus
    date: str
    acc_id: int
    trans_type: TransType

    @property
    @abstractmethod
    def title(self) -> str:
        """Heading shown on the receipt."""

    def receipt(self) -> str:
        """Return the receipt text."""
        return (
            f"{_RULE}"
            f"\n-------{self.title} RECIEPT----------\n"
            f"TranID: {self.trans_id}\n"
            f"Transaction Status: {int(self.status)}\n"
            f"Date: {self.date}\n"
            f"Transaction Type: {int(self.trans_type)}\n"
            f"Amount: {self.amount}\n"
            f"{_RULE}"
        )

    def save(self) -> str:
        """Print the receipt and return it."""
        text = self.receipt()
        print(text, end="")
        return text


@dataclass
class BalanceInquiry(Transaction):
    title = "BalanceInquiry"


@dataclass
class Deposit(Transaction, ABC):
    """Base for the kinds of deposit."""


@dataclass
class CashDeposit(Deposit):
    title = "CASH DEPOSITE"


@dataclass
class CheckDeposit(Deposit):
    title = "CHECK DEPOSITE"


@dataclass
class Withdrawal(Transaction):
    title = "Withdraw"


@dataclass
class Transfer(Transaction):
    title = "Transfer"

    def receipt(self) -> str:
        """Transfers produce no receipt."""
        return ""