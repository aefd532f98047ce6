"""The person at the ATM and their recent transactions."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Callable, Deque, List, Optional

from designlab.atm.account import Account, TransType
from designlab.atm.transaction import Transaction

_STATEMENT_ROWS = 5


class User:
    """Holds the card, pin, chosen operation and transaction history of a user."""

    def __init__(self) -> None:
        self.pin: Optional[int] = None
        self.card: Optional[int] = None
        self.trans_type: Optional[TransType] = None
        self.transactions: Deque[Transaction] = deque()
        self.account: Optional[Account] = None

    def insert_card(self, ask: Callable[[str], str] = input) -> int:
        self.card = int(ask("Insert Card means enter card details:"))
        return self.card

    def enter_pin(self, ask: Callable[[str], str] = input) -> int:
        self.pin = int(ask("Enter the pin no: "))
        return self.pin

    def select_transaction_type(self, trans_type: TransType) -> None:
        self.trans_type = trans_type

    def save_transaction(self, transaction: Transaction) -> None:
        """Record ``transaction`` as the most recent one."""
        self.transactions.appendleft(transaction)

    def statement(self) -> List[str]:
        """Return the mini statement: header, rule, and the earliest five rows."""
        lines = [
            f"{'TransID':<12}{'AccID':<12}{'Amount':<12}{'Status':<12}"
            f"{'Creation Date':<15}{'Transaction Type':<15}",
            "-" * 75,
        ]
        for t in islice(reversed(self.transactions), _STATEMENT_ROWS):
            lines.append(
                f"{t.trans_id:<12}{t.acc_id:<12}{t.amount:<12}{int(t.status):<12}"
                f"{t.date:<15}{int(t.trans_type):<15}"
            )
        return lines

    def print_statement(self) -> None:
        for line in self.statement():
            print(line)