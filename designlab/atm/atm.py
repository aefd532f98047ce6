"""The ATM: card checks, the transaction menu, and a record of all users."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional

from designlab.atm.account import Account, InsufficientBalanceError, SavingAccount, TransType
from designlab.atm.atm_user import User
from designlab.atm.transaction import (
    BalanceInquiry,
    CashDeposit,
    CheckDeposit,
    Transaction,
    TransactionStatus,
    Withdrawal,
)

MENU = (
    "Select the transaction type: 1: DEPOSITE 2: WITHDRAW 3: DISPLAY BALANCE "
    "4:CHECK DEPOSITE 5: Print Mini Statement\n"
)
_DATE = "23-Jun-2023"
_ACC_ID = 2222


@dataclass
class Card:
    number: int
    pin: int

    def authenticate(self) -> bool:
        """Cards do not authenticate themselves; the ATM checks them."""
        return False


class AccountNotFoundError(LookupError):
    """No account belongs to the given card."""


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


class ATM:
    def __init__(self) -> None:
        self.cards: List[Card] = []
        self.accounts: List[Account] = []
        self.transactions: List[Transaction] = []
        self.user = User()
        self.users: Deque[User] = deque()
        self.current_account: Optional[Account] = None

    def validate_card(self, card: int, pin: int) -> bool:
        return any(c.number == card and c.pin == pin for c in self.cards)

    def generate_data(self) -> None:
        self.cards.extend([Card(12345, 1234), Card(67890, 6789)])
        self.accounts.extend([
            SavingAccount("AB12345", 12345, 0),
            SavingAccount("AB12345", 12345, 1000),
        ])

    def start_transaction(
        self, card: int, pin: int, ask: Callable[[str], str] = input
    ) -> Optional[Transaction]:
        """Run one menu choice for ``card``; return the transaction made, if any."""
        account = next((acc for acc in self.accounts if acc.card == card), None)
        if account is None:
            raise AccountNotFoundError("Account not found for the given card number!")
        self.current_account = account
        self.user.card = card
        self.user.pin = pin
        self.user.account = account

        while True:
            choice = _parse_int(ask(MENU))
            if choice == 1:
                self.user.select_transaction_type(TransType.DEPOSIT)
                amount = int(ask("Select amount for deposite: "))
                transaction: Transaction = CashDeposit(
                    111, amount, TransactionStatus.SUCCESS, _DATE, _ACC_ID, TransType.DEPOSIT
                )
                transaction.save()
                self.perform_transaction(transaction, TransType.DEPOSIT, amount)
                return transaction
            if choice == 2:
                self.user.select_transaction_type(TransType.WITHDRAW)
                amount = int(ask("Select amount for withdraw: "))
                transaction = Withdrawal(
                    112, amount, TransactionStatus.SUCCESS, _DATE, _ACC_ID, TransType.WITHDRAW
                )
                transaction.save()
                self.perform_transaction(transaction, TransType.WITHDRAW, amount)
                return transaction
            if choice == 3:
                self.user.select_transaction_type(TransType.BALANCE)
                transaction = BalanceInquiry(
                    113, account.available_balance(), TransactionStatus.SUCCESS,
                    _DATE, _ACC_ID, TransType.WITHDRAW,
                )
                transaction.save()
                self.perform_transaction(transaction, TransType.BALANCE, 0)
                return transaction
            if choice == 4:
                self.user.select_transaction_type(TransType.CHECK_DEPOSIT)
                transaction = CheckDeposit(
                    114, 0, TransactionStatus.SUCCESS, _DATE, _ACC_ID, TransType.CHECK_DEPOSIT
                )
                transaction.save()
                self.perform_transaction(transaction, TransType.CHECK_DEPOSIT, 0)
                return transaction
            if choice == 5:
                self.user.select_transaction_type(TransType.MINI_STATEMENT)
                self.user.print_statement()
                return None
            print("Enter the valid type!!!", end="")

    def perform_transaction(
        self, transaction: Transaction, trans_type: TransType, amount: int
    ) -> None:
        """Apply ``amount`` to the current account and record the transaction."""
        if self.current_account is None:
            raise AccountNotFoundError("no account selected")
        self.current_account.update_balance(amount, trans_type)
        self.transactions.append(transaction)
        print("Do u need reciept(Y/N):", end="")
        self.user.save_transaction(transaction)
        snapshot = copy.copy(self.user)
        snapshot.transactions = deque(self.user.transactions)
        self.users.appendleft(snapshot)

    def all_transactions_table(self) -> str:
        """Return a table of every recorded user state, latest first."""
        lines = [f"{'PIN':>10}{'Card':>10}{'Transaction Type':>20}{'Account Number':>20}"]
        for user in self.users:
            kind = "" if user.trans_type is None else int(user.trans_type)
            acc_no = user.account.acc_no if user.account is not None else ""
            pin = "" if user.pin is None else user.pin
            card = "" if user.card is None else user.card
            lines.append(f"{pin!s:>10}{card!s:>10}{kind!s:>20}{acc_no:>20}")
        return "\n".join(lines)


def main(argv: Optional[list] = None) -> int:
    atm = ATM()
    atm.generate_data()
    card, pin = 12345, 1234
    print("Enter Card : ", end="")
    print("Enter Pin :", end="")
    if not atm.validate_card(card, pin):
        print("Invalid Card Pin no!!!")
    try:
        while True:
            try:
                atm.start_transaction(card, pin)
            except InsufficientBalanceError as exc:
                print(exc)
            except AccountNotFoundError as exc:
                print(exc)
            answer = input("Do u want to continue Press Y/N ").strip()
            if answer[:1] == "N":
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())