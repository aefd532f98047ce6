import pytest

from designlab.atm.account import TransType
from designlab.atm.transaction import (
    BalanceInquiry,
    CashDeposit,
    CheckDeposit,
    Deposit,
    Transaction,
    TransactionStatus,
    Transfer,
    Withdrawal,
)


def _make(cls, trans_type=TransType.DEPOSIT, amount=500):
    return cls(111, amount, TransactionStatus.SUCCESS, "23-Jun-2023", 2222, trans_type)


def test_cash_deposit_receipt_text():
    rule = "\n" + "-" * 30 + "\n"
    expected = (
        rule
        + "\n-------CASH DEPOSITE RECIEPT----------\n"
        + "TranID: 111\n"
        + f"Transaction Status: {int(TransactionStatus.SUCCESS)}\n"
        + "Date: 23-Jun-2023\n"
        + f"Transaction Type: {int(TransType.DEPOSIT)}\n"
        + "Amount: 500\n"
        + rule
    )
    assert _make(CashDeposit).receipt() == expected


@pytest.mark.parametrize(
    "cls, heading",
    [
        (BalanceInquiry, "-------BalanceInquiry RECIEPT----------"),
        (CashDeposit, "-------CASH DEPOSITE RECIEPT----------"),
        (CheckDeposit, "-------CHECK DEPOSITE RECIEPT----------"),
        (Withdrawal, "-------Withdraw RECIEPT----------"),
    ],
)
def test_receipt_headings(cls, heading):
    assert heading in _make(cls).receipt().splitlines()


def test_save_prints_receipt(capsys):
    transaction = _make(Withdrawal, TransType.WITHDRAW, 40)
    returned = transaction.save()
    assert capsys.readouterr().out == returned == transaction.receipt()


def test_transfer_has_empty_receipt(capsys):
    transfer = _make(Transfer, TransType.TRANSFER)
    assert transfer.save() == ""
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("cls", [Transaction, Deposit])
def test_abstract_transactions_cannot_be_built(cls):
    with pytest.raises(TypeError) as excinfo:
        _make(cls)
    assert cls.__name__ in str(excinfo.value)


def test_fields_are_kept():
    transaction = _make(CheckDeposit, TransType.CHECK_DEPOSIT, 0)
    assert (transaction.trans_id, transaction.acc_id, transaction.amount) == (111, 2222, 0)
    assert transaction.trans_type is TransType.CHECK_DEPOSIT