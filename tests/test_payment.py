import pytest

from designlab.parking.payment import (
    CardPayment,
    CashPayment,
    OnlineAppPayment,
    PaymentMode,
    payment_for,
)


@pytest.mark.parametrize(
    "mode, cls",
    [
        (PaymentMode.CASH, CashPayment),
        (PaymentMode.ONLINEAPP, OnlineAppPayment),
        (PaymentMode.CARD, CardPayment),
    ],
)
def test_payment_for_mode(mode, cls):
    assert type(payment_for(mode)) is cls


def test_payment_for_unknown_mode():
    with pytest.raises(ValueError):
        payment_for(7)


def test_app_payment_message(capsys):
    message = OnlineAppPayment().pay(20)
    assert message == "Paying the fee via APP!20"
    assert capsys.readouterr().out == message + "\n"


def test_cash_and_card_messages():
    assert CashPayment().pay(40) == "Paying the fee via cash!40"
    assert CardPayment().pay(40) == "Paying the fee via card!40"