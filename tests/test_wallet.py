"""Tests for the wallet service."""

import pytest

from basics.errors import BasicsError, InsufficientFundsError
from basics.services.wallet import Bitcoin, Wallet


class TestBitcoin:
    """Tests for the Bitcoin amount type."""

    def test_str(self):
        """Should format amounts with the BTC suffix."""
        assert str(Bitcoin(10)) == "10 BTC"

    def test_behaves_like_int(self):
        """Should compare and add like an int."""
        assert Bitcoin(10) == 10
        assert Bitcoin(3) + Bitcoin(4) == 7


class TestWallet:
    """Tests for Wallet deposit and withdraw."""

    def test_starts_empty(self):
        """Should start with a zero balance."""
        assert Wallet().balance == Bitcoin(0)

    def test_deposit(self):
        """Should increase the balance by the deposited amount."""
        wallet = Wallet()
        wallet.deposit(Bitcoin(10))

        assert wallet.balance == Bitcoin(10)
        assert isinstance(wallet.balance, Bitcoin)

    def test_withdraw_with_funds(self):
        """Should decrease the balance when funds are sufficient."""
        wallet = Wallet(Bitcoin(20))
        wallet.withdraw(Bitcoin(10))

        assert wallet.balance == Bitcoin(10)

    def test_withdraw_entire_balance(self):
        """Should allow withdrawing exactly the balance."""
        wallet = Wallet(Bitcoin(20))
        wallet.withdraw(Bitcoin(20))

        assert wallet.balance == Bitcoin(0)

    def test_withdraw_insufficient_funds(self):
        """Should raise and keep the balance when funds are insufficient."""
        wallet = Wallet(Bitcoin(20))

        with pytest.raises(InsufficientFundsError) as exc_info:
            wallet.withdraw(Bitcoin(100))

        assert str(exc_info.value) == "cannot withdraw, insufficient funds"
        assert isinstance(exc_info.value, BasicsError)
        assert wallet.balance == Bitcoin(20)
