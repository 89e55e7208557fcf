"""Hardcoded demo users, accounts and transactions for the SwissVault demo.

Balances, amounts and fees are integers in minor units; the currency of
every account is ``DEFAULT_CURRENCY``. Transaction timestamps are stored as
day offsets and resolved against the clock of the run that inserts them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .exceptions import FixtureError
from .models import TransactionTypeEnum


DEFAULT_CURRENCY = "CHF"


@dataclass(frozen=True)
class AccountFixture:
    id: str
    account_type: str
    iban: str
    balance: int


@dataclass(frozen=True)
class TransactionFixture:
    account_id: str
    type: TransactionTypeEnum
    amount: int
    counterparty_name: str
    counterparty_iban: str
    reference: str
    days_ago: int
    fee: int = 0


@dataclass(frozen=True)
class UserFixture:
    username: str
    password: str  # plaintext, only ever handed to the hasher
    name: str
    accounts: tuple[AccountFixture, ...] = field(default_factory=tuple)
    transactions: tuple[TransactionFixture, ...] = field(default_factory=tuple)


SEED_USERS: tuple[UserFixture, ...] = (
    UserFixture(
        username="john.smith",
        password="mypassword123",
        name="John Smith",
        accounts=(
            AccountFixture(id="acc-js-1", account_type="Private Account", iban="CH5604835012345678000", balance=1850000),
            AccountFixture(id="acc-js-2", account_type="Savings Account", iban="CH3108339000987654321", balance=3200000),
            AccountFixture(
                id="acc-js-3", account_type="Investment Portfolio", iban="CH4487890123456789001", balance=7450000
            ),
        ),
        transactions=(
            TransactionFixture(
                account_id="acc-js-1",
                type=TransactionTypeEnum.incoming,
                amount=15000,
                counterparty_name="Salary - Tech Corp AG",
                counterparty_iban="CH9300762011623852957",
                reference="Monthly salary December 2024",
                days_ago=2,
            ),
            TransactionFixture(
                account_id="acc-js-1",
                type=TransactionTypeEnum.outgoing,
                amount=2500,
                counterparty_name="Rent Payment",
                counterparty_iban="CH1234567890123456789",
                reference="Apartment rent December",
                days_ago=5,
            ),
        ),
    ),
    UserFixture(
        username="alexander.weber",
        password="123456",
        name="Alexander Weber",
        accounts=(
            AccountFixture(id="acc-aw-1", account_type="Private Account", iban="CH9300762011623852957", balance=2750000),
            AccountFixture(id="acc-aw-2", account_type="Savings Account", iban="CH5789012345678901234", balance=4100000),
            AccountFixture(
                id="acc-aw-3", account_type="Investment Portfolio", iban="CH2345678901234567890", balance=8900000
            ),
        ),
        transactions=(
            TransactionFixture(
                account_id="acc-aw-1",
                type=TransactionTypeEnum.incoming,
                amount=25000,
                counterparty_name="Consulting Fee",
                counterparty_iban="CH1111222233334444555",
                reference="November consulting services",
                days_ago=3,
            ),
        ),
    ),
    UserFixture(
        username="marina.berger",
        password="secret2025",
        name="Marina Berger",
        accounts=(
            AccountFixture(id="acc-mb-1", account_type="Private Account", iban="CH4208704048075000000", balance=3650000),
            AccountFixture(id="acc-mb-2", account_type="Savings Account", iban="CH7604835012345678999", balance=5200000),
            AccountFixture(
                id="acc-mb-3", account_type="Investment Portfolio", iban="CH3609000000000000001", balance=12500000
            ),
        ),
    ),
    UserFixture(
        username="thomas.mueller",
        password="password123",
        name="Thomas Müller",
        accounts=(
            AccountFixture(id="acc-tm-1", account_type="Private Account", iban="CH1234567890123456789", balance=890000),
            AccountFixture(id="acc-tm-2", account_type="Savings Account", iban="CH9876543210987654321", balance=1450000),
            AccountFixture(
                id="acc-tm-3", account_type="Investment Portfolio", iban="CH5555444433332222111", balance=3850000
            ),
        ),
    ),
    UserFixture(
        username="sophie.laurent",
        password="secure456",
        name="Sophie Laurent",
        accounts=(
            AccountFixture(id="acc-sl-1", account_type="Private Account", iban="CH6789012345678901234", balance=4250000),
            AccountFixture(id="acc-sl-2", account_type="Savings Account", iban="CH3456789012345678901", balance=6800000),
            AccountFixture(
                id="acc-sl-3", account_type="Investment Portfolio", iban="CH8901234567890123456", balance=15200000
            ),
        ),
    ),
    UserFixture(
        username="david.zhang",
        password="banking789",
        name="David Zhang",
        accounts=(
            AccountFixture(id="acc-dz-1", account_type="Private Account", iban="CH1111222233334444555", balance=1920000),
            AccountFixture(id="acc-dz-2", account_type="Savings Account", iban="CH6666777788889999000", balance=2850000),
            AccountFixture(
                id="acc-dz-3", account_type="Investment Portfolio", iban="CH3333222211110000999", balance=6750000
            ),
        ),
    ),
)


def validate_fixtures(users: Iterable[UserFixture]) -> None:
    """Check the reference rules of a fixture set before it touches the database.

    Usernames and account ids must be unique across the whole set, every
    transaction must point at an account of the user that owns it, and day
    offsets, amounts and fees must be usable. Raises :class:`FixtureError`
    on the first violation.
    """
    usernames: set[str] = set()
    account_ids: set[str] = set()
    for user in users:
        if user.username in usernames:
            raise FixtureError(f"Duplicate username in fixtures: {user.username}")
        usernames.add(user.username)

        own_accounts: set[str] = set()
        for account in user.accounts:
            if account.id in account_ids:
                raise FixtureError(f"Duplicate account id in fixtures: {account.id}")
            account_ids.add(account.id)
            own_accounts.add(account.id)

        for tx in user.transactions:
            if tx.account_id not in own_accounts:
                raise FixtureError(
                    f"Transaction '{tx.reference}' of {user.username} references unknown account {tx.account_id}"
                )
            if tx.days_ago < 1:
                raise FixtureError(f"Transaction '{tx.reference}' must be dated at least one day in the past")
            if tx.amount < 0 or tx.fee < 0:
                raise FixtureError(f"Transaction '{tx.reference}' has a negative amount or fee")
