from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field


def _new_id() -> str:
    return str(uuid4())


class TransactionTypeEnum(str, Enum):
    incoming = "incoming"
    outgoing = "outgoing"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[str] = Field(default_factory=_new_id, primary_key=True)
    username: str = Field(index=True, unique=True)
    password: str  # bcrypt hash, never the plaintext
    name: str


class Account(SQLModel, table=True):
    __tablename__ = "accounts"

    id: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    account_type: str
    # Not unique: demo IBANs also show up as transaction counterparties.
    iban: str
    balance: Decimal = Field(default=Decimal("0"), max_digits=15, decimal_places=2)
    currency: str = Field(default="CHF", max_length=3)


class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"

    id: Optional[str] = Field(default_factory=_new_id, primary_key=True)
    account_id: str = Field(foreign_key="accounts.id", index=True)
    type: TransactionTypeEnum
    amount: Decimal = Field(max_digits=15, decimal_places=2)
    counterparty_name: str
    counterparty_iban: str
    reference: str
    date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    fee: Decimal = Field(default=Decimal("0"), max_digits=15, decimal_places=2)
