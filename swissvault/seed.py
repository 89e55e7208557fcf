from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Sequence

from sqlmodel import Session

from .db import PersistenceGateway, engine
from .fixtures import DEFAULT_CURRENCY, SEED_USERS, UserFixture, validate_fixtures
from .models import Account, Transaction, User
from .security import BCRYPT_ROUNDS, get_password_hash


logger = logging.getLogger(__name__)

Hasher = Callable[[str, int], str]
Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SeedSummary:
    users: int = 0
    accounts: int = 0
    transactions: int = 0
    user_ids: Dict[str, str] = field(default_factory=dict)


class SeedRunner:
    """Reset the users, accounts and transactions tables to the demo fixtures.

    The run is destructive and sequential: children are deleted before
    parents, parents are inserted before children, and each statement is
    committed before the next one starts. The first failure aborts the run
    and propagates; rows written up to that point are left in place.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        fixtures: Sequence[UserFixture] = SEED_USERS,
        *,
        hasher: Hasher = get_password_hash,
        clock: Clock = _utcnow,
        rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self.gateway = gateway
        self.fixtures = fixtures
        self.hasher = hasher
        self.clock = clock
        self.rounds = rounds

    def run(self) -> SeedSummary:
        logger.info("Starting database seed...")
        now = self.clock()
        summary = SeedSummary()
        try:
            # Nothing is deleted unless the whole fixture set is consistent
            validate_fixtures(self.fixtures)
            self._clear()
            for user_fixture in self.fixtures:
                self._seed_user(user_fixture, now, summary)
        except Exception as exc:
            logger.error("Seed failed: %s", exc)
            raise
        logger.info("Database seeded successfully")
        return summary

    def _clear(self) -> None:
        for model in (Transaction, Account, User):
            self.gateway.delete_all(model)
        logger.info("Cleared existing data")

    def _seed_user(self, fixture: UserFixture, now: datetime, summary: SeedSummary) -> None:
        hashed_password = self.hasher(fixture.password, self.rounds)
        user_id = self.gateway.insert(
            User,
            {"username": fixture.username, "password": hashed_password, "name": fixture.name},
        )
        summary.users += 1
        summary.user_ids[fixture.username] = user_id
        logger.info("Created user: %s", fixture.username)

        for account in fixture.accounts:
            self.gateway.insert(
                Account,
                {
                    "id": account.id,
                    "user_id": user_id,
                    "account_type": account.account_type,
                    "iban": account.iban,
                    "balance": str(account.balance),
                    "currency": DEFAULT_CURRENCY,
                },
            )
            summary.accounts += 1
        logger.info("Created %d accounts for %s", len(fixture.accounts), fixture.username)

        for tx in fixture.transactions:
            self.gateway.insert(
                Transaction,
                {
                    "account_id": tx.account_id,
                    "type": tx.type.value,
                    "amount": str(tx.amount),
                    "counterparty_name": tx.counterparty_name,
                    "counterparty_iban": tx.counterparty_iban,
                    "reference": tx.reference,
                    "date": (now - timedelta(days=tx.days_ago)).isoformat(),
                    "fee": str(tx.fee),
                },
            )
            summary.transactions += 1
        if fixture.transactions:
            logger.info("Created %d transactions for %s", len(fixture.transactions), fixture.username)


def seed_database(session: Optional[Session] = None, **runner_options) -> SeedSummary:
    """Run the demo seed against *session*, or a fresh one on the app engine."""
    owns_session = session is None
    session = session or Session(engine)
    try:
        return SeedRunner(PersistenceGateway(session), **runner_options).run()
    finally:
        if owns_session:
            session.close()
