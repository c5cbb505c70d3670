"""Collection Repository — maps ORM rows to CollectionState and back.

Invariants:
    - load() returns a fully detached CollectionState: mutating it touches no row
    - save() writes the whole state in the caller's transaction; the caller commits
    - Burned units are deleted rows; presale claims are insert-only
    - load(for_update=True) row-locks the collection singleton (no-op on SQLite)

Design Decisions:
    - Whole-state load/save over per-field updates: every core operation is a pure
      function of the state, so the shell only needs two seams (ADR: impureim sandwich)
    - Row sync by primary key diff: unchanged rows are left alone by the unit of work
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from soulforge.core.collection_state import CollectionState, Unit
from soulforge.core.domain_types import (
    Address, Digest, Role, SalePhase, TokenId, Wei,
)
from soulforge.core.errors import ResourceNotFoundError
from soulforge.models.collection import COLLECTION_ID, Collection
from soulforge.models.collection_event import CollectionEvent
from soulforge.models.operator_approval import OperatorApproval
from soulforge.models.presale_claim import PresaleClaim
from soulforge.models.role_assignment import RoleAssignment
from soulforge.models.token import Token


class SqlCollectionRepository:
    """CollectionRepository backed by SQLAlchemy async sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self) -> bool:
        return await self.db.get(Collection, COLLECTION_ID) is not None

    async def create(self, state: CollectionState) -> None:
        self.db.add(Collection(
            id=COLLECTION_ID,
            name=state.name,
            symbol=state.symbol,
            owner=state.owner,
            cap=state.cap,
            royalty_receiver=state.royalty_receiver,
            royalty_bps=state.royalty_bps,
        ))
        await self.db.flush()
        await self.save(state)

    async def load(self, for_update: bool = False) -> CollectionState:
        row = await self.db.get(
            Collection, COLLECTION_ID, with_for_update=for_update or None,
        )
        if row is None:
            raise ResourceNotFoundError("Collection", str(COLLECTION_ID))

        state = CollectionState(
            name=row.name,
            symbol=row.symbol,
            owner=Address(row.owner),
            cap=row.cap,
            issued_count=row.issued_count,
            phase=SalePhase(row.phase),
            public_price=Wei(row.public_price),
            presale_price=Wei(row.presale_price),
            allow_list_root=Digest(row.allow_list_root) if row.allow_list_root else None,
            revealed=row.revealed,
            placeholder_descriptor=row.placeholder_descriptor,
            base_descriptor_template=row.base_descriptor_template,
            paused=row.paused,
            royalty_receiver=Address(row.royalty_receiver),
            royalty_bps=row.royalty_bps,
            balance=Wei(row.balance),
        )
        for token in await self._all(Token):
            state.units[TokenId(token.token_id)] = Unit(
                id=TokenId(token.token_id),
                owner=Address(token.owner),
                locked=token.locked,
                descriptor_override=token.descriptor_override,
                approved=Address(token.approved) if token.approved else None,
                rental_user=Address(token.rental_user) if token.rental_user else None,
                rental_expires=token.rental_expires,
            )
        for claim in await self._all(PresaleClaim):
            state.presale_claims[Address(claim.account)] = claim.amount
        for assignment in await self._all(RoleAssignment):
            state.roles.setdefault(Role(assignment.role), set()).add(
                Address(assignment.account),
            )
        for approval in await self._all(OperatorApproval):
            state.operator_approvals.setdefault(Address(approval.owner), set()).add(
                Address(approval.operator),
            )
        return state

    async def save(self, state: CollectionState) -> None:
        row = await self.db.get(Collection, COLLECTION_ID)
        if row is None:
            raise ResourceNotFoundError("Collection", str(COLLECTION_ID))
        row.owner = state.owner
        row.issued_count = state.issued_count
        row.phase = state.phase.value
        row.public_price = state.public_price
        row.presale_price = state.presale_price
        row.allow_list_root = state.allow_list_root
        row.revealed = state.revealed
        row.placeholder_descriptor = state.placeholder_descriptor
        row.base_descriptor_template = state.base_descriptor_template
        row.paused = state.paused
        row.balance = state.balance

        await self._sync_tokens(state)
        await self._sync_claims(state)
        await self._sync_roles(state)
        await self._sync_operators(state)
        await self.db.flush()

    async def append_events(self, events: list[dict], caller: Address | None) -> None:
        for event in events:
            self.db.add(CollectionEvent(
                name=event["name"], payload=event["payload"], caller=caller,
            ))

    async def list_events(self, limit: int, offset: int) -> list[CollectionEvent]:
        result = await self.db.execute(
            select(CollectionEvent)
            .order_by(CollectionEvent.id)
            .limit(limit)
            .offset(offset),
        )
        return list(result.scalars().all())

    async def count_events(self) -> int:
        result = await self.db.execute(select(func.count(CollectionEvent.id)))
        return result.scalar_one()

    # --- Row sync -------------------------------------------------------------

    async def _all(self, model) -> list:
        result = await self.db.execute(select(model))
        return list(result.scalars().all())

    async def _sync_tokens(self, state: CollectionState) -> None:
        existing = {t.token_id: t for t in await self._all(Token)}
        for token_id, token in existing.items():
            if token_id not in state.units:
                await self.db.delete(token)
        for token_id, unit in state.units.items():
            token = existing.get(token_id)
            if token is None:
                token = Token(token_id=token_id)
                self.db.add(token)
            token.owner = unit.owner
            token.locked = unit.locked
            token.descriptor_override = unit.descriptor_override
            token.approved = unit.approved
            token.rental_user = unit.rental_user
            token.rental_expires = unit.rental_expires

    async def _sync_claims(self, state: CollectionState) -> None:
        existing = {c.account for c in await self._all(PresaleClaim)}
        for account, amount in state.presale_claims.items():
            if account not in existing and amount > 0:
                self.db.add(PresaleClaim(account=account, amount=amount))

    async def _sync_roles(self, state: CollectionState) -> None:
        wanted = {
            (role.value, account)
            for role, members in state.roles.items()
            for account in members
        }
        existing = {(r.role, r.account): r for r in await self._all(RoleAssignment)}
        for key, assignment in existing.items():
            if key not in wanted:
                await self.db.delete(assignment)
        for role, account in wanted - existing.keys():
            self.db.add(RoleAssignment(role=role, account=account))

    async def _sync_operators(self, state: CollectionState) -> None:
        wanted = {
            (owner, operator)
            for owner, operators in state.operator_approvals.items()
            for operator in operators
        }
        existing = {(o.owner, o.operator): o for o in await self._all(OperatorApproval)}
        for key, approval in existing.items():
            if key not in wanted:
                await self.db.delete(approval)
        for owner, operator in wanted - existing.keys():
            self.db.add(OperatorApproval(owner=owner, operator=operator))
