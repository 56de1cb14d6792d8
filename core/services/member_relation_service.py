"""
Member relation service - friend / acquaintance relations between members.
"""

import logging
from typing import List

from core.domain.exceptions import (
    AlreadyFriendError,
    FriendNotFoundError,
    RelationAlreadyExistsError,
    SelfRelationError,
)
from core.domain.models import MemberId, MemberRelation, MemberRelationId, RelationType
from core.interfaces.repositories import IMemberRelationRepository

logger = logging.getLogger(__name__)


class MemberRelationService:
    """Service for member relation operations"""

    def __init__(self, member_relation_repo: IMemberRelationRepository):
        self.member_relation_repo = member_relation_repo

    async def get_all_relationship(self, from_id: MemberId) -> List[MemberId]:
        """Every outgoing relation target, any type"""
        return await self.member_relation_repo.find_by_from_id(from_id)

    async def get_friend_relation_ids(self, from_id: MemberId) -> List[MemberId]:
        return await self.member_relation_repo.find_friends_by_from_id(from_id)

    async def get_accompany_relation_ids(self, from_id: MemberId) -> List[MemberId]:
        return await self.member_relation_repo.find_accompany_by_from_id(from_id)

    async def is_friend(self, from_id: MemberId, to_id: MemberId) -> bool:
        return await self.member_relation_repo.is_friend(from_id, to_id)

    async def find_random_of_friend(self, member_id: MemberId, limit: int) -> List[MemberId]:
        return await self.member_relation_repo.find_random_of_friend(member_id, limit)

    async def find_random_of_accompany(self, member_id: MemberId, limit: int) -> List[MemberId]:
        return await self.member_relation_repo.find_random_of_accompany(member_id, limit)

    async def create_relation(
        self,
        from_id: MemberId,
        to_id: MemberId,
        relation: RelationType = RelationType.ACCOMPANY,
    ) -> MemberRelationId:
        """Create a relation for a new ordered pair (ACCOMPANY unless told otherwise)"""
        if from_id == to_id:
            raise SelfRelationError(member_id=from_id)

        existing = await self.member_relation_repo.find_by_from_id_and_to_id(from_id, to_id)
        if existing:
            raise RelationAlreadyExistsError(
                from_id=from_id, to_id=to_id, relation=existing.relation.value
            )

        saved = await self.member_relation_repo.save(MemberRelation.create(from_id, to_id, relation))
        logger.debug(f"[RELATION] Created {relation.value} relation {from_id} -> {to_id}")
        return saved.id

    async def update_relation_to_friend(self, from_id: MemberId, to_id: MemberId) -> MemberRelationId:
        """
        Promote ACCOMPANY -> FRIEND.
        Promoting an existing FRIEND is a caller bug (duplicate follow) and raises.
        """
        relation = await self.member_relation_repo.find_by_from_id_and_to_id(from_id, to_id)
        if not relation:
            raise FriendNotFoundError(from_id=from_id, to_id=to_id)
        if relation.is_friend:
            raise AlreadyFriendError(from_id=from_id, to_id=to_id)

        saved = await self.member_relation_repo.save(relation.update_to_friend())
        logger.info(f"[RELATION] {from_id} -> {to_id} promoted to FRIEND")
        return saved.id
