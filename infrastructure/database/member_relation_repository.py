"""
Supabase implementation of MemberRelation repository.
"""

from typing import Optional, List
from core.domain.models import MemberId, MemberRelation, RelationType
from core.interfaces.repositories import IMemberRelationRepository
from infrastructure.database.supabase_client import get_supabase, run_sync


class SupabaseMemberRelationRepository(IMemberRelationRepository):
    """Supabase implementation of member relation repository"""

    table = "member_relations"

    def _to_model(self, data: dict) -> MemberRelation:
        """Convert database row to MemberRelation model"""
        return MemberRelation(
            id=data["id"],
            from_id=data["from_id"],
            to_id=data["to_id"],
            relation=RelationType(data["relation_type"]),
            last_updated_at=data.get("updated_at") or data.get("created_at"),
        )

    @run_sync
    def _find_to_ids_sync(self, from_id: MemberId, relation: Optional[RelationType]) -> List[str]:
        query = get_supabase().table(self.table).select("to_id").eq("from_id", from_id)
        if relation:
            query = query.eq("relation_type", relation.value)
        response = query.execute()
        return [row["to_id"] for row in (response.data or [])]

    async def find_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        return await self._find_to_ids_sync(from_id, None)

    async def find_friends_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        return await self._find_to_ids_sync(from_id, RelationType.FRIEND)

    async def find_accompany_by_from_id(self, from_id: MemberId) -> List[MemberId]:
        return await self._find_to_ids_sync(from_id, RelationType.ACCOMPANY)

    @run_sync
    def _is_friend_sync(self, from_id: MemberId, to_id: MemberId) -> bool:
        response = get_supabase().table(self.table).select("id")\
            .eq("from_id", from_id)\
            .eq("to_id", to_id)\
            .eq("relation_type", RelationType.FRIEND.value)\
            .execute()
        return len(response.data) > 0 if response.data else False

    async def is_friend(self, from_id: MemberId, to_id: MemberId) -> bool:
        return await self._is_friend_sync(from_id, to_id)

    @run_sync
    def _find_random_sync(self, member_id: MemberId, relation: RelationType, limit: int) -> List[str]:
        # ORDER BY random() LIMIT n runs server-side (see migrations/)
        response = get_supabase().rpc("find_random_relation_targets", {
            "p_from_id": member_id,
            "p_relation_type": relation.value,
            "p_limit": limit,
        }).execute()
        return [row["to_id"] for row in (response.data or [])]

    async def find_random_of_friend(self, member_id: MemberId, limit: int) -> List[MemberId]:
        return await self._find_random_sync(member_id, RelationType.FRIEND, limit)

    async def find_random_of_accompany(self, member_id: MemberId, limit: int) -> List[MemberId]:
        return await self._find_random_sync(member_id, RelationType.ACCOMPANY, limit)

    @run_sync
    def _find_by_pair_sync(self, from_id: MemberId, to_id: MemberId) -> Optional[dict]:
        response = get_supabase().table(self.table).select("*")\
            .eq("from_id", from_id)\
            .eq("to_id", to_id)\
            .execute()
        return response.data[0] if response.data else None

    async def find_by_from_id_and_to_id(self, from_id: MemberId, to_id: MemberId) -> Optional[MemberRelation]:
        data = await self._find_by_pair_sync(from_id, to_id)
        return self._to_model(data) if data else None

    @run_sync
    def _save_sync(self, relation: MemberRelation) -> dict:
        data = {
            "id": relation.id,
            "from_id": relation.from_id,
            "to_id": relation.to_id,
            "relation_type": relation.relation.value,
            "updated_at": relation.last_updated_at.isoformat() if relation.last_updated_at else None,
        }
        response = get_supabase().table(self.table).upsert(data, on_conflict="from_id,to_id").execute()
        return response.data[0]

    async def save(self, relation: MemberRelation) -> MemberRelation:
        data = await self._save_sync(relation)
        return self._to_model(data)
