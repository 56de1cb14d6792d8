"""
Supabase implementation of Member repository (read-only lookups).
"""

from typing import Optional, List
from core.domain.models import Member, MemberId
from core.interfaces.repositories import IMemberRepository
from infrastructure.database.supabase_client import get_supabase, run_sync


class SupabaseMemberRepository(IMemberRepository):
    """Supabase implementation of member repository"""

    def _to_model(self, data: dict) -> Member:
        return Member(
            id=data["id"],
            full_name=data.get("full_name"),
            created_at=data.get("created_at"),
        )

    @run_sync
    def _get_by_id_sync(self, member_id: MemberId) -> Optional[dict]:
        response = get_supabase().table("members").select("*").eq("id", member_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, member_id: MemberId) -> Optional[Member]:
        data = await self._get_by_id_sync(member_id)
        return self._to_model(data) if data else None

    @run_sync
    def _get_all_ids_sync(self) -> List[str]:
        response = get_supabase().table("members").select("id").order("created_at").execute()
        return [row["id"] for row in (response.data or [])]

    async def get_all_ids(self) -> List[MemberId]:
        return await self._get_all_ids_sync()
