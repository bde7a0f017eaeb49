"""In-memory profile repository for testing."""

from typing import List, Optional

from connector.domain.model.profile import Profile
from connector.domain.repository.profile import ProfileRepository
from connector.domain.value import Handle, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Profiles are keyed by owner, mirroring the unique user_id column.
    """

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user."""
        return self._profiles.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[Profile]:
        """Find a profile by handle."""
        for profile in self._profiles.values():
            if profile.handle == handle:
                return profile
        return None

    async def find_all(self) -> List[Profile]:
        """List every profile in insertion order."""
        return list(self._profiles.values())

    async def save(self, profile: Profile) -> Profile:
        """Save or replace a profile."""
        self._profiles[profile.user_id] = profile
        return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user."""
        return self._profiles.pop(user_id, None) is not None
