"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from connector.domain.model.profile import Profile
from connector.domain.value import Handle, UserId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    A user owns at most one profile, so profiles are looked up by owner.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[Profile]:
        """Find a profile by its public handle.

        Args:
            handle: Profile handle

        Returns:
            The first matching profile, None if there is none
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """List every profile, oldest first."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or replace).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            True if a profile was deleted, False if none existed
        """
        pass
