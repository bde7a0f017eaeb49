"""Profile use cases."""

from .delete_account import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
)
from .education import (
    AddEducationRequest,
    AddEducationUseCase,
    RemoveEducationRequest,
    RemoveEducationUseCase,
)
from .experience import (
    AddExperienceRequest,
    AddExperienceUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
)
from .get_profile import (
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByHandleRequest,
    GetProfileByHandleUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
)
from .github_repos import GetGitHubReposRequest, GetGitHubReposUseCase
from .upsert_profile import UpsertProfileRequest, UpsertProfileUseCase
from .views import ProfileView

__all__ = [
    "AddEducationRequest",
    "AddEducationUseCase",
    "AddExperienceRequest",
    "AddExperienceUseCase",
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "DeleteAccountUseCase",
    "GetGitHubReposRequest",
    "GetGitHubReposUseCase",
    "GetMyProfileRequest",
    "GetMyProfileUseCase",
    "GetProfileByHandleRequest",
    "GetProfileByHandleUseCase",
    "GetProfileByUserRequest",
    "GetProfileByUserUseCase",
    "ListProfilesUseCase",
    "ProfileView",
    "RemoveEducationRequest",
    "RemoveEducationUseCase",
    "RemoveExperienceRequest",
    "RemoveExperienceUseCase",
    "UpsertProfileRequest",
    "UpsertProfileUseCase",
]
