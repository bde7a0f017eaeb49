"""Profile routes."""

from datetime import date
from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from connector.adapter.error import ProviderError
from connector.application.usecase.profile import (
    AddEducationRequest,
    AddEducationUseCase,
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
    GetGitHubReposRequest,
    GetGitHubReposUseCase,
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByHandleRequest,
    GetProfileByHandleUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    ProfileView,
    RemoveEducationRequest,
    RemoveEducationUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from connector.domain.error import NotFoundError, ValidationFailedError
from connector.interface.api.security import CurrentUser
from connector.interface.api.validation import (
    fill_missing,
    optional_text,
    required_text,
    valid_handle,
)
from connector.interface.error import field_errors, http_error, server_error

router = APIRouter(prefix="/api/profile", tags=["profile"], route_class=DishkaRoute)

NO_PROFILE = "There is no profile for this user"


class UpsertProfileAPIRequest(BaseModel):
    """API request for creating or updating the caller's profile.

    `skills` is a comma-separated string.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str | None = Field(default=None, validate_default=True)
    skills: str | None = Field(default=None, validate_default=True)
    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = Field(default=None, alias="githubusername")
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return required_text(v, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def check_skills(cls, v):
        return required_text(v, "Skills is required")

    @field_validator("handle", mode="before")
    @classmethod
    def check_handle(cls, v):
        return valid_handle(v)

    @field_validator(
        "company",
        "website",
        "location",
        "bio",
        "github_username",
        "youtube",
        "twitter",
        "facebook",
        "linkedin",
        "instagram",
        mode="before",
    )
    @classmethod
    def drop_blank(cls, v):
        return optional_text(v)


class ExperienceAPIRequest(BaseModel):
    """API request for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, validate_default=True)
    company: str | None = Field(default=None, validate_default=True)
    location: str | None = None
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def fill_required(cls, data):
        return fill_missing(data, {"from": "from_date"})

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v):
        return required_text(v, "Title is required")

    @field_validator("company", mode="before")
    @classmethod
    def check_company(cls, v):
        return required_text(v, "Company is required")

    @field_validator("from_date", mode="before")
    @classmethod
    def check_from(cls, v):
        if isinstance(v, date):
            return v
        return required_text(v, "From date is required")

    @field_validator("location", "to_date", "description", mode="before")
    @classmethod
    def drop_blank(cls, v):
        return optional_text(v)


class EducationAPIRequest(BaseModel):
    """API request for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str | None = Field(default=None, validate_default=True)
    course: str | None = None
    field_of_study: str | None = Field(default=None, alias="fieldOfStudy")
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def fill_required(cls, data):
        return fill_missing(
            data, {"fieldOfStudy": "field_of_study", "from": "from_date"}
        )

    @field_validator("school", mode="before")
    @classmethod
    def check_school(cls, v):
        return required_text(v, "School is required")

    @field_validator("field_of_study", mode="before")
    @classmethod
    def check_field_of_study(cls, v):
        return required_text(v, "Field of study is required")

    @field_validator("from_date", mode="before")
    @classmethod
    def check_from(cls, v):
        if isinstance(v, date):
            return v
        return required_text(v, "From date is required")

    @field_validator("course", "to_date", "description", mode="before")
    @classmethod
    def drop_blank(cls, v):
        return optional_text(v)


@router.get("/me", response_model=ProfileView)
async def get_my_profile(
    user_id: CurrentUser,
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
) -> ProfileView:
    """Get the caller's own profile."""
    try:
        return await get_my_profile_use_case.execute(
            GetMyProfileRequest(user_id=user_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_400_BAD_REQUEST, NO_PROFILE)
    except Exception as e:
        logfire.error("Unexpected error loading own profile", error=str(e))
        raise server_error()


@router.get("", response_model=list[ProfileView])
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
) -> list[ProfileView]:
    """List every profile."""
    try:
        return await list_profiles_use_case.execute()
    except Exception as e:
        logfire.error("Unexpected error listing profiles", error=str(e))
        raise server_error()


@router.get("/handle/{handle}", response_model=ProfileView)
async def get_profile_by_handle(
    handle: str,
    get_profile_by_handle_use_case: FromDishka[GetProfileByHandleUseCase],
) -> ProfileView:
    """Get a profile by its public handle."""
    try:
        return await get_profile_by_handle_use_case.execute(
            GetProfileByHandleRequest(handle=handle)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, NO_PROFILE)
    except Exception as e:
        logfire.error("Unexpected error loading profile by handle", error=str(e))
        raise server_error()


@router.get("/user/{user_id}", response_model=ProfileView)
async def get_profile_by_user(
    user_id: str,
    get_profile_by_user_use_case: FromDishka[GetProfileByUserUseCase],
) -> ProfileView:
    """Get a profile by its owner's user ID."""
    try:
        return await get_profile_by_user_use_case.execute(
            GetProfileByUserRequest(user_id=user_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Profile not found")
    except Exception as e:
        logfire.error("Unexpected error loading profile by user", error=str(e))
        raise server_error()


@router.post("", response_model=ProfileView)
async def upsert_profile(
    user_id: CurrentUser,
    request: UpsertProfileAPIRequest,
    upsert_profile_use_case: FromDishka[UpsertProfileUseCase],
) -> ProfileView:
    """Create the caller's profile or update the supplied fields."""
    try:
        return await upsert_profile_use_case.execute(
            UpsertProfileRequest(
                user_id=user_id, **request.model_dump(exclude_none=True)
            )
        )
    except ValidationFailedError as e:
        logfire.warn("Profile validation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=field_errors(*e.errors)
        )
    except Exception as e:
        logfire.error("Unexpected error saving profile", error=str(e))
        raise server_error()


@router.delete("", response_model=DeleteAccountResponse)
async def delete_account(
    user_id: CurrentUser,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
) -> DeleteAccountResponse:
    """Delete the caller's profile and account. Their posts remain."""
    try:
        return await delete_account_use_case.execute(
            DeleteAccountRequest(user_id=user_id)
        )
    except Exception as e:
        logfire.error("Unexpected error deleting account", error=str(e))
        raise server_error()


@router.put("/experience", response_model=ProfileView)
async def add_experience(
    user_id: CurrentUser,
    request: ExperienceAPIRequest,
    add_experience_use_case: FromDishka[AddExperienceUseCase],
) -> ProfileView:
    """Add a job at the head of the caller's experience list."""
    try:
        return await add_experience_use_case.execute(
            AddExperienceRequest(user_id=user_id, **request.model_dump())
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, NO_PROFILE)
    except Exception as e:
        logfire.error("Unexpected error adding experience", error=str(e))
        raise server_error()


@router.delete("/experience/{exp_id}", response_model=ProfileView)
async def remove_experience(
    exp_id: str,
    user_id: CurrentUser,
    remove_experience_use_case: FromDishka[RemoveExperienceUseCase],
) -> ProfileView:
    """Remove a job from the caller's experience list."""
    try:
        return await remove_experience_use_case.execute(
            RemoveExperienceRequest(user_id=user_id, experience_id=exp_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, NO_PROFILE)
    except Exception as e:
        logfire.error("Unexpected error removing experience", error=str(e))
        raise server_error()


@router.put("/education", response_model=ProfileView)
async def add_education(
    user_id: CurrentUser,
    request: EducationAPIRequest,
    add_education_use_case: FromDishka[AddEducationUseCase],
) -> ProfileView:
    """Add a school at the head of the caller's education list."""
    try:
        return await add_education_use_case.execute(
            AddEducationRequest(user_id=user_id, **request.model_dump())
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, NO_PROFILE)
    except Exception as e:
        logfire.error("Unexpected error adding education", error=str(e))
        raise server_error()


@router.delete("/education/{edu_id}", response_model=ProfileView)
async def remove_education(
    edu_id: str,
    user_id: CurrentUser,
    remove_education_use_case: FromDishka[RemoveEducationUseCase],
) -> ProfileView:
    """Remove a school from the caller's education list."""
    try:
        return await remove_education_use_case.execute(
            RemoveEducationRequest(user_id=user_id, education_id=edu_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, NO_PROFILE)
    except Exception as e:
        logfire.error("Unexpected error removing education", error=str(e))
        raise server_error()


@router.get("/github/{username}")
async def get_github_repos(
    username: str,
    get_github_repos_use_case: FromDishka[GetGitHubReposUseCase],
) -> list[dict[str, Any]]:
    """List the developer's public GitHub repositories."""
    try:
        return await get_github_repos_use_case.execute(
            GetGitHubReposRequest(username=username)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, "No Github profile found")
    except ProviderError as e:
        logfire.error("GitHub unavailable", username=username, error=str(e))
        raise server_error()
    except Exception as e:
        logfire.error("Unexpected error fetching GitHub repositories", error=str(e))
        raise server_error()
