"""Pydantic models for the Wistia records the app reads and returns."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Thumbnail(BaseModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class Asset(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = Field(default=None, alias="fileSize")
    content_type: Optional[str] = Field(default=None, alias="contentType")
    url: str


class Video(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int
    hashed_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("hashed_id", "hashedId"),
        serialization_alias="hashed_id",
    )
    name: str = ""
    duration: Optional[float] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    status: Optional[str] = None
    description: str = ""
    assets: List[Asset] = Field(default_factory=list)
    thumbnail: Optional[Thumbnail] = None


class Project(BaseModel):
    """A Wistia project in the shape the create action returns.

    Counters and flags the API leaves out (or sends as null) become 0/False,
    so validating an already-mapped project gives back the same values.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    hashed_id: Optional[str] = Field(default=None, alias="hashedId")
    name: Optional[str] = None
    description: Optional[str] = None
    media_count: int = Field(default=0, alias="mediaCount")
    created: Optional[str] = None
    updated: Optional[str] = None
    public: bool = False
    anonymous_can_upload: bool = Field(default=False, alias="anonymousCanUpload")
    anonymous_can_download: bool = Field(default=False, alias="anonymousCanDownload")
    admin_email: Optional[str] = Field(default=None, alias="adminEmail")

    @field_validator("media_count", mode="before")
    @classmethod
    def _zero_when_missing(cls, value: Any) -> Any:
        return value or 0

    @field_validator("public", "anonymous_can_upload", "anonymous_can_download", mode="before")
    @classmethod
    def _false_when_missing(cls, value: Any) -> Any:
        return value or False

    def to_output(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True)
        if data.get("adminEmail") is None:
            data.pop("adminEmail", None)
        return data


class DropdownOption(BaseModel):
    id: Union[int, str]
    label: str

    @classmethod
    def from_project(cls, project: Dict[str, Any]) -> "DropdownOption":
        project_id = project.get("id")
        return cls(id=project_id, label=project.get("name") or f"Project {project_id}")
