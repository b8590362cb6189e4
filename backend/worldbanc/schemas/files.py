"""File listing schemas, shaped for the landing page client."""

from pydantic import BaseModel, ConfigDict, Field


class FileEntry(BaseModel):
    """One child of a directory (or one volume) at listing time."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    is_directory: bool = Field(alias="isDirectory")
    size: str = "-"
    updated: str = "-"


class Listing(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    files: list[FileEntry]
    parent_path: str = Field(alias="parentPath")
    host_name: str = Field(alias="hostName")


class ErrorResponse(BaseModel):
    error: str
