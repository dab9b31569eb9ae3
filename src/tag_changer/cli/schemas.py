"""Pydantic schemas for JSON output validation.

All --json output from CLI commands uses these models, which give every
command the same, validated response structure:
- show: TagResponse or ErrorResponse
- set: WriteSuccessResponse or ErrorResponse
- strip: StripResponse or ErrorResponse
- genres: GenreListResponse
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "no_tag")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "no_tag", "unsupported_genre", "write_failed"],
    )
    message: str = Field(description="Human-readable error description")


class TagModel(BaseModel):
    """The fields of a tag as stored on disk."""

    title: str = Field(max_length=30)
    artist: str = Field(max_length=30)
    album: str = Field(max_length=30)
    year: str = Field(max_length=4)
    comment: str = Field(max_length=30)
    genre: int = Field(ge=0, le=255, description="Raw genre byte")
    genre_name: str = Field(description="Display name of the genre")

    @classmethod
    def from_tag(cls, tag) -> "TagModel":
        return cls(**tag.to_dict())


class TagResponse(BaseModel):
    """Response for a successful tag read."""

    status: Literal["success"] = "success"
    file: str = Field(description="Path to the file that was read")
    tag: TagModel


class WriteSuccessResponse(BaseModel):
    """Response for a successful tag write.

    Attributes:
        file: Path to the rewritten file
        tag: The tag as stored (after truncation)
        truncated: Fields that were longer than their slot
        backup: Path to the backup, if one was made
    """

    status: Literal["success"] = "success"
    file: str = Field(description="Path to the rewritten file")
    tag: TagModel
    truncated: List[str] = Field(default_factory=list)
    atomic: bool = Field(description="Whether the file was replaced atomically")
    backup: Optional[str] = Field(default=None, description="Path to the backup file")


class StripResponse(BaseModel):
    """Response for a tag removal."""

    status: Literal["success"] = "success"
    file: str = Field(description="Path to the file")
    removed: bool = Field(description="False if the file had no tag")
    backup: Optional[str] = Field(default=None, description="Path to the backup file")


class GenreModel(BaseModel):
    code: int = Field(ge=0, le=255)
    name: str


class GenreListResponse(BaseModel):
    status: Literal["success"] = "success"
    genres: List[GenreModel]
