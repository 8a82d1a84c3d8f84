from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthSnapshot(BaseModel):
    """Host uptime (seconds since boot) and hostname."""

    uptime: float = Field(ge=0)
    name: str


class UploadInput(BaseModel):
    """
    The part of an upload request the upload service reads.
    Anything else in the body is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    originalname: Optional[str] = None


class UploadResult(BaseModel):
    filename: Optional[str] = None
    status: Literal["uploaded"] = "uploaded"
