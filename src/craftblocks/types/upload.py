"""Type definitions for upload links."""

from pydantic import BaseModel, ConfigDict, Field


class UploadLink(BaseModel):
    """
    Pair of URLs returned by ``/upload-link``.

    ``upload_url`` accepts a single PUT and expires after about an hour.
    ``raw_url`` is what a block should reference once the file is uploaded.
    """

    model_config = ConfigDict(populate_by_name=True)

    upload_url: str = Field(..., alias="uploadUrl", description="Presigned upload URL")
    raw_url: str = Field(..., alias="rawUrl", description="Stable URL of the uploaded object")
