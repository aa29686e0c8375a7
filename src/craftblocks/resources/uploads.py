"""
Upload link endpoint and the object-storage PUT that follows it.
"""

from typing import Any, BinaryIO

from .._decode import decode_model
from ..client_types import AsyncRequesterProtocol, RequesterProtocol
from ..types.upload import UploadLink
from ..uploads import FileUpload, normalize_file_upload
from ._call import APICall

DEFAULT_CONTENT_TYPE = "application/octet-stream"
STORAGE_OK_STATUSES = (200, 201, 204)

FileArg = FileUpload | tuple[str, BinaryIO | bytes] | tuple[str, BinaryIO | bytes, str | None]


def generate_link_call(file_name: str, mime_type: str | None) -> APICall:
    payload: dict[str, Any] = {"fileName": file_name}
    if mime_type is not None:
        payload["mimeType"] = mime_type
    return APICall("POST", "/upload-link", json_data=payload)


def _storage_request(file: FileArg, mime_type: str | None) -> tuple[bytes, dict[str, str]]:
    upload = normalize_file_upload(file)
    content_type = upload.content_type or mime_type or DEFAULT_CONTENT_TYPE
    return upload.read_bytes(), {"Content-Type": content_type}


class UploadsAPI:
    def __init__(self, requester: RequesterProtocol) -> None:
        self._requester = requester

    def generate_link(self, file_name: str, *, mime_type: str | None = None) -> UploadLink:
        """
        Request a presigned upload URL.

        ``file_name`` is required by the server. The returned ``upload_url`` expires
        after about an hour; files never referenced by a block are purged.
        """
        call = generate_link_call(file_name, mime_type)
        response = self._requester.request(call.method, call.path, **call.as_kwargs())
        return decode_model(response, UploadLink)

    def put(self, link: UploadLink, file: FileArg, *, mime_type: str | None = None) -> str:
        """Upload ``file`` to ``link.upload_url`` and return ``link.raw_url``."""
        content, headers = _storage_request(file, mime_type)
        self._requester.send_external(
            "PUT", link.upload_url, content=content, headers=headers, ok_statuses=STORAGE_OK_STATUSES
        )
        return link.raw_url


class AsyncUploadsAPI:
    def __init__(self, requester: AsyncRequesterProtocol) -> None:
        self._requester = requester

    async def generate_link(self, file_name: str, *, mime_type: str | None = None) -> UploadLink:
        call = generate_link_call(file_name, mime_type)
        response = await self._requester.request(call.method, call.path, **call.as_kwargs())
        return decode_model(response, UploadLink)

    async def put(self, link: UploadLink, file: FileArg, *, mime_type: str | None = None) -> str:
        content, headers = _storage_request(file, mime_type)
        await self._requester.send_external(
            "PUT", link.upload_url, content=content, headers=headers, ok_statuses=STORAGE_OK_STATUSES
        )
        return link.raw_url
