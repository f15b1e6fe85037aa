"""
Files facade.
"""

from __future__ import annotations

from groqkit.core.multipart import FilePart, build_multipart
from groqkit.models.files import FileDeleteResponse, FileList, FileObject, FileUploadRequest
from groqkit.resources.base import APIResource, read_file_source
from groqkit.types import Result

DEFAULT_UPLOAD_NAME = "uploaded_file"


class FilesResource(APIResource):
    """File list/upload/retrieve/delete/content operations."""

    def list(self) -> Result[FileList]:
        return self._client.get(self._path("files"), FileList)

    def upload(self, request: FileUploadRequest) -> Result[FileObject]:
        """Upload a file as multipart/form-data.

        Fields are sent in the order ``purpose``, ``file``.

        Raises:
            ValidationError: If purpose or file is missing, or a path does not exist
            EncodingError: If the file content is empty
        """
        self._require_request(request, FileUploadRequest)
        self._require_text(request.purpose, "Purpose", "purpose")
        self._require_file(request.file, "File content")

        content, filename = read_file_source(request.file, request.filename, DEFAULT_UPLOAD_NAME)
        payload = build_multipart([
            ("purpose", request.purpose),
            ("file", FilePart(filename, content)),
        ])
        return self._client.post_multipart(self._path("files"), payload, FileObject)

    def retrieve(self, file_id: str) -> Result[FileObject]:
        self._require_text(file_id, "File ID", "file_id")
        return self._client.get(self._path("files", file_id), FileObject)

    def delete(self, file_id: str) -> Result[FileDeleteResponse]:
        self._require_text(file_id, "File ID", "file_id")
        return self._client.delete(self._path("files", file_id), FileDeleteResponse)

    def content(self, file_id: str) -> Result[str]:
        """Download a file's content as text."""
        self._require_text(file_id, "File ID", "file_id")
        return self._client.get(self._path("files", file_id, "content"), str)

    def upload_text(self, content: str, filename: str, purpose: str) -> Result[FileObject]:
        """Upload literal text content under ``filename``."""
        self._require_text(content, "Content", "file")
        self._require_text(filename, "Filename", "filename")
        self._require_text(purpose, "Purpose", "purpose")
        return self.upload(FileUploadRequest(file=content.encode("utf-8"), purpose=purpose, filename=filename))

    def upload_json(self, json_content: str, filename: str, purpose: str) -> Result[FileObject]:
        """Upload JSON text, appending ``.json`` to the filename when missing."""
        self._require_text(json_content, "JSON content", "file")
        self._require_text(filename, "Filename", "filename")
        if not filename.lower().endswith(".json"):
            filename = filename + ".json"
        return self.upload_text(json_content, filename, purpose)
