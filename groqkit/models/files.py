"""
File records.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Union

from dataclasses_json import Undefined, dataclass_json


@dataclass
class FileUploadRequest:
    """File upload, sent as multipart/form-data.

    ``file`` is raw bytes, a path, or a string. A string that is an
    absolute path (POSIX ``/...`` or Windows ``X:\\...``) is read from disk;
    any other string is uploaded as literal UTF-8 content.
    """
    file: Union[bytes, str, os.PathLike, None] = None
    purpose: Optional[str] = None
    filename: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class FileObject:
    id: Optional[str] = None
    object: Optional[str] = None
    bytes: Optional[int] = None
    created_at: Optional[int] = None
    filename: Optional[str] = None
    purpose: Optional[str] = None
    status: Optional[str] = None
    status_details: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class FileList:
    object: Optional[str] = None
    data: List[FileObject] = field(default_factory=list)


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class FileDeleteResponse:
    id: Optional[str] = None
    object: Optional[str] = None
    deleted: Optional[bool] = None
