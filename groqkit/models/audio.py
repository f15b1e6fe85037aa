"""
Audio records: text-to-speech and transcription.
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

from dataclasses_json import Undefined, dataclass_json

DEFAULT_SPEECH_MODEL = "playai-tts"
DEFAULT_SPEECH_FORMAT = "wav"


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class SpeechRequest:
    model: Optional[str] = None
    input: Optional[str] = None
    voice: Optional[str] = None
    response_format: Optional[str] = None
    speed: Optional[float] = None


@dataclass
class TranscriptionRequest:
    """Audio transcription, sent as multipart/form-data.

    ``file`` is raw audio bytes or a path to an audio file.
    """
    model: Optional[str] = None
    file: Union[bytes, str, os.PathLike, None] = None
    filename: Optional[str] = None
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None
    language: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Transcription:
    text: Optional[str] = None
