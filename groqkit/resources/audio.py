"""
Audio facade: text-to-speech and transcription.
"""

from __future__ import annotations

from typing import List, Tuple

from groqkit.core.multipart import FilePart, build_multipart
from groqkit.models.audio import (
    DEFAULT_SPEECH_FORMAT,
    DEFAULT_SPEECH_MODEL,
    SpeechRequest,
    Transcription,
    TranscriptionRequest,
)
from groqkit.resources.base import APIResource, read_file_source
from groqkit.types import Result


class AudioResource(APIResource):
    """Speech synthesis and transcription."""

    def create_speech(self, request: SpeechRequest) -> Result[bytes]:
        """Synthesize speech. The result data is the raw audio bytes.

        Raises:
            ValidationError: If model, input text or voice is empty
        """
        self._require_request(request, SpeechRequest)
        self._require_text(request.model, "Model", "model")
        self._require_text(request.input, "Input text", "input")
        self._require_text(request.voice, "Voice", "voice")
        return self._client.post(self._path("audio", "speech"), request, bytes)

    def speak(self, text: str, voice: str, model: str = DEFAULT_SPEECH_MODEL) -> Result[bytes]:
        request = SpeechRequest(model=model, input=text, voice=voice, response_format=DEFAULT_SPEECH_FORMAT)
        return self.create_speech(request)

    def create_transcription(self, request: TranscriptionRequest) -> Result[Transcription]:
        """Transcribe an audio file, uploaded as multipart/form-data.

        Raises:
            ValidationError: If the model or the file is missing
            EncodingError: If the audio content is empty
        """
        self._require_request(request, TranscriptionRequest)
        self._require_text(request.model, "Model", "model")
        self._require_file(request.file, "File data")

        content, filename = read_file_source(request.file, request.filename, "audio.wav")
        fields: List[Tuple[str, object]] = [
            ("model", request.model),
            ("file", FilePart(filename, content)),
        ]
        for name in ("prompt", "response_format", "temperature", "language"):
            value = getattr(request, name)
            if value is not None:
                fields.append((name, value))

        payload = build_multipart(fields)
        return self._client.post_multipart(self._path("audio", "transcriptions"), payload, Transcription)
