"""
Tests for the endpoint facades in groqkit.resources
"""
import pytest

from groqkit.exceptions import ValidationError
from groqkit.models import (
    BatchCreateRequest,
    ChatCompletionRequest,
    ChatMessage,
    EmbeddingRequest,
    FileUploadRequest,
    SpeechRequest,
    ToolChoice,
    TranscriptionRequest,
)
from groqkit.resources.base import APIResource, read_file_source


COMPLETION = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "llama-3.1-8b-instant",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "Hello!"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
}

BATCH = {
    "id": "batch_1",
    "object": "batch",
    "endpoint": "/v1/chat/completions",
    "input_file_id": "file_1",
    "completion_window": "24h",
    "status": "validating",
    "request_counts": {"total": 10, "completed": 4, "failed": 1},
}

FILE = {"id": "file_1", "object": "file", "bytes": 12, "filename": "in.jsonl", "purpose": "batch"}


class TestAPIResourcePaths:
    def test_path_under_api_prefix(self):
        assert APIResource._path("models") == "/openai/v1/models"

    def test_segments_are_percent_encoded(self):
        assert APIResource._path("files", "a/b c") == "/openai/v1/files/a%2Fb%20c"


class TestReadFileSource:
    def test_bytes(self):
        assert read_file_source(b"abc", None, "default.bin") == (b"abc", "default.bin")

    def test_literal_string(self):
        assert read_file_source("hello", "notes.txt", "x") == (b"hello", "notes.txt")

    def test_absolute_path_string(self, tmp_path):
        target = tmp_path / "input.jsonl"
        target.write_bytes(b'{"a":1}\n')

        assert read_file_source(str(target), None, "x") == (b'{"a":1}\n', "input.jsonl")

    def test_path_object(self, tmp_path):
        target = tmp_path / "speech.wav"
        target.write_bytes(b"RIFF")

        assert read_file_source(target, "renamed.wav", "x") == (b"RIFF", "renamed.wav")

    def test_missing_path(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            read_file_source(str(tmp_path / "missing.jsonl"), None, "x")

    def test_windows_style_path_is_treated_as_path(self):
        with pytest.raises(ValidationError, match="does not exist"):
            read_file_source("C:\\data\\missing.jsonl", None, "x")


class TestChatResource:
    """Test suite for the chat facade."""

    def test_create(self, client, mock_server):
        mock_server.enqueue_json(COMPLETION)
        request = ChatCompletionRequest(
            model="llama-3.1-8b-instant",
            messages=[ChatMessage.system("Be brief."), ChatMessage.user("Hi")],
            temperature=0.2,
            tool_choice=ToolChoice.auto(),
        )

        result = client.chat.create(request)

        assert result.ok
        assert result.data.content == "Hello!"
        assert result.data.usage.total_tokens == 7
        recorded = mock_server.last_request
        assert recorded.method == "POST"
        assert recorded.path == "/openai/v1/chat/completions"
        assert recorded.json() == {
            "model": "llama-3.1-8b-instant",
            "messages": [
                {"role": "system", "content": "Be brief."},
                {"role": "user", "content": "Hi"},
            ],
            "temperature": 0.2,
            "tool_choice": "auto",
        }

    def test_create_simple(self, client, mock_server):
        mock_server.enqueue_json(COMPLETION)

        result = client.chat.create_simple("llama-3.1-8b-instant", "Hi")

        assert result.data.content == "Hello!"
        assert mock_server.last_request.json()["messages"] == [{"role": "user", "content": "Hi"}]

    @pytest.mark.parametrize("request_", [
        None,
        ChatCompletionRequest(model="", messages=[ChatMessage.user("Hi")]),
        ChatCompletionRequest(model="m", messages=[]),
        ChatCompletionRequest(model="m", messages=None),
    ])
    def test_invalid_requests(self, client, mock_server, request_):
        with pytest.raises(ValidationError):
            client.chat.create(request_)

        assert mock_server.requests == []

    def test_create_simple_blank_message(self, client, mock_server):
        with pytest.raises(ValidationError):
            client.chat.create_simple("m", "  ")
        assert mock_server.requests == []


class TestEmbeddingsResource:
    def test_create(self, client, mock_server):
        mock_server.enqueue_json({
            "object": "list",
            "data": [{"object": "embedding", "embedding": [0.1, 0.2], "index": 0}],
            "model": "nomic-embed-text-v1_5",
        })

        result = client.embeddings.create(EmbeddingRequest(model="nomic-embed-text-v1_5", input=["hello"]))

        assert result.data.data[0].embedding == [0.1, 0.2]
        assert mock_server.last_request.path == "/openai/v1/embeddings"
        assert mock_server.last_request.json() == {"model": "nomic-embed-text-v1_5", "input": ["hello"]}

    def test_create_for_single_string(self, client, mock_server):
        client.embeddings.create_for_input("m", "hello")
        assert mock_server.last_request.json()["input"] == ["hello"]

    @pytest.mark.parametrize("input_", [[], ["ok", " "], ""])
    def test_create_for_invalid_input(self, client, mock_server, input_):
        with pytest.raises(ValidationError):
            client.embeddings.create_for_input("m", input_)
        assert mock_server.requests == []

    def test_empty_model(self, client):
        with pytest.raises(ValidationError, match="Model"):
            client.embeddings.create(EmbeddingRequest(model=" ", input=["x"]))


class TestModelsResource:
    def test_list(self, client, mock_server):
        mock_server.enqueue_json({"object": "list", "data": [{"id": "a"}, {"id": "b"}]})

        result = client.models.list()

        assert [m.id for m in result.data.data] == ["a", "b"]

    def test_retrieve_encodes_id(self, client, mock_server):
        mock_server.enqueue_json({"id": "org/model", "owned_by": "Meta"})

        result = client.models.retrieve("org/model")

        assert result.data.owned_by == "Meta"
        assert mock_server.last_request.path == "/openai/v1/models/org%2Fmodel"

    def test_retrieve_utf8_error_text(self, client, mock_server):
        mock_server.enqueue(400, "ungültig", {"Content-Type": "text/plain"})

        result = client.models.retrieve("m")

        assert not result.ok
        assert result.status_code == 400
        assert result.message == "ungültig"

    def test_retrieve_blank_id(self, client, mock_server):
        with pytest.raises(ValidationError):
            client.models.retrieve("")
        assert mock_server.requests == []


class TestBatchesResource:
    def test_create(self, client, mock_server):
        mock_server.enqueue_json(BATCH)

        result = client.batches.create(BatchCreateRequest(input_file_id="file_1", endpoint="/v1/chat/completions"))

        assert result.data.request_counts.completed == 4
        assert mock_server.last_request.path == "/openai/v1/batches"
        assert mock_server.last_request.json() == {
            "input_file_id": "file_1",
            "endpoint": "/v1/chat/completions",
            "completion_window": "24h",
        }

    def test_retrieve(self, client, mock_server):
        mock_server.enqueue_json(BATCH)

        result = client.batches.retrieve("batch_1")

        assert result.data.status == "validating"
        assert mock_server.last_request.path == "/openai/v1/batches/batch_1"

    def test_list_with_query(self, client, mock_server):
        mock_server.enqueue_json({"object": "list", "data": [BATCH]})

        result = client.batches.list({"limit": 1})

        assert result.data.data[0].id == "batch_1"
        assert mock_server.last_request.path == "/openai/v1/batches?limit=1"

    def test_cancel_posts_empty_body(self, client, mock_server):
        mock_server.enqueue_json(dict(BATCH, status="cancelling"))

        result = client.batches.cancel("batch_1")

        assert result.data.status == "cancelling"
        recorded = mock_server.last_request
        assert recorded.method == "POST"
        assert recorded.path == "/openai/v1/batches/batch_1/cancel"
        assert recorded.body == b""

    @pytest.mark.parametrize("request_", [
        BatchCreateRequest(input_file_id="", endpoint="/v1/chat/completions"),
        BatchCreateRequest(input_file_id="file_1", endpoint=None),
    ])
    def test_invalid_create(self, client, mock_server, request_):
        with pytest.raises(ValidationError):
            client.batches.create(request_)
        assert mock_server.requests == []

    def test_blank_batch_id(self, client):
        with pytest.raises(ValidationError):
            client.batches.cancel(" ")


class TestAudioResource:
    def test_create_speech_returns_bytes(self, client, mock_server):
        mock_server.enqueue(200, b"RIFF\x00\x00WAVE", {"Content-Type": "audio/wav"})

        result = client.audio.create_speech(
            SpeechRequest(model="playai-tts", input="Hello", voice="Fritz-PlayAI", response_format="wav")
        )

        assert result.data == b"RIFF\x00\x00WAVE"
        assert mock_server.last_request.path == "/openai/v1/audio/speech"

    def test_speak_uses_defaults(self, client, mock_server):
        mock_server.enqueue(200, b"RIFF")

        client.audio.speak("Hello", "Fritz-PlayAI")

        assert mock_server.last_request.json() == {
            "model": "playai-tts",
            "input": "Hello",
            "voice": "Fritz-PlayAI",
            "response_format": "wav",
        }

    @pytest.mark.parametrize("request_", [
        SpeechRequest(model="playai-tts", input="", voice="Fritz-PlayAI"),
        SpeechRequest(model="playai-tts", input="Hello", voice=None),
        SpeechRequest(model=None, input="Hello", voice="Fritz-PlayAI"),
    ])
    def test_invalid_speech(self, client, mock_server, request_):
        with pytest.raises(ValidationError):
            client.audio.create_speech(request_)
        assert mock_server.requests == []

    def test_create_transcription_is_multipart(self, client, mock_server):
        mock_server.enqueue_json({"text": "hello world"})

        result = client.audio.create_transcription(
            TranscriptionRequest(model="whisper-large-v3", file=b"RIFFdata", filename="clip.wav", language="en")
        )

        assert result.data.text == "hello world"
        recorded = mock_server.last_request
        assert recorded.path == "/openai/v1/audio/transcriptions"
        assert recorded.headers["Content-Type"].startswith("multipart/form-data")
        body = recorded.body
        assert body.index(b'name="model"') < body.index(b'name="file"') < body.index(b'name="language"')
        assert b"Content-Type: audio/wav" in body
        assert b'name="prompt"' not in body

    def test_transcription_requires_file(self, client, mock_server):
        with pytest.raises(ValidationError, match="File data"):
            client.audio.create_transcription(TranscriptionRequest(model="whisper-large-v3"))
        assert mock_server.requests == []


class TestFilesResource:
    def test_upload_bytes(self, client, mock_server):
        mock_server.enqueue_json(FILE)

        result = client.files.upload(FileUploadRequest(file=b'{"a":1}\n', purpose="batch", filename="in.jsonl"))

        assert result.data.id == "file_1"
        assert result.data.bytes == 12
        recorded = mock_server.last_request
        assert recorded.path == "/openai/v1/files"
        assert recorded.body.index(b'name="purpose"') < recorded.body.index(b'name="file"')
        assert b'filename="in.jsonl"' in recorded.body
        assert b"Content-Type: application/jsonl" in recorded.body
        assert recorded.headers["Authorization"] == "Bearer k"

    def test_upload_from_path(self, client, mock_server, tmp_path):
        target = tmp_path / "requests.jsonl"
        target.write_bytes(b'{"custom_id":"1"}\n')

        client.files.upload(FileUploadRequest(file=str(target), purpose="batch"))

        assert b'filename="requests.jsonl"' in mock_server.last_request.body
        assert b'{"custom_id":"1"}' in mock_server.last_request.body

    def test_upload_literal_string_uses_default_name(self, client, mock_server):
        client.files.upload(FileUploadRequest(file="raw content", purpose="batch"))

        assert b'filename="uploaded_file"' in mock_server.last_request.body
        assert b"raw content" in mock_server.last_request.body

    def test_upload_missing_path(self, client, mock_server, tmp_path):
        with pytest.raises(ValidationError):
            client.files.upload(FileUploadRequest(file=str(tmp_path / "nope.jsonl"), purpose="batch"))
        assert mock_server.requests == []

    @pytest.mark.parametrize("request_", [
        FileUploadRequest(file=b"x", purpose=""),
        FileUploadRequest(file=None, purpose="batch"),
        FileUploadRequest(file="  ", purpose="batch"),
    ])
    def test_invalid_upload(self, client, mock_server, request_):
        with pytest.raises(ValidationError):
            client.files.upload(request_)
        assert mock_server.requests == []

    def test_upload_text(self, client, mock_server):
        client.files.upload_text("line one", "notes.txt", "batch")

        body = mock_server.last_request.body
        assert b'filename="notes.txt"' in body
        assert b"Content-Type: text/plain" in body

    def test_upload_json_appends_suffix(self, client, mock_server):
        client.files.upload_json('{"a":1}', "payload", "batch")

        body = mock_server.last_request.body
        assert b'filename="payload.json"' in body
        assert b"Content-Type: application/json" in body

    def test_upload_json_keeps_existing_suffix(self, client, mock_server):
        client.files.upload_json('{"a":1}', "payload.JSON", "batch")
        assert b'filename="payload.JSON"' in mock_server.last_request.body

    def test_list(self, client, mock_server):
        mock_server.enqueue_json({"object": "list", "data": [FILE]})

        result = client.files.list()

        assert result.data.data[0].filename == "in.jsonl"

    def test_retrieve(self, client, mock_server):
        mock_server.enqueue_json(FILE)

        client.files.retrieve("file_1")

        assert mock_server.last_request.path == "/openai/v1/files/file_1"

    def test_delete(self, client, mock_server):
        mock_server.enqueue_json({"id": "file_1", "object": "file", "deleted": True})

        result = client.files.delete("file_1")

        assert result.data.deleted is True
        assert mock_server.last_request.method == "DELETE"

    def test_content_is_raw_text(self, client, mock_server):
        mock_server.enqueue(200, '{"custom_id":"1"}\n{"custom_id":"2"}\n', {"Content-Type": "text/plain"})

        result = client.files.content("file_1")

        assert result.data == '{"custom_id":"1"}\n{"custom_id":"2"}\n'
        assert mock_server.last_request.path == "/openai/v1/files/file_1/content"

    def test_content_utf8_without_charset(self, client, mock_server):
        mock_server.enqueue(200, "héllo ✓", {"Content-Type": "text/plain"})

        result = client.files.content("file_1")

        assert result.data == "héllo ✓"

    def test_blank_file_id(self, client, mock_server):
        with pytest.raises(ValidationError):
            client.files.delete("")
        assert mock_server.requests == []
