"""
Chat completion records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from dataclasses_json import Undefined, config, dataclass_json

from groqkit.models.common import Usage


class ToolChoiceMode(str, Enum):
    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"
    NAMED = "named"


class ToolChoice:
    """Which tool, if any, the model must call.

    Closed set of variants: ``none``, ``auto``, ``required`` and
    ``named(function_name)``. On the wire the first three are plain strings
    and ``named`` is ``{"type": "function", "function": {"name": ...}}``.
    """

    __slots__ = ("_mode", "_function_name")

    def __init__(self, mode: ToolChoiceMode, function_name: Optional[str] = None):
        mode = ToolChoiceMode(mode)
        if mode is ToolChoiceMode.NAMED:
            if not function_name or not function_name.strip():
                raise ValueError("A named tool choice needs a function name")
        elif function_name is not None:
            raise ValueError(f"Tool choice {mode.value!r} does not take a function name")
        object.__setattr__(self, "_mode", mode)
        object.__setattr__(self, "_function_name", function_name)

    def __setattr__(self, name, value):
        raise AttributeError("ToolChoice is immutable")

    @classmethod
    def none(cls) -> "ToolChoice":
        return cls(ToolChoiceMode.NONE)

    @classmethod
    def auto(cls) -> "ToolChoice":
        return cls(ToolChoiceMode.AUTO)

    @classmethod
    def required(cls) -> "ToolChoice":
        return cls(ToolChoiceMode.REQUIRED)

    @classmethod
    def named(cls, function_name: str) -> "ToolChoice":
        return cls(ToolChoiceMode.NAMED, function_name)

    @property
    def mode(self) -> ToolChoiceMode:
        return self._mode

    @property
    def function_name(self) -> Optional[str]:
        return self._function_name

    def to_wire(self) -> Union[str, Dict[str, Any]]:
        if self._mode is ToolChoiceMode.NAMED:
            return {"type": "function", "function": {"name": self._function_name}}
        return self._mode.value

    @classmethod
    def from_wire(cls, value: Any) -> "ToolChoice":
        if isinstance(value, str):
            if value == ToolChoiceMode.NAMED.value:
                raise ValueError("'named' is not a wire value for tool_choice")
            return cls(ToolChoiceMode(value))
        if isinstance(value, dict):
            function = value.get("function")
            if value.get("type") == "function" and isinstance(function, dict):
                return cls.named(function.get("name"))
        raise ValueError(f"Unrecognized tool_choice: {value!r}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, ToolChoice):
            return NotImplemented
        return self._mode is other._mode and self._function_name == other._function_name

    def __hash__(self) -> int:
        return hash((self._mode, self._function_name))

    def __reduce__(self):
        return (ToolChoice, (self._mode, self._function_name))

    def __copy__(self) -> "ToolChoice":
        return self

    def __deepcopy__(self, memo) -> "ToolChoice":
        return self

    def __repr__(self) -> str:
        if self._mode is ToolChoiceMode.NAMED:
            return f"ToolChoice.named({self._function_name!r})"
        return f"ToolChoice.{self._mode.value}()"


def _encode_tool_choice(value: Optional[ToolChoice]) -> Any:
    return value.to_wire() if value is not None else None


def _decode_tool_choice(value: Any) -> Optional[ToolChoice]:
    return ToolChoice.from_wire(value) if value is not None else None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class FunctionDefinition:
    name: Optional[str] = None
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChatTool:
    type: Optional[str] = "function"
    function: Optional[FunctionDefinition] = None

    @classmethod
    def function_tool(cls, name: str, description: Optional[str] = None,
                      parameters: Optional[Dict[str, Any]] = None) -> "ChatTool":
        return cls(type="function", function=FunctionDefinition(name, description, parameters))


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ToolCallFunction:
    name: Optional[str] = None
    # JSON-encoded arguments, passed through unvalidated.
    arguments: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChatToolCall:
    id: Optional[str] = None
    type: Optional[str] = "function"
    function: Optional[ToolCallFunction] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChatMessage:
    """One message of a conversation.

    Use the ``system``/``user``/``assistant``/``tool`` constructors for the
    common shapes.
    """
    role: Optional[str] = None
    content: Optional[str] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ChatToolCall]] = None
    tool_call_id: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: Optional[str] = None,
                  tool_calls: Optional[List[ChatToolCall]] = None) -> "ChatMessage":
        return cls(role="assistant", content=content, tool_calls=tool_calls)

    @classmethod
    def tool(cls, tool_call_id: str, content: str) -> "ChatMessage":
        return cls(role="tool", content=content, tool_call_id=tool_call_id)


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChatCompletionRequest:
    model: Optional[str] = None
    messages: List[ChatMessage] = field(default_factory=list)
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stop: Optional[List[str]] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    tools: Optional[List[ChatTool]] = None
    tool_choice: Optional[ToolChoice] = field(
        default=None,
        metadata=config(encoder=_encode_tool_choice, decoder=_decode_tool_choice),
    )
    parallel_tool_calls: Optional[bool] = None
    seed: Optional[int] = None
    user: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChatChoice:
    index: Optional[int] = None
    message: Optional[ChatMessage] = None
    finish_reason: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ChatCompletion:
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: List[ChatChoice] = field(default_factory=list)
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        """Text of the first choice, if any."""
        if not self.choices or self.choices[0].message is None:
            return None
        return self.choices[0].message.content
