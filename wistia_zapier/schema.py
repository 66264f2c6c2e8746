"""Descriptor records the host reads to render and register the app.

These are plain data: labels, field types and sample payloads, plus a
reference to the handler that performs the operation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple


def _func_ref(func: Callable[..., Any]) -> str:
    return f"{func.__module__}.{func.__qualname__}"


@dataclass(frozen=True)
class InputField:
    key: str
    label: str
    type: str = "string"
    required: bool = False
    help_text: Optional[str] = None
    dynamic: Optional[str] = None

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": self.type,
            "required": self.required,
        }
        if self.help_text:
            schema["helpText"] = self.help_text
        if self.dynamic:
            schema["dynamic"] = self.dynamic
        return schema


@dataclass(frozen=True)
class OutputField:
    key: str
    label: str
    type: str = "string"

    def to_schema(self) -> Dict[str, Any]:
        return {"key": self.key, "label": self.label, "type": self.type}


@dataclass(frozen=True)
class Display:
    label: str
    description: str

    def to_schema(self) -> Dict[str, Any]:
        return {"label": self.label, "description": self.description}


@dataclass(frozen=True)
class Operation:
    perform: Callable[..., Any]
    sample: Dict[str, Any]
    input_fields: Tuple[InputField, ...] = ()
    output_fields: Tuple[OutputField, ...] = ()
    type: Optional[str] = None

    def input_field(self, key: str) -> Optional[InputField]:
        return next((item for item in self.input_fields if item.key == key), None)

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "perform": _func_ref(self.perform),
            "inputFields": [item.to_schema() for item in self.input_fields],
            "outputFields": [item.to_schema() for item in self.output_fields],
            "sample": dict(self.sample),
        }
        if self.type:
            schema["type"] = self.type
        return schema


@dataclass(frozen=True)
class Action:
    key: str
    noun: str
    display: Display
    operation: Operation

    def to_schema(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "noun": self.noun,
            "display": self.display.to_schema(),
            "operation": self.operation.to_schema(),
        }


class Trigger(Action):
    pass


class Create(Action):
    pass


@dataclass(frozen=True)
class AuthField:
    key: str
    label: str
    required: bool = True

    def to_schema(self) -> Dict[str, Any]:
        return {"key": self.key, "label": self.label, "required": self.required}


@dataclass(frozen=True)
class Authentication:
    type: str
    test: Callable[..., Any]
    connection_label: str
    fields: Tuple[AuthField, ...] = field(default_factory=tuple)

    def to_schema(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "fields": [item.to_schema() for item in self.fields],
            "test": _func_ref(self.test),
            "connectionLabel": self.connection_label,
        }
