"""The app definition the host registers: auth, middleware, triggers and creates."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from . import __version__
from .authentication import authentication
from .creates import upload_create
from .middleware import AFTERS, BEFORES
from .runtime import AfterResponse, BeforeRequest
from .schema import Authentication, Create, Trigger
from .triggers import projects_trigger, publish_trigger


@dataclass
class App:
    version: str
    authentication: Authentication
    triggers: Dict[str, Trigger]
    creates: Dict[str, Create]
    before_request: List[BeforeRequest] = field(default_factory=list)
    after_response: List[AfterResponse] = field(default_factory=list)

    def __post_init__(self) -> None:
        for group in (self.triggers, self.creates):
            for key, action in group.items():
                if key != action.key:
                    raise ValueError(f"Registered under {key!r} but declares key {action.key!r}")
                self._check_dynamic_fields(action)

    def _check_dynamic_fields(self, action: Trigger | Create) -> None:
        for input_field in action.operation.input_fields:
            if not input_field.dynamic:
                continue
            trigger_key, _, field_key = input_field.dynamic.partition(".")
            if trigger_key not in self.triggers or not field_key:
                raise ValueError(
                    f"{action.key}.{input_field.key} references unknown dropdown source {input_field.dynamic!r}"
                )

    def get_trigger(self, key: str) -> Trigger:
        if key not in self.triggers:
            raise KeyError(f"Unknown trigger: {key}")
        return self.triggers[key]

    def get_create(self, key: str) -> Create:
        if key not in self.creates:
            raise KeyError(f"Unknown create: {key}")
        return self.creates[key]

    def to_schema(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "authentication": self.authentication.to_schema(),
            "beforeRequest": [func.__name__ for func in self.before_request],
            "afterResponse": [func.__name__ for func in self.after_response],
            "triggers": {key: trigger.to_schema() for key, trigger in self.triggers.items()},
            "creates": {key: create.to_schema() for key, create in self.creates.items()},
        }


app = App(
    version=__version__,
    authentication=authentication,
    before_request=list(BEFORES),
    after_response=list(AFTERS),
    triggers={
        publish_trigger.key: publish_trigger,
        projects_trigger.key: projects_trigger,
    },
    creates={
        upload_create.key: upload_create,
    },
)
