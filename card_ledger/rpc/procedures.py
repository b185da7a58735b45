"""
A minimal procedure registry for the RPC surface.

Procedures are plain functions taking the services container and their
validated input. Inputs are validated with the shared schemas, so native
Python values (datetimes) and JSON values (ISO strings) are both accepted.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from ..errors import NotFoundError
from ..services import Services

Handler = Callable[[Services, Any], Any]


@dataclass(frozen=True)
class Procedure:
    name: str
    handler: Handler
    input_model: Optional[Type[BaseModel]] = None
    input_optional: bool = False

    def parse_input(self, payload: Any) -> Any:
        if self.input_model is None:
            return None
        if payload is None and self.input_optional:
            return None
        if isinstance(payload, self.input_model):
            return payload
        return self.input_model.model_validate({} if payload is None else payload)


class ProcedureRouter:
    """Named procedures, optionally nested under dotted namespaces."""

    def __init__(self):
        self._procedures: Dict[str, Procedure] = {}

    def procedure(self, name: str, input_model: Optional[Type[BaseModel]] = None, input_optional: bool = False):
        """Decorator registering ``handler(services, input)`` under ``name``"""
        def register(handler: Handler) -> Handler:
            if name in self._procedures:
                raise ValueError(f"Procedure already registered: {name}")
            self._procedures[name] = Procedure(name, handler, input_model, input_optional)
            return handler
        return register

    def include(self, namespace: str, other: "ProcedureRouter") -> None:
        for name, procedure in other._procedures.items():
            qualified = f"{namespace}.{name}"
            if qualified in self._procedures:
                raise ValueError(f"Procedure already registered: {qualified}")
            self._procedures[qualified] = Procedure(
                qualified, procedure.handler, procedure.input_model, procedure.input_optional
            )

    def names(self) -> List[str]:
        return sorted(self._procedures)

    def get(self, name: str) -> Procedure:
        procedure = self._procedures.get(name)
        if procedure is None:
            raise NotFoundError("Procedure")
        return procedure

    def call(self, name: str, payload: Any, services: Services) -> Any:
        """Validate ``payload`` and run the procedure in-process.

        Raises the service's typed errors, or pydantic.ValidationError for
        input that does not match the procedure's schema.
        """
        procedure = self.get(name)
        return procedure.handler(services, procedure.parse_input(payload))
