# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')
Key = Union[Type, str]


class BaseContainer:
    """Registry of shared instances, filled once at application start"""

    def __init__(self) -> None:
        self.instances: Dict[Key, Any] = {}

    def __contains__(self, interface: Key) -> bool:
        return interface in self.instances

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register the instance served for an interface (type or string key)"""
        if interface in self.instances:
            raise ValueError(f"{interface} is already registered")
        self.instances[interface] = instance

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get the instance registered for a type or string key"""
        try:
            return self.instances[interface]
        except KeyError:
            raise ValueError(f"No registration found for {interface}") from None
