"""Enum conversion utilities for YAML and CLI input"""

from enum import Enum
from typing import TypeVar, Type, Optional, List, Any

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

class EnumHelper:
    """
    Utility class for working with Enums:
    - Parse config/CLI strings to enum members (case-insensitive, '-' == '_')
    - List member names for help texts and error messages
    """

    @staticmethod
    def from_string(enum_class: Type[E], name: str, default: Optional[E] = None) -> E:
        """
        Parse string to Enum member.

        Args:
            enum_class: Enum class to parse into
            name: Member name, e.g. "shazam_pulse", "SHAZAM-PULSE"
            default: Return value if not found (None = raise)

        Returns:
            Enum member or default if provided
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        key = str(name).strip().upper().replace("-", "_")
        for member in enum_class:
            if member.name == key:
                return member

        if default is not None:
            return default
        raise ValueError(
            f"Invalid {enum_class.__name__} name: {name} "
            f"(expected one of {', '.join(EnumHelper.list_names(enum_class))})"
        )

    @staticmethod
    def to_enum(enum_class: Type[E], value: Any) -> E:
        """Accept either an enum instance or its (case-insensitive) name"""
        if isinstance(value, enum_class):
            return value
        if isinstance(value, str):
            return EnumHelper.from_string(enum_class, value)
        raise TypeError(f"Expected str or {enum_class.__name__}, got {type(value).__name__}")

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        """
        List all Enum member names.

        Args:
            enum_class: Enum class to inspect
            lowercase: Return lowercase names

        Returns:
            List of member names (strings)
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if lowercase:
            return [member.name.lower() for member in enum_class]
        return [member.name for member in enum_class]
