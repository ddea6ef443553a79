from enum import Enum
from typing import Any, Iterable, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def require_not_none(value: Any, message: str) -> Any:
    """Precondition check: raise TypeError for an absent value, otherwise return it."""
    if value is None:
        raise TypeError(message)
    return value


class ArgumentValidator:
    """Shared argument checks used by the catalog commands."""

    @staticmethod
    def normalize(raw: Optional[str]) -> str:
        require_not_none(raw, "Given input argument must not be None.")
        return raw.strip()

    @staticmethod
    def match_keyword(token: str, keywords: Type[E], case_sensitive: bool = True) -> Optional[E]:
        """Return the enum member whose name equals the whole token, or None.

        Prefixes never match; the first exact match wins.
        """
        for member in keywords:
            name = member.name
            if case_sensitive:
                if name == token:
                    return member
            elif name.lower() == token.lower():
                return member
        return None

    @staticmethod
    def is_single_token(text: str) -> bool:
        if not text or text.isspace():
            return False
        return len(text.split(" ")) == 1

    @staticmethod
    def has_suffix(text: str, suffix: str) -> bool:
        # case-sensitive, exact suffix
        return text.endswith(suffix)


class TextValidator:
    """Basic text checks for record fields."""

    @staticmethod
    def is_non_empty(text: Optional[str]) -> bool:
        if text is None:
            return False
        return bool(text.strip())

    @staticmethod
    def all_non_empty(values: Iterable[Optional[str]]) -> bool:
        values = list(values)
        return bool(values) and all(TextValidator.is_non_empty(v) for v in values)
