"""Input validation utilities for Hex Territory."""

from enum import Enum
from typing import Any, Type, Union

from ..core.exceptions import (
    HexTerritoryError, InvalidInputError, RangeValidationError, TypeValidationError
)


class Validator:
    """Base validator class with common validation methods."""

    @staticmethod
    def validate_type(value: Any, expected_type: Type, field_name: str = "value") -> None:
        """Validate that value is of expected type."""
        if not isinstance(value, expected_type):
            raise TypeValidationError(
                f"{field_name} must be of type {expected_type.__name__}, got {type(value).__name__}",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "expected": expected_type.__name__, "actual": type(value).__name__}
            )

    @staticmethod
    def validate_range(value: Union[int, float], min_val: Union[int, float],
                      max_val: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is within specified range."""
        if not min_val <= value <= max_val:
            raise RangeValidationError(
                f"{field_name} must be between {min_val} and {max_val}, got {value}",
                error_code="OUT_OF_RANGE",
                context={"field": field_name, "value": value, "min": min_val, "max": max_val}
            )

    @staticmethod
    def validate_positive(value: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is positive."""
        if value <= 0:
            raise RangeValidationError(
                f"{field_name} must be positive, got {value}",
                error_code="NOT_POSITIVE",
                context={"field": field_name, "value": value}
            )

    @staticmethod
    def validate_non_negative(value: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is non-negative."""
        if value < 0:
            raise RangeValidationError(
                f"{field_name} must be non-negative, got {value}",
                error_code="NEGATIVE",
                context={"field": field_name, "value": value}
            )

    @staticmethod
    def validate_enum(value: Any, enum_class: Type, field_name: str = "value") -> None:
        """Validate that value is a valid enum member."""
        if not isinstance(value, enum_class):
            valid_values = [e.value for e in enum_class]
            raise InvalidInputError(
                f"{field_name} must be one of {valid_values}, got {value}",
                error_code="INVALID_ENUM",
                context={"field": field_name, "value": value, "valid_values": valid_values}
            )


class GameValidator(Validator):
    """Validator for game-specific inputs."""

    @staticmethod
    def validate_count(value: int, field_name: str = "count") -> None:
        """Validate that value is an integer count; booleans are not counts."""
        if isinstance(value, bool):
            raise TypeValidationError(
                f"{field_name} must be of type int, got bool",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "expected": "int", "actual": "bool"}
            )
        GameValidator.validate_type(value, int, field_name)

    @staticmethod
    def validate_board_radius(radius: int) -> None:
        """Validate board radius."""
        GameValidator.validate_count(radius, "board_radius")
        GameValidator.validate_non_negative(radius, "board_radius")

    @staticmethod
    def validate_probability(value: float, field_name: str = "probability") -> None:
        """Validate a probability in [0, 1]."""
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeValidationError(
                f"{field_name} must be a number, got {type(value).__name__}",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "actual": type(value).__name__}
            )
        GameValidator.validate_range(value, 0.0, 1.0, field_name)


def clamp(value: Union[int, float], min_val: Union[int, float], max_val: Union[int, float]):
    """Clamp value into [min_val, max_val]."""
    return max(min_val, min(value, max_val))


def coerce_enum(value: Any, enum_class: Type[Enum], field_name: str = "value",
                error_cls: Type[HexTerritoryError] = InvalidInputError) -> Enum:
    """Accept an enum member or its value/name (case-insensitive) and return the member."""
    if isinstance(value, enum_class):
        return value

    if isinstance(value, str):
        lowered = value.strip().lower()
        for member in enum_class:
            if lowered in (str(member.value).lower(), member.name.lower()):
                return member

    valid_values = [e.value for e in enum_class]
    raise error_cls(
        f"{field_name} must be one of {valid_values}, got {value!r}",
        error_code="INVALID_ENUM",
        context={"field": field_name, "value": value, "valid_values": valid_values}
    )
