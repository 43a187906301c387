"""Custom exceptions for the Hex Territory rules engine."""


class HexTerritoryError(Exception):
    """Base exception for all Hex Territory errors."""

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self):
        base_msg = self.message
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


# Configuration Exceptions
class ConfigurationError(HexTerritoryError):
    """Errors in game construction parameters."""
    pass


class InvalidSpawnModeError(ConfigurationError):
    """Spawn mode is not one of the known modes."""
    pass


# Validation Exceptions
class ValidationError(HexTerritoryError):
    """Errors related to input validation."""
    pass


class InvalidInputError(ValidationError):
    """Invalid input provided."""
    pass


class RangeValidationError(ValidationError):
    """Value outside valid range."""
    pass


class TypeValidationError(ValidationError):
    """Invalid type provided."""
    pass


# Player Exceptions
class PlayerError(HexTerritoryError):
    """Errors related to player operations."""
    pass


class ColorsExhaustedError(PlayerError):
    """Every palette color is already taken."""
    pass


# Board Exceptions
class BoardError(HexTerritoryError):
    """Errors related to the hex board."""
    pass


class InvalidHexError(BoardError):
    """Hex coordinate could not be parsed."""
    pass


class NoTilesAvailableError(BoardError):
    """No neutral tile is left to spawn on."""
    pass


# Game State Exceptions
class GameStateError(HexTerritoryError):
    """Errors related to game state management."""
    pass


class InvariantViolationError(GameStateError):
    """An internal game invariant no longer holds."""
    pass


# Simulation Exceptions
class SimulationError(HexTerritoryError):
    """Errors related to simulation execution."""
    pass
