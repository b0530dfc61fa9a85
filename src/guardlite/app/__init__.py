"""Front end pieces: presentation state and the console entrypoint."""

from .state import PLACEHOLDER_CODE, GuardState

__all__ = ["PLACEHOLDER_CODE", "GuardState"]
