"""Arc-consistency constraint solving and two-word cryptarithm puzzles."""

__version__ = "0.1.0"
__all__ = ["csp", "cryptarithm"]