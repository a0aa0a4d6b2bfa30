"""Classic array, matrix, searching and string algorithms."""

__version__ = "0.1.0"

__all__ = [
    "allocation",
    "brackets",
    "generation",
    "matrix",
    "numbers",
    "optimization",
    "rearranging",
    "searching",
    "selection",
    "setops",
    "string_dp",
    "subarrays",
    "text",
    "text_search",
]