from .markup import completion_message, picture_snippet
from .profiling import timed

__all__ = ["completion_message", "picture_snippet", "timed"]
