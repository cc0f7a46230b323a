from .prompts import FALLBACK_SUMMARY, MAX_SETS_IN_PROMPT, build_messages

__all__ = ["FALLBACK_SUMMARY", "MAX_SETS_IN_PROMPT", "build_messages"]
