"""Machine translation of missing resource keys.

Python 3.13+. Uses httpx for HTTP.
"""

from .auto_translator import AutoTranslator, TranslationReport, remap_placeholders
from .service import GoogleTranslateService, TranslationService

__all__ = [
    "AutoTranslator",
    "GoogleTranslateService",
    "TranslationReport",
    "TranslationService",
    "remap_placeholders",
]
