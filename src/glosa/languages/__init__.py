"""Glosa signature renderers.

Language services turn declaration nodes into content tree fragments.

Available Languages:
- KotlinLanguageService: Kotlin declaration syntax

"""

from glosa.languages.kotlin import KotlinLanguageService
from glosa.languages.protocol import LanguageService

__all__ = ["KotlinLanguageService", "LanguageService"]
