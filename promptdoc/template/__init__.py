"""Prompt template engine and its function library."""

from .engine import BUNDLED_PROMPTS_DIR, DEFAULT_TEMPLATE_DIR, CompiledTemplate, TemplateEngine
from .funcs import DEFAULT_FUNCS
from .loader import TEMPLATE_EXTENSIONS, TemplateLoader, TemplateSource, content_digest
from .prompt import PromptTemplate

__all__ = [
    "BUNDLED_PROMPTS_DIR",
    "CompiledTemplate",
    "DEFAULT_FUNCS",
    "DEFAULT_TEMPLATE_DIR",
    "PromptTemplate",
    "TEMPLATE_EXTENSIONS",
    "TemplateEngine",
    "TemplateLoader",
    "TemplateSource",
    "content_digest",
]
