"""Post-processing applied to assembled README markdown."""

from .lint import MarkdownLinter

__all__ = ["MarkdownLinter"]
