"""CLI progress renderers."""

from templatize.cli.progress.rich import RichMaterializeProgress

__all__ = ["RichMaterializeProgress"]
