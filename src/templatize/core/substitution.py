"""Literal token substitution over whole file contents."""

from __future__ import annotations

from dataclasses import dataclass

from templatize.contracts.config import SubstitutionTable


@dataclass(frozen=True)
class SubstitutionResult:
    text: str
    changed: bool


def apply_substitutions(contents: str, table: SubstitutionTable) -> SubstitutionResult:
    """Replace every source token of *table* in *contents*.

    Pairs are applied longest source token first, each step working on the
    output of the previous one. A replacement may therefore be rewritten again
    by a later, shorter token if it contains that token.
    """
    text = contents
    for replacement in table.ordered():
        text = text.replace(replacement.source, replacement.target)
    return SubstitutionResult(text=text, changed=text != contents)


__all__ = ["SubstitutionResult", "apply_substitutions"]
