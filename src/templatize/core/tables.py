"""Built-in template definition for the go-native project template.

Tables are kept as ``(source, target)`` pairs where ``{name}`` in the target
is filled with the operator's project name.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from templatize.contracts.config import SubstitutionTable, TemplateConfig, TemplatePass

DEFAULT_REPO_URL = "https://github.com/brightsidedeveloper/go-native-template"
REPO_URL_ENV = "TEMPLATIZE_REPO_URL"

BINARY_EXTENSIONS = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".ico",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
        ".exe",
        ".dll",
        ".so",
        ".dylib",
    }
)

SERVER_TABLE: tuple[tuple[str, str], ...] = (
    ("github.com/brightsidedeveloper/go-native-template", "{name}"),
    ("loop-app", "{name}-app"),
    ("loop_test", "{name}_test"),
    ("noreply@template.app", "noreply@{name}.app"),
    ("Template", "{name}"),
)

# Indented keys first so app.json (4 spaces) and package.json (2 spaces) are
# matched with their indentation intact.
MOBILE_TABLE: tuple[tuple[str, str], ...] = (
    ('    "name": "template"', '    "name": "{name}"'),
    ('    "slug": "template"', '    "slug": "{name}"'),
    ('    "scheme": "template"', '    "scheme": "{name}"'),
    ('  "name": "template"', '  "name": "{name}"'),
    ('"name": "template"', '"name": "{name}"'),
    ('"slug": "template"', '"slug": "{name}"'),
    ('"scheme": "template"', '"scheme": "{name}"'),
)

ROOT_TABLE: tuple[tuple[str, str], ...] = (("# Template", "# {name}"),)

MOBILE_FILES = ("package.json", "app.json")
ROOT_FILES = ("Readme.md",)

NEXT_STEPS = (
    "cd {target_dir}",
    "cd server && go mod tidy && make gen",
    "cd ../mobile && npm install",
)


def render_table(pairs: Iterable[tuple[str, str]], project_name: str) -> SubstitutionTable:
    return SubstitutionTable.from_pairs((source, target.format(name=project_name)) for source, target in pairs)


def resolve_repo_url(repo_url: str | None = None) -> str:
    """Pick the template URL: explicit value, then environment, then default."""
    if repo_url and repo_url.strip():
        return repo_url.strip()
    from_env = (os.getenv(REPO_URL_ENV) or "").strip()
    return from_env or DEFAULT_REPO_URL


def build_template_config(project_name: str, *, repo_url: str | None = None) -> TemplateConfig:
    return TemplateConfig(
        repo_url=resolve_repo_url(repo_url),
        skip_extensions=BINARY_EXTENSIONS,
        passes=(
            TemplatePass(name="server", path=Path("server"), table=render_table(SERVER_TABLE, project_name)),
            TemplatePass(
                name="mobile",
                path=Path("mobile"),
                table=render_table(MOBILE_TABLE, project_name),
                files=MOBILE_FILES,
            ),
            TemplatePass(
                name="root",
                path=Path("."),
                table=render_table(ROOT_TABLE, project_name),
                files=ROOT_FILES,
                optional=True,
            ),
        ),
        next_steps=NEXT_STEPS,
    )


__all__ = [
    "BINARY_EXTENSIONS",
    "DEFAULT_REPO_URL",
    "REPO_URL_ENV",
    "build_template_config",
    "render_table",
    "resolve_repo_url",
]
