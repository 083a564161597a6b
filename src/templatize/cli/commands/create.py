"""Create command handler and formatting."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from templatize.cli.progress.rich import RichMaterializeProgress
from templatize.contracts.config import ProjectOptions, TemplateConfig
from templatize.contracts.exceptions import ConfigError
from templatize.core.materialize import MaterializeResult
from templatize.core.tables import build_template_config


def build_options(args: argparse.Namespace) -> tuple[ProjectOptions, TemplateConfig]:
    try:
        options = ProjectOptions(project_name=args.name, target_dir=Path(args.dir) if args.dir else None)
        config = build_template_config(options.project_name, repo_url=args.repo_url)
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc
    return options, config


def format_header(options: ProjectOptions, config: TemplateConfig) -> str:
    return "\n".join(
        [
            f"Creating new project: {options.project_name}",
            f"  Target Directory: {options.resolved_target_dir}",
            f"  Template:         {config.repo_url}",
            "",
        ]
    )


def format_create_summary(result: MaterializeResult) -> str:
    lines = [
        "",
        f"✓ Repository cloned to {result.target_dir}",
        "✓ Project templated successfully!",
        f"  Files updated: {len(result.changed_files)}",
    ]
    if not result.metadata_removed:
        lines.append("  Warning: .git directory from the template is still present")
    if result.next_steps:
        lines.append("")
        lines.append("Next steps:")
        lines.extend(f"  {index}. {step}" for index, step in enumerate(result.next_steps, start=1))
    lines.append("")
    return "\n".join(lines)


def run_create(args: argparse.Namespace) -> MaterializeResult:
    import templatize.cli as cli

    options, config = cli.build_options(args)
    print(cli.format_header(options, config))

    if args.verbose:
        materializer = cli.ProjectMaterializer(options, config)
        result = materializer.run()
    else:
        with RichMaterializeProgress() as progress:
            materializer = cli.ProjectMaterializer(options, config, progress=progress)
            result = materializer.run()

    if result.ok:
        print(format_create_summary(result))
    else:
        print(f"error: {result.failure}", file=sys.stderr)
    return result


__all__ = ["build_options", "format_create_summary", "format_header", "run_create"]
