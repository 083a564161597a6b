"""Command-line interface for templatize."""

from __future__ import annotations

import logging as logging

from templatize.cli.app import main as main
from templatize.cli.commands import create as create_command
from templatize.cli.parser import build_parser as build_parser
from templatize.core.materialize import ProjectMaterializer as ProjectMaterializer

build_options = create_command.build_options
format_header = create_command.format_header
_format_summary = create_command.format_create_summary
_run_create = create_command.run_create
