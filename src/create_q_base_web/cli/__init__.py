"""Command-line interface for create-q-base-web."""

from __future__ import annotations

from create_q_base_web.cli.app import main as main
from create_q_base_web.cli.console import RichScaffoldReporter as RichScaffoldReporter
from create_q_base_web.cli.parser import build_parser as build_parser
from create_q_base_web.config import ScaffoldOptions as ScaffoldOptions
from create_q_base_web.config import ScaffoldSettings as ScaffoldSettings
from create_q_base_web.orchestrator import ScaffoldOrchestrator as ScaffoldOrchestrator
from create_q_base_web.prompts import QuestionaryPrompter as QuestionaryPrompter

__all__ = [
    "QuestionaryPrompter",
    "RichScaffoldReporter",
    "ScaffoldOptions",
    "ScaffoldOrchestrator",
    "ScaffoldSettings",
    "build_parser",
    "main",
]
