"""
Test fixtures and utilities for the flowdoc tests.

This module provides reusable editor models, Flow Document builders, an API
client, and helpers for running the CLI tools.
"""

import copy
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from flowdoc.config.compiler_config import (
    ENV_DATA_API_VERSION,
    ENV_DEFAULT_CATEGORIES,
    ENV_FLOW_JSON_VERSION,
    reset_config,
)

REPO_ROOT = Path(__file__).resolve().parent.parent


# ============================================================================
# Config Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from compiler.yaml with no environment overrides."""
    for name in (ENV_FLOW_JSON_VERSION, ENV_DATA_API_VERSION, ENV_DEFAULT_CATEGORIES):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# ============================================================================
# Editor Model Builders
# ============================================================================


def make_editor_screen(
    screen_id: str = "WELCOME",
    title: str = "Welcome",
    header: str = "",
    body: str = "Tell us about yourself",
    footer: str = "Send",
    actions: Optional[List[Dict[str, Any]]] = None,
    data_model: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build one editor screen dict the way the designer stores it."""
    data: Dict[str, Any] = {
        "header": {"type": "header", "format": "TEXT", "text": header},
        "body": {"type": "body", "text": body},
        "footer": {"type": "footer", "text": footer},
        "actions": actions or [],
    }
    if data_model is not None:
        data["dataModel"] = data_model
    return {"id": screen_id, "title": title, "data": data}


def make_editor_flow(*screens: Dict[str, Any], name: str = "Lead capture") -> Dict[str, Any]:
    return {
        "name": name,
        "categories": [],
        "screens": list(screens) or [make_editor_screen()],
    }


CITY_OPTIONS = [
    {"id": "tpe", "title": "Taipei"},
    {"id": "khh", "title": "Kaohsiung"},
]


@pytest.fixture
def basic_flow() -> Dict[str, Any]:
    """One screen with a heading, a text input and a city dropdown."""
    return make_editor_flow(
        make_editor_screen(
            header="Hello",
            actions=[
                {
                    "type": "text_input",
                    "name": "full_name",
                    "title": "Full name",
                    "data": {"input_type": "text", "required": True},
                },
                {
                    "type": "select",
                    "name": "city",
                    "title": "City",
                    "data": {"options": copy.deepcopy(CITY_OPTIONS)},
                },
            ],
        )
    )


# ============================================================================
# Flow Document Builders
# ============================================================================

BODY = {"type": "TextBody", "text": "Body"}
FOOTER = {"type": "Footer", "label": "Done", "on-click-action": {"name": "complete", "payload": {}}}


def make_target_screen(
    children: List[Any],
    screen_id: str = "MAIN",
    terminal: Optional[bool] = True,
    data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build a Flow Document screen around the given children."""
    screen: Dict[str, Any] = {
        "id": screen_id,
        "title": "Main",
        "layout": {"type": "SingleColumnLayout", "children": children},
    }
    if terminal is not None:
        screen["terminal"] = terminal
    if data is not None:
        screen["data"] = data
    return screen


def make_document(*screens: Dict[str, Any], **root: Any) -> Dict[str, Any]:
    document: Dict[str, Any] = {"version": "7.3"}
    document.update(root)
    document["screens"] = list(screens)
    return document


def wrap(*components: Dict[str, Any], **screen_kwargs: Any) -> Dict[str, Any]:
    """A one-screen document: body, the given components, footer."""
    children = [copy.deepcopy(BODY)] + list(components) + [copy.deepcopy(FOOTER)]
    return make_document(make_target_screen(children, **screen_kwargs))


# ============================================================================
# API Client
# ============================================================================


@pytest.fixture
def api_client() -> TestClient:
    """TestClient connected to a fresh flowdoc API app."""
    from flowdoc.api.server import create_app

    return TestClient(create_app())


# ============================================================================
# CLI Runner
# ============================================================================


@pytest.fixture
def run_tool():
    """
    Fixture that returns a function to run a flowdoc CLI module.

    Returns:
        Function(module, args) -> CompletedProcess
    """
    def _run(module: str, args: List[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", module] + args,
            cwd=REPO_ROOT,
            capture_output=True,
            text=True,
        )

    return _run


def parse_errors(stderr: str) -> List[Dict[str, str]]:
    """
    Parse error messages from validator stderr output.

    Format: [FAIL] TYPE: location problem
              Fix: action
    """
    errors = []
    lines = stderr.splitlines()
    for index, line in enumerate(lines):
        if not line.startswith("[FAIL] "):
            continue
        error_type, _, rest = line[len("[FAIL] "):].partition(": ")
        fix = ""
        if index + 1 < len(lines) and lines[index + 1].strip().startswith("Fix:"):
            fix = lines[index + 1].strip()[len("Fix:"):].strip()
        errors.append({"type": error_type, "message": rest, "fix": fix})
    return errors
