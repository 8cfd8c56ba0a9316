"""
Test configuration and utilities for the test suite.
"""

import json

import pytest

from policy_engine.ingestion.document_loader import load_default_document, parse_document


@pytest.fixture
def raw_document():
    """Provide raw document data as decoded from JSON."""
    return {
        "title": "Test Platform",
        "sections": [
            {
                "id": "labor",
                "index": 1,
                "title": "Economic Justice & Labor Rights",
                "items": [
                    {"title": "Fair Wages", "text": "Raise the federal minimum wage to $25/hr."},
                    {"title": "Collective Bargaining", "text": "Protect the right to unionize."},
                    {"text": "Strengthen overtime rules and penalties for wage theft."},
                ]
            },
            {
                "id": "housing",
                "index": 2,
                "title": "Housing & Community Stability",
                "subtitle": "Homes for people, not portfolios",
                "items": [
                    {"title": "Vacancy Penalties", "text": "Fine properties left vacant longer than 6 months."},
                    {"title": "Community Priority", "text": "Treat housing as a right."},
                ]
            },
            {
                "id": "vision-note",
                "index": 3,
                "title": "A Note on Vision",
                "subtitle": "Why (e.g.) transparency matters",
            },
        ]
    }


@pytest.fixture
def sample_document(raw_document):
    """Provide a validated sample document."""
    return parse_document(raw_document)


@pytest.fixture(scope="session")
def platform_document():
    """Provide the bundled platform document."""
    return load_default_document()


@pytest.fixture
def document_file(tmp_path, raw_document):
    """Write the sample document to a JSON file."""
    path = tmp_path / "platform.json"
    path.write_text(json.dumps(raw_document), encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    """Provide a minimal YAML configuration file."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "export:\n"
        "  output_directory: out\n"
        "  markdown_filename: policy.md\n"
        "logging:\n"
        "  level: debug\n"
        "ui:\n"
        "  port: 9000\n",
        encoding="utf-8"
    )
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment overrides so tests see only their own settings."""
    for name in ["POLICY_SOURCE_PATH", "POLICY_SOURCE_URL", "EXPORT_DIR", "LOG_LEVEL",
                 "LOG_FILE", "UI_DARK_MODE", "UI_BASE_URL"]:
        monkeypatch.delenv(name, raising=False)
