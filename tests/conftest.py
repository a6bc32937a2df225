"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from core.logging import clear_context

if TYPE_CHECKING:
    from collections.abc import Iterator

    from apps.organization.models import Person


@pytest.fixture(autouse=True)
def _clean_log_context() -> Iterator[None]:
    """Keep bound log context from leaking between tests."""
    yield
    clear_context()


@pytest.fixture()
def erick() -> Person:
    """Return an unsaved person with every name part filled in."""
    from apps.organization.models import Person

    return Person.create(
        social_name="Erick Ferdinand",
        treatment_pronoun="Prof. Dr.",
        first_name="Erick",
        middle_name="Joshua de Martins",
        last_name="Ferdinand",
    )


@pytest.fixture()
def bob() -> Person:
    """Return an unsaved person named Bob."""
    from apps.organization.models import Person

    return Person.create(
        social_name="Bob Ferdinand",
        treatment_pronoun="Prof. Dr.",
        first_name="Bob",
        middle_name="Joshua de Martins",
        last_name="Ferdinand",
    )
