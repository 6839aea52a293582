"""Shared test fixtures for the pathgroup test suite."""

from __future__ import annotations

import pytest

from pathgroup.core.normalize.classifier import Classifier
from pathgroup.core.normalize.path_normalizer import PathNormalizer
from pathgroup.models.classification import OutputMode


@pytest.fixture
def classifier() -> Classifier:
    return Classifier()


@pytest.fixture
def normalizer() -> PathNormalizer:
    return PathNormalizer()


@pytest.fixture
def wildcard_normalizer() -> PathNormalizer:
    return PathNormalizer(mode=OutputMode.WILDCARD)
