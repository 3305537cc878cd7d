"""Shared fixtures for the JoyDoc test suite."""

import copy
import json
from pathlib import Path

import pytest

from joydoc.core.context import ValidationContext
from joydoc.core.validator import JoyDocValidator


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def validator():
    """Create a validator with default warning settings"""
    return JoyDocValidator()


@pytest.fixture
def quiet_validator():
    """Validator that emits no warnings at all"""
    return JoyDocValidator(ValidationContext.quiet())


@pytest.fixture
def minimal_doc():
    """Smallest valid document: one empty file, no fields"""
    return {
        "files": [{"_id": "f1", "pages": [], "pageOrder": []}],
        "fields": [],
    }


@pytest.fixture
def full_doc():
    """Template exercising every documented field type"""
    return load_fixture("full_template.json")


@pytest.fixture
def future_doc():
    """Document written by a newer producer (extra keys, new types)"""
    return load_fixture("future_properties.json")


@pytest.fixture
def page():
    return {
        "_id": "page1",
        "name": "Page 1",
        "fieldPositions": [],
        "width": 816,
        "height": 1056,
        "cols": 24,
        "rowHeight": 8,
        "layout": "grid",
        "presentation": "normal",
    }


@pytest.fixture
def field_position():
    return {
        "_id": "fp1",
        "field": "text1",
        "displayType": "original",
        "width": 12,
        "height": 8,
        "x": 0,
        "y": 0,
        "type": "text",
    }


@pytest.fixture
def table_field():
    return {
        "_id": "table1",
        "file": "f1",
        "type": "table",
        "value": [{"_id": "row1", "cells": {"col1": "a"}}],
        "rowOrder": ["row1"],
        "tableColumns": [{"_id": "col1", "type": "text", "title": "Item"}],
        "tableColumnOrder": ["col1"],
    }


@pytest.fixture
def collection_field():
    return {
        "_id": "coll1",
        "file": "f1",
        "type": "collection",
        "schema": {
            "s1": {
                "root": True,
                "title": "Parent",
                "tableColumns": [{"_id": "c1", "type": "text"}],
                "children": ["s2"],
            },
            "s2": {
                "title": "Child",
                "tableColumns": [{"_id": "c2", "type": "number"}],
            },
        },
        "value": [],
    }


@pytest.fixture
def doc_with(minimal_doc):
    """Factory: minimal document carrying the given fields and pages"""
    def build(fields=None, pages=None):
        doc = copy.deepcopy(minimal_doc)
        doc["fields"] = list(fields or [])
        if pages is not None:
            doc["files"][0]["pages"] = pages
            doc["files"][0]["pageOrder"] = [p["_id"] for p in pages if "_id" in p]
        return doc
    return build
