# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the tag grammar and default tag derivation."""

from __future__ import annotations

import pytest

from statecraft import Resource, ResourceReference, default_tags, is_valid_tag


def test_resource_is_tagged_with_its_type() -> None:
    assert Resource("file", "/f").is_tagged("file")


def test_resource_is_tagged_with_a_valid_title() -> None:
    assert Resource("file", "bar").is_tagged("bar")


def test_resource_is_not_tagged_with_an_invalid_title() -> None:
    resource = Resource("file", "/bar")

    assert not resource.is_tagged("/bar")
    assert resource.tags == frozenset({"file"})


@pytest.mark.parametrize("tag", ["bar", "one::two", "_private", "a.b-c", "9lives", "Apache2"])
def test_valid_tags(tag: str) -> None:
    assert is_valid_tag(tag)


@pytest.mark.parametrize("tag", ["", "/bar", "has space", "-leading", ":colon", "a/b", None, 3])
def test_invalid_tags(tag: object) -> None:
    assert not is_valid_tag(tag)


def test_default_tags_for_qualified_type() -> None:
    assert default_tags(ResourceReference("one::two", "web")) == frozenset({"one::two", "web"})


def test_manual_tagging_extends_the_set() -> None:
    resource = Resource("file", "/f")
    resource.tag("webserver", "prod")

    assert resource.is_tagged("prod")
    assert resource.is_tagged("missing", "webserver")
    assert not resource.is_tagged("missing")


def test_tags_are_not_rederived_after_construction() -> None:
    resource = Resource("file", "bar")
    resource["title"] = "other"

    assert resource.tags == frozenset({"file", "bar"})
