"""Tests for referee.storyboards.document."""

from __future__ import annotations

from pathlib import Path

import pytest

from referee.storyboards import DocumentParseError, StoryboardDocument, parse_document
from tests._fixtures.project_builder import storyboard


def _document(scenes: str) -> StoryboardDocument:
    return StoryboardDocument.from_string(storyboard(scenes), name="Main")


def test_find_returns_union_of_tags_in_document_order() -> None:
    document = _document(
        """
        <scene sceneID="a">
            <objects>
                <navigationController id="nav"/>
                <viewController id="vc"/>
                <tableViewController id="tvc"/>
            </objects>
        </scene>
        """
    )

    found = document.find({"viewController", "tableViewController", "navigationController"})

    assert [element.get("id") for element in found] == ["nav", "vc", "tvc"]


def test_find_without_matches_returns_empty_list() -> None:
    document = _document('<scene sceneID="a"><objects/></scene>')

    assert document.find({"segue"}) == []


def test_attribute_and_tag_name() -> None:
    document = _document(
        '<scene sceneID="a"><objects><viewController id="vc" customClass="Home"/></objects></scene>'
    )
    (element,) = document.find({"viewController"})

    assert document.tag_name(element) == "viewController"
    assert document.attribute(element, "customClass") == "Home"
    assert document.attribute(element, "storyboardIdentifier") is None


def test_tag_name_strips_namespace() -> None:
    document = StoryboardDocument.from_string(
        '<document xmlns="urn:example"><segue identifier="next"/></document>',
        name="Namespaced",
    )

    (segue,) = document.find({"segue"})

    assert document.tag_name(segue) == "segue"


def test_parse_document_uses_file_stem_as_name(tmp_path: Path) -> None:
    path = tmp_path / "Onboarding.storyboard"
    path.write_text(storyboard('<scene sceneID="a"/>'), encoding="utf-8")

    document = parse_document(path)

    assert document.name == "Onboarding"


def test_parse_document_rejects_malformed_markup(tmp_path: Path) -> None:
    path = tmp_path / "Broken.storyboard"
    path.write_text("<document><scenes></document>", encoding="utf-8")

    with pytest.raises(DocumentParseError) as excinfo:
        parse_document(path)

    assert excinfo.value.path == path
    assert "Broken.storyboard" in str(excinfo.value)


def test_parse_document_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DocumentParseError):
        parse_document(tmp_path / "Missing.storyboard")


def test_from_string_rejects_malformed_markup() -> None:
    with pytest.raises(DocumentParseError) as excinfo:
        StoryboardDocument.from_string("<document>", name="Inline")

    assert excinfo.value.path is None
    assert excinfo.value.source == "Inline"
    assert "'Inline'" in str(excinfo.value)
