"""Tests for editor palette defaults."""

import re

import pytest

from flowdoc.spec.compiler import generate
from flowdoc.spec.defaults import default_component, default_screen, new_identifier
from flowdoc.validator.flow_validator import validate

from conftest import make_editor_flow


class TestDefaultScreen:
    """New screens compile to valid documents as-is."""

    def test_shape(self):
        screen = default_screen("INTRO")
        assert screen["id"] == "INTRO"
        assert screen["title"] == "New screen"
        assert screen["data"]["body"]["text"] == "Enter content"
        assert screen["data"]["footer"]["text"] == "Submit"
        assert screen["data"]["actions"] == []

    def test_random_id_is_letters_only(self):
        assert re.fullmatch(r"screen_[a-z]{8}", default_screen()["id"])

    def test_compiles_and_validates(self):
        result = validate(generate(make_editor_flow(default_screen("INTRO"))))
        assert result.valid, result.messages


class TestDefaultComponent:
    """Palette widgets start from registry-aware defaults."""

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            default_component("video")

    def test_new_identifier(self):
        assert re.fullmatch(r"select_[a-z]{8}", new_identifier("select"))

    def test_select_points_at_its_data_source(self):
        component = default_component("select", "city")
        assert component["data"]["data_source"] == "${data.dropdown_city}"
        assert component["title"] == "Select an option"

    @pytest.mark.parametrize(
        "kind", ["text_input", "select", "radio", "checkbox", "date_picker", "photo_picker"]
    )
    def test_default_widget_compiles_and_validates(self, kind):
        screen = default_screen("INTRO")
        screen["data"]["actions"].append(default_component(kind))
        result = validate(generate(make_editor_flow(screen)))
        assert result.valid, result.messages
