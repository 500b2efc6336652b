# flowdoc/validator/flow_validator.py
"""
flow_validator.py - Check a Flow Document against the component registry.

The validator re-derives every structural rule from the registry instead of
trusting the compiler, so hand-written or imported documents get the same
scrutiny as compiled ones. Every violation is collected; nothing stops at
the first problem.

Checks:
- Root: version, non-empty screens, data_api_version/routing_model hoisting
- Screen: identifier format, unique ids, layout shape, exactly one TextBody,
  upload widget limits, terminal flag, declared data sources, example arrays
- Node (recursive into If/Switch/Form): known kind, required/forbidden/unknown
  fields, identifier format, action vocabulary, navigate targets,
  data-source format, upload widget options

Usage:
    from flowdoc.validator.flow_validator import validate

    result = validate(document_json)
    if not result.valid:
        for line in result.messages:
            print(line)
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from flowdoc.spec.identifiers import is_valid_identifier
from flowdoc.spec.registry import (
    ACTION_DATA_EXCHANGE,
    ACTION_NAVIGATE,
    NAVIGATION_ITEM_ACTION_NAMES,
    ON_CLICK,
    UPLOAD_KINDS,
    child_lists,
    extract_data_source_name,
    iter_nodes,
    list_kinds,
    lookup,
    node_action,
    node_forces_terminal,
)
from flowdoc.spec.types import DEFAULT_LAYOUT_TYPE, FlowDocument

from .errors import (
    DOCUMENT_PARSE_FAILURE,
    FORBIDDEN_FIELD_PRESENT,
    INVALID_ACTION_NAME,
    INVALID_DATA_SOURCE_FORMAT,
    INVALID_IDENTIFIER_FORMAT,
    MISSING_REQUIRED_FIELD,
    STRUCTURAL_CONSTRAINT_VIOLATION,
    UNKNOWN_COMPONENT_KIND,
    ValidationResult,
)

logger = logging.getLogger(__name__)

PHOTO_SOURCES = ("camera_gallery", "camera", "gallery")

# (min field, max field) per upload kind.
UPLOAD_LIMIT_FIELDS = {
    "PhotoPicker": ("min-uploaded-photos", "max-uploaded-photos"),
    "DocumentPicker": ("min-uploaded-documents", "max-uploaded-documents"),
}


# =============================================================================
# Helpers
# =============================================================================


def _is_blank(value: Any) -> bool:
    """Null and whitespace-only strings count as empty; empty lists do not."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _node_label(path: str, node: Mapping[str, Any]) -> str:
    kind = node.get("type")
    return f"{path} ({kind})" if isinstance(kind, str) and kind else path


def _load_document(document: Any, result: ValidationResult) -> Optional[Mapping[str, Any]]:
    """Normalize the input to a mapping, recording a parse failure if needed."""
    if isinstance(document, FlowDocument):
        return document.to_dict()
    if isinstance(document, (bytes, bytearray)):
        document = document.decode("utf-8", errors="replace")
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as e:
            result.add_error(
                DOCUMENT_PARSE_FAILURE,
                "document",
                f"is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                "Fix the JSON syntax and validate again",
            )
            return None
    if not isinstance(document, Mapping):
        result.add_error(
            DOCUMENT_PARSE_FAILURE,
            "document",
            f"must be a JSON object, got {type(document).__name__}",
            "Pass the Flow JSON object with 'version' and 'screens'",
        )
        return None
    return document


def _valid_action_names(screens: List[Any]) -> List[str]:
    """Action names that their node's kind accepts, across every screen.

    Invalid names are reported on the node itself and do not count towards
    root hoisting.
    """
    names = []
    for screen in screens:
        if not isinstance(screen, Mapping):
            continue
        layout = screen.get("layout")
        children = layout.get("children") if isinstance(layout, Mapping) else None
        if not isinstance(children, list):
            continue
        for node in iter_nodes(children):
            spec = lookup(node.get("type"))
            action = node_action(node)
            if spec is not None and action is not None:
                if action.get("name") in spec.allowed_action_names:
                    names.append(action["name"])
            items = node.get("items")
            if node.get("type") == "NavigationList" and isinstance(items, list):
                for item in items:
                    if isinstance(item, Mapping):
                        item_action = node_action(item)
                        if item_action is None:
                            continue
                        if item_action.get("name") in NAVIGATION_ITEM_ACTION_NAMES:
                            names.append(item_action["name"])
    return names


# =============================================================================
# Flow Validator
# =============================================================================


class FlowValidator:
    """Validates one Flow Document.

    Usage:
        result = FlowValidator().validate(document)
    """

    def validate(self, document: Any) -> ValidationResult:
        """Validate a Flow Document.

        Args:
            document: FlowDocument, its dict form, or a JSON string.

        Returns:
            ValidationResult holding every violation found. Never raises.
        """
        result = ValidationResult()
        try:
            data = _load_document(document, result)
            if data is not None:
                self._validate_root(data, result)
        except Exception as e:
            logger.exception("Validator failed on document")
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                "document",
                f"could not be validated: {type(e).__name__}: {e}",
                "Check the document structure; this input tripped an internal validator error",
            )

        logger.debug(
            "Validated document: %d errors, %d warnings",
            len(result.errors),
            len(result.warnings),
        )
        return result

    # -------------------------------------------------------------------------
    # Root
    # -------------------------------------------------------------------------

    def _validate_root(self, data: Mapping[str, Any], result: ValidationResult) -> None:
        version = data.get("version")
        if _is_blank(version):
            result.add_error(
                MISSING_REQUIRED_FIELD,
                "document",
                "is missing required field 'version'",
                "Add the Flow JSON version, e.g. \"version\": \"7.3\"",
            )
        elif not isinstance(version, str):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                "document",
                f"'version' must be a string, got {type(version).__name__}",
                "Quote the version, e.g. \"7.3\"",
            )

        screens = data.get("screens")
        if screens is None:
            result.add_error(
                MISSING_REQUIRED_FIELD,
                "document",
                "is missing required field 'screens'",
                "Add a 'screens' array with at least one screen",
            )
            return
        if not isinstance(screens, list):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                "document",
                "'screens' must be an array",
                "Make 'screens' a JSON array of screen objects",
            )
            return
        if not screens:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                "document",
                "'screens' must not be empty",
                "Add at least one screen",
            )
            return

        self._validate_hoisting(data, screens, result)

        screen_ids: Set[str] = {
            s["id"] for s in screens
            if isinstance(s, Mapping) and isinstance(s.get("id"), str)
        }
        seen: Dict[str, int] = {}
        for index, screen in enumerate(screens):
            self._validate_screen(index, screen, screen_ids, seen, result)

    def _validate_hoisting(
        self,
        data: Mapping[str, Any],
        screens: List[Any],
        result: ValidationResult,
    ) -> None:
        uses_data_exchange = ACTION_DATA_EXCHANGE in _valid_action_names(screens)
        for field_name in ("data_api_version", "routing_model"):
            present = data.get(field_name) is not None
            if uses_data_exchange and not present:
                result.add_error(
                    MISSING_REQUIRED_FIELD,
                    "document",
                    f"uses the '{ACTION_DATA_EXCHANGE}' action but is missing '{field_name}'",
                    f"Add '{field_name}' at the document root",
                )
            elif present and not uses_data_exchange:
                result.add_warning(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    "document",
                    f"declares '{field_name}' but no action uses '{ACTION_DATA_EXCHANGE}'",
                    f"Remove '{field_name}' from the document root",
                )

    # -------------------------------------------------------------------------
    # Screens
    # -------------------------------------------------------------------------

    def _validate_screen(
        self,
        index: int,
        screen: Any,
        screen_ids: Set[str],
        seen: Dict[str, int],
        result: ValidationResult,
    ) -> None:
        location = f"Screen[{index}]"
        if not isinstance(screen, Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "must be an object",
                "Replace the entry with a screen object",
            )
            return

        self._validate_screen_id(location, screen.get("id"), seen, index, result)

        layout = screen.get("layout")
        if layout is None:
            result.add_error(
                MISSING_REQUIRED_FIELD,
                location,
                "is missing required field 'layout'",
                f"Add \"layout\": {{\"type\": \"{DEFAULT_LAYOUT_TYPE}\", \"children\": []}}",
            )
            return
        if not isinstance(layout, Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "'layout' must be an object",
                f"Use {{\"type\": \"{DEFAULT_LAYOUT_TYPE}\", \"children\": [...]}}",
            )
            return
        if layout.get("type") != DEFAULT_LAYOUT_TYPE:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"layout.type must be \"{DEFAULT_LAYOUT_TYPE}\", got {layout.get('type')!r}",
                f"Set layout.type to \"{DEFAULT_LAYOUT_TYPE}\"",
            )

        children = layout.get("children")
        if children is None:
            result.add_error(
                MISSING_REQUIRED_FIELD,
                location,
                "is missing 'layout.children'",
                "Add a 'children' array to the layout",
            )
            return
        if not isinstance(children, list):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "layout.children must be an array",
                "Make layout.children a JSON array of components",
            )
            return

        self._validate_body_count(location, children, result)
        self._validate_uploads(location, children, result)
        self._validate_terminal(location, screen, children, result)
        self._validate_data_model(location, screen, children, result)

        for child_index, child in enumerate(children):
            self._validate_node(
                f"{location}, Component[{child_index}]", child, screen_ids, result
            )

    def _validate_screen_id(
        self,
        location: str,
        screen_id: Any,
        seen: Dict[str, int],
        index: int,
        result: ValidationResult,
    ) -> None:
        if _is_blank(screen_id):
            result.add_error(
                MISSING_REQUIRED_FIELD,
                location,
                "is missing required field 'id'",
                "Give the screen an id made of letters and underscores",
            )
            return
        if not is_valid_identifier(screen_id):
            result.add_error(
                INVALID_IDENTIFIER_FORMAT,
                location,
                f"id {screen_id!r} may only contain letters and underscores",
                "Rename the screen id, e.g. WELCOME_SCREEN",
            )
            return
        if screen_id in seen:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"id '{screen_id}' duplicates Screen[{seen[screen_id]}]",
                "Give every screen a unique id",
            )
            return
        seen[screen_id] = index

    def _validate_body_count(
        self,
        location: str,
        children: List[Any],
        result: ValidationResult,
    ) -> None:
        count = sum(
            1 for child in children
            if isinstance(child, Mapping) and child.get("type") == "TextBody"
        )
        if count != 1:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"must contain exactly one TextBody, found {count}",
                "Keep a single TextBody in layout.children",
            )

    def _validate_uploads(
        self,
        location: str,
        children: List[Any],
        result: ValidationResult,
    ) -> None:
        counts = {kind: 0 for kind in UPLOAD_KINDS}
        for node in iter_nodes(children):
            kind = node.get("type")
            if isinstance(kind, str) and kind in counts:
                counts[kind] += 1

        for kind, count in counts.items():
            if count > 1:
                result.add_error(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    location,
                    f"may contain at most one {kind}, found {count}",
                    f"Move the extra {kind} components to their own screens",
                )
        if all(counts[kind] > 0 for kind in UPLOAD_KINDS):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "must not combine PhotoPicker and DocumentPicker",
                "Split photo and document uploads across separate screens",
            )

    def _validate_terminal(
        self,
        location: str,
        screen: Mapping[str, Any],
        children: List[Any],
        result: ValidationResult,
    ) -> None:
        forcing = [node.get("type") for node in iter_nodes(children) if node_forces_terminal(node)]
        if forcing and screen.get("terminal") is not True:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"must be terminal because it contains {forcing[0]} with a 'complete' action",
                "Set \"terminal\": true on the screen",
            )

    def _validate_data_model(
        self,
        location: str,
        screen: Mapping[str, Any],
        children: List[Any],
        result: ValidationResult,
    ) -> None:
        data = screen.get("data")
        if data is not None and not isinstance(data, Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "'data' must be an object",
                "Declare screen data as {name: {type, items, __example__}}",
            )
            data = None
        declared = data or {}

        for node in iter_nodes(children):
            source = extract_data_source_name(node.get("data-source"))
            if source and source not in declared:
                result.add_error(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    location,
                    f"references ${{data.{source}}} but does not declare '{source}' in its data",
                    f"Add a '{source}' entry to the screen data",
                )

        for name, entry in declared.items():
            self._validate_example(f"{location}.data.{name}", entry, result)

    def _validate_example(self, location: str, entry: Any, result: ValidationResult) -> None:
        if not isinstance(entry, Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "must be an object",
                "Declare the entry as {type, items, __example__}",
            )
            return
        example = entry.get("__example__")
        if example is None:
            return
        if not isinstance(example, list):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "__example__ must be an array",
                "Make __example__ a JSON array",
            )
            return

        items = entry.get("items")
        if not isinstance(items, Mapping) or not items:
            return
        try:
            Draft7Validator.check_schema(items)
        except SchemaError as e:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"items is not a valid JSON schema: {e.message}",
                "Fix the items schema",
            )
            return

        schema_validator = Draft7Validator(items)
        for item_index, item in enumerate(example):
            for error in sorted(schema_validator.iter_errors(item), key=lambda e: list(e.path)):
                result.add_error(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    f"{location}.__example__[{item_index}]",
                    f"does not match items schema: {error.message}",
                    "Edit the example entry so it matches the declared items schema",
                )

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def _validate_node(
        self,
        path: str,
        node: Any,
        screen_ids: Set[str],
        result: ValidationResult,
    ) -> None:
        if not isinstance(node, Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                path,
                "must be an object",
                "Replace the entry with a component object",
            )
            return

        kind = node.get("type")
        if _is_blank(kind):
            result.add_error(
                MISSING_REQUIRED_FIELD,
                path,
                "is missing required field 'type'",
                "Add the component type, e.g. \"TextBody\"",
            )
            return

        spec = lookup(kind)
        if spec is None:
            result.add_error(
                UNKNOWN_COMPONENT_KIND,
                path,
                f"has unknown component kind '{kind}'. Supported kinds: {', '.join(list_kinds())}",
                "Use one of the supported component kinds",
            )
            return

        location = _node_label(path, node)
        self._validate_fields(location, node, spec, result)
        self._validate_identifier(location, node, spec, result)
        self._validate_action(location, node, spec, screen_ids, result)
        if spec.requires_data_model:
            self._validate_data_source(location, node.get("data-source"), result)
        if kind in UPLOAD_LIMIT_FIELDS:
            self._validate_upload_options(location, node, result)
        if kind == "NavigationList":
            self._validate_navigation_items(location, node, screen_ids, result)
        if kind == "Switch" and "cases" in node and not isinstance(node["cases"], list):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "'cases' must be an array",
                "Make 'cases' an array of {key, components}",
            )

        for suffix, nested in child_lists(node):
            for nested_index, child in enumerate(nested):
                self._validate_node(f"{path}.{suffix}[{nested_index}]", child, screen_ids, result)

    def _validate_fields(self, location, node, spec, result: ValidationResult) -> None:
        for field_name in spec.required_fields:
            if field_name not in node:
                result.add_error(
                    MISSING_REQUIRED_FIELD,
                    location,
                    f"is missing required field '{field_name}'",
                    f"Add '{field_name}' to the {spec.kind}",
                )
            elif _is_blank(node[field_name]):
                result.add_error(
                    MISSING_REQUIRED_FIELD,
                    location,
                    f"required field '{field_name}' must not be empty",
                    f"Give '{field_name}' a value",
                )

        for field_name in spec.forbidden_fields:
            if field_name in node:
                result.add_error(
                    FORBIDDEN_FIELD_PRESENT,
                    location,
                    f"must not carry field '{field_name}'",
                    f"Remove '{field_name}' from the {spec.kind}",
                )

        allowed = set(spec.allowed_fields) | set(spec.forbidden_fields) | {"type"}
        for field_name in node:
            if field_name not in allowed:
                result.add_error(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    location,
                    f"has field '{field_name}' which {spec.kind} does not support",
                    f"Remove '{field_name}'",
                )

    def _validate_identifier(self, location, node, spec, result: ValidationResult) -> None:
        field_name = spec.identifier_field
        if field_name is None:
            return
        value = node.get(field_name)
        if _is_blank(value):
            return
        if not is_valid_identifier(value):
            result.add_error(
                INVALID_IDENTIFIER_FORMAT,
                location,
                f"{field_name} {value!r} may only contain letters and underscores",
                f"Rename the {field_name} using only letters and underscores",
            )

    def _validate_action(
        self,
        location: str,
        node: Mapping[str, Any],
        spec,
        screen_ids: Set[str],
        result: ValidationResult,
    ) -> None:
        slot = spec.action_slot.field_name
        if slot is None or node.get(slot) is None:
            return
        self._check_action(location, slot, node[slot], spec.allowed_action_names, screen_ids, result)

    def _validate_navigation_items(
        self,
        location: str,
        node: Mapping[str, Any],
        screen_ids: Set[str],
        result: ValidationResult,
    ) -> None:
        items = node.get("items")
        if items is None:
            return
        if not isinstance(items, list):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "'items' must be an array",
                "Make 'items' an array of {id, title, on-click-action}",
            )
            return
        for item_index, item in enumerate(items):
            if not isinstance(item, Mapping):
                result.add_error(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    location,
                    f"items[{item_index}] must be an object",
                    "Use {\"id\": \"...\", \"title\": \"...\"}",
                )
                continue
            action = item.get(ON_CLICK)
            if action is not None:
                self._check_action(
                    location,
                    f"items[{item_index}].{ON_CLICK}",
                    action,
                    NAVIGATION_ITEM_ACTION_NAMES,
                    screen_ids,
                    result,
                )

    def _check_action(
        self,
        location: str,
        slot: str,
        action: Any,
        allowed: Tuple[str, ...],
        screen_ids: Set[str],
        result: ValidationResult,
    ) -> None:
        """Check one action object: name present, name allowed, navigate target."""
        if not isinstance(action, Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"'{slot}' must be an object",
                f"Use {{\"name\": \"{allowed[0]}\", \"payload\": {{}}}}",
            )
            return

        name = action.get("name")
        if _is_blank(name):
            result.add_error(
                INVALID_ACTION_NAME,
                location,
                f"'{slot}' has no name",
                f"Set {slot}.name to one of: {', '.join(allowed)}",
            )
            return
        if name not in allowed:
            if len(allowed) == 1:
                problem = f"{slot}.name must be '{allowed[0]}', got '{name}'"
            else:
                problem = f"{slot}.name '{name}' is not allowed; expected one of: {', '.join(allowed)}"
            result.add_error(
                INVALID_ACTION_NAME,
                location,
                problem,
                f"Change {slot}.name to '{allowed[0]}'",
            )
            return

        if name == ACTION_NAVIGATE:
            self._validate_navigate_target(location, slot, action.get("next"), screen_ids, result)

    def _validate_navigate_target(
        self,
        location: str,
        slot: str,
        target: Any,
        screen_ids: Set[str],
        result: ValidationResult,
    ) -> None:
        if (
            not isinstance(target, Mapping)
            or target.get("type") != "screen"
            or not isinstance(target.get("name"), str)
            or _is_blank(target["name"])
        ):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"{slot}.next must be an object {{name, type: \"screen\"}}, got {target!r}",
                "Use \"next\": {\"name\": \"SCREEN_ID\", \"type\": \"screen\"}",
            )
            return
        if target["name"] not in screen_ids:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"{slot}.next names unknown screen '{target['name']}'",
                f"Point next.name at one of: {', '.join(sorted(screen_ids)) or '(no screens)'}",
            )

    def _validate_data_source(self, location: str, data_source: Any, result: ValidationResult) -> None:
        if _is_blank(data_source):
            return  # reported as a missing required field
        if isinstance(data_source, list):
            for item_index, item in enumerate(data_source):
                if not isinstance(item, Mapping):
                    result.add_error(
                        INVALID_DATA_SOURCE_FORMAT,
                        location,
                        f"data-source[{item_index}] must be an object",
                        "Use {\"id\": \"...\", \"title\": \"...\"}",
                    )
                    continue
                for key in ("id", "title"):
                    value = item.get(key)
                    if not isinstance(value, str) or not value:
                        result.add_error(
                            INVALID_DATA_SOURCE_FORMAT,
                            location,
                            f"data-source[{item_index}] is missing a string '{key}'",
                            f"Give every option a non-empty string '{key}'",
                        )
            return
        if isinstance(data_source, str):
            if extract_data_source_name(data_source) is None:
                result.add_error(
                    INVALID_DATA_SOURCE_FORMAT,
                    location,
                    f"data-source {data_source!r} is not a ${{data.field_name}} reference",
                    "Use an option array or a ${data.field_name} reference",
                )
            return
        result.add_error(
            INVALID_DATA_SOURCE_FORMAT,
            location,
            f"data-source must be an array or a string, got {type(data_source).__name__}",
            "Use an option array or a ${data.field_name} reference",
        )

    def _validate_upload_options(self, location: str, node: Mapping[str, Any], result: ValidationResult) -> None:
        kind = node["type"]
        min_field, max_field = UPLOAD_LIMIT_FIELDS[kind]
        low, high = node.get(min_field), node.get(max_field)
        if _is_number(low) and _is_number(high) and low > high:
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                f"{min_field} ({low}) must not exceed {max_field} ({high})",
                f"Lower {min_field} or raise {max_field}",
            )

        if kind == "PhotoPicker":
            source = node.get("photo-source")
            if source is not None and source not in PHOTO_SOURCES:
                result.add_error(
                    STRUCTURAL_CONSTRAINT_VIOLATION,
                    location,
                    f"photo-source {source!r} must be one of: {', '.join(PHOTO_SOURCES)}",
                    "Pick a supported photo-source",
                )
            return

        description = node.get("description")
        if isinstance(description, str) and not description.strip():
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "description must not be an empty string",
                "Remove 'description' or give it text",
            )
        if "error-message" in node and not isinstance(node["error-message"], Mapping):
            result.add_error(
                STRUCTURAL_CONSTRAINT_VIOLATION,
                location,
                "error-message must be an object",
                "Use \"error-message\": {\"text\": \"...\"}",
            )


def validate(document: Any) -> ValidationResult:
    """Validate a Flow Document (convenience function). Never raises."""
    return FlowValidator().validate(document)
