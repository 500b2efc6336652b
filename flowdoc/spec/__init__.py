"""
flowdoc/spec - Flow Document compilation layer.

This package converts between the flow designer's editor model and the
Flow JSON the messaging platform accepts:
- Registry: structural contract per component kind
- Compiler: editor model -> Flow Document
- Parser: Flow Document -> editor model
- Defaults: starting values for palette widgets

Usage:
    from flowdoc.spec import (
        # Compiler
        FlowCompiler,
        generate,
        build_create_request,
        # Parser
        parse,
        parse_document,
        # Registry
        lookup,
    )

    document = generate(editor_model)
    editor_model = parse_document(document.to_json())
"""

from .types import (
    ActionDescriptor,
    ActionKind,
    ActionSlot,
    ComponentCategory,
    ComponentSpec,
    DataModelEntry,
    EditorComponent,
    EditorFlow,
    EditorKind,
    EditorScreen,
    FlowDocument,
    IdentifierKind,
    TargetScreen,
)

from .errors import (
    DocumentParseError,
    FlowSpecError,
    MissingDocumentNameError,
    UnknownComponentKindError,
)

from .registry import (
    COMPONENT_SPECS,
    data_source_ref,
    extract_data_source_name,
    generate_data_model,
    get_component_spec,
    iter_nodes,
    kinds_requiring_data_model,
    kinds_requiring_terminal,
    list_kinds,
    lookup,
    resolved_action_names,
)

from .identifiers import clean_identifier, process_next

from .compiler import (
    CompileResult,
    FlowCompiler,
    build_create_request,
    build_update_request,
    generate,
)

from .converters import CompileWarning

from .parser import parse, parse_document

from .defaults import default_component, default_screen

__all__ = [
    # Types
    "ActionDescriptor",
    "ActionKind",
    "ActionSlot",
    "ComponentCategory",
    "ComponentSpec",
    "DataModelEntry",
    "EditorComponent",
    "EditorFlow",
    "EditorKind",
    "EditorScreen",
    "FlowDocument",
    "IdentifierKind",
    "TargetScreen",
    # Errors
    "FlowSpecError",
    "MissingDocumentNameError",
    "DocumentParseError",
    "UnknownComponentKindError",
    # Registry
    "COMPONENT_SPECS",
    "lookup",
    "get_component_spec",
    "list_kinds",
    "kinds_requiring_terminal",
    "kinds_requiring_data_model",
    "extract_data_source_name",
    "data_source_ref",
    "generate_data_model",
    "iter_nodes",
    "resolved_action_names",
    # Identifiers
    "clean_identifier",
    "process_next",
    # Compiler
    "FlowCompiler",
    "CompileResult",
    "CompileWarning",
    "generate",
    "build_create_request",
    "build_update_request",
    # Parser
    "parse",
    "parse_document",
    # Defaults
    "default_screen",
    "default_component",
]
