from __future__ import annotations

import pytest

from apimark.discovery.classify import classify_data_type, classify_function, classify_impl
from apimark.discovery.model import EntryKind
from apimark.exceptions import AnnotationSyntaxError
from apimark.syntax.model import DataTypeDecl, FunctionDecl, ImplBlock, SyntaxPath
from tests.syntax_helpers import attr, derive, params

NAMESPACE = ("api", "handlers")


def _summary(entries) -> list[tuple[EntryKind, str]]:
    return [(entry.kind, str(entry.path)) for entry in entries]


def test_classify_function_matches_marker() -> None:
    function = FunctionDecl("get_user", (attr("op"),))
    assert _summary(classify_function(function, NAMESPACE, params(fn_marker="op"))) == [
        (EntryKind.OPERATION, "api::handlers::get_user")
    ]


def test_classify_function_matches_any_segment_of_dotted_marker() -> None:
    function = FunctionDecl("route_custom", (attr("utoipa::path", "get"),))
    entries = classify_function(function, NAMESPACE, params())
    assert _summary(entries) == [(EntryKind.OPERATION, "api::handlers::route_custom")]


def test_classify_function_emits_one_entry_per_matching_annotation() -> None:
    function = FunctionDecl("get_user", (attr("op"), attr("inline"), attr("op")))
    entries = classify_function(function, NAMESPACE, params(fn_marker="op"))
    assert [str(entry.path) for entry in entries] == [
        "api::handlers::get_user",
        "api::handlers::get_user",
    ]


def test_classify_function_without_annotations_or_marker() -> None:
    assert classify_function(FunctionDecl("helper"), NAMESPACE, params()) == []
    function = FunctionDecl("helper", (attr("inline"),))
    assert classify_function(function, NAMESPACE, params()) == []


def test_classify_function_ignore_marker_wins() -> None:
    function = FunctionDecl("get_user", (attr("utoipa::path"), attr("utoipa_ignore")))
    assert classify_function(function, NAMESPACE, params()) == []


def test_classify_function_dotted_ignore_marker_is_not_ignore() -> None:
    function = FunctionDecl("get_user", (attr("op"), attr("other::utoipa_ignore")))
    assert len(classify_function(function, NAMESPACE, params(fn_marker="op"))) == 1


def test_classify_data_type_builtin_markers() -> None:
    data_type = DataTypeDecl(
        "User", annotations=(derive("Debug", "utoipa::ToSchema", "utoipa::ToResponse"),)
    )
    assert _summary(classify_data_type(data_type, NAMESPACE, params())) == [
        (EntryKind.MODEL, "api::handlers::User"),
        (EntryKind.RESPONSE_MODEL, "api::handlers::User"),
    ]


def test_classify_data_type_configured_markers() -> None:
    data_type = DataTypeDecl(
        "Status",
        annotations=(derive("Schema"), derive("Reply", "Clone")),
    )
    configured = params(model_marker="Schema", response_marker="Reply")
    assert _summary(classify_data_type(data_type, NAMESPACE, configured)) == [
        (EntryKind.MODEL, "api::handlers::Status"),
        (EntryKind.RESPONSE_MODEL, "api::handlers::Status"),
    ]


def test_classify_data_type_same_name_for_model_and_response() -> None:
    data_type = DataTypeDecl("User", annotations=(derive("Api"),))
    configured = params(model_marker="Api", response_marker="Api")
    kinds = [entry.kind for entry in classify_data_type(data_type, NAMESPACE, configured)]
    assert kinds == [EntryKind.MODEL, EntryKind.RESPONSE_MODEL]


def test_classify_data_type_builtin_namespace_with_unknown_name() -> None:
    data_type = DataTypeDecl("User", annotations=(derive("utoipa::IntoParams"),))
    assert classify_data_type(data_type, NAMESPACE, params(model_marker="IntoParams")) == []


def test_classify_data_type_configured_marker_must_be_single_segment() -> None:
    data_type = DataTypeDecl("User", annotations=(derive("other::ToSchema", "::ToSchema"),))
    assert classify_data_type(data_type, NAMESPACE, params()) == []


def test_classify_data_type_repeated_markers_are_kept() -> None:
    data_type = DataTypeDecl(
        "User", annotations=(derive("utoipa::ToSchema"), derive("ToSchema"))
    )
    assert _summary(classify_data_type(data_type, NAMESPACE, params())) == [
        (EntryKind.MODEL, "api::handlers::User"),
        (EntryKind.MODEL, "api::handlers::User"),
    ]


def test_classify_data_type_generic_params_exclude() -> None:
    data_type = DataTypeDecl(
        "User", annotations=(derive("utoipa::ToSchema"),), generic_params=("T",)
    )
    assert classify_data_type(data_type, NAMESPACE, params()) == []


def test_classify_data_type_ignore_marker_after_match() -> None:
    data_type = DataTypeDecl(
        "User", annotations=(derive("utoipa::ToSchema"), attr("utoipa_ignore"))
    )
    assert classify_data_type(data_type, NAMESPACE, params()) == []


def test_classify_data_type_plain_annotations_do_not_classify() -> None:
    data_type = DataTypeDecl("User", annotations=(attr("ToSchema"), attr("utoipa::ToSchema")))
    assert classify_data_type(data_type, NAMESPACE, params()) == []


def test_classify_data_type_malformed_marker_list() -> None:
    data_type = DataTypeDecl("User", annotations=(attr("derive", "ToSchema,,"),))
    with pytest.raises(AnnotationSyntaxError):
        classify_data_type(data_type, NAMESPACE, params())


def test_classify_data_type_skips_parsing_when_generic() -> None:
    data_type = DataTypeDecl("User", annotations=(attr("derive"),), generic_params=("T",))
    assert classify_data_type(data_type, NAMESPACE, params()) == []


def test_classify_impl_custom_model_and_response() -> None:
    model_impl = ImplBlock("Widget", capability=SyntaxPath.parse("utoipa::ToSchema"))
    response_impl = ImplBlock("Widget", capability=SyntaxPath.parse("ToResponse"))
    assert _summary(classify_impl(model_impl, ("api", "shapes"), params())) == [
        (EntryKind.CUSTOM_MODEL_IMPL, "api::shapes::Widget")
    ]
    assert _summary(classify_impl(response_impl, ("api", "shapes"), params())) == [
        (EntryKind.CUSTOM_RESPONSE_IMPL, "api::shapes::Widget")
    ]


def test_classify_impl_ignores_inherent_and_unknown_capabilities() -> None:
    assert classify_impl(ImplBlock("Widget"), NAMESPACE, params()) == []
    unknown = ImplBlock("Widget", capability=SyntaxPath.parse("std::fmt::Display"))
    assert classify_impl(unknown, NAMESPACE, params()) == []


@pytest.mark.parametrize(
    ("capability", "kind"),
    [
        ("utoipa::ToSchema<'__s>", EntryKind.CUSTOM_MODEL_IMPL),
        ("ToSchema<'__s>", EntryKind.CUSTOM_MODEL_IMPL),
        ("utoipa::ToResponse<'__r>", EntryKind.CUSTOM_RESPONSE_IMPL),
        ("ToSchema<a::B, c::D<E>>", EntryKind.CUSTOM_MODEL_IMPL),
    ],
)
def test_classify_impl_ignores_capability_generic_arguments(
    capability: str, kind: EntryKind
) -> None:
    block = ImplBlock("Widget", capability=SyntaxPath.parse(capability))
    assert _summary(classify_impl(block, ("crate",), params())) == [(kind, "crate::Widget")]


def test_classify_impl_generic_argument_path_is_not_the_capability() -> None:
    block = ImplBlock("Widget", capability=SyntaxPath.parse("Wrapper<utoipa::ToSchema>"))
    assert classify_impl(block, ("crate",), params()) == []
