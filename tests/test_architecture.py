"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters don't depend on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and each other."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("campus_shuttle.domain.models*")
        .should_not_import("campus_shuttle.adapters*")
        .should_not_import("campus_shuttle.application*")
        .should_not_import("campus_shuttle.domain.ports*")
        .should_not_import("campus_shuttle.cli")
        .may_import("campus_shuttle.domain.models*")
        .check("campus_shuttle")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("campus_shuttle.domain.ports*")
        .should_not_import("campus_shuttle.adapters*")
        .should_not_import("campus_shuttle.application*")
        .may_import("campus_shuttle.domain.ports*")
        .may_import("campus_shuttle.domain.models*")
        .check("campus_shuttle")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("campus_shuttle.application*")
        .should_not_import("campus_shuttle.adapters*")
        .should_not_import("campus_shuttle.cli")
        .may_import("campus_shuttle.domain*")
        .may_import("campus_shuttle.application*")
        .check("campus_shuttle")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("campus_shuttle.adapters*")
        .should_not_import("campus_shuttle.application*")
        .may_import("campus_shuttle.domain*")
        .may_import("campus_shuttle.adapters*")
        .check("campus_shuttle", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("campus_shuttle.domain*")
        .should_not_import("campus_shuttle.adapters*")
        .should_not_import("campus_shuttle.application*")
        .may_import("campus_shuttle.domain*")
        .check("campus_shuttle", only_direct_imports=True)
    )
