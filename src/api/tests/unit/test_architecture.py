"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the Registry bounded context.
"""

from pytest_archon import archrule


class TestRegistryDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_outer_layers(self):
        """Domain layer holds pure business rules.

        It must not know about persistence, services or HTTP.
        """
        (
            archrule("domain_no_outer_layers")
            .match("registry.domain*")
            .should_not_import(
                "registry.application*",
                "registry.infrastructure*",
                "registry.presentation*",
                "registry.dependencies*",
            )
            .check("registry")
        )

    def test_domain_does_not_import_frameworks(self):
        (
            archrule("domain_no_frameworks")
            .match("registry.domain*")
            .should_not_import("fastapi*", "starlette*", "sqlalchemy*", "pydantic*")
            .check("registry")
        )


class TestRegistryPortsLayerBoundaries:
    def test_ports_does_not_import_infrastructure(self):
        """Ports define interfaces, never implementations."""
        (
            archrule("ports_no_infrastructure")
            .match("registry.ports*")
            .should_not_import("registry.infrastructure*", "sqlalchemy*")
            .check("registry")
        )


class TestRegistryApplicationLayerBoundaries:
    def test_application_does_not_import_infrastructure(self):
        """Application services depend on ports, not on repositories."""
        (
            archrule("application_no_infrastructure")
            .match("registry.application*")
            .should_not_import("registry.infrastructure*", "registry.presentation*")
            .check("registry")
        )

    def test_application_does_not_import_fastapi(self):
        (
            archrule("application_no_fastapi")
            .match("registry.application*")
            .should_not_import("fastapi*", "starlette*")
            .check("registry")
        )


class TestRegistryPresentationLayerBoundaries:
    def test_presentation_does_not_import_infrastructure(self):
        """Routes reach repositories only through dependency providers."""
        (
            archrule("presentation_no_infrastructure")
            .match("registry.presentation*")
            .should_not_import("registry.infrastructure*")
            .check("registry")
        )
