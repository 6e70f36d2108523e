from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core is the foundation: it must not import any other dbiam package.
    """
    (
        archrule("core_is_independent")
        .match("dbiam_core*")
        .should_not_import("dbiam_specifications*")
        .should_not_import("dbiam_persistence_sqlalchemy*")
        .should_not_import("dbiam_domain*")
        .should_not_import("dbiam_schulconnex*")
        .check("dbiam_core")
    )


def test_core_has_no_database_driver() -> None:
    (
        archrule("core_without_sqlalchemy")
        .match("dbiam_core*")
        .should_not_import("sqlalchemy*")
        .check("dbiam_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives are the lowest level.
    They must not import from domain, adapters or ports.
    """
    (
        archrule("primitives_isolation")
        .match("dbiam_core.primitives*")
        .should_not_import("dbiam_core.domain*")
        .should_not_import("dbiam_core.adapters*")
        .should_not_import("dbiam_core.ports*")
        .check("dbiam_core")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("dbiam_core.ports*")
        .should_not_import("dbiam_core.adapters*")
        .check("dbiam_core")
    )


def test_specifications_layering() -> None:
    """
    Specifications build on core only; stores are reached through ports.
    """
    (
        archrule("specifications_layering")
        .match("dbiam_specifications*")
        .should_not_import("dbiam_persistence_sqlalchemy*")
        .should_not_import("dbiam_domain*")
        .should_not_import("sqlalchemy*")
        .check("dbiam_specifications")
    )


def test_domain_is_persistence_agnostic() -> None:
    """
    Domain services talk to repository ports, never to a database adapter.
    """
    (
        archrule("domain_persistence_agnostic")
        .match("dbiam_domain*")
        .should_not_import("dbiam_persistence_sqlalchemy*")
        .should_not_import("sqlalchemy*")
        .should_not_import("dbiam_schulconnex*")
        .check("dbiam_domain")
    )


def test_schulconnex_is_boundary_only() -> None:
    """
    The SchulConnex error mapping only reads domain errors and results.
    """
    (
        archrule("schulconnex_boundary")
        .match("dbiam_schulconnex*")
        .should_not_import("dbiam_persistence_sqlalchemy*")
        .should_not_import("dbiam_domain*")
        .check("dbiam_schulconnex")
    )
