"""
Tests for connection validation and orientation.
"""
import pytest

from pigment.colors import Color
from pigment.nodes import ComponentGraph, ComponentKind, Connection, ConnectionResolver, PortRef


@pytest.fixture
def graph():
    return ComponentGraph()


@pytest.fixture
def resolver(graph):
    return ConnectionResolver(graph)


def link(graph, resolver, first, second):
    connection = resolver.resolve(first, second)
    if connection is not None:
        graph.add_connection(connection)
    return connection


class TestOrientation:
    """Tests for role-based orientation."""

    def test_output_to_input(self, graph, resolver):
        factory = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        adder = graph.add_component(ComponentKind.ADDER)

        connection = resolver.resolve(factory.ports[0].ref, adder.ports[0].ref)
        assert connection == Connection(factory.ports[0].ref, adder.ports[0].ref)

    def test_input_then_output_is_reversed(self, graph, resolver):
        """Selection order does not matter for output/input pairs."""
        factory = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        adder = graph.add_component(ComponentKind.ADDER)

        connection = resolver.resolve(adder.ports[0].ref, factory.ports[0].ref)
        assert connection == Connection(factory.ports[0].ref, adder.ports[0].ref)

    @pytest.mark.parametrize("reverse", [False, True])
    def test_output_to_flex(self, graph, resolver, reverse):
        factory = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        storage = graph.add_component(ComponentKind.STORAGE)
        pair = [factory.ports[0].ref, storage.ports[0].ref]
        if reverse:
            pair.reverse()

        connection = resolver.resolve(*pair)
        assert connection == Connection(factory.ports[0].ref, storage.ports[0].ref)

    @pytest.mark.parametrize("reverse", [False, True])
    def test_flex_to_input(self, graph, resolver, reverse):
        storage = graph.add_component(ComponentKind.STORAGE)
        gradientor = graph.add_component(ComponentKind.GRADIENTOR)
        pair = [gradientor.ports[0].ref, storage.ports[2].ref]
        if reverse:
            pair.reverse()

        connection = resolver.resolve(*pair)
        assert connection == Connection(storage.ports[2].ref, gradientor.ports[0].ref)

    def test_flex_to_flex_follows_selection(self, graph, resolver):
        first = graph.add_component(ComponentKind.STORAGE)
        second = graph.add_component(ComponentKind.STORAGE)

        assert resolver.resolve(first.ports[0].ref, second.ports[1].ref) == Connection(
            first.ports[0].ref, second.ports[1].ref
        )
        assert resolver.resolve(second.ports[1].ref, first.ports[0].ref) == Connection(
            second.ports[1].ref, first.ports[0].ref
        )


class TestRejection:
    """Tests for illegal links."""

    def test_output_to_output(self, graph, resolver):
        first = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        second = graph.add_component(ComponentKind.FACTORY, color=Color(0, 0, 255))
        assert resolver.resolve(first.ports[0].ref, second.ports[0].ref) is None

    def test_input_to_input(self, graph, resolver):
        first = graph.add_component(ComponentKind.ADDER)
        second = graph.add_component(ComponentKind.GRADIENTOR)
        assert resolver.resolve(first.ports[0].ref, second.ports[0].ref) is None

    def test_same_component(self, graph, resolver):
        """A component cannot feed itself, even output to input."""
        adder = graph.add_component(ComponentKind.ADDER)
        connection, reason = resolver.can_connect(adder.ports[2].ref, adder.ports[0].ref)
        assert connection is None
        assert reason

    def test_unknown_port(self, graph, resolver):
        adder = graph.add_component(ComponentKind.ADDER)
        assert resolver.resolve(adder.ports[2].ref, PortRef(999, 999)) is None

    def test_input_already_fed(self, graph, resolver):
        """An input accepts a single incoming link."""
        red = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        blue = graph.add_component(ComponentKind.FACTORY, color=Color(0, 0, 255))
        adder = graph.add_component(ComponentKind.ADDER)

        assert link(graph, resolver, red.ports[0].ref, adder.ports[0].ref) is not None
        assert link(graph, resolver, blue.ports[0].ref, adder.ports[0].ref) is None

    def test_flex_sink_already_fed(self, graph, resolver):
        red = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        blue = graph.add_component(ComponentKind.FACTORY, color=Color(0, 0, 255))
        storage = graph.add_component(ComponentKind.STORAGE)

        assert link(graph, resolver, red.ports[0].ref, storage.ports[0].ref) is not None
        assert link(graph, resolver, blue.ports[0].ref, storage.ports[0].ref) is None

    def test_duplicate(self, graph, resolver):
        adder = graph.add_component(ComponentKind.ADDER)
        gradientor = graph.add_component(ComponentKind.GRADIENTOR)

        assert link(graph, resolver, adder.ports[2].ref, gradientor.ports[0].ref) is not None
        connection, reason = resolver.can_connect(adder.ports[2].ref, gradientor.ports[0].ref)
        assert connection is None
        assert reason == "Connection already exists."


class TestFanOut:
    """Tests for source capacity."""

    def test_adder_output_fans_out(self, graph, resolver):
        adder = graph.add_component(ComponentKind.ADDER)
        targets = [graph.add_component(ComponentKind.GRADIENTOR) for _ in range(3)]

        for target in targets:
            assert link(graph, resolver, adder.ports[2].ref, target.ports[0].ref) is not None
        assert len(graph.connections_from(adder.id)) == 3

    def test_gradientor_output_fans_out(self, graph, resolver):
        gradientor = graph.add_component(ComponentKind.GRADIENTOR)
        first = graph.add_component(ComponentKind.ADDER)
        second = graph.add_component(ComponentKind.STORAGE)

        assert link(graph, resolver, gradientor.ports[1].ref, first.ports[0].ref) is not None
        assert link(graph, resolver, gradientor.ports[1].ref, second.ports[0].ref) is not None

    def test_factory_output_single_link(self, graph, resolver):
        """Each factory output feeds one port; its other outputs stay free."""
        factory = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        adder = graph.add_component(ComponentKind.ADDER)

        assert link(graph, resolver, factory.ports[0].ref, adder.ports[0].ref) is not None
        assert link(graph, resolver, factory.ports[0].ref, adder.ports[1].ref) is None
        assert link(graph, resolver, factory.ports[1].ref, adder.ports[1].ref) is not None

    def test_storage_source_single_link(self, graph, resolver):
        storage = graph.add_component(ComponentKind.STORAGE)
        first = graph.add_component(ComponentKind.GRADIENTOR)
        second = graph.add_component(ComponentKind.GRADIENTOR)

        assert link(graph, resolver, storage.ports[3].ref, first.ports[0].ref) is not None
        assert link(graph, resolver, storage.ports[3].ref, second.ports[0].ref) is None

    def test_flex_port_can_store_and_forward(self, graph, resolver):
        """A fed flex port may also source one link."""
        factory = graph.add_component(ComponentKind.FACTORY, color=Color(255, 0, 0))
        storage = graph.add_component(ComponentKind.STORAGE)
        gradientor = graph.add_component(ComponentKind.GRADIENTOR)

        assert link(graph, resolver, factory.ports[0].ref, storage.ports[0].ref) is not None
        assert link(graph, resolver, storage.ports[0].ref, gradientor.ports[0].ref) is not None
