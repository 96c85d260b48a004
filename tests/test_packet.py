import pytest

from packetnet.packet import Packet


def test_marshall_with_data():
    assert Packet("1", "hello").marshall() == "1;hello"


def test_marshall_without_data_uses_placeholder():
    assert Packet("2", None).marshall() == "2;_"


def test_unwrap_data_placeholder():
    assert Packet("3").unwrap_data() == "_"
    assert Packet("3", "x").unwrap_data() == "x"


def test_unmarshall_with_data():
    packet = Packet.unmarshall("1;hello")
    assert packet == Packet("1", "hello")


def test_unmarshall_placeholder_means_no_data():
    assert Packet.unmarshall("4;_").data is None


def test_unmarshall_splits_only_on_first_separator():
    packet = Packet.unmarshall("1;a;b")
    assert packet.header == "1"
    assert packet.data == "a;b"


def test_unmarshall_without_separator():
    packet = Packet.unmarshall("lonely")
    assert packet.header == "lonely"
    assert packet.data is None


def test_unmarshall_empty_string():
    assert Packet.unmarshall("") == Packet("", None)


def test_unmarshall_empty_data_is_kept():
    assert Packet.unmarshall("1;").data == ""


@pytest.mark.parametrize(
    "packet",
    [Packet("1", "some text"), Packet("2", None), Packet("3", "127.0.0.1:80"), Packet("x", "")],
)
def test_round_trip(packet):
    assert Packet.unmarshall(packet.marshall()) == packet