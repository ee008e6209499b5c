import pytest

from udp_discovery.discovery import DiscoveryMessage


def test_from_ipv4_address():
    message = DiscoveryMessage.from_address(("192.168.1.5", 4000))
    assert message.ip == "192.168.1.5"
    assert message.port == 4000


def test_from_ipv6_address_ignores_flow_and_scope():
    message = DiscoveryMessage.from_address(("::1", 5000, 0, 0))
    assert message == DiscoveryMessage("::1", 5000)


def test_str_joins_ip_and_port():
    assert str(DiscoveryMessage("10.0.0.7", 1234)) == "10.0.0.7:1234"


def test_equal_messages_share_a_hash():
    first = DiscoveryMessage.from_address(("10.0.0.7", 1234))
    second = DiscoveryMessage("10.0.0.7", 1234)
    assert {first, second} == {first}


def test_is_immutable():
    message = DiscoveryMessage("10.0.0.7", 1234)
    with pytest.raises(AttributeError):
        message.port = 1
    assert message.port == 1234
    assert message == DiscoveryMessage("10.0.0.7", 1234)