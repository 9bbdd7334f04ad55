import ipaddress

from scapy_cip_path.errors import InvalidInputError
from scapy_cip_path.route import PortSegment, Route, resolve_port
from scapy_cip_path_common.test_utils import AssertRaises


def test_resolve_port():
    assert resolve_port(2) == 2
    assert resolve_port("bp") == 1
    assert resolve_port("Backplane") == 1
    assert resolve_port("ENET") == 2
    assert resolve_port("dhrio-a") == 2
    assert resolve_port("DH485-B") == 3
    for bad in ("usb", "2", 256, -1, True, 2.0, None):
        with AssertRaises(InvalidInputError):
            resolve_port(bad)


def test_simple_port_segment():
    segment = PortSegment(1, "3")
    assert not segment.is_extended
    assert segment.port == 1
    assert segment.link == "3"
    assert segment.encode() == b"\x01\x03"
    assert PortSegment("backplane", 0).encode() == b"\x01\x00"


def test_simple_port_segment_bad_link():
    for link in ("abc", "256", "1.2.3"):
        segment = PortSegment(1, link)
        assert not segment.is_extended
        with AssertRaises(InvalidInputError):
            segment.encode()


def test_extended_port_segment_ipv4():
    for port, link in [(2, "192.168.1.10"), (1, "10.152.35.148"), ("enet", "0.0.0.0")]:
        segment = PortSegment(port, link)
        assert segment.is_extended
        data = segment.encode()
        assert data[0] == 0x90 | segment.port
        assert data[1] == 4
        assert data[2:] == bytes(int(octet) for octet in link.split("."))
    assert PortSegment(2, "192.168.1.10").encode() == b"\x92\x04\xc0\xa8\x01\x0a"


def test_extended_port_segment_ipv6():
    data = PortSegment("enet", "fe80::1").encode()
    assert data[:2] == b"\x92\x10"
    assert data[2:] == ipaddress.ip_address("fe80::1").packed
    assert len(data) == 18


def test_extended_port_segment_ipv6_zone_is_dropped():
    segment = PortSegment(2, "fe80::1%eth0")
    assert segment.is_extended
    assert segment.encode() == PortSegment(2, "fe80::1").encode()


def test_port_segment_is_immutable():
    segment = PortSegment(2, "192.168.1.10")
    with AssertRaises(AttributeError):
        segment.link = "1"
    with AssertRaises(AttributeError):
        segment.is_extended = False
    assert segment == PortSegment("enet", "192.168.1.10")


def test_build_route():
    route = Route()
    route.add_simple_segment(1, 3)
    route.add_extended_segment(2, "192.168.1.10")
    assert route.get_bytes() == b"\x01\x03\x92\x04\xc0\xa8\x01\x0a"
    assert bytes(route) == route.get_bytes()
    assert len(route) == 8


def test_route_from_port_segments():
    route = Route().add_segment(PortSegment("enet", "10.0.0.2")).add_segment(PortSegment("bp", "0"))
    assert route.get_bytes() == Route.parse("2,10.0.0.2,1,0").get_bytes()


def test_route_rejects_bad_values():
    with AssertRaises(InvalidInputError):
        Route().add_simple_segment(256, 0)
    with AssertRaises(InvalidInputError):
        Route().add_simple_segment(1, "0")
    with AssertRaises(InvalidInputError):
        Route().add_extended_segment(2, "192.168.1")
    with AssertRaises(InvalidInputError):
        Route().add_extended_segment(2, 3)
    with AssertRaises(InvalidInputError):
        Route().add_extended_segment(2, b"\xc0\xa8\x01\x0a")
    assert Route().add_extended_segment(2, ipaddress.ip_address("10.0.0.1")).get_bytes() == \
        b"\x92\x04\x0a\x00\x00\x01"


def test_parse_matches_manual_route():
    assert Route.parse("1,3").get_bytes() == Route().add_simple_segment(1, 3).get_bytes()
    assert Route.parse("2,192.168.1.10").get_bytes() == \
        Route().add_extended_segment(2, "192.168.1.10").get_bytes()
    assert Route.parse(" 2 , 10.152.35.148 , 1 , 0 ").get_bytes() == \
        b"\x92\x04\x0a\x98\x23\x94\x01\x00"


def test_parse_empty_route():
    assert Route.parse("").get_bytes() == b""


def test_parse_errors():
    for spec in (None, "1", "1,2,3", "x,1", "256,1", "1,abc", "1,300", "bp,0"):
        with AssertRaises(InvalidInputError):
            Route.parse(spec)


def test_combine_and_word_count():
    route = Route.parse("1,0")
    epath = b"\x20\x06\x24\x01"
    assert route.combine_with_application_path(epath) == b"\x01\x00\x20\x06\x24\x01"
    assert route.word_count(epath) == 3
    assert route.word_count(b"\x20") == 2
    assert route.word_count() == 1
    assert Route().combine_with_application_path(epath) == epath


def test_route_buffer_is_not_shared():
    route = Route.parse("1,0")
    data = route.get_bytes()
    route.add_simple_segment(1, 1)
    assert data == b"\x01\x00"
    assert route.get_bytes() == b"\x01\x00\x01\x01"


def run_tests():
    test_resolve_port()
    test_simple_port_segment()
    test_simple_port_segment_bad_link()
    test_extended_port_segment_ipv4()
    test_extended_port_segment_ipv6()
    test_extended_port_segment_ipv6_zone_is_dropped()
    test_port_segment_is_immutable()
    test_build_route()
    test_route_from_port_segments()
    test_route_rejects_bad_values()
    test_parse_matches_manual_route()
    test_parse_empty_route()
    test_parse_errors()
    test_combine_and_word_count()
    test_route_buffer_is_not_shared()


if __name__ == '__main__':
    run_tests()
