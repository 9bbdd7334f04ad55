# -*- coding: utf-8 -*-
# Copyright (c) 2022, Vojtěch Chvojka, Rockwell Automation, inc.
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
"""CIP routes made of port segments

A port segment tells a device which of its ports to send the request out of, and the link
address to reach on that port:

    +----+----+----+--------------------+----+----+----+----+
    | Segment Type | Extended Link Addr | Port Identifier   |
    +====+====+====+====================+====+====+====+====+
    |  7 |  6 | 5  |         4          |  3 |  2 |  1 |  0 |
    +----+----+----+--------------------+----+----+----+----+

A simple segment is the two bytes [port, link].  When the link is an IP address the segment is
extended: [0x90 | port, address length, address bytes...].

Unlike the textual path builder, addresses are always stored in binary form here, and only IP
addresses may be used as extended links.
"""
import ipaddress
import logging
import math

from scapy_cip_path.cip_constants import extended_port_base, port_names
from scapy_cip_path.errors import InvalidInputError
import scapy_cip_path_common.utils as utils

log = logging.getLogger("cip.path.route")


def resolve_port(port):
    """Return the port identifier for a port number or a well-known port name, eg. "bp" """
    if isinstance(port, int) and not isinstance(port, bool):
        if not 0 <= port <= 0xff:
            raise InvalidInputError("Port out of range: {}".format(port))
        return port
    if isinstance(port, str):
        try:
            return port_names[port.lower()]
        except KeyError:
            raise InvalidInputError("Unknown port name: {}".format(port)) from None
    raise InvalidInputError("Port must be an integer or a string, not {!r}".format(port))


def _ip_address(link):
    """Return link as an IPv4/IPv6 address, or None if it is not one

    An IPv6 zone, eg. "fe80::1%eth0", is accepted but is not part of the encoded address.
    """
    try:
        return ipaddress.ip_address(link)
    except ValueError:
        return None


def _extended_segment(port, address):
    packed = address.packed
    return bytes([extended_port_base | port, len(packed)]) + packed


class CipSegment(object):
    """A segment of a CIP path"""
    __slots__ = ()

    def encode(self):
        """Return the bytes of the segment"""
        raise NotImplementedError


class PortSegment(CipSegment):
    """One port/link hop of a route"""
    __slots__ = ("_port", "_link")

    def __init__(self, port, link):
        self._port = resolve_port(port)
        self._link = str(link)

    @property
    def port(self):
        return self._port

    @property
    def link(self):
        return self._link

    @property
    def is_extended(self):
        return _ip_address(self._link) is not None

    def encode(self):
        address = _ip_address(self._link)
        if address is not None:
            return _extended_segment(self._port, address)

        link = utils.parse_byte(self._link)
        if link is None:
            raise InvalidInputError(
                "For non-extended segment, link must be a numeric value, not {!r}".format(self._link))
        return bytes([self._port, link])

    def __eq__(self, other):
        if not isinstance(other, PortSegment):
            return NotImplemented
        return (self._port, self._link) == (other._port, other._link)

    def __hash__(self):
        return hash((self._port, self._link))

    def __repr__(self):
        return "<PortSegment port={} link={!r}{}>".format(
            self._port, self._link, " extended" if self.is_extended else "")


class Route(object):
    """A CIP route, ie. the port segments leading to the target device"""

    def __init__(self):
        self._segments = bytearray()

    @staticmethod
    def _byte(value, what):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xff:
            raise InvalidInputError("Invalid {} {!r}".format(what, value))
        return value

    def add_simple_segment(self, port, link):
        """Add a two bytes segment, eg. port 1 (backplane), link 0 (slot 0)"""
        self._segments += bytes([self._byte(port, "port"), self._byte(link, "link")])
        return self

    def add_extended_segment(self, port, ip):
        """Add a segment whose link is an IP address (string or ipaddress object)"""
        port = self._byte(port, "port")
        if not isinstance(ip, (str, ipaddress.IPv4Address, ipaddress.IPv6Address)):
            raise InvalidInputError("Invalid IP address {!r}".format(ip))
        try:
            address = ipaddress.ip_address(ip)
        except ValueError:
            raise InvalidInputError("Invalid IP address {!r}".format(ip)) from None
        self._segments += _extended_segment(port, address)
        return self

    def add_segment(self, segment):
        """Add an already built segment, eg. a PortSegment"""
        self._segments += segment.encode()
        return self

    @classmethod
    def parse(cls, route_spec):
        """Parse a "port,link[,port,link...]" route, eg. "2,10.152.35.148,1,0" """
        if route_spec is None:
            raise InvalidInputError("Invalid route: null.")
        parts = [part.strip() for part in route_spec.split(",")]
        parts = [part for part in parts if part]
        if len(parts) % 2:
            raise InvalidInputError(
                "Invalid route {!r}: expecting port,link pairs, got {} elements".format(
                    route_spec, len(parts)))

        route = cls()
        for port_part, link_part in zip(parts[::2], parts[1::2]):
            port = utils.parse_byte(port_part)
            if port is None:
                raise InvalidInputError("Invalid port '{}'".format(port_part))

            address = _ip_address(link_part)
            if address is not None:
                route.add_extended_segment(port, address)
                continue

            link = utils.parse_byte(link_part)
            if link is None:
                raise InvalidInputError("Invalid segment '{}'".format(link_part))
            route.add_simple_segment(port, link)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Converted route %r:\n%s", route_spec, utils.dump(route._segments))
        return route

    def get_bytes(self):
        """Return the route path bytes"""
        return bytes(self._segments)

    def combine_with_application_path(self, epath):
        """Return the complete CIP path: this route followed by the (already encoded) epath"""
        return bytes(self._segments) + bytes(epath)

    def word_count(self, epath=b""):
        """Size in 16-bit words of the route followed by epath"""
        return math.ceil((len(self._segments) + len(epath)) / 2)

    def __bytes__(self):
        return self.get_bytes()

    def __len__(self):
        return len(self._segments)

    def __repr__(self):
        return "<Route {}>".format(self._segments.hex())
