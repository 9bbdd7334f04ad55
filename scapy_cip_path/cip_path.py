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
"""Scapy packets carrying encoded CIP paths

The path encoders only produce bytes; these packets put them in the layout CIP requests use,
a size in 16-bit words followed by the path itself.
"""
from scapy.all import Packet, StrLenField, XByteField

from scapy_cip_path.epath import encode_epath
from scapy_cip_path.path_tokens import encode_path
import scapy_cip_path_common.utils as utils


class CipPath(Packet):
    """Request path of a CIP message, or connection path of a Forward Open"""
    name = "CipPath"
    fields_desc = [
        utils.WordLenField("wordsize", None, length_of="path"),
        StrLenField("path", b"", length_from=lambda p: 2 * p.wordsize),
    ]

    def extract_padding(self, p):
        return b"", p

    @classmethod
    def make(cls, class_id, instance_id, attribute_id=0):
        """Create a CipPath addressing an object instance or attribute"""
        return cls(path=encode_epath(class_id, instance_id, attribute_id))

    @classmethod
    def make_routed(cls, route, class_id, instance_id, attribute_id=0):
        """Create a CipPath going through route before addressing the object"""
        epath = encode_epath(class_id, instance_id, attribute_id)
        return cls(wordsize=route.word_count(epath),
                   path=route.combine_with_application_path(epath))

    @classmethod
    def make_str(cls, text):
        """Create a CipPath from its textual notation, eg. "1,0,32,2,36,1" """
        return cls(path=encode_path(text))


class CipRoutePath(Packet):
    """Route path closing an Unconnected Send request"""
    name = "CipRoutePath"
    fields_desc = [
        utils.WordLenField("route_path_size", None, length_of="route_path"),
        XByteField("reserved", 0),
        StrLenField("route_path", b"", length_from=lambda p: 2 * p.route_path_size),
    ]

    def extract_padding(self, p):
        return b"", p

    @classmethod
    def make(cls, route):
        return cls(route_path=route.get_bytes())
