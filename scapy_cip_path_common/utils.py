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
"""Useful routines and utilities which simplify code writing"""
import re

from hexdump import hexdump
from scapy.all import FieldLenField

# Same leniency as a .NET int.TryParse: optional sign, surrounding whitespace
_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*\Z")


def parse_int(token):
    """Return the base-10 integer in token, or None if it is not one"""
    if not isinstance(token, str) or not _INTEGER_RE.match(token):
        return None
    return int(token)


def parse_byte(token):
    """Return the integer in token if it fits in an unsigned byte, else None"""
    value = parse_int(token)
    if value is None or not 0 <= value <= 0xff:
        return None
    return value


def dump(data):
    """Render bytes as a hexdump block for log messages"""
    return hexdump(bytes(data), result='return')


class WordLenField(FieldLenField):
    """A 1-byte len field holding the size of another field in 16-bit words"""

    def __init__(self, name, default, length_of=None):
        FieldLenField.__init__(self, name, default, length_of=length_of, fmt="B",
                               adjust=lambda pkt, x: (x + 1) // 2)
