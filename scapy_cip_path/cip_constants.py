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
"""Wire constants of CIP path segments

Documentation:
* CIP Vol. 1, Appendix C "Data Management", C-1.4 Segment Types
"""
from types import MappingProxyType

# Port segment: bit 4 of the segment byte flags an extended link address
# (0x90 = extended port segment, low nibble is the port identifier)
extended_port_base = 0x90

# Textual path builder: bit 4 of the byte preceding an extended token
extended_token_flag = 0x10

# Logical segments: (8-bit format, 16-bit format)
logical_segments = {
    "class": (0x20, 0x21),
    "instance": (0x24, 0x25),
    "attribute": (0x30, 0x31),
}

# Largest value still encoded in the 8-bit logical format
logical_8bit_limit = 0xfe

# Well-known port names, keys are lower case
port_names = MappingProxyType({
    "backplane": 0x01,
    "bp": 0x01,
    "enet": 0x02,
    "dhrio-a": 0x02,
    "dhrio-b": 0x03,
    "dnet": 0x02,
    "cnet": 0x02,
    "dh485-a": 0x02,
    "dh485-b": 0x03,
})
