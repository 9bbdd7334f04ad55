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
"""Encoded request path (EPath) of a Class/Instance/Attribute triple

Example:
    class 5, instance 2, attribute 1:       20 05 24 02 30 01
    class 0x105, instance 2, attribute 1:   21 00 05 01 24 02 30 01
"""
import logging
import struct

from scapy_cip_path.cip_constants import logical_segments, logical_8bit_limit
import scapy_cip_path_common.utils as utils

log = logging.getLogger("cip.path.epath")


def logical_segment(kind, value):
    """Encode one logical segment, in its 8-bit form when the value allows it

    The 16-bit form is padded to keep the value word aligned; bits above 16 are dropped.
    """
    fmt8, fmt16 = logical_segments[kind]
    if value <= logical_8bit_limit:
        return struct.pack("BB", fmt8, value & 0xff)
    return struct.pack("<BBH", fmt16, 0, value & 0xffff)


def encode_epath(class_id, instance_id, attribute_id=0):
    """Return the EPath addressing an object instance, or one of its attributes

    An attribute_id of 0 addresses the whole instance and produces no attribute segment.
    """
    content = logical_segment("class", class_id) + logical_segment("instance", instance_id)
    if attribute_id != 0:
        content += logical_segment("attribute", attribute_id)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("EPath class %#x instance %#x attribute %#x:\n%s",
                  class_id, instance_id, attribute_id, utils.dump(content))
    return content
