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
"""Generic CIP path builder

Turns the textual notation used by RSLinx-like tools, eg. "0,1,192.168.2.1,0,1", into the path
bytes.  Numeric tokens become one byte each.  A token holding a "." is an extended address: the
previous byte gets bit 4 set, then the token is stored as a length byte followed by its ASCII
characters (the text itself, not a binary IP address).  The result is padded to a whole number of
16-bit words.
"""
import logging

from scapy_cip_path.cip_constants import extended_token_flag
from scapy_cip_path.errors import InvalidInputError, PathFormatError, PathRangeError
import scapy_cip_path_common.utils as utils

log = logging.getLogger("cip.path.tokens")


def _tokens(path):
    for char in " []":
        path = path.replace(char, "")
    return [tok for tok in path.split(",") if tok]


def encode_path(path):
    """Encode a comma separated CIP path, eg. "0,1,192.168.2.1,0,1", into bytes"""
    if path is None or not path.strip():
        raise InvalidInputError("Invalid path: empty or null.")

    content = bytearray()
    for token in _tokens(path):
        if "." in token:
            if not content:
                raise InvalidInputError(
                    "Invalid path: an IP address segment cannot be the first element.")
            content[-1] |= extended_token_flag
            content.append(len(token) & 0xff)
            content += token.encode("ascii", "replace")
            continue

        value = utils.parse_int(token)
        if value is None:
            raise PathFormatError("Problem converting {!r} to a number.".format(token))
        if not 0 <= value <= 0xff:
            raise PathRangeError("Number out of range: {}".format(token))
        content.append(value)

    if len(content) % 2:
        content.append(0)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Encoded path %r:\n%s", path, utils.dump(content))
    return bytes(content)
