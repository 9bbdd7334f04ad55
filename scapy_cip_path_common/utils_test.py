from scapy.all import Packet, StrLenField

import scapy_cip_path_common.utils as utils


class _Sized(Packet):
    fields_desc = [
        utils.WordLenField("size", None, length_of="data"),
        StrLenField("data", b"", length_from=lambda p: 2 * p.size),
    ]


def test_parse_int():
    assert utils.parse_int("42") == 42
    assert utils.parse_int(" +7 ") == 7
    assert utils.parse_int("-1") == -1
    for token in ("", "abc", "0x10", "1.2", "1_000", None, 5):
        assert utils.parse_int(token) is None, token


def test_parse_byte():
    assert utils.parse_byte("0") == 0
    assert utils.parse_byte("255") == 255
    assert utils.parse_byte("256") is None
    assert utils.parse_byte("-1") is None


def test_dump():
    text = utils.dump(b"\x20\x01")
    assert "20 01" in text


def test_word_len_field():
    assert bytes(_Sized(data=b"\x01\x02\x03\x04")) == b"\x02\x01\x02\x03\x04"
    assert _Sized(data=b"\x01\x02\x03").size is None
    assert bytes(_Sized(data=b"\x01\x02\x03"))[0] == 2


def run_tests():
    test_parse_int()
    test_parse_byte()
    test_dump()
    test_word_len_field()


if __name__ == '__main__':
    run_tests()
