import pytest

from morphtables.wordinfo import (
    WF_FLEXES,
    WF_MIX_TAB,
    StemInfo,
    is_adjective,
    is_verb,
)


def _words(*values):
    return b"".join(value.to_bytes(2, "little") for value in values)


def test_load_plain_record():
    info = StemInfo.load(_words(7))
    assert (info.wdinfo, info.tfoffs, info.mtoffs) == (7, 0, 0)
    assert info.size == 2
    assert info.flex_table_offset is None
    assert info.swap_table_offset is None


def test_load_with_flexion_table():
    info = StemInfo.load(_words(WF_FLEXES | 7, 5))
    assert info.word_type == 7
    assert info.tfoffs == 5
    assert info.mtoffs == 0
    assert info.flex_table_offset == 5 << 4
    assert info.size == 4


def test_load_with_both_tables():
    info = StemInfo.load(_words(WF_FLEXES | WF_MIX_TAB | 1, 3, 9))
    assert info.tfoffs == 3
    assert info.mtoffs == 9
    assert info.swap_table_offset == 9
    assert info.size == 6


def test_mix_table_without_flexions():
    info = StemInfo.load(_words(WF_MIX_TAB | 13, 11))
    assert info.tfoffs == 0
    assert info.mtoffs == 11


def test_preposition_always_reads_case_scale():
    info = StemInfo.load(_words(51, 0x21))
    assert info.tfoffs == 0x21
    assert info.flex_table_offset is None
    assert info.size == 4


def test_truncated_record_raises():
    with pytest.raises(ValueError):
        StemInfo.load(_words(WF_FLEXES | 7))
    with pytest.raises(ValueError):
        StemInfo.load(b"\x01")


@pytest.mark.parametrize("info", [0, 1, 3, 6, WF_FLEXES | 2])
def test_verbs(info):
    assert is_verb(info)


@pytest.mark.parametrize("info", [7, 25, 51, WF_MIX_TAB | 13])
def test_not_verbs(info):
    assert not is_verb(info)


@pytest.mark.parametrize("info", [25, 26, 27, 28, 34, 36, 42, WF_FLEXES | 25])
def test_adjectives(info):
    assert is_adjective(info)


@pytest.mark.parametrize("info", [1, 24, 29, 33, 35, 52])
def test_not_adjectives(info):
    assert not is_adjective(info)