import pytest

from morphtables.stems import (
    DEFAULT_NAMESPACE,
    DEFAULT_TARGET_DIR,
    StemEntry,
    mix_type,
    parse_switches,
    split_article,
)

TABLES = ["-flex-table=f.bin", "-flex-index=f.idx", "-intr-table=i.bin", "-intr-index=i.idx"]


def test_higher_chrmax_sorts_first():
    assert StemEntry(chrmin=1, chrmax=200) < StemEntry(chrmin=1, chrmax=100)
    assert not StemEntry(chrmin=1, chrmax=100) < StemEntry(chrmin=1, chrmax=200)


def test_lower_chrmin_sorts_first_on_equal_chrmax():
    assert StemEntry(chrmin=10, chrmax=50) < StemEntry(chrmin=20, chrmax=50)


def test_postfix_then_lexid_order():
    a = StemEntry(chrmin=1, chrmax=2, stpost="", nlexid=9)
    b = StemEntry(chrmin=1, chrmax=2, stpost="ся", nlexid=1)
    c = StemEntry(chrmin=1, chrmax=2, stpost="ся", nlexid=2)
    assert sorted([c, b, a]) == [a, b, c]


def test_equality_ignores_class():
    assert StemEntry(1, 2, 3, oclass=5) == StemEntry(1, 2, 3, oclass=7)


def test_split_article_fields():
    article = split_article("слово  # м 1a  {разг.} post:ка")
    assert article.norm == "слово"
    assert article.dies == "#"
    assert article.type == "м"
    assert article.zindex == "1a"
    assert article.comment == "{разг.} post:ка"


def test_split_article_replaces_yo():
    assert split_article("ёлка # ж 3*a").norm == "елка"


def test_split_article_field_too_long():
    with pytest.raises(ValueError):
        split_article("слово " + "x" * 0x20 + " м 1a")


def test_parse_switches_defaults():
    options = parse_switches(TABLES + ["dict.txt"])
    assert options.flex_table == "f.bin"
    assert options.intr_index == "i.idx"
    assert options.target_dir == DEFAULT_TARGET_DIR
    assert options.namespace == DEFAULT_NAMESPACE
    assert options.dictionaries == ["dict.txt"]


def test_parse_switches_colon_form():
    options = parse_switches(TABLES + ["-namespace:ns", "a", "b"])
    assert options.namespace == "ns"
    assert options.dictionaries == ["a", "b"]


def test_parse_switches_duplicate():
    with pytest.raises(ValueError, match="already defined"):
        parse_switches(TABLES + ["-flex-table=other", "d"])


def test_parse_switches_invalid():
    with pytest.raises(ValueError, match="invalid switch"):
        parse_switches(TABLES + ["-bogus=1", "d"])


def test_parse_switches_missing_tables():
    with pytest.raises(ValueError, match="tables"):
        parse_switches(["-flex-table=f", "d"])


def test_parse_switches_no_dictionaries():
    with pytest.raises(ValueError, match="dictionaries"):
        parse_switches(TABLES)


def test_mix_type_values():
    assert mix_type(0) == 0
    assert [mix_type(t) for t in range(1, 7)] == [1] * 6
    assert mix_type(25) == 8
    assert mix_type(26) == 0
    assert mix_type(0x40 | 7) == mix_type(7)