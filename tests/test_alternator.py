import pytest

from morphtables.alternator import Alternator, default_fragment, map_mix_type, min_max_char
from morphtables.interchange import Collector, Interchange


def _interchange(*steps):
    interchange = Interchange()
    for step, text in enumerate(steps):
        interchange.add_step(text, step)
    return interchange


def _byte(text):
    return text.encode("cp1251")[0]


@pytest.fixture
def compiled():
    collector = Collector()
    collector.add_interchange("ж 3*a", "ш", _interchange("к", "ек"))
    collector.add_interchange("ж 3*a", "о", _interchange("к", "ок"))
    collector.add_interchange("м 1a", "ле", _interchange("", "е"))
    collector.relocate_tables()
    alternator = Alternator().load(collector.store_references())
    return collector, collector.store_tables(), alternator


@pytest.mark.parametrize(
    "name, expected",
    [("ле", 0), ("ге", 1), ("ш", 2), ("к", 3), ("ь", 4), ("й", 5), ("о", 6), ("x", None)],
)
def test_map_mix_type(name, expected):
    assert map_mix_type(name) == expected


def test_default_fragment(compiled):
    collector, tables, _ = compiled
    assert default_fragment(tables, collector.interchanges[0].offset) == "к".encode("cp1251")
    assert default_fragment(tables, collector.interchanges[2].offset) == b""


def test_default_fragment_missing():
    with pytest.raises(ValueError):
        default_fragment(bytes([1, 0x21, 0x41]), 0)


def test_min_max_char(compiled):
    collector, tables, _ = compiled
    offset = collector.interchanges[0].offset
    assert min_max_char(tables, offset, 1, 2) == (_byte("е"), _byte("к"))


def test_min_max_char_empty_fragment(compiled):
    collector, tables, _ = compiled
    offset = collector.interchanges[2].offset
    assert min_max_char(tables, offset, 7, 9) == (7, _byte("е"))


def test_min_max_char_no_fragments():
    assert min_max_char(bytes([0]), 0, 7, 9) == (0xFF, 9)


def test_load_registers_names(compiled):
    _, _, alternator = compiled
    assert "ж 3*a" in alternator
    assert "м 1a" in alternator
    assert "м 2a" not in alternator


def test_find_hissing_noun(compiled):
    collector, tables, alternator = compiled
    assert alternator.find(tables, "ж 3*a", 13, "мышк", "") == collector.interchanges[0].offset


def test_find_ordinary_noun(compiled):
    collector, tables, alternator = compiled
    assert alternator.find(tables, "ж 3*a", 13, "сумк", "") == collector.interchanges[1].offset


def test_find_verb_by_remark(compiled):
    collector, tables, alternator = compiled
    assert alternator.find(tables, "ж 3*a", 1, "мышк", "ш") == collector.interchanges[0].offset
    assert alternator.find(tables, "ж 3*a", 1, "мышк", "x") == collector.interchanges[1].offset


def test_find_le(compiled):
    collector, tables, alternator = compiled
    assert alternator.find(tables, "м 1a", 7, "улей", "") == collector.interchanges[2].offset
    assert alternator.find(tables, "м 1a", 7, "бой", "") == 0


def test_find_stem_without_default_tail(compiled):
    _, tables, alternator = compiled
    assert alternator.find(tables, "ж 3*a", 13, "мышь", "") == 0


def test_find_unknown_table(compiled):
    _, tables, alternator = compiled
    assert alternator.find(tables, "с 1a", 16, "мышк", "") == 0


def test_load_truncated(compiled):
    collector, _, _ = compiled
    with pytest.raises(ValueError):
        Alternator().load(collector.store_references()[:-1])


def test_load_condition_too_long():
    collector = Collector()
    collector.add_interchange("м 1a", "o" * 16, _interchange("к", "ек"))
    collector.relocate_tables()
    with pytest.raises(ValueError):
        Alternator().load(collector.store_references())


def test_load_missing_condition_set():
    with pytest.raises(ValueError):
        Alternator().load(bytes([0, 1, 1, ord("x"), 0]))