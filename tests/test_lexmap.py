import pytest

from morphtables.lexmap import LexIdMap, main, parse_lid, report, scan_lines


def make_map(ids):
    lexmap = LexIdMap()
    for lex in ids:
        lexmap.insert(lex)
    return lexmap


def test_insert_reports_duplicates():
    lexmap = LexIdMap()
    assert lexmap.insert(7) is True
    assert lexmap.insert(7) is False
    assert len(lexmap) == 1


def test_insert_rejects_negative():
    with pytest.raises(ValueError):
        LexIdMap().insert(-1)


def test_contains():
    lexmap = make_map([3, 70])
    assert 3 in lexmap
    assert 70 in lexmap
    assert 4 not in lexmap


def test_min_and_max():
    lexmap = make_map([5, 40, 3])
    assert lexmap.min_id() == 3
    assert lexmap.max_id() == 40


def test_empty_map_has_no_bounds():
    lexmap = LexIdMap()
    assert lexmap.min_id() is None
    assert lexmap.max_id() is None
    assert list(lexmap.holes()) == []


def test_next_hole_is_unused_and_first():
    ids = [0, 1, 2, 3, 8]
    lexmap = make_map(ids)
    hole = lexmap.next_hole(0)
    assert hole not in lexmap
    assert all(item in lexmap for item in range(0, hole))


def test_next_hole_none_when_groups_full():
    lexmap = make_map(range(32))
    assert lexmap.next_hole(0) is None


def test_holes_cover_gaps_exactly():
    ids = {1, 2, 3, 10, 11, 40, 45}
    lexmap = make_map(ids)
    holes = list(lexmap.holes())
    covered = set(ids)
    for low, high in holes:
        assert low - 1 in lexmap
        assert high + 1 in lexmap
        gap = set(range(low, high + 1))
        assert not gap & ids
        covered |= gap
    assert covered == set(range(min(ids), max(ids) + 1))


def test_no_holes_when_contiguous():
    lexmap = make_map(range(5, 20))
    assert list(lexmap.holes()) == []


def test_parse_lid_decimal():
    assert parse_lid("word LID:42 rest") == 42


def test_parse_lid_hex():
    assert parse_lid("word\tLID:0x10\n") == 16


def test_parse_lid_needs_preceding_space():
    assert parse_lid("LID:5") == 0
    assert parse_lid("xLID:5") == 0


def test_parse_lid_skips_zero_values():
    assert parse_lid("a LID:0 LID:7") == 7


def test_parse_lid_without_mark():
    assert parse_lid("just a word") == 0


def test_scan_lines_warns_about_duplicates(capsys):
    lexmap = scan_lines(["a LID:3\n", "b LID:3\n", "c LID:9\n"])
    assert 3 in lexmap and 9 in lexmap
    assert len(lexmap) == 2
    assert "Lexical identifier 3 is already used!" in capsys.readouterr().err


def test_report_empty():
    assert report(LexIdMap()) == (
        "No lexemes present, no lines with LEXID:nnn string found\n"
    )


def test_report_bounds():
    assert report(make_map([1, 2])) == (
        "Minimal lexeme: 1 (00000001)\nMaximal lexeme: 2 (00000002)\n"
    )


def test_report_hole_line():
    text = report(make_map([1, 2, 5]))
    assert "\tHole of 2 items, 3 (00000003) - 4 (00000004)\n" in text


def test_main_prints_report(tmp_path, capsys):
    lines = ["one LID:1\n", "two LID:2\n", "three LID:20\n"]
    path = tmp_path / "dict.txt"
    path.write_text("".join(lines), encoding="latin-1")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == report(scan_lines(lines))


def test_main_without_arguments(capsys):
    assert main([]) != 0
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) != 0
    assert "Could not open file" in capsys.readouterr().err