import pytest

from raymaze.xpm import (
    XpmError,
    find,
    find_unquoted,
    load_xpm_file,
    parse_xpm,
    quoted_lines,
    str_to_wordtab,
    strip_comments,
    text_rgb,
    xpm_to_image,
)

SAMPLE = ["4 2 2 1", "a c #FF0000", "b c None", "abba", "baab"]


def test_str_to_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  4 2\t2 1 ") == ["4", "2", "2", "1"]
    assert str_to_wordtab(" \t ") == []


def test_find():
    assert find("abcabc", "ca") == 2
    assert find("abc", "zz") == -1


def test_find_unquoted_skips_strings():
    assert find_unquoted('"/*" /* x */', "/*") == 5
    assert find_unquoted('"//"', "//") == -1
    assert find_unquoted("plain", "ai") == 2


def test_strip_comments_keeps_length():
    assert strip_comments("a /* b */ c") == "a " + " " * 7 + " c"
    assert strip_comments("x // y\nz") == "x " + " " * 5 + "z"
    assert strip_comments('"/* kept */"') == '"/* kept */"'


def test_strip_comments_unterminated():
    with pytest.raises(XpmError):
        strip_comments("a /* b")


def test_quoted_lines():
    assert list(quoted_lines('{ "ab", "cd" }')) == ["ab", "cd"]
    assert list(quoted_lines('"open')) == []


def test_text_rgb():
    assert text_rgb("#FF0000", None) == 0xFF0000
    assert text_rgb("None", None) == -1
    assert text_rgb("dark", "red") == 0x8B0000
    assert text_rgb("WHITE", None) == 0xFFFFFF
    assert text_rgb("nosuch", None) == 0


def test_parse_xpm_rows():
    rows = parse_xpm(SAMPLE)
    red, clear = 0xFF0000, 0xFF000000
    assert rows == [[red, clear, clear, red], [clear, red, red, clear]]


def test_xpm_to_image():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (4, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_unknown_key_is_black():
    assert parse_xpm(["2 1 1 1", "a c #00FF00", "az"]) == [[0x00FF00, 0]]


def test_duplicate_keys_short_codes_last_wins():
    rows = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert rows == [[0x000002]]


def test_duplicate_keys_long_codes_first_wins():
    rows = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert rows == [[0x000001]]


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s name", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["3 1 1 1", "a c #000000", "aa"],
    ],
)
def test_bad_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *open[] = {\n"
        "// size\n"
        '"2 2 2 1",\n'
        '"# c blue",\n'
        '". c None",\n'
        '"#.",\n'
        '".#"\n'
        "};\n"
    )
    image = load_xpm_file(path)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0x0000FF
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(1, 1) == 0x0000FF


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm_file(tmp_path / "absent.xpm")