import pytest

from proptree.info_grammar import InfoParserError, is_valid_info, main
from proptree.ptree import PtreeError

WELL_FORMED = [
    "",
    "key1\nkey2\nkey3\nkey4\n",
    "key1 data1\n{\n\tkey data\n}\n",
    'key2 "data2  " {\n\tkey data\n}\n',
    'key3 "data"\n\t "3" {\n\tkey data\n}\n',
    '"key.5" "data.5" { \n\tkey data \n}\n',
    '\\\\key\\t7 data7\\n\\"data7\\"\n{\n\tkey data\n}\n',
    '"\\\\key\\t8" "data8\\n\\"data8\\""\n{\n\tkey data\n}\n',
    "; leading comment\nkey value ; trailing comment\n",
    "a { b { c d } }",
    'key "first"\\ "second"\\ "third"',
]

MALFORMED = [
    "key {",
    "}",
    "key value }",
    '"unterminated',
    "#",
    "bad\\qescape value",
    '"line\nbreak" value',
]


@pytest.mark.parametrize("text", MALFORMED)
def test_malformed_inputs_are_rejected(text):
    assert is_valid_info(text) is False


@pytest.mark.parametrize("text", WELL_FORMED)
def test_wrapping_in_a_block_keeps_validity(text):
    assert is_valid_info("outer {\n" + text + "\n}\n") == is_valid_info(text)


@pytest.mark.parametrize("text", WELL_FORMED)
def test_stray_closing_brace_breaks_validity(text):
    assert not is_valid_info(text + "\n}")


@pytest.mark.parametrize("text", WELL_FORMED)
def test_comment_lines_do_not_change_the_result(text):
    assert is_valid_info("; note\n" + text + "\n; end") == is_valid_info(text)


def test_main_without_arguments_checks_samples(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Parse result: Success", "Parse result: Success"]


def test_main_checks_files(tmp_path, capsys):
    good = tmp_path / "good.info"
    good.write_text("key value\n{\n\tinner data\n}\n", encoding="utf-8")
    bad = tmp_path / "bad.info"
    bad.write_text("key {\n", encoding="utf-8")
    assert main([str(good), str(bad)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Parse result: Success", "Parse result: Failure"]


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.info"
    assert main([str(missing)]) == 1
    err = capsys.readouterr().err
    assert "cannot open file" in err
    assert str(missing) in err


def test_info_parser_error_carries_location():
    error = InfoParserError("cannot open file", "settings.info", 7)
    assert isinstance(error, PtreeError)
    assert error.message == "cannot open file"
    assert error.filename == "settings.info"
    assert error.line == 7
    assert "settings.info" in str(error)
    assert "cannot open file" in str(error)


def test_info_parser_error_without_filename_is_plain_message():
    error = InfoParserError("cannot open file")
    assert str(error) == "cannot open file"
    with pytest.raises(InfoParserError):
        raise error