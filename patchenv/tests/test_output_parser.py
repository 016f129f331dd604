from patchenv.modules.output_parser import EnvPair, apply_output, iter_lines, parse_line


def test_parse_line_splits_on_first_equals():
    assert parse_line("URL=http://host/?a=b") == EnvPair("URL", "http://host/?a=b")


def test_parse_line_allows_empty_value():
    assert parse_line("EMPTY=") == EnvPair("EMPTY", "")


def test_parse_line_rejects_malformed():
    assert parse_line("NOVALUE") is None
    assert parse_line("=novalue") is None


def test_iter_lines_strips_crlf_and_keeps_last_line():
    assert list(iter_lines("A=1\r\nB=2\nC=3")) == ["A=1", "B=2", "C=3"]


def test_apply_output_sets_variables(environment, fake_env):
    applied = apply_output(b"FOO=bar\nHINT=values can have spaces and \"special chars\"\n", environment)
    assert fake_env["FOO"] == "bar"
    assert fake_env["HINT"] == 'values can have spaces and "special chars"'
    assert [p.key for p in applied] == ["FOO", "HINT"]


def test_apply_output_last_write_wins(environment, fake_env):
    fake_env["FOO"] = "old"
    apply_output(b"FOO=bar\nFOO=baz\n", environment)
    assert fake_env["FOO"] == "baz"


def test_apply_output_skips_malformed_lines(environment, fake_env, warnings):
    apply_output(b"NOVALUE\n=novalue\nGOOD=yes\n", environment)
    assert fake_env["GOOD"] == "yes"
    assert "NOVALUE" not in fake_env
    messages = warnings()
    assert len(messages) == 2
    assert "'NOVALUE'" in messages[0]
    assert "'=novalue'" in messages[1]


def test_apply_output_ignores_blank_lines(environment, warnings):
    assert apply_output(b"\n\r\n\n", environment) == []
    assert apply_output(b"", environment) == []
    assert warnings() == []


def test_apply_output_warns_on_rejected_assignment(environment, fake_env, warnings):
    apply_output(b"BAD=a\x00b\nOK=1\n", environment)
    assert "BAD" not in fake_env
    assert fake_env["OK"] == "1"
    messages = warnings()
    assert len(messages) == 1
    assert "'BAD'" in messages[0]
    assert "null character" in messages[0]
