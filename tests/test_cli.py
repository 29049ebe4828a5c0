import pytest

from content_frontmatter.main import entrypoint

GOOD = '+++\ntitle = "Good"\ntags = ["a"]\n+++\nBody\n'
NO_TITLE = "---\nauthor: someone\n---\nBody\n"


def _make_fake_check_impl(code: int = 0):
	"""Return a (fake_check_impl, seen_dict) pair for monkeypatching."""
	seen = {}

	def fake_check_impl(
	    paths=None,
	    pattern=None,
	    max_workers=None,
	    required=None,
	):
		seen["paths"] = paths
		seen["pattern"] = pattern
		seen["max_workers"] = max_workers
		seen["required"] = required
		return code

	return fake_check_impl, seen


def test_cli_entrypoint_defaults_to_check(monkeypatch):
	fake_check_impl, seen = _make_fake_check_impl()
	monkeypatch.setattr("content_frontmatter.main.check_impl",
	                    fake_check_impl)
	entrypoint(
	    [
	        "content/english",
	        "--pattern",
	        "*.md",
	        "--max-workers",
	        "2",
	        "--required",
	        "author",
	        "--required",
	        "date",
	    ],
	    standalone_mode=False,
	)
	assert list(seen["paths"]) == ["content/english"]
	assert seen["pattern"] == "*.md"
	assert seen["max_workers"] == 2
	assert list(seen["required"]) == ["author", "date"]


def test_cli_entrypoint_no_args_runs_check(monkeypatch):
	fake_check_impl, seen = _make_fake_check_impl()
	monkeypatch.setattr("content_frontmatter.main.check_impl",
	                    fake_check_impl)
	entrypoint([], standalone_mode=False)
	assert not seen["paths"]
	assert seen["pattern"] is None


def test_cli_entrypoint_help_does_not_crash():
	"""--help should exit cleanly (SystemExit with code 0)."""
	with pytest.raises(SystemExit) as exc_info:
		entrypoint(["--help"], standalone_mode=True)
	assert exc_info.value.code == 0


def test_check_exit_codes(tmp_path, monkeypatch):
	"""Exit 0 when every file is valid, 1 when any has problems."""
	monkeypatch.chdir(tmp_path)
	(tmp_path / "good.md").write_text(GOOD, encoding="utf-8")
	assert entrypoint(["check", "good.md"], standalone_mode=False) in (0,
	                                                                  None)

	(tmp_path / "bad.md").write_text(NO_TITLE, encoding="utf-8")
	assert entrypoint(["check", "."], standalone_mode=False) == 1


def test_check_missing_path(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	assert entrypoint(["check", "nope"], standalone_mode=False) == 2


def test_check_reports_all_problems(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv("COLUMNS", "200")
	(tmp_path / "a.md").write_text(NO_TITLE, encoding="utf-8")
	(tmp_path / "b.md").write_text("---\ntitle: x\n", encoding="utf-8")
	entrypoint(["check", "."], standalone_mode=False)
	out = capsys.readouterr().out
	assert "a.md" in out
	assert "b.md" in out
	assert "MalformedDocument" in out
	assert "2 with problems" in out


def test_show_prints_json(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "post.md").write_text(GOOD, encoding="utf-8")
	entrypoint(["show", "post.md"], standalone_mode=False)
	out = capsys.readouterr().out
	assert '"title": "Good"' in out
	assert '"style": "+++"' in out


def test_show_malformed(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "bad.md").write_text('---\ntitle: "x\n---\n',
	                                 encoding="utf-8")
	assert entrypoint(["show", "bad.md"], standalone_mode=False) == 1
	assert "MalformedFrontMatter" in capsys.readouterr().err


def test_show_non_utf8_file(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "latin1.md").write_bytes(b"---\ntitle: caf\xe9\n---\n")
	assert entrypoint(["show", "latin1.md"], standalone_mode=False) == 1
	err = capsys.readouterr().err
	assert "latin1.md: not valid UTF-8" in err
	assert "Traceback" not in err


def test_check_non_utf8_file(tmp_path, monkeypatch, capsys):
	monkeypatch.chdir(tmp_path)
	(tmp_path / "latin1.md").write_bytes(b"---\ntitle: caf\xe9\n---\n")
	(tmp_path / "post.md").write_text(GOOD, encoding="utf-8")
	assert entrypoint(["check", "."], standalone_mode=False) == 1
