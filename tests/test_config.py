import pytest

from content_frontmatter.models.check_params import CheckParams
from content_frontmatter.models.config import Config, load_env


def test_defaults():
	cfg = Config()
	assert cfg.content_dir == "content"
	assert cfg.content_glob == "**/*.md"
	assert cfg.required_fields == ["title"]
	assert cfg.max_workers == 8


def test_required_fields_parsing():
	cfg = Config(REQUIRED_FIELDS="title, author ,date")
	assert cfg.required_fields == ["title", "author", "date"]


def test_required_fields_always_include_title():
	cfg = Config(REQUIRED_FIELDS="author")
	assert cfg.required_fields == ["title", "author"]


def test_required_fields_empty_string():
	cfg = Config(REQUIRED_FIELDS="")
	assert cfg.required_fields == ["title"]


def test_required_fields_from_env(monkeypatch):
	monkeypatch.setenv("REQUIRED_FIELDS", "date,tags")
	cfg = Config()
	assert cfg.required_fields == ["title", "date", "tags"]


def test_content_dir_from_env(monkeypatch):
	monkeypatch.setenv("CONTENT_DIR", "site/content")
	cfg = Config()
	assert str(cfg.content_path) == "site/content"


def test_max_workers_rejects_zero():
	"""max_workers must be > 0."""
	with pytest.raises(ValueError):
		Config(MAX_WORKERS=0)


def test_load_env(tmp_path, monkeypatch):
	env = tmp_path / ".env"
	env.write_text("CONTENT_GLOB=**/*.markdown\n", encoding="utf-8")
	monkeypatch.delenv("CONTENT_GLOB", raising=False)
	load_env(env)
	assert Config().content_glob == "**/*.markdown"
	monkeypatch.delenv("CONTENT_GLOB", raising=False)


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "absent.env")


# ── apply_overrides ──────────────────────────────────────────────────


def test_apply_overrides_all_fields():
	"""apply_overrides sets every overridable field from CheckParams."""
	cfg = Config()
	params = CheckParams(pattern="*.md", max_workers=3, required=["author"])
	cfg.apply_overrides(params)
	assert cfg.content_glob == "*.md"
	assert cfg.max_workers == 3
	assert cfg.required_fields == ["title", "author"]


def test_apply_overrides_none_preserves_defaults():
	"""apply_overrides skips None fields, keeping env/default values."""
	cfg = Config(MAX_WORKERS=5)
	cfg.apply_overrides(CheckParams())
	assert cfg.max_workers == 5  # unchanged
	assert cfg.content_glob == "**/*.md"  # default preserved


def test_check_params_validation():
	with pytest.raises(ValueError):
		CheckParams(max_workers=0)
	with pytest.raises(ValueError):
		CheckParams(pattern="  ")
	assert CheckParams(required=[" a ", ""]).required == ["a"]
