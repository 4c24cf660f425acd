import pytest

from inkpot.config import DEFAULT_CONFIG, load_config
from inkpot.content import PostRepository


def test_load_config_defaults(tmp_path):
    config = load_config(tmp_path)
    assert config == DEFAULT_CONFIG
    config["markdown_plugins"].append("mark")
    assert "mark" not in DEFAULT_CONFIG["markdown_plugins"]


def test_load_config_overrides(tmp_path):
    (tmp_path / "inkpot.yaml").write_text(
        "posts_dir: blog\nmarkdown_plugins: [table]\n", encoding="utf-8"
    )
    config = load_config(tmp_path)
    assert config["posts_dir"] == "blog"
    assert config["markdown_plugins"] == ["table"]
    assert config["highlight"] is True


def test_load_config_ignores_non_mapping(tmp_path):
    (tmp_path / "inkpot.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == DEFAULT_CONFIG


def test_load_config_rejects_non_boolean_highlight(tmp_path):
    (tmp_path / "inkpot.yaml").write_text('highlight: "false"\n', encoding="utf-8")
    with pytest.raises(ValueError, match="highlight"):
        load_config(tmp_path)
    with pytest.raises(ValueError, match="highlight"):
        PostRepository.from_project(tmp_path)


def test_load_config_accepts_yaml_booleans(tmp_path):
    (tmp_path / "inkpot.yaml").write_text("highlight: no\n", encoding="utf-8")
    assert load_config(tmp_path)["highlight"] is False
