import json

import pytest

from tikzkit.templates import DEFAULT_MAX_COUNT, RecentTemplates, template_description


def test_set_file_name_puts_item_first_and_current():
    recent = RecentTemplates(["a.tex", "b.tex"])
    recent.set_file_name("c.tex")
    assert recent.items == ["c.tex", "a.tex", "b.tex"]
    assert recent.current == "c.tex"


def test_set_file_name_moves_existing_without_duplicate():
    recent = RecentTemplates(["a.tex", "b.tex", "c.tex"])
    recent.set_file_name("b.tex")
    assert recent.items == ["b.tex", "a.tex", "c.tex"]


def test_max_count_drops_oldest():
    recent = RecentTemplates(["a", "b"], max_count=2)
    recent.set_file_name("c")
    assert recent.items == ["c", "a"]
    assert len(recent.items) <= recent.max_count


def test_items_truncated_on_construction():
    recent = RecentTemplates(["a", "b", "c"], max_count=2)
    assert recent.items == ["a", "b"]


def test_current_falls_back_to_first_item():
    assert RecentTemplates(["a", "b"], current="z").current == "a"
    assert RecentTemplates(["a", "b"], current="b").current == "b"
    assert RecentTemplates().current == ""


def test_negative_max_count_rejected():
    with pytest.raises(ValueError):
        RecentTemplates(max_count=-1)


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    recent = RecentTemplates(["x.pgs", "y.tex"], current="y.tex")
    recent.save(path)
    loaded = RecentTemplates.load(path)
    assert loaded.items == recent.items
    assert loaded.current == "y.tex"


def test_save_keeps_other_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"LatexCommand": "pdflatex"}), encoding="utf-8")
    RecentTemplates(["a.tex"]).save(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["LatexCommand"] == "pdflatex"
    assert data["TemplateRecent"] == ["a.tex"]


def test_load_missing_file_uses_defaults(tmp_path):
    loaded = RecentTemplates.load(tmp_path / "missing.json")
    assert loaded.items == []
    assert loaded.max_count == DEFAULT_MAX_COUNT


def test_load_reads_max_count(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"TemplateRecentNumber": 1,
                                "TemplateRecent": ["a", "b"]}), encoding="utf-8")
    assert RecentTemplates.load(path).items == ["a"]


def test_template_description_escapes_replace_text():
    description = template_description("<>")
    assert "The string &lt;&gt; in the template" in description
    assert "<>" not in description


def test_template_description_is_paragraph():
    description = template_description("%CODE%")
    assert description.startswith("<p>")
    assert description.endswith("</p>")
    assert "%CODE%" in description