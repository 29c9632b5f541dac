import pytest

from job_blueprint.rules import BUCKETS, DEFAULT_TABLE, build_table, load_keyword_table


def test_every_default_key_has_one_known_bucket():
    for key in DEFAULT_TABLE.patterns:
        assert DEFAULT_TABLE.bucket_of(key) in BUCKETS


def test_disambiguating_patterns_are_kept_verbatim():
    assert "java " in DEFAULT_TABLE.patterns["java"]
    assert "go " in DEFAULT_TABLE.patterns["golang"]
    assert "aws " in DEFAULT_TABLE.patterns["aws"]
    assert DEFAULT_TABLE.bucket_of("cppbuild") == "platforms"


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_TABLE.patterns["python"] = ("snake",)


def test_build_table_rejects_unknown_bucket():
    with pytest.raises(ValueError):
        build_table({"python": ["python"]}, {"python": "snakes"})


def test_build_table_rejects_empty_patterns():
    with pytest.raises(ValueError):
        build_table({"python": []}, {"python": "languages"})


def test_load_keyword_table(tmp_path):
    path = tmp_path / "patterns.yaml"
    path.write_text(
        "categories:\n"
        "  python: {bucket: languages, patterns: [python]}\n"
        "  k8s: {bucket: platforms, patterns: [kubernetes, k8s]}\n"
        "senior_keywords: [staff]\n",
        encoding="utf-8",
    )

    table = load_keyword_table(str(path))

    assert list(table.patterns) == ["python", "k8s"]
    assert table.bucket_of("k8s") == "platforms"
    assert table.senior_keywords == ("staff",)
    assert "junior" in table.junior_keywords


def test_load_keyword_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_keyword_table(str(tmp_path / "nope.yaml"))


def test_load_keyword_table_without_categories(tmp_path):
    path = tmp_path / "patterns.yaml"
    path.write_text("senior_keywords: [staff]\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_keyword_table(str(path))
