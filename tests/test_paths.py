from blogcraft.utils import paths


def test_find_root_stops_at_nearest_marker(tmp_path):
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "posts" / "2024"
    nested.mkdir(parents=True)
    assert paths.find_root(nested) == tmp_path.resolve()


def test_project_folders_hang_off_root():
    assert paths.LOG_DIR == paths.ROOT / "logs"
    assert paths.STYLE_FILE == paths.ROOT / "config" / "style.yaml"
    assert not hasattr(paths, "OUTPUT_DIR")
