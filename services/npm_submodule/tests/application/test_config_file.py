from npm_submodule.application.config_file import read_config


def test_read_config_missing(tmp_path):
    result = read_config(tmp_path / "npm-submodule.yaml")
    assert result.value is None
    assert [d.code for d in result.diagnostics] == ["CONFIG_MISSING"]
    assert result.exit_code == 2


def test_read_config_parse_failure(tmp_path):
    path = tmp_path / "npm-submodule.yaml"
    path.write_text("module: [unclosed\n", encoding="utf-8")
    result = read_config(path)
    assert [d.code for d in result.diagnostics] == ["CONFIG_PARSE_FAILED"]
    assert result.diagnostics[0].location.path == str(path)


def test_read_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "npm-submodule.yaml"
    path.write_text("- install\n- view\n", encoding="utf-8")
    result = read_config(path)
    assert [d.code for d in result.diagnostics] == ["CONFIG_INVALID"]


def test_read_config_requires_module(tmp_path):
    path = tmp_path / "npm-submodule.yaml"
    path.write_text("commands: [install]\n", encoding="utf-8")
    result = read_config(path)
    assert [d.code for d in result.diagnostics] == ["CONFIG_INVALID"]
    assert "module" in result.diagnostics[0].message


def test_read_config_builds_options(tmp_path):
    path = tmp_path / "npm-submodule.yaml"
    path.write_text(
        "module: isObject\n"
        "autoInstall: true\n"
        "commands:\n"
        "  - install --save react\n"
        "  - clean\n",
        encoding="utf-8",
    )
    result = read_config(path)
    assert result.diagnostics == []
    options = result.value
    assert options.module == "isObject"
    assert options.auto_install is True
    assert options.commands == ("install --save react", "clean")
    assert options.executable == "npm"
