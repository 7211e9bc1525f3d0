from pathlib import Path, PurePath

import pytest

from orangekit.filesystem import FileSystem, FileSystemError, default_root_directory


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "Source"
    (root / "Fonts").mkdir(parents=True)
    (root / "Shaders" / "Compute").mkdir(parents=True)
    (root / "Fonts" / "verdana.ttf").write_bytes(b"font")
    (root / "Shaders" / "basic.hlsl").write_text("shader")
    (root / "Shaders" / "Compute" / "blur.hlsl").write_text("shader")
    (root / "README").write_text("no extension")
    (tmp_path / "Bin").mkdir()
    return tmp_path


def test_default_root_is_source_beside_cwd(tmp_path):
    assert default_root_directory(tmp_path / "Bin") == tmp_path / "Source"


def test_no_root_uses_working_directory(project, monkeypatch):
    monkeypatch.chdir(project / "Bin")
    fs = FileSystem()
    assert fs.root_directory().resolve() == (project / "Source").resolve()
    assert fs.does_file_exist("verdana.ttf", True)


def test_missing_root_raises(tmp_path):
    with pytest.raises(FileSystemError):
        FileSystem(tmp_path / "nowhere")


def test_root_directory(project):
    fs = FileSystem(project / "Source")
    assert fs.root_directory() == project / "Source"


def test_file_exists_with_extension(project):
    fs = FileSystem(project / "Source")
    assert fs.does_file_exist("basic.hlsl", consider_extension=True) is True
    assert fs.does_file_exist("blur.hlsl", consider_extension=True) is True
    assert fs.does_file_exist("missing.hlsl", consider_extension=True) is False


def test_file_exists_by_stem(project):
    fs = FileSystem(project / "Source")
    assert fs.does_file_exist("verdana") is True
    assert fs.does_file_exist("arial") is False


def test_extension_mismatch_raises(project):
    fs = FileSystem(project / "Source")
    with pytest.raises(FileSystemError):
        fs.does_file_exist("verdana", consider_extension=True)
    with pytest.raises(FileSystemError):
        fs.does_file_exist("verdana.ttf", consider_extension=False)


def test_directories(project):
    fs = FileSystem(project / "Source")
    assert fs.does_directory_exist("Fonts") is True
    assert fs.does_directory_exist("Compute") is True
    assert fs.does_directory_exist("Textures") is False


def test_name_without_extension_is_a_directory(project):
    fs = FileSystem(project / "Source")
    assert fs.does_directory_exist("README") is True
    assert fs.does_file_exist("README") is False


def test_relative_to_generated(project):
    fs = FileSystem(project / "Source")
    result = PurePath(fs.relative_to_generated("blur.hlsl"))
    assert result.parts == ("..", "Source", "Shaders", "Compute", "blur.hlsl")


def test_relative_to_generated_unknown_raises(project):
    fs = FileSystem(project / "Source")
    with pytest.raises(FileSystemError):
        fs.relative_to_generated("missing.png")