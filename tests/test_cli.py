"""Tests for the dotfactory-presets command line interface."""

from pathlib import Path
import tempfile

from dotfactory import PresetManager, OutputConfiguration, Rotation
from dotfactory.cli import main


def _write_store(path, *names):
    store = PresetManager()
    for name in names:
        store.add(OutputConfiguration(display_name=name))
    store.save(path)


def test_no_command_prints_help(capsys):
    """Test that running without a command fails with usage."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_list_command(capsys):
    """Test listing preset names with indices."""
    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "presets.dat")
        _write_store(path, "A", "B")
        assert main(['list', path]) == 0

    out = capsys.readouterr().out
    assert "0: A" in out
    assert "1: B" in out


def test_list_missing_file(capsys):
    """Test that listing a missing file is an error."""
    with tempfile.TemporaryDirectory() as tmp:
        assert main(['list', str(Path(tmp) / "missing.dat")]) == 1
    assert "not found" in capsys.readouterr().out


def test_show_command(capsys):
    """Test showing one preset with display strings."""
    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "presets.yaml")
        _write_store(path, "Font8x8")
        assert main(['show', path, '0']) == 0
        assert main(['show', path, '3']) == 1

    out = capsys.readouterr().out
    assert "Preset 0: Font8x8" in out
    assert "rotation: rotate_zero (0°)" in out
    assert "desc_char_height: dont_display (Don't display)" in out
    assert "padding_removal_vertical: tightest" in out
    assert "out of range" in out


def test_add_command_creates_file():
    """Test adding a preset with overrides to a new file."""
    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "presets.json")
        assert main(['add', path, '--name', 'Font8x8',
                     '--set', 'rotation=rotate_ninety',
                     '--set', 'flipHorizontal=true',
                     '--set', 'num_indent_spaces=4']) == 0

        store = PresetManager()
        assert store.load(path)

    preset = store.get_at(0)
    assert preset.display_name == "Font8x8"
    assert preset.rotation == Rotation.ROTATE_NINETY
    assert preset.flip_horizontal is True
    assert preset.num_indent_spaces == 4


def test_add_command_from_existing():
    """Test copying an existing preset's settings."""
    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "presets.dat")
        store = PresetManager()
        store.add(OutputConfiguration(display_name="Base", bmp_visualizer_char="@"))
        store.save(path)

        assert main(['add', path, '--name', 'Copy', '--from', '0']) == 0
        store.load(path)

    assert store.names() == ["Base", "Copy"]
    assert store.get_at(1).bmp_visualizer_char == "@"


def test_add_command_rejects_bad_override(capsys):
    """Test that unknown settings and invalid values are errors."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "presets.yaml"
        assert main(['add', str(path), '--name', 'X', '--set', 'colour=red']) == 1
        assert main(['add', str(path), '--name', 'X', '--set', 'rotation=sideways']) == 1
        assert main(['add', str(path), '--name', 'X', '--set', 'rotation']) == 1
        assert not path.exists()

    assert "Unknown setting: colour" in capsys.readouterr().out


def test_add_command_refuses_corrupt_file():
    """Test that a corrupt file is not overwritten."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "presets.dat"
        path.write_text("<broken", encoding='utf-8')
        assert main(['add', str(path), '--name', 'X']) == 1
        assert path.read_text(encoding='utf-8') == "<broken"


def test_delete_command(capsys):
    """Test deleting by index and the out of range no-op."""
    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "presets.dat")
        _write_store(path, "A", "B", "C")
        assert main(['delete', path, '1']) == 0
        assert main(['delete', path, '5']) == 0

        store = PresetManager()
        store.load(path)

    assert store.names() == ["A", "C"]
    assert "nothing deleted" in capsys.readouterr().out


def test_convert_command():
    """Test rewriting an XML preset file as YAML."""
    with tempfile.TemporaryDirectory() as tmp:
        source = str(Path(tmp) / "presets.xml")
        destination = str(Path(tmp) / "presets.yaml")
        _write_store(source, "A", "B")
        assert main(['convert', source, destination]) == 0

        original = PresetManager()
        original.load(source)
        converted = PresetManager()
        assert converted.load(destination)

    assert list(converted) == list(original)
