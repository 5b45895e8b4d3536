import pytest

from tux_levels.main import main
from tux_levels.utils.parse_args import parse_args


def test_parse_args_commands():
    args = parse_args(["--data-dir", "/data", "info", "levels/a.stl", "--editable"])
    assert args.command == "info"
    assert args.file == "levels/a.stl"
    assert args.editable is True
    assert args.data_dir == ["/data"]

    args = parse_args(["new-worldmap", "maps", "Forest"])
    assert (args.basedir, args.name) == ("maps", "Forest")
    assert args.data_dir is None


def test_parse_args_requires_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_name_command(data_dir, capsys):
    code = main(["--data-dir", str(data_dir), "name", "levels/forest.stl", "levels/broken.stl"])
    out = capsys.readouterr().out

    assert code == 0
    assert "levels/forest.stl: Forest Path" in out
    assert "levels/broken.stl: \n" in out


def test_info_command(data_dir, capsys):
    code = main(["--data-dir", str(data_dir), "info", "levels/forest.stl"])
    out = capsys.readouterr().out

    assert code == 0
    assert "name: Forest Path" in out
    assert "sectors: 2" in out
    assert "coins: 2 badguys: 1 secrets: 1" in out


def test_info_command_failure(data_dir):
    assert main(["--data-dir", str(data_dir), "info", "levels/missing.stl"]) == 1


def test_new_commands(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "new", "levels"]) == 0
    assert "filename: level1.stl" in capsys.readouterr().out

    assert main(["--data-dir", str(data_dir), "new-worldmap", "levels", "Icy Isle"]) == 0
    out = capsys.readouterr().out
    assert "filename: worldmap.stwm" in out
    assert "name: Icy Isle" in out
