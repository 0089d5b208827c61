import sys
from pathlib import Path

import pytest

from nvoc_setup import privileges
from nvoc_setup.cli import build_parser, main
from nvoc_setup.utils.colors import Palette


@pytest.fixture
def as_root(monkeypatch):
  monkeypatch.setattr("nvoc_setup.privileges.geteuid", lambda: 0)


@pytest.fixture
def as_user(monkeypatch):
  monkeypatch.setattr("nvoc_setup.privileges.geteuid", lambda: 1000)


class TestArguments:

  def test_negative_offsets_are_values(self):
    options = build_parser().parse_args(["--index", "0", "--core", "-100", "--mem", "-250"])
    assert options.core == -100
    assert options.mem == -250

  @pytest.mark.parametrize("argv", [
    ["--index"],
    ["--index", "0", "--power"],
    ["--core", "--mem", "5", "--index", "0"],
    ["--index", "--yes"],
  ])
  def test_missing_value_is_rejected(self, argv, as_root, config, shell, terminal):
    with pytest.raises(SystemExit) as e:
      main(argv, config, shell)
    assert e.value.code == 2
    assert shell.commands == []

  @pytest.mark.parametrize("argv", [
    ["--bogus"],
    ["--index", "abc"],
    ["--index", "-1"],
    ["--index", "0", "--power", "-5"],
    ["--index", "0", "--core", "1.5"],
    ["--index", "1_0"],
    ["--index", "\u0661"],
    ["--index", "0", "--core", "1_00"],
    ["--index", "0", "--power", "2_50"],
  ])
  def test_invalid_arguments(self, argv, as_root, config, shell, terminal):
    with pytest.raises(SystemExit) as e:
      main(argv, config, shell)
    assert e.value.code == 2

  def test_help(self, as_root, config, shell, capsys):
    with pytest.raises(SystemExit) as e:
      main(["--help"], config, shell)
    assert e.value.code == 0
    assert "--index" in capsys.readouterr().out
    assert shell.commands == []


class TestMain:

  def test_single_shot_example(self, as_root, config, shell, terminal):
    assert main(["--index", "0", "--core", "100", "--mem", "200", "--power", "250", "-y"], config, shell) == 0
    assert Path(config.conf_file(0)).read_text().splitlines()[1:] == [
      "NV_CORE_OFFSET=100",
      "NV_MEM_OFFSET=200",
      "NV_POWER_LIMIT=250000",
    ]
    assert "systemctl enable nvidia_oc@0.service" in shell.commands
    assert "systemctl restart nvidia_oc@0.service" in shell.commands
    assert terminal.prompts == []

  def test_menu_without_index(self, as_root, config, shell, terminal):
    terminal.answers = ["q"]
    assert main([], config, shell) == 0
    assert terminal.prompts == ["Enter GPU Index to configure (or 'q' to quit): "]

  def test_no_color(self, as_root, config, shell, terminal, capsys):
    config.palette = Palette(enabled = True)
    main(["--no-color", "--index", "0", "--core", "0", "--mem", "0", "--power", "0"], config, shell)
    assert "\033[" not in capsys.readouterr().out

  def test_verbose(self, as_root, config, shell, terminal):
    main(["-v", "--index", "0", "--core", "0", "--mem", "0", "--power", "0"], config, shell)
    assert shell.verbose

  def test_failing_command_is_fatal(self, as_root, config, shell, terminal, capsys):
    shell.failing.append("systemctl restart")
    assert main(["--index", "0", "--core", "0", "--mem", "0", "--power", "0"], config, shell) == 1
    assert "Error: command failed: systemctl restart nvidia_oc@0.service" in capsys.readouterr().out

  def test_end_of_input_reads_as_empty_answers(self, as_root, config, shell, terminal):
    assert main(["--index", "0", "-y"], config, shell) == 0
    assert len(terminal.prompts) == 3
    assert Path(config.conf_file(0)).read_text().splitlines()[1:] == [
      "NV_CORE_OFFSET=0",
      "NV_MEM_OFFSET=0",
      "NV_POWER_LIMIT=0",
    ]

  def test_end_of_input_at_confirmation_declines(self, as_root, config, shell, terminal):
    assert main(["--index", "0"], config, shell) == 0
    assert terminal.prompts[-1] == "Apply and enable service? [y/N] "
    assert not Path(config.conf_file(0)).exists()
    assert "systemctl restart nvidia_oc@0.service" not in shell.commands


class TestPrivileges:

  def test_root_check_happens_before_parsing(self, as_user, config, shell):
    with pytest.raises(SystemExit, match = "must be run as root"):
      main(["--bogus"], config, shell)
    assert shell.commands == []

  def test_missing_sudo(self, as_user, monkeypatch):
    monkeypatch.setattr("nvoc_setup.privileges.which", lambda name: None)
    with pytest.raises(SystemExit, match = "'sudo' not found"):
      privileges.ensure_root([], Palette(enabled = False))

  def test_reexec_forwards_arguments(self, as_user, monkeypatch):
    calls = []
    monkeypatch.setattr("nvoc_setup.privileges.which", lambda name: "/usr/bin/sudo")
    monkeypatch.setattr("nvoc_setup.privileges.execvp", lambda file, args: calls.append((file, args)))
    privileges.ensure_root(["--index", "0", "-y"], Palette(enabled = False))
    assert calls == [(
      "/usr/bin/sudo",
      ["/usr/bin/sudo", sys.executable, "-m", "nvoc_setup", "--index", "0", "-y"],
    )]

  def test_root_passes(self, as_root, monkeypatch):
    monkeypatch.setattr("nvoc_setup.privileges.execvp", lambda file, args: pytest.fail("unexpected re-exec"))
    privileges.ensure_root(["--index", "0"], Palette(enabled = False), reexec = False)
