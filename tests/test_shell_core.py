"""
Tests for core Shell functionality.

Tests cover:
- Shell initialization
- Line execution end to end (lexer, dispatch, builtins, executables)
- Working directory management
- Registry refresh policy
- The read-eval loop: prompt, end of input, exit
"""

import io

import pytest

from tinysh.config import ShellConfig
from tinysh.exceptions import FatalStartupError
from tinysh.shell import PROMPT, Shell


@pytest.fixture
def make_shell(shell_config, workdir):
    """Build a Shell over string streams; returns (shell, stdout, stderr)."""
    def factory(input_text: str = ""):
        stdout, stderr = io.StringIO(), io.StringIO()
        shell = Shell(
            config=shell_config,
            stdin=io.StringIO(input_text),
            stdout=stdout,
            stderr=stderr,
            cwd=str(workdir),
        )
        return shell, stdout, stderr
    return factory


class TestShellInitialization:
    """Test Shell class initialization."""

    def test_shell_creates_with_config(self, make_shell, workdir):
        """Test shell starts in the given directory with a filled registry."""
        shell, _, _ = make_shell()
        assert shell.cwd == str(workdir)
        assert shell.context.resolve_executable("hello") is not None

    def test_shell_reads_environment_by_default(self, monkeypatch, workdir, bin_dir):
        """Test the config comes from PATH and HOME when none is given."""
        monkeypatch.setenv("PATH", str(bin_dir))
        monkeypatch.setenv("HOME", str(workdir))
        shell = Shell(stdout=io.StringIO())
        assert shell.config == ShellConfig(search_dirs=(str(bin_dir),), home=str(workdir))
        assert shell.context.resolve_executable("hello") == str(bin_dir / "hello")

    def test_missing_start_directory_is_fatal(self, shell_config, tmp_path):
        """Test an unusable start directory stops the shell."""
        with pytest.raises(FatalStartupError):
            Shell(config=shell_config, cwd=str(tmp_path / "gone"))


class TestExecute:
    """Test executing single lines."""

    def test_echo_quoted(self, make_shell):
        """Test quoting survives all the way to output."""
        shell, stdout, _ = make_shell()
        assert shell.execute("echo 'a  b' \"c\\\"d\"\n") == 0
        assert stdout.getvalue() == "a  b c\"d\n"

    def test_echo_escaped_space(self, make_shell):
        """Test an escaped space keeps two words together."""
        shell, stdout, _ = make_shell()
        shell.execute("echo a\\ \\ b")
        assert stdout.getvalue() == "a  b\n"

    def test_blank_line(self, make_shell):
        """Test a blank line does nothing."""
        shell, stdout, stderr = make_shell()
        assert shell.execute("   \n") == 0
        assert stdout.getvalue() == ""
        assert stderr.getvalue() == ""

    def test_type_builtin_and_missing(self, make_shell):
        """Test type output for a builtin and an unknown name."""
        shell, stdout, _ = make_shell()
        shell.execute("type cd")
        shell.execute("type nonexistent_cmd_xyz")
        assert stdout.getvalue() == "cd is a shell builtin\nnonexistent_cmd_xyz: not found\n"

    def test_cd_then_pwd(self, make_shell, workdir):
        """Test cd changes what pwd prints."""
        shell, stdout, _ = make_shell()
        shell.execute("cd subdir/nested")
        shell.execute("cd ..")
        shell.execute("pwd")
        assert stdout.getvalue() == f"{workdir / 'subdir'}\n"

    def test_cd_home(self, make_shell, home_dir):
        """Test cd ~ goes home."""
        shell, _, _ = make_shell()
        shell.execute("cd ~")
        assert shell.cwd == str(home_dir)

    def test_cd_failure_keeps_cwd(self, make_shell, workdir):
        """Test a failed cd reports and keeps the working directory."""
        shell, _, stderr = make_shell()
        shell.execute("cd nowhere")
        assert shell.cwd == str(workdir)
        assert stderr.getvalue() == "cd: nowhere: No such directory\n"

    def test_redirect_echo(self, make_shell, workdir):
        """Test echo hello > file."""
        shell, stdout, _ = make_shell()
        shell.execute(f"echo hello > {workdir / 'out.txt'}")
        assert (workdir / "out.txt").read_text() == "hello\n"
        assert stdout.getvalue() == ""

    def test_quoted_redirect_target(self, make_shell, workdir):
        """Test a quoted target with a space is one path."""
        shell, _, _ = make_shell()
        shell.execute("echo hi > 'my file.txt'")
        assert (workdir / "my file.txt").read_text() == "hi\n"

    @pytest.mark.usefixtures("require_sh")
    def test_external_with_quoted_args(self, make_shell):
        """Test quoted arguments reach an executable intact."""
        shell, stdout, _ = make_shell()
        shell.execute("args 'one two' three")
        assert stdout.getvalue() == "one two\nthree\n"

    def test_command_not_found(self, make_shell):
        """Test an unknown command is reported and later lines still run."""
        shell, stdout, _ = make_shell()
        assert shell.execute("nonexistent_cmd_xyz") == 127
        assert shell.execute("echo still here") == 0
        assert stdout.getvalue() == "nonexistent_cmd_xyz: command not found\nstill here\n"


class TestRegistryRefreshPolicy:
    """Test when the registry is rescanned."""

    def test_refreshed_before_first_command(self, make_shell, make_script):
        """Test a script added before the first command is found."""
        shell, stdout, _ = make_shell()
        make_script("early", "echo early")
        shell.execute("type early")
        assert stdout.getvalue().startswith("early is ")

    def test_not_refreshed_afterwards(self, make_shell, make_script):
        """Test a script added after the first command is not found."""
        shell, stdout, _ = make_shell()
        shell.execute("pwd")
        make_script("late", "echo late")
        shell.execute("type late")
        assert stdout.getvalue().endswith("late: not found\n")


class TestReadLoop:
    """Test the read-eval loop."""

    def test_prompt_and_eof(self, make_shell):
        """Test the prompt is shown per read and EOF ends with status 0."""
        shell, stdout, _ = make_shell("echo one\necho two\n")
        assert shell.run() == 0
        assert stdout.getvalue() == f"{PROMPT}one\n{PROMPT}two\n{PROMPT}\n"

    def test_last_line_without_newline(self, make_shell):
        """Test a final line without a terminator still runs."""
        shell, stdout, _ = make_shell("echo last")
        shell.run()
        assert "last\n" in stdout.getvalue()

    def test_exit_stops_loop(self, make_shell):
        """Test exit ends the loop with its status and later lines are not read."""
        shell, stdout, _ = make_shell("echo before\nexit 3\necho after\n")
        with pytest.raises(SystemExit) as exc_info:
            shell.run()
        assert exc_info.value.code == 3
        assert "before" in stdout.getvalue()
        assert "after" not in stdout.getvalue()

    def test_errors_do_not_stop_loop(self, make_shell):
        """Test failing lines are reported and the loop keeps going."""
        shell, stdout, stderr = make_shell("exit notanumber\ncd nowhere\nbogus_cmd\necho ok\n")
        assert shell.run() == 0
        assert "numeric argument required" in stderr.getvalue()
        assert "No such directory" in stderr.getvalue()
        assert "bogus_cmd: command not found" in stdout.getvalue()
        assert "ok\n" in stdout.getvalue()

    @pytest.mark.parametrize("line", [
        "cd a\x00b\n",
        "echo hi > a\x00b\n",
        "args a\x00b\n",
    ])
    def test_nul_byte_does_not_stop_loop(self, make_shell, line):
        """Test a line with an embedded NUL is reported and the next line runs."""
        shell, stdout, stderr = make_shell(line + "echo still-alive\n")
        assert shell.run() == 0
        assert "still-alive\n" in stdout.getvalue()
        assert stderr.getvalue() != ""

    def test_usage_errors_on_stdout(self, make_shell):
        """Test usage messages go to stdout and the loop keeps going."""
        shell, stdout, stderr = make_shell("exit 1 2\ntype\necho hi >\necho ok\n")
        assert shell.run() == 0
        assert "exit: too many arguments\n" in stdout.getvalue()
        assert "type: missing operand\n" in stdout.getvalue()
        assert "syntax error near unexpected token" in stdout.getvalue()
        assert stderr.getvalue() == ""
