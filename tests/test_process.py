import sys

from dev_utils.infra.process import COMMAND_NOT_EXECUTABLE, COMMAND_NOT_FOUND, _active_processes, run_command


def test_missing_program_returns_127():
    result = run_command(["dev-utils-no-such-program-xyz"])

    assert result.returncode == COMMAND_NOT_FOUND
    assert not result.ok
    assert "command not found" in result.stderr


def test_captures_output_and_stdin(tmp_path):
    script = "import sys; data = sys.stdin.read(); print(data.upper()); sys.stderr.write('warn')"

    result = run_command([sys.executable, "-c", script], cwd=tmp_path, input_text="abc")

    assert result.ok
    assert result.stdout.strip() == "ABC"
    assert result.stderr == "warn"
    assert not _active_processes


def test_nonzero_exit_is_returned_not_raised():
    result = run_command([sys.executable, "-c", "raise SystemExit(3)"])

    assert result.returncode == 3


def test_launch_permission_error_returns_result(monkeypatch):
    def deny(command, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("dev_utils.infra.process.start_tracked_process", deny)

    result = run_command(["./not-executable.sh"])

    assert result.returncode == COMMAND_NOT_EXECUTABLE
    assert not result.ok
    assert "Permission denied" in result.stderr
