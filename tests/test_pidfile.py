"""Unit tests for procsh.pidfile."""

from unittest.mock import patch

from procsh.pidfile import read_pid_file, remove_pid_file, running_pid


class TestReadPidFile:
    def test_reads_decimal_pid(self, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("4242\n")
        assert read_pid_file(path) == 4242

    def test_missing_file(self, tmp_path):
        assert read_pid_file(tmp_path / "server.pid") is None

    def test_garbage(self, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("not-a-pid")
        assert read_pid_file(path) is None

    def test_non_positive_pid(self, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("0")
        assert read_pid_file(path) is None


class TestRemovePidFile:
    def test_removes_file(self, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("1")
        remove_pid_file(path)
        assert not path.exists()

    def test_missing_file_is_fine(self, tmp_path):
        remove_pid_file(tmp_path / "server.pid")


class TestRunningPid:
    @patch("procsh.pidfile.is_process_running", return_value=True)
    def test_live_process(self, mock_running, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("4242")
        assert running_pid(path) == 4242
        mock_running.assert_called_once_with(4242)
        assert path.exists()

    @patch("procsh.pidfile.is_process_running", return_value=False)
    def test_stale_file_is_removed(self, _running, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("4242")
        assert running_pid(path) is None
        assert not path.exists()

    @patch("procsh.pidfile.is_process_running")
    def test_unparseable_file_is_removed_without_probing(self, mock_running, tmp_path):
        path = tmp_path / "server.pid"
        path.write_text("garbage")
        assert running_pid(path) is None
        assert not path.exists()
        mock_running.assert_not_called()

    @patch("procsh.pidfile.is_process_running")
    def test_missing_file(self, mock_running, tmp_path):
        assert running_pid(tmp_path / "server.pid") is None
        mock_running.assert_not_called()
