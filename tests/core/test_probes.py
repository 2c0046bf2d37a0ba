"""
Tests for vstoolsets.core.probes module.
"""

import subprocess
from unittest.mock import Mock, patch

from vstoolsets.core.interfaces import ProcessResult
from vstoolsets.core.probes import LocalFilesystem, OsEnvironment, SubprocessRunner


class TestLocalFilesystem:
    """Tests for LocalFilesystem."""

    def test_exists(self, tmp_path):
        """Test existence of files and directories."""
        (tmp_path / "file.txt").write_text("x")
        (tmp_path / "dir").mkdir()
        fs = LocalFilesystem()

        assert fs.exists(tmp_path / "file.txt")
        assert fs.exists(tmp_path / "dir")
        assert not fs.exists(tmp_path / "missing")

    def test_is_directory(self, tmp_path):
        """Test directory detection."""
        (tmp_path / "file.txt").write_text("x")
        (tmp_path / "dir").mkdir()
        fs = LocalFilesystem()

        assert fs.is_directory(tmp_path / "dir")
        assert not fs.is_directory(tmp_path / "file.txt")
        assert not fs.is_directory(tmp_path / "missing")

    def test_get_files_non_recursive(self, tmp_path):
        """Test listing returns immediate children only."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "nested").mkdir()
        (tmp_path / "b.txt").write_text("x")
        fs = LocalFilesystem()

        result = sorted(fs.get_files_non_recursive(tmp_path))

        assert result == [tmp_path / "a", tmp_path / "b.txt"]

    def test_get_files_non_recursive_missing_dir(self, tmp_path):
        """Test listing a missing directory yields nothing."""
        assert LocalFilesystem().get_files_non_recursive(tmp_path / "missing") == []


class TestSubprocessRunner:
    """Tests for SubprocessRunner."""

    def test_run_captures_output(self):
        """Test exit code and combined output are captured."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="<instances/>", stderr="")

            result = SubprocessRunner().run(["vswhere.exe", "-format", "xml"])

        assert result == ProcessResult(exit_code=0, output="<instances/>")
        args, kwargs = mock_run.call_args
        assert args[0] == ["vswhere.exe", "-format", "xml"]
        assert kwargs["check"] is False
        assert "timeout" not in kwargs

    def test_run_reports_failure(self):
        """Test non-zero exit is returned, not raised."""
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=87, stdout="", stderr="bad flag")

            result = SubprocessRunner().run(["vswhere.exe"])

        assert result.exit_code == 87
        assert result.output == "bad flag"

    def test_run_stringifies_paths(self, tmp_path):
        """Test Path arguments are converted to strings."""
        with patch.object(subprocess, "run") as mock_run:
            mock_run.return_value = Mock(returncode=0, stdout="", stderr="")

            SubprocessRunner().run([tmp_path / "vswhere.exe"])

        assert mock_run.call_args[0][0] == [str(tmp_path / "vswhere.exe")]


class TestOsEnvironment:
    """Tests for OsEnvironment."""

    def test_reads_mapping(self):
        """Test variables are read from the given mapping."""
        env = OsEnvironment({"VS140COMNTOOLS": "C:/VS14/Common7/Tools/"})

        assert env.get("VS140COMNTOOLS") == "C:/VS14/Common7/Tools/"
        assert env.get("MISSING") is None

    def test_reads_os_environ(self, monkeypatch):
        """Test os.environ is used by default."""
        monkeypatch.setenv("VSTOOLSETS_TEST_VAR", "value")

        assert OsEnvironment().get("VSTOOLSETS_TEST_VAR") == "value"
