"""Unit tests for procsh.platform.detection."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from procsh.models import PlatformType, VirtualizationState
from procsh.platform import detection
from procsh.platform.detection import DetectionCache, PlatformDetector

WSL2_VERSION = (
    "Linux version 5.15.153.1-microsoft-standard-WSL2 (root@65c757a075e2) "
    "(gcc (GCC) 11.2.0) #1 SMP Fri Mar 29 23:14:13 UTC 2024"
)
WSL1_VERSION = "Linux version 4.4.0-19041-Microsoft (Microsoft@Microsoft.com) (gcc version 5.4.0)"
PLAIN_VERSION = "Linux version 6.1.0-18-amd64 (debian-kernel@lists.debian.org) (gcc-12 (Debian 12.2.0-14))"

NO_WSL_ENV = {"WSL_DISTRO_NAME": "", "WSL_INTEROP": "", "WSLENV": ""}


def _detector(tmp_path, contents: str | None, os_kind: str = "linux", **kwargs):
    version_file = tmp_path / "version"
    if contents is not None:
        version_file.write_text(contents)
    return PlatformDetector(version_file=str(version_file), os_kind=os_kind, **kwargs)


class TestDetectionCache:
    def test_starts_unknown(self):
        assert DetectionCache().state is VirtualizationState.UNKNOWN

    def test_first_record_wins(self):
        cache = DetectionCache()
        assert cache.record(VirtualizationState.WSL2) is VirtualizationState.WSL2
        assert cache.record(VirtualizationState.NOT_WSL2) is VirtualizationState.WSL2
        assert cache.state is VirtualizationState.WSL2


@patch.dict("os.environ", NO_WSL_ENV)
class TestPlatformDetector:
    def test_wsl2_kernel_yields_wsl2(self, tmp_path):
        assert _detector(tmp_path, WSL2_VERSION).detect_platform() is PlatformType.WSL2

    def test_wsl1_kernel_yields_linux_with_warning(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="procsh.platform.detection"):
            platform_type = _detector(tmp_path, WSL1_VERSION).detect_platform()

        assert platform_type is PlatformType.LINUX
        assert "WSL1 detected" in caplog.text
        assert "wsl --set-version" in caplog.text

    def test_plain_linux(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            detector = _detector(tmp_path, PLAIN_VERSION)
            assert detector.detect_platform() is PlatformType.LINUX
        assert detector.cache.state is VirtualizationState.NOT_WSL2
        assert caplog.text == ""

    def test_uses_caller_supplied_logger(self, tmp_path):
        logger = MagicMock(spec=logging.Logger)
        _detector(tmp_path, WSL1_VERSION, logger=logger).is_wsl2()
        assert logger.warning.call_count == 2

    def test_invalid_version_path_is_not_wsl2(self, caplog):
        detector = PlatformDetector(version_file="/proc/ver\x00sion", os_kind="linux")
        with caplog.at_level(logging.WARNING, logger="procsh.platform.detection"):
            assert detector.detect_platform() is PlatformType.LINUX
        assert detector.cache.state is VirtualizationState.NOT_WSL2
        assert "Failed to detect WSL2 environment" in caplog.text

    def test_failing_logger_does_not_escape(self, tmp_path, caplog):
        logger = MagicMock(spec=logging.Logger)
        logger.warning.side_effect = RuntimeError("handler closed")
        detector = _detector(tmp_path, WSL1_VERSION, logger=logger)
        with caplog.at_level(logging.WARNING, logger="procsh.platform.detection"):
            assert detector.is_wsl2() is False
        assert detector.cache.state is VirtualizationState.NOT_WSL2
        assert "handler closed" in caplog.text

    @patch.dict("os.environ", {"WSL_DISTRO_NAME": "Ubuntu"})
    def test_env_markers_without_kernel_markers_stay_linux(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="procsh.platform.detection"):
            platform_type = _detector(tmp_path, PLAIN_VERSION).detect_platform()

        assert platform_type is PlatformType.LINUX
        assert "Unable to confirm WSL2" in caplog.text

    @patch.dict("os.environ", {"WSLENV": "WT_SESSION::WT_PROFILE_ID"})
    def test_unreadable_version_file_falls_back_to_env(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="procsh.platform.detection"):
            detector = _detector(tmp_path, None)
            assert detector.detect_platform() is PlatformType.LINUX
        assert "Unable to confirm WSL2" in caplog.text

    def test_unreadable_version_file_without_env_is_linux(self, tmp_path):
        assert _detector(tmp_path, None).detect_platform() is PlatformType.LINUX

    @pytest.mark.parametrize(
        ("os_kind", "expected"),
        [
            ("win32", PlatformType.WINDOWS),
            ("darwin", PlatformType.MACOS),
            ("freebsd14", PlatformType.OTHER),
        ],
    )
    def test_non_linux_never_probes_kernel(self, tmp_path, os_kind, expected):
        detector = _detector(tmp_path, WSL2_VERSION, os_kind=os_kind)
        with patch("builtins.open") as mock_open:
            assert detector.detect_platform() is expected
        mock_open.assert_not_called()
        assert detector.cache.state is VirtualizationState.NOT_WSL2

    def test_result_is_memoized_after_source_removed(self, tmp_path):
        detector = _detector(tmp_path, WSL2_VERSION)
        assert detector.detect_platform() is PlatformType.WSL2

        (tmp_path / "version").unlink()

        assert detector.detect_platform() is PlatformType.WSL2
        assert detector.is_wsl2() is True

    def test_probes_only_once(self, tmp_path):
        detector = _detector(tmp_path, PLAIN_VERSION)
        with patch.object(detector, "_read_kernel_identity", wraps=detector._read_kernel_identity) as read:
            detector.detect_platform()
            detector.detect_platform()
            detector.is_wsl2()
        read.assert_called_once()

    def test_shared_cache_skips_probing(self, tmp_path):
        cache = DetectionCache()
        cache.record(VirtualizationState.WSL2)
        detector = _detector(tmp_path, PLAIN_VERSION, cache=cache)
        assert detector.detect_platform() is PlatformType.WSL2


class TestDefaultDetector:
    def test_get_detector_is_lazily_created_once(self, monkeypatch):
        monkeypatch.setattr(detection, "_default_detector", None)
        first = detection.get_detector()
        assert detection.get_detector() is first

    def test_module_functions_delegate(self, monkeypatch):
        detector = MagicMock()
        detector.detect_platform.return_value = PlatformType.MACOS
        detector.is_wsl2.return_value = False
        monkeypatch.setattr(detection, "_default_detector", detector)

        assert detection.detect_platform() is PlatformType.MACOS
        assert detection.is_wsl2() is False
