"""Platform detection with memoized WSL2 classification.

WSL1 and WSL2 set the same environment variables but run different kernels,
so the kernel identity string in /proc/version is the primary signal. Only
WSL2 counts as its own platform; WSL1 lacks host-compatible localhost
networking and is reported as plain Linux with a warning.
"""

import logging
import os
import sys

from procsh.constants import PROC_VERSION_PATH, WSL_ENV_VARS
from procsh.models import PlatformType, VirtualizationState

log = logging.getLogger(__name__)


class DetectionCache:
    """Write-once holder for the WSL2 detection result."""

    def __init__(self) -> None:
        self._state = VirtualizationState.UNKNOWN

    @property
    def state(self) -> VirtualizationState:
        return self._state

    def record(self, state: VirtualizationState) -> VirtualizationState:
        """Store *state* unless a result is already known; return the stored state."""
        if self._state is VirtualizationState.UNKNOWN:
            self._state = state
        return self._state


def _native_platform(os_kind: str) -> PlatformType:
    if os_kind == "win32":
        return PlatformType.WINDOWS
    if os_kind == "darwin":
        return PlatformType.MACOS
    if os_kind.startswith("linux"):
        return PlatformType.LINUX
    return PlatformType.OTHER


class PlatformDetector:
    """Classify the current environment; probes run at most once per instance."""

    def __init__(
        self,
        cache: DetectionCache | None = None,
        logger: logging.Logger | None = None,
        version_file: str = PROC_VERSION_PATH,
        os_kind: str | None = None,
    ) -> None:
        self._cache = cache if cache is not None else DetectionCache()
        self._log = logger if logger is not None else log
        self._version_file = version_file
        self._os_kind = os_kind if os_kind is not None else sys.platform

    @property
    def cache(self) -> DetectionCache:
        return self._cache

    def is_wsl2(self) -> bool:
        state = self._cache.state
        if state is VirtualizationState.UNKNOWN:
            try:
                probed = self._probe()
            except Exception as e:
                # Module logger: the injected one may be what failed.
                log.warning("Failed to detect WSL2 environment: %s", e)
                probed = VirtualizationState.NOT_WSL2
            state = self._cache.record(probed)
        return state is VirtualizationState.WSL2

    def detect_platform(self) -> PlatformType:
        if self.is_wsl2():
            return PlatformType.WSL2
        return _native_platform(self._os_kind)

    def _read_kernel_identity(self) -> str | None:
        try:
            with open(self._version_file, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            self._log.debug("cannot read %s: %s", self._version_file, e)
            return None

    def _probe(self) -> VirtualizationState:
        if _native_platform(self._os_kind) is not PlatformType.LINUX:
            return VirtualizationState.NOT_WSL2

        identity = self._read_kernel_identity()
        if identity is not None:
            identity = identity.lower()
            is_wsl = "microsoft" in identity or "wsl" in identity
            if is_wsl and "wsl2" in identity:
                self._log.info("WSL2 environment detected")
                return VirtualizationState.WSL2
            if is_wsl:
                self._log.warning("WSL1 detected - WSL1 is not supported. Please upgrade to WSL2.")
                self._log.warning('Run "wsl --set-version <distro> 2" to upgrade to WSL2')
                return VirtualizationState.NOT_WSL2

        present = [name for name in WSL_ENV_VARS if os.environ.get(name)]
        if present:
            # A WSL2 kernel would have matched above, so this is WSL1 or an
            # identity format we do not recognize.
            self._log.info("WSL environment detected via environment variables: %s", present)
            self._log.warning("Unable to confirm WSL2 - this may be WSL1 which is not supported")
        return VirtualizationState.NOT_WSL2


_default_detector: PlatformDetector | None = None


def get_detector() -> PlatformDetector:
    """Return the process-wide detector, creating it on first use."""
    global _default_detector
    if _default_detector is None:
        _default_detector = PlatformDetector()
    return _default_detector


def is_wsl2() -> bool:
    return get_detector().is_wsl2()


def detect_platform() -> PlatformType:
    """Return the current PlatformType; WSL2 detection is memoized."""
    return get_detector().detect_platform()
