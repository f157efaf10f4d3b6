"""Execution environment detection, including WSL2."""

from procsh.platform.detection import (
    DetectionCache,
    PlatformDetector,
    detect_platform,
    get_detector,
    is_wsl2,
)

__all__ = [
    "DetectionCache",
    "PlatformDetector",
    "detect_platform",
    "get_detector",
    "is_wsl2",
]
