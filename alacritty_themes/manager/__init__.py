"""
Alacritty configuration updates.
"""

from .merge import ApplyResult, ConfigMerger, backup, backup_path

__all__ = [
    "ApplyResult",
    "ConfigMerger",
    "backup",
    "backup_path",
]
