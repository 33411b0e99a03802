# -*- coding: utf-8 -*-
"""Locating the project root and its Hydra config directory"""
# %% --------------------------------------------------------------------------
# UPDATED ON: 2026-10-19
# CREATED ON: 2026-10-15
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------
# %% --------------------------------------------------------------------------
from pathlib import Path
from typing import Optional, Sequence, Union

ROOT_MARKERS = ("pyproject.toml", "setup.py")
CONFIG_DIR_NAME = "conf"
# %% --------------------------------------------------------------------------
class ProjectRootFinder:
    """Find the project root by walking up until a packaging file is found."""

    def __init__(self, markers: Sequence[str] = ROOT_MARKERS):
        self.markers = tuple(markers)

    def find_path(self, current_path: Optional[Union[str, Path]] = None) -> Path:
        """ Find the project root directory.

            Args:
                current_path: The directory to start searching from bottom up.
                If None, uses the directory containing this module.
            Returns:
                Path object to the project root.
            Raises:
                FileNotFoundError: If no directory up the tree holds a marker file.
        """
        if current_path is None:
            current_path = Path(__file__).resolve().parent
        current_path = Path(current_path).resolve()

        for directory in [current_path, *current_path.parents]:
            if any((directory / marker).exists() for marker in self.markers):
                return directory

        raise FileNotFoundError(
            f"Could not find project root (none of {', '.join(self.markers)} found)"
        )

# %% --------------------------------------------------------------------------
def find_config_dir(
    current_path: Optional[Union[str, Path]] = None,
    config_dir_name: str = CONFIG_DIR_NAME
) -> Path:
    """ Hydra config directory (`conf/` under the project root).

        Raises:
            FileNotFoundError: If the project root has no config directory.
    """
    config_dir = ProjectRootFinder().find_path(current_path) / config_dir_name
    if not config_dir.is_dir():
        raise FileNotFoundError(f"Config directory {config_dir} does not exist")
    return config_dir
