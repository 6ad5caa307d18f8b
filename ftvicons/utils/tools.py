#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Discovery and invocation of the external command-line tools
"""

import os
import shlex
import shutil
import logging
import subprocess
from typing import List, Optional, Sequence, Union

from ftvicons.utils.errors import ToolMissing, TraceFailure

logger = logging.getLogger(__name__)

Candidate = Union[str, Sequence[str]]


def find_command(candidates: Sequence[Candidate], env_var: Optional[str] = None) -> Optional[List[str]]:
    """
    Find the first available command among the candidates

    Args:
        candidates: Commands in order of preference, each either a list of
            arguments or a shell-style string
        env_var: Environment variable that, when set, replaces the candidates

    Returns:
        List[str]: The command prefix to run, or None if nothing is on PATH
    """
    if env_var and os.environ.get(env_var):
        candidates = [os.environ[env_var]]

    for candidate in candidates:
        command = shlex.split(candidate) if isinstance(candidate, str) else list(candidate)
        if not command:
            continue
        if shutil.which(command[0]):
            logger.debug(f"Using {' '.join(command)}")
            return command

    return None


def require_command(candidates: Sequence[Candidate], description: str,
                    env_var: Optional[str] = None) -> List[str]:
    """Like find_command, but raise ToolMissing when nothing is found"""
    command = find_command(candidates, env_var)
    if command is None:
        names = " or ".join(
            f"'{c if isinstance(c, str) else ' '.join(c)}'" for c in candidates
        )
        raise ToolMissing(f"{description} ({names}) is required but not found in PATH.")
    return command


def run_command(command: Sequence[str]) -> subprocess.CompletedProcess:
    """
    Run an external command to completion

    Raises:
        TraceFailure: If the command exits with a non-zero status
    """
    logger.debug(f"Running: {' '.join(command)}")
    result = subprocess.run(list(command), capture_output=True, text=True)
    if result.returncode != 0:
        output = "\n".join(part for part in (result.stderr, result.stdout) if part)
        raise TraceFailure(command, result.returncode, output)
    return result
