"""
Optional formatting pass for generated Solidity.

Formatting shells out to prettier with prettier-plugin-solidity. It is
cosmetic only: callers get a FormatResult and keep the unformatted source
whenever `ok` is False.
"""

import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from .. import defaults


@dataclass
class FormatResult:
    """Outcome of a formatting attempt."""
    ok: bool
    text: str
    error: str = ''


def prettier_command(command: Optional[Sequence[str]] = None) -> Sequence[str]:
    """Resolve the formatter command: explicit, then environment, then default."""
    if command:
        return list(command)
    env_command = os.environ.get(defaults.PRETTIER_ENV_VAR)
    if env_command:
        return shlex.split(env_command)
    return list(defaults.PRETTIER_COMMAND)


def format_solidity(
    source: str,
    command: Optional[Sequence[str]] = None,
    timeout: float = defaults.PRETTIER_TIMEOUT,
) -> FormatResult:
    """Run the formatter over `source`, reading stdin and writing stdout.

    Args:
        source: Solidity source to format
        command: Formatter argv; see prettier_command for the fallbacks
        timeout: Seconds before the formatter is abandoned

    Returns:
        FormatResult with the formatted text, or the original text and an
        error description on failure
    """
    cmd = prettier_command(command)
    try:
        result = subprocess.run(
            cmd,
            input=source,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        return FormatResult(ok=False, text=source, error=f'{cmd[0]}: {e}')

    if result.returncode != 0:
        detail = result.stderr.strip().splitlines()
        message = detail[-1] if detail else f'exit status {result.returncode}'
        return FormatResult(ok=False, text=source, error=f'{cmd[0]}: {message}')

    if not result.stdout.strip():
        return FormatResult(ok=False, text=source, error=f'{cmd[0]}: empty output')

    return FormatResult(ok=True, text=result.stdout)
