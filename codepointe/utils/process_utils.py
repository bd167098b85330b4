# codepointe/utils/process_utils.py
"""External process execution"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..api.exceptions import ProcessError
from ..constants import OUTPUT_LOGGER_NAME
from ..models.result import ProcessResult

# Exit code reported when the executable cannot be started
COMMAND_NOT_FOUND = 127

# Largest single output line accepted from a process (CLI JSON can be long)
STREAM_LIMIT = 16 * 1024 * 1024


class ProcessRunner:
    """Run external commands, streaming their output to the log sink"""

    def __init__(self, output: Optional[logging.Logger] = None):
        """
        Initialize process runner

        Args:
            output: Logger receiving process output lines
        """
        self.output = output or logging.getLogger(OUTPUT_LOGGER_NAME)
        self.logger = logging.getLogger(__name__)

    async def execute(self,
                      command: str,
                      args: Sequence[str] = (),
                      cwd: Union[str, Path] = None,
                      echo: bool = True) -> ProcessResult:
        """
        Run a command to completion

        Args:
            command: Executable name or path
            args: Command arguments
            cwd: Working directory
            echo: Append stdout lines to the log sink (stderr is always appended)

        Returns:
            Exit code and combined stdout/stderr text
        """
        cmd = [command, *args]
        self.logger.debug(f"Running {' '.join(cmd)} in {cwd}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=str(cwd) if cwd else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=STREAM_LIMIT
            )
        except OSError as e:
            self.output.error(str(e))
            return ProcessResult(exit_code=COMMAND_NOT_FOUND, output=str(e))

        chunks: List[str] = []

        async def pump(stream: asyncio.StreamReader, log: bool) -> None:
            while True:
                line = await stream.readline()
                if not line:
                    break
                text = line.decode(errors='replace')
                chunks.append(text)
                if log:
                    self.output.info(text.rstrip('\r\n'))

        try:
            await asyncio.gather(
                pump(process.stdout, echo),
                pump(process.stderr, True)
            )
        except BaseException:
            # Reap the child even when reading its output failed
            if process.returncode is None:
                try:
                    process.kill()
                except ProcessLookupError:
                    pass
            await process.wait()
            raise

        exit_code = await process.wait()

        return ProcessResult(exit_code=exit_code, output=''.join(chunks))

    async def run(self,
                  command: str,
                  args: Sequence[str] = (),
                  cwd: Union[str, Path] = None,
                  echo: bool = True) -> str:
        """
        Run a command and return its output

        Raises:
            ProcessError: The command exited with a non-zero code
        """
        result = await self.execute(command, args, cwd=cwd, echo=echo)

        if not result.success:
            raise ProcessError([command, *args], result.exit_code, result.output)

        return result.output
