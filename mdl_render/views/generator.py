"""Generation step — runs the external model generator.

The generator populates an output directory with one JSON descriptor per
view. Any callable taking (package, out_dir, debug) can stand in for it;
CommandGenerator shells out to the configured command.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Union

from mdl_render import config
from mdl_render.exceptions import GenerationError

logger = logging.getLogger(__name__)

Generator = Callable[[str, Path, bool], None]


class CommandGenerator:
    """Runs an external command that writes view descriptors.

    Usage:
        generator = CommandGenerator("mdl gen {package} --out {out}")
        generator("example.com/design", Path("gendesign"), debug=False)
    """

    def __init__(
        self,
        command: Optional[Union[str, list[str]]] = None,
        debug_flag: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the generator.

        Args:
            command: argv template, as a string or token list (default: MDL_GEN_COMMAND)
            debug_flag: Flag appended when debug is requested (default: MDL_GEN_DEBUG_FLAG)
            timeout: Seconds before the command is killed (default: MDL_GEN_TIMEOUT)
        """
        if isinstance(command, list):
            self.argv_template = list(command)
        else:
            self.argv_template = config.gen_command_argv(command)
        self.debug_flag = debug_flag if debug_flag is not None else config.GEN_DEBUG_FLAG
        self.timeout = timeout if timeout is not None else config.gen_timeout()

    def build_argv(self, package: str, out_dir: Path, debug: bool) -> list[str]:
        """Substitute package and output directory into the argv template."""
        argv = [
            token.replace("{package}", package).replace("{out}", str(out_dir))
            for token in self.argv_template
        ]
        if debug and self.debug_flag:
            argv.append(self.debug_flag)
        return argv

    def __call__(self, package: str, out_dir: Path, debug: bool = False) -> None:
        if not self.argv_template:
            raise GenerationError("Generation command is empty")

        argv = self.build_argv(package, out_dir, debug)
        Path(out_dir).mkdir(parents=True, exist_ok=True)
        logger.info(f"Generating views for {package} into {out_dir}")
        logger.debug(f"Generation command: {argv}")

        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise GenerationError(f"Generation command not found: {argv[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise GenerationError(
                f"Generation for {package} timed out after {self.timeout}s"
            ) from e

        if debug and result.stdout:
            logger.debug(result.stdout.rstrip())

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise GenerationError(
                f"Generation for {package} failed with exit code {result.returncode}"
                + (f": {stderr}" if stderr else ""),
                stderr=stderr,
            )
