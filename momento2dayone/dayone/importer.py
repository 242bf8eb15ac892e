"""
Day One importer.

This module drives the dayone2 command line tool, creating one Day One
entry per projected moment.
"""

import asyncio
import shutil
import sys
import time
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.logging import get_logger
from ..core.exceptions import EnvironmentCheckError
from ..settings import DayOneSettings
from .schemas import DayOneCompatible, ImportFailure, ImportResult


logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


def check_environment(settings: DayOneSettings) -> str:
    """
    Verify that dayone2 can run on this host.

    Args:
        settings: Day One settings

    Returns:
        Resolved path of the dayone2 executable

    Raises:
        EnvironmentCheckError: If the host is not macOS or dayone2 is missing
    """
    if settings.require_macos and sys.platform != "darwin":
        raise EnvironmentCheckError(
            f"Day One import requires macOS (running on {sys.platform})",
            requirement="macos"
        )

    executable = shutil.which(settings.executable)
    if executable is None:
        raise EnvironmentCheckError(
            f"{settings.executable} not found on PATH. Install the Day One "
            "command line tool from the Day One preferences",
            requirement="executable"
        )

    logger.debug(f"Using {executable}")
    return executable


class DayOneImporter:
    """
    Import entries into Day One through the dayone2 command line tool.

    Failed entries are logged and counted; the import carries on with
    the next entry.
    """

    def __init__(self, settings: DayOneSettings) -> None:
        """
        Initialize the importer.

        Args:
            settings: Day One settings
        """
        self.settings = settings

    def build_args(self, entry: DayOneCompatible) -> List[str]:
        """Build the dayone2 arguments that create one entry."""
        args = ["new", entry.text]

        args.extend(["--isoDate", entry.iso_timestamp])
        args.extend(["--time-zone", self.settings.time_zone])

        if self.settings.journal:
            args.extend(["--journal", self.settings.journal])

        tags = entry.merged_tags
        if tags:
            args.append("--tags")
            args.extend(tags)

        # Day One accepts photos only, no video
        photos = entry.filtered_media(self.settings.photo_extension)
        if photos:
            args.append("--photos")
            args.extend(photos)

        # Text is passed as an argument, so ignore standard input
        args.append("--no-stdin")

        return args

    async def import_entries(
        self,
        entries: Sequence[DayOneCompatible],
        dry_run: bool = False,
        progress: Optional[ProgressCallback] = None
    ) -> ImportResult:
        """
        Import entries one at a time, pausing between batches.

        Args:
            entries: Entries in the order they should be created
            dry_run: Log the commands without running them
            progress: Called with (position, total) before each entry

        Returns:
            ImportResult with counts and rejected entries
        """
        start_time = time.time()
        total = len(entries)
        result = ImportResult(total=total, dry_run=dry_run)

        logger.info(f"Day One import starting. {total} entries.")

        for i, entry in enumerate(entries):
            if progress is not None:
                progress(i + 1, total)

            args = self.build_args(entry)
            self._log_skipped_media(entry)

            if dry_run:
                logger.info(f"[dry run] {self.settings.executable} {' '.join(args)}")
                result.imported += 1
                continue

            returncode, output = await self._run_command(args)
            if returncode != 0:
                result.failed += 1
                result.failures.append(
                    ImportFailure(iso_timestamp=entry.iso_timestamp, output=output)
                )
                logger.error(f"Entry with date {entry.iso_timestamp!r} could not be imported")
                if output:
                    logger.error(output)
            else:
                result.imported += 1

            if (i + 1) % self.settings.batch_size == 0 and i + 1 < total:
                await self._pause()

        result.processing_time = time.time() - start_time
        logger.info(
            f"Day One import complete. Imported: {result.imported}, "
            f"Errors: {result.failed}. Took {result.processing_time:.2f}s."
        )
        return result

    async def _pause(self) -> None:
        """Give Day One time to sync between batches."""
        seconds = self.settings.batch_pause_seconds
        if seconds > 0:
            logger.debug(f"Pausing {seconds}s between batches")
            await asyncio.sleep(seconds)

    def _log_skipped_media(self, entry: DayOneCompatible) -> None:
        """Log attachments the photo filter leaves out."""
        extension = self.settings.photo_extension
        for path in entry.media:
            if not path.endswith(extension):
                logger.debug(f"Skipping unsupported attachment {path} ({entry.iso_timestamp})")

    async def _run_command(self, args: List[str]) -> Tuple[int, str]:
        """Run dayone2 and return its exit code with combined output."""
        process = await asyncio.create_subprocess_exec(
            self.settings.executable,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT
        )

        try:
            stdout, _ = await asyncio.wait_for(
                process.communicate(),
                timeout=self.settings.command_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"{self.settings.executable} timed out after {self.settings.command_timeout}s"
            )
            process.kill()
            await process.wait()
            return -1, f"Timed out after {self.settings.command_timeout}s"

        return process.returncode, stdout.decode("utf-8", errors="replace").strip()
