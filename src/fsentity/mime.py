"""MIME type detection.

Detection prefers the host's content sniffer (the ``file`` utility) and falls
back to the extension table of the standard :mod:`mimetypes` module.
"""

from __future__ import annotations

import logging
import mimetypes
import shutil
import subprocess
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Sniffer results that are known to be wrong, mapped to the correct type
MIME_CORRECTIONS = {
    "image/svg": "image/svg+xml",
}

# Named extension -> MIME derived extensions that must not replace it
EXTENSION_EXCEPTIONS = {
    "svg": ["html"],
}

Sniffer = Callable[[str], str | None]


class MimetypesLookup:
    """Extension based lookup table backed by :mod:`mimetypes`.

    Satisfies the MimeLookup protocol structurally.
    """

    def mime_type_for(self, path: str) -> str | None:
        """Guess the MIME type from the file extension."""
        mime_type, _ = mimetypes.guess_type(path, strict=False)
        return mime_type

    def extension_for(self, mime_type: str) -> str | None:
        """Get the canonical extension for a MIME type."""
        extension = mimetypes.guess_extension(mime_type, strict=False)
        return extension.lstrip(".") if extension else None


class FileCommandSniffer:
    """Content sniffer using the host ``file`` utility."""

    def __init__(self, command: str = "file", timeout: float = 10.0) -> None:
        """Initialize the sniffer.

        Args:
            command: Name or path of the ``file`` executable.
            timeout: Seconds to wait for the command.
        """
        self.command = command
        self.timeout = timeout

    @property
    def available(self) -> bool:
        """True if the command can be found on PATH."""
        return shutil.which(self.command) is not None

    def __call__(self, path: str) -> str | None:
        """Sniff the MIME type of a file from its content.

        Returns:
            MIME type, or None when the utility is missing or fails.
        """
        executable = shutil.which(self.command)
        if executable is None:
            return None

        try:
            result = subprocess.run(
                [executable, "--brief", "--mime-type", path],
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("MIME sniffing failed for %s: %s", path, e)
            return None

        return result.stdout.strip() or None


class MimeDetector:
    """MIME lookup combining a content sniffer with an extension table.

    Satisfies the MimeLookup protocol structurally.
    """

    def __init__(
        self,
        table: MimetypesLookup | None = None,
        sniffer: Sniffer | None = None,
    ) -> None:
        """Initialize the detector.

        Args:
            table: Extension table. Defaults to MimetypesLookup.
            sniffer: Content sniffer tried first. None disables sniffing.
        """
        self.table = table or MimetypesLookup()
        self.sniffer = sniffer

    @classmethod
    def create(cls, sniff: bool = True) -> MimeDetector:
        """Create a detector using the host sniffer when requested."""
        return cls(table=MimetypesLookup(), sniffer=FileCommandSniffer() if sniff else None)

    def mime_type_for(self, path: str) -> str | None:
        """Detect the MIME type of a file."""
        if self.sniffer is not None:
            mime_type = self.sniffer(path)
            if mime_type:
                return MIME_CORRECTIONS.get(mime_type, mime_type)

        return self.table.mime_type_for(path)

    def extension_for(self, mime_type: str) -> str | None:
        """Get the canonical extension for a MIME type."""
        return self.table.extension_for(mime_type)


def validate_mime_extension(
    mime_extension: str | None, extension: str | None
) -> str | None:
    """Make sure the MIME type did not wrongly conclude a different extension.

    Args:
        mime_extension: Extension derived from the detected MIME type.
        extension: Extension in the file name.

    Returns:
        The extension to use.

    Example:
        >>> validate_mime_extension("html", "svg")
        'svg'
        >>> validate_mime_extension("png", "jpg")
        'png'
    """
    if extension is not None and mime_extension is not None:
        if mime_extension.lower() in EXTENSION_EXCEPTIONS.get(extension.lower(), []):
            return extension

    return mime_extension
