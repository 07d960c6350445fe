from __future__ import annotations

import os
import tempfile

from domain.errors import WriteError
from domain.repositories import ReportWriter


def _default_file_mode() -> int:
    # os.umask can only be read by setting it.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FileReportWriter(ReportWriter):
    """
    Writes the report to a UTF-8 text file.

    The text is written to a temporary file next to the destination which
    then replaces it, so readers never see a half-written report. The file
    gets the same permissions a plain `open(path, "w")` would give it.
    """

    def __init__(self, path: str) -> None:
        self._path = path

    def describe(self) -> str:
        return self._path

    def write(self, text: str) -> None:
        directory = os.path.dirname(os.path.abspath(self._path))
        tmp_path = None
        replaced = False
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".report-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(text)
            os.chmod(tmp_path, _default_file_mode())
            os.replace(tmp_path, self._path)
            replaced = True
        except (OSError, UnicodeError) as exc:
            raise WriteError(f"Error writing report file {self._path}: {exc}", path=self._path) from exc
        finally:
            if not replaced and tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
