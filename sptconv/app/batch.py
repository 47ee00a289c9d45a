from __future__ import annotations

import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, TextIO

from ..errors import HeaderTooShort, SptError
from ..format import SptHeader, load_file
from ..rendering import save_png
from .messages import MessageCatalog

LOG = logging.getLogger(__name__)

SPT_EXTENSION = ".spt"
PNG_EXTENSION = ".png"


@dataclass
class ConvertSettings:
    strict_header: bool = False
    jobs: int = 1
    extension: str = SPT_EXTENSION
    output_extension: str = PNG_EXTENSION


@dataclass(frozen=True)
class ConversionResult:
    source: str
    target: str
    ok: bool
    error: Optional[str] = None
    header: Optional[SptHeader] = None
    short_header: bool = False


def matches_extension(path: str, extension: str) -> bool:
    return path.lower().endswith(extension.lower())


def iter_spt_files(root: str, extension: str = SPT_EXTENSION) -> Iterator[str]:
    """Yield matching regular files under ``root`` using an explicit stack."""
    stack = [root]
    while stack:
        current = stack.pop()
        if os.path.isdir(current):
            try:
                entries = sorted(os.listdir(current))
            except OSError as exc:
                LOG.debug("Skipping unreadable directory %s: %s", current, exc)
                continue
            # reversed so entries pop in sorted order
            for name in reversed(entries):
                stack.append(os.path.join(current, name))
        elif os.path.isfile(current) and matches_extension(current, extension):
            yield os.path.abspath(current)


def output_path_for(path: str, output_extension: str = PNG_EXTENSION) -> str:
    return os.path.splitext(path)[0] + output_extension


class BatchConverter:
    def __init__(
        self,
        messages: MessageCatalog,
        settings: Optional[ConvertSettings] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.messages = messages
        self.settings = settings or ConvertSettings()
        self.out = out or sys.stdout

    def run(self, root: str) -> List[ConversionResult]:
        if not os.path.exists(root):
            self._emit("FileNotExist", path=root)
            return []
        paths = list(iter_spt_files(root, self.settings.extension))
        if self.settings.jobs > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self.settings.jobs) as pool:
                results = list(pool.map(self._convert_quiet, paths))
            for result in results:
                self._report(result)
        else:
            results = []
            for path in paths:
                result = self._convert_quiet(path)
                self._report(result)
                results.append(result)
        return results

    def convert_file(self, path: str) -> ConversionResult:
        result = self._convert_quiet(path)
        self._report(result)
        return result

    def _convert_quiet(self, path: str) -> ConversionResult:
        target = output_path_for(path, self.settings.output_extension)
        header = None
        try:
            header, buffer = load_file(path, strict=self.settings.strict_header)
            save_png(buffer, target)
        except HeaderTooShort as exc:
            return ConversionResult(path, target, ok=False, error=str(exc), short_header=True)
        except (SptError, OSError, ValueError) as exc:
            LOG.debug("Conversion of %s failed", path, exc_info=True)
            return ConversionResult(path, target, ok=False, error=str(exc), header=header)
        except MemoryError:
            LOG.debug("Out of memory converting %s", path, exc_info=True)
            return ConversionResult(path, target, ok=False, error="out of memory", header=header)
        return ConversionResult(path, target, ok=True, header=header)

    def _report(self, result: ConversionResult) -> None:
        self._emit("ConvertProgress", source=result.source, target=result.target)
        header = result.header
        if result.short_header or (header is not None and not header.complete):
            self._emit("FileHeadError", path=result.source)
        if header is not None:
            self._emit(
                "ImageInfo",
                width=header.width,
                height=header.height,
                compressed=header.compressed,
            )
        if not result.ok:
            self._emit("ConvertFailed", path=result.source, error=result.error)

    def _emit(self, key: str, **kwargs) -> None:
        print(self.messages.format(key, **kwargs), file=self.out)
