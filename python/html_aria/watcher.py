# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
import fnmatch
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Sequence

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .audit import audit_file

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE = ("*.html", "*.htm")


def _is_hidden(path) -> bool:
    return any(part.startswith(".") and part not in {".", ".."} for part in Path(path).parts)


def _relative_to_roots(path: str, roots: Sequence[Path]) -> Path:
    resolved = Path(path).resolve()
    for root in roots:
        try:
            return resolved.relative_to(root)
        except ValueError:
            continue
    return Path(path)


class AuditEventHandler(FileSystemEventHandler):
    """Re-audit matching files on change, at most once per ``delay`` seconds per file."""

    def __init__(
        self,
        callback: Callable[[Dict[str, Any]], None],
        *,
        delay: float = 0.5,
        include: Sequence[str] = DEFAULT_INCLUDE,
        ignore_rules: Iterable[str] = (),
        roots: Iterable[str] = (),
    ):
        self.callback = callback
        self.delay = delay
        self.include = tuple(include)
        self.ignore_rules = tuple(ignore_rules)
        self.last_run: Dict[str, float] = {}
        # hidden path segments only count below these
        self.roots = tuple(Path(r).resolve() for r in roots)

    def matches(self, path: str) -> bool:
        if _is_hidden(_relative_to_roots(path, self.roots)):
            return False
        name = Path(path).name
        return any(fnmatch.fnmatch(name, pattern) for pattern in self.include)

    def on_modified(self, event):
        if event.is_directory:
            return
        self._handle(event.src_path)

    def on_created(self, event):
        if event.is_directory:
            return
        self._handle(event.src_path)

    def on_moved(self, event):
        if event.is_directory:
            return
        self._handle(event.dest_path)

    def _handle(self, src_path: str) -> None:
        if not self.matches(src_path):
            return

        # Debounce
        now = time.time()
        if now - self.last_run.get(src_path, 0.0) < self.delay:
            return
        self.last_run[src_path] = now

        logger.info("change detected in %s", src_path)
        try:
            report = audit_file(src_path, ignore_rules=self.ignore_rules)
            self.callback(report)
        except Exception:
            logger.exception("audit of %s failed", src_path)


def watch_paths(
    paths: Iterable[str],
    callback: Callable[[Dict[str, Any]], None],
    *,
    delay: float = 0.5,
    include: Sequence[str] = DEFAULT_INCLUDE,
    ignore_rules: Iterable[str] = (),
    stop_after: Optional[float] = None,
) -> None:
    """Watch ``paths`` and call ``callback`` with a fresh report for each changed file.

    Blocks until interrupted, or for ``stop_after`` seconds when given.
    """
    targets = []
    for path in paths:
        p = Path(path)
        targets.append((p if p.is_dir() else p.parent, p.is_dir()))
    handler = AuditEventHandler(
        callback,
        delay=delay,
        include=include,
        ignore_rules=ignore_rules,
        roots=[str(target) for target, _ in targets],
    )
    observer = Observer()
    for target, recursive in targets:
        logger.info("watching %s", target)
        observer.schedule(handler, str(target), recursive=recursive)
    observer.start()

    started = time.time()
    try:
        while stop_after is None or time.time() - started < stop_after:
            time.sleep(min(1.0, stop_after) if stop_after else 1.0)
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
    observer.join()
