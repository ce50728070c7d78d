"""Write a burst of lines to a small log file and show the rotated backups."""

from __future__ import annotations

import tempfile
from pathlib import Path

from rotlog import Level, create
from rotlog.utils.diagnostics import logger, setup_diagnostics


def run(directory: Path, lines: int = 12, max_size_bytes: int = 256) -> list[Path]:
    log = create(Level.INFO)
    log.attach_file(directory / "demo.log", 0o644, max_size_bytes)
    with log:
        log.debug("filtered out, below INFO")
        for i in range(lines):
            log.info(f"demo line {i}")
        log.warning("burst finished")
    return sorted(directory.glob("demo*.log"))


if __name__ == "__main__":
    setup_diagnostics(level="DEBUG")
    with tempfile.TemporaryDirectory() as tmp:
        for path in run(Path(tmp)):
            logger.info("{name}: {size} bytes", name=path.name, size=path.stat().st_size)
