"""Shared fixtures: failed layout tests leave a picture of the cloud behind."""

import re
from pathlib import Path

import pytest

from tagcloud.layout import CircularCloudLayouter
from tagcloud.render import CloudDrawer


class CloudRecorder:
    """Keeps track of the layouters a test creates so they can be drawn on failure."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir
        self.layouters: list[CircularCloudLayouter] = []

    def track(self, layouter: CircularCloudLayouter) -> CircularCloudLayouter:
        self.layouters.append(layouter)
        return layouter

    def dump(self, name: str) -> list[Path]:
        """Draw every tracked layouter that has placed something."""
        drawer = CloudDrawer(width=1000, height=1000, upscale=True)
        safe_name = re.sub(r"[^\w.-]+", "_", name)
        paths = []
        for i, layouter in enumerate(self.layouters):
            if len(layouter) == 0:
                continue
            path = self.output_dir / f"{safe_name}_{i}.png"
            paths.append(drawer.save(layouter.rectangles, layouter.center, path))
        return paths


@pytest.fixture
def cloud_recorder(tmp_path):
    """Record layouters; their layouts are saved as PNG if the test fails."""
    return CloudRecorder(tmp_path)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return
    recorder = getattr(item, "funcargs", {}).get("cloud_recorder")
    if recorder is None:
        return
    paths = recorder.dump(item.name)
    if paths:
        report.sections.append(
            ("tag cloud", "\n".join(f"Layout saved to {p}" for p in paths))
        )
