"""Load cloud run definitions from YAML files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.geometry import Point, Size
from ..layout.index import INDEX_REGISTRY, RectangleIndex, create_index
from ..layout.layouter import CircularCloudLayouter
from ..layout.sizes import random_sizes, sort_largest_first
from ..layout.spiral import DEFAULT_ANGLE_STEP


SORT_ORDERS = ("none", "largest_first")


@dataclass
class RandomSizes:
    """Seeded random size generation settings."""

    count: int
    seed: int | None = None
    min_size: int = 1
    max_size: int = 100

    def generate(self) -> list[Size]:
        return random_sizes(self.count, self.seed, self.min_size, self.max_size)


@dataclass
class RenderOptions:
    """Canvas settings for the debug drawer."""

    width: int = 800
    height: int = 800
    background: str = "white"
    outline: str = "black"
    margin: int = 10


@dataclass
class CloudConfig:
    """A complete cloud run: where to lay out, what to lay out and how to draw it."""

    center: Point = field(default_factory=lambda: Point(0, 0))
    angle_step: float = DEFAULT_ANGLE_STEP
    index_type: str = "brute"
    index_options: dict[str, Any] = field(default_factory=dict)
    sizes: list[Size] | None = None
    random: RandomSizes | None = None
    sort: str = "none"
    render: RenderOptions = field(default_factory=RenderOptions)

    def resolve_sizes(self) -> list[Size]:
        """Return the sizes to place, in placement order.

        Explicit sizes win over random generation. Without either, the
        result is empty.
        """
        if self.sizes is not None:
            sizes = list(self.sizes)
        elif self.random is not None:
            sizes = self.random.generate()
        else:
            sizes = []

        if self.sort == "largest_first":
            sizes = sort_largest_first(sizes)
        return sizes

    def create_index(self) -> RectangleIndex:
        return create_index(self.index_type, **self.index_options)

    def create_layouter(self) -> CircularCloudLayouter:
        return CircularCloudLayouter(
            self.center, angle_step=self.angle_step, index=self.create_index()
        )


class ConfigLoader:
    """Loads cloud definitions from YAML.

    YAML format (every key optional):
    ```yaml
    center: [400, 400]
    angle_step: 0.1
    index:
      type: grid        # brute | grid
      cell_size: 64
    sizes:
      - [120, 40]
      - [80, 30]
    random:             # used when `sizes` is absent
      count: 200
      seed: 1000
      min_size: 1
      max_size: 100
    sort: largest_first # none | largest_first
    render:
      width: 1000
      height: 1000
      background: white
      outline: black
      margin: 10
    ```
    """

    def load(self, path: str | Path) -> CloudConfig:
        """Load a cloud definition from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a value is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Cloud config not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_config(data)

    def load_string(self, yaml_string: str) -> CloudConfig:
        """Load a cloud definition from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._parse_config(data)

    def _parse_config(self, data: Any) -> CloudConfig:
        """Parse a cloud definition from YAML data."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Cloud config must be a mapping")

        config = CloudConfig()

        if "center" in data:
            x, y = self._parse_pair(data["center"], "center")
            config.center = Point(x, y)

        if "angle_step" in data:
            step = data["angle_step"]
            if not isinstance(step, (int, float)) or isinstance(step, bool) or step <= 0:
                raise ValueError(f"angle_step must be a positive number, got {step!r}")
            config.angle_step = float(step)

        index_data = data.get("index", {}) or {}
        if not isinstance(index_data, dict):
            raise ValueError("index must be a mapping")
        index_options = dict(index_data)
        index_type = index_options.pop("type", "brute")
        if index_type not in INDEX_REGISTRY:
            raise ValueError(f"Unknown index type: {index_type}")
        cell_size = index_options.get("cell_size")
        if cell_size is not None and not self._is_int(cell_size):
            raise ValueError(f"index.cell_size must be an integer, got {cell_size!r}")
        # Fail on unsupported options now rather than at layout time
        create_index(index_type, **index_options)
        config.index_type = index_type
        config.index_options = index_options

        if "sizes" in data:
            raw_sizes = data["sizes"] or []
            if not isinstance(raw_sizes, list):
                raise ValueError("sizes must be a list of [width, height] pairs")
            config.sizes = [
                Size(*self._parse_pair(item, f"sizes[{i}]"))
                for i, item in enumerate(raw_sizes)
            ]

        random_data = data.get("random")
        if random_data is not None:
            config.random = self._parse_random(random_data)

        sort = data.get("sort", "none")
        if sort not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {sort}")
        config.sort = sort

        render_data = data.get("render")
        if render_data is not None:
            config.render = self._parse_render(render_data)

        return config

    def _parse_random(self, data: Any) -> RandomSizes:
        if not isinstance(data, dict) or data.get("count") is None:
            raise ValueError("random must be a mapping with at least a 'count'")
        for key in ("count", "seed", "min_size", "max_size"):
            value = data.get(key)
            if value is not None and not self._is_int(value):
                raise ValueError(f"random.{key} must be an integer, got {value!r}")
        return RandomSizes(
            count=data["count"],
            seed=data.get("seed"),
            min_size=data.get("min_size", 1),
            max_size=data.get("max_size", 100),
        )

    def _parse_render(self, data: Any) -> RenderOptions:
        if not isinstance(data, dict):
            raise ValueError("render must be a mapping")
        options = RenderOptions()
        for key in ("width", "height"):
            if key in data:
                value = data[key]
                if not self._is_int(value) or value <= 0:
                    raise ValueError(f"render.{key} must be a positive integer, got {value!r}")
                setattr(options, key, value)
        if "margin" in data:
            margin = data["margin"]
            if not self._is_int(margin) or margin < 0:
                raise ValueError(f"render.margin must be a non-negative integer, got {margin!r}")
            options.margin = margin
        for key in ("background", "outline"):
            if key in data:
                setattr(options, key, str(data[key]))
        return options

    def _parse_pair(self, value: Any, key: str) -> tuple[int, int]:
        """Parse a two-element integer list such as [x, y] or [width, height]."""
        if (
            not isinstance(value, (list, tuple))
            or len(value) != 2
            or not all(self._is_int(v) for v in value)
        ):
            raise ValueError(f"{key} must be a pair of integers, got {value!r}")
        return int(value[0]), int(value[1])

    @staticmethod
    def _is_int(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)
