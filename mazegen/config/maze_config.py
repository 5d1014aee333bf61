"""
Pydantic configuration models for batch maze generation.

A configuration holds one or more maze sets. Each set describes the
topology, size and algorithm of ``count`` mazes and the post-processing
applied to each of them (openings, braiding, solving, distance map).

Example YAML:
    mazes:
      - name: intro
        count: 3
        type: square
        size: {width: 20, height: 20}
        algorithm: {name: rb}
        braid: 25%
        openings: [[S, S], [E, E]]
        solve: true
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mazegen.alg.braiding import Braiding
from mazegen.alg.generators import MazeAlgorithm, get_generator, resolve_algorithm
from mazegen.geometry.openings import OpeningAnchor, OpeningPosition
from mazegen.geometry.topology import GridTopology, MazeShape, MazeTopology, create_topology
from mazegen.utils.exceptions import MazeError

_SHAPED = (MazeTopology.TRIANGULAR, MazeTopology.HEXAGONAL)


def _opening_to_list(opening: OpeningPosition) -> list[int | str]:
    return [c.value if isinstance(c, OpeningAnchor) else c for c in (opening.x, opening.y)]


class AlgorithmConfig(BaseModel):
    """
    Generation algorithm and its options.

    ``bias`` is a side pair (``ne``, ``nw``, ``se``, ``sw``) for binary tree,
    and one value or a ``[horizontal, vertical]`` pair in (0, 1] for Eller's.
    ``weights`` are the ``[random, newest, oldest]`` selection weights of
    growing tree.
    """

    name: str = Field("rb", description="Algorithm name or short alias")
    bias: str | float | list[float] | None = Field(None, description="Binary tree or Eller's bias")
    weights: list[int] | None = Field(None, description="Growing tree weights [random, newest, oldest]")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        try:
            resolve_algorithm(v)
        except MazeError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, v: list[int] | None) -> list[int] | None:
        if v is not None and len(v) != 3:
            raise ValueError(f"weights needs exactly 3 values [random, newest, oldest], got {len(v)}")
        return v

    @property
    def algorithm(self) -> MazeAlgorithm:
        return resolve_algorithm(self.name)

    def generator_options(self) -> dict[str, Any]:
        """Keyword options for ``get_generator``."""
        algorithm = self.algorithm
        options: dict[str, Any] = {}
        if self.bias is not None:
            if algorithm is MazeAlgorithm.BINARY_TREE:
                options["bias"] = self.bias
            elif algorithm is MazeAlgorithm.ELLERS:
                horizontal, vertical = self.bias if isinstance(self.bias, list) else (self.bias, self.bias)
                options["horizontal_bias"] = horizontal
                options["vertical_bias"] = vertical
            else:
                raise ValueError(f"{algorithm.value} takes no bias")
        if self.weights is not None:
            if algorithm is not MazeAlgorithm.GROWING_TREE:
                raise ValueError(f"{algorithm.value} takes no weights")
            options.update(zip(("random_weight", "newest_weight", "oldest_weight"), self.weights))
        return options

    @model_validator(mode="after")
    def validate_options(self) -> AlgorithmConfig:
        """Build the generator once so option errors surface at load time."""
        try:
            get_generator(self.name, **self.generator_options())
        except MazeError as e:
            raise ValueError(str(e)) from e
        return self


class MazeSizeConfig(BaseModel):
    """Maze dimensions; which fields apply depends on the topology."""

    width: int | None = Field(None, ge=1, description="Columns, or size of triangle and hexagon outlines")
    height: int | None = Field(None, ge=1, description="Rows")
    radius: int | None = Field(None, ge=1, description="Number of rings of circular mazes")
    center_radius: float = Field(1.0, gt=0.0, description="Radius of the circular center cell")
    subdivision: float = Field(1.5, gt=0.0, description="Ring width growth before cells are split")
    max_weave: int = Field(1, ge=0, description="Cells a weaving passage may cross under")

    model_config = ConfigDict(validate_assignment=True)


class MazeSetConfig(BaseModel):
    """
    A set of mazes sharing topology, size and processing.

    ``braid`` is a dead-end count or a percentage string such as ``"50%"``.
    ``openings`` are coordinate pairs, each an index or an anchor letter
    (``S``, ``C``, ``E``). ``distance_map_start`` is an opening-style
    position, or ``"random"``/None for a random cell.
    """

    name: str = Field("maze", min_length=1, description="Set name, used in output names")
    count: int = Field(1, ge=1, description="Number of mazes to generate")
    type: MazeTopology = Field(MazeTopology.SQUARE, description="Maze topology")
    shape: MazeShape = Field(MazeShape.RECTANGLE, description="Outline of triangular and hexagonal mazes")
    size: MazeSizeConfig = Field(default_factory=MazeSizeConfig)
    algorithm: AlgorithmConfig = Field(default_factory=AlgorithmConfig)
    braid: int | str | None = Field(None, description="Dead ends to remove")
    openings: list[list[int | str]] = Field(default_factory=list, description="Boundary openings")
    solve: bool = Field(False, description="Solve between the first two openings")
    distance_map: bool = Field(False, description="Compute a distance map")
    distance_map_start: list[int | str] | str | None = Field(None, description="Distance map start")
    seed: int | None = Field(None, description="Random seed of the set")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("braid")
    @classmethod
    def validate_braid(cls, v: int | str | None) -> int | str | None:
        if v is None:
            return v
        if isinstance(v, str) and not v.strip().endswith("%"):
            raise ValueError(f"braid must be a count or a percentage like '50%', got '{v}'")
        try:
            Braiding.parse(v)
        except MazeError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("openings", mode="before")
    @classmethod
    def validate_openings(cls, v: Any) -> list[list[int | str]]:
        try:
            return [_opening_to_list(OpeningPosition.parse(item)) for item in v]
        except (MazeError, TypeError) as e:
            raise ValueError(str(e)) from e

    @field_validator("distance_map_start", mode="before")
    @classmethod
    def validate_distance_map_start(cls, v: Any) -> list[int | str] | str | None:
        if v is None or (isinstance(v, str) and v.strip().lower() == "random"):
            return None if v is None else "random"
        try:
            return _opening_to_list(OpeningPosition.parse(v))
        except (MazeError, TypeError) as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def validate_set(self) -> MazeSetConfig:
        """Validate cross-field constraints."""
        if self.solve and len(self.openings) < 2:
            raise ValueError(f"solve requires at least 2 openings, got {len(self.openings)}")
        if self.type is MazeTopology.CIRCULAR:
            if self.size.radius is None:
                raise ValueError("circular mazes need size.radius")
        else:
            if self.size.width is None:
                raise ValueError(f"{self.type.value} mazes need size.width")
            if self.size.height is None and self.type not in _SHAPED:
                raise ValueError(f"{self.type.value} mazes need size.height")
        try:
            self.build_topology()
        except MazeError as e:
            raise ValueError(str(e)) from e
        generator = get_generator(self.algorithm.name, **self.algorithm.generator_options())
        if not generator.supports(self.type):
            raise ValueError(f"{generator.name} cannot generate {self.type.value} mazes")
        return self

    def dimensions(self) -> dict[str, Any]:
        """Keyword dimensions for ``create_topology``."""
        size = self.size
        if self.type is MazeTopology.CIRCULAR:
            return {"radius": size.radius, "center_radius": size.center_radius, "subdivision": size.subdivision}
        dims: dict[str, Any] = {"width": size.width, "height": size.height}
        if self.type is MazeTopology.WEAVING_SQUARE:
            dims["max_weave"] = size.max_weave
        elif self.type in _SHAPED:
            dims["shape"] = self.shape
        return dims

    def build_topology(self) -> GridTopology:
        return create_topology(self.type, **self.dimensions())

    def opening_positions(self) -> list[OpeningPosition]:
        return [OpeningPosition.parse(opening) for opening in self.openings]

    def braiding(self) -> Braiding | None:
        return None if self.braid is None else Braiding.parse(self.braid)

    def distance_map_origin(self) -> OpeningPosition | None:
        """Distance map start position, None for a random cell."""
        if self.distance_map_start is None or self.distance_map_start == "random":
            return None
        return OpeningPosition.parse(self.distance_map_start)


class MazeGenerationConfig(BaseModel):
    """Top-level configuration: the maze sets to generate, in order."""

    mazes: list[MazeSetConfig] = Field(..., min_length=1, description="Maze sets")

    model_config = ConfigDict(validate_assignment=True)

    @model_validator(mode="after")
    def deduplicate_names(self) -> MazeGenerationConfig:
        """Suffix repeated set names with -2, -3, ..."""
        seen: dict[str, int] = {}
        taken = {maze_set.name for maze_set in self.mazes}
        for maze_set in self.mazes:
            name = maze_set.name
            if name not in seen:
                seen[name] = 1
                continue
            while True:
                seen[name] += 1
                candidate = f"{name}-{seen[name]}"
                if candidate not in taken:
                    break
            taken.add(candidate)
            maze_set.name = candidate
        return self

    @property
    def total_mazes(self) -> int:
        return sum(maze_set.count for maze_set in self.mazes)
