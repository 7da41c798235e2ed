"""
Clustering options.

ClusteringOptions is the typed configuration of one pipeline call. It
exposes exactly three settings:

- laplacian_matrix: Laplacian strategy ("connected" or "distance")
- requested_nb_clusters: Fixed cluster count, or -1 for automatic selection
- max_clusters: Upper bound of automatic cluster-count selection

Caller overrides given as a mapping are merged onto the defaults by
resolve_options(). Keys may use the camelCase names of the option map
(laplacianMatrix, requestedNbClusters, maxClusters) or the snake_case
field names. Unknown keys are ignored.
"""

from __future__ import annotations

import dataclasses
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .validation import InvalidOptionError

AUTOMATIC_CLUSTERS = -1
"""Sentinel for requested_nb_clusters meaning "choose the count automatically"."""


class LaplacianKind(str, Enum):
    """
    Laplacian construction strategy.

    - connected: Combinatorial Laplacian (-1 per edge, degree on diagonal)
    - distance: Edge weights 1 / log10(euclidean distance)
    """

    CONNECTED = "connected"
    DISTANCE = "distance"

    @classmethod
    def parse(cls, value: Union[str, LaplacianKind]) -> LaplacianKind:
        """
        Convert a string to a LaplacianKind.

        Raises:
            InvalidOptionError: If value is not a known strategy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(repr(k.value) for k in cls)
            raise InvalidOptionError(
                f"Unknown Laplacian strategy {value!r}, expected one of {choices}"
            ) from None


_OPTION_ALIASES = {
    "laplacianMatrix": "laplacian_matrix",
    "laplacian_matrix": "laplacian_matrix",
    "requestedNbClusters": "requested_nb_clusters",
    "requested_nb_clusters": "requested_nb_clusters",
    "maxClusters": "max_clusters",
    "max_clusters": "max_clusters",
}


@dataclass(frozen=True)
class ClusteringOptions:
    """
    Resolved options for one pipeline call.

    Validated at construction; immutable afterwards.

    Raises:
        InvalidOptionError: If a value has the wrong type or range
    """

    laplacian_matrix: LaplacianKind = LaplacianKind.CONNECTED
    requested_nb_clusters: int = AUTOMATIC_CLUSTERS
    max_clusters: int = 8

    def __post_init__(self) -> None:
        object.__setattr__(self, "laplacian_matrix", LaplacianKind.parse(self.laplacian_matrix))
        object.__setattr__(
            self,
            "requested_nb_clusters",
            _as_int("requested_nb_clusters", self.requested_nb_clusters),
        )
        object.__setattr__(self, "max_clusters", _as_int("max_clusters", self.max_clusters))

        if self.requested_nb_clusters != AUTOMATIC_CLUSTERS and self.requested_nb_clusters < 1:
            raise InvalidOptionError(
                f"requested_nb_clusters must be >= 1 or {AUTOMATIC_CLUSTERS}, "
                f"got {self.requested_nb_clusters}"
            )
        if self.max_clusters < 1:
            raise InvalidOptionError(f"max_clusters must be >= 1, got {self.max_clusters}")

    @property
    def automatic(self) -> bool:
        """Whether the cluster count is chosen automatically."""
        return self.requested_nb_clusters == AUTOMATIC_CLUSTERS

    def replace(self, **changes: Any) -> Self:
        """Return a copy with some fields replaced (validated again)."""
        return dataclasses.replace(self, **changes)


OptionsLike = Union[ClusteringOptions, Mapping[str, Any], None]
"""Input type for options: ClusteringOptions, a mapping of overrides, or None."""


def resolve_options(options: OptionsLike = None) -> ClusteringOptions:
    """
    Merge caller overrides onto the default options.

    Args:
        options: ClusteringOptions (returned as is), a mapping of
            overrides, or None for the defaults

    Returns:
        Validated ClusteringOptions

    Raises:
        InvalidOptionError: If a recognized option has an invalid value

    Example:
        >>> opts = resolve_options({"requestedNbClusters": 2, "colour": "red"})
        >>> opts.requested_nb_clusters, opts.max_clusters
        (2, 8)
    """
    if options is None:
        return ClusteringOptions()
    if isinstance(options, ClusteringOptions):
        return options

    overrides: dict[str, Any] = {}
    for key, value in options.items():
        field_name = _OPTION_ALIASES.get(key)
        if field_name is not None:
            overrides[field_name] = value
    return ClusteringOptions(**overrides)


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidOptionError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise InvalidOptionError(f"{name} must be an integer, got {value!r}")


__all__ = [
    "AUTOMATIC_CLUSTERS",
    "LaplacianKind",
    "ClusteringOptions",
    "OptionsLike",
    "resolve_options",
]
