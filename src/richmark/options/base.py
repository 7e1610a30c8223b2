"""Base classes for parser and scope options.

This module defines the foundation classes for the option dataclasses used
by the Markdown parser and the output scopes.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of all option fields."""
        return frozenset(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a mapping, rejecting unknown keys.

        Parameters
        ----------
        values : Mapping
            Field names (hyphens are accepted in place of underscores) and values

        Raises
        ------
        ValueError
            If a key does not name an option field

        """
        normalized = {str(key).replace("-", "_"): value for key, value in values.items()}
        unknown = sorted(set(normalized) - cls.field_names())
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} field(s): {', '.join(unknown)}")
        return cls(**normalized)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses define parser-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for output scope options.

    Notes
    -----
    Subclasses define scope-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""
