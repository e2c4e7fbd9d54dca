"""Configuration system for paramtreelib.

This module defines how callers tune a tree build: the separator used to
form fully-qualified paths, the tokens that mark a dependency name as
group-qualified, and the caps that protect the build against a
misbehaving parameter source.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class BuildConfig:
    """Complete configuration for building and resolving a parameter tree.

    The TreeBuilder validates this configuration before touching the
    parameter source, so a bad configuration fails fast.
    """

    # Path formation
    separator: str = "."                          # Joins keys into qualified names
    qualifiers: Tuple[str, ...] = (".", "::")     # Group separators accepted in dependency names

    # Protection against misbehaving sources
    max_items_per_level: int = 4096               # Iteration cap per first/next enumeration
    max_depth: int = 64                           # Maximum group nesting

    # Dependency resolution
    search_ancestors: bool = True                 # Retry misses against enclosing groups

    # Synthetic root
    root_key: str = "root"
    root_name: str = "Root"

    # Convenience constructors for common configurations

    @classmethod
    def strict(cls) -> 'BuildConfig':
        """Create config that only resolves names relative to the declaring group.

        Returns:
            BuildConfig with ancestor search disabled
        """
        return cls(search_ancestors=False)

    @classmethod
    def permissive(cls, max_items_per_level: int = 65536, max_depth: int = 256) -> 'BuildConfig':
        """Create config with larger caps for very large engines.

        Args:
            max_items_per_level: Iteration cap per enumeration
            max_depth: Maximum group nesting

        Returns:
            BuildConfig with raised limits
        """
        return cls(max_items_per_level=max_items_per_level, max_depth=max_depth)

    def split_name(self, name: str) -> List[str]:
        """Split a raw dependency name into path segments.

        Every token in ``qualifiers`` is treated as a group separator, so
        ``"env::attack"`` and ``"env.attack"`` produce the same segments.

        Args:
            name: Raw dependency name as written by the source

        Returns:
            List of non-empty key segments
        """
        normalized = name
        for token in self.qualifiers:
            if token != self.separator:
                normalized = normalized.replace(token, self.separator)
        return [part for part in normalized.split(self.separator) if part]

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.separator:
            errors.append("separator cannot be empty")

        if not self.qualifiers:
            errors.append("at least one qualifier token is required")
        elif any(not token for token in self.qualifiers):
            errors.append("qualifier tokens cannot be empty")
        elif self.separator not in self.qualifiers:
            errors.append("separator must be one of the qualifier tokens")

        if self.max_items_per_level <= 0:
            errors.append("max_items_per_level must be positive")

        if self.max_depth <= 0:
            errors.append("max_depth must be positive")

        if not self.root_key:
            errors.append("root_key cannot be empty")
        elif any(token in self.root_key for token in self.qualifiers):
            errors.append("root_key cannot contain a qualifier token")

        return errors
