"""
The asset manifest: the fixed, ordered list of files a run is responsible for.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple, Union


@dataclass(frozen=True)
class AssetEntry:
    """A named asset and where it lives on disk."""

    name: str
    local_path: Path

    def exists(self) -> bool:
        return self.local_path.is_file()


Manifest = Tuple[AssetEntry, ...]


def build_manifest(names: Iterable[str], assets_dir: Union[str, Path]) -> Manifest:
    """
    Build the manifest for ``names`` located under ``assets_dir``.

    Order is preserved. Names must be unique plain file names.

    :raises ValueError: On duplicate names or names containing a path separator.
    """
    assets_dir = Path(assets_dir)
    entries = []
    seen = set()
    for name in names:
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"Invalid asset name '{name}': must be a plain file name")
        if name in seen:
            raise ValueError(f"Duplicate asset name '{name}' in manifest")
        seen.add(name)
        entries.append(AssetEntry(name=name, local_path=assets_dir / name))
    return tuple(entries)
