"""
WireMock Stubs Mapping Exporter

Writes serialized stub rules to disk in the layouts WireMock reads:
- One JSON file per stub in a mappings directory (--root-dir layout)
- A single {"mappings": [...]} bundle for the admin import endpoint
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..stub_rule import StubRule
from .loader import StubDefinition

logger = logging.getLogger("wiremock_stubs.export")

StubLike = Union[StubRule, StubDefinition]


@dataclass
class ExportConfig:
    """Configuration for mapping export."""

    output_dir: str = "mappings"  # Directory for per-stub mapping files
    indent: int = 2  # JSON indentation (0 = compact)
    sort_keys: bool = False
    overwrite: bool = True  # Replace existing files with the same name


def sanitize_filename(name: str) -> str:
    """
    Turn a stub name into a safe file name stem.

    Args:
        name: Free-form stub name

    Returns:
        Name with path separators and whitespace replaced by underscores
    """
    cleaned = re.sub(r'[^A-Za-z0-9._-]+', '_', name.strip())
    return cleaned.strip('._') or 'stub'


class MappingExporter:
    """
    Exports stub rules as WireMock mapping files.

    Example:
        exporter = MappingExporter(ExportConfig(output_dir="wiremock/mappings"))
        paths = exporter.export(definitions)

        # Or a single import bundle
        exporter.export_bundle(definitions, "bundle.json")
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def _json_kwargs(self) -> dict:
        return {
            'indent': self.config.indent or None,
            'sort_keys': self.config.sort_keys,
            'ensure_ascii': False,
        }

    @staticmethod
    def _unpack(stub: StubLike, index: int):
        if isinstance(stub, StubDefinition):
            return stub.rule, stub.name or f"stub_{index}"
        return stub, f"stub_{index}"

    def export(self, stubs: List[StubLike]) -> List[Path]:
        """
        Write one mapping file per stub.

        Args:
            stubs: StubRule or StubDefinition objects

        Returns:
            Paths of the written files, in input order

        Raises:
            FileExistsError: If overwrite is disabled and a file already exists
            OSError: If the directory or a file cannot be written
            TypeError: If a stub holds a value the JSON encoder rejects
        """
        output_path = Path(self.config.output_dir)
        try:
            output_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating directory {output_path}: {e}")
            raise

        written = []
        used_names = set()
        for index, stub in enumerate(stubs, 1):
            rule, name = self._unpack(stub, index)

            stem = sanitize_filename(name)
            # Keep names unique within one export
            unique_stem, suffix = stem, 2
            while unique_stem in used_names:
                unique_stem = f"{stem}_{suffix}"
                suffix += 1
            used_names.add(unique_stem)

            filepath = output_path / f"{unique_stem}.json"
            if filepath.exists() and not self.config.overwrite:
                raise FileExistsError(f"Mapping file already exists: {filepath}")

            content = rule.to_json(**self._json_kwargs())
            try:
                filepath.write_text(content + "\n", encoding='utf-8')
            except OSError as e:
                logger.error(f"Error writing {filepath}: {e}")
                raise

            logger.debug(f"Wrote {rule!r} -> {filepath}")
            written.append(filepath)

        logger.info(f"Exported {len(written)} mappings to {output_path}")
        return written

    def export_bundle(self, stubs: List[StubLike], bundle_path: str) -> Path:
        """
        Write all stubs into one {"mappings": [...]} file.

        Args:
            stubs: StubRule or StubDefinition objects
            bundle_path: Destination file

        Returns:
            Path of the written bundle
        """
        bundle = {
            "mappings": [self._unpack(stub, index)[0].to_dict() for index, stub in enumerate(stubs, 1)]
        }

        filepath = Path(bundle_path)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(bundle, f, **self._json_kwargs())
            f.write("\n")

        logger.info(f"Exported bundle of {len(bundle['mappings'])} mappings to {filepath}")
        return filepath
