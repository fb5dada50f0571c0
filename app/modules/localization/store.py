"""Reading and writing String Catalog files."""

import json
import os
from pathlib import Path
from typing import Union

from infrastructure.logging import get_module_logger
from modules.localization.exceptions import MalformedDocument
from modules.localization.models import Catalog

logger = get_module_logger()

BACKUP_SUFFIX = ".original"


def dumps_catalog(catalog: Catalog) -> str:
    """Serialize a catalog the way Xcode writes it.

    Sorted keys, two space indentation, `" : "` between member names and
    values, non-ASCII text kept as-is and a trailing newline.
    """
    text = json.dumps(
        catalog.to_document(),
        sort_keys=True,
        indent=2,
        separators=(",", " : "),
        ensure_ascii=False,
    )
    return text + "\n"


def backup_path_for(path: Union[str, Path]) -> Path:
    """Location of the backup kept next to a catalog file."""
    path = Path(path)
    return path.with_name(path.name + BACKUP_SUFFIX)


class CatalogStore:
    """Loads and saves catalog files.

    The document is read once and written once per run. When backups are
    enabled the previous file is moved to `<file>.original` before the new
    document is written, replacing any older backup.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load(self, path: Union[str, Path]) -> Catalog:
        """Load and validate a catalog file.

        Args:
            path: Path of the `.xcstrings` file.

        Returns:
            Parsed Catalog.

        Raises:
            FileNotFoundError: If the file does not exist.
            MalformedDocument: If the file is not valid text, not valid JSON
                or not a catalog.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding=self.encoding))
        except UnicodeDecodeError as e:
            logger.error("catalog_invalid_encoding", path=str(path), error=str(e))
            raise MalformedDocument(f"{path} is not valid {self.encoding}: {e}") from e
        except json.JSONDecodeError as e:
            logger.error("catalog_invalid_json", path=str(path), error=str(e))
            raise MalformedDocument(f"{path} is not valid JSON: {e}") from e

        catalog = Catalog.from_document(data)
        logger.info(
            "catalog_loaded",
            path=str(path),
            source_language=catalog.source_language,
            key_count=len(catalog.strings),
        )
        return catalog

    def save(
        self, catalog: Catalog, path: Union[str, Path], backup: bool = True
    ) -> Path:
        """Write a catalog file.

        Args:
            catalog: Catalog to write.
            path: Destination path.
            backup: Move an existing file to `<path>.original` first.

        Returns:
            The path written.
        """
        path = Path(path)
        content = dumps_catalog(catalog)

        if backup and path.exists():
            target = backup_path_for(path)
            if target.exists():
                target.unlink()
            os.replace(path, target)
            logger.info("catalog_backup_created", path=str(target))

        path.write_text(content, encoding=self.encoding)
        logger.info("catalog_saved", path=str(path), key_count=len(catalog.strings))
        return path
