"""Local public asset storage."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class PublicStorage:
    """Directory tree holding uploaded and generated demo assets."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def path(self, name: str) -> Path:
        """Return the absolute path of *name* under the storage root.

        Raises :exc:`ValueError` if *name* resolves outside the root.
        """
        root = self.root.resolve()
        target = (root / name).resolve()
        if target == root or root not in target.parents:
            raise ValueError(f"{name!r} is not a directory inside {root}")
        return target

    def delete_directory(self, name: str) -> bool:
        """Remove directory *name* and everything below it.

        Returns False when the directory did not exist.
        """
        target = self.path(name)
        if not target.exists():
            logger.debug("Storage directory %s does not exist, nothing to delete", target)
            return False
        shutil.rmtree(target)
        logger.info("Deleted storage directory %s", target)
        return True
