"""
Storage Interface - Abstract base class for blob storage backends.
The local conversation store writes its JSON documents through this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional, List


class StorageInterface(ABC):
    """
    Abstract storage interface keyed by relative paths.
    Write operations report success as a bool instead of raising.
    """

    @abstractmethod
    async def save(self, path: str, content: bytes | str) -> bool:
        """
        Save content to the specified path, replacing any existing content.

        Args:
            path: Relative path (e.g., "sessions/<id>.json")
            content: Content to save

        Returns:
            bool: True if save was successful, False otherwise
        """
        pass

    @abstractmethod
    async def load(self, path: str) -> Optional[bytes]:
        """
        Load content from the specified path.

        Returns:
            Optional[bytes]: File content, or None if the file doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """
        Delete file at the specified path.

        Returns:
            bool: True if a file was deleted
        """
        pass

    @abstractmethod
    async def list(self, path: str, pattern: Optional[str] = None) -> List[str]:
        """
        List files directly inside a directory.

        Args:
            path: Directory path to list
            pattern: Optional glob pattern to filter files (e.g., "*.json")

        Returns:
            List[str]: Sorted relative file paths
        """
        pass

    @abstractmethod
    async def append(self, path: str, content: str) -> bool:
        """
        Append content to a file, creating it if needed.

        Returns:
            bool: True if append was successful
        """
        pass
