"""File-backed storage for the observer's two coordinates."""

import json
import logging
import os

from pydantic import ValidationError

from spot_the_plane.exceptions import ObserverStoreError
from spot_the_plane.sighting.schemas import Observer

logger = logging.getLogger(__name__)


class ObserverStore:
    """Persist the observer latitude and longitude as a small JSON document.

    Unset values are stored as null and malformed ones as NaN, so a reload
    gives back exactly what the user left behind.
    """

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        """Location of the JSON file."""
        return self._path

    def load(self) -> Observer:
        """Read the stored observer.

        Returns:
            The stored Observer, or an Observer with both values unset when
            nothing has been saved yet.

        Raises:
            ObserverStoreError: If the file cannot be read or is not valid.
        """
        if not os.path.exists(self._path):
            logger.info("No stored observer", extra={"observer_file": self._path})
            return Observer()

        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise ObserverStoreError(f"Cannot read observer file {self._path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ObserverStoreError(f"Observer file {self._path} does not hold an object")

        try:
            return Observer.model_validate(
                {"latitude": data.get("latitude"), "longitude": data.get("longitude")},
                strict=True,
            )
        except ValidationError as exc:
            raise ObserverStoreError(f"Observer file {self._path} is malformed: {exc}") from exc

    def save(self, observer: Observer) -> None:
        """Write the observer coordinates, creating parent directories as needed.

        Raises:
            ObserverStoreError: If the file cannot be written.
        """
        directory = os.path.dirname(self._path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as fh:
                json.dump(observer.model_dump(), fh)
        except OSError as exc:
            raise ObserverStoreError(f"Cannot write observer file {self._path}: {exc}") from exc

        logger.info(
            "Stored observer",
            extra={"observer_file": self._path, "latitude": observer.latitude},
        )
