"""Tests for the observer store."""

import json
import math
from pathlib import Path

import pytest

from spot_the_plane.exceptions import ObserverStoreError
from spot_the_plane.observer.store import ObserverStore
from spot_the_plane.sighting.schemas import Observer


@pytest.fixture
def store(tmp_path: Path) -> ObserverStore:
    """Create a store writing into a not yet existing directory."""
    return ObserverStore(str(tmp_path / "state" / "observer.json"))


class TestLoad:
    def test_missing_file_gives_unset_observer(self, store: ObserverStore) -> None:
        assert store.load() == Observer()

    def test_reads_saved_values(self, store: ObserverStore) -> None:
        store.save(Observer(latitude=51.4769, longitude=-0.127))

        observer = store.load()

        assert observer.latitude == 51.4769
        assert observer.longitude == -0.127

    def test_keeps_unset_and_nan(self, store: ObserverStore) -> None:
        store.save(Observer(latitude=math.nan))

        observer = store.load()

        assert observer.latitude is not None
        assert math.isnan(observer.latitude)
        assert observer.longitude is None

    def test_rejects_invalid_json(self, store: ObserverStore) -> None:
        Path(store.path).parent.mkdir(parents=True)
        Path(store.path).write_text("{not json", encoding="utf-8")

        with pytest.raises(ObserverStoreError, match="Cannot read observer file"):
            store.load()

    def test_rejects_non_object(self, store: ObserverStore) -> None:
        Path(store.path).parent.mkdir(parents=True)
        Path(store.path).write_text("[51.4769, 0]", encoding="utf-8")

        with pytest.raises(ObserverStoreError, match="does not hold an object"):
            store.load()

    @pytest.mark.parametrize("value", ["north", "51.4", True, [51.4]])
    def test_rejects_non_numeric_values(self, store: ObserverStore, value: object) -> None:
        Path(store.path).parent.mkdir(parents=True)
        Path(store.path).write_text(json.dumps({"latitude": value}), encoding="utf-8")

        with pytest.raises(ObserverStoreError, match="is malformed") as exc_info:
            store.load()

        assert exc_info.value.code == "OBSERVER_STORE_ERROR"


class TestSave:
    def test_writes_two_scalars(self, store: ObserverStore) -> None:
        store.save(Observer(latitude=51.4769, longitude=0.0))

        data = json.loads(Path(store.path).read_text(encoding="utf-8"))

        assert data == {"latitude": 51.4769, "longitude": 0.0}

    def test_raises_when_directory_cannot_be_created(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ObserverStore(str(blocker / "observer.json"))

        with pytest.raises(ObserverStoreError, match="Cannot write observer file"):
            store.save(Observer(latitude=51.4769, longitude=0.0))
