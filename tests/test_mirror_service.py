"""Unit tests for the local mirror, against an in-memory SQLite database."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from parkzone.database import Base
from parkzone.models.mirror_entry import MirrorEntry
from parkzone.schemas.log_entry import LogEntry, LogType
from parkzone.schemas.zone import Zone
from parkzone.services.mirror_service import LocalMirror, ZONES_KEY, LOG_KEY


@pytest.fixture
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False},
                           poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


def make_state():
    zones = [Zone(id="Red", name="Red", capacity=100, cars_in=3, cars_out=1, available_space=98)]
    entries = [LogEntry(id="Red", zone_id="Red", type=LogType.IN, car_count=3,
                        date_time=datetime(2026, 3, 1, 8, 30))]
    return zones, entries


class TestLocalMirror:
    def test_save_writes_two_keys(self, session_factory):
        mirror = LocalMirror(session_factory, enabled=True)
        assert mirror.save(*make_state()) is True

        db = session_factory()
        keys = sorted(r.key for r in db.query(MirrorEntry).all())
        db.close()
        assert keys == sorted([ZONES_KEY, LOG_KEY])

    def test_save_overwrites(self, session_factory):
        mirror = LocalMirror(session_factory, enabled=True)
        zones, entries = make_state()
        mirror.save(zones, entries)
        mirror.save([], [])

        db = session_factory()
        rows = db.query(MirrorEntry).all()
        db.close()
        assert len(rows) == 2
        assert all(r.value == "[]" for r in rows)

    def test_restore_roundtrip(self, session_factory):
        mirror = LocalMirror(session_factory, enabled=True)
        zones, entries = make_state()
        mirror.save(zones, entries)

        restored_zones, restored_entries = mirror.restore()
        assert restored_zones == zones
        assert restored_entries[0].type == LogType.IN
        assert restored_entries[0].date_time == datetime(2026, 3, 1, 8, 30)

    def test_restore_empty(self, session_factory):
        assert LocalMirror(session_factory, enabled=True).restore() is None

    def test_restore_corrupt(self, session_factory):
        db = session_factory()
        db.add(MirrorEntry(key=ZONES_KEY, value="{not json"))
        db.commit()
        db.close()
        assert LocalMirror(session_factory, enabled=True).restore() is None

    @pytest.mark.parametrize("zones_json,log_json", [
        ("5", "[]"),
        ('{"name": "Red"}', "[]"),
        ("[]", "null"),
    ])
    def test_restore_non_list_json(self, session_factory, zones_json, log_json):
        db = session_factory()
        db.add(MirrorEntry(key=ZONES_KEY, value=zones_json))
        db.add(MirrorEntry(key=LOG_KEY, value=log_json))
        db.commit()
        db.close()
        assert LocalMirror(session_factory, enabled=True).restore() is None

    def test_restore_rejects_negative_counters(self, session_factory):
        db = session_factory()
        db.add(MirrorEntry(key=ZONES_KEY,
                           value='[{"id": "Red", "name": "Red", "capacity": 10, "cars_in": -1}]'))
        db.commit()
        db.close()
        assert LocalMirror(session_factory, enabled=True).restore() is None

    def test_disabled_is_noop(self):
        factory = MagicMock()
        mirror = LocalMirror(factory, enabled=False)
        assert mirror.save(*make_state()) is False
        assert mirror.restore() is None
        factory.assert_not_called()

    def test_db_error_is_swallowed_and_logged(self):
        db = MagicMock()
        db.query.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))
        mirror = LocalMirror(lambda: db, enabled=True)

        assert mirror.save(*make_state()) is False
        db.rollback.assert_called_once()
        db.close.assert_called_once()
