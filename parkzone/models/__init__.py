# ParkZone: Database Models
# Import all models here for SQLAlchemy discovery

from parkzone.models.mirror_entry import MirrorEntry   # noqa
