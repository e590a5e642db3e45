from sqlalchemy import JSON, BigInteger, Column, String, Text
from sqlalchemy.orm import declarative_base
import uuid

Base = declarative_base()


class OperatingState:
    """Operating state values a device service may report"""

    ENABLED = "ENABLED"
    DISABLED = "DISABLED"

    values = frozenset({ENABLED, DISABLED})


class AdminState:
    """Administrative state values a device service may be put in"""

    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"

    values = frozenset({LOCKED, UNLOCKED})


class DeviceService(Base):
    """Device service model"""

    __tablename__ = "device_services"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text)
    base_address = Column(String(255), nullable=False)
    operating_state = Column(String(20), nullable=False)
    admin_state = Column(String(20), nullable=False)
    labels = Column(JSON, default=list)
    # Timestamps are epoch milliseconds, as carried on the wire
    created = Column(BigInteger)
    modified = Column(BigInteger)
    last_connected = Column(BigInteger)
    last_reported = Column(BigInteger)

    def __repr__(self) -> str:
        return f"<DeviceService id={self.id!r} name={self.name!r}>"
