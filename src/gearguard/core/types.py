"""Core types and enums."""

from enum import Enum


class SignalType(str, Enum):
    """Category of a detected risk indicator."""
    USER_BEHAVIOR = "user_behavior"
    LISTING_QUALITY = "listing_quality"
    PAYMENT = "payment"
    COMMUNICATION = "communication"
    DEVICE_FINGERPRINT = "device_fingerprint"


class Severity(str, Enum):
    """Signal severity, ordered low to critical."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskLevel(str, Enum):
    """Risk levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ActionType(str, Enum):
    """User actions gated by a fraud assessment."""
    CREATE_LISTING = "create_listing"
    CREATE_BOOKING = "create_booking"
    PROCESS_PAYMENT = "process_payment"
    SEND_MESSAGE = "send_message"


class TrustLevel(str, Enum):
    """Device/IP trust classification."""
    TRUSTED = "trusted"
    NEUTRAL = "neutral"
    SUSPICIOUS = "suspicious"
    BLOCKED = "blocked"


class TransactionStatus(str, Enum):
    """Rental lifecycle states."""
    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"


class LocationSource(str, Enum):
    """Where a location observation came from."""
    IP = "ip"
    GEAR_LOCATION = "gear_location"
    USER_PROFILE = "user_profile"


class ActivityType(str, Enum):
    """Activity bucket for time patterns."""
    LISTING = "listing"
    BOOKING = "booking"
    MESSAGING = "messaging"
    PAYMENT = "payment"
