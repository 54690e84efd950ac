"""Centralized constants for GearGuard risk scoring."""


# ===== CACHING =====
class CacheConstants:
    DEFAULT_TTL_SECONDS = 60 * 60  # 1 hour
    PROFILE_KEY_PREFIX = "user_profile"
    MONITOR_KEY_PREFIX = "fraud_monitor"


# ===== RISK SCORING =====
class ScoringConstants:
    MIN_SCORE = 0.0
    MAX_SCORE = 100.0

    SEVERITY_POINTS = {
        "low": 5,
        "medium": 15,
        "high": 30,
        "critical": 50,
    }

    # Base adjustments from the profile alone
    AGE_UNDER_1_DAY_POINTS = 20
    AGE_UNDER_7_DAYS_POINTS = 10
    AGE_UNDER_30_DAYS_POINTS = 5
    NO_TRANSACTIONS_POINTS = 15
    FEW_TRANSACTIONS_POINTS = 10
    FEW_TRANSACTIONS_LIMIT = 3

    # Positive-factor discounts
    ESTABLISHED_ACCOUNT_DAYS = 365
    ESTABLISHED_ACCOUNT_DISCOUNT = 10
    SUCCESSFUL_TRANSACTIONS_LIMIT = 10
    SUCCESSFUL_TRANSACTIONS_DISCOUNT = 10
    POLITENESS_THRESHOLD = 0.8
    POLITENESS_DISCOUNT = 5


# ===== RISK TIERS =====
class RiskThresholds:
    CRITICAL = 80
    HIGH = 70  # at or above: transaction blocked
    MEDIUM = 40  # at or above: action required


# ===== USER RISK PROFILE =====
class ProfileRiskThresholds:
    HIGH = 70
    MEDIUM = 40
    MAX_TRUST_SCORE = 100


# ===== BEHAVIOR ANALYSIS =====
class BehaviorConstants:
    NEW_ACCOUNT_DAYS = 1
    YOUNG_ACCOUNT_DAYS = 7
    MIN_SUCCESS_RATE = 0.5
    SLOW_RESPONSE_HOURS = 48
    LOW_POLITENESS = 0.3


# ===== PAYMENT ANALYSIS =====
class PaymentConstants:
    AVERAGE_MULTIPLIER = 5
    HIGH_VALUE_AMOUNT = 500
    YOUNG_ACCOUNT_DAYS = 7


# ===== VELOCITY & PATTERNS =====
class VelocityConstants:
    WINDOW_HOURS = 24
    MAX_TRANSACTIONS_IN_WINDOW = 10
    NIGHT_START_HOUR = 2
    NIGHT_END_HOUR = 5
    MAX_NIGHT_TRANSACTIONS = 5
    MAX_DISTINCT_LOCATIONS = 5
    LOCATION_CHECK_ACCOUNT_DAYS = 30


# ===== DEVICE TRUST =====
class DeviceTrustConstants:
    MAX_HIGH_SIGNALS = 2
    MAX_TOTAL_SIGNALS = 3
    USER_AGENT_METADATA_LENGTH = 100


# ===== COMMUNICATION PATTERN DEFAULTS =====
class CommunicationDefaults:
    RESPONSE_TIME_HOURS = 12.0
    MESSAGE_LENGTH = 85.0
    POLITENESS_SCORE = 0.7
