"""Detection rules - keyword lists, price table and message patterns.

Defaults mirror the rules shipped in config/detection_rules.yaml. A rules
file may override any section; omitted keys keep their defaults.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Pattern

import yaml
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from gearguard.common.exceptions import ConfigurationError


DEFAULT_CATEGORY = "other"


class ListingRules(BaseModel):
    """Thresholds and tables for listing quality checks."""
    
    min_description_length: int = Field(default=50, ge=0)
    suspicious_keywords: List[str] = Field(
        default_factory=lambda: [
            "urgent",
            "must sell",
            "no questions",
            "cash only",
            "final sale",
        ]
    )
    category_expected_daily_rates: Dict[str, float] = Field(
        default_factory=lambda: {
            "cameras": 120,
            "lenses": 80,
            "lighting": 60,
            "audio": 45,
            "drones": 180,
            "tripods": 25,
            "monitors": 70,
            "accessories": 20,
            "other": 50,
        }
    )
    max_price_ratio: float = Field(default=3.0, gt=0)
    min_price_ratio: float = Field(default=0.2, ge=0)
    
    @field_validator("category_expected_daily_rates")
    @classmethod
    def _require_default_category(cls, value: Dict[str, float]) -> Dict[str, float]:
        normalized = {k.lower(): v for k, v in value.items()}
        if DEFAULT_CATEGORY not in normalized:
            raise ValueError(f"price table must include '{DEFAULT_CATEGORY}'")
        if any(rate <= 0 for rate in normalized.values()):
            raise ValueError("expected daily rates must be positive")
        return normalized
    
    def expected_daily_rate(self, category: Optional[str]) -> float:
        """Expected daily rate for a category, falling back to 'other'."""
        key = (category or DEFAULT_CATEGORY).lower()
        table = self.category_expected_daily_rates
        return table.get(key, table[DEFAULT_CATEGORY])


class CommunicationRules(BaseModel):
    """Regex patterns for message content checks (case-insensitive unless noted)."""
    
    min_message_length: int = Field(default=20, ge=0)
    max_uppercase_ratio: float = Field(default=0.3, ge=0, le=1)
    spam_patterns: List[str] = Field(
        default_factory=lambda: [
            r"click here",
            r"call now",
            r"limited time",
            r"act fast",
            r"guaranteed",
            r"\$\$\$",
            r"urgent",
        ]
    )
    contact_patterns: List[str] = Field(
        default_factory=lambda: [
            r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b",
            r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
            r"whatsapp",
            r"telegram",
            r"text me",
            r"call me",
        ]
    )
    
    @field_validator("spam_patterns", "contact_patterns")
    @classmethod
    def _patterns_compile(cls, value: List[str]) -> List[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid pattern {pattern!r}: {e}")
        return value
    
    def compiled_spam_patterns(self) -> List[Pattern[str]]:
        return [re.compile(p, re.IGNORECASE) for p in self.spam_patterns]
    
    def compiled_contact_patterns(self) -> List[Pattern[str]]:
        return [re.compile(p, re.IGNORECASE) for p in self.contact_patterns]


class DetectionRules(BaseModel):
    """Complete rule set consumed by the content analyzers."""
    
    version: str = "1.0.0"
    listing: ListingRules = Field(default_factory=ListingRules)
    communication: CommunicationRules = Field(default_factory=CommunicationRules)


def load_detection_rules(rules_file: Optional[Path] = None) -> DetectionRules:
    """Load and validate detection rules from YAML.
    
    Args:
        rules_file: Path to a rules YAML file. Defaults are used when None.
        
    Returns:
        Validated DetectionRules
        
    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    if rules_file is None:
        return DetectionRules()
    
    rules_path = Path(rules_file)
    if not rules_path.exists():
        raise ConfigurationError(
            f"Rules file not found: {rules_path}",
            details={"rules_file": str(rules_path)},
        )
    
    with open(rules_path, "r") as f:
        try:
            raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Rules file is not valid YAML: {rules_path}",
                details={"error": str(e)},
            )
    
    try:
        return DetectionRules.model_validate(raw_config)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Rules file failed validation: {rules_path}",
            details={"errors": e.errors(include_url=False)},
        )
