"""Listing Quality Analyzer - description, keywords, pricing and photos."""

from typing import List, Optional

from gearguard.common.config.rules import ListingRules
from gearguard.common.exceptions import NotFoundError
from gearguard.core.types import Severity, SignalType
from gearguard.data.repository import AccountRepository
from gearguard.data.schemas.records import Listing
from gearguard.data.schemas.signal import FraudSignal


class ListingQualityAnalyzer:
    """Flags listings that look like scams or low-effort bait.
    
    Pricing is compared against a per-category expected daily rate;
    unknown categories use the 'other' rate.
    """
    
    def __init__(self, repository: AccountRepository, rules: Optional[ListingRules] = None):
        self._repository = repository
        self._rules = rules or ListingRules()
    
    async def analyze(self, listing_id: str) -> List[FraudSignal]:
        """Fetch the listing and evaluate it.
        
        Raises:
            NotFoundError: If the listing does not exist
        """
        listing = await self._repository.find_listing_by_id(listing_id)
        if listing is None:
            raise NotFoundError(
                f"Listing not found: {listing_id}",
                resource="listing",
                resource_id=listing_id,
            )
        return self.evaluate(listing)
    
    def evaluate(self, listing: Listing) -> List[FraudSignal]:
        rules = self._rules
        signals: List[FraudSignal] = []
        
        description_length = len(listing.description)
        if description_length < rules.min_description_length:
            signals.append(FraudSignal(
                type=SignalType.LISTING_QUALITY,
                severity=Severity.MEDIUM,
                confidence=0.6,
                description="Very short item description",
                metadata={"description_length": description_length},
            ))
        
        title = listing.title.lower()
        body = listing.description.lower()
        keywords = [k for k in rules.suspicious_keywords if k in body or k in title]
        if keywords:
            signals.append(FraudSignal(
                type=SignalType.LISTING_QUALITY,
                severity=Severity.HIGH,
                confidence=0.8,
                description="Contains suspicious keywords",
                metadata={"keywords": keywords},
            ))
        
        expected_price = rules.expected_daily_rate(listing.category)
        price_ratio = listing.daily_rate / expected_price
        pricing = {
            "daily_rate": listing.daily_rate,
            "expected_price": expected_price,
            "ratio": price_ratio,
        }
        if price_ratio > rules.max_price_ratio:
            signals.append(FraudSignal(
                type=SignalType.LISTING_QUALITY,
                severity=Severity.HIGH,
                confidence=0.7,
                description="Price significantly above market rate",
                metadata=pricing,
            ))
        elif price_ratio < rules.min_price_ratio:
            signals.append(FraudSignal(
                type=SignalType.LISTING_QUALITY,
                severity=Severity.HIGH,
                confidence=0.8,
                description="Price suspiciously low (possible scam)",
                metadata=pricing,
            ))
        
        image_count = len(listing.images)
        if image_count == 0:
            signals.append(FraudSignal(
                type=SignalType.LISTING_QUALITY,
                severity=Severity.HIGH,
                confidence=0.9,
                description="No images provided",
                metadata={"image_count": 0},
            ))
        elif image_count == 1:
            signals.append(FraudSignal(
                type=SignalType.LISTING_QUALITY,
                severity=Severity.MEDIUM,
                confidence=0.6,
                description="Only one image provided",
                metadata={"image_count": 1},
            ))
        
        return signals
