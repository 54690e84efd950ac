"""Unit tests for the Listing Quality Analyzer."""

import asyncio

import pytest

from gearguard.analyzers.listing import ListingQualityAnalyzer
from gearguard.common.config.rules import ListingRules
from gearguard.common.exceptions import NotFoundError
from gearguard.core.types import Severity, SignalType

from tests.fixtures.marketplace import make_listing, make_repository


@pytest.fixture
def analyzer():
    """Create a ListingQualityAnalyzer over an empty repository."""
    return ListingQualityAnalyzer(make_repository())


def _descriptions(signals):
    return [s.description for s in signals]


class TestListingLookup:
    """Tests for listing resolution."""
    
    def test_missing_listing_raises(self, analyzer):
        with pytest.raises(NotFoundError) as exc_info:
            asyncio.run(analyzer.analyze("gear_missing"))
        
        assert exc_info.value.details["resource"] == "listing"
        assert exc_info.value.details["resource_id"] == "gear_missing"
    
    def test_clean_listing(self):
        listing = make_listing()
        analyzer = ListingQualityAnalyzer(make_repository(listings=[listing]))
        
        assert asyncio.run(analyzer.analyze(listing.id)) == []


class TestListingContent:
    """Tests for description and keyword checks."""
    
    def test_short_description(self, analyzer):
        signals = analyzer.evaluate(make_listing(description="Camera for rent"))
        
        assert _descriptions(signals) == ["Very short item description"]
        assert signals[0].severity == Severity.MEDIUM
        assert signals[0].metadata["description_length"] == 15
    
    def test_keyword_in_title(self, analyzer):
        signals = analyzer.evaluate(make_listing(title="URGENT - drone for rent"))
        
        assert _descriptions(signals) == ["Contains suspicious keywords"]
        assert signals[0].severity == Severity.HIGH
        assert signals[0].confidence == 0.8
        assert signals[0].metadata["keywords"] == ["urgent"]
    
    def test_multiple_keywords_in_description(self, analyzer):
        listing = make_listing(
            description="Cash only, no questions asked. Pro camera kit with batteries and bag included."
        )
        
        signals = analyzer.evaluate(listing)
        
        assert signals[0].metadata["keywords"] == ["no questions", "cash only"]


class TestListingPricing:
    """Tests for price ratio checks."""
    
    def test_price_far_above_market(self, analyzer):
        signals = analyzer.evaluate(make_listing(category="tripods", daily_rate=100))
        
        assert _descriptions(signals) == ["Price significantly above market rate"]
        assert signals[0].confidence == 0.7
        assert signals[0].metadata["ratio"] == pytest.approx(4.0)
    
    def test_price_suspiciously_low(self, analyzer):
        signals = analyzer.evaluate(make_listing(category="drones", daily_rate=20))
        
        assert _descriptions(signals) == ["Price suspiciously low (possible scam)"]
        assert signals[0].confidence == 0.8
    
    def test_unknown_category_uses_default_rate(self, analyzer):
        signals = analyzer.evaluate(make_listing(category="synthesizers", daily_rate=200))
        
        assert _descriptions(signals) == ["Price significantly above market rate"]
        assert signals[0].metadata["expected_price"] == 50
    
    def test_missing_category_uses_default_rate(self, analyzer):
        assert analyzer.evaluate(make_listing(category=None, daily_rate=60)) == []
    
    def test_category_lookup_is_case_insensitive(self, analyzer):
        assert analyzer.evaluate(make_listing(category="Cameras", daily_rate=120)) == []
    
    def test_custom_rules(self):
        rules = ListingRules(max_price_ratio=1.5)
        analyzer = ListingQualityAnalyzer(make_repository(), rules)
        
        signals = analyzer.evaluate(make_listing(category="cameras", daily_rate=200))
        
        assert _descriptions(signals) == ["Price significantly above market rate"]


class TestListingImages:
    """Tests for photo count checks."""
    
    def test_no_images(self, analyzer):
        signals = analyzer.evaluate(make_listing(images=[]))
        
        assert _descriptions(signals) == ["No images provided"]
        assert signals[0].severity == Severity.HIGH
        assert signals[0].confidence == 0.9
        assert signals[0].type == SignalType.LISTING_QUALITY
    
    def test_single_image(self, analyzer):
        signals = analyzer.evaluate(make_listing(images=["front.jpg"]))
        
        assert _descriptions(signals) == ["Only one image provided"]
        assert signals[0].severity == Severity.MEDIUM
