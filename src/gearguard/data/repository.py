"""Account/Transaction Repository - read-only access to marketplace history.

The marketplace owns persistence. GearGuard only reads through this
interface; implementations translate their own store failures into
TransientError.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from gearguard.data.schemas.records import Listing, Transaction, User


class AccountRepository(ABC):
    """Abstract base class for marketplace history lookups."""
    
    @abstractmethod
    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        """Return the user, or None if the account does not exist."""
    
    @abstractmethod
    async def find_transactions_for_user(self, user_id: str) -> List[Transaction]:
        """Return rentals where the user is renter or owner."""
    
    @abstractmethod
    async def find_listing_by_id(self, listing_id: str) -> Optional[Listing]:
        """Return the listing, or None if it does not exist."""
    
    @abstractmethod
    async def find_listings_for_user(self, user_id: str) -> List[Listing]:
        """Return listings owned by the user."""


class InMemoryAccountRepository(AccountRepository):
    """Dictionary-backed repository for tests and local runs."""
    
    def __init__(
        self,
        users: Optional[Iterable[User]] = None,
        transactions: Optional[Iterable[Transaction]] = None,
        listings: Optional[Iterable[Listing]] = None,
    ):
        self._users: Dict[str, User] = {u.id: u for u in users or []}
        self._transactions: List[Transaction] = list(transactions or [])
        self._listings: Dict[str, Listing] = {l.id: l for l in listings or []}
    
    def add_user(self, user: User) -> None:
        self._users[user.id] = user
    
    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
    
    def add_listing(self, listing: Listing) -> None:
        self._listings[listing.id] = listing
    
    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)
    
    async def find_transactions_for_user(self, user_id: str) -> List[Transaction]:
        return [t for t in self._transactions if t.involves(user_id)]
    
    async def find_listing_by_id(self, listing_id: str) -> Optional[Listing]:
        return self._listings.get(listing_id)
    
    async def find_listings_for_user(self, user_id: str) -> List[Listing]:
        return [l for l in self._listings.values() if l.owner_id == user_id]
