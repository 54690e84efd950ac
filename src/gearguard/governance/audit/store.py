"""Audit Sink - append-only persistence of completed assessments.

Design principles:
- Append-only; assessments are never updated after creation
- Optional sha256 hash chain for tamper detection
- Write failures surface as TransientError
"""

import asyncio
import hashlib
import json
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator, List, Optional

from gearguard.common.exceptions import TransientError
from gearguard.common.logging import get_logger
from gearguard.core.types import RiskLevel
from gearguard.data.schemas.assessment import FraudAssessment
from gearguard.governance.schemas import AuditEntry, AuditEventType


logger = get_logger(__name__)


class AuditLogIntegrityError(Exception):
    """Raised when audit log integrity check fails."""
    pass


def build_entry(assessment: FraudAssessment) -> AuditEntry:
    """Summarize an assessment into an audit entry."""
    event_type = (
        AuditEventType.ASSESSMENT
        if assessment.allow_transaction
        else AuditEventType.TRANSACTION_BLOCKED
    )
    return AuditEntry(
        event_type=event_type,
        assessment_id=assessment.assessment_id,
        user_id=assessment.user_id,
        action_type=assessment.action_type,
        risk_score=assessment.risk_score,
        risk_level=assessment.risk_level,
        signals_count=len(assessment.signals),
        allow_transaction=assessment.allow_transaction,
        action_required=assessment.action_required,
        assessment=assessment.model_dump(mode="json"),
    )


class AuditSink(ABC):
    """Abstract base class for assessment audit backends."""
    
    @abstractmethod
    async def record_assessment(self, assessment: FraudAssessment) -> AuditEntry:
        """Append an assessment to the trail.
        
        Raises:
            TransientError: If the write fails
        """


class InMemoryAuditSink(AuditSink):
    """List-backed sink for tests and local runs."""
    
    def __init__(self):
        self._entries: List[AuditEntry] = []
    
    async def record_assessment(self, assessment: FraudAssessment) -> AuditEntry:
        entry = build_entry(assessment)
        self._entries.append(entry)
        return entry
    
    @property
    def entries(self) -> List[AuditEntry]:
        return list(self._entries)


class FileAuditSink(AuditSink):
    """File-based audit sink with JSONL format and hash chain integrity.
    
    Features:
    - Append-only JSONL files with daily rotation
    - Hash chain for tamper detection
    - Writes run in a worker thread, serialized by a lock
    """
    
    def __init__(
        self,
        log_dir: str | Path,
        log_filename_pattern: str = "gearguard_audit_{date}.jsonl",
        enable_hash_chain: bool = True,
        hash_algorithm: str = "sha256",
    ):
        """Initialize file audit sink.
        
        Args:
            log_dir: Directory for audit logs.
            log_filename_pattern: Pattern for log filename. {date} is replaced.
            enable_hash_chain: Whether to enable hash chain integrity.
            hash_algorithm: Hash algorithm for integrity checks.
        """
        self.log_dir = Path(log_dir)
        self.log_filename_pattern = log_filename_pattern
        self.enable_hash_chain = enable_hash_chain
        self.hash_algorithm = hash_algorithm
        
        # Thread safety
        self._lock = threading.Lock()
        
        # Ensure log directory exists
        self.log_dir.mkdir(parents=True, exist_ok=True)
        
        # Cache last hash for chain continuity
        self._last_hash: Optional[str] = None
        self._last_hash_path: Optional[Path] = None
    
    def _log_path_for(self, date: str) -> Path:
        return self.log_dir / self.log_filename_pattern.replace("{date}", date)
    
    def _get_current_log_path(self) -> Path:
        """Get path to current day's log file."""
        today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        return self._log_path_for(today)
    
    def _scan_log_for_last_hash(self, log_path: Path) -> Optional[str]:
        """Read the last hash from a log file."""
        if not log_path.exists():
            return None
        
        last_hash = None
        with open(log_path, "r") as f:
            for line in f:
                line = line.strip()
                if line:
                    last_hash = json.loads(line).get("entry_hash")
        return last_hash
    
    def _compute_hash(self, content: str) -> str:
        """Compute hash of content."""
        hasher = hashlib.new(self.hash_algorithm)
        hasher.update(content.encode("utf-8"))
        return hasher.hexdigest()
    
    def _hash_entry_dict(self, entry_dict: dict) -> str:
        content = dict(entry_dict)
        content["entry_hash"] = None
        return self._compute_hash(json.dumps(content, sort_keys=True, default=str))
    
    def _chain(self, entry: AuditEntry, previous_hash: Optional[str]) -> AuditEntry:
        """Add hash chain fields to entry."""
        if not self.enable_hash_chain:
            return entry
        
        entry_dict = entry.model_dump(mode="json")
        entry_dict["previous_hash"] = previous_hash
        entry_dict["entry_hash"] = self._hash_entry_dict(entry_dict)
        return AuditEntry.model_validate(entry_dict)
    
    def _append_entry(self, entry: AuditEntry) -> AuditEntry:
        """Append entry to log file (thread-safe)."""
        with self._lock:
            log_path = self._get_current_log_path()
            
            # New day, new chain
            if self._last_hash_path != log_path:
                self._last_hash = self._scan_log_for_last_hash(log_path) if self.enable_hash_chain else None
                self._last_hash_path = log_path
            
            entry = self._chain(entry, self._last_hash)
            
            # Append to file (never overwrite)
            with open(log_path, "a") as f:
                f.write(entry.to_jsonl() + "\n")
            
            if self.enable_hash_chain:
                self._last_hash = entry.entry_hash
            
            return entry
    
    async def record_assessment(self, assessment: FraudAssessment) -> AuditEntry:
        entry = build_entry(assessment)
        try:
            return await asyncio.to_thread(self._append_entry, entry)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(
                f"Audit write failed: {e}",
                extra={"assessment_id": assessment.assessment_id},
            )
            raise TransientError(
                "Failed to persist fraud assessment",
                details={"assessment_id": assessment.assessment_id, "error": str(e)},
            )
    
    def get_entries(
        self,
        date: Optional[str] = None,
        user_id: Optional[str] = None,
        risk_level: Optional[RiskLevel] = None,
        blocked_only: bool = False,
    ) -> Generator[AuditEntry, None, None]:
        """Retrieve audit entries with optional filtering."""
        if date is None:
            date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        
        log_path = self._log_path_for(date)
        if not log_path.exists():
            return
        
        with open(log_path, "r") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                
                try:
                    entry = AuditEntry.from_jsonl(line)
                except ValueError:
                    # Skip malformed entries
                    continue
                
                if user_id and entry.user_id != user_id:
                    continue
                if risk_level and entry.risk_level != risk_level:
                    continue
                if blocked_only and entry.allow_transaction:
                    continue
                
                yield entry
    
    def verify_integrity(self, date: Optional[str] = None) -> bool:
        """Verify hash chain integrity of log file."""
        if not self.enable_hash_chain:
            return True
        
        if date is None:
            date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        
        log_path = self._log_path_for(date)
        if not log_path.exists():
            return True  # Empty log is valid
        
        previous_hash = None
        line_number = 0
        
        with open(log_path, "r") as f:
            for line in f:
                line_number += 1
                line = line.strip()
                if not line:
                    continue
                
                try:
                    entry_dict = json.loads(line)
                except json.JSONDecodeError as e:
                    raise AuditLogIntegrityError(
                        f"Malformed JSON at line {line_number}: {e}"
                    )
                
                if entry_dict.get("previous_hash") != previous_hash:
                    raise AuditLogIntegrityError(
                        f"Hash chain broken at line {line_number}. "
                        f"Expected previous_hash={previous_hash}, "
                        f"got {entry_dict.get('previous_hash')}"
                    )
                
                stored_hash = entry_dict.get("entry_hash")
                if self._hash_entry_dict(entry_dict) != stored_hash:
                    raise AuditLogIntegrityError(
                        f"Entry hash mismatch at line {line_number}. "
                        f"Entry may have been tampered with."
                    )
                
                previous_hash = stored_hash
        
        return True
