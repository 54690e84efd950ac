"""Governance - audit trail of assessments."""
