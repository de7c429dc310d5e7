"""
Seed test cases loaded into the library at startup.
"""

from datetime import datetime, timezone
from typing import List

from models.test_case_model import ComplianceStandard, Priority, TestCase, TestStatus, TestStep


def seed_cases() -> List[TestCase]:
    now = datetime.now(timezone.utc)
    return [
        TestCase(
            id="tc-001",
            title="User Login Audit Trail Verification",
            description="Verify that every successful and failed login attempt creates a timestamped audit log entry.",
            preconditions="Database audit service is running.",
            priority=Priority.HIGH,
            compliance_tags=(ComplianceStandard.HIPAA, ComplianceStandard.FDA_21_CFR_11),
            status=TestStatus.APPROVED,
            created_at=now,
            traceability_id="REQ-AUTH-005",
            steps=[
                TestStep(1, "Navigate to login page", "Login form displayed"),
                TestStep(2, "Enter valid credentials", "User logged in"),
                TestStep(3, "Check Audit Log table",
                         'New entry "LOGIN_SUCCESS" present with current timestamp'),
            ],
        ),
        TestCase(
            id="tc-002",
            title="Patient Data Encryption at Rest",
            description="Ensure patient demographic data is encrypted in the database.",
            preconditions="Access to DB direct query.",
            priority=Priority.HIGH,
            compliance_tags=(ComplianceStandard.HIPAA,),
            status=TestStatus.REVIEWED,
            created_at=now,
            traceability_id="REQ-SEC-012",
            steps=[
                TestStep(1, "Create new patient", "Patient saved successfully"),
                TestStep(2, "Query database directly for patient name", "Name field appears as ciphertext"),
            ],
        ),
    ]
