"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the Honey ledger and treasury.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. conservation.py - Total supply equals the sum of balances, always
2. atomicity.py - Rejected calls leave no trace
3. ownership.py - Single-owner exclusivity and renouncement irreversibility

These tests use hypothesis for property-based testing.
"""
