"""
superflow — flow accounting and validation core for continuous token streams.

Contains:
- superflow.core      : domain models, safe math, feed contracts
- superflow.flows     : flow rate resolution, validation, update planning
- superflow.balances  : balance aggregation with reference currency conversion
"""

__version__ = "0.1.0"
