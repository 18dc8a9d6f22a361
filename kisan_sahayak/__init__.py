"""
KisanSahayak Offline Scheme Engine

Rule-based discovery of government subsidy schemes for farmers. Generates a
regional scheme catalog, filters and ranks it against a farmer profile and
checks document readiness, all without calling an AI service.
"""

__version__ = "1.0.0"
__author__ = "KisanSahayak Team"
__description__ = "Offline government scheme eligibility engine for farmers"
