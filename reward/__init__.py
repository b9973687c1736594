"""
Service Reward: calcul des montants et des points de fidélité d'une transaction.
"""
from reward.pricing.engine import calculate

__all__ = ["calculate"]
