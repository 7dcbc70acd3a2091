from .company import Company, Stakeholder

__all__ = ["Company", "Stakeholder"]
