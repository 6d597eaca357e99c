from hrm_identity.domain.company.aggregates.company import Company

__all__ = ["Company"]
