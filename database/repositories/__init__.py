from .settlement_repo import SettlementRepositoryDB

__all__ = ["SettlementRepositoryDB"]
