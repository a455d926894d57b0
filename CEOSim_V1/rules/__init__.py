"""
Règles sans état : score, analyse de performance et succès.

Tout est recalculable à partir de l'entreprise courante et de
l'historique des décisions ; rien n'est mis en cache ici.
"""

__all__ = ["scoring", "achievements"]
