"""
Moteur de simulation CEOSim.

- `scenario_generator` : pondération des catégories, tirage de template,
  mise à l'échelle selon le palier de difficulté ;
- `decision` : application d'une décision (avec variance) ;
- `market` : cycle de vie des événements de marché et négligence ;
- `game` : machine à états exposée aux collaborateurs (UI, plateforme).
"""

__all__ = ["scenario_generator", "decision", "market", "game"]
