"""
Point d'entrée data avec imports retardés pour éviter les boucles.
Expose des getters plutôt que des objets globaux calculés au chargement.
"""


def get_CONSTANTS():
    from .params import CONSTANTS

    return CONSTANTS


def get_MARKET_EVENTS():
    from CEOSim_V1.domain.market import MARKET_EVENTS

    return MARKET_EVENTS


def get_SCENARIO_TEMPLATES():
    from .scenario_templates import SCENARIO_TEMPLATES

    return SCENARIO_TEMPLATES
