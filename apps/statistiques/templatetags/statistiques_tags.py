"""
Template filters for the statistics panels.
"""
from django import template

from apps.statistiques.formatting import format_currency, format_percentage

register = template.Library()


@register.filter(name='pourcentage')
def pourcentage(value):
    """
    Usage: {{ row.pourcentage|pourcentage }}
    Result: 40,0 %
    """
    return format_percentage(value)


@register.filter(name='montant')
def montant(value):
    """
    Usage: {{ row.nombre|montant }}
    Result: 4 000,00 €
    """
    return format_currency(value)
